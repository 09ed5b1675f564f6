"""Fixtures and test helpers for end-to-end CLI tests.

Provides a test-only `log-demo` command that emits log messages on a project
logger and a third-party logger, plus fixtures to register it, obtain a
CliRunner, and run tests inside an isolated filesystem.
"""

import logging

import click
import pytest
from click.testing import CliRunner

from selectra.entrypoints.cli.main import selectra

# pylint: disable=redefined-outer-name

DEMO_LOGGERS = ("selectra.demo", "some.thirdparty", "selectra")


@click.command()
def log_demo():
    """Emit one message per level on 'selectra.demo' and a third-party logger."""
    logger = logging.getLogger("selectra.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.info("This is an info-level third-party test message.")
    third_party_logger.warning("This is a warning-level third-party test message.")
    logger.debug("This is a final debug-level test message.")


def _remove_command_everywhere(group, name: str) -> None:
    """Remove a command from a Click group and any section registries."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture(autouse=True)
def _reset_logger_levels():
    """Undo -L overrides, which persist on the global logger objects."""
    yield
    for name in DEMO_LOGGERS:
        logging.getLogger(name).setLevel(logging.NOTSET)


@pytest.fixture
def registered_log_demo():
    """Register the 'log-demo' command for the duration of a test."""
    selectra.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(selectra, "log-demo")


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside runner.isolated_filesystem()."""
    with runner.isolated_filesystem():
        yield
