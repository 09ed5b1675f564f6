"""Logging helpers used by the SELECTRA CLI.

This module provides utilities for configuring console logging with Rich
and an in-memory "flight recorder" that buffers log records and writes them
to disk on flush, discarding unflushed records at exit unless asked to keep
them. It also provides a filter that annotates third-party
log records with a short prefix used by console formatting.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from importlib.metadata import version
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

from selectra.config import InvalidSettingError, load_json_settings
from selectra.domain.selectors import SelectorPart

if TYPE_CHECKING:
    from logging import Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "selectra"


class ThirdPartyPrefixFilter(logging.Filter):
    """Annotate third-party log records with a short prefix.

    Records from loggers outside the project get `record.prefix` set to a
    bracketed token like "[click_extra]"; project records get an empty prefix.
    The filter never drops a record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not record.name.startswith(PROJECT_PREFIX):
            # e.g. "click_extra.colorize" -> "[click_extra]"
            record.prefix = f"[{record.name.split('.')[0]}]"
        else:
            record.prefix = ""
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Configure and return a RichHandler for console output.

    The handler writes to stderr. In debug mode it is set to DEBUG and shows
    source file/line information; otherwise the third-party prefix filter is
    attached.

    Args:
        level: Minimum level for console output (overridden to DEBUG in debug_mode).
        debug_mode: When True, enable debug formatting (show_path, timestamps).
        color: Enable color output when True.

    Returns:
        RichHandler: Configured handler suitable to attach to the root logger.
    """

    # Keep in step with click-extra's --color / --no-color option
    ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]
    color_system: ColorSystem | None = "auto" if color else None
    console = Console(color_system=color_system, stderr=True)

    if debug_mode:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )

    fmt = (
        "%(prefix)s %(message)s"
        if not debug_mode
        else "%(asctime)s %(name)s: %(message)s"
    )
    handler.setFormatter(logging.Formatter(fmt=fmt))

    if not debug_mode:
        handler.addFilter(ThirdPartyPrefixFilter())

    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Configure and return an in-memory flight recorder backed by a file.

    Up to `capacity` records are buffered and written to `path` when a record
    at `flush_level` or higher arrives (or on close if `flush_on_close`).

    Args:
        path: Destination file path for flushed records.
        capacity: Number of records to buffer in memory.
        flush_level: Level at or above which the buffer will be flushed.
        flush_on_close: If True, flush the buffer when the handler is closed.

    Returns:
        MemoryHandler: A memory-backed handler with a FileHandler target.
    """
    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(process)d] %(levelname)s %(name)s:%(lineno)d: %(message)s"
        )
    )

    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=file_handler,
        flushOnClose=flush_on_close,
    )


_DEPENDENCIES = ("click", "click-extra", "rich")


def _json_settings_summary() -> str:
    try:
        settings = load_json_settings()
    except InvalidSettingError as e:
        # the command that encodes reports it
        return f"<invalid: {e}>"
    return f"indent={settings.indent}, sort_keys={settings.sort_keys}"


def log_startup(  # pylint: disable=too-many-arguments
    logger: Logger,
    *,
    app_version: str,
    level: int,
    handlers: list[logging.Handler],
    log_path: Path | None,
    flight_recorder: bool,
    flight_capacity: int | None,
    force_flush_fr: bool,
    logger_levels: dict[str, int],
) -> None:
    """Log a one-line startup summary at INFO, then DEBUG diagnostics.

    The diagnostics cover the runtime, the selectra dependencies, the JSON
    output settings read from the environment, the selector part order, and
    how logging itself was set up.
    """
    logger.info(
        "SELECTRA %s: console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(level),
        "ON" if flight_recorder else "OFF",
    )

    diagnostics: list[tuple[str, object]] = [
        ("Python", sys.version.split()[0]),
        ("Platform", f"{platform.system()} {platform.release()}"),
        ("PID", os.getpid()),
        ("CWD", Path.cwd()),
        ("Dependencies", ", ".join(f"{d}={version(d)}" for d in _DEPENDENCIES)),
        ("JSON settings", _json_settings_summary()),
        ("Selector order", " > ".join(part.label for part in SelectorPart)),
        ("Handlers", [type(h).__name__ for h in handlers]),
    ]
    if flight_recorder:
        diagnostics.append(
            (
                "Flight recorder",
                f"path={log_path or '<none>'}, capacity={flight_capacity}, "
                f"flush_on_close={force_flush_fr}",
            )
        )
    diagnostics.append(
        (
            "Per-logger overrides",
            {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()}
            or "<none>",
        )
    )
    for label, value in diagnostics:
        logger.debug("%s: %s", label, value)


def discard_flight_recorder(handler: MemoryHandler) -> None:
    """Drop the records a flight recorder still holds in memory.

    `logging.shutdown` flushes every handler before closing it, and before
    Python 3.12 it ignores `flushOnClose`. Emptying the buffer first keeps
    records after the last WARNING out of the log file unless a forced flush
    was requested.
    """
    handler.acquire()
    try:
        handler.buffer.clear()
    finally:
        handler.release()


def shutdown_logging(handlers: list[logging.Handler], *, force_flush: bool) -> None:
    """Flush and close all logging handlers at process exit.

    Args:
        handlers: Handlers installed by the CLI on the root logger.
        force_flush: Keep the flight recorder buffer so it is written out.
    """
    if not force_flush:
        for handler in handlers:
            if isinstance(handler, MemoryHandler):
                discard_flight_recorder(handler)
    logging.shutdown()
