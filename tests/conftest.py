"""Global pytest fixtures for SELECTRA."""

import pytest

SELECTRA_ENV_VARS = (
    "SELECTRA_JSON_INDENT",
    "SELECTRA_JSON_SORT_KEYS",
    "SELECTRA_LOG_PATH",
    "SELECTRA_LOGGER_LEVELS",
    "SELECTRA_FLIGHT_RECORDER",
    "SELECTRA_FLIGHT_RECORDER_CAPACITY",
    "SELECTRA_FORCE_FLUSH_FLIGHT_RECORDER",
)


@pytest.fixture(autouse=True)
def _clean_selectra_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear SELECTRA_* variables so the developer's shell cannot leak into tests."""
    for name in SELECTRA_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
