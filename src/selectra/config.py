"""Configuration utilities for SELECTRA.

This module centralizes the environment-driven settings of the JSON helpers.
"""

import os
from dataclasses import dataclass

JSON_INDENT_ENV = "SELECTRA_JSON_INDENT"  # pragma: no mutate
JSON_SORT_KEYS_ENV = "SELECTRA_JSON_SORT_KEYS"  # pragma: no mutate

_TRUTHY = frozenset({"1", "true", "yes", "on"})


class InvalidSettingError(Exception):
    """Raised when an environment setting holds an unusable value."""

    def __init__(self, name: str, value: str, expected: str) -> None:
        super().__init__(f"{name}={value!r} is invalid; expected {expected}.")
        self.name = name
        self.value = value


@dataclass(frozen=True)
class JsonSettings:
    """Options applied by `selectra.adapters.json_codec.encode`.

    Attributes:
        indent: Indentation width; `None` produces compact single-line output.
        sort_keys: Emit object keys in sorted order instead of insertion order.
    """

    indent: int | None = None
    sort_keys: bool = False


def get_json_indent() -> int | None:
    """Get the JSON indent from the environment.

    Returns:
        The integer value of `SELECTRA_JSON_INDENT`, or `None` when unset or empty.

    Raises:
        InvalidSettingError: If the value is not a non-negative integer.
    """
    if not (raw := os.environ.get(JSON_INDENT_ENV, "").strip()):
        return None
    try:
        indent = int(raw)
    except ValueError as e:
        raise InvalidSettingError(
            JSON_INDENT_ENV, raw, "a non-negative integer"
        ) from e
    if indent < 0:
        raise InvalidSettingError(JSON_INDENT_ENV, raw, "a non-negative integer")
    return indent


def get_json_sort_keys() -> bool:
    """Return True when `SELECTRA_JSON_SORT_KEYS` is set to a truthy value."""
    return os.environ.get(JSON_SORT_KEYS_ENV, "").strip().lower() in _TRUTHY


def load_json_settings() -> JsonSettings:
    """Build `JsonSettings` from the current environment."""
    return JsonSettings(indent=get_json_indent(), sort_keys=get_json_sort_keys())
