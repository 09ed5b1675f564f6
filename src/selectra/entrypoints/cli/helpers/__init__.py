"""Shared helpers for the SELECTRA CLI."""

from .hyperlinks import hyperlink, supports_osc8
from .log_level_parser import parse_log_level
from .messages import ReportedError, error, warn
from .selector_tokens import build_selector

__all__ = [
    "ReportedError",
    "build_selector",
    "error",
    "hyperlink",
    "parse_log_level",
    "supports_osc8",
    "warn",
]
