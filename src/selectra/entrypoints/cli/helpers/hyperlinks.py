"""OSC-8 hyperlink rendering for the SELECTRA CLI help epilog."""

import os
import sys
from typing import TextIO

_KNOWN_TERMINALS = frozenset(
    {"apple_terminal", "vscode", "iterm.app", "wezterm", "kitty"}
)


def supports_osc8(stream: TextIO | None = None) -> bool:
    """Best-effort guess whether ``stream`` renders OSC-8 hyperlinks.

    Non-TTY streams never do. Otherwise the terminal is identified from
    ``TERM_PROGRAM``, ``WT_SESSION``, ``VTE_VERSION`` or ``TERM``.
    """
    stream = stream or sys.stdout
    if not getattr(stream, "isatty", lambda: False)():
        return False
    return bool(
        (os.getenv("TERM_PROGRAM") or "").lower() in _KNOWN_TERMINALS
        or os.getenv("WT_SESSION")
        or os.getenv("VTE_VERSION")
        or os.getenv("TERM", "").startswith(("alacritty", "konsole"))
    )


def hyperlink(url: str, label: str | None = None) -> str:
    """Wrap ``url`` in OSC-8 escapes, or return it unchanged when unsupported.

    Args:
        url: Target URL.
        label: Visible text; defaults to the URL itself.
    """
    if not supports_osc8():
        return url
    return f"\x1b]8;;{url}\x07{label or url}\x1b]8;;\x07"
