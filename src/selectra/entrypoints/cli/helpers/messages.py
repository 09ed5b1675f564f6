"""Terminal message helpers for the SELECTRA CLI.

Status lines go to stderr so stdout only carries command results (selectors,
areas, JSON) and stays pipeable.
"""

import click

# kind -> (emoji, ascii fallback, colour)
_STYLES = {
    "warn": ("⚠️", "[!]", "yellow"),
    "error": ("❌", "[X]", "red"),
}


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr."""
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def glyph(kind: str) -> str:
    """Return the emoji marker for ``kind``, or its ASCII fallback.

    Args:
        kind: Either ``"warn"`` or ``"error"``.

    Returns:
        str: e.g. "❌" on a UTF-8 stderr, "[X]" on an ASCII one.
    """
    emoji, fallback, _ = _STYLES[kind]
    return emoji if _supports_character(emoji) else fallback


def _emit(kind: str, msg: str) -> None:
    colour = _STYLES[kind][2]
    click.secho(f"{glyph(kind)}  {msg}", fg=colour, bold=True, err=True)


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to stderr."""
    _emit("warn", msg)


def error(msg: str) -> None:
    """Emit a red, bold error line to stderr.

    Example:
        ``❌  Selector parts should be arranged in the following order: ...``
    """
    _emit("error", msg)


class ReportedError(click.ClickException):
    """`ClickException` rendered through `error` (exit code 1)."""

    def show(self, file=None) -> None:  # pylint: disable=unused-argument
        error(self.format_message())
