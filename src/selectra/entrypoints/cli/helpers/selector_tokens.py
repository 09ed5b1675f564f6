"""Turn ``selectra selector`` command-line tokens into a selector builder.

Part tokens have the form ``KIND:VALUE`` (``element:div``, ``class:draggable``,
``attr:href$=".png"``). A bare combinator token (``+``, ``~``, ``>`` or
``descendant`` for the whitespace combinator) closes the current compound
selector; compounds are combined left to right.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

import click

from selectra.domain.selectors import SelectorBuilder, css_selector_builder

COMBINATORS = {"+": "+", "~": "~", ">": ">", "descendant": " "}

_APPENDERS: dict[str, Callable[[SelectorBuilder, str], SelectorBuilder]] = {
    "element": SelectorBuilder.element,
    "id": SelectorBuilder.id,
    "class": SelectorBuilder.class_,
    "attr": SelectorBuilder.attr,
    "pseudo-class": SelectorBuilder.pseudo_class,
    "pseudo-element": SelectorBuilder.pseudo_element,
}


def _split_part(token: str) -> tuple[str, str]:
    kind, sep, value = token.partition(":")
    if not sep or kind not in _APPENDERS or not value:
        raise click.BadParameter(
            f"Expected KIND:VALUE with KIND in {', '.join(_APPENDERS)}; got {token!r}",
            param_hint="TOKENS",
        )
    return kind, value


def build_selector(tokens: Sequence[str]) -> SelectorBuilder:
    """Build a selector from CLI tokens.

    Args:
        tokens: Part and combinator tokens in selector order.

    Returns:
        The resulting builder.

    Raises:
        click.BadParameter: On an unknown token kind or a dangling combinator.
        OrderError: If parts of a compound are out of order.
        DuplicateError: If a single-occurrence part repeats within a compound.
    """
    result: SelectorBuilder | None = None
    pending: str | None = None
    current: SelectorBuilder | None = None

    def close_compound() -> SelectorBuilder:
        if current is None:
            raise click.BadParameter(
                "A combinator must sit between two selectors.", param_hint="TOKENS"
            )
        if result is None:
            return current
        return css_selector_builder.combine(result, pending or " ", current)

    for token in tokens:
        if token in COMBINATORS:
            result = close_compound()
            pending, current = COMBINATORS[token], None
            continue
        kind, value = _split_part(token)
        current = _APPENDERS[kind](current or SelectorBuilder(), value)
    return close_compound()
