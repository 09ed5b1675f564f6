"""CSS selector builder.

A compound selector is made of parts that must appear in a fixed order::

    element#id.class[attr]:pseudo-class::pseudo-element
              \\----/\\----/\\----------/
              may occur several times

`SelectorBuilder` accumulates parts in place and rejects any append that breaks
the order or repeats a single-occurrence part. `CssSelectorBuilder` is the
entry facade: each method starts a fresh builder, and `combine` joins two built
selectors with a combinator (`' '`, `'+'`, `'~'`, `'>'`).

Example:
    ```py
    builder = css_selector_builder
    builder.combine(
        builder.element("div").id("main"),
        "+",
        builder.element("table").id("data"),
    ).stringify()
    # 'div#main + table#data'
    ```
"""

from __future__ import annotations

import logging
from enum import IntEnum

from selectra.domain.errors import DuplicateError, OrderError

logger = logging.getLogger(__name__)


class SelectorPart(IntEnum):
    """Selector part categories, valued by their rank in a compound selector."""

    ELEMENT = 1
    ID = 2
    CLASS = 3
    ATTRIBUTE = 4
    PSEUDO_CLASS = 5
    PSEUDO_ELEMENT = 6

    @property
    def label(self) -> str:
        """Human-readable name, e.g. ``pseudo-class``."""
        return self.name.lower().replace("_", "-")

    @property
    def unique(self) -> bool:
        """Whether the part may occur at most once per compound selector."""
        return self in _UNIQUE_PARTS

    def render(self, value: str) -> str:
        """Return the selector fragment for ``value``."""
        prefix, suffix = _FRAGMENTS[self]
        return f"{prefix}{value}{suffix}"


_UNIQUE_PARTS = frozenset(
    {SelectorPart.ELEMENT, SelectorPart.ID, SelectorPart.PSEUDO_ELEMENT}
)

_FRAGMENTS: dict[SelectorPart, tuple[str, str]] = {
    SelectorPart.ELEMENT: ("", ""),
    SelectorPart.ID: ("#", ""),
    SelectorPart.CLASS: (".", ""),
    SelectorPart.ATTRIBUTE: ("[", "]"),
    SelectorPart.PSEUDO_CLASS: (":", ""),
    SelectorPart.PSEUDO_ELEMENT: ("::", ""),
}


class SelectorBuilder:
    """Mutable accumulator for a single selector.

    Every append method returns the builder itself so calls can be chained.
    A rejected append raises before touching the buffer, the rank or the
    used-part set.
    """

    def __init__(self) -> None:
        self._buffer = ""
        self._rank = 0
        self._used: set[SelectorPart] = set()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._buffer!r})"

    def __str__(self) -> str:
        return self._buffer

    @property
    def rank(self) -> int:
        """Rank of the last committed part (0 when nothing was appended)."""
        return self._rank

    def _append(self, part: SelectorPart, value: str) -> SelectorBuilder:
        if part < self._rank:
            raise OrderError(part, SelectorPart(self._rank))
        if part.unique and part in self._used:
            raise DuplicateError(part)
        self._buffer += part.render(value)
        self._rank = part
        self._used.add(part)
        return self

    def element(self, name: str) -> SelectorBuilder:
        """Append a type selector (``div``)."""
        return self._append(SelectorPart.ELEMENT, name)

    def id(self, name: str) -> SelectorBuilder:  # pylint: disable=invalid-name
        """Append an id selector (``#main``)."""
        return self._append(SelectorPart.ID, name)

    def class_(self, name: str) -> SelectorBuilder:
        """Append a class selector (``.container``)."""
        return self._append(SelectorPart.CLASS, name)

    def attr(self, spec: str) -> SelectorBuilder:
        """Append an attribute selector; ``spec`` is the bracket interior."""
        return self._append(SelectorPart.ATTRIBUTE, spec)

    def pseudo_class(self, name: str) -> SelectorBuilder:
        """Append a pseudo-class selector (``:focus``)."""
        return self._append(SelectorPart.PSEUDO_CLASS, name)

    def pseudo_element(self, name: str) -> SelectorBuilder:
        """Append a pseudo-element selector (``::after``)."""
        return self._append(SelectorPart.PSEUDO_ELEMENT, name)

    def stringify(self) -> str:
        """Return the selector built so far."""
        return self._buffer


class CssSelectorBuilder:
    """Facade starting a new `SelectorBuilder` for every selector."""

    # pylint: disable=missing-function-docstring

    @staticmethod
    def element(name: str) -> SelectorBuilder:
        return SelectorBuilder().element(name)

    @staticmethod
    def id(name: str) -> SelectorBuilder:  # pylint: disable=invalid-name
        return SelectorBuilder().id(name)

    @staticmethod
    def class_(name: str) -> SelectorBuilder:
        return SelectorBuilder().class_(name)

    @staticmethod
    def attr(spec: str) -> SelectorBuilder:
        return SelectorBuilder().attr(spec)

    @staticmethod
    def pseudo_class(name: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_class(name)

    @staticmethod
    def pseudo_element(name: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_element(name)

    @staticmethod
    def combine(
        left: SelectorBuilder, combinator: str, right: SelectorBuilder
    ) -> SelectorBuilder:
        """Join two selectors with ``combinator`` into a new builder.

        The inputs are only read. The joined text is stored as a single element
        part, so the result can be combined again but takes no second element.

        Args:
            left: Selector on the left of the combinator.
            combinator: One of ``' '``, ``'+'``, ``'~'``, ``'>'``; not validated.
            right: Selector on the right of the combinator.

        Returns:
            A fresh builder holding ``"<left> <combinator> <right>"``.
        """
        combined = f"{left.stringify()} {combinator} {right.stringify()}"
        logger.debug("Combined selector: %r", combined)
        return SelectorBuilder().element(combined)


css_selector_builder = CssSelectorBuilder()
