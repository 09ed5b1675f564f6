"""Domain-layer error definitions."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from selectra.domain.selectors import SelectorPart

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


# ============================================================================
#                       Selector builder related errors
# ============================================================================


class SelectorError(DomainError):
    """Base class for errors raised while building a CSS selector."""


class OrderError(SelectorError):
    """Raised when a selector part is appended after a later-ranked part."""

    def __init__(self, part: SelectorPart, current: SelectorPart) -> None:
        super().__init__(
            "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element "
            f"(got {part.label} after {current.label})."
        )
        self.part = part
        self.current = current


class DuplicateError(SelectorError):
    """Raised when a single-occurrence selector part is appended twice."""

    def __init__(self, part: SelectorPart) -> None:
        super().__init__(
            "Element, id and pseudo-element should not occur more than one time "
            f"inside the selector (duplicate {part.label})."
        )
        self.part = part


# ============================================================================
#                           JSON codec related errors
# ============================================================================


class CodecError(DomainError):
    """Base class for JSON encode/decode errors."""


class SerializationError(CodecError):
    """Raised when a value has no JSON representation."""


class ParseError(CodecError):
    """Raised when JSON text is malformed or cannot build the requested type."""
