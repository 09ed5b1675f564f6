"""SELECTRA

Small object utilities: shape value objects, JSON encode/decode helpers that
re-attach behaviour to decoded data, and a CSS selector builder that enforces
part ordering and uniqueness while the selector is being built.
"""

from selectra.adapters.json_codec import decode, encode
from selectra.domain.errors import (
    DuplicateError,
    OrderError,
    ParseError,
    SerializationError,
)
from selectra.domain.selectors import (
    CssSelectorBuilder,
    SelectorBuilder,
    SelectorPart,
    css_selector_builder,
)
from selectra.domain.shapes import Circle, Rectangle, Shape

__all__ = [
    "__version__",
    "Circle",
    "CssSelectorBuilder",
    "DuplicateError",
    "OrderError",
    "ParseError",
    "Rectangle",
    "SelectorBuilder",
    "SelectorPart",
    "SerializationError",
    "Shape",
    "css_selector_builder",
    "decode",
    "encode",
]
__version__ = "0.1.0"
