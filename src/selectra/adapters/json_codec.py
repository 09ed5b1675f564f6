"""JSON encode/decode helpers.

`encode` turns structured values (including dataclass instances) into JSON text.
`decode` parses JSON text and attaches a template class to the resulting record
so that the template's methods become callable on it.
"""

from __future__ import annotations

import json
import logging
from dataclasses import fields, is_dataclass
from typing import Any, TypeVar

from selectra.config import JsonSettings, load_json_settings
from selectra.domain.errors import ParseError, SerializationError
from selectra.domain.utils import dict_to_dataclass

logger = logging.getLogger(__name__)

T = TypeVar("T")

COMPACT_SEPARATORS = (",", ":")
INDENTED_SEPARATORS = (",", ": ")


def _encode_default(obj: Any) -> Any:
    # Only data fields are emitted; methods never are.
    if is_dataclass(obj) and not isinstance(obj, type):
        return {field.name: getattr(obj, field.name) for field in fields(obj)}
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def encode(value: Any, settings: JsonSettings | None = None) -> str:
    """Return the JSON representation of ``value``.

    Args:
        value: Dicts, lists, tuples, strings, numbers, booleans, ``None`` and
            dataclass instances, nested arbitrarily.
        settings: Output options; read from the environment when omitted.

    Returns:
        JSON text. Compact (``[1,2,3]``) unless an indent is configured.

    Raises:
        SerializationError: If ``value`` is cyclic, holds a non-serializable
            member (function, set, arbitrary object) or a non-finite float.

    Example:
        ```py
        encode({"width": 10, "height": 20})  # '{"width":10,"height":20}'
        ```
    """
    settings = settings if settings is not None else load_json_settings()
    separators = COMPACT_SEPARATORS if settings.indent is None else INDENTED_SEPARATORS
    try:
        return json.dumps(
            value,
            default=_encode_default,
            allow_nan=False,
            indent=settings.indent,
            sort_keys=settings.sort_keys,
            separators=separators,
        )
    except (TypeError, ValueError, RecursionError) as e:
        logger.debug("Cannot encode %s value: %s", type(value).__name__, e)
        raise SerializationError(str(e)) from e


def decode(template: type[T], text: str | bytes) -> T:
    """Parse JSON ``text`` into an object that behaves like ``template``.

    Dataclass templates are built from the parsed record with
    `dict_to_dataclass`. Any other class gets an instance created without
    running ``__init__`` whose attributes are the parsed record; its methods
    resolve through the class, so later changes to the class show up on the
    decoded object.

    Args:
        template: The class whose behaviour the decoded object should have.
        text: JSON text holding an object.

    Returns:
        An instance of ``template``.

    Raises:
        ParseError: If ``text`` is malformed, is not a JSON object, lacks a
            field the template requires, or cannot be loaded onto
            ``template`` (slotted classes, rejected constructor values).

    Example:
        ```py
        r = decode(Rectangle, '{"width":10,"height":20}')
        r.area()  # 200
        ```
    """
    try:
        record = json.loads(text)
    except (ValueError, RecursionError) as e:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors
        logger.debug("Malformed JSON for %s: %s", template.__name__, e)
        raise ParseError(f"Malformed JSON: {e}") from e
    if not isinstance(record, dict):
        raise ParseError(
            f"Expected a JSON object for {template.__name__}, "
            f"got {type(record).__name__}."
        )
    if is_dataclass(template):
        try:
            return dict_to_dataclass(template, record)
        except (KeyError, TypeError, ValueError) as e:
            logger.debug("Cannot build %s: %s", template.__name__, e)
            reason = e.args[0] if isinstance(e, KeyError) else e
            raise ParseError(f"Cannot build {template.__name__}: {reason}") from e
    try:
        instance = template.__new__(template)
        for name, value in record.items():
            setattr(instance, name, value)
    except (AttributeError, TypeError) as e:
        logger.debug("Cannot load attributes onto %s: %s", template.__name__, e)
        raise ParseError(
            f"Cannot load attributes onto {template.__name__}: {e}"
        ) from e
    return instance
