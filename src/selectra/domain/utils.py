"""Domain layer utilities."""

from dataclasses import MISSING, Field, fields, is_dataclass
from types import NoneType
from typing import Any, TypeVar, cast, get_args, get_origin, get_type_hints

D = TypeVar("D")


def dict_to_dataclass(dc_type: type[D], record: dict[str, Any]) -> D:
    """Recursively build a dataclass instance from a parsed record.

    Args:
        dc_type: The dataclass type to build.
        record: Mapping of field names to values, e.g. the output of `json.loads`.

    Returns:
        An instance of `dc_type`.

    Raises:
        TypeError: If `dc_type` is not a dataclass type.
        KeyError: If a required field is absent from `record`.

    Note:
        - Keys in `record` that are not fields of `dc_type` are ignored.
        - Fields with `init=False` are left to the dataclass itself.
        - Nested dicts are converted when the field is annotated with a
          dataclass type (or `SomeDataclass | None`).
    """
    if not (isinstance(dc_type, type) and is_dataclass(dc_type)):
        raise TypeError(f"{dc_type} is not a dataclass type")
    hints = get_type_hints(dc_type)
    kwargs: dict[str, Any] = {}
    for field in fields(dc_type):
        if not field.init:
            continue
        if field.name not in record:
            if not _has_default(field):
                raise KeyError(f"Missing required field '{field.name}'")
            continue
        value = record[field.name]
        nested = _nested_dataclass(hints.get(field.name, field.type))
        if nested is not None and isinstance(value, dict):
            value = dict_to_dataclass(nested, value)
        kwargs[field.name] = value
    return cast(D, dc_type(**kwargs))


def _has_default(field: Field[Any]) -> bool:
    return field.default is not MISSING or field.default_factory is not MISSING


def _nested_dataclass(annotation: Any) -> type[Any] | None:
    if get_origin(annotation) is None:
        return annotation if is_dataclass(annotation) else None
    args = [arg for arg in get_args(annotation) if arg is not NoneType]
    if len(args) == 1 and is_dataclass(args[0]):
        return cast(type[Any], args[0])
    return None
