"""Conversion between plain document data and typed Python values.

Codecs only understand plain data: mappings with string keys, lists and
scalars. `to_data` flattens dataclasses, enums, paths and collections into
that shape; `from_data` rebuilds a value of a requested type from it and
rejects anything that does not fit, without coercing between scalar types.
"""

from collections.abc import Mapping, Sequence
from dataclasses import MISSING, fields, is_dataclass
from datetime import date, time
from enum import Enum
from pathlib import PurePath
import types
from typing import (
    Any,
    Literal,
    NoReturn,
    TypeVar,
    Union,
    cast,
    get_args,
    get_origin,
    get_type_hints,
)

T = TypeVar("T")

_NONE_TYPE = type(None)


def to_data(value: Any) -> Any:
    """Convert `value` into plain data a codec can serialize."""

    if isinstance(value, Enum):
        return to_data(value.value)
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    # TOML and YAML carry these natively; JSON rejects them on encode
    if isinstance(value, (date, time, bytes)):
        return value
    if is_dataclass(value) and not isinstance(value, type):
        return {
            field.name: to_data(getattr(value, field.name)) for field in fields(value)
        }
    if isinstance(value, PurePath):
        return str(value)
    if isinstance(value, Mapping):
        return {_key_to_data(key): to_data(item) for key, item in value.items()}
    if isinstance(value, (set, frozenset)):
        return [to_data(item) for item in _ordered(value)]
    if isinstance(value, (list, tuple)):
        return [to_data(item) for item in value]

    raise TypeError(f"Cannot serialize value of type {type(value).__name__}")


def _key_to_data(key: Any) -> Any:
    if isinstance(key, Enum):
        return key.value
    elif isinstance(key, PurePath):
        return str(key)
    return key


def _ordered(items: set[Any] | frozenset[Any]) -> list[Any]:
    # set iteration order depends on hash seeding; sort for stable output
    try:
        return sorted(items)
    except TypeError:
        return sorted(items, key=repr)


def from_data(data: Any, tp: type[T] | Any, location: str = "") -> T:
    """Build a value of type `tp` from decoded document data.

    Args:
        data: output of a codec's `loads`.
        tp: target type; dataclasses, scalars, containers, unions,
            `Literal`, `Enum`, `Path` and `Any` are understood.
        location: dotted position of `data` inside the document, used
            in error messages.

    Raises:
        TypeError: `data` has the wrong shape for `tp`.
        ValueError: a value is out of range or a required field is missing.
    """

    if tp is Any or tp is object:
        return cast(T, data)
    if tp is None or tp is _NONE_TYPE:
        if data is None:
            return cast(T, None)
        _mismatch(data, "null", location)

    origin = get_origin(tp)
    if origin is Union or origin is types.UnionType:
        return cast(T, _from_union(data, get_args(tp), location))
    if origin is Literal:
        return cast(T, _from_literal(data, get_args(tp), location))
    if origin is not None:
        return cast(T, _from_container(data, origin, get_args(tp), location))

    if is_dataclass(tp) and isinstance(tp, type):
        return cast(T, _from_dataclass(data, tp, location))
    if isinstance(tp, type):
        return cast(T, _from_class(data, tp, location))

    raise TypeError(f"{_where(location)}: unsupported type {tp!r}")


def _from_class(data: Any, tp: type, location: str) -> Any:
    if issubclass(tp, Enum):
        try:
            return tp(data)
        except ValueError:
            choices = ", ".join(repr(member.value) for member in tp)
            raise ValueError(
                f"{_where(location)}: {data!r} is not one of {choices}"
            ) from None
    if tp is bool:
        if isinstance(data, bool):
            return data
        _mismatch(data, "bool", location)
    if tp is int:
        if isinstance(data, int) and not isinstance(data, bool):
            return data
        _mismatch(data, "int", location)
    if tp is float:
        if isinstance(data, (int, float)) and not isinstance(data, bool):
            return float(data)
        _mismatch(data, "float", location)
    if issubclass(tp, PurePath):
        if isinstance(data, str):
            return tp(data)
        _mismatch(data, "path string", location)
    if tp in (list, tuple, set, frozenset, dict):
        return _from_container(data, tp, (), location)
    if isinstance(data, tp):
        return data

    _mismatch(data, tp.__name__, location)


def _from_union(data: Any, members: tuple[Any, ...], location: str) -> Any:
    if data is None and _NONE_TYPE in members:
        return None

    errors: list[str] = []
    for member in members:
        if member is _NONE_TYPE:
            continue
        try:
            return from_data(data, member, location)
        except (TypeError, ValueError) as exc:
            errors.append(str(exc))

    raise TypeError(
        f"{_where(location)}: {data!r} matches none of "
        f"{', '.join(_type_name(m) for m in members)} ({'; '.join(errors)})"
    )


def _from_literal(data: Any, choices: tuple[Any, ...], location: str) -> Any:
    for choice in choices:
        # keep True from matching 1
        if data == choice and type(data) is type(choice):
            return choice
    raise ValueError(
        f"{_where(location)}: {data!r} is not one of "
        f"{', '.join(repr(c) for c in choices)}"
    )


def _from_container(
    data: Any, origin: Any, args: tuple[Any, ...], location: str
) -> Any:
    if origin in (dict, Mapping):
        if not isinstance(data, Mapping):
            _mismatch(data, "table", location)
        key_type, value_type = args if args else (Any, Any)
        return {
            from_data(key, key_type, location): from_data(
                value, value_type, _join(location, str(key))
            )
            for key, value in data.items()
        }

    if origin not in (list, tuple, set, frozenset, Sequence):
        raise TypeError(f"{_where(location)}: unsupported container {origin!r}")
    if not isinstance(data, list):
        _mismatch(data, "array", location)

    if origin is tuple and args and not (len(args) == 2 and args[1] is Ellipsis):
        if len(data) != len(args):
            raise ValueError(
                f"{_where(location)}: expected {len(args)} items, got {len(data)}"
            )
        return tuple(
            from_data(item, item_type, f"{location}[{index}]")
            for index, (item, item_type) in enumerate(zip(data, args))
        )

    item_type = args[0] if args else Any
    items = [
        from_data(item, item_type, f"{location}[{index}]")
        for index, item in enumerate(data)
    ]
    if origin is Sequence:
        return items
    return origin(items)


def _from_dataclass(data: Any, tp: type, location: str) -> Any:
    if not isinstance(data, Mapping):
        _mismatch(data, "table", location)

    try:
        resolved_types = get_type_hints(tp)
    except NameError as exc:
        raise TypeError(
            f"{_where(location)}: cannot resolve type hints of {tp.__name__}: {exc}"
        ) from exc
    kwargs: dict[str, Any] = {}

    for field in fields(tp):
        if not field.init:
            continue

        field_location = _join(location, field.name)
        if field.name not in data:
            if field.default is MISSING and field.default_factory is MISSING:
                raise ValueError(f"{_where(field_location)}: missing required field")
            continue

        kwargs[field.name] = from_data(
            data[field.name], resolved_types[field.name], field_location
        )

    try:
        return tp(**kwargs)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{_where(location)}: {exc}") from exc


def _mismatch(data: Any, expected: str, location: str) -> NoReturn:
    raise TypeError(
        f"{_where(location)}: expected {expected}, got {type(data).__name__} {data!r}"
    )


def _join(location: str, name: str) -> str:
    return f"{location}.{name}" if location else name


def _where(location: str) -> str:
    return location or "<document>"


def _type_name(tp: Any) -> str:
    return getattr(tp, "__name__", repr(tp))
