"""Field readers shared by the model ``from_dict`` constructors.

Every reader takes the mapping being read, the key, and the dotted path of
the mapping inside the document (e.g. ``tables[0].dimensions[2]``) so that
shape errors name the offending field. Shape errors are raised as
``ValueError``; the loader turns them into parse failures.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

T = TypeVar("T")

# Scalars that read naturally as text when a document is built in code
_TEXT_SCALARS = (str, int, float)

_BOOL_TEXT = {"true": True, "false": False}


def join_path(path: str, key: str) -> str:
    """Join a parent path and a key into a dotted field path."""
    return f"{path}.{key}" if path else key


def expect_mapping(data: Any, path: str) -> dict[str, Any]:
    """Return data if it is a mapping, else raise ValueError naming the path."""
    if not isinstance(data, dict):
        where = path or "document root"
        raise ValueError(f"{where}: expected a mapping, got {_type_name(data)}")
    return data


def require_str(data: dict[str, Any], key: str, path: str) -> str:
    """Read a required text field."""
    if data.get(key) is None:
        raise ValueError(f"{join_path(path, key)}: missing required field '{key}'")
    return _as_text(data[key], join_path(path, key))


def optional_str(data: dict[str, Any], key: str, path: str) -> str | None:
    """Read an optional text field; absent or null reads as None."""
    value = data.get(key)
    if value is None:
        return None
    return _as_text(value, join_path(path, key))


def optional_bool(data: dict[str, Any], key: str, path: str) -> bool | None:
    """Read an optional boolean flag.

    The loader keeps scalars as text, so flags arrive as ``true``/``false``
    (any case). Python booleans are accepted for documents built in code.
    """
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.lower() in _BOOL_TEXT:
        return _BOOL_TEXT[value.lower()]
    raise ValueError(f"{join_path(path, key)}: expected a boolean, got {_describe(value)}")


def optional_str_list(data: dict[str, Any], key: str, path: str) -> tuple[str, ...] | None:
    """Read an optional list of text values.

    Scalars inside the list are stringified so that sample values such as
    ``[1, 2, 3]`` are accepted.
    """
    value = data.get(key)
    if value is None:
        return None
    field_path = join_path(path, key)
    if not isinstance(value, list):
        raise ValueError(f"{field_path}: expected a list, got {_type_name(value)}")
    return tuple(_as_text(item, f"{field_path}[{i}]") for i, item in enumerate(value))


def entity_list(
    data: dict[str, Any],
    key: str,
    path: str,
    factory: Callable[[Any, str], T],
) -> tuple[T, ...]:
    """Read a list of nested entities; absent or null reads as empty.

    Args:
        data: Mapping that holds the list.
        key: Field name of the list.
        path: Dotted path of ``data`` within the document.
        factory: Called with each item and its path (usually ``Cls.from_dict``).

    Returns:
        Tuple of constructed entities, in document order.
    """
    value = data.get(key)
    if value is None:
        return ()
    field_path = join_path(path, key)
    if not isinstance(value, list):
        raise ValueError(f"{field_path}: expected a list, got {_type_name(value)}")
    return tuple(factory(item, f"{field_path}[{i}]") for i, item in enumerate(value))


def optional_entity(
    data: dict[str, Any],
    key: str,
    path: str,
    factory: Callable[[Any, str], T],
) -> T | None:
    """Read an optional nested entity."""
    value = data.get(key)
    if value is None:
        return None
    return factory(value, join_path(path, key))


def _as_text(value: Any, path: str) -> str:
    # bool is an int subclass but `true` is never meant as text
    if isinstance(value, bool) or not isinstance(value, _TEXT_SCALARS):
        raise ValueError(f"{path}: expected a string, got {_type_name(value)}")
    return str(value)


def _describe(value: Any) -> str:
    if isinstance(value, str):
        return repr(value)
    return _type_name(value)


def _type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, dict):
        return "a mapping"
    if isinstance(value, list):
        return "a list"
    if isinstance(value, bool):
        return "a boolean"
    return type(value).__name__
