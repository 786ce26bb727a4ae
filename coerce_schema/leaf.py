"""
leaf.py - scalar and collection checkers.

These are the building blocks placed under a :class:`~coerce_schema.Schema`.
Each one accepts a small family of loosely-typed inputs (for example the
string ``"42"`` for an int, as produced by env files or CLI flags) and
returns a single canonical Python type.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Sequence

from . import utils
from .checker import Checker
from .validator import SchemaError

__all__ = [
    "Bool",
    "Int",
    "ForceInt",
    "Float",
    "String",
    "NonEmptyString",
    "ListOf",
    "MapOf",
    "StringMap",
]

_TRUE_STRINGS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_STRINGS = frozenset({"0", "f", "F", "FALSE", "false", "False"})


class Bool(Checker):
    """``bool`` values, or one of the usual true/false spellings."""

    __slots__ = ()

    def coerce(self, value: Any, path: Sequence[str]) -> bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            if value in _TRUE_STRINGS:
                return True
            if value in _FALSE_STRINGS:
                return False
        raise SchemaError("bool", value, path)


class Int(Checker):
    """Integers and integer strings (``"42"``, ``"0x2a"``, ``"-7"``)."""

    __slots__ = ()

    def coerce(self, value: Any, path: Sequence[str]) -> int:
        if isinstance(value, int) and not isinstance(value, bool):
            return int(value)
        if isinstance(value, str):
            try:
                return int(value.strip(), 0)
            except ValueError:
                pass
        raise SchemaError("int", value, path)


class ForceInt(Checker):
    """Like :class:`Int`, but floats (and float strings) are truncated."""

    __slots__ = ()

    def coerce(self, value: Any, path: Sequence[str]) -> int:
        if isinstance(value, bool):
            raise SchemaError("number", value, path)
        if isinstance(value, (int, float)):
            try:
                return int(value)
            except (OverflowError, ValueError):  # inf / nan
                raise SchemaError("number", value, path) from None
        if isinstance(value, str):
            try:
                return int(value.strip(), 0)
            except ValueError:
                pass
            try:
                return int(float(value))
            except (OverflowError, ValueError):
                pass
        raise SchemaError("number", value, path)


class Float(Checker):
    """Floats; ints and numeric strings are converted to ``float``."""

    __slots__ = ()

    def coerce(self, value: Any, path: Sequence[str]) -> float:
        if isinstance(value, bool):
            raise SchemaError("float", value, path)
        if isinstance(value, (int, float)):
            return float(value)
        if isinstance(value, str):
            try:
                return float(value)
            except ValueError:
                pass
        raise SchemaError("float", value, path)


class String(Checker):
    __slots__ = ()

    def coerce(self, value: Any, path: Sequence[str]) -> str:
        if isinstance(value, str):
            return value
        raise SchemaError("string", value, path)


class NonEmptyString(Checker):
    """Strings with at least one character; *label* tweaks the message."""

    __slots__ = ("label",)

    def __init__(self, label: str = ""):
        self.label = label or "string"

    def coerce(self, value: Any, path: Sequence[str]) -> str:
        if isinstance(value, str) and value:
            return value
        raise SchemaError(f"non-empty {self.label}", value, path)


class ListOf(Checker):
    """A list or tuple whose elements all pass *elem*; returns a new list."""

    __slots__ = ("elem",)

    def __init__(self, elem: Checker):
        self.elem = elem

    def coerce(self, value: Any, path: Sequence[str]) -> list[Any]:
        if not isinstance(value, (list, tuple)):
            raise SchemaError("list", value, path)
        return [self.elem.coerce(item, utils.index_path(path, idx)) for idx, item in enumerate(value)]


class MapOf(Checker):
    """Any mapping; every key passes *key* and every value passes *value*."""

    __slots__ = ("key", "value")

    def __init__(self, key: Checker, value: Checker):
        self.key = key
        self.value = value

    def coerce(self, value: Any, path: Sequence[str]) -> dict[Any, Any]:
        if not isinstance(value, Mapping):
            raise SchemaError("map", value, path)
        out: dict[Any, Any] = {}
        for k, v in value.items():
            kpath = utils.index_path(path, repr(k))
            new_k = self.key.coerce(k, kpath)
            out[new_k] = self.value.coerce(v, kpath)
        return out


def StringMap(value: Checker) -> MapOf:
    """A mapping with string keys and values checked by *value*."""
    return MapOf(String(), value)
