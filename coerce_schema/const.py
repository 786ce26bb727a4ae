"""Constant and empty-value checkers."""

from __future__ import annotations

from typing import Any, Sequence

from . import utils
from .checker import Checker
from .validator import SchemaError

__all__ = ["Const", "Empty"]


class Const(Checker):
    """Succeeds only if the input deep-equals *value*."""

    __slots__ = ("value",)

    def __init__(self, value: Any):
        self.value = value

    def coerce(self, value: Any, path: Sequence[str]) -> Any:
        if utils.deep_equal(value, self.value):
            return value
        raise SchemaError(repr(self.value), value, path)

    def __repr__(self) -> str:
        return f"Const({self.value!r})"


class Empty(Checker):
    """Succeeds only if the input is ``None``.

    *label* names the value in the error message ("empty <label>"); an empty
    label falls back to ``"value"``.
    """

    __slots__ = ("label",)

    def __init__(self, label: str = ""):
        self.label = label or "value"

    def coerce(self, value: Any, path: Sequence[str]) -> Any:
        if value is None:
            return value
        raise SchemaError(f"empty {self.label}", value, path)

    def __repr__(self) -> str:
        return f"Empty({self.label!r})"
