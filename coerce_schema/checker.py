"""
checker.py - the Checker contract and the structural combinators.

A checker's ``coerce`` is called recursively while a value is validated.
It returns the canonical value to use at that point of the tree, or raises
:class:`~coerce_schema.validator.SchemaError`.  Combinators such as
:class:`OneOf` may catch that error and continue with an alternative.
"""

from __future__ import annotations

import abc
from typing import Any, Sequence

from .validator import SchemaError

__all__ = ["Checker", "Anything", "any_value", "OneOf", "one_of"]


class Checker(abc.ABC):
    """Validates a value at *path* and converts it into canonical form."""

    __slots__ = ()

    @abc.abstractmethod
    def coerce(self, value: Any, path: Sequence[str]) -> Any:
        raise NotImplementedError


class Anything(Checker):
    """Accepts any value and returns it unprocessed."""

    __slots__ = ()

    def coerce(self, value: Any, path: Sequence[str]) -> Any:
        return value

    def __repr__(self) -> str:
        return "Anything()"


def any_value() -> Checker:
    return Anything()


class OneOf(Checker):
    """Tries each option in order; the first that succeeds wins.

    If every option rejects the value a generic :class:`SchemaError` is
    raised at the current path.  Only validation errors are suppressed.
    """

    __slots__ = ("options",)

    def __init__(self, *options: Checker):
        self.options = tuple(options)

    def coerce(self, value: Any, path: Sequence[str]) -> Any:
        for option in self.options:
            try:
                return option.coerce(value, path)
            except SchemaError:
                continue
        raise SchemaError(None, value, path)

    def __repr__(self) -> str:
        return f"OneOf({', '.join(map(repr, self.options))})"


def one_of(*options: Checker) -> Checker:
    return OneOf(*options)
