"""
validator.py - error types and the top-level coercion entry point
=================================================================

Every checker in this package reports failures through the exceptions
defined here.  Two kinds exist and they must never be confused:

SchemaError
    The *input* does not satisfy a checker.  Carries ``want`` (the expected
    shape), ``got`` (the offending value) and ``path`` (where it happened).
    Alternation (``OneOf``, map-set dispatch) may catch it and move on.

SchemaDefinitionError
    The *schema itself* is broken, e.g. a default for a field that has no
    checker.  Never caught by alternation.

validate(value, *, schema, path=())
    Coerce a top-level value and return its canonical form.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Sequence

from . import utils

if TYPE_CHECKING:
    from .checker import Checker

__all__ = [
    "SchemaError",
    "SchemaDefinitionError",
    "validate",
]

log = logging.getLogger(__name__)

# --------------------------------------------------------------------------- #
# Exceptions                                                                  #
# --------------------------------------------------------------------------- #

class SchemaError(ValueError):
    """Raised when a value violates the checker applied to it."""

    def __init__(
        self,
        want: str | None,
        got: Any,
        path: Sequence[str] = (),
        *,
        message: str | None = None,
    ):
        self.want = want
        self.got = got
        self.path = tuple(path)
        super().__init__(message if message is not None else self._render())

    def _render(self) -> str:
        prefix = utils.path_as_prefix(self.path)
        if self.want is None:
            return f"{prefix}unexpected value {self.got!r}"
        if self.got is None:
            return f"{prefix}expected {self.want}, got nothing"
        return f"{prefix}expected {self.want}, got {utils._describe(self.got)}"


class SchemaDefinitionError(Exception):
    """Raised when a checker tree is assembled incorrectly."""


# --------------------------------------------------------------------------- #
# Entry point                                                                 #
# --------------------------------------------------------------------------- #

def validate(value: Any, *, schema: "Checker", path: Sequence[str] = ()) -> Any:
    """Coerce *value* with *schema* and return the canonical result.

    Raises :class:`SchemaError` when the value is rejected.
    """
    try:
        return schema.coerce(value, list(path))
    except SchemaError as exc:
        log.debug("coercion failed at %r: %s", utils.path_as_string(exc.path) or "<root>", exc)
        raise
