"""
fieldmap.py - structured-map validation
=======================================

A :class:`Schema` validates a mapping with string keys.  Every key has an
independent checker; processing succeeds only if every present value
succeeds individually.  On top of that a schema supports

* **defaults** - literal values substituted for absent fields (and still
  passed through the field's checker), or :data:`OMIT` to leave the field
  out of the output;
* **strictness** - unknown input keys are an error;
* **dependencies** - if-and-only-if constraints between two fields,
  evaluated on the coerced output.

:func:`field_map_set` chooses one of several schemas by the value of a
selector field.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Sequence

from . import utils
from .checker import Checker
from .validator import SchemaDefinitionError, SchemaError

__all__ = [
    "DefaultPolicy",
    "OMIT",
    "Dependency",
    "Schema",
    "MapSet",
    "field_map",
    "strict_field_map",
    "field_map_set",
]

log = logging.getLogger(__name__)


class DefaultPolicy(enum.Enum):
    """Non-literal defaults."""

    OMIT = "omit"


#: Default marker: if the field is absent, leave it out of the output too.
OMIT = DefaultPolicy.OMIT


@dataclass(frozen=True)
class Dependency:
    """The owning field must exist exactly when *depends_on* equals *value*.

    If *depends_on* is missing or holds any other value, the owning field
    must not be specified.
    """

    depends_on: str
    value: Any


# --------------------------------------------------------------------------- #
# Schema                                                                      #
# --------------------------------------------------------------------------- #

class Schema(Checker):
    """Validator for a collection of related named attributes.

    The coerced output is always a fresh ``dict``.
    """

    __slots__ = ("checkers", "defaults", "dependencies", "strict")

    def __init__(
        self,
        checkers: Mapping[str, Checker],
        defaults: Mapping[str, Any] | None = None,
        dependencies: Mapping[str, Dependency] | None = None,
        *,
        strict: bool = False,
    ):
        self.checkers = MappingProxyType(dict(checkers))
        self.defaults = MappingProxyType(dict(defaults or {}))
        self.dependencies = MappingProxyType(dict(dependencies or {}))
        self.strict = bool(strict)

        for name, dep in self.dependencies.items():
            if not isinstance(dep, Dependency):
                raise SchemaDefinitionError(
                    f"dependency for field {name!r} must be a Dependency, got {type(dep).__name__}"
                )
            for field in (name, dep.depends_on):
                if field not in self.checkers:
                    raise SchemaDefinitionError(
                        f"dependency {name!r} -> {dep.depends_on!r} refers to unknown field {field!r}"
                    )

    def coerce(self, value: Any, path: Sequence[str]) -> dict[str, Any]:
        # 1) shape ---------------------------------------------------------
        if not isinstance(value, Mapping):
            raise SchemaError("map", value, path)
        if not all(isinstance(k, str) for k in value):
            raise SchemaError("map[string]", value, path)

        # 2) strictness ----------------------------------------------------
        if self.strict:
            for k, v in value.items():
                if k not in self.checkers:
                    raise SchemaError(
                        None, v, path,
                        message=f"{utils.path_as_prefix(path)}unknown key {k!r} (value {v!r})",
                    )

        # 3) per-field coercion -------------------------------------------
        out: dict[str, Any] = {}
        for name, checker in self.checkers.items():
            if name in value:
                raw = value[name]
            elif name in self.defaults:
                raw = self.defaults[name]
                if raw is OMIT:
                    continue
            else:
                # Absent without a default: dependency fields are checked
                # below, everything else is simply left out.
                continue
            out[name] = checker.coerce(raw, utils.field_path(path, name))

        # 4) default backfill ---------------------------------------------
        for name, dflt in self.defaults.items():
            if dflt is OMIT or name in out:
                continue
            checker = self.checkers.get(name)
            if checker is None:
                raise SchemaDefinitionError(f"got default value for unknown field {name!r}")
            # The checker sees the whole input mapping here, not the default.
            out[name] = checker.coerce(value, utils.field_path(path, name))

        # 5) dependencies --------------------------------------------------
        for name, dep in self.dependencies.items():
            self._check_dependency(name, dep, out, path)

        return out

    @staticmethod
    def _check_dependency(name: str, dep: Dependency, out: Mapping[str, Any], path: Sequence[str]) -> None:
        field_exists = name in out
        dep_exists = dep.depends_on in out
        actual = out.get(dep.depends_on)
        equal = dep_exists and utils.deep_equal(actual, dep.value)
        prefix = utils.path_as_prefix(path)

        if field_exists and dep_exists and not equal:
            message = (
                f"{prefix}field {name!r} should not be specified when {dep.depends_on!r} is {actual!r}. "
                f"{name!r} requires {dep.depends_on!r} to have value {dep.value!r}"
            )
            raise SchemaError(None, out[name], path, message=message)
        if field_exists and not dep_exists:
            message = (
                f"{prefix}field {name!r} requires value {dep.value!r} be specified for "
                f"{dep.depends_on!r}, but it is not specified"
            )
            raise SchemaError(None, out[name], path, message=message)
        if not field_exists and dep_exists and equal:
            message = (
                f"{prefix}field {dep.depends_on!r} exists with value {actual!r}, "
                f"but required field {name!r} is missing"
            )
            raise SchemaError(None, actual, path, message=message)

    def __repr__(self) -> str:
        return (
            f"Schema(checkers={dict(self.checkers)!r}, defaults={dict(self.defaults)!r}, "
            f"dependencies={dict(self.dependencies)!r}, strict={self.strict!r})"
        )


def field_map(checkers: Mapping[str, Checker], defaults: Mapping[str, Any] | None = None) -> Schema:
    """Return a :class:`Schema` that tolerates unknown keys."""
    return Schema(checkers, defaults)


def strict_field_map(checkers: Mapping[str, Checker], defaults: Mapping[str, Any] | None = None) -> Schema:
    """Like :func:`field_map`, but unknown keys are an error."""
    return Schema(checkers, defaults, strict=True)


# --------------------------------------------------------------------------- #
# Map-set dispatch                                                            #
# --------------------------------------------------------------------------- #

class MapSet(Checker):
    """Coerces a mapping with the first schema whose selector checker accepts it."""

    __slots__ = ("selector", "schemas")

    def __init__(self, selector: str, schemas: Sequence[Schema]):
        self.selector = selector
        self.schemas = tuple(schemas)

    def coerce(self, value: Any, path: Sequence[str]) -> dict[str, Any]:
        if not isinstance(value, Mapping):
            raise SchemaError("map", value, path)

        selector = None
        if self.selector in value:
            selector = value[self.selector]
            for idx, schema in enumerate(self.schemas):
                try:
                    schema.checkers[self.selector].coerce(selector, path)
                except SchemaError:
                    continue
                log.debug("selector %s=%r matched variant %d", self.selector, selector, idx)
                return schema.coerce(value, path)
        raise SchemaError("supported selector", selector, utils.field_path(path, self.selector))

    def __repr__(self) -> str:
        return f"MapSet({self.selector!r}, {list(self.schemas)!r})"


def field_map_set(selector: str, maps: Sequence[Checker]) -> MapSet:
    """Return a checker that picks one of *maps* by the *selector* field.

    Every entry must be a :class:`Schema` with a checker for *selector*.
    """
    schemas: list[Schema] = []
    for m in maps:
        if not isinstance(m, Schema):
            raise SchemaDefinitionError(f"field_map_set got a non-field-map checker: {m!r}")
        if m.checkers.get(selector) is None:
            raise SchemaDefinitionError(f"field_map_set has a field map with a missing selector {selector!r}")
        schemas.append(m)
    return MapSet(selector, schemas)
