"""
coerce_schema – composable checkers that validate loosely-typed values and
coerce them into canonical form.
"""
from .checker import Anything, Checker, OneOf, any_value, one_of
from .const import Const, Empty
from .duration import TimeDuration, TimeDurationString, format_duration
from .fieldmap import (
    OMIT,
    DefaultPolicy,
    Dependency,
    MapSet,
    Schema,
    field_map,
    field_map_set,
    strict_field_map,
)
from .frame import Records
from .leaf import Bool, Float, ForceInt, Int, ListOf, MapOf, NonEmptyString, String, StringMap
from .utils import path_as_string
from .validator import SchemaDefinitionError, SchemaError, validate

__all__ = [
    "Anything",
    "Bool",
    "Checker",
    "Const",
    "DefaultPolicy",
    "Dependency",
    "Empty",
    "Float",
    "ForceInt",
    "Int",
    "ListOf",
    "MapOf",
    "MapSet",
    "NonEmptyString",
    "OMIT",
    "OneOf",
    "Records",
    "Schema",
    "SchemaDefinitionError",
    "SchemaError",
    "String",
    "StringMap",
    "TimeDuration",
    "TimeDurationString",
    "any_value",
    "field_map",
    "field_map_set",
    "format_duration",
    "one_of",
    "path_as_string",
    "strict_field_map",
    "validate",
]
