"""
utils.py – shared, low-level utilities for the coerce-schema package.

This module consolidates common helpers for:
- Path rendering (error-message locations)
- Deep equality (type-strict, pandas-aware)
- Value rendering for error messages
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Sequence

import pandas as pd

# --------------------------------------------------------------------------- #
# Path Rendering                                                              #
# --------------------------------------------------------------------------- #

def path_as_string(path: Sequence[str]) -> str:
    """Join *path* segments; a leading ``"."`` segment is dropped."""
    if not path:
        return ""
    if path[0] == ".":
        return "".join(path[1:])
    return "".join(path)


def path_as_prefix(path: Sequence[str]) -> str:
    """Rendered *path* followed by ``": "``, or ``""`` for the root."""
    s = path_as_string(path)
    if not s:
        return ""
    return f"{s}: "


def field_path(path: Sequence[str], name: str) -> list[str]:
    return [*path, ".", name]


def index_path(path: Sequence[str], index: Any) -> list[str]:
    return [*path, "[", str(index), "]"]


# --------------------------------------------------------------------------- #
# Equality                                                                    #
# --------------------------------------------------------------------------- #

def deep_equal(a: Any, b: Any) -> bool:
    """Structural equality that also requires matching types at every level.

    ``True`` never equals ``1`` and a ``list`` never equals a ``tuple``;
    pandas frames and series compare with their own ``equals``.
    NaN never equals NaN, not even the same object.
    """
    if a is b and not isinstance(a, float):
        return True
    if type(a) is not type(b):
        return False
    if isinstance(a, (pd.DataFrame, pd.Series)):
        return a.equals(b)
    if isinstance(a, Mapping):
        if len(a) != len(b):
            return False
        for k, v in a.items():
            if k not in b or not deep_equal(v, b[k]):
                return False
        return True
    if isinstance(a, (list, tuple)):
        return len(a) == len(b) and all(deep_equal(x, y) for x, y in zip(a, b))
    return bool(a == b)


# --------------------------------------------------------------------------- #
# Display Helpers                                                             #
# --------------------------------------------------------------------------- #

def _describe(value: Any) -> str:
    """Render *value* as ``type(repr)`` for "got ..." messages."""
    return f"{type(value).__name__}({value!r})"
