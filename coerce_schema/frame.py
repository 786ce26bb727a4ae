"""
frame.py - row-wise coercion of tabular data.

:class:`Records` lets a :class:`~coerce_schema.Schema` validate every row of
a :class:`pandas.DataFrame` (or a plain list of row mappings) and returns the
coerced rows as a list of dicts.  Missing cells (NaN / NA / None) are
dropped from a frame's rows so that schema defaults apply to them.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Sequence

import pandas as pd

from . import utils
from .checker import Checker
from .validator import SchemaError

__all__ = ["Records"]


def _native(v: Any) -> Any:
    if pd.api.types.is_bool(v):
        return bool(v)
    if pd.api.types.is_integer(v):
        return int(v)
    if pd.api.types.is_float(v):
        return float(v)
    return v


def _frame_rows(df: pd.DataFrame) -> list[dict[str, Any]]:
    # Nullable dtypes keep integer columns integral when a cell is missing.
    rows = []
    for row in df.convert_dtypes().to_dict(orient="records"):
        rows.append(
            {k: _native(v) for k, v in row.items() if not (pd.api.types.is_scalar(v) and pd.isna(v))}
        )
    return rows


class Records(Checker):
    """Coerces each row with *row* and returns the list of results."""

    __slots__ = ("row",)

    def __init__(self, row: Checker):
        self.row = row

    def coerce(self, value: Any, path: Sequence[str]) -> list[Any]:
        if isinstance(value, pd.DataFrame):
            rows: Sequence[Any] = _frame_rows(value)
        elif isinstance(value, (list, tuple)) and all(isinstance(r, Mapping) for r in value):
            rows = value
        else:
            raise SchemaError("records", value, path)
        return [self.row.coerce(r, utils.index_path(path, idx)) for idx, r in enumerate(rows)]
