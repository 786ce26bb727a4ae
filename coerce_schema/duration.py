"""
duration.py - time-span checkers backed by :class:`pandas.Timedelta`.

Durations arrive as text such as ``"18h"``, ``"1h30m"`` or ``"250ms"``, or
as ready-made :class:`datetime.timedelta` objects.  :class:`TimeDuration`
returns a ``pandas.Timedelta`` (a ``timedelta`` subclass with nanosecond
resolution); :class:`TimeDurationString` returns compact canonical text
such as ``"18h0m0s"``.
"""

from __future__ import annotations

import datetime as _dt
from typing import Any, Sequence

import pandas as pd

from . import utils
from .checker import Checker
from .validator import SchemaError

__all__ = ["TimeDuration", "TimeDurationString", "format_duration"]

_WANT = "string or duration"

_SMALL_UNITS = (
    (1_000, "ns", 1),
    (1_000_000, "µs", 1_000),
    (1_000_000_000, "ms", 1_000_000),
)


def _parse(value: Any, path: Sequence[str]) -> pd.Timedelta:
    if isinstance(value, _dt.timedelta):
        try:
            return pd.Timedelta(value)
        except (ValueError, OverflowError) as exc:
            reason = f"{value!r} out of range ({exc})"
    elif not isinstance(value, str):
        raise SchemaError(_WANT, value, path)
    elif value.strip() in ("", "0"):
        return pd.Timedelta(0)
    elif not any(ch.isalpha() for ch in value):
        reason = f"missing unit in duration {value!r}"
    else:
        try:
            td = pd.Timedelta(value.strip())
        except (ValueError, OverflowError) as exc:
            reason = f"invalid duration {value!r} ({exc})"
        else:
            if td is not pd.NaT:
                return td
            reason = f"invalid duration {value!r}"
    raise SchemaError(
        _WANT, value, path,
        message=f"{utils.path_as_prefix(path)}conversion to duration: {reason}",
    )


def _fraction(value: int, scale: int) -> str:
    whole, frac = divmod(value, scale)
    if not frac:
        return str(whole)
    digits = len(str(scale)) - 1
    return f"{whole}.{frac:0{digits}d}".rstrip("0")


def format_duration(td: _dt.timedelta) -> str:
    """Render *td* the compact way: ``"1h2m3.5s"``, ``"42ms"``, ``"0s"``."""
    ns = pd.Timedelta(td).value
    if ns == 0:
        return "0s"
    sign = "-" if ns < 0 else ""
    ns = abs(ns)

    for limit, unit, scale in _SMALL_UNITS:
        if ns < limit:
            return f"{sign}{_fraction(ns, scale)}{unit}"

    secs, frac = divmod(ns, 1_000_000_000)
    hours, rem = divmod(secs, 3600)
    minutes, seconds = divmod(rem, 60)
    s = _fraction(seconds * 1_000_000_000 + frac, 1_000_000_000)
    if hours:
        return f"{sign}{hours}h{minutes}m{s}s"
    if minutes:
        return f"{sign}{minutes}m{s}s"
    return f"{sign}{s}s"


class TimeDuration(Checker):
    """Duration strings or timedeltas; returns ``pandas.Timedelta``."""

    __slots__ = ()

    def coerce(self, value: Any, path: Sequence[str]) -> pd.Timedelta:
        return _parse(value, path)


class TimeDurationString(Checker):
    """Duration strings or timedeltas; returns canonical duration text."""

    __slots__ = ()

    def coerce(self, value: Any, path: Sequence[str]) -> str:
        return format_duration(_parse(value, path))
