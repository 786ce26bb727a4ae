"""Shared helpers for the coerce-schema test-suite."""
from __future__ import annotations

from typing import Any, Sequence

from coerce_schema import Checker

# ------------------------------------------------------------------ #
# Paths                                                              #
# ------------------------------------------------------------------ #
A_PATH = ["<pa", "th>"]     # renders as "<path>"

# ------------------------------------------------------------------ #
# Tiny helpers                                                       #
# ------------------------------------------------------------------ #
class Recorder(Checker):
    """Accepts everything and remembers every (value, path) it saw."""

    def __init__(self):
        self.calls: list[tuple[Any, list[str]]] = []

    def coerce(self, value: Any, path: Sequence[str]) -> Any:
        self.calls.append((value, list(path)))
        return value
