"""Offset coordinates and pixel points.

Offset coordinates (col, row) address the staggered on-screen board used by
game logic; every odd row is shifted relative to its neighbours.  They are
kept apart from ``CubeHex`` on purpose: conversions go through
``hexengine.engine.offset_grid``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class OffsetCoord:
    """Immutable board cell address.

    Attributes:
        col: Column, 0-based, left to right.
        row: Row, 0-based, top to bottom.
    """

    col: int
    row: int

    def to_dict(self) -> dict[str, int]:
        return {"col": self.col, "row": self.row}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> OffsetCoord:
        return cls(int(data["col"]), int(data["row"]))

    def __repr__(self) -> str:
        return f"Offset({self.col},{self.row})"


@dataclass(frozen=True)
class Point:
    """A position in pixel space."""

    x: float
    y: float

    def to_dict(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y}
