"""Hexagonal coordinates in cube form (q, r, s).

Cube coordinates address a hex grid with three redundant axes:
- q axis runs east
- r axis runs south-east
- s axis runs south-west

The axes always satisfy q + r + s == 0.  ``CubeHex`` holds integer cells,
``FractionalHex`` holds real-valued intermediates used while interpolating
and rounding.

Reference: https://www.redblobgames.com/grids/hexagons/
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from hexengine.util.constants import COORD_TOLERANCE


class InvalidCoordinate(ValueError):
    """A cube triple whose components do not sum to zero."""


@dataclass(frozen=True)
class CubeHex:
    """Immutable integer cube coordinate.

    Attributes:
        q: East axis.
        r: South-east axis.
        s: South-west axis, always ``-q - r``.
    """

    q: int
    r: int
    s: int

    def __post_init__(self) -> None:
        if round(self.q + self.r + self.s) != 0:
            raise InvalidCoordinate(
                f"Invalid hex coordinates ({self.q}, {self.r}, {self.s}): q + r + s must equal 0"
            )

    # -- Arithmetic ------------------------------------------------------

    def __add__(self, other: CubeHex) -> CubeHex:
        return CubeHex(self.q + other.q, self.r + other.r, self.s + other.s)

    def __sub__(self, other: CubeHex) -> CubeHex:
        return CubeHex(self.q - other.q, self.r - other.r, self.s - other.s)

    def __mul__(self, k: int) -> CubeHex:
        return CubeHex(self.q * k, self.r * k, self.s * k)

    __rmul__ = __mul__

    # -- Geometry --------------------------------------------------------

    def length(self) -> int:
        """Steps from the origin: (|q| + |r| + |s|) / 2."""
        return (abs(self.q) + abs(self.r) + abs(self.s)) // 2

    def distance_to(self, other: CubeHex) -> int:
        """Hex grid distance (number of steps along hex edges)."""
        return (self - other).length()

    def neighbor(self, direction: int) -> CubeHex:
        """Return the adjacent hex in ``direction`` (0..5, see ``DIRECTION_NAMES``)."""
        if not 0 <= direction < len(DIRECTIONS):
            raise ValueError(f"Hex direction must be in 0..5, got {direction}")
        return self + DIRECTIONS[direction]

    def neighbors(self) -> list[CubeHex]:
        """Return the 6 adjacent hex coordinates in direction order."""
        return [self + d for d in DIRECTIONS]

    def ring(self, radius: int) -> list[CubeHex]:
        """Return all hexes at exactly `radius` steps away.

        The walk starts ``radius`` steps in direction 4 (SW) and then moves
        ``radius`` steps along each of the six directions in turn.  Radius 0
        yields the hex itself.
        """
        if radius < 0:
            raise ValueError(f"Ring radius must be >= 0, got {radius}")
        if radius == 0:
            return [self]
        results: list[CubeHex] = []
        h = self + DIRECTIONS[4] * radius
        for direction in DIRECTIONS:
            for _ in range(radius):
                results.append(h)
                h = h + direction
        return results

    def disk(self, radius: int) -> list[CubeHex]:
        """Return all hexes within `radius` steps (inclusive), q-major order."""
        if radius < 0:
            raise ValueError(f"Range radius must be >= 0, got {radius}")
        results: list[CubeHex] = []
        for dq in range(-radius, radius + 1):
            for dr in range(max(-radius, -dq - radius), min(radius, -dq + radius) + 1):
                results.append(CubeHex(self.q + dq, self.r + dr, self.s - dq - dr))
        return results

    def line_to(self, other: CubeHex) -> list[CubeHex]:
        """Return a list of hex coordinates forming a line from self to other."""
        from hexengine.util.hex_math import hex_linedraw

        return hex_linedraw(self, other)

    # -- Serialization ---------------------------------------------------

    def to_dict(self) -> dict[str, int]:
        return {"q": self.q, "r": self.r, "s": self.s}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CubeHex:
        s = data.get("s")
        return make_hex(int(data["q"]), int(data["r"]), None if s is None else int(s))

    def __repr__(self) -> str:
        return f"Hex({self.q},{self.r},{self.s})"


@dataclass(frozen=True)
class FractionalHex:
    """Cube coordinate with real-valued components.

    Only used as an intermediate for interpolation and pixel lookups; round
    it with :func:`hexengine.util.hex_math.hex_round` to get a cell.
    """

    q: float
    r: float
    s: float

    def __post_init__(self) -> None:
        scale = max(1.0, abs(self.q), abs(self.r), abs(self.s))
        if abs(self.q + self.r + self.s) > COORD_TOLERANCE * scale:
            raise InvalidCoordinate(
                f"Invalid fractional hex ({self.q}, {self.r}, {self.s}): q + r + s must equal 0"
            )

    @classmethod
    def from_hex(cls, h: CubeHex) -> FractionalHex:
        return cls(float(h.q), float(h.r), float(h.s))


def make_hex(q: int, r: int, s: int | None = None) -> CubeHex:
    """Build a cube hex, deriving ``s`` when omitted.

    Raises:
        InvalidCoordinate: If a given ``s`` does not balance q and r.
    """
    if s is None:
        s = -q - r
    return CubeHex(q, r, s)


def is_valid_hex(h: Any) -> bool:
    """True when ``h.q + h.r + h.s`` rounds to zero."""
    return round(h.q + h.r + h.s) == 0


# The 6 cube direction vectors (pointy-top layout)
DIRECTIONS: tuple[CubeHex, ...] = (
    CubeHex(1, 0, -1),   # E
    CubeHex(1, -1, 0),   # NE
    CubeHex(0, -1, 1),   # NW
    CubeHex(-1, 0, 1),   # W
    CubeHex(-1, 1, 0),   # SW
    CubeHex(0, 1, -1),   # SE
)

DIRECTION_NAMES: tuple[str, ...] = ("E", "NE", "NW", "W", "SW", "SE")
