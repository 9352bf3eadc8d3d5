"""Hex math utilities — geometry functions for hexagonal grids.

All functions operate on CubeHex (cube coordinates) and return new values.
Reference: https://www.redblobgames.com/grids/hexagons/
"""

from __future__ import annotations

import math

from hexengine.models.hex import DIRECTIONS, CubeHex, FractionalHex
from hexengine.util.constants import LINE_NUDGE


def hex_add(a: CubeHex, b: CubeHex) -> CubeHex:
    return a + b


def hex_subtract(a: CubeHex, b: CubeHex) -> CubeHex:
    return a - b


def hex_multiply(a: CubeHex, k: int) -> CubeHex:
    return a * k


def hex_length(h: CubeHex) -> int:
    """Number of steps from the origin to ``h``."""
    return h.length()


def hex_distance(a: CubeHex, b: CubeHex) -> int:
    """Compute the hex grid distance between two coordinates."""
    return hex_length(a - b)


def hex_direction(direction: int) -> CubeHex:
    """Return the unit vector for ``direction`` (0=E, 1=NE, ... 5=SE)."""
    if not 0 <= direction < len(DIRECTIONS):
        raise ValueError(f"Hex direction must be in 0..5, got {direction}")
    return DIRECTIONS[direction]


def hex_neighbor(h: CubeHex, direction: int) -> CubeHex:
    return h + hex_direction(direction)


def hex_neighbors(h: CubeHex) -> list[CubeHex]:
    """Return the 6 neighbors of a hex coordinate."""
    return h.neighbors()


def hex_round(h: FractionalHex) -> CubeHex:
    """Round fractional cube coordinates to the nearest hex.

    Each component is rounded half-up on its own; the component with the
    largest rounding error is then recomputed from the other two.  ``q`` is
    only recomputed when its error is strictly the largest, ``r`` when it
    strictly beats ``s``, and ``s`` takes every remaining tie.
    """
    q = _round_half_up(h.q)
    r = _round_half_up(h.r)
    s = _round_half_up(h.s)

    q_diff = abs(q - h.q)
    r_diff = abs(r - h.r)
    s_diff = abs(s - h.s)

    if q_diff > r_diff and q_diff > s_diff:
        q = -r - s
    elif r_diff > s_diff:
        r = -q - s
    else:
        s = -q - r

    return CubeHex(q, r, s)


def hex_lerp(a: FractionalHex | CubeHex, b: FractionalHex | CubeHex, t: float) -> FractionalHex:
    """Linear interpolation between two hexes, ``t`` in [0, 1]."""
    return FractionalHex(
        a.q * (1 - t) + b.q * t,
        a.r * (1 - t) + b.r * t,
        a.s * (1 - t) + b.s * t,
    )


def hex_linedraw(a: CubeHex, b: CubeHex) -> list[CubeHex]:
    """Draw a line between two hex coordinates using linear interpolation.

    Returns distance(a, b) + 1 hexes from a to b (inclusive).  Both endpoints
    are nudged by ``LINE_NUDGE`` first so no sample lands exactly on an edge.
    """
    n = hex_distance(a, b)
    a_nudge = _nudge(a)
    b_nudge = _nudge(b)
    step = 1.0 / max(n, 1)
    return [hex_round(hex_lerp(a_nudge, b_nudge, step * i)) for i in range(n + 1)]


def hex_range(center: CubeHex, n: int) -> list[CubeHex]:
    """Return all hexes within `n` distance from center (inclusive)."""
    return center.disk(n)


def hex_ring(center: CubeHex, radius: int) -> list[CubeHex]:
    """Return all hexes at exactly `radius` distance from center, in walk order."""
    return center.ring(radius)


def _nudge(h: CubeHex) -> FractionalHex:
    dq, dr, ds = LINE_NUDGE
    return FractionalHex(h.q + dq, h.r + dr, h.s + ds)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)
