"""Offset/cube conversion and map-bounded queries.

Game and UI code address the board with ``OffsetCoord``.  This module lifts
offsets into cube space for distance, neighbourhood and path questions and
converts the answers back.  Queries describe what is reachable on the
board: cells that fall outside [0, grid_width) x [0, grid_height) are left
out of the results, never reported as errors.

Saved games are keyed by offset coordinates, so ``offset_to_cube`` and
``cube_to_offset`` must not change.
"""

from __future__ import annotations

import logging

from hexengine.models.hex import CubeHex
from hexengine.models.map import DEFAULT_MAP_CONSTANTS, MapConstants
from hexengine.models.offset import OffsetCoord
from hexengine.util.constants import CLOSEST_SEARCH_RADIUS
from hexengine.util.hex_math import hex_lerp, hex_round

log = logging.getLogger(__name__)


# -- Conversion ----------------------------------------------------------


def offset_to_cube(
    offset: OffsetCoord, *, constants: MapConstants = DEFAULT_MAP_CONSTANTS
) -> CubeHex:
    """Convert a board cell to cube coordinates.

    The cell is first flattened to ``hex_num = row * grid_width + col`` and
    the row recovered from it, so a column past the right edge wraps into
    the next row.  Odd rows are shifted by ``(r + 1) // 2``.
    """
    hex_num = offset.row * constants.grid_width + offset.col
    r, col = divmod(hex_num, constants.grid_width)
    q = col - (r + 1) // 2
    return CubeHex(q, r, -q - r)


def cube_to_offset(h: CubeHex) -> OffsetCoord:
    """Inverse of :func:`offset_to_cube` for cells on the board."""
    return OffsetCoord(h.q + (h.r + 1) // 2, h.r)


def in_bounds(offset: OffsetCoord, *, constants: MapConstants = DEFAULT_MAP_CONSTANTS) -> bool:
    return constants.contains(offset)


# -- Distance ------------------------------------------------------------


def cube_distance(a: CubeHex, b: CubeHex) -> int:
    """Largest per-axis difference; equals ``hex_distance``."""
    return max(abs(b.q - a.q), abs(b.r - a.r), abs(b.s - a.s))


def offset_distance(
    a: OffsetCoord, b: OffsetCoord, *, constants: MapConstants = DEFAULT_MAP_CONSTANTS
) -> int:
    return cube_distance(
        offset_to_cube(a, constants=constants),
        offset_to_cube(b, constants=constants),
    )


# -- Neighbourhoods ------------------------------------------------------


def neighbors_within_distance(
    offset: OffsetCoord,
    max_distance: int = 1,
    *,
    constants: MapConstants = DEFAULT_MAP_CONSTANTS,
) -> list[OffsetCoord]:
    """Return board cells within ``max_distance`` of ``offset``, excluding it.

    Cells are produced in q-major order over the cube neighbourhood.

    Args:
        offset: Centre cell.
        max_distance: Cube radius to search (inclusive).
        constants: Board geometry.

    Returns:
        In-bounds offsets; off-board cells are dropped.  A negative
        ``max_distance`` gives an empty list.
    """
    if max_distance < 0:
        return []
    center = offset_to_cube(offset, constants=constants)
    neighbors: list[OffsetCoord] = []
    dropped = 0
    for h in center.disk(max_distance):
        if h == center:
            continue
        candidate = cube_to_offset(h)
        if constants.contains(candidate):
            neighbors.append(candidate)
        else:
            dropped += 1
    if dropped:
        log.debug(
            "neighbors_within_distance(%r, %d): dropped %d off-map cells",
            offset, max_distance, dropped,
        )
    return neighbors


def closest_neighbors(
    offset: OffsetCoord,
    count: int = 5,
    *,
    constants: MapConstants = DEFAULT_MAP_CONSTANTS,
) -> list[OffsetCoord]:
    """Return up to ``count`` board cells nearest to ``offset``.

    Scans a fixed cube radius of ``CLOSEST_SEARCH_RADIUS`` and sorts by
    distance.  The sort is stable, so cells at equal distance keep their
    scan order: unspecified, but the same for the same input.  Counts above
    5 may come back short near the board edge.
    """
    center = offset_to_cube(offset, constants=constants)
    candidates: list[tuple[int, OffsetCoord]] = []
    for h in center.disk(CLOSEST_SEARCH_RADIUS):
        if h == center:
            continue
        candidate = cube_to_offset(h)
        if constants.contains(candidate):
            candidates.append((cube_distance(center, h), candidate))

    candidates.sort(key=lambda item: item[0])
    return [candidate for _, candidate in candidates[:count]]


# -- Paths ---------------------------------------------------------------


def build_path(
    start: OffsetCoord,
    end: OffsetCoord,
    *,
    constants: MapConstants = DEFAULT_MAP_CONSTANTS,
) -> list[OffsetCoord]:
    """Build a straight path of board cells from ``start`` to ``end``.

    Samples ``distance + 1`` points along the cube line, snaps each to a
    cell and keeps the ones on the board, skipping repeats of the previous
    cell.  ``end`` is appended if the last sample did not reach it.  For
    ``distance <= 1`` the result is just ``[start, end]``.

    Args:
        start: First cell of the path.
        end: Last cell of the path.
        constants: Board geometry.

    Returns:
        Ordered offsets from ``start`` to ``end``.  Cells of the true line
        that fall off the board are omitted.
    """
    start_cube = offset_to_cube(start, constants=constants)
    end_cube = offset_to_cube(end, constants=constants)

    distance = cube_distance(start_cube, end_cube)
    if distance <= 1:
        return [start, end]

    path: list[OffsetCoord] = []
    last_cube: CubeHex | None = None
    dropped = 0
    for i in range(distance + 1):
        sample = hex_round(hex_lerp(start_cube, end_cube, i / distance))
        sample_offset = cube_to_offset(sample)
        if not constants.contains(sample_offset):
            dropped += 1
            continue
        if last_cube is None or cube_distance(last_cube, sample) > 0:
            path.append(sample_offset)
            last_cube = sample

    if dropped:
        log.debug("build_path(%r, %r): dropped %d off-map samples", start, end, dropped)

    if not path or path[-1] != end:
        path.append(end)
    return path
