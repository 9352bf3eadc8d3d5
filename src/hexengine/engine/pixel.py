"""Pixel projection for hexes.

Two independent projections live here:

- Layout-based (``hex_to_pixel`` and friends): the generic cube-to-pixel
  transform driven by a ``Layout``.  For callers that work in cube space.
- Board-based (``offset_to_pixel`` and friends): spreads the offset grid
  evenly over the map background using ``MapConstants``.  This is the one
  that lines up with the rendered map.

The two do not agree with each other and must not be mixed.
"""

from __future__ import annotations

import math

from hexengine.models.hex import CubeHex, FractionalHex
from hexengine.models.layout import Layout
from hexengine.models.map import DEFAULT_MAP_CONSTANTS, MapConstants
from hexengine.models.offset import OffsetCoord, Point


# -- Layout-based --------------------------------------------------------


def hex_to_pixel(layout: Layout, h: CubeHex) -> Point:
    """Centre of ``h`` in pixels."""
    m = layout.orientation
    x = (m.f0 * h.q + m.f1 * h.r) * layout.size.x
    y = (m.f2 * h.q + m.f3 * h.r) * layout.size.y
    return Point(x + layout.origin.x, y + layout.origin.y)


def pixel_to_hex(layout: Layout, p: Point) -> FractionalHex:
    """Fractional hex under pixel ``p``; round it to get the cell."""
    m = layout.orientation
    px = (p.x - layout.origin.x) / layout.size.x
    py = (p.y - layout.origin.y) / layout.size.y
    q = m.b0 * px + m.b1 * py
    r = m.b2 * px + m.b3 * py
    return FractionalHex(q, r, -q - r)


def hex_corner_offset(layout: Layout, corner: int) -> Point:
    angle = 2.0 * math.pi * (layout.orientation.start_angle - corner) / 6
    return Point(layout.size.x * math.cos(angle), layout.size.y * math.sin(angle))


def polygon_corners(layout: Layout, h: CubeHex) -> list[Point]:
    """The six outline vertices of ``h``."""
    center = hex_to_pixel(layout, h)
    corners: list[Point] = []
    for i in range(6):
        offset = hex_corner_offset(layout, i)
        corners.append(Point(center.x + offset.x, center.y + offset.y))
    return corners


# -- Board-based ---------------------------------------------------------


def offset_to_pixel(
    coord: OffsetCoord,
    hex_radius: float | None = None,
    *,
    constants: MapConstants = DEFAULT_MAP_CONSTANTS,
) -> Point:
    """Centre of a board cell in background-image pixels.

    Columns and rows are spaced evenly over the background minus margins;
    odd rows move half a column to the left.  The position depends only on
    the board geometry, ``hex_radius`` does not move the centre.
    """
    x = coord.col * constants.horizontal_step
    y = coord.row * constants.vertical_step

    if coord.row % 2 == 1:
        x -= constants.horizontal_step * 0.5

    return Point(x + constants.margin_left, y + constants.margin_top)


def calculate_map_size(
    width: int,
    height: int,
    hex_radius: float,
    *,
    constants: MapConstants = DEFAULT_MAP_CONSTANTS,
) -> tuple[int, int]:
    """Canvas size for the board: always the background image size."""
    return constants.background_width, constants.background_height


def offset_polygon_corners(
    coord: OffsetCoord,
    hex_radius: float | None = None,
    *,
    constants: MapConstants = DEFAULT_MAP_CONSTANTS,
) -> list[Point]:
    """Six pointy-top corners around a board cell, starting at 30 degrees.

    ``hex_radius`` defaults to ``constants.default_hex_radius``.
    """
    if hex_radius is None:
        hex_radius = constants.default_hex_radius
    center = offset_to_pixel(coord, hex_radius, constants=constants)
    corners: list[Point] = []
    for i in range(6):
        angle = math.pi / 3 * i + math.pi / 6
        corners.append(
            Point(center.x + hex_radius * math.cos(angle), center.y + hex_radius * math.sin(angle))
        )
    return corners
