"""Hex layouts — orientation matrices, hex size and pixel origin.

Used by the generic cube-to-pixel projection in ``hexengine.engine.pixel``.
The game board itself is projected from offset coordinates and does not
use a Layout.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from hexengine.models.offset import Point


@dataclass(frozen=True)
class Orientation:
    """Forward (f*) and inverse (b*) 2x2 matrices plus the first corner angle.

    ``start_angle`` is measured in sixths of a full turn.
    """

    f0: float
    f1: float
    f2: float
    f3: float
    b0: float
    b1: float
    b2: float
    b3: float
    start_angle: float


LAYOUT_POINTY = Orientation(
    f0=math.sqrt(3.0), f1=math.sqrt(3.0) / 2.0,
    f2=0.0, f3=3.0 / 2.0,
    b0=math.sqrt(3.0) / 3.0, b1=-1.0 / 3.0,
    b2=0.0, b3=2.0 / 3.0,
    start_angle=0.5,
)

LAYOUT_FLAT = Orientation(
    f0=3.0 / 2.0, f1=0.0,
    f2=math.sqrt(3.0) / 2.0, f3=math.sqrt(3.0),
    b0=2.0 / 3.0, b1=0.0,
    b2=-1.0 / 3.0, b3=math.sqrt(3.0) / 3.0,
    start_angle=0.0,
)


@dataclass(frozen=True)
class Layout:
    """Orientation, per-axis hex size and pixel origin.

    Attributes:
        orientation: LAYOUT_POINTY or LAYOUT_FLAT (or a custom matrix).
        size: Hex radius along x and y in pixels.
        origin: Pixel position of hex (0, 0, 0).
    """

    orientation: Orientation
    size: Point
    origin: Point


def create_layout(orientation: Orientation, size: Point, origin: Point) -> Layout:
    return Layout(orientation=orientation, size=size, origin=origin)
