"""Board geometry — grid size, background image size and margins.

A single ``MapConstants`` value describes the fixed rectangular board.  It is
loaded once at startup (see ``hexengine.loaders.map_config_loader``) and then
passed to the offset and pixel functions, which default to
``DEFAULT_MAP_CONSTANTS``.
"""

from __future__ import annotations

from dataclasses import dataclass

from hexengine.models.offset import OffsetCoord


@dataclass(frozen=True)
class MapConstants:
    """Read-only board configuration.

    Attributes:
        background_width: Width of the map background image in pixels.
        background_height: Height of the map background image in pixels.
        grid_width: Number of hex columns.
        grid_height: Number of hex rows.
        default_hex_radius: Hex radius ``offset_polygon_corners`` uses when
            the caller passes none.
        margin_left: Pixel offset of column 0 from the left edge.
        margin_top: Pixel offset of row 0 from the top edge.
        margin_right: Pixels reserved on the right edge (may be negative).
        margin_bottom: Pixels reserved on the bottom edge (may be negative).
    """

    # -- Background image --------------------------------------------
    background_width: int = 1683
    background_height: int = 1429

    # -- Hex grid ----------------------------------------------------
    grid_width: int = 35
    grid_height: int = 34
    default_hex_radius: int = 24

    # -- Margins -----------------------------------------------------
    margin_left: int = 58
    margin_top: int = 48
    margin_right: int = -14
    margin_bottom: int = 6

    # -- Derived ---------------------------------------------------------

    @property
    def available_width(self) -> int:
        """Background width left for the grid once margins are removed."""
        return self.background_width - self.margin_left - self.margin_right

    @property
    def available_height(self) -> int:
        return self.background_height - self.margin_top - self.margin_bottom

    @property
    def horizontal_step(self) -> float:
        """Pixel distance between the centres of adjacent columns."""
        return self.available_width / self.grid_width

    @property
    def vertical_step(self) -> float:
        return self.available_height / self.grid_height

    def contains(self, offset: OffsetCoord) -> bool:
        """True when ``offset`` lies inside [0, grid_width) x [0, grid_height)."""
        return 0 <= offset.col < self.grid_width and 0 <= offset.row < self.grid_height


DEFAULT_MAP_CONSTANTS = MapConstants()
