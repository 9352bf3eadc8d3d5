"""Hex engine constants — tolerances and fixed search parameters.

Board geometry lives in ``MapConstants`` (see ``hexengine.models.map``);
these are the numeric constants of the algorithms themselves.
"""

# -- Cube invariant ------------------------------------------------------

COORD_TOLERANCE: float = 1e-9
"""Allowed drift of q + r + s for fractional hexes, relative to the largest
component once that exceeds 1."""

# -- Line drawing --------------------------------------------------------

LINE_NUDGE: tuple[float, float, float] = (1e-6, 1e-6, -2e-6)
"""Offset added to both line endpoints so samples never sit on a hex edge.

Sums to zero, so a nudged hex still satisfies the cube invariant.
"""

# -- Map-bounded queries -------------------------------------------------

CLOSEST_SEARCH_RADIUS: int = 3
"""Cube radius scanned by ``closest_neighbors``; enough for up to 5 results."""
