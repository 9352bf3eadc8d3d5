"""Map configuration — loads board geometry from config/map.yaml.

Builds the ``MapConstants`` value once at startup; it is then passed (or
injected) into the offset and pixel functions.
"""

from __future__ import annotations

import logging
from dataclasses import fields
from pathlib import Path
from typing import Any

import yaml

from hexengine.models.map import MapConstants

log = logging.getLogger(__name__)

DEFAULT_MAP_CONFIG_PATH = "config/map.yaml"

_POSITIVE_FIELDS = ("background_width", "background_height", "grid_width", "grid_height")


def load_map_constants(path: str | Path = DEFAULT_MAP_CONFIG_PATH) -> MapConstants:
    """Load board geometry from a YAML file.

    Missing keys fall back to dataclass defaults.  If the file does not
    exist, a warning is logged and pure defaults are returned.
    """
    p = Path(path)
    if not p.exists():
        log.warning("Map config not found at %s, using defaults", p)
        return MapConstants()

    with p.open() as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"Map config {p} must be a mapping, got {type(raw).__name__}")

    log.info("Loaded map config from %s (%d keys)", p, len(raw))
    return map_constants_from_dict(raw)


def map_constants_from_dict(raw: dict[str, Any]) -> MapConstants:
    """Build ``MapConstants`` from a plain dict, ignoring unknown keys.

    Raises:
        ValueError: If a value is not a whole number, or a grid or
            background dimension is not positive.
    """
    known = {f.name for f in fields(MapConstants)}
    unknown = sorted(k for k in raw if k not in known)
    if unknown:
        log.warning("Ignoring unknown map config keys: %s", ", ".join(unknown))

    values: dict[str, int] = {}
    for k, v in raw.items():
        if k not in known:
            continue
        if isinstance(v, bool) or not isinstance(v, (int, float)) or int(v) != v:
            raise ValueError(f"Map config {k} must be an integer, got {v!r}")
        values[k] = int(v)

    cfg = MapConstants(**values)

    for name in _POSITIVE_FIELDS:
        if getattr(cfg, name) <= 0:
            raise ValueError(f"Map config {name} must be positive, got {getattr(cfg, name)}")
    return cfg
