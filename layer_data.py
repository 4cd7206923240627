"""Layer descriptors consumed by the tile/world coordinate transforms.

These are plain data holders. Nothing here is checked on construction so a
layer can be built up incrementally; call `LayerData.validate` where strict
input is wanted.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from camera import SceneCameras

DEFAULT_SCALE = 1.0
DEFAULT_SCROLL_FACTOR = 1.0


class Orientation(str, Enum):
    ORTHOGONAL = "orthogonal"
    ISOMETRIC = "isometric"
    STAGGERED = "staggered"
    HEXAGONAL = "hexagonal"


class LayerConfigError(ValueError):
    """Raised by `LayerData.validate` for a layer the transforms can't place sensibly."""


def parse_orientation(value) -> Optional[Orientation]:
    """Map an enum member or its exact lowercase name to an Orientation, else None."""
    if isinstance(value, Orientation):
        return value
    if isinstance(value, str):
        try:
            return Orientation(value)
        except ValueError:
            return None
    return None


@dataclass
class TilemapLayerRef:
    """Display-side transform of a tile layer that has been added to a scene."""

    x: float = 0.0
    y: float = 0.0
    scale_x: float = DEFAULT_SCALE
    scale_y: float = DEFAULT_SCALE
    scroll_factor_x: float = DEFAULT_SCROLL_FACTOR
    scroll_factor_y: float = DEFAULT_SCROLL_FACTOR
    scene: Optional[SceneCameras] = None


@dataclass
class LayerData:
    orientation: Union[Orientation, str]
    base_tile_width: float
    base_tile_height: float
    hex_side_length: float = 0.0
    tilemap_layer: Optional[TilemapLayerRef] = None

    @property
    def resolved_orientation(self) -> Optional[Orientation]:
        return parse_orientation(self.orientation)

    def validate(self) -> None:
        if self.resolved_orientation is None:
            raise LayerConfigError(f"Unknown orientation: {self.orientation!r}")
        for name in ("base_tile_width", "base_tile_height"):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                raise LayerConfigError(f"{name} must be a positive finite number, got {value!r}")
        if not math.isfinite(self.hex_side_length) or self.hex_side_length < 0:
            raise LayerConfigError(f"hex_side_length must be non-negative, got {self.hex_side_length!r}")
        if self.hex_side_length > self.base_tile_height:
            raise LayerConfigError("hex_side_length cannot exceed base_tile_height")
