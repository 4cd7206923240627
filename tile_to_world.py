"""Tile (grid) coordinates to world (pixel) coordinates for 2D tile layers.

Orthogonal layers are delegated to per-axis transforms. Isometric, staggered and
hexagonal layers share a pre-step that places the layer in the world (position,
scale and the parallax share of the camera scroll) and then apply a closed-form
projection per topology.
"""

from __future__ import annotations

import logging
import math
from typing import Callable, Optional

from pygame.math import Vector2

from camera import CameraView
from layer_data import LayerData, Orientation, TilemapLayerRef

logger = logging.getLogger(__name__)

AxisTransform = Callable[[float, Optional[CameraView], LayerData, Optional[Orientation]], float]
CameraResolver = Callable[[TilemapLayerRef], CameraView]


def default_camera(tilemap_layer: TilemapLayerRef) -> CameraView:
    """Main camera of the scene the layer belongs to."""
    if tilemap_layer.scene is None:
        logger.debug("Tilemap layer has no scene; using an unscrolled camera")
        return CameraView()
    return tilemap_layer.scene.main


def _layer_origin(
    layer: LayerData,
    camera: Optional[CameraView],
    resolve_camera: CameraResolver,
) -> tuple[float, float, float, float]:
    """World origin and effective (scaled) tile size of a layer."""
    tile_width = layer.base_tile_width
    tile_height = layer.base_tile_height
    tilemap_layer = layer.tilemap_layer
    if tilemap_layer is None:
        return 0.0, 0.0, tile_width, tile_height

    if camera is None:
        camera = resolve_camera(tilemap_layer)
    offset_x, offset_y = camera.parallax_offset(tilemap_layer.scroll_factor_x, tilemap_layer.scroll_factor_y)
    return (
        tilemap_layer.x + offset_x,
        tilemap_layer.y + offset_y,
        tile_width * tilemap_layer.scale_x,
        tile_height * tilemap_layer.scale_y,
    )


def tile_to_world_x(
    tile_x: float,
    camera: Optional[CameraView],
    layer: LayerData,
    orientation: Optional[Orientation] = None,
    resolve_camera: CameraResolver = default_camera,
) -> float:
    """World x of the left edge of column `tile_x` on an orthogonal layer."""
    origin_x, _, tile_width, _ = _layer_origin(layer, camera, resolve_camera)
    return origin_x + tile_x * tile_width


def tile_to_world_y(
    tile_y: float,
    camera: Optional[CameraView],
    layer: LayerData,
    orientation: Optional[Orientation] = None,
    resolve_camera: CameraResolver = default_camera,
) -> float:
    """World y of the top edge of row `tile_y` on an orthogonal layer."""
    _, origin_y, _, tile_height = _layer_origin(layer, camera, resolve_camera)
    return origin_y + tile_y * tile_height


def _row_shift(tile_y: float) -> float:
    """Remainder of the row index by 2, keeping the sign of the row (-1 for row -1)."""
    return math.fmod(tile_y, 2)


def isometric_to_world(tile_x: float, tile_y: float, tile_width: float, tile_height: float) -> tuple[float, float]:
    """Diamond projection: +x steps right-down, +y steps left-down."""
    half_w = tile_width / 2
    half_h = tile_height / 2
    return (tile_x - tile_y) * half_w, (tile_x + tile_y) * half_h


def staggered_to_world(tile_x: float, tile_y: float, tile_width: float, tile_height: float) -> tuple[float, float]:
    """Rows step half a tile down; odd rows are offset by half a tile width."""
    x = tile_x * tile_width + _row_shift(tile_y) * (tile_width / 2)
    return x, tile_y * (tile_height / 2)


def hexagonal_to_world(
    tile_x: float, tile_y: float, tile_width: float, tile_height: float, side_length: float
) -> tuple[float, float]:
    """Pointy-top hexes in the odd-row-shifted ("oddr") layout.

    Adjacent rows interlock, so the vertical step is half the non-flat part of the
    tile plus the flat side rather than the full tile height.
    """
    row_height = (tile_height - side_length) / 2 + side_length
    x = tile_x * tile_width + _row_shift(tile_y) * (tile_width / 2)
    return x, tile_y * row_height


def tile_to_world_xy(
    tile_x: float,
    tile_y: float,
    point=None,
    camera: Optional[CameraView] = None,
    layer: Optional[LayerData] = None,
    *,
    axis_x: AxisTransform = tile_to_world_x,
    axis_y: AxisTransform = tile_to_world_y,
    resolve_camera: CameraResolver = default_camera,
):
    """Convert tile coordinates to world coordinates, factoring in layer placement.

    Args:
        tile_x: Column index, in tiles. Unbounded; negatives are fine.
        tile_y: Row index, in tiles.
        point: Object with writable ``x``/``y`` to update in place. A new
            ``Vector2(0, 0)`` is created when omitted.
        camera: Camera whose scroll drives the parallax offset. When omitted and the
            layer is attached to a scene, ``resolve_camera`` supplies one.
        layer: Layer to place the tile on.
        axis_x: Horizontal transform used for orthogonal layers.
        axis_y: Vertical transform used for orthogonal layers.
        resolve_camera: Finds the default camera for a layer attached to a scene.
            Orthogonal layers leave camera resolution to ``axis_x``/``axis_y``.

    Returns:
        ``point`` (or the new Vector2) holding the world position. On a layer with an
        unrecognized orientation it is returned untouched.
    """
    if layer is None:
        raise TypeError("tile_to_world_xy() missing required argument: 'layer'")
    if point is None:
        point = Vector2(0, 0)

    orientation = layer.resolved_orientation

    if orientation is Orientation.ORTHOGONAL:
        point.x = axis_x(tile_x, camera, layer, orientation)
        point.y = axis_y(tile_y, camera, layer, orientation)
        return point

    if orientation is None:
        logger.warning("Unrecognized layer orientation %r; point left unchanged", layer.orientation)
        return point

    origin_x, origin_y, tile_width, tile_height = _layer_origin(layer, camera, resolve_camera)

    if orientation is Orientation.ISOMETRIC:
        dx, dy = isometric_to_world(tile_x, tile_y, tile_width, tile_height)
    elif orientation is Orientation.STAGGERED:
        dx, dy = staggered_to_world(tile_x, tile_y, tile_width, tile_height)
    else:
        dx, dy = hexagonal_to_world(tile_x, tile_y, tile_width, tile_height, layer.hex_side_length)

    point.x = origin_x + dx
    point.y = origin_y + dy
    return point
