"""Shared fixtures; keeps the flat modules importable without an install."""
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from camera import CameraView, SceneCameras
from layer_data import TilemapLayerRef


@pytest.fixture
def scene():
    return SceneCameras(main=CameraView(scroll_x=100, scroll_y=40))


@pytest.fixture
def tilemap_layer(scene):
    return TilemapLayerRef(
        x=10,
        y=20,
        scale_x=2.0,
        scale_y=0.5,
        scroll_factor_x=0.5,
        scroll_factor_y=0.25,
        scene=scene,
    )
