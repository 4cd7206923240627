import math

import pytest

from layer_data import LayerConfigError, LayerData, Orientation, TilemapLayerRef, parse_orientation


@pytest.mark.parametrize(
    "value, expected",
    [
        (Orientation.HEXAGONAL, Orientation.HEXAGONAL),
        ("isometric", Orientation.ISOMETRIC),
        ("staggered", Orientation.STAGGERED),
        ("Isometric", None),
        (" staggered ", None),
        ("ORTHOGONAL", None),
        ("diamond", None),
        (None, None),
        (3, None),
    ],
)
def test_parse_orientation(value, expected):
    """Only enum members and their exact names are recognized."""
    assert parse_orientation(value) is expected


def test_tilemap_layer_defaults_are_identity_transform():
    """A bare layer ref adds no offset, scale or parallax."""
    ref = TilemapLayerRef()
    assert (ref.x, ref.y) == (0.0, 0.0)
    assert (ref.scale_x, ref.scale_y) == (1.0, 1.0)
    assert (ref.scroll_factor_x, ref.scroll_factor_y) == (1.0, 1.0)
    assert ref.scene is None


def test_construction_accepts_anything_until_validated():
    """Bad layers build fine and only fail once validated."""
    layer = LayerData(orientation="sideways", base_tile_width=0, base_tile_height=-1)
    assert layer.resolved_orientation is None
    with pytest.raises(LayerConfigError, match="Unknown orientation"):
        layer.validate()


def test_validate_rejects_case_variant_orientation():
    with pytest.raises(LayerConfigError):
        LayerData("Hexagonal", 32, 34, hex_side_length=10).validate()


def test_validate_accepts_hex_layer():
    LayerData(Orientation.HEXAGONAL, 32, 34, hex_side_length=10).validate()
    LayerData("orthogonal", 16, 16).validate()


@pytest.mark.parametrize(
    "width, height, side",
    [
        (0, 32, 0),
        (32, -4, 0),
        (math.inf, 32, 0),
        (32, math.nan, 0),
        (32, 32, -1),
        (32, 20, 21),
    ],
)
def test_validate_rejects_degenerate_dimensions(width, height, side):
    """Non-positive, non-finite or oversized hex dimensions raise ValueError."""
    layer = LayerData("hexagonal", width, height, hex_side_length=side)
    with pytest.raises(ValueError):
        layer.validate()
