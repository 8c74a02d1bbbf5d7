import numpy as np
import pytest

from packing.core.errors import DegenerateIntervalError
from packing.core.panel import PanelSurface
from packing.frames.normalizer import normalize_panel

X = [0.0, 1.0]
Y = [2.0, 4.0]
Z = [5.0, 8.0]


def _normalize(buildable_dir, normal_face):
    surface = PanelSurface(buildable_dir, normal_face, available_x=X, available_y=Y, available_z=Z)
    return normalize_panel(surface)


@pytest.mark.parametrize("buildable_dir, normal_face, width, height, length", [
    ("XZ", "+Y", [-0.0, -1.0], Z, Y),
    ("XZ", "-Y", X, Z, Y),
    ("YZ", "+X", Y, Z, X),
    ("YZ", "-X", Y, Z, X),
    ("XY", "+Z", X, Y, Z),
    ("XY", "-Z", X, Y, Z),
])
def test_normalizer_table(buildable_dir, normal_face, width, height, length):
    panel = _normalize(buildable_dir, normal_face)
    np.testing.assert_array_equal(panel.width, width)
    np.testing.assert_array_equal(panel.height, height)
    np.testing.assert_array_equal(panel.length, length)


def test_oracle_extents_keep_height_sign_only():
    surface = PanelSurface("YZ", "+X",
                           available_x=[1.0, 0.5],
                           available_y=[0.0, -2.0],
                           available_z=[1.0, 0.0])
    panel = normalize_panel(surface)
    assert panel.width_extent == pytest.approx(2.0)
    assert panel.length_extent == pytest.approx(0.5)
    assert panel.height_extent == pytest.approx(-1.0)


@pytest.mark.parametrize("interval", [
    [0.5, 0.5],
    [0.0],
    [0.0, 1.0, 2.0],
    [0.0, np.nan],
    [-np.inf, 1.0],
])
def test_degenerate_intervals_raise(interval):
    surface = PanelSurface("YZ", "+X", available_x=X, available_y=interval, available_z=Z)
    with pytest.raises(DegenerateIntervalError) as excinfo:
        normalize_panel(surface)
    assert excinfo.value.axis == "available_y"


def test_surface_requires_every_interval():
    with pytest.raises(TypeError):
        PanelSurface("YZ", "+X", available_x=X, available_y=Y)
    with pytest.raises(TypeError):
        PanelSurface("XY", "+Z")


def test_surface_rejects_unknown_orientation():
    with pytest.raises(ValueError):
        PanelSurface("XX", "+X", X, Y, Z)
    with pytest.raises(ValueError):
        PanelSurface("XY", "+W", X, Y, Z)
