import numpy as np
import pytest

from packing.core.component import Component
from packing.core.config import PackingConfig
from packing.core.errors import OracleContractError
from packing.frames.normalizer import NormalizedPanel
from packing.geometry.projection import project_components
from packing.oracle.adapter import PackingOracleAdapter


class RecordingOracle:
    """Fits everything, stacking rectangles along the width."""

    def __init__(self, expand=(0.0, 0.1, 0.2, 0.3)):
        self.calls = []
        self.expand = expand

    def __call__(self, dims, masses, tolerance, width, length, height):
        self.calls.append(dict(dims=dims, masses=masses, tolerance=tolerance,
                               width=width, length=length, height=height))
        cg = []
        offset = 0.0
        for h, w, l in dims:
            cg.append([l / 2, offset + w / 2, h / 2])
            offset += w + tolerance
        return cg, dims[:, ::-1], list(self.expand), [True] * len(dims)


PANEL = NormalizedPanel(width=np.array([0.0, -2.0]),
                        height=np.array([1.0, 0.0]),
                        length=np.array([1.0, 0.5]))


def _rectangles():
    return project_components([
        Component("A", "Rectangle", [0.1, 0.2, 0.3], 1.0),
        Component("B", "Sphere", 0.05, 2.0),
    ])


def test_oracle_receives_absolute_width_length_and_signed_height():
    oracle = RecordingOracle()
    PackingOracleAdapter(oracle, PackingConfig(tolerance=0.02)).pack(_rectangles(), PANEL)

    call = oracle.calls[0]
    assert call['width'] == pytest.approx(2.0)
    assert call['length'] == pytest.approx(0.5)
    assert call['height'] == pytest.approx(-1.0)
    assert call['tolerance'] == pytest.approx(0.02)
    np.testing.assert_allclose(call['dims'], [[0.1, 0.2, 0.3], [0.1, 0.1, 0.1]])
    np.testing.assert_allclose(call['masses'], [1.0, 2.0])


def test_results_are_mapped_back_onto_uids():
    rects = _rectangles()
    outcome = PackingOracleAdapter(RecordingOracle()).pack(rects, PANEL)

    assert list(outcome.rectangles) == list(rects)
    first = outcome.rectangles[next(iter(rects))]
    assert first.fit is True
    # Oracle reoriented the rectangle
    assert first.dimensions == pytest.approx((0.3, 0.2, 0.1))
    np.testing.assert_allclose(first.center_of_gravity, [0.15, 0.1, 0.05])
    np.testing.assert_allclose(outcome.expand, [0.0, 0.1, 0.2, 0.3])
    assert all(outcome.fit.values())


def test_empty_batch_skips_the_oracle():
    oracle = RecordingOracle()
    outcome = PackingOracleAdapter(oracle).pack({}, PANEL)
    assert oracle.calls == []
    assert outcome.rectangles == {}
    np.testing.assert_array_equal(outcome.expand, np.zeros(4))
    assert outcome.centers.shape == (0, 3)


def test_misaligned_fit_mask_raises():
    def oracle(dims, masses, tolerance, width, length, height):
        return np.zeros((len(dims), 3)), dims, np.zeros(4), [True]

    with pytest.raises(OracleContractError):
        PackingOracleAdapter(oracle).pack(_rectangles(), PANEL)


def test_short_expansion_vector_raises():
    def oracle(dims, masses, tolerance, width, length, height):
        return np.zeros((len(dims), 3)), dims, np.zeros(3), [True] * len(dims)

    with pytest.raises(OracleContractError):
        PackingOracleAdapter(oracle).pack(_rectangles(), PANEL)
