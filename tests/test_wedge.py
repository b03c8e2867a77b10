import math

import pytest

from flake.core.geometry import Point
from flake.core.wedge import Wedge, WedgeDimensions


def test_wedge_vertices_and_pivot():
    wedge = Wedge(2.0, 3.0, 10.0, math.pi / 3)
    base = 2 * math.tan(math.pi / 6) * 10.0

    v = wedge.current_vertices()
    assert v[0] == Point(2.0, 3.0)
    assert v[1].x == pytest.approx(12.0)
    assert v[1].y == pytest.approx(3.0 + base / 2)
    assert v[2].x == pytest.approx(12.0)
    assert v[2].y == pytest.approx(3.0 - base / 2)
    assert wedge.pivot == Point(2.0, 3.0)


def test_wedge_dimensions():
    wedge = Wedge(0, 0, 90.0, math.radians(30))
    dims = wedge.dimensions
    assert isinstance(dims, WedgeDimensions)
    assert dims.length == 90.0
    assert dims.base == pytest.approx(2 * math.tan(math.radians(15)) * 90.0)


def test_wedge_reflects_about_apex():
    wedge = Wedge(0, 5, 10, math.pi / 2)
    before = wedge.current_vertices()
    wedge.reflect_through_pivot()
    after = wedge.current_vertices()
    # the wedge is symmetric about its apex line: the two base corners swap
    assert after[0] == before[0]
    assert after[1].y == pytest.approx(before[2].y)
    assert after[2].y == pytest.approx(before[1].y)


@pytest.mark.parametrize("height, angle", [(0, 1.0), (-5, 1.0), (10, 0.0), (10, math.pi)])
def test_wedge_rejects_bad_shape(height, angle):
    with pytest.raises(ValueError):
        Wedge(0, 0, height, angle)
