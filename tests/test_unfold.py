import numpy as np
import pytest

from flake.core.geometry import Point
from flake.core.polygon import Polygon
from flake.core.unfold import unfold_sections


@pytest.fixture
def sliver() -> Polygon:
    return Polygon([Point(0, 0), Point(10, 0), Point(10, 1)])


def test_sections_alternate_mirror_and_rotate(sliver):
    sections = unfold_sections(sliver, sections=4)
    assert len(sections) == 4
    for s in sections:
        assert s.shape == (3, 2)

    np.testing.assert_allclose(sections[0], [[0, 0], [10, 0], [10, 1]], atol=1e-9)
    # mirrored to (10, -1), then rotated by 90 degrees
    np.testing.assert_allclose(sections[1], [[0, 0], [0, 10], [1, 10]], atol=1e-9)
    np.testing.assert_allclose(sections[2], [[0, 0], [-10, 0], [-10, -1]], atol=1e-9)


def test_sections_are_relative_to_pivot(sliver):
    sliver.translate(50, -20)
    sections = unfold_sections(sliver, sections=4)
    np.testing.assert_allclose(sections[0], [[0, 0], [10, 0], [10, 1]], atol=1e-9)


def test_unfold_does_not_modify_polygon(sliver):
    before = sliver.current_vertices()
    unfold_sections(sliver)
    assert sliver.current_vertices() == before
    assert not sliver.transform.flipped


def test_default_twelve_sections(sliver):
    assert len(unfold_sections(sliver)) == 12


@pytest.mark.parametrize("sections", [0, 1, 3, 11])
def test_sections_must_be_even(sliver, sections):
    with pytest.raises(ValueError):
        unfold_sections(sliver, sections=sections)
