"""
Unfolded snowflake geometry.

The preview renderer draws these sections; this module only computes them.
"""
from __future__ import annotations

import logging
import math

import numpy as np

from flake.core.polygon import Polygon

logger = logging.getLogger(__name__)

DEFAULT_SECTIONS = 12


def _rotation_matrix(theta: float) -> np.ndarray:
    c = math.cos(theta)
    s = math.sin(theta)
    return np.array([[c, -s], [s, c]], dtype=np.float64)


def unfold_sections(polygon: Polygon, sections: int = DEFAULT_SECTIONS) -> list[np.ndarray]:
    """
    Copies of the current polygon that tile the unfolded flake.

    Each copy is taken relative to the pivot. Odd copies are mirrored about
    the pivot's horizontal axis, then copy i is rotated by i * 2*pi / sections.
    The polygon itself is not modified.

    :param polygon: Folded polygon
    :param sections: Number of copies. Must be even so that the last copy
                     mirrors back onto the first.
    :return: One (n, 2) array per section, centered on the pivot
    """
    if sections < 2 or sections % 2:
        raise ValueError(f"sections must be an even number >= 2, got {sections}")

    pivot = polygon.pivot
    base = np.array([p.to_tuple() for p in polygon.current_vertices()], dtype=np.float64)
    base -= (pivot.x, pivot.y)
    mirrored = base * (1.0, -1.0)

    step = 2 * math.pi / sections
    result = []
    for i in range(sections):
        src = mirrored if i % 2 else base
        result.append(src @ _rotation_matrix(i * step).T)
    logger.debug("unfolded %d vertices into %d sections", len(base), sections)
    return result
