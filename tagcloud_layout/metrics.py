"""Shape statistics for a finished layout.

These are the checks used to judge whether a cloud "looks like a circle":
every quarter of the bounding circle should be filled to at least a quarter
of its area, and the rectangles together should cover a reasonable share
of the circle.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from itertools import combinations
from typing import List, Sequence, Tuple

import numpy as np
from scipy.spatial import ConvexHull, QhullError

from .geometry import Point, Rectangle, Size, distance, intersection_area, intersects
from .logging_utils import debug_log_call

logger = logging.getLogger(__name__)

CIRCULARITY_THRESHOLD = 0.25
DENSITY_THRESHOLD = 0.3


@dataclass(frozen=True)
class CloudStats:
    count: int
    radius: float
    density: float
    quadrant_ratios: Tuple[float, float, float, float]
    compactness: float

    @property
    def looks_circular(self) -> bool:
        return all(ratio >= CIRCULARITY_THRESHOLD for ratio in self.quadrant_ratios)

    @property
    def is_dense(self) -> bool:
        return self.density >= DENSITY_THRESHOLD


def _require_rectangles(rects: Sequence[Rectangle]) -> None:
    if not rects:
        raise ValueError("Layout statistics require at least one rectangle")


def _corner_array(rects: Sequence[Rectangle]) -> np.ndarray:
    return np.array(
        [corner.as_tuple() for rect in rects for corner in rect.corners()],
        dtype=float,
    )


def cloud_radius(rects: Sequence[Rectangle], center: Point) -> float:
    """Largest distance from ``center`` to any rectangle corner."""

    _require_rectangles(rects)
    return max(distance(corner, center) for rect in rects for corner in rect.corners())


def circle_area(radius: float) -> float:
    return math.pi * radius * radius


def density(rects: Sequence[Rectangle], center: Point) -> float:
    """Share of the enclosing circle covered by the rectangles."""

    area = circle_area(cloud_radius(rects, center))
    if area == 0:
        return 0.0
    return float(sum(rect.area for rect in rects)) / area


def quadrant_area_ratios(rects: Sequence[Rectangle], center: Point) -> Tuple[float, float, float, float]:
    """Fill of each ``radius x radius`` square around ``center`` relative to a quarter circle.

    Order: top-left, top-right, bottom-left, bottom-right.
    """

    radius = int(cloud_radius(rects, center))
    quarter = circle_area(radius) / 4
    if quarter == 0:
        return (0.0, 0.0, 0.0, 0.0)
    side = Size(radius, radius)
    quadrants = (
        Rectangle(Point(center.x - radius, center.y - radius), side),
        Rectangle(Point(center.x, center.y - radius), side),
        Rectangle(Point(center.x - radius, center.y), side),
        Rectangle(Point(center.x, center.y), side),
    )
    ratios = [sum(intersection_area(rect, quadrant) for rect in rects) / quarter for quadrant in quadrants]
    return tuple(float(ratio) for ratio in ratios)  # type: ignore[return-value]


def hull_compactness(rects: Sequence[Rectangle]) -> float:
    """Isoperimetric quotient ``4*pi*A / P**2`` of the corners' convex hull.

    1.0 for a perfect disc, smaller for elongated shapes.
    """

    _require_rectangles(rects)
    points = _corner_array(rects)
    try:
        hull = ConvexHull(points)
    except QhullError:
        return 0.0
    # for 2-D input scipy reports the perimeter as ``area`` and the area as ``volume``
    perimeter = float(hull.area)
    if perimeter == 0:
        return 0.0
    return 4 * math.pi * float(hull.volume) / (perimeter * perimeter)


def overlapping_pairs(rects: Sequence[Rectangle]) -> List[Tuple[int, int]]:
    return [(i, j) for (i, a), (j, b) in combinations(enumerate(rects), 2) if intersects(a, b)]


@debug_log_call(logger)
def summarize(rects: Sequence[Rectangle], center: Point) -> CloudStats:
    return CloudStats(
        count=len(rects),
        radius=cloud_radius(rects, center),
        density=density(rects, center),
        quadrant_ratios=quadrant_area_ratios(rects, center),
        compactness=hull_compactness(rects),
    )


__all__ = [
    "CIRCULARITY_THRESHOLD",
    "DENSITY_THRESHOLD",
    "CloudStats",
    "cloud_radius",
    "circle_area",
    "density",
    "quadrant_area_ratios",
    "hull_compactness",
    "overlapping_pairs",
    "summarize",
]
