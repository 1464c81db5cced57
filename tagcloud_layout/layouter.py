"""Spiral placement of rectangles around a fixed cloud center."""

from __future__ import annotations

import logging
import math
from typing import Iterable, List, Optional, Tuple

from .config import get_layouter_options
from .geometry import Point, Rectangle, Size, intersects
from .model import InvalidArgument, LayouterOptions, PlacementExhausted

logger = logging.getLogger(__name__)


def spiral_point(center: Point, t: float) -> Point:
    """Return the point of the Archimedean spiral ``(t cos t, t sin t)`` around ``center``.

    Offsets are truncated toward zero so integral centers yield integral points.
    """

    return Point(center.x + int(t * math.cos(t)), center.y + int(t * math.sin(t)))


class SpiralPacker:
    """Places rectangles one by one along an outward spiral.

    The spiral parameter is shared by all calls to :meth:`place` and only
    ever grows: every probed candidate consumes one step whether it is
    accepted or not, so later rectangles start searching where the previous
    one stopped. Instances are not thread-safe.
    """

    def __init__(self, center: Point, options: Optional[LayouterOptions] = None) -> None:
        if not (center.x >= 0 and center.y >= 0):
            raise InvalidArgument("Coordinates of cloud center must be non-negative")
        if options is None:
            options = get_layouter_options()
        options.validate()

        self._center = center
        self._options = options
        self._placed: List[Rectangle] = []
        self._spiral_parameter = 0.0

    @property
    def center(self) -> Point:
        return self._center

    @property
    def options(self) -> LayouterOptions:
        return self._options

    @property
    def spiral_parameter(self) -> float:
        return self._spiral_parameter

    @property
    def rectangles(self) -> Tuple[Rectangle, ...]:
        """Placed rectangles in placement order."""
        return tuple(self._placed)

    def __len__(self) -> int:
        return len(self._placed)

    def place(self, size: Size) -> Rectangle:
        """Find a spot for ``size`` that overlaps no previously placed rectangle."""

        if not size.is_positive:
            raise InvalidArgument("Invalid size of rectangle: sides lengths must be positive")

        step = self._options.step
        max_attempts = self._options.max_attempts
        attempts = 0

        while True:
            candidate = Rectangle.from_center(spiral_point(self._center, self._spiral_parameter), size)
            self._spiral_parameter += step
            attempts += 1

            if not any(intersects(candidate, placed) for placed in self._placed):
                break

            if max_attempts is not None and attempts >= max_attempts:
                logger.warning(
                    "Gave up placing %sx%s after %d attempts (t=%g, placed=%d)",
                    size.width,
                    size.height,
                    attempts,
                    self._spiral_parameter,
                    len(self._placed),
                )
                raise PlacementExhausted(size, attempts, self._spiral_parameter)

        self._placed.append(candidate)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Placed #%d %sx%s at (%s, %s) after %d attempt(s), t=%g",
                len(self._placed),
                size.width,
                size.height,
                candidate.left,
                candidate.top,
                attempts,
                self._spiral_parameter,
            )
        return candidate

    put_next_rectangle = place

    def place_all(self, sizes: Iterable[Size]) -> List[Rectangle]:
        return [self.place(size) for size in sizes]


CircularCloudLayouter = SpiralPacker


__all__ = [
    "spiral_point",
    "SpiralPacker",
    "CircularCloudLayouter",
    "LayouterOptions",
    "InvalidArgument",
    "PlacementExhausted",
]
