"""Options and error types shared by the layouter and its configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .geometry import Size


class InvalidArgument(ValueError):
    """Raised when a center, size or option value is outside its domain."""


class PlacementExhausted(RuntimeError):
    """Raised when a capped spiral search runs out of attempts."""

    def __init__(self, size: Size, attempts: int, spiral_parameter: float) -> None:
        super().__init__(
            f"Could not place rectangle {size.width}x{size.height} "
            f"after {attempts} attempts (spiral parameter reached {spiral_parameter:g})"
        )
        self.size = size
        self.attempts = attempts
        self.spiral_parameter = spiral_parameter


@dataclass
class LayouterOptions:
    """Tuning knobs for :class:`~tagcloud_layout.layouter.SpiralPacker`.

    ``step`` is the increment of the spiral parameter after every probed
    candidate. ``max_attempts`` caps the candidates a single placement may
    probe; ``None`` keeps the search unbounded.
    """

    step: float = 0.5
    max_attempts: Optional[int] = None

    def validate(self) -> None:
        if not self.step > 0:
            raise InvalidArgument(f"Spiral step must be positive, got {self.step!r}")
        if self.max_attempts is not None and self.max_attempts <= 0:
            raise InvalidArgument(
                f"max_attempts must be a positive integer or None, got {self.max_attempts!r}"
            )
