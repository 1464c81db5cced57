"""Random rectangle sizes for demos and tests."""

from __future__ import annotations

from typing import List, Tuple

import numpy as np

from .geometry import Size


def random_sizes(
    count: int,
    rng: np.random.Generator,
    width_range: Tuple[int, int] = (30, 100),
    height_range: Tuple[int, int] = (10, 40),
) -> List[Size]:
    """Draw ``count`` integer sizes; each range is ``[low, high)``."""

    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    for name, (low, high) in (("width", width_range), ("height", height_range)):
        if low <= 0 or high <= low:
            raise ValueError(f"{name} range must satisfy 0 < low < high, got ({low}, {high})")

    widths = rng.integers(width_range[0], width_range[1], size=count)
    heights = rng.integers(height_range[0], height_range[1], size=count)
    return [Size(int(w), int(h)) for w, h in zip(widths, heights)]
