"""Raster preview of a layout."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence, Tuple, Union

from matplotlib.figure import Figure
from matplotlib.patches import Rectangle as RectanglePatch

from .geometry import Point, Rectangle

logger = logging.getLogger(__name__)


def render_layout(
    rects: Sequence[Rectangle],
    path: Union[str, Path],
    canvas: Tuple[int, int] = (700, 700),
    *,
    center: Optional[Point] = None,
    background: str = "black",
    edge_color: str = "darkblue",
    dpi: int = 100,
) -> Path:
    """Draw rectangle outlines on a ``canvas``-sized image and save it to ``path``.

    Image coordinates are used: the origin is the top-left corner and y grows
    downwards, matching the layouter.
    """

    width, height = canvas
    if width <= 0 or height <= 0:
        raise ValueError(f"canvas must have positive dimensions, got {canvas}")

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    # a bare Figure renders through Agg without touching the pyplot backend
    fig = Figure(figsize=(width / dpi, height / dpi), dpi=dpi)
    ax = fig.add_axes([0, 0, 1, 1])
    ax.set_facecolor(background)
    fig.patch.set_facecolor(background)
    for rect in rects:
        ax.add_patch(
            RectanglePatch(
                (rect.left, rect.top),
                rect.width,
                rect.height,
                fill=False,
                edgecolor=edge_color,
                linewidth=1,
            )
        )
    if center is not None:
        ax.plot([center.x], [center.y], marker="+", color="red", markersize=6)

    ax.set_xlim(0, width)
    ax.set_ylim(height, 0)
    ax.set_axis_off()
    fig.savefig(path, dpi=dpi, facecolor=background)

    logger.info("Saved layout of %d rectangle(s) to %s", len(rects), path)
    return path
