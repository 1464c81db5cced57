import argparse
import logging
from typing import Optional, Sequence

import numpy as np

from tagcloud_layout import (
    InvalidArgument,
    LayouterOptions,
    PlacementExhausted,
    Point,
    SpiralPacker,
    random_sizes,
    render_layout,
    summarize,
)
from tagcloud_layout.logging_utils import debug_log_call

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Lay out random rectangles as a circular tag cloud")
    parser.add_argument(
        "--count",
        type=int,
        default=120,
        help="Number of rectangles to place (default: 120)",
    )
    parser.add_argument(
        "--center",
        type=int,
        nargs=2,
        metavar=("X", "Y"),
        default=(350, 350),
        help="Cloud center (default: 350 350)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=123,
        help="Random seed for rectangle sizes (default: 123)",
    )
    parser.add_argument(
        "--step",
        type=float,
        default=0.5,
        help="Spiral parameter increment per probed candidate (default: 0.5)",
    )
    parser.add_argument(
        "--max-attempts",
        type=int,
        help="Give up on a rectangle after this many probes (default: unbounded)",
    )
    parser.add_argument(
        "--output",
        help="Write a PNG preview of the layout to the given path",
    )
    parser.add_argument(
        "--canvas",
        type=int,
        nargs=2,
        metavar=("WIDTH", "HEIGHT"),
        default=(700, 700),
        help="Preview image size in pixels (default: 700 700)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    center = Point(*args.center)
    try:
        packer = SpiralPacker(center, LayouterOptions(step=args.step, max_attempts=args.max_attempts))
        sizes = random_sizes(args.count, np.random.default_rng(args.seed))
        logger.info("Placing %d rectangle(s) around (%d, %d)", len(sizes), center.x, center.y)
        rects = packer.place_all(sizes)
    except (InvalidArgument, PlacementExhausted) as exc:
        logger.error("%s", exc)
        raise SystemExit(1) from exc
    except ValueError as exc:
        parser.error(str(exc))

    if rects:
        stats = summarize(rects, center)
        logger.info(
            "Radius %.1f, density %.3f, compactness %.3f",
            stats.radius,
            stats.density,
            stats.compactness,
        )
        logger.info(
            "Quadrant fill ratios: %s",
            " ".join(f"{ratio:.3f}" for ratio in stats.quadrant_ratios),
        )
        if not stats.looks_circular:
            logger.warning("Layout does not look circular")
        if not stats.is_dense:
            logger.warning("Layout is sparser than expected")

    if args.output:
        render = debug_log_call(logger, name="render_layout")(render_layout)
        render(rects, args.output, tuple(args.canvas), center=center)


if __name__ == "__main__":
    main()
