from .geometry import Point, Size, Rectangle, intersects, intersection, intersection_area, distance
from .model import InvalidArgument, PlacementExhausted, LayouterOptions
from .config import get_layouter_options, set_layouter_options
from .layouter import SpiralPacker, CircularCloudLayouter, spiral_point
from .metrics import (
    CloudStats,
    cloud_radius,
    circle_area,
    density,
    quadrant_area_ratios,
    hull_compactness,
    overlapping_pairs,
    summarize,
)
from .sampling import random_sizes
from .render import render_layout

__all__ = [
    'Point',
    'Size',
    'Rectangle',
    'intersects',
    'intersection',
    'intersection_area',
    'distance',
    'InvalidArgument',
    'PlacementExhausted',
    'LayouterOptions',
    'get_layouter_options',
    'set_layouter_options',
    'SpiralPacker',
    'CircularCloudLayouter',
    'spiral_point',
    'CloudStats',
    'cloud_radius',
    'circle_area',
    'density',
    'quadrant_area_ratios',
    'hull_compactness',
    'overlapping_pairs',
    'summarize',
    'random_sizes',
    'render_layout',
]
