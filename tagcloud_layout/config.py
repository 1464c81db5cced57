"""Process-wide default options for new layouters."""

from __future__ import annotations

import copy

from .model import LayouterOptions

_LAYOUTER_OPTIONS = LayouterOptions()


def get_layouter_options() -> LayouterOptions:
    return copy.deepcopy(_LAYOUTER_OPTIONS)


def set_layouter_options(options: LayouterOptions) -> None:
    global _LAYOUTER_OPTIONS
    options.validate()
    _LAYOUTER_OPTIONS = copy.deepcopy(options)
