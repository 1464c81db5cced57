from __future__ import annotations

import logging
import reprlib
import time
from functools import wraps
from typing import Any, Callable, MutableMapping, Optional, Sequence, TypeVar, cast

import numpy as np

from .geometry import Point, Rectangle, Size

F = TypeVar("F", bound=Callable[..., Any])

_repr = reprlib.Repr()
_repr.maxother = 160
_repr.maxlist = 10
_repr.maxtuple = 10


def _safe_repr(value: Any, *, max_items: int = 5) -> str:
    if isinstance(value, Rectangle):
        return f"Rect({value.left},{value.top} {value.width}x{value.height})"
    if isinstance(value, Size):
        return f"{value.width}x{value.height}"
    if isinstance(value, Point):
        return f"({value.x}, {value.y})"
    if isinstance(value, np.ndarray):
        return f"ndarray(shape={tuple(value.shape)}, dtype={value.dtype})"

    if isinstance(value, (list, tuple)):
        open_br, close_br = ("(", ")") if isinstance(value, tuple) else ("[", "]")
        items = [_safe_repr(item) for item in value[:max_items]]
        if len(value) > max_items:
            items.append(f"... ({len(value)} total)")
        return f"{open_br}{', '.join(items)}{close_br}"

    return _repr.repr(value)


def _elapsed_ms(started: float) -> float:
    return (time.perf_counter() - started) * 1000.0


def _format_arguments(args: Sequence[Any], kwargs: MutableMapping[str, Any]) -> str:
    parts = []
    if args:
        parts.append("args=[" + ", ".join(_safe_repr(arg) for arg in args) + "]")
    if kwargs:
        parts.append(
            "kwargs={" + ", ".join(f"{key}={_safe_repr(value)}" for key, value in kwargs.items()) + "}"
        )
    if not parts:
        return "no-args"
    return ", ".join(parts)


def debug_log_call(
    logger: logging.Logger, *, name: Optional[str] = None, log_result: bool = True
) -> Callable[[F], F]:
    """Wrap a layout helper so each call is traced at DEBUG level.

    Arguments and results go through :func:`_safe_repr`, so a call on a few
    hundred rectangles logs ``Rect(x,y wxh)`` previews rather than full
    dataclass reprs. Every record carries the call's wall time in
    milliseconds, which is how slow summaries or renders of large clouds show
    up in the log. Exceptions are logged with their traceback and re-raised.
    """

    def decorator(func: F) -> F:
        if getattr(func, "_debug_logging_wrapped", False):
            return func

        label = name or getattr(func, "__qualname__", getattr(func, "__name__", "<callable>"))

        @wraps(func)
        def traced(*args: Any, **kwargs: Any):
            if not logger.isEnabledFor(logging.DEBUG):
                return func(*args, **kwargs)

            logger.debug("Entering %s (%s)", label, _format_arguments(args, kwargs))
            started = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception:
                logger.exception("Exception in %s after %.1f ms", label, _elapsed_ms(started))
                raise
            if log_result:
                logger.debug("Exiting %s in %.1f ms -> %s", label, _elapsed_ms(started), _safe_repr(result))
            else:
                logger.debug("Exiting %s in %.1f ms", label, _elapsed_ms(started))
            return result

        setattr(traced, "_debug_logging_wrapped", True)
        return cast(F, traced)

    return decorator
