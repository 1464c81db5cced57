import logging

import pytest

from tagcloud_layout import Point, Rectangle, Size
from tagcloud_layout.logging_utils import _safe_repr, debug_log_call

logger = logging.getLogger("tagcloud_layout.tests.logging")


def test_safe_repr_is_compact_for_geometry():
    rect = Rectangle(Point(1, 2), Size(3, 4))

    assert _safe_repr(rect) == "Rect(1,2 3x4)"
    assert _safe_repr(Size(3, 4)) == "3x4"
    assert _safe_repr(Point(1, 2)) == "(1, 2)"
    assert _safe_repr([rect] * 7).endswith("... (7 total)]")


def test_debug_log_call_records_entry_and_exit(caplog):
    @debug_log_call(logger)
    def grow(rect, by=1):
        return Rectangle(rect.location, Size(rect.width + by, rect.height + by))

    with caplog.at_level(logging.DEBUG, logger=logger.name):
        grow(Rectangle(Point(0, 0), Size(1, 1)), by=2)

    assert "Entering" in caplog.text
    assert "args=[Rect(0,0 1x1)], kwargs={by=2}" in caplog.text
    assert "-> Rect(0,0 3x3)" in caplog.text


def test_debug_log_call_reraises(caplog):
    @debug_log_call(logger, name="boom")
    def boom():
        raise ValueError("nope")

    with caplog.at_level(logging.DEBUG, logger=logger.name):
        with pytest.raises(ValueError):
            boom()

    assert "Exception in boom" in caplog.text


def test_debug_log_call_does_not_wrap_twice():
    def func():
        return 1

    once = debug_log_call(logger)(func)

    assert debug_log_call(logger)(once) is once


def test_debug_log_call_reports_elapsed_time(caplog):
    @debug_log_call(logger, name="measure", log_result=False)
    def measure():
        return None

    with caplog.at_level(logging.DEBUG, logger=logger.name):
        measure()

    exit_records = [r.getMessage() for r in caplog.records if r.getMessage().startswith("Exiting measure")]
    assert len(exit_records) == 1
    assert exit_records[0].endswith(" ms")


def test_debug_log_call_is_silent_above_debug(caplog):
    @debug_log_call(logger)
    def quiet():
        return 3

    with caplog.at_level(logging.INFO, logger=logger.name):
        assert quiet() == 3

    assert caplog.records == []
