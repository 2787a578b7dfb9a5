from __future__ import annotations

import io
import logging

import pytest

from cubicseg import (CubicSegError, CubicSegValueError,
                      DegenerateSegmentError, SplinePolynomial,
                      hide_segment_messages, show_segment_messages)
from cubicseg.logging import LOGGER_ID, create_warning


def _stream_handler():
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter("%(name)s|%(levelname)s|%(message)s"))
    return stream, handler


def test_exception_hierarchy():
    assert issubclass(CubicSegValueError, ValueError)
    assert issubclass(DegenerateSegmentError, CubicSegValueError)
    assert not issubclass(DegenerateSegmentError, CubicSegError)


def test_create_warning():
    with pytest.warns(UserWarning, match="check this"):
        create_warning("check this")
    with pytest.warns(RuntimeWarning):
        create_warning("check this", RuntimeWarning)


def test_show_segment_messages(segment_messages):
    stream, handler = _stream_handler()
    assert show_segment_messages(handler) is handler

    SplinePolynomial.from_slopes_delta(0.0, 1.0, 1.0, 2.0)
    SplinePolynomial.from_curvatures_delta(2.0, 4.0, 2.0, 4.0)

    output = stream.getvalue()
    assert f"{LOGGER_ID}.polynomial|DEBUG|from_slopes: dx is zero" in output
    assert "from_curvatures" not in output
    assert logging.getLogger(LOGGER_ID).level == logging.DEBUG
    assert handler not in logging.getLogger().handlers


def test_show_segment_messages_replaces_handler(segment_messages):
    first_stream, first = _stream_handler()
    second_stream, second = _stream_handler()
    show_segment_messages(first)
    show_segment_messages(second)

    SplinePolynomial.from_curvatures_delta(0.0, 1.0, 1.0, 2.0)

    logger = logging.getLogger(LOGGER_ID)
    assert first not in logger.handlers
    assert second in logger.handlers
    assert "from_curvatures: dx is zero" not in first_stream.getvalue()
    assert "from_curvatures: dx is zero" in second_stream.getvalue()


def test_show_segment_messages_default_handler(segment_messages):
    handler = show_segment_messages(level=logging.INFO)
    assert isinstance(handler, logging.StreamHandler)
    assert handler.level == logging.INFO
    assert handler in logging.getLogger(LOGGER_ID).handlers


def test_hide_segment_messages(segment_messages):
    stream, handler = _stream_handler()
    show_segment_messages(handler)
    hide_segment_messages()

    SplinePolynomial.from_slopes_delta(0.0, 1.0, 1.0, 2.0)

    logger = logging.getLogger(LOGGER_ID)
    assert handler not in logger.handlers
    assert logger.level == logging.NOTSET
    assert "dx is zero" not in stream.getvalue()
