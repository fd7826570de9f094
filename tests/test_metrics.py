"""Tests for error accumulation and the session summary."""

import math

import pytest

from dogm_eval.evaluation import (
    ErrorVector,
    SessionState,
    compute_precision_summary,
    format_summary
)


def test_accumulate_adds_absolute_errors():
    state = SessionState()

    state.accumulate(ErrorVector(x=-2.0, y=0.0, v_x=0.0, v_y=0.0))
    state.accumulate(ErrorVector(x=1.0, y=-3.0, v_x=0.5, v_y=-0.5))

    assert state.x == pytest.approx(3.0)
    assert state.y == pytest.approx(3.0)
    assert state.v_x == pytest.approx(0.5)
    assert state.v_y == pytest.approx(0.5)
    assert state.num_detections == 2
    assert state.num_unassigned_detections == 0


def test_record_unassigned_leaves_sums():
    state = SessionState()
    state.record_unassigned()

    assert state.num_unassigned_detections == 1
    assert state.num_detections == 0
    assert state.x == 0.0


def test_reset():
    state = SessionState()
    state.accumulate(ErrorVector(x=1.0, y=1.0, v_x=1.0, v_y=1.0))
    state.record_unassigned()

    state.reset()

    assert state == SessionState()


def test_summary_means():
    state = SessionState()
    state.accumulate(ErrorVector(x=-2.0, y=0.0, v_x=0.0, v_y=0.0))

    summary = compute_precision_summary(state, max_possible_detections=4)

    assert summary.has_detections
    assert summary.mean_position_error == pytest.approx((2.0, 0.0))
    assert summary.mean_velocity_error == pytest.approx((0.0, 0.0))
    assert summary.max_possible_detections == 4
    assert summary.to_dict()['mean_position_error'] == pytest.approx([2.0, 0.0])


def test_summary_without_detections_is_defined():
    state = SessionState()
    state.record_unassigned()

    summary = compute_precision_summary(state, max_possible_detections=2)

    assert not summary.has_detections
    assert summary.mean_position_error is None
    assert summary.mean_velocity_error is None
    assert summary.num_unassigned_detections == 1

    text = format_summary(summary)
    assert "No matched detections" in text
    assert "nan" not in text.lower()
    assert "Detections unassigned by evaluator: 1" in text


def test_summary_text_with_detections():
    state = SessionState()
    state.accumulate(ErrorVector(x=-2.0, y=1.0, v_x=0.25, v_y=-0.75))

    text = format_summary(compute_precision_summary(state, max_possible_detections=10))

    assert "Position: 2.0000 1.0000" in text
    assert "Velocity: 0.2500 0.7500" in text
    assert "Maximum possible detections: 10" in text
    assert not any(math.isnan(v) for v in (state.x, state.y, state.v_x, state.v_y))
