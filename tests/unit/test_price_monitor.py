"""Unit tests for the price monitor decision rule.

Coverage:
- No alert before a baseline exists
- Inclusive threshold boundary
- Symmetry of increases and decreases
- Pure state transitions (commit_price, record_alert)
- Degenerate previous price
"""
from datetime import datetime

import pytest
from pydantic import ValidationError

from btc_price_alert.providers.core import ParseError
from btc_price_alert.schemas import MonitorState
from btc_price_alert.services.price_monitor import (commit_price,
                                                    record_alert,
                                                    relative_change,
                                                    should_alert)


def _state(last_price: float | None, threshold: float = 0.001) -> MonitorState:
    return MonitorState(last_price=last_price, alert_threshold=threshold)


# =============================================================================
# DECISION RULE
# =============================================================================


def test_first_observation_never_alerts():
    assert should_alert(_state(None), 30_000.0) is False


def test_change_equal_to_threshold_alerts():
    # 50 / 50_000 == 0.001 exactly
    assert should_alert(_state(50_000.0), 50_050.0) is True


def test_change_just_below_threshold_does_not_alert():
    assert should_alert(_state(50_000.0), 50_049.0) is False
    assert should_alert(_state(50_000.0), 50_049.99) is False


def test_decrease_and_increase_are_symmetric():
    state = _state(50_000.0)
    assert should_alert(state, 50_050.0) == should_alert(state, 49_950.0)
    assert should_alert(state, 50_049.0) == should_alert(state, 49_951.0)


@pytest.mark.parametrize(
    "previous,current,threshold",
    [
        (100.0, 100.0, 0.00001),
        (100.0, 150.0, 0.5),
        (100.0, 50.0, 0.5),
        (64_123.45, 64_124.10, 0.00001),
        (1.0, 3.0, 1.0),
    ],
)
def test_matches_relative_change_formula(previous, current, threshold):
    expected = abs(current - previous) / previous >= threshold
    assert should_alert(_state(previous, threshold), current) is expected


def test_unchanged_price_does_not_alert():
    assert should_alert(_state(42_000.0, 0.00001), 42_000.0) is False


def test_relative_change_rejects_degenerate_previous_price():
    with pytest.raises(ParseError):
        relative_change(0.0, 10.0)
    with pytest.raises(ParseError):
        relative_change(-5.0, 10.0)


# =============================================================================
# STATE
# =============================================================================


def test_should_alert_does_not_mutate_state():
    state = _state(50_000.0)
    should_alert(state, 60_000.0)
    assert state.last_price == 50_000.0


def test_commit_price_returns_new_state():
    state = _state(None)
    new_state = commit_price(state, 30_000.0)
    assert new_state.last_price == 30_000.0
    assert new_state.alert_threshold == state.alert_threshold
    assert state.last_price is None


def test_record_alert_sets_time():
    when = datetime(2024, 1, 1, 12, 0, 0)
    state = record_alert(_state(50_000.0), when)
    assert state.last_alert_time == when
    assert state.last_price == 50_000.0


def test_state_is_frozen():
    state = _state(50_000.0)
    with pytest.raises(ValidationError):
        state.last_price = 1.0


@pytest.mark.parametrize("threshold", [0.0, -0.1, 1.5])
def test_threshold_must_be_in_unit_interval(threshold):
    with pytest.raises(ValidationError):
        MonitorState(alert_threshold=threshold)
