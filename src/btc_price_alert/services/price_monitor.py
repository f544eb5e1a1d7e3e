"""Price monitor decision rule.

All functions here are pure: they read a MonitorState and return a value or a
new MonitorState; nothing is mutated in place.
"""
from datetime import datetime

from btc_price_alert.providers.core import ParseError
from btc_price_alert.schemas import MonitorState


def relative_change(previous: float, current: float) -> float:
    """Return |current - previous| / previous.

    Raises:
        ParseError: If previous is not positive (a degenerate upstream price).
    """
    if previous <= 0:
        raise ParseError(f"Previous price must be positive, got {previous}")
    return abs(current - previous) / previous


def should_alert(state: MonitorState, current: float) -> bool:
    """Decide whether current moved far enough from the last observed price.

    The first observation only establishes the baseline. Increases and
    decreases of the same relative size behave identically; the threshold
    itself is inclusive.
    """
    if state.last_price is None:
        return False
    return relative_change(state.last_price, current) >= state.alert_threshold


def commit_price(state: MonitorState, price: float) -> MonitorState:
    """Return state with price stored as the last observed price."""
    return state.model_copy(update={"last_price": price})


def record_alert(state: MonitorState, when: datetime | None = None) -> MonitorState:
    """Return state with the alert time set to when (default: now, UTC)."""
    return state.model_copy(update={"last_alert_time": when or datetime.utcnow()})
