"""Polling loop: fetch, decide, alert, commit, on a fixed interval.

The loop is strictly sequential; MonitorState is owned by the running loop and
threaded through run_cycle by value, so no locking is needed.
"""
import asyncio
import logging
from datetime import datetime

from btc_price_alert.alerts import AlertSinkABC
from btc_price_alert.config import MonitorSettings
from btc_price_alert.providers.core import (AlertError, FetchError,
                                            PriceProviderABC)
from btc_price_alert.schemas import MonitorState
from btc_price_alert.services.price_monitor import (commit_price,
                                                    record_alert,
                                                    should_alert)
from btc_price_alert.services.utils import interval_ticks

logger = logging.getLogger(__name__)


async def run_cycle(
    state: MonitorState,
    provider: PriceProviderABC,
    sink: AlertSinkABC,
) -> MonitorState:
    """Run one poll cycle and return the resulting state.

    A fetch failure is logged and returns state unchanged without alerting.
    An alert failure is logged; the fetched price is still committed.
    """
    try:
        current = await provider.fetch_price()
    except FetchError as e:
        logger.error("Failed to fetch price (%s error): %s", e.kind, e)
        return state

    logger.info("Current BTC price: $%.2f", current)

    try:
        alert = should_alert(state, current)
    except FetchError as e:
        logger.error("Cannot compare against last price (%s error): %s", e.kind, e)
        alert = False

    if alert:
        logger.info(
            "Price change threshold reached ($%.2f -> $%.2f)! Playing alert...",
            state.last_price,
            current,
        )
        try:
            sink.play_alert()
        except AlertError as e:
            logger.error("Failed to play alert sound: %s", e)
        state = record_alert(state, datetime.utcnow())

    return commit_price(state, current)


async def run_monitor(
    provider: PriceProviderABC,
    sink: AlertSinkABC,
    settings: MonitorSettings,
    *,
    max_cycles: int | None = None,
    stop_event: asyncio.Event | None = None,
) -> MonitorState:
    """Poll provider every settings.poll_interval_seconds until stopped.

    Runs forever unless max_cycles is reached or stop_event is set.

    Returns:
        The final MonitorState.
    """
    state = MonitorState(alert_threshold=settings.alert_threshold)
    logger.info(
        "Monitoring every %.1fs, alert threshold %.5f%%",
        settings.poll_interval_seconds,
        settings.alert_threshold * 100,
    )
    cycles = 0
    async for _ in interval_ticks(settings.poll_interval_seconds, stop_event=stop_event):
        state = await run_cycle(state, provider, sink)
        cycles += 1
        if max_cycles is not None and cycles >= max_cycles:
            break
    return state
