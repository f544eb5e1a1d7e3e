"""Main module for the BTC price alert monitor."""
import asyncio
import logging

from btc_price_alert.alerts import SoundAlert
from btc_price_alert.config import MonitorSettings
from btc_price_alert.providers import KrakenProvider
from btc_price_alert.services import run_monitor

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Send log records to stderr in a human-readable format."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler()],
    )
    # Keep per-request httpx chatter out of INFO output.
    logging.getLogger("httpx").setLevel(logging.WARNING)


async def monitor(settings: MonitorSettings) -> None:
    """Create the provider and sink from settings and poll until cancelled."""
    sink = SoundAlert(
        settings.alert_sound_path,
        duration_seconds=settings.alert_duration_seconds,
    )
    async with KrakenProvider(
        pair=settings.pair,
        result_key=settings.result_key,
        base_url=settings.base_url,
        timeout=settings.request_timeout_seconds,
    ) as provider:
        logger.info(
            "Watching %s, alert sound %s", provider.pair, sink.sound_path
        )
        await run_monitor(provider, sink, settings)


def run() -> None:
    """Run the monitor. Use for `btc-price-alert` or `python -m btc_price_alert`."""
    settings = MonitorSettings.from_env()
    configure_logging(settings.log_level)
    logger.info("Starting Bitcoin Price Monitor")
    try:
        asyncio.run(monitor(settings))
    except KeyboardInterrupt:
        logger.info("Stopped")
