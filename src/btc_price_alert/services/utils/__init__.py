"""Service helpers."""
from btc_price_alert.services.utils.ticks import interval_ticks

__all__ = ["interval_ticks"]
