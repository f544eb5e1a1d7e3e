"""Cryptocurrency price providers."""
from btc_price_alert.providers.crypto.kraken import KrakenProvider

__all__ = ["KrakenProvider"]
