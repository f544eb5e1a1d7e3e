"""Kraken public API provider."""
from btc_price_alert.providers.crypto.kraken.kraken_provider import KrakenProvider

__all__ = ["KrakenProvider"]
