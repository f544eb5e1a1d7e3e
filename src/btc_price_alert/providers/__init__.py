"""Price providers.

All providers implement PriceProviderABC and return PriceQuote objects.

Example:
    async with KrakenProvider(pair="XBTUSD") as provider:
        price = await provider.fetch_price()
        print(f"BTC: ${price:.2f}")
"""
from btc_price_alert.providers.core import PriceProviderABC
from btc_price_alert.providers.crypto import KrakenProvider

__all__ = ["KrakenProvider", "PriceProviderABC"]
