"""Core provider abstractions."""
from btc_price_alert.providers.core.error_mapper import FetchErrorMapper
from btc_price_alert.providers.core.exceptions import (AlertError, ApiError,
                                                        FetchError, ParseError,
                                                        PriceAlertError,
                                                        TransportError)
from btc_price_alert.providers.core.price_provider_abc import PriceProviderABC
from btc_price_alert.providers.core.utils import parse_price

__all__ = [
    "AlertError",
    "ApiError",
    "FetchError",
    "FetchErrorMapper",
    "ParseError",
    "PriceAlertError",
    "PriceProviderABC",
    "TransportError",
    "parse_price",
]
