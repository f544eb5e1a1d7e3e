"""Domain concept for mapping library exceptions to fetch errors."""
import asyncio
from dataclasses import dataclass

import httpx
from pydantic import ValidationError

from btc_price_alert.providers.core.exceptions import (FetchError, ParseError,
                                                        TransportError)


@dataclass(frozen=True)
class FetchErrorMapper:
    """Maps httpx/JSON/pydantic exceptions to the FetchError taxonomy.

    Inject this into providers so every upstream failure surfaces as
    TransportError or ParseError with a message naming the API and pair.
    """

    api_name: str = "API"

    def to_fetch_error(
        self,
        exc: Exception,
        symbol: str | None = None,
    ) -> FetchError:
        """Map a library exception to a FetchError.

        Args:
            exc: The exception raised while requesting or decoding a response.
            symbol: Optional pair/symbol to include in the message (e.g. "XBTUSD").

        Returns:
            A FetchError subclass instance; the caller raises it from exc.
        """
        target = f" for '{symbol}'" if symbol is not None else ""
        if isinstance(exc, FetchError):
            return exc
        if isinstance(exc, httpx.HTTPStatusError):
            status = exc.response.status_code
            return TransportError(f"{self.api_name} returned HTTP {status}{target}")
        if isinstance(exc, (httpx.TimeoutException, asyncio.TimeoutError, TimeoutError)):
            return TransportError(f"Request to {self.api_name} timed out{target}")
        if isinstance(exc, httpx.HTTPError):
            return TransportError(f"Request to {self.api_name} failed{target}: {exc}")
        if isinstance(exc, ValidationError):
            return ParseError(
                f"Unexpected {self.api_name} response shape{target}: "
                f"{exc.error_count()} validation error(s)"
            )
        if isinstance(exc, ValueError):
            # json.JSONDecodeError is a ValueError: the body was not JSON.
            return TransportError(f"Malformed JSON from {self.api_name}{target}: {exc}")
        return FetchError(f"Unexpected error from {self.api_name}{target}: {exc!r}")

    def raise_fetch(
        self,
        exc: Exception,
        symbol: str | None = None,
    ) -> None:
        """Map exception to a FetchError and raise it. Never returns."""
        error = self.to_fetch_error(exc, symbol=symbol)
        if error is exc:
            raise exc
        raise error from exc
