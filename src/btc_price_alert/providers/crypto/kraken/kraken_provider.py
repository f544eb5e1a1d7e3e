"""Kraken public ticker provider for the BTC/USD last trade price."""
import logging

import httpx
from pydantic import ValidationError

from btc_price_alert.providers.core import (ApiError, FetchErrorMapper,
                                            ParseError, PriceProviderABC,
                                            parse_price)
from btc_price_alert.providers.core.utils import normalize_pair
from btc_price_alert.providers.crypto.kraken.models import (
    KrakenErrorEnvelope, KrakenTickerInfo, KrakenTickerParams,
    KrakenTickerResponse)
from btc_price_alert.schemas import PriceQuote

logger = logging.getLogger(__name__)

# Library exceptions we translate into FetchError; anything else is a bug and propagates.
_FETCH_EXCEPTIONS: tuple[type[Exception], ...] = (
    httpx.HTTPError,
    ValidationError,
    ValueError,
    TimeoutError,
)


class KrakenProvider(PriceProviderABC):
    """Price source for one trading pair via Kraken's public Ticker endpoint.

    Kraken answers a request for "XBTUSD" under the result key "XXBTZUSD".
    Pass result_key=None to accept whichever single pair the result holds.

    Uses one httpx.AsyncClient for the provider's lifetime; responses are never
    cached and there is no retry, the polling cadence is the retry mechanism.
    """

    BASE_URL = "https://api.kraken.com/0/public"
    DEFAULT_PAIR = "XBTUSD"
    DEFAULT_RESULT_KEY = "XXBTZUSD"

    def __init__(
        self,
        pair: str = DEFAULT_PAIR,
        result_key: str | None = DEFAULT_RESULT_KEY,
        base_url: str = BASE_URL,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the Kraken provider.

        Args:
            pair: Pair requested from the ticker (e.g. "XBTUSD").
            result_key: Key of the pair entry in the response result; None to
                use the only entry present.
            base_url: Base URL of the public API.
            timeout: Request timeout in seconds; None disables the timeout.
            transport: Optional httpx transport (tests use httpx.MockTransport).
        """
        self._pair = normalize_pair(pair)
        self._result_key = result_key or None
        self._error_mapper = FetchErrorMapper(api_name="Kraken")
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers={"Accept": "application/json"},
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )

    @property
    def pair(self) -> str:
        return self._pair

    async def get_quote(self) -> PriceQuote:
        """Fetch the last trade closing price for the configured pair.

        Returns:
            PriceQuote with the parsed price.

        Raises:
            TransportError: Network failure, timeout, non-2xx status or non-JSON body.
            ApiError: The envelope's error list is non-empty.
            ParseError: The pair entry or price string is missing or invalid.
        """
        params = KrakenTickerParams(pair=self._pair).model_dump()
        try:
            response = await self._client.get("/Ticker", params=params)
            response.raise_for_status()
            payload = response.json()
            errors = KrakenErrorEnvelope.model_validate(payload).error
        except _FETCH_EXCEPTIONS as e:
            self._error_mapper.raise_fetch(e, symbol=self._pair)

        # The result may be null or malformed when the error list is set.
        if errors:
            raise ApiError(errors, api_name="Kraken")

        try:
            envelope = KrakenTickerResponse.model_validate(payload)
        except ValidationError as e:
            self._error_mapper.raise_fetch(e, symbol=self._pair)

        ticker = self._select_ticker(envelope)
        if not ticker.c:
            raise ParseError(f"Kraken ticker for '{self._pair}' has no last trade price")
        value = parse_price(ticker.c[0])
        logger.debug("Kraken %s last trade: %s", self._pair, ticker.c[0])
        return PriceQuote(symbol=self._pair, value=value)

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    def _select_ticker(self, envelope: KrakenTickerResponse) -> KrakenTickerInfo:
        """Pick the pair entry out of the result object."""
        if self._result_key is not None:
            ticker = envelope.result.get(self._result_key)
            if ticker is None:
                raise ParseError(
                    f"Kraken result has no entry '{self._result_key}' for '{self._pair}'"
                )
            return ticker
        if len(envelope.result) != 1:
            raise ParseError(
                f"Expected exactly one pair in Kraken result, got {len(envelope.result)}"
            )
        return next(iter(envelope.result.values()))
