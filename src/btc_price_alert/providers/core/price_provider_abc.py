"""Abstract base class for price sources."""
from abc import ABC, abstractmethod

from btc_price_alert.schemas import PriceQuote


class PriceProviderABC(ABC):
    """Base interface for all price sources.

    The polling loop only depends on this interface, so the provider or the
    trading pair can be swapped (or faked in tests) without touching the loop
    or the decision rule.
    """

    @abstractmethod
    async def get_quote(self) -> PriceQuote:
        """Fetch the latest trade price for the configured pair.

        Returns:
            A PriceQuote with a positive, finite value.

        Raises:
            FetchError: TransportError, ApiError or ParseError on failure.
        """

    async def fetch_price(self) -> float:
        """Fetch the latest trade price as a plain float."""
        quote = await self.get_quote()
        return quote.value

    async def close(self) -> None:
        """Clean up resources (connections, clients).

        Override in subclasses if cleanup is needed.
        """

    async def __aenter__(self) -> "PriceProviderABC":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:  # noqa: ANN001
        """Async context manager exit - calls close()."""
        await self.close()
