"""Shared fakes for the price source and alert sink."""
import pytest

from btc_price_alert.alerts import AlertSinkABC
from btc_price_alert.providers.core import AlertError, PriceProviderABC
from btc_price_alert.schemas import PriceQuote


class ScriptedProvider(PriceProviderABC):
    """Returns (or raises) the scripted outcomes in order, one per call."""

    def __init__(self, outcomes: list[float | Exception]) -> None:
        self._outcomes = list(outcomes)
        self.calls = 0
        self.closed = False

    async def get_quote(self) -> PriceQuote:
        outcome = self._outcomes[self.calls]
        self.calls += 1
        if isinstance(outcome, Exception):
            raise outcome
        return PriceQuote(symbol="XBTUSD", value=outcome)

    async def close(self) -> None:
        self.closed = True


class RecordingSink(AlertSinkABC):
    """Counts play_alert calls; optionally fails every call."""

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.plays = 0

    def play_alert(self) -> None:
        self.plays += 1
        if self.fail:
            raise AlertError("no audio device")


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def failing_sink() -> RecordingSink:
    return RecordingSink(fail=True)
