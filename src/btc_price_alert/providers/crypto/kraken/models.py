"""Models for the Kraken provider (ticker envelope and API params)."""
from pydantic import BaseModel, Field


class KrakenTickerInfo(BaseModel):
    """One pair entry of a /Ticker result. Only the fields we read are declared."""

    # c = [last trade closed price, lot volume]
    c: list[str] = Field(default_factory=list)


class KrakenErrorEnvelope(BaseModel):
    """Error list of any Kraken envelope, read before the result is validated."""

    error: list[str] = Field(default_factory=list)


class KrakenTickerResponse(KrakenErrorEnvelope):
    """Envelope returned by /0/public/Ticker."""

    result: dict[str, KrakenTickerInfo] = Field(default_factory=dict)


class KrakenTickerParams(BaseModel):
    """Params for /Ticker (get_quote)."""

    pair: str = "XBTUSD"
