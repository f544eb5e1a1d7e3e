"""Pydantic schemas for runtime use. Nothing here is persisted."""
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class PriceQuote(BaseModel):
    """Latest trade price for one trading pair."""

    symbol: str
    value: float = Field(gt=0)
    timestamp: datetime = Field(default_factory=datetime.utcnow)


class MonitorState(BaseModel):
    """State of the price monitor, threaded by value through the polling loop.

    last_price is None only until the first successful fetch; afterwards it is
    only ever replaced by a newer fetched price.
    """

    model_config = ConfigDict(frozen=True)

    last_price: float | None = None
    alert_threshold: float = Field(gt=0, le=1)
    last_alert_time: datetime | None = None


__all__ = ["MonitorState", "PriceQuote"]
