"""Shared utilities for price providers."""
from decimal import Decimal, InvalidOperation

from btc_price_alert.providers.core.exceptions import ParseError


def normalize_pair(pair: str) -> str:
    """Normalize a trading pair symbol (uppercase, no surrounding whitespace)."""
    return pair.strip().upper()


def parse_price(raw: object) -> float:
    """Parse a decimal price string into a positive, finite float.

    Raises:
        ParseError: If raw is not a decimal string, or is zero, negative or non-finite.
    """
    if not isinstance(raw, str):
        raise ParseError(f"Price must be a decimal string, got {type(raw).__name__}")
    try:
        value = Decimal(raw.strip())
    except InvalidOperation as exc:
        raise ParseError(f"Invalid price string: {raw!r}") from exc
    if not value.is_finite() or value <= 0:
        raise ParseError(f"Price must be positive and finite, got {raw!r}")
    return float(value)
