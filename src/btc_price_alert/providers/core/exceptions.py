"""Exception taxonomy for price fetching and alerting.

Every error raised inside a poll cycle derives from PriceAlertError so the
polling loop can recover from it at the cycle boundary.
"""


class PriceAlertError(Exception):
    """Base class for recoverable errors raised by providers and alert sinks."""


class FetchError(PriceAlertError):
    """The price source could not produce a price for this cycle."""

    kind = "fetch"


class TransportError(FetchError):
    """Network failure, timeout, non-2xx status or a body that is not JSON."""

    kind = "transport"


class ApiError(FetchError):
    """The upstream API reported business-level errors in its envelope."""

    kind = "api"

    def __init__(self, messages: list[str], api_name: str = "API") -> None:
        self.messages = list(messages)
        self.api_name = api_name
        super().__init__(f"{api_name} error: {', '.join(self.messages)}")


class ParseError(FetchError):
    """The response shape or the price string could not be parsed."""

    kind = "parse"


class AlertError(PriceAlertError):
    """The alert sink could not play the alert."""

    kind = "alert"
