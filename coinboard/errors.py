"""Exceptions raised by the market data adapters."""
from typing import Optional


class MarketDataError(RuntimeError):
    """Base class for failures talking to an external data source."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class RateLimited(MarketDataError):
    """The market data source throttled the request (HTTP 429)."""


class SourceUnavailable(MarketDataError):
    """Any other market data failure: bad status, transport error or bad body."""


class SentimentUnavailable(MarketDataError):
    """The sentiment index could not be fetched. Never fatal."""
