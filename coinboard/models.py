"""Record types shared by the data and view layers."""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


def _optional_float(value: Any) -> Optional[float]:
    if value is None:
        return None
    return float(value)


def _sparkline_prices(sparkline_in_7d: Any) -> Tuple[float, ...]:
    """
    Hourly prices from the ``sparkline_in_7d`` object.

    Points are evenly spaced in time, so a series with a gap is dropped
    whole rather than closing the gap and shifting later points.
    """
    if sparkline_in_7d is None:
        return ()
    if not isinstance(sparkline_in_7d, dict):
        raise TypeError(f"sparkline_in_7d must be an object, got {type(sparkline_in_7d).__name__}")

    prices = sparkline_in_7d.get("price") or []
    if not isinstance(prices, list):
        raise TypeError(f"sparkline price must be a list, got {type(prices).__name__}")
    if any(p is None for p in prices):
        return ()
    return tuple(float(p) for p in prices)


@dataclass(frozen=True)
class CoinRecord:
    """One coin from a CoinGecko /coins/markets batch."""

    id: str
    symbol: str
    name: str
    image: str
    current_price: float
    market_cap: float
    total_volume: float
    market_cap_rank: Optional[int]
    price_change_percentage_24h: Optional[float]
    sparkline: Tuple[float, ...] = field(default_factory=tuple)

    @classmethod
    def from_api(cls, payload: Dict[str, Any]) -> "CoinRecord":
        """
        Build a record from one element of the /coins/markets response.

        Raises:
            KeyError: required field missing
            TypeError, ValueError: field has the wrong type
            OverflowError: rank is not finite
        """
        coin_id = payload["id"]
        if not isinstance(coin_id, str) or not coin_id:
            raise ValueError(f"Invalid coin id: {coin_id!r}")

        rank = payload.get("market_cap_rank")

        return cls(
            id=coin_id,
            symbol=str(payload.get("symbol") or ""),
            name=str(payload.get("name") or coin_id),
            image=str(payload.get("image") or ""),
            current_price=float(payload["current_price"]),
            market_cap=float(payload.get("market_cap") or 0.0),
            total_volume=float(payload.get("total_volume") or 0.0),
            market_cap_rank=int(rank) if rank is not None else None,
            price_change_percentage_24h=_optional_float(payload.get("price_change_percentage_24h")),
            sparkline=_sparkline_prices(payload.get("sparkline_in_7d")),
        )


@dataclass(frozen=True)
class Sentiment:
    """Fear & Greed index reading."""

    value: int
    classification: str


@dataclass(frozen=True)
class GlobalStats:
    """Header figures. Totals come from the batch, the rest are placeholders."""

    total_market_cap: float
    total_volume: float
    btc_dominance: float
    active_cryptocurrencies: int
