"""Data fetching from CoinGecko and alternative.me."""
import asyncio
from typing import Dict, List, NamedTuple, Optional

import aiohttp
import requests

from coinboard.config import (
    COINGECKO_API_BASE,
    COINGECKO_API_KEY,
    FEAR_GREED_URL,
    REQUEST_TIMEOUT,
    TOTAL_COINS_TO_FETCH,
)
from coinboard.data.cleaner import clean_market_batch, parse_sentiment
from coinboard.errors import MarketDataError, RateLimited, SentimentUnavailable, SourceUnavailable
from coinboard.models import CoinRecord, Sentiment
from coinboard.utils import setup_logger

logger = setup_logger(__name__)

MARKETS_URL = f"{COINGECKO_API_BASE}/coins/markets"


def market_params(currency: str, per_page: int = TOTAL_COINS_TO_FETCH) -> Dict[str, str]:
    """Query for the top coins by market cap with 7d sparkline and 24h change."""
    return {
        "vs_currency": currency,
        "order": "market_cap_desc",
        "per_page": str(per_page),
        "page": "1",
        "sparkline": "true",
        "price_change_percentage": "24h",
    }


def _headers() -> Dict[str, str]:
    headers = {}
    if COINGECKO_API_KEY:
        headers["x-cg-pro-api-key"] = COINGECKO_API_KEY
    return headers


def _raise_for_market_status(status: int, currency: str) -> None:
    if status == 429:
        logger.warning(f"markets[{currency}]: HTTP 429 (rate limited)")
        raise RateLimited("CoinGecko rate limit hit", status_code=status)
    if not 200 <= status < 300:
        logger.error(f"markets[{currency}]: HTTP {status}")
        raise SourceUnavailable(f"CoinGecko returned HTTP {status}", status_code=status)


def _parse_markets(js, currency: str) -> List[CoinRecord]:
    try:
        coins = clean_market_batch(js)
    except ValueError as e:
        logger.error(f"markets[{currency}]: {e}")
        raise SourceUnavailable(str(e)) from e
    logger.info(f"markets[{currency}]: fetched {len(coins)} coin(s)")
    return coins


def fetch_market_batch(currency: str, per_page: int = TOTAL_COINS_TO_FETCH) -> List[CoinRecord]:
    """
    Fetch the top coins by market cap in the requested currency.

    There is no retry here: the periodic refresh is the retry.

    Args:
        currency: vs_currency code (usd, eur, gbp)
        per_page: Number of coins to request

    Returns:
        List of CoinRecord, market cap descending

    Raises:
        RateLimited: HTTP 429
        SourceUnavailable: any other failure
    """
    try:
        r = requests.get(
            MARKETS_URL,
            params=market_params(currency, per_page),
            headers=_headers(),
            timeout=REQUEST_TIMEOUT,
        )
    except requests.exceptions.RequestException as e:
        logger.error(f"markets[{currency}]: request error -> {e}")
        raise SourceUnavailable(f"Request to CoinGecko failed: {e}") from e

    _raise_for_market_status(r.status_code, currency)

    try:
        js = r.json()
    except ValueError as e:
        logger.error(f"markets[{currency}]: invalid JSON -> {e}")
        raise SourceUnavailable("CoinGecko returned invalid JSON") from e

    return _parse_markets(js, currency)


def _get_sentiment() -> Sentiment:
    try:
        r = requests.get(FEAR_GREED_URL, timeout=REQUEST_TIMEOUT)
        r.raise_for_status()
        return parse_sentiment(r.json())
    except (requests.exceptions.RequestException, ValueError) as e:
        raise SentimentUnavailable(f"Fear & Greed fetch failed: {e}") from e


def fetch_sentiment() -> Optional[Sentiment]:
    """
    Best-effort fetch of the Fear & Greed index.

    Failures are logged and swallowed; the dashboard works without it.
    """
    try:
        return _get_sentiment()
    except SentimentUnavailable as e:
        logger.warning(f"FNG API Error: {e}")
        return None


async def fetch_market_batch_async(
    session: aiohttp.ClientSession, currency: str, per_page: int = TOTAL_COINS_TO_FETCH
) -> List[CoinRecord]:
    """Async version of fetch_market_batch."""
    try:
        async with session.get(
            MARKETS_URL,
            params=market_params(currency, per_page),
            headers=_headers(),
            timeout=aiohttp.ClientTimeout(total=REQUEST_TIMEOUT),
        ) as r:
            _raise_for_market_status(r.status, currency)
            try:
                js = await r.json(content_type=None)
            except ValueError as e:
                logger.error(f"markets[{currency}]: invalid JSON -> {e}")
                raise SourceUnavailable("CoinGecko returned invalid JSON") from e
    except (aiohttp.ClientError, asyncio.TimeoutError) as e:
        logger.error(f"markets[{currency}]: request error -> {e!r}")
        raise SourceUnavailable(f"Request to CoinGecko failed: {e!r}") from e

    return _parse_markets(js, currency)


async def _get_sentiment_async(session: aiohttp.ClientSession) -> Sentiment:
    try:
        async with session.get(
            FEAR_GREED_URL, timeout=aiohttp.ClientTimeout(total=REQUEST_TIMEOUT)
        ) as r:
            if r.status != 200:
                raise SentimentUnavailable(f"Fear & Greed returned HTTP {r.status}", status_code=r.status)
            js = await r.json(content_type=None)
        return parse_sentiment(js)
    except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
        raise SentimentUnavailable(f"Fear & Greed fetch failed: {e!r}") from e


async def fetch_sentiment_async(session: aiohttp.ClientSession) -> Optional[Sentiment]:
    """Async version of fetch_sentiment."""
    try:
        return await _get_sentiment_async(session)
    except SentimentUnavailable as e:
        logger.warning(f"FNG API Error: {e}")
        return None


class DashboardFetch(NamedTuple):
    """Result of the combined startup fetch."""

    sentiment: Optional[Sentiment]
    coins: List[CoinRecord]
    error: Optional[MarketDataError]


async def fetch_dashboard_data_async(currency: str) -> DashboardFetch:
    """
    Fetch sentiment and the market batch in parallel.

    A market failure is returned in ``error`` rather than raised, so the
    sentiment reading is not lost with it.
    """
    async with aiohttp.ClientSession() as session:
        sentiment, market = await asyncio.gather(
            fetch_sentiment_async(session),
            fetch_market_batch_async(session, currency),
            return_exceptions=True,
        )

    if isinstance(sentiment, BaseException):
        raise sentiment
    if isinstance(market, MarketDataError):
        return DashboardFetch(sentiment=sentiment, coins=[], error=market)
    if isinstance(market, BaseException):
        raise market
    return DashboardFetch(sentiment=sentiment, coins=market, error=None)
