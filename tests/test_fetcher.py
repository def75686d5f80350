"""
Tests for the CoinGecko and Fear & Greed adapters.
"""

import asyncio
from unittest.mock import MagicMock, patch

import aiohttp
import pytest
import requests

from coinboard.config import FEAR_GREED_URL
from coinboard.data import fetcher
from coinboard.errors import RateLimited, SourceUnavailable
from coinboard.models import Sentiment


def _response(status_code=200, body=None, json_error=None):
    resp = MagicMock(status_code=status_code)
    if json_error is not None:
        resp.json.side_effect = json_error
    else:
        resp.json.return_value = body
    return resp


# ============================================================================
# Sync (requests)
# ============================================================================

class TestFetchMarketBatch:

    @patch("requests.get")
    def test_success(self, mock_get, coingecko_coin):
        mock_get.return_value = _response(body=[coingecko_coin])

        coins = fetcher.fetch_market_batch("eur")

        assert [c.id for c in coins] == ["bitcoin"]
        args, kwargs = mock_get.call_args
        assert args[0].endswith("/coins/markets")
        assert kwargs["params"]["vs_currency"] == "eur"
        assert kwargs["params"]["order"] == "market_cap_desc"
        assert kwargs["params"]["per_page"] == "50"
        assert kwargs["params"]["sparkline"] == "true"
        assert kwargs["params"]["price_change_percentage"] == "24h"
        assert kwargs["timeout"] > 0

    @patch("requests.get")
    def test_rate_limited(self, mock_get):
        mock_get.return_value = _response(status_code=429)
        with pytest.raises(RateLimited) as exc:
            fetcher.fetch_market_batch("usd")
        assert exc.value.status_code == 429

    @pytest.mark.parametrize("status", [400, 401, 404, 500, 503])
    @patch("requests.get")
    def test_other_status_is_unavailable(self, mock_get, status):
        mock_get.return_value = _response(status_code=status)
        with pytest.raises(SourceUnavailable) as exc:
            fetcher.fetch_market_batch("usd")
        assert exc.value.status_code == status

    @patch("requests.get", side_effect=requests.exceptions.ConnectionError("boom"))
    def test_transport_failure(self, mock_get):
        with pytest.raises(SourceUnavailable):
            fetcher.fetch_market_batch("usd")

    @patch("requests.get")
    def test_invalid_json(self, mock_get):
        mock_get.return_value = _response(json_error=ValueError("Expecting value"))
        with pytest.raises(SourceUnavailable):
            fetcher.fetch_market_batch("usd")

    @patch("requests.get")
    def test_unexpected_body(self, mock_get):
        mock_get.return_value = _response(body={"status": {"error_code": 10005}})
        with pytest.raises(SourceUnavailable):
            fetcher.fetch_market_batch("usd")


class TestFetchSentiment:

    @patch("requests.get")
    def test_success(self, mock_get, fear_greed_response):
        mock_get.return_value = _response(body=fear_greed_response)
        assert fetcher.fetch_sentiment() == Sentiment(value=65, classification="Greed")
        assert mock_get.call_args[0][0] == FEAR_GREED_URL

    @patch("requests.get", side_effect=requests.exceptions.Timeout("slow"))
    def test_failure_is_swallowed(self, mock_get):
        assert fetcher.fetch_sentiment() is None

    @patch("requests.get")
    def test_http_error_is_swallowed(self, mock_get):
        resp = _response(status_code=503)
        resp.raise_for_status.side_effect = requests.exceptions.HTTPError("503")
        mock_get.return_value = resp
        assert fetcher.fetch_sentiment() is None

    @patch("requests.get")
    def test_bad_body_is_swallowed(self, mock_get):
        mock_get.return_value = _response(body={"data": []})
        assert fetcher.fetch_sentiment() is None


# ============================================================================
# Async (aiohttp)
# ============================================================================

class FakeResponse:
    def __init__(self, status=200, body=None, error=None):
        self.status = status
        self._body = body
        self._error = error

    async def json(self, content_type=None):
        return self._body

    async def __aenter__(self):
        if self._error is not None:
            raise self._error
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False


class FakeSession:
    """Routes GETs by URL to canned responses."""

    def __init__(self, routes):
        self.routes = routes
        self.calls = []

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        return self.routes[url]

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False


class TestAsyncFetchers:

    def test_market_batch(self, coingecko_coin):
        session = FakeSession({fetcher.MARKETS_URL: FakeResponse(body=[coingecko_coin])})
        coins = asyncio.run(fetcher.fetch_market_batch_async(session, "gbp"))
        assert [c.id for c in coins] == ["bitcoin"]
        assert session.calls[0][1]["params"]["vs_currency"] == "gbp"

    def test_market_batch_rate_limited(self):
        session = FakeSession({fetcher.MARKETS_URL: FakeResponse(status=429)})
        with pytest.raises(RateLimited):
            asyncio.run(fetcher.fetch_market_batch_async(session, "usd"))

    def test_market_batch_transport_failure(self):
        error = aiohttp.ClientConnectionError("refused")
        session = FakeSession({fetcher.MARKETS_URL: FakeResponse(error=error)})
        with pytest.raises(SourceUnavailable):
            asyncio.run(fetcher.fetch_market_batch_async(session, "usd"))

    def test_sentiment_failure_is_swallowed(self):
        session = FakeSession({FEAR_GREED_URL: FakeResponse(status=500)})
        assert asyncio.run(fetcher.fetch_sentiment_async(session)) is None

    def test_dashboard_data(self, coingecko_coin, fear_greed_response):
        session = FakeSession({
            fetcher.MARKETS_URL: FakeResponse(body=[coingecko_coin]),
            FEAR_GREED_URL: FakeResponse(body=fear_greed_response),
        })
        with patch("coinboard.data.fetcher.aiohttp.ClientSession", return_value=session):
            result = asyncio.run(fetcher.fetch_dashboard_data_async("usd"))

        assert result.error is None
        assert result.sentiment == Sentiment(value=65, classification="Greed")
        assert [c.id for c in result.coins] == ["bitcoin"]

    def test_dashboard_data_keeps_sentiment_on_market_failure(self, fear_greed_response):
        session = FakeSession({
            fetcher.MARKETS_URL: FakeResponse(status=429),
            FEAR_GREED_URL: FakeResponse(body=fear_greed_response),
        })
        with patch("coinboard.data.fetcher.aiohttp.ClientSession", return_value=session):
            result = asyncio.run(fetcher.fetch_dashboard_data_async("usd"))

        assert isinstance(result.error, RateLimited)
        assert result.coins == []
        assert result.sentiment.value == 65
