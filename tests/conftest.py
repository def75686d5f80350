"""
Shared pytest fixtures for dashboard tests.
"""

import json

import pytest

from coinboard.data_manager import DataManager
from coinboard.models import CoinRecord
from coinboard.watchlist import JsonFileStorage, WatchlistStore


# ============================================================================
# Record Fixtures
# ============================================================================

@pytest.fixture
def make_coin():
    """Factory for CoinRecords with sensible defaults."""
    def _make(
        coin_id,
        symbol=None,
        change=0.0,
        volume=1_000_000.0,
        rank=None,
        price=100.0,
        market_cap=1_000_000_000.0,
        sparkline=(1.0, 2.0, 3.0),
    ):
        return CoinRecord(
            id=coin_id,
            symbol=symbol if symbol is not None else coin_id[:3],
            name=coin_id.title(),
            image=f"https://img.example/{coin_id}.png",
            current_price=price,
            market_cap=market_cap,
            total_volume=volume,
            market_cap_rank=rank,
            price_change_percentage_24h=change,
            sparkline=tuple(sparkline),
        )
    return _make


@pytest.fixture
def batch(make_coin):
    """Six coins in market cap order with distinct changes and volumes."""
    return [
        make_coin("bitcoin", "btc", change=1.5, volume=30e9, rank=1, market_cap=1.2e12),
        make_coin("ethereum", "eth", change=-2.0, volume=15e9, rank=2, market_cap=4e11),
        make_coin("tether", "usdt", change=0.01, volume=60e9, rank=3, market_cap=1.1e11),
        make_coin("solana", "sol", change=7.25, volume=4e9, rank=4, market_cap=8e10),
        make_coin("usd-coin", "USDC", change=-0.02, volume=7e9, rank=5, market_cap=3e10),
        make_coin("uniswap", "UNI", change=-5.5, volume=2e8, rank=6, market_cap=6e9),
    ]


@pytest.fixture
def coingecko_coin():
    """One element of a /coins/markets response."""
    return {
        "id": "bitcoin",
        "symbol": "btc",
        "name": "Bitcoin",
        "image": "https://assets.coingecko.com/coins/images/1/large/bitcoin.png",
        "current_price": 67250.12,
        "market_cap": 1324500000000,
        "market_cap_rank": 1,
        "total_volume": 28750000000,
        "price_change_percentage_24h": 2.345,
        "sparkline_in_7d": {"price": [65000.0, 66000.5, 65500.25, 67250.12]},
    }


@pytest.fixture
def fear_greed_response():
    """Mock Fear & Greed Index API response."""
    return {
        "name": "Fear and Greed Index",
        "data": [{
            "value": "65",
            "value_classification": "Greed",
            "timestamp": "1703232000",
            "time_until_update": "43200"
        }],
        "metadata": {"error": None}
    }


# ============================================================================
# Storage Fixtures
# ============================================================================

@pytest.fixture
def storage(tmp_path):
    return JsonFileStorage(tmp_path / "local_storage.json")


@pytest.fixture
def seeded_storage(storage):
    storage.set_item("cryptoWatchlist", json.dumps(["bitcoin", "solana"]))
    return storage


@pytest.fixture
def manager(storage):
    """DataManager with an empty file-backed watchlist and sync fetching."""
    return DataManager(watchlist=WatchlistStore(storage), use_async=False)
