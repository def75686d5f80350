"""Data fetching, cleaning, and transformation modules."""
from coinboard.data.cleaner import clean_market_batch, parse_sentiment
from coinboard.data.fetcher import (
    DashboardFetch,
    fetch_dashboard_data_async,
    fetch_market_batch,
    fetch_market_batch_async,
    fetch_sentiment,
    fetch_sentiment_async,
)
from coinboard.data.mock import generate_mock_batch
from coinboard.data.transformer import (
    CardLists,
    apply_filter,
    build_card_lists,
    compute_global_stats,
    empty_table_message,
)

__all__ = [
    "fetch_market_batch",
    "fetch_market_batch_async",
    "fetch_sentiment",
    "fetch_sentiment_async",
    "fetch_dashboard_data_async",
    "DashboardFetch",
    "clean_market_batch",
    "parse_sentiment",
    "generate_mock_batch",
    "CardLists",
    "apply_filter",
    "build_card_lists",
    "compute_global_stats",
    "empty_table_message",
]
