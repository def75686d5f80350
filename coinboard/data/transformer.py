"""Data transformation: card aggregates, table filters and header totals."""
from typing import Container, List, NamedTuple, Sequence

import pandas as pd

from coinboard.constants import (
    CARD_SIZE,
    DEFI_TOKENS,
    MOCK_GLOBAL_STATS,
    NO_DATA_MESSAGE,
    NO_MATCH_MESSAGE,
    STABLECOIN_MARKER,
    WATCHLIST_EMPTY_MESSAGE,
)
from coinboard.models import CoinRecord, GlobalStats

RANK_COLUMNS = ["price_change_percentage_24h", "total_volume", "market_cap_rank", "market_cap"]


class CardLists(NamedTuple):
    """The four summary cards, each at most CARD_SIZE records."""

    market_leaders: List[CoinRecord]
    top_gainers: List[CoinRecord]
    high_volume: List[CoinRecord]
    stablecoins: List[CoinRecord]


def coins_frame(coins: Sequence[CoinRecord]) -> pd.DataFrame:
    """
    Build a numeric DataFrame of the sortable fields, indexed by batch position.

    Missing values (e.g. a coin without a 24h change) become NaN.
    """
    return pd.DataFrame(
        {col: [getattr(c, col) for c in coins] for col in RANK_COLUMNS},
        index=pd.RangeIndex(len(coins)),
        dtype=float,
    )


def rank_by(coins: Sequence[CoinRecord], column: str, ascending: bool = True) -> List[CoinRecord]:
    """
    Return coins sorted by one field with a stable sort.

    Ties keep batch order and missing values go last, in both directions.
    """
    if not coins:
        return []
    order = coins_frame(coins).sort_values(
        column, ascending=ascending, kind="stable", na_position="last"
    ).index
    return [coins[i] for i in order]


def is_stablecoin(coin: CoinRecord) -> bool:
    """Heuristic: symbol contains "usd". Not a verified peg."""
    return STABLECOIN_MARKER in coin.symbol.lower()


def is_defi(coin: CoinRecord) -> bool:
    """Heuristic: symbol is in the hand-picked DeFi token list."""
    return coin.symbol.lower() in DEFI_TOKENS


def build_card_lists(coins: Sequence[CoinRecord]) -> CardLists:
    """
    Derive the summary card lists from a batch.

    Market leaders are a prefix of the batch: the markets endpoint is
    queried with order=market_cap_desc, so batch order is market cap order.

    Args:
        coins: Full batch in API order

    Returns:
        CardLists with up to CARD_SIZE records per card
    """
    return CardLists(
        market_leaders=list(coins[:CARD_SIZE]),
        top_gainers=rank_by(coins, "price_change_percentage_24h", ascending=False)[:CARD_SIZE],
        high_volume=rank_by(coins, "total_volume", ascending=False)[:CARD_SIZE],
        stablecoins=[c for c in coins if is_stablecoin(c)][:CARD_SIZE],
    )


def apply_filter(
    coins: Sequence[CoinRecord], mode: str, watchlist: Container[str] = frozenset()
) -> List[CoinRecord]:
    """
    Apply one table filter/sort mode to the batch.

    Returns a new list; the batch itself is never reordered. Watchlist ids
    with no matching coin are ignored.

    Args:
        coins: Full batch in API order
        mode: One of all, gainers, losers, popular, defi, watchlist
        watchlist: Favorite coin ids

    Returns:
        Rows for the table, in display order
    """
    if mode == "all":
        return list(coins)
    if mode == "gainers":
        return rank_by(coins, "price_change_percentage_24h", ascending=False)
    if mode == "losers":
        return rank_by(coins, "price_change_percentage_24h", ascending=True)
    if mode == "popular":
        return rank_by(coins, "market_cap_rank", ascending=True)
    if mode == "defi":
        return [c for c in coins if is_defi(c)]
    if mode == "watchlist":
        return [c for c in coins if c.id in watchlist]

    raise ValueError(f"Unknown filter mode: {mode}")


def empty_table_message(mode: str, has_data: bool) -> str:
    """
    Message for an empty table.

    "No data loaded" and "empty watchlist" are different states and get
    different messages.
    """
    if not has_data:
        return NO_DATA_MESSAGE
    if mode == "watchlist":
        return WATCHLIST_EMPTY_MESSAGE
    return NO_MATCH_MESSAGE


def compute_global_stats(coins: Sequence[CoinRecord]) -> GlobalStats:
    """
    Header totals summed over the batch.

    BTC dominance and the active coin count are placeholders from
    MOCK_GLOBAL_STATS, not live figures.
    """
    df = coins_frame(coins)
    return GlobalStats(
        total_market_cap=float(df["market_cap"].sum()),
        total_volume=float(df["total_volume"].sum()),
        btc_dominance=MOCK_GLOBAL_STATS["market_cap_percentage"]["btc"],
        active_cryptocurrencies=MOCK_GLOBAL_STATS["active_cryptocurrencies"],
    )
