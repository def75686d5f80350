"""Synthetic market batch used when the API is unreachable on first load."""
import random
from typing import List, Optional

from coinboard.constants import MOCK_COIN_IDS, MOCK_ICON_URL, MOCK_SPARKLINE_POINTS
from coinboard.models import CoinRecord


def generate_mock_batch(rng: Optional[random.Random] = None) -> List[CoinRecord]:
    """
    Generate demo data with a fixed shape and random values.

    The ids, symbols, names and ranks are always the same; prices,
    changes and sparklines are random. Pass a seeded ``random.Random``
    for reproducible output.
    """
    rng = rng or random.Random()
    mocks = []
    for i, coin_id in enumerate(MOCK_COIN_IDS):
        price = rng.random() * 1000 + 10
        mocks.append(
            CoinRecord(
                id=coin_id,
                symbol=coin_id[:3],
                name=coin_id.upper(),
                image=MOCK_ICON_URL,
                current_price=price,
                market_cap=price * 1_000_000,
                total_volume=price * 50_000,
                market_cap_rank=i + 1,
                price_change_percentage_24h=rng.random() * 10 - 4,
                sparkline=tuple(rng.random() * 100 for _ in range(MOCK_SPARKLINE_POINTS)),
            )
        )
    return mocks
