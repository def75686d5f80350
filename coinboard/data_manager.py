"""Data manager owning the dashboard state and the refresh cycle."""
import asyncio
import threading
from datetime import datetime
from typing import List, Optional, Tuple

from coinboard.config import DEFAULT_CURRENCY, USE_ASYNC, WATCHLIST_FILE
from coinboard.constants import (
    CURRENCIES,
    DEFAULT_FILTER,
    DEMO_NOTICE_RATE_LIMITED,
    DEMO_NOTICE_UNAVAILABLE,
    FILTER_MODES,
)
from coinboard.data import (
    CardLists,
    apply_filter,
    build_card_lists,
    compute_global_stats,
    empty_table_message,
    fetch_dashboard_data_async,
    fetch_market_batch,
    fetch_sentiment,
    generate_mock_batch,
)
from coinboard.errors import MarketDataError, RateLimited
from coinboard.models import CoinRecord, GlobalStats, Sentiment
from coinboard.utils import currency_symbol, setup_logger
from coinboard.watchlist import JsonFileStorage, WatchlistStore

logger = setup_logger(__name__)

FILTER_KEYS = {mode for mode, _ in FILTER_MODES}


class DashboardState:
    """Everything the view renders. Mutated only through DataManager."""

    def __init__(self, watchlist: WatchlistStore, currency: str = DEFAULT_CURRENCY):
        self.currency: str = currency
        self.active_filter: str = DEFAULT_FILTER
        self.coins: Tuple[CoinRecord, ...] = ()
        # Currency the current batch is priced in; lags `currency` until the new batch lands
        self.coins_currency: str = currency
        self.watchlist: WatchlistStore = watchlist
        self.sentiment: Optional[Sentiment] = None
        self.using_demo_data: bool = False
        self.last_updated: Optional[datetime] = None
        self.version: int = 0
        self.notice: Optional[str] = None

    @property
    def has_data(self) -> bool:
        return bool(self.coins)


class DataManager:
    """Loads market data into a DashboardState and derives the views from it."""

    def __init__(self, watchlist: Optional[WatchlistStore] = None, use_async: bool = USE_ASYNC):
        if watchlist is None:
            watchlist = WatchlistStore(JsonFileStorage(WATCHLIST_FILE))
        if DEFAULT_CURRENCY not in CURRENCIES:
            raise ValueError(f"Unsupported DEFAULT_CURRENCY: {DEFAULT_CURRENCY}")
        self.state = DashboardState(watchlist)
        self.use_async = use_async
        self._fetch_guard = threading.Lock()
        self._state_lock = threading.Lock()
        self._issued = 0
        self._applied = 0

    # --- Loading -----------------------------------------------------------

    def load_initial(self) -> None:
        """Fetch sentiment and the first market batch."""
        currency = self.state.currency
        logger.info(f"Starting data fetch (async={self.use_async}, currency={currency})")

        if not self.use_async:
            self.state.sentiment = fetch_sentiment()
            self.refresh(force=True)
            return

        with self._fetch_guard:
            seq = self._next_sequence()
            result = asyncio.run(fetch_dashboard_data_async(currency))
            self.state.sentiment = result.sentiment
            if result.error is not None:
                self._handle_failure(result.error, currency)
            else:
                self._apply_batch(result.coins, currency, seq)

    def refresh(self, force: bool = False) -> bool:
        """
        Run one fetch cycle for the selected currency.

        A timer tick is skipped while a previous fetch is still in flight.
        ``force`` (currency change) fetches anyway; if both complete, the
        one issued last wins.

        Returns:
            True if the state changed and the view should re-render
        """
        acquired = self._fetch_guard.acquire(blocking=False)
        if not acquired and not force:
            logger.info("Previous fetch still in flight, skipping refresh tick")
            return False

        try:
            currency = self.state.currency
            seq = self._next_sequence()
            try:
                coins = fetch_market_batch(currency)
            except MarketDataError as e:
                return self._handle_failure(e, currency)
            return self._apply_batch(coins, currency, seq)
        finally:
            if acquired:
                self._fetch_guard.release()

    def _next_sequence(self) -> int:
        with self._state_lock:
            self._issued += 1
            return self._issued

    def _apply_batch(self, coins: List[CoinRecord], currency: str, seq: int) -> bool:
        with self._state_lock:
            if seq < self._applied:
                logger.info(f"Discarding batch #{seq}: batch #{self._applied} already applied")
                return False
            if currency != self.state.currency:
                logger.info(f"Discarding {currency} batch #{seq}: currency is now {self.state.currency}")
                return False

            self._applied = seq
            self.state.coins = tuple(coins)
            self.state.coins_currency = currency
            self.state.using_demo_data = False
            self.state.last_updated = datetime.now()
            self.state.version += 1
            logger.info(f"Applied batch #{seq}: {len(coins)} coin(s) in {currency}")
            return True

    def _handle_failure(self, error: MarketDataError, currency: str) -> bool:
        """Demo data on first load; otherwise keep the stale batch and skip the render."""
        with self._state_lock:
            if self.state.coins:
                logger.warning(f"Fetch failed ({error}); keeping previous batch")
                return False

            logger.error(f"Fetch failed ({error}); no data loaded yet, showing demo data")
            self.state.coins = tuple(generate_mock_batch())
            self.state.coins_currency = currency
            self.state.using_demo_data = True
            self.state.last_updated = datetime.now()
            self.state.notice = (
                DEMO_NOTICE_RATE_LIMITED if isinstance(error, RateLimited) else DEMO_NOTICE_UNAVAILABLE
            )
            self.state.version += 1
            return True

    # --- User actions ------------------------------------------------------

    def change_currency(self, code: str) -> bool:
        """Switch currency and fetch a fresh batch priced in it."""
        code = code.lower()
        currency_symbol(code)  # validates
        if code == self.state.currency and self.state.coins_currency == code and self.state.has_data:
            return False
        logger.info(f"Currency changed: {self.state.currency} -> {code}")
        self.state.currency = code
        return self.refresh(force=True)

    def set_filter(self, mode: str) -> None:
        if mode not in FILTER_KEYS:
            raise ValueError(f"Unknown filter mode: {mode}")
        self.state.active_filter = mode

    def toggle_watchlist(self, coin_id: str) -> bool:
        """Returns the new membership of the coin."""
        return self.state.watchlist.toggle(coin_id)

    def consume_notice(self) -> Optional[str]:
        """Return the pending user notice once, then clear it."""
        with self._state_lock:
            notice, self.state.notice = self.state.notice, None
        return notice

    # --- Derived views -----------------------------------------------------

    @property
    def display_symbol(self) -> str:
        """Symbol of the currency the shown batch is priced in."""
        return currency_symbol(self.state.coins_currency)

    def table_rows(self) -> List[CoinRecord]:
        return apply_filter(self.state.coins, self.state.active_filter, self.state.watchlist)

    def empty_message(self) -> str:
        return empty_table_message(self.state.active_filter, self.state.has_data)

    def card_lists(self) -> CardLists:
        return build_card_lists(self.state.coins)

    def global_stats(self) -> GlobalStats:
        return compute_global_stats(self.state.coins)
