"""Constants and default values for the dashboard."""
from typing import Dict, FrozenSet, List, Tuple

# Currency selector: code -> display symbol
CURRENCIES: Dict[str, str] = {
    "usd": "$",
    "eur": "€",
    "gbp": "£",
}

# Table filter modes, in button order
FILTER_MODES: List[Tuple[str, str]] = [
    ("all", "All"),
    ("gainers", "Gainers"),
    ("losers", "Losers"),
    ("popular", "Popular"),
    ("defi", "DeFi"),
    ("watchlist", "Watchlist"),
]
DEFAULT_FILTER = "all"

# DeFi tokens by symbol. Heuristic: hand-picked list, not an API category.
DEFI_TOKENS: FrozenSet[str] = frozenset({
    "uni", "aave", "link", "mkr", "crv", "comp", "snx",
    "1inch", "cake", "rune", "ldo", "pendle", "inj",
})

# Stablecoin heuristic: symbol contains this substring (not a verified peg)
STABLECOIN_MARKER = "usd"

# Cards: (key, title, subtitle, accent color)
CARD_SIZE = 3
CARD_SCROLL_STEP = 300  # px per scroll button click
CARD_DEFINITIONS: List[Tuple[str, str, str, str]] = [
    ("market_leaders", "Market Leaders", "Top Market Cap", "#3B82F6"),
    ("top_gainers", "Top Gainers", "Highest 24h Change", "#0ECB81"),
    ("high_volume", "High Volume", "Most Traded", "#A855F7"),
    ("stablecoins", "Stablecoins", "Pegged Assets", "#F0B90B"),
]

# Sparkline canvas (SVG viewBox)
SPARKLINE_WIDTH = 168
SPARKLINE_HEIGHT = 50

# Watchlist persistence
WATCHLIST_STORAGE_KEY = "cryptoWatchlist"

# Outbound trade link: [SYMBOL]_USDT pair on Binance
TRADE_URL_BASE = "https://www.binance.com/en/trade/"
TRADE_QUOTE_SUFFIX = "_USDT"

# Empty-state messages for the coin table
NO_DATA_MESSAGE = "Loading market data…"
WATCHLIST_EMPTY_MESSAGE = "No coins in watchlist yet. Click the star icon to add."
NO_MATCH_MESSAGE = "No coins match this filter."

# User notices
DEMO_NOTICE_RATE_LIMITED = "API Rate Limit hit. Showing Demo Data."
DEMO_NOTICE_UNAVAILABLE = "Market data source unavailable. Showing Demo Data."

# Global stats placeholders. The /global endpoint is heavy and often
# rate-limited on the free tier, so these are static values, not live data.
MOCK_GLOBAL_STATS = {
    "active_cryptocurrencies": 14502,
    "total_market_cap": {"usd": 2_450_000_000_000},
    "total_volume": {"usd": 84_000_000_000},
    "market_cap_percentage": {"btc": 54.2},
}

# Synthetic fallback batch
MOCK_COIN_IDS: List[str] = [
    "bitcoin", "ethereum", "solana", "ripple", "cardano",
    "avalanche-2", "dogecoin", "shiba-inu", "polkadot", "chainlink",
    "litecoin", "polygon", "uniswap", "tron", "stellar",
    "monero", "cosmos", "ethereum-classic", "filecoin", "internet-computer",
]
MOCK_ICON_URL = "https://cdn-icons-png.flaticon.com/512/1213/1213079.png"
MOCK_SPARKLINE_POINTS = 50
