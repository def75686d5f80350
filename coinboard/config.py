"""Configuration settings for the dashboard."""
import os
from pathlib import Path
from typing import Optional

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent

# API Configuration
DEFAULT_CURRENCY = os.getenv("DEFAULT_CURRENCY", "usd").lower()
TOTAL_COINS_TO_FETCH = int(os.getenv("TOTAL_COINS_TO_FETCH", "50"))
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "15"))  # seconds per HTTP request

# Refresh Configuration
REFRESH_INTERVAL_SECONDS = int(os.getenv("REFRESH_INTERVAL_SECONDS", "60"))

# Logging Configuration
LOG_DIR = PROJECT_ROOT / "logs"
LOG_DIR.mkdir(exist_ok=True)

# Local storage (watchlist) Configuration
DATA_DIR = Path(os.getenv("COINBOARD_DATA_DIR", str(PROJECT_ROOT / "user_data")))
DATA_DIR.mkdir(parents=True, exist_ok=True)
WATCHLIST_FILE = DATA_DIR / "local_storage.json"

# CoinGecko API Configuration
COINGECKO_API_KEY: Optional[str] = os.getenv("COINGECKO_API_KEY", None)
COINGECKO_API_BASE = "https://pro-api.coingecko.com/api/v3" if COINGECKO_API_KEY else "https://api.coingecko.com/api/v3"

# Fear & Greed index (alternative.me)
FEAR_GREED_URL = os.getenv("FEAR_GREED_URL", "https://api.alternative.me/fng/")

# Async Configuration
USE_ASYNC = os.getenv("USE_ASYNC_FETCH", "true").lower() == "true"

# Dash App Configuration
DASH_PORT = int(os.getenv("PORT", "8052"))  # Use PORT env var for cloud deployment
DASH_DEBUG = os.getenv("DASH_DEBUG", "False").lower() == "true"  # Disable debug in production
