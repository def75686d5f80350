"""Utility functions for the dashboard."""
import logging
from datetime import datetime
from typing import Optional

from coinboard.config import LOG_DIR
from coinboard.constants import CURRENCIES, TRADE_QUOTE_SUFFIX, TRADE_URL_BASE

MISSING_VALUE = "—"


def setup_logger(name: str = __name__) -> logging.Logger:
    """Set up and return a logger instance."""
    log_file = LOG_DIR / f"dashboard_{datetime.now().strftime('%Y%m%d')}.log"

    logger = logging.getLogger(name)
    logger.setLevel(logging.INFO)

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    # File handler
    file_handler = logging.FileHandler(log_file, encoding='utf-8')
    file_handler.setLevel(logging.INFO)

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)

    # Formatter
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    file_handler.setFormatter(formatter)
    console_handler.setFormatter(formatter)

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    return logger


def currency_symbol(code: str) -> str:
    """Return the display symbol for a currency code (e.g. "eur" -> "€")."""
    try:
        return CURRENCIES[code.lower()]
    except KeyError:
        raise ValueError(f"Unsupported currency: {code}") from None


def format_currency(num: Optional[float], symbol: str = "$", compact: bool = False) -> str:
    """
    Format a magnitude as a currency string.

    Compact mode abbreviates trillions, billions and millions with two
    decimals ("$1.23B"). Values below 1 keep six decimals so that
    sub-cent prices stay readable; everything else gets thousands
    separators and two decimals ("$1,234.50").

    Args:
        num: Value to format (None renders as a dash)
        symbol: Currency symbol prefix
        compact: Abbreviate large values

    Returns:
        Display string
    """
    if num is None:
        return MISSING_VALUE

    if compact:
        if num >= 1e12:
            return f"{symbol}{num / 1e12:.2f}T"
        if num >= 1e9:
            return f"{symbol}{num / 1e9:.2f}B"
        if num >= 1e6:
            return f"{symbol}{num / 1e6:.2f}M"

    if num < 1:
        return f"{symbol}{num:.6f}"
    return f"{symbol}{num:,.2f}"


def format_percent(change: Optional[float], signed: bool = True) -> str:
    """Format a percentage change with two decimals ("+1.23%")."""
    if change is None:
        return MISSING_VALUE
    sign = "+" if signed and change >= 0 else ""
    return f"{sign}{change:.2f}%"


def trade_link(symbol: str) -> str:
    """Build the exchange trade URL for a symbol, assuming a USDT quote pair."""
    return f"{TRADE_URL_BASE}{symbol.upper()}{TRADE_QUOTE_SUFFIX}"
