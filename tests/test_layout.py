from unittest.mock import patch

from dash import Dash

from coinboard.app.app import create_app
from coinboard.app.layout import TABLE_COLUMNS, create_cards, create_coin_table, create_layout
from coinboard.constants import WATCHLIST_EMPTY_MESSAGE
from coinboard.data import build_card_lists


def test_empty_table_shows_message():
    table = create_coin_table([], set(), "$", WATCHLIST_EMPTY_MESSAGE)
    body = table.children[1]
    cell = body.children.children
    assert cell.children == WATCHLIST_EMPTY_MESSAGE
    assert cell.colSpan == len(TABLE_COLUMNS)


def test_table_rows_and_stars(batch):
    table = create_coin_table(batch, {"solana"}, "$", "unused")
    rows = table.children[1].children
    assert len(rows) == len(batch)

    stars = {row.children[-1].children.id["index"]: row.children[-1].children.children for row in rows}
    assert stars["solana"] == "★"
    assert stars["bitcoin"] == "☆"


def test_table_row_cells(batch):
    row = create_coin_table(batch[:1], set(), "€", "unused").children[1].children[0]
    price_cell, change_cell = row.children[2], row.children[3]
    assert price_cell.children == "€100.00"
    assert change_cell.children == "+1.50%"
    trade_cell = row.children[7]
    assert trade_cell.children.href == "https://www.binance.com/en/trade/BTC_USDT"
    sparkline_cell = row.children[6]
    assert sparkline_cell.children.src.startswith("data:image/svg+xml;base64,")


def test_four_cards(batch):
    cards = create_cards(build_card_lists(batch), "$")
    assert len(cards) == 4


def test_layout_reflects_state(manager, batch):
    with patch("coinboard.data_manager.fetch_market_batch", return_value=batch):
        manager.change_currency("gbp")
    root = create_layout(manager)
    assert isinstance(root.children, list)
    header = root.children[5]
    dropdown = header.children[1]
    assert dropdown.value == "gbp"


def test_create_app(manager):
    app = create_app(manager)
    assert isinstance(app, Dash)
    assert app.callback_map
