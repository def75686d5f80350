"""Dash application layout."""
from datetime import datetime
from typing import Container, List, Optional, Sequence

from dash import dcc, html

from coinboard.config import REFRESH_INTERVAL_SECONDS
from coinboard.constants import CARD_DEFINITIONS, CURRENCIES, FILTER_MODES
from coinboard.data import CardLists
from coinboard.data_manager import DataManager
from coinboard.models import CoinRecord, GlobalStats
from coinboard.utils import format_currency, format_percent, trade_link
from coinboard.visualization import create_sentiment_gauge, sparkline_data_uri, trend_color

FONT_FAMILY = "-apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, 'Helvetica Neue', Arial, sans-serif"

BUTTON_STYLE = {
    "padding": "8px 18px",
    "margin": "4px",
    "border": "1px solid #dee2e6",
    "borderRadius": "6px",
    "backgroundColor": "#ffffff",
    "color": "#495057",
    "fontSize": "14px",
    "fontWeight": "500",
    "cursor": "pointer",
    "transition": "all 0.2s ease",
    "boxShadow": "0 1px 3px rgba(0,0,0,0.1)"
}

ACTIVE_BUTTON_STYLE = {
    **BUTTON_STYLE,
    "backgroundColor": "#007bff",
    "color": "#ffffff",
    "borderColor": "#007bff",
    "boxShadow": "0 2px 6px rgba(0,123,255,0.3)"
}

STAR_STYLE = {
    "background": "none",
    "border": "none",
    "cursor": "pointer",
    "fontSize": "20px",
    "color": "#adb5bd",
}

ACTIVE_STAR_STYLE = {**STAR_STYLE, "color": "#F0B90B"}

CELL_STYLE = {"padding": "10px 12px", "borderBottom": "1px solid #eef0f3", "verticalAlign": "middle"}

TABLE_COLUMNS = ["#", "Asset", "Price", "24h %", "Volume (24h)", "Market Cap", "Last 7 Days", "", ""]

BANNER_STYLE = {
    "padding": "10px 16px",
    "marginBottom": "16px",
    "backgroundColor": "#fff3cd",
    "border": "1px solid #ffe69c",
    "borderRadius": "8px",
    "color": "#664d03",
    "fontSize": "14px",
}


def create_layout(data_manager: DataManager) -> html.Div:
    """
    Create the Dash application layout.

    Served per page load, so the selectors reflect the current state.
    Cards, table and stats are filled in by callbacks.

    Args:
        data_manager: DataManager holding the dashboard state

    Returns:
        HTML Div containing the full layout
    """
    state = data_manager.state
    return html.Div(
        style={
            "fontFamily": FONT_FAMILY,
            "padding": "20px",
            "maxWidth": "100%",
            "backgroundColor": "#f8f9fa"
        },
        children=[
            dcc.Interval(id="refresh-interval", interval=REFRESH_INTERVAL_SECONDS * 1000),
            dcc.Store(id="data-version", data=state.version),
            dcc.Store(id="filter-state", data=state.active_filter),
            dcc.Store(id="watchlist-version", data=0),
            dcc.ConfirmDialog(id="demo-notice"),

            _create_header_div(state.currency),
            html.Div(id="demo-banner", style={"display": "none"}),

            html.Div(
                style={"display": "flex", "gap": "20px", "flexWrap": "wrap", "marginBottom": "20px"},
                children=[
                    html.Div(id="global-stats", style={"flex": "3", "minWidth": "320px"}),
                    html.Div(
                        style={
                            "flex": "1",
                            "minWidth": "240px",
                            "backgroundColor": "#ffffff",
                            "borderRadius": "8px",
                            "boxShadow": "0 2px 4px rgba(0,0,0,0.08)"
                        },
                        children=dcc.Graph(
                            id="fg-gauge",
                            figure=create_sentiment_gauge(state.sentiment),
                            config={"displayModeBar": False},
                        ),
                    ),
                ],
            ),

            _create_cards_section(),
            _create_filter_div(state.active_filter, len(state.watchlist)),

            html.Div(
                id="coin-table",
                style={
                    "backgroundColor": "#ffffff",
                    "padding": "12px",
                    "borderRadius": "8px",
                    "boxShadow": "0 2px 4px rgba(0,0,0,0.08)",
                    "overflowX": "auto"
                },
            ),

            html.Div(
                id="last-updated",
                style={
                    "marginTop": "12px",
                    "color": "#6c757d",
                    "fontSize": "13px",
                    "fontStyle": "italic"
                },
            ),
        ]
    )


def _create_header_div(currency: str) -> html.Div:
    """Create the title row with the currency selector."""
    return html.Div(
        style={"display": "flex", "alignItems": "center", "justifyContent": "space-between", "marginBottom": "16px"},
        children=[
            html.H2(
                "Crypto Market Dashboard",
                style={"margin": "0", "color": "#2c3e50", "fontWeight": "600"}
            ),
            dcc.Dropdown(
                id="currency-select",
                options=[{"label": code.upper(), "value": code} for code in CURRENCIES],
                value=currency,
                clearable=False,
                searchable=False,
                style={"width": "110px"},
            ),
        ],
    )


def _create_cards_section() -> html.Div:
    """Create the horizontally scrolling card strip with its scroll buttons."""
    scroll_button_style = {**BUTTON_STYLE, "padding": "6px 12px"}
    return html.Div(
        style={"marginBottom": "20px"},
        children=[
            html.Div(
                style={"display": "flex", "justifyContent": "flex-end"},
                children=[
                    html.Button("←", id="card-scroll-left", style=scroll_button_style),
                    html.Button("→", id="card-scroll-right", style=scroll_button_style),
                ],
            ),
            html.Div(
                id="cards-container",
                style={
                    "display": "flex",
                    "gap": "16px",
                    "overflowX": "auto",
                    "scrollBehavior": "smooth",
                    "paddingBottom": "8px"
                },
            ),
        ],
    )


def _create_filter_div(active_filter: str, watchlist_count: int) -> html.Div:
    """Create the filter button row."""
    buttons = []
    for mode, label in FILTER_MODES:
        children = [label]
        if mode == "watchlist":
            children.append(html.Span(f" ({watchlist_count})", id="watchlist-count"))
        buttons.append(
            html.Button(
                children,
                id=f"btn-filter-{mode}",
                style=ACTIVE_BUTTON_STYLE if mode == active_filter else BUTTON_STYLE,
            )
        )
    return html.Div(
        style={"display": "flex", "flexWrap": "wrap", "gap": "4px", "marginBottom": "12px"},
        children=buttons,
    )


def create_stats(stats: GlobalStats, symbol: str) -> List[html.Div]:
    """Header stat tiles. Totals are summed over the loaded batch."""
    tiles = [
        ("Market Cap (top coins)", format_currency(stats.total_market_cap, symbol, compact=True)),
        ("24h Volume (top coins)", format_currency(stats.total_volume, symbol, compact=True)),
        ("BTC Dominance", f"{stats.btc_dominance}%"),
        ("Cryptocurrencies", f"{stats.active_cryptocurrencies:,}"),
    ]
    return [
        html.Div(
            style={"display": "flex", "gap": "12px", "flexWrap": "wrap"},
            children=[
                html.Div(
                    style={
                        "flex": "1",
                        "minWidth": "150px",
                        "padding": "14px 16px",
                        "backgroundColor": "#ffffff",
                        "borderRadius": "8px",
                        "boxShadow": "0 2px 4px rgba(0,0,0,0.08)"
                    },
                    children=[
                        html.Div(label, style={"fontSize": "12px", "color": "#6c757d", "textTransform": "uppercase"}),
                        html.Div(value, style={"fontSize": "20px", "fontWeight": "600", "color": "#2c3e50"}),
                    ],
                )
                for label, value in tiles
            ],
        )
    ]


def create_demo_banner(using_demo_data: bool):
    """Banner text and style for the demo-data state."""
    if not using_demo_data:
        return None, {"display": "none"}
    return "Live market data is unavailable. Showing demo data.", BANNER_STYLE


def create_last_updated(last_updated: Optional[datetime]) -> str:
    if last_updated is None:
        return ""
    return f"Last updated {last_updated.strftime('%H:%M:%S')} · refreshes every {REFRESH_INTERVAL_SECONDS}s"


def create_cards(card_lists: CardLists, symbol: str) -> List[html.Div]:
    """Create the four summary cards."""
    return [
        _create_card(title, subtitle, accent, getattr(card_lists, key), symbol)
        for key, title, subtitle, accent in CARD_DEFINITIONS
    ]


def _create_card(title: str, subtitle: str, accent: str, coins: Sequence[CoinRecord], symbol: str) -> html.Div:
    items = [
        html.Div(
            style={"display": "flex", "justifyContent": "space-between", "alignItems": "center", "padding": "6px 0"},
            children=[
                html.Div(
                    style={"display": "flex", "alignItems": "center", "gap": "8px"},
                    children=[
                        html.Img(src=coin.image, alt=coin.symbol, style={"width": "20px", "height": "20px"}),
                        html.Span(coin.name, style={"fontWeight": "500"}),
                    ],
                ),
                html.Div(
                    style={"textAlign": "right"},
                    children=[
                        html.Div(format_currency(coin.current_price, symbol), style={"fontWeight": "600"}),
                        html.Div(
                            format_percent(coin.price_change_percentage_24h, signed=False),
                            style={"fontSize": "12px", "color": trend_color(coin.price_change_percentage_24h)},
                        ),
                    ],
                ),
            ],
        )
        for coin in coins
    ]
    if not items:
        items = [html.Div("No coins", style={"color": "#6c757d", "fontSize": "13px"})]

    return html.Div(
        style={
            "minWidth": "280px",
            "flex": "0 0 auto",
            "padding": "16px",
            "backgroundColor": "#ffffff",
            "borderRadius": "8px",
            "borderTop": f"4px solid {accent}",
            "boxShadow": "0 2px 4px rgba(0,0,0,0.08)"
        },
        children=[
            html.Div(title, style={"fontWeight": "600", "fontSize": "16px", "color": "#2c3e50"}),
            html.Div(subtitle, style={"fontSize": "12px", "color": "#6c757d", "marginBottom": "8px"}),
            html.Div(items),
        ],
    )


def create_coin_table(
    rows: Sequence[CoinRecord], watchlist: Container[str], symbol: str, empty_message: str
) -> html.Table:
    """
    Create the coin table.

    Args:
        rows: Filtered rows in display order
        watchlist: Favorite coin ids (for the star state)
        symbol: Currency symbol of the batch
        empty_message: Text shown when there are no rows

    Returns:
        HTML table
    """
    header = html.Thead(
        html.Tr([
            html.Th(col, style={**CELL_STYLE, "textAlign": "left", "color": "#6c757d", "fontSize": "13px"})
            for col in TABLE_COLUMNS
        ])
    )

    if not rows:
        body = html.Tbody(
            html.Tr(
                html.Td(
                    empty_message,
                    colSpan=len(TABLE_COLUMNS),
                    style={"textAlign": "center", "padding": "40px", "color": "#6c757d"},
                )
            )
        )
    else:
        body = html.Tbody([_create_coin_row(coin, coin.id in watchlist, symbol) for coin in rows])

    return html.Table([header, body], style={"width": "100%", "borderCollapse": "collapse", "fontSize": "14px"})


def _create_coin_row(coin: CoinRecord, starred: bool, symbol: str) -> html.Tr:
    change = coin.price_change_percentage_24h
    color = trend_color(change)
    return html.Tr([
        html.Td(coin.market_cap_rank or "", style={**CELL_STYLE, "color": "#8A91B5"}),
        html.Td(
            html.Div(
                style={"display": "flex", "alignItems": "center", "gap": "10px"},
                children=[
                    html.Img(src=coin.image, alt=coin.symbol, style={"width": "24px", "height": "24px"}),
                    html.Div([
                        html.Div(coin.name, style={"fontWeight": "600"}),
                        html.Div(coin.symbol.upper(), style={"fontSize": "12px", "color": "#8A91B5"}),
                    ]),
                ],
            ),
            style=CELL_STYLE,
        ),
        html.Td(format_currency(coin.current_price, symbol), style={**CELL_STYLE, "fontWeight": "600"}),
        html.Td(format_percent(change), style={**CELL_STYLE, "color": color}),
        html.Td(format_currency(coin.total_volume, symbol, compact=True), style=CELL_STYLE),
        html.Td(format_currency(coin.market_cap, symbol, compact=True), style=CELL_STYLE),
        html.Td(
            html.Img(
                src=sparkline_data_uri(coin.sparkline, color),
                alt=f"{coin.symbol} 7d",
                style={"width": "168px", "height": "50px"},
            ),
            style=CELL_STYLE,
        ),
        html.Td(
            html.A(
                "Trade",
                href=trade_link(coin.symbol),
                target="_blank",
                style={"color": "#007bff", "fontWeight": "500", "textDecoration": "none"},
            ),
            style={**CELL_STYLE, "textAlign": "right"},
        ),
        html.Td(
            html.Button(
                "★" if starred else "☆",
                id={"type": "star-btn", "index": coin.id},
                title="Remove from watchlist" if starred else "Add to watchlist",
                style=ACTIVE_STAR_STYLE if starred else STAR_STYLE,
            ),
            style={**CELL_STYLE, "textAlign": "center"},
        ),
    ])
