"""Dash application callbacks."""
from dash import ALL, Input, Output, State, ctx
from dash.exceptions import PreventUpdate

from coinboard.app.layout import (
    ACTIVE_BUTTON_STYLE,
    BUTTON_STYLE,
    create_cards,
    create_coin_table,
    create_demo_banner,
    create_last_updated,
    create_stats,
)
from coinboard.constants import CARD_SCROLL_STEP, FILTER_MODES
from coinboard.data_manager import DataManager
from coinboard.utils import setup_logger

logger = setup_logger(__name__)


def register_callbacks(app, data_manager: DataManager) -> None:
    """
    Register all Dash callbacks with the app.

    Args:
        app: Dash application instance
        data_manager: DataManager owning the dashboard state
    """

    @app.callback(
        Output("data-version", "data"),
        Input("refresh-interval", "n_intervals"),
        Input("currency-select", "value"),
        prevent_initial_call=True,
    )
    def refresh_data(n_intervals, currency):
        """Fetch a new batch on timer ticks and currency changes."""
        if ctx.triggered_id == "currency-select":
            changed = data_manager.change_currency(currency)
        else:
            changed = data_manager.refresh()

        # Skipped or failed cycle: keep the current render
        if not changed:
            raise PreventUpdate
        return data_manager.state.version

    @app.callback(
        Output("demo-notice", "displayed"),
        Output("demo-notice", "message"),
        Input("data-version", "data"),
    )
    def show_notice(_version):
        """Show the demo-data notice once."""
        notice = data_manager.consume_notice()
        if not notice:
            raise PreventUpdate
        return True, notice

    @app.callback(
        Output("filter-state", "data"),
        [Input(f"btn-filter-{mode}", "n_clicks") for mode, _ in FILTER_MODES],
        prevent_initial_call=True,
    )
    def select_filter(*_clicks):
        trig = ctx.triggered_id
        if not trig:
            raise PreventUpdate
        mode = trig.replace("btn-filter-", "", 1)
        data_manager.set_filter(mode)
        return mode

    @app.callback(
        [Output(f"btn-filter-{mode}", "style") for mode, _ in FILTER_MODES],
        Input("filter-state", "data"),
    )
    def update_button_styles(active_filter):
        """Update button styles to show active state."""
        return [
            ACTIVE_BUTTON_STYLE if mode == active_filter else BUTTON_STYLE
            for mode, _ in FILTER_MODES
        ]

    @app.callback(
        Output("watchlist-version", "data"),
        Input({"type": "star-btn", "index": ALL}, "n_clicks"),
        State("watchlist-version", "data"),
        prevent_initial_call=True,
    )
    def toggle_star(_clicks, version):
        """Toggle the clicked coin in the watchlist."""
        trig = ctx.triggered_id
        # Buttons re-created by a table render fire with n_clicks=None
        if not trig or not ctx.triggered[0]["value"]:
            raise PreventUpdate
        try:
            data_manager.toggle_watchlist(trig["index"])
        except OSError as e:
            logger.error(f"Could not save watchlist: {e}")
            raise PreventUpdate
        return (version or 0) + 1

    @app.callback(
        Output("watchlist-count", "children"),
        Input("watchlist-version", "data"),
    )
    def update_watchlist_count(_version):
        return f" ({len(data_manager.state.watchlist)})"

    @app.callback(
        Output("cards-container", "children"),
        Input("data-version", "data"),
    )
    def render_cards(_version):
        return create_cards(data_manager.card_lists(), data_manager.display_symbol)

    @app.callback(
        Output("global-stats", "children"),
        Output("demo-banner", "children"),
        Output("demo-banner", "style"),
        Output("last-updated", "children"),
        Input("data-version", "data"),
    )
    def render_header(_version):
        state = data_manager.state
        banner_text, banner_style = create_demo_banner(state.using_demo_data)
        return (
            create_stats(data_manager.global_stats(), data_manager.display_symbol),
            banner_text,
            banner_style,
            create_last_updated(state.last_updated),
        )

    @app.callback(
        Output("coin-table", "children"),
        Input("data-version", "data"),
        Input("filter-state", "data"),
        Input("watchlist-version", "data"),
    )
    def render_table(_version, _active_filter, _watchlist_version):
        return create_coin_table(
            data_manager.table_rows(),
            data_manager.state.watchlist,
            data_manager.display_symbol,
            data_manager.empty_message(),
        )

    app.clientside_callback(
        f"""
        function(nLeft, nRight) {{
            const container = document.getElementById('cards-container');
            const trig = window.dash_clientside.callback_context.triggered[0];
            if (container && trig) {{
                const step = trig.prop_id.startsWith('card-scroll-right') ? {CARD_SCROLL_STEP} : -{CARD_SCROLL_STEP};
                container.scrollLeft += step;
            }}
            return window.dash_clientside.no_update;
        }}
        """,
        Output("cards-container", "className"),
        Input("card-scroll-left", "n_clicks"),
        Input("card-scroll-right", "n_clicks"),
        prevent_initial_call=True,
    )
