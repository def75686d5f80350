"""Main Dash application setup."""
from functools import partial

from dash import Dash

from coinboard.app import callbacks, layout
from coinboard.config import DASH_DEBUG, DASH_PORT
from coinboard.data_manager import DataManager
from coinboard.utils import setup_logger

logger = setup_logger(__name__)


def create_app(data_manager: DataManager) -> Dash:
    """
    Create and configure the Dash application.

    Args:
        data_manager: DataManager with the initial batch loaded

    Returns:
        Configured Dash application
    """
    # Star buttons are created by callbacks, not present in the initial layout
    app = Dash(__name__, title="Crypto Market Dashboard", suppress_callback_exceptions=True)

    # Layout is rebuilt per page load so selectors match the current state
    app.layout = partial(layout.create_layout, data_manager)

    # Register callbacks
    callbacks.register_callbacks(app, data_manager)

    return app


def run_app(app: Dash) -> None:
    """Run the Dash application."""
    startup_msg = f"Starting Dash… open http://127.0.0.1:{DASH_PORT}/"
    logger.info(startup_msg)
    # Log file path is set in utils.setup_logger
    app.run(debug=DASH_DEBUG, port=DASH_PORT)
