"""Main entry point for the Crypto Market Dashboard."""
from coinboard.app.app import create_app, run_app
from coinboard.data_manager import DataManager
from coinboard.utils import setup_logger

logger = setup_logger(__name__)


def main():
    """Main function to load data and start the dashboard."""
    # Load watchlist, sentiment and the first market batch
    data_manager = DataManager()
    data_manager.load_initial()

    # Create and run app
    app = create_app(data_manager)
    run_app(app)


if __name__ == "__main__":
    main()
