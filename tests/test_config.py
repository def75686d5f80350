import importlib

from coinboard import config


def test_data_dir_from_environment(monkeypatch, tmp_path):
    store = tmp_path / "store"
    monkeypatch.setenv("COINBOARD_DATA_DIR", str(store))
    try:
        importlib.reload(config)
        assert config.DATA_DIR == store
        assert config.DATA_DIR.is_dir()
        assert config.WATCHLIST_FILE == store / "local_storage.json"
    finally:
        monkeypatch.delenv("COINBOARD_DATA_DIR")
        importlib.reload(config)
