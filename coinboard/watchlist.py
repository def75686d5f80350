"""Favorite coins, persisted in a local key-value file."""
import json
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple

from coinboard.constants import WATCHLIST_STORAGE_KEY
from coinboard.utils import setup_logger

logger = setup_logger(__name__)


class JsonFileStorage:
    """
    String key-value store backed by one JSON object on disk.

    Mirrors browser local storage: values are strings, callers encode
    their own payloads.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring {self.path}: expected a JSON object")
            return {}
        return data

    def get_item(self, key: str) -> Optional[str]:
        value = self._read_all().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
        tmp_path.replace(self.path)


class WatchlistStore:
    """Ordered set of favorite coin ids, loaded once and flushed on every change."""

    def __init__(self, storage: JsonFileStorage, key: str = WATCHLIST_STORAGE_KEY):
        self.storage = storage
        self.key = key
        self._ids: List[str] = self._load()

    def _load(self) -> List[str]:
        raw = self.storage.get_item(self.key)
        if raw is None:
            return []
        try:
            ids = json.loads(raw)
        except ValueError:
            logger.warning(f"Watchlist entry '{self.key}' is not valid JSON, starting empty")
            return []
        if not isinstance(ids, list):
            logger.warning(f"Watchlist entry '{self.key}' is not a list, starting empty")
            return []

        # Keep first occurrence, drop non-string junk
        seen = set()
        cleaned = []
        for coin_id in ids:
            if isinstance(coin_id, str) and coin_id not in seen:
                seen.add(coin_id)
                cleaned.append(coin_id)
        logger.info(f"Loaded watchlist with {len(cleaned)} coin(s)")
        return cleaned

    def _flush(self, ids: List[str]) -> None:
        self.storage.set_item(self.key, json.dumps(ids))

    @property
    def ids(self) -> Tuple[str, ...]:
        return tuple(self._ids)

    def contains(self, coin_id: str) -> bool:
        return coin_id in self._ids

    def toggle(self, coin_id: str) -> bool:
        """
        Add or remove a coin and persist immediately.

        Memory is only updated once the new list is stored, so a failed
        write leaves both unchanged.

        Returns:
            True if the coin is now in the watchlist

        Raises:
            OSError: the storage file could not be written
        """
        added = coin_id not in self._ids
        if added:
            ids = self._ids + [coin_id]
        else:
            ids = [i for i in self._ids if i != coin_id]
        self._flush(ids)
        self._ids = ids
        logger.info(f"Watchlist {'added' if added else 'removed'} {coin_id} ({len(self._ids)} total)")
        return added

    def __contains__(self, coin_id: object) -> bool:
        return coin_id in self._ids

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._ids))

    def __len__(self) -> int:
        return len(self._ids)
