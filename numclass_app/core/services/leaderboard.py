"""Service for persisting the capped, rank-ordered leaderboard."""

from __future__ import annotations

import logging
from threading import Lock

from pydantic import TypeAdapter, ValidationError

from numclass_app.constants.game_constants import LEADERBOARD_CAPACITY, LEADERBOARD_KEY
from numclass_app.core.models import LeaderboardEntry
from numclass_app.core.services.storage import KeyValueStore

logger = logging.getLogger(__name__)

_ENTRIES_ADAPTER = TypeAdapter(list[LeaderboardEntry])


class LeaderboardStore:
    """Keeps the top scores in a key-value store.

    Storage problems never reach the caller: ``load`` degrades to an empty
    list and ``save`` to a no-op, both logged.
    """

    def __init__(
        self,
        kv_store: KeyValueStore,
        key: str = LEADERBOARD_KEY,
        capacity: int = LEADERBOARD_CAPACITY,
    ) -> None:
        if capacity <= 0:
            raise ValueError("Leaderboard capacity must be positive.")
        self._kv_store = kv_store
        self._key = key
        self._capacity = capacity
        self._save_lock = Lock()

    @property
    def capacity(self) -> int:
        return self._capacity

    def load(self) -> list[LeaderboardEntry]:
        """Return the stored entries in rank order, or ``[]`` on any failure."""
        try:
            return self._read_entries()
        except (OSError, ValueError, ValidationError):
            logger.exception("Error getting leaderboard from key '%s'", self._key)
            return []

    def save(self, entry: LeaderboardEntry) -> None:
        """Append ``entry``, keep the best ``capacity`` scores and persist them."""
        with self._save_lock:
            try:
                entries = self._read_entries()
                entries.append(entry)
                # sorted() is stable, so equal scores keep their arrival order.
                ranked = sorted(entries, key=lambda e: e.score, reverse=True)[: self._capacity]
                payload = _ENTRIES_ADAPTER.dump_json(ranked).decode("utf-8")
                self._kv_store.set(self._key, payload)
            except (OSError, ValueError, ValidationError):
                logger.exception("Error saving to leaderboard under key '%s'", self._key)
                return
        logger.info("Saved leaderboard entry for %s with score %d", entry.name, entry.score)

    def _read_entries(self) -> list[LeaderboardEntry]:
        raw = self._kv_store.get(self._key)
        if raw is None:
            return []
        return _ENTRIES_ADAPTER.validate_json(raw)
