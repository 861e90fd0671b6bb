"""Search history persistence."""

import asyncio
import json
import logging

from pydantic import ValidationError

from ..models.history import HISTORY_LIMIT, SearchHistoryEntry
from .store import KeyValueStore

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_KEY = "weatherHistory"


class HistoryStore:
    """Loads and saves the search history as a JSON array in one store slot."""

    def __init__(
        self,
        store: KeyValueStore,
        key: str = DEFAULT_HISTORY_KEY,
        limit: int = HISTORY_LIMIT,
    ):
        self.store = store
        self.key = key
        self.limit = limit

    async def load(self) -> list[SearchHistoryEntry]:
        """Load history; empty when the slot is absent or unreadable JSON.

        Raises PersistenceError if the store itself cannot be read.
        """
        raw = await asyncio.to_thread(self.store.get, self.key)
        if raw is None:
            logger.debug(f"No saved history under {self.key}")
            return []
        return self._parse(raw)

    def _parse(self, raw: str) -> list[SearchHistoryEntry]:
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning(f"Invalid JSON in history slot: {e}")
            return []

        if not isinstance(data, list):
            logger.warning(f"History slot holds {type(data).__name__}, expected a list")
            return []

        history: list[SearchHistoryEntry] = []
        for item in data:
            try:
                entry = SearchHistoryEntry.model_validate(item)
            except ValidationError as e:
                logger.warning(f"Skipping invalid history entry {item!r}: {e}")
                continue
            if any(h.city == entry.city for h in history):
                continue
            history.append(entry)

        logger.debug(f"Loaded {len(history)} history entries")
        return history[: self.limit]

    async def save(self, history: list[SearchHistoryEntry]) -> None:
        """Overwrite the slot with the given history.

        Raises PersistenceError if the write fails.
        """
        payload = json.dumps(
            [entry.model_dump() for entry in history[: self.limit]],
            ensure_ascii=False,
        )
        await asyncio.to_thread(self.store.set, self.key, payload)
