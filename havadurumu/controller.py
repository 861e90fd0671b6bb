"""Search controller: owns the query state and the search history."""

import asyncio
import logging
from collections.abc import Callable
from datetime import datetime

from .errors import FetchError, PersistenceError
from .models.history import HISTORY_LIMIT, SearchHistoryEntry, merge_history
from .models.state import QueryState
from .services.history_store import HistoryStore
from .services.weather_client import WeatherClient

logger = logging.getLogger(__name__)

FETCH_ERROR_MESSAGE = "Hava durumu bilgisi alınamadı. Lütfen geçerli bir şehir adı girin."

Listener = Callable[[QueryState, list[SearchHistoryEntry]], None]


class SearchController:
    """Mediates every transition between idle, loading, success and failure.

    Runs entirely on one event loop. The loading flag only gates re-entry at
    the UI level; overlapping submissions are not cancelled and resolve in
    arrival order.
    """

    def __init__(
        self,
        client: WeatherClient,
        history_store: HistoryStore,
        history_limit: int = HISTORY_LIMIT,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.client = client
        self.history_store = history_store
        self.history_limit = history_limit
        self._clock = clock
        self._state = QueryState()
        self._history: list[SearchHistoryEntry] = []
        self._listeners: list[Listener] = []
        self._pending_saves: set[asyncio.Task] = set()

    @property
    def state(self) -> QueryState:
        return self._state

    @property
    def history(self) -> list[SearchHistoryEntry]:
        return list(self._history)

    def subscribe(self, listener: Listener) -> None:
        """Register a callback invoked after every state change."""
        self._listeners.append(listener)

    def _update(self, **changes) -> None:
        self._state = self._state.model_copy(update=changes)
        self._notify()

    def _notify(self) -> None:
        history = self.history
        for listener in self._listeners:
            listener(self._state, history)

    def set_city(self, text: str) -> None:
        """Update the input text without searching."""
        if text != self._state.city:
            self._update(city=text)

    async def load_history(self) -> None:
        """Populate history from the store. Failures leave it empty."""
        try:
            loaded = await self.history_store.load()
        except PersistenceError as e:
            logger.warning(f"Could not load search history: {e}")
            return

        self._history = loaded[: self.history_limit]
        logger.info(f"Loaded {len(self._history)} history entries")
        self._notify()

    async def submit(self, city: str) -> None:
        """Search for a city. Blank input is ignored."""
        if not city or not city.strip():
            return

        self._update(loading=True, error="")

        try:
            snapshot = await self.client.fetch_weather(city)
        except FetchError as e:
            logger.info(f"Weather lookup for {city!r} failed: {e}")
            self._update(loading=False, error=FETCH_ERROR_MESSAGE, weather=None)
            return

        entry = SearchHistoryEntry.create(snapshot.name, self._clock())
        self._history = merge_history(self._history, entry, self.history_limit)
        self._update(loading=False, error="", weather=snapshot)
        self._schedule_save(self.history)

    async def select_history(self, city: str) -> None:
        """Re-run a search for a history entry."""
        self.set_city(city)
        await self.submit(city)

    def _schedule_save(self, history: list[SearchHistoryEntry]) -> None:
        task = asyncio.create_task(self._persist(history))
        self._pending_saves.add(task)
        task.add_done_callback(self._pending_saves.discard)

    async def _persist(self, history: list[SearchHistoryEntry]) -> None:
        try:
            await self.history_store.save(history)
        except PersistenceError as e:
            logger.warning(f"Could not save search history: {e}")

    async def wait_for_persistence(self) -> None:
        """Wait for any in-flight history writes to finish."""
        if self._pending_saves:
            await asyncio.gather(*self._pending_saves)
