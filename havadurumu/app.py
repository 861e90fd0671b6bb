"""Main Textual application: the single weather search screen."""

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical, VerticalScroll
from textual.widgets import Label, LoadingIndicator

from .components import HistoryPanel, SearchBar, StatusBar, WeatherCard
from .controller import SearchController
from .models.history import SearchHistoryEntry
from .models.presentation import DEFAULT_PALETTE, presentation_for
from .models.state import Phase, QueryState


class WeatherApp(App):
    """Single-screen weather lookup."""

    TITLE = "Hava Durumu"

    CSS = """
    #main {
        padding: 1 2;
    }

    #title {
        width: 100%;
        text-align: center;
        text-style: bold;
        color: $text;
        padding-bottom: 1;
    }

    #error-banner {
        width: 100%;
        background: $error;
        color: $text;
        padding: 1 2;
        margin-bottom: 1;
        display: none;
    }

    #error-banner.visible {
        display: block;
    }

    #loading {
        height: auto;
        display: none;
        margin: 1 0;
    }

    #loading.visible {
        display: block;
    }

    #loading LoadingIndicator {
        height: 3;
    }

    #loading-text {
        width: 100%;
        text-align: center;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", show=True, priority=True),
        Binding("escape", "focus_input", "Search", show=False),
    ]

    def __init__(self, controller: SearchController, initial_city: str | None = None) -> None:
        super().__init__()
        self.controller = controller
        self.initial_city = initial_city
        self._shown_weather = None

    def compose(self) -> ComposeResult:
        with VerticalScroll(id="main"):
            yield Label("Hava Durumu", id="title")
            yield SearchBar()
            yield Label("", id="error-banner")
            with Vertical(id="loading"):
                yield LoadingIndicator()
                yield Label("Yükleniyor...", id="loading-text")
            yield WeatherCard()
            yield HistoryPanel()
        yield StatusBar()

    def on_mount(self) -> None:
        """Wire the controller and start loading history."""
        self.controller.subscribe(self.render_state)
        self.render_state(self.controller.state, self.controller.history)
        self.run_worker(self.controller.load_history(), name="load-history")

        if self.initial_city:
            self._search_for(self.initial_city)

    def render_state(self, state: QueryState, history: list[SearchHistoryEntry]) -> None:
        """Redraw every widget from controller state."""
        # The input owns its text while typing; it is only pushed on history selection.
        self.query_one(SearchBar).set_loading(state.loading)

        error_banner = self.query_one("#error-banner", Label)
        error_banner.update(state.error)
        error_banner.set_class(bool(state.error), "visible")

        self.query_one("#loading").set_class(state.loading, "visible")

        card = self.query_one(WeatherCard)
        if state.show_weather:
            card.update_weather(state.weather)
            palette = presentation_for(state.weather.condition_text).palette
        else:
            card.clear()
            palette = DEFAULT_PALETTE
        self.query_one("#main").styles.background = palette[0]

        self.query_one(HistoryPanel).update_history(history)

        status_bar = self.query_one(StatusBar)
        if state.phase == Phase.LOADING:
            status_bar.set_activity("Yükleniyor...")
        else:
            status_bar.clear_activity()
        if state.phase == Phase.SUCCESS and state.weather is not self._shown_weather:
            status_bar.set_last_search()
        self._shown_weather = state.weather

    def on_search_bar_city_changed(self, event: SearchBar.CityChanged) -> None:
        self.controller.set_city(event.city)

    def on_search_bar_search_requested(self, event: SearchBar.SearchRequested) -> None:
        self.run_worker(self.controller.submit(event.city), name="search")

    def on_history_panel_entry_selected(self, event: HistoryPanel.EntrySelected) -> None:
        self._search_for(event.entry.city)

    def _search_for(self, city: str) -> None:
        """Put a city into the input and search it."""
        self.query_one(SearchBar).set_city(city)
        self.run_worker(self.controller.select_history(city), name="search")

    def action_focus_input(self) -> None:
        self.query_one("#city-input").focus()

    async def action_quit(self) -> None:
        """Let pending history writes finish, then exit."""
        await self.controller.wait_for_persistence()
        self.exit()
