"""Search bar component: city input and search button."""

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.message import Message
from textual.widgets import Button, Input


class SearchBar(Horizontal):
    """City input with a search trigger that is disabled while loading."""

    DEFAULT_CSS = """
    SearchBar {
        height: auto;
        margin-bottom: 1;
    }

    SearchBar #city-input {
        width: 1fr;
    }

    SearchBar #search-button {
        width: auto;
        min-width: 10;
    }
    """

    class SearchRequested(Message):
        """Message sent when the user asks to search."""

        def __init__(self, city: str) -> None:
            super().__init__()
            self.city = city

    class CityChanged(Message):
        """Message sent when the input text changes."""

        def __init__(self, city: str) -> None:
            super().__init__()
            self.city = city

    def __init__(self) -> None:
        super().__init__()
        self._loading = False

    def compose(self) -> ComposeResult:
        yield Input(placeholder="Şehir adı girin...", id="city-input")
        yield Button("🔍 Ara", id="search-button", variant="primary")

    def on_mount(self) -> None:
        self.query_one("#city-input", Input).focus()

    def set_city(self, city: str) -> None:
        """Update the input text (e.g. after choosing a history entry)."""
        city_input = self.query_one("#city-input", Input)
        if city_input.value != city:
            # Programmatic writes must not echo back as user edits
            with city_input.prevent(Input.Changed):
                city_input.value = city

    def set_loading(self, loading: bool) -> None:
        """Disable the trigger while a search is in flight."""
        self._loading = loading
        self.query_one("#search-button", Button).disabled = loading

    def _request_search(self) -> None:
        if self._loading:
            return
        self.post_message(self.SearchRequested(self.query_one("#city-input", Input).value))

    def on_input_changed(self, event: Input.Changed) -> None:
        event.stop()
        self.post_message(self.CityChanged(event.value))

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self._request_search()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self._request_search()
