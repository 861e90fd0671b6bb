"""History panel component for re-running past searches."""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.message import Message
from textual.widgets import Label, ListItem, ListView, Static

from ..models.history import SearchHistoryEntry


def escape_markup(text: str) -> str:
    """Escape Rich markup characters in user content."""
    # Escape brackets which are used for Rich markup
    return text.replace("[", r"\[").replace("]", r"\]")


class HistoryListItem(ListItem):
    """A single history entry in the list."""

    def __init__(self, entry: SearchHistoryEntry) -> None:
        super().__init__()
        self.entry = entry

    def compose(self) -> ComposeResult:
        yield Static(
            f"[bold]{escape_markup(self.entry.city)}[/bold]  [dim]{escape_markup(self.entry.time)}[/dim]",
            markup=True,
        )


class HistoryList(ListView):
    """List view for history entries with keyboard navigation."""

    BINDINGS = [
        Binding("j", "cursor_down", "Down", show=False),
        Binding("k", "cursor_up", "Up", show=False),
    ]

    def __init__(self, entries: list[SearchHistoryEntry] | None = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self._entries = entries or []

    def compose(self) -> ComposeResult:
        for entry in self._entries:
            yield HistoryListItem(entry)

    def update_entries(self, entries: list[SearchHistoryEntry]) -> None:
        """Replace the list contents."""
        if entries == self._entries:
            return
        self._entries = list(entries)
        self.clear()
        for entry in self._entries:
            self.append(HistoryListItem(entry))


class HistoryPanel(Static):
    """Panel listing recent searches; hidden while history is empty."""

    DEFAULT_CSS = """
    HistoryPanel {
        height: auto;
        border: round $primary;
        padding: 0 1;
        display: none;
    }

    HistoryPanel.visible {
        display: block;
    }

    HistoryPanel #history-title {
        text-style: bold;
        padding-bottom: 1;
    }

    HistoryPanel HistoryList {
        height: auto;
        max-height: 12;
    }

    HistoryPanel ListItem {
        padding: 0 1;
    }

    HistoryPanel ListItem:hover {
        background: $surface-lighten-1;
    }

    HistoryPanel ListItem.-highlight {
        background: $primary-darken-2;
    }
    """

    class EntrySelected(Message):
        """Message sent when a history entry is chosen."""

        def __init__(self, entry: SearchHistoryEntry) -> None:
            super().__init__()
            self.entry = entry

    def compose(self) -> ComposeResult:
        yield Label("🕒 Arama Geçmişi", id="history-title")
        yield HistoryList(id="history-list")

    def update_history(self, entries: list[SearchHistoryEntry]) -> None:
        """Show the given entries, most recent first."""
        self.query_one(HistoryList).update_entries(entries)
        self.set_class(bool(entries), "visible")

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        """Handle selection by enter or click."""
        event.stop()
        if isinstance(event.item, HistoryListItem):
            self.post_message(self.EntrySelected(event.item.entry))
