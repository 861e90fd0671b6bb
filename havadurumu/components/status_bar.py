"""Status bar component showing the clock, current activity and keyboard hints."""

from datetime import datetime

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Static


class StatusBar(Horizontal):
    """Bottom status bar with time, activity and keyboard hints."""

    DEFAULT_CSS = """
    StatusBar {
        height: 1;
        background: $surface-darken-1;
        color: $text-muted;
        padding: 0 1;
        width: 100%;
        dock: bottom;
    }

    StatusBar #status-time {
        width: auto;
    }

    StatusBar #status-last-search {
        width: auto;
        padding-left: 2;
    }

    StatusBar #status-activity {
        width: auto;
        padding-left: 2;
        color: $warning;
    }

    StatusBar #status-spacer {
        width: 1fr;
    }

    StatusBar #status-hints {
        width: auto;
        text-align: right;
    }
    """

    def __init__(self) -> None:
        super().__init__()
        self._last_search: datetime | None = None

    def compose(self) -> ComposeResult:
        yield Static("", id="status-time")
        yield Static("", id="status-last-search")
        yield Static("", id="status-activity")
        yield Static("", id="status-spacer")
        yield Static(
            "[dim]enter[/dim] Ara  [dim]tab[/dim] Geçmiş  [dim]ctrl+q[/dim] Çıkış",
            id="status-hints",
        )

    def on_mount(self) -> None:
        """Start clock update timer."""
        self._update_time()
        self.set_interval(1, self._update_time)

    def _update_time(self) -> None:
        """Update the current time display."""
        now = datetime.now()
        self.query_one("#status-time", Static).update(f"[bold]{now.strftime('%H:%M:%S')}[/bold]")

        if self._last_search:
            minutes = int((now - self._last_search).total_seconds() // 60)
            if minutes == 0:
                text = "Son arama: az önce"
            else:
                text = f"Son arama: {minutes} dk önce"
            self.query_one("#status-last-search", Static).update(f"[dim]{text}[/dim]")

    def set_last_search(self, time: datetime | None = None) -> None:
        """Record when the last successful search finished."""
        self._last_search = time or datetime.now()
        self._update_time()

    def set_activity(self, activity: str) -> None:
        """Set current activity message (e.g. 'Yükleniyor...')."""
        self.query_one("#status-activity", Static).update(
            f"[yellow]{activity}[/yellow]" if activity else ""
        )

    def clear_activity(self) -> None:
        """Clear activity message."""
        self.set_activity("")
