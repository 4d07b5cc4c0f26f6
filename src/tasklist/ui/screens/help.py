"""Help screen showing keyboard shortcuts."""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Static

HELP_SECTIONS: list[tuple[str, list[tuple[str, str]]]] = [
    (
        "Navigation",
        [
            ("Up / Down", "Previous / next task"),
            ("/", "Focus search"),
            ("Tab", "Move between search, filter and list"),
        ],
    ),
    (
        "Tasks",
        [
            ("n", "New task"),
            ("e / Enter", "Edit task"),
            ("s", "Next status"),
            ("p", "Next priority"),
            ("Space", "Mark for deletion"),
            ("d", "Delete marked (or current) tasks"),
        ],
    ),
    (
        "Filter",
        [
            ("f", "Cycle status filter"),
            ("Escape", "Clear search and filter"),
        ],
    ),
    (
        "General",
        [
            ("?", "Show this help"),
            ("q", "Save and quit"),
        ],
    ),
]


class HelpScreen(ModalScreen):
    """Modal help screen showing keyboard shortcuts."""

    DEFAULT_CSS = """
    HelpScreen {
        align: center middle;
    }

    HelpScreen > Vertical {
        width: 60;
        height: auto;
        max-height: 90%;
        padding: 1 2;
        background: $surface;
        border: solid $primary;
    }

    HelpScreen .help-title {
        text-align: center;
        text-style: bold;
        padding-bottom: 1;
    }

    HelpScreen .help-section {
        height: auto;
        padding: 1 0 0 0;
    }

    HelpScreen .section-title {
        text-style: bold;
        color: $primary;
    }

    HelpScreen .help-row {
        height: 1;
    }

    HelpScreen .help-key {
        width: 15;
        text-style: bold;
    }

    HelpScreen .help-desc {
        width: 1fr;
        color: $text-muted;
    }
    """

    BINDINGS = [
        Binding("escape", "dismiss", "Close", show=False),
    ]

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Static("Keyboard Shortcuts", classes="help-title")
            for title, rows in HELP_SECTIONS:
                with Vertical(classes="help-section"):
                    yield Static(title, classes="section-title")
                    for key, description in rows:
                        with Horizontal(classes="help-row"):
                            yield Static(key, classes="help-key")
                            yield Static(description, classes="help-desc")

    def on_key(self, event) -> None:
        """Dismiss on any key press and prevent propagation."""
        event.stop()
        self.dismiss()
