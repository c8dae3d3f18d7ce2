"""Numbered choice modal screen."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.widgets import Static

from deli.rendering import format_menu


class ChoiceModal(ModalScreen[int | None]):
    """Centered modal listing numbered options; dismisses with the picked index or None."""

    BINDINGS = [
        ("escape", "close", "Close"),
        ("ctrl+c", "close", "Close"),
        ("j", "move_cursor(1)", "Next"),
        ("k", "move_cursor(-1)", "Previous"),
        ("up", "move_cursor(-1)", "Previous"),
        ("down", "move_cursor(1)", "Next"),
        ("enter", "pick_current", "Pick"),
    ]

    CSS = """
    ChoiceModal {
        align: center middle;
        background: $background 60%;
    }

    #choice-dialog {
        width: 72;
        height: auto;
        max-height: 90%;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
        overflow-y: auto;
    }

    #choice-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #choice-body {
        margin-bottom: 1;
        color: white;
    }

    #choice-help {
        margin-top: 1;
        color: #dddddd;
    }
    """

    cursor_index = reactive(0)

    def __init__(
        self,
        title: str,
        options: list[str],
        body: str | Text = "",
        zero_label: str | None = "Cancel",
    ) -> None:
        super().__init__()
        self.title_text = title
        self.options = options
        self.body = body
        self.zero_label = zero_label

    def compose(self) -> ComposeResult:
        with Container(id="choice-dialog"):
            yield Static(self.title_text, id="choice-title")
            yield Static(self.body, id="choice-body")
            yield Static(id="choice-options")
            yield Static("1-9 pick, J/K/↑/↓ move, Enter pick, 0/Esc back", id="choice-help")

    def on_mount(self) -> None:
        self._refresh_content()

    def on_key(self, event: Key) -> None:
        if not event.is_printable or not event.character or not event.character.isdigit():
            return
        number = int(event.character)
        event.stop()
        if number == 0:
            if self.zero_label is not None:
                self.dismiss(None)
            return
        if 1 <= number <= len(self.options):
            self.dismiss(number - 1)

    def action_close(self) -> None:
        self.dismiss(None)

    def action_move_cursor(self, delta: int) -> None:
        if not self.options:
            return
        self.cursor_index = (self.cursor_index + delta) % len(self.options)
        self._refresh_content()

    def action_pick_current(self) -> None:
        if not self.options:
            return
        self.dismiss(self.cursor_index)

    def _refresh_content(self) -> None:
        options_widget = self.query_one("#choice-options", Static)
        options_widget.update(format_menu(self.options, self.zero_label, cursor=self.cursor_index))
