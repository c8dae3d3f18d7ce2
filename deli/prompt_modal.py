"""Free-text entry modal screen."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Static

_MAX_LENGTH = 40


class PromptModal(ModalScreen[str | None]):
    """Prompt for a short line of text such as a drink flavor or chip type."""

    CSS = """
    PromptModal {
        align: center middle;
        background: $background 60%;
    }

    #prompt-dialog {
        width: 56;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #prompt-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #prompt-text {
        color: white;
        margin-bottom: 1;
    }

    #prompt-value {
        border: heavy $secondary;
        padding: 0 1;
        color: white;
        margin-bottom: 1;
    }

    #prompt-error {
        color: #ffb3b3;
        margin-bottom: 1;
    }

    #prompt-help {
        color: #dddddd;
    }
    """

    def __init__(self, title: str, prompt: str, field_name: str) -> None:
        super().__init__()
        self.title_text = title
        self.prompt = prompt
        self.field_name = field_name
        self.value = ""
        self.error = ""

    def compose(self) -> ComposeResult:
        with Container(id="prompt-dialog"):
            yield Static(self.title_text, id="prompt-title")
            yield Static(self.prompt, id="prompt-text")
            yield Static(id="prompt-value")
            yield Static(id="prompt-error")
            yield Static("Enter confirm. Backspace delete. Esc/Ctrl+C cancel.", id="prompt-help")

    def on_mount(self) -> None:
        self._refresh_content()

    def on_key(self, event: Key) -> None:
        if event.key in {"escape", "ctrl+c"}:
            self.dismiss(None)
            event.stop()
            return

        if event.key == "enter":
            self._confirm()
            event.stop()
            return

        if event.key == "backspace":
            if self.value:
                self.value = self.value[:-1]
                self.error = ""
                self._refresh_content()
            event.stop()
            return

        if event.is_printable and event.character:
            if len(self.value) < _MAX_LENGTH:
                self.value += event.character
            self.error = ""
            self._refresh_content()
            event.stop()

    def _confirm(self) -> None:
        normalized = self.value.strip()
        if not normalized:
            self.error = f"{self.field_name} cannot be empty."
            self._refresh_content()
            return
        self.dismiss(normalized)

    def _refresh_content(self) -> None:
        value_widget = self.query_one("#prompt-value", Static)
        error_widget = self.query_one("#prompt-error", Static)
        value_widget.update(Text(f"{self.value}|"))
        error_widget.update(self.error or "")
