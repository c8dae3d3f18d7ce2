"""Sandwich builder modal screen."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Static

from deli.data import format_money
from deli.models import Sandwich
from deli.rendering import format_menu
from deli.wizard import SandwichWizard


class SandwichModal(ModalScreen[Sandwich | None]):
    """Drive a SandwichWizard with number keys; dismisses with the sandwich or None."""

    CSS = """
    SandwichModal {
        align: center middle;
        background: $background 60%;
    }

    #sandwich-dialog {
        width: 76;
        height: auto;
        max-height: 90%;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #sandwich-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #sandwich-preview {
        margin-bottom: 1;
        color: white;
    }

    #sandwich-message {
        color: #9be79b;
    }

    #sandwich-help {
        margin-top: 1;
        color: #dddddd;
    }
    """

    def __init__(self, wizard: SandwichWizard, title: str = "Add Sandwich") -> None:
        super().__init__()
        self.wizard = wizard
        self.title_text = title

    def compose(self) -> ComposeResult:
        with Container(id="sandwich-dialog"):
            yield Static(self.title_text, id="sandwich-title")
            yield Static(id="sandwich-preview")
            yield Static(id="sandwich-step")
            yield Static(id="sandwich-message")
            yield Static(id="sandwich-help")

    def on_mount(self) -> None:
        self._refresh_content()

    def on_key(self, event: Key) -> None:
        if event.key in {"escape", "ctrl+c"}:
            self.dismiss(None)
            event.stop()
            return

        if not event.is_printable or not event.character:
            return
        key = event.character.lower()
        event.stop()

        if self.wizard.is_yes_no() and key in {"y", "n"}:
            number = 1 if key == "y" else 2
        elif key.isdigit():
            number = int(key)
        else:
            return

        if not self.wizard.choose(number):
            self.query_one("#sandwich-message", Static).update(Text("Invalid choice.", style="#ffb3b3"))
            return

        if self.wizard.cancelled:
            self.dismiss(None)
            return
        if self.wizard.finished:
            self.dismiss(self.wizard.sandwich)
            return
        self._refresh_content()

    def _refresh_content(self) -> None:
        preview = self.query_one("#sandwich-preview", Static)
        step = self.query_one("#sandwich-step", Static)
        message = self.query_one("#sandwich-message", Static)
        help_text = self.query_one("#sandwich-help", Static)

        sandwich = self.wizard.sandwich
        if sandwich is None:
            preview.update(Text("(choose bread and size)", style="dim"))
        else:
            content = Text(sandwich.description())
            content.append(f"\nCurrent price: {format_money(sandwich.price())}", style="bold")
            preview.update(content)

        body = Text(self.wizard.prompt(), style="bold white")
        body.append("\n")
        labels = [option.label for option in self.wizard.options()]
        body.append_text(format_menu(labels, self.wizard.zero_label()))
        step.update(body)
        message.update(self.wizard.last_message)

        if self.wizard.is_yes_no():
            help_text.update("Y/N or 1/2 answer, Esc cancel sandwich")
        else:
            help_text.update("Number keys pick, 0 next step, Esc cancel sandwich")
