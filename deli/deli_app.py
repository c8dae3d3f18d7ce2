"""Main Textual app class."""

from __future__ import annotations

import logging
import sqlite3
from datetime import datetime
from pathlib import Path
from typing import Callable

from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.events import Key
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.widgets import Header, Static

from deli.choice_modal import ChoiceModal
from deli.data import (
    DRINK_PRICING,
    SANDWICH_PRICING,
    drink_size_options,
    sandwich_size_options,
    signature_options,
)
from deli.models import Chips, Drink, DrinkSize, Order, Product, Sandwich, SandwichSize, SignatureSandwichType
from deli.persistence import bootstrap_schema, load_order_summaries, save_order, update_order_status
from deli.printer import check_printer_dependencies, print_receipt
from deli.prompt_modal import PromptModal
from deli.receipts import render_receipt, save_receipt
from deli.rendering import format_menu, format_order_lines
from deli.sandwich_modal import SandwichModal
from deli.signatures import build_signature_sandwich
from deli.wizard import SandwichWizard

logger = logging.getLogger(__name__)

HOME_OPTIONS = ["New Order", "Order History"]
ORDER_OPTIONS = ["Add Sandwich", "Add Drink", "Add Chips", "Checkout"]


class DeliApp(App):
    """A Textual app for composing, checking out and printing deli orders."""

    TITLE = "DELI-cious"
    SUB_TITLE = "Your Custom Sandwich Destination"

    CSS = """
    Screen {
        layout: vertical;
    }

    #main-layout {
        height: 1fr;
    }

    #order-pane {
        width: 3fr;
        border: round $primary;
        padding: 1;
    }

    #menu-pane {
        width: 2fr;
        border: round $secondary;
        padding: 1;
    }

    #order-list {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #menu {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #status-bar {
        border: heavy $secondary;
        padding: 0 1;
        height: 4;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    screen_state = reactive("home")

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self) -> None:
        super().__init__()
        self.order: Order | None = None
        self.system_status = ""
        self.printer_ready = False
        logger.debug("app_init")

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main-layout"):
            with Vertical(id="order-pane"):
                yield Static("Current Order", classes="pane-title")
                yield Static(id="order-list")
            with Vertical(id="menu-pane"):
                yield Static(id="menu-title", classes="pane-title")
                yield Static(id="menu")
                yield Static(id="status-bar")

    def on_mount(self) -> None:
        bootstrap_schema()
        self.printer_ready, msg = check_printer_dependencies()
        self.system_status = f"Welcome to DELI-cious Sandwiches! ({msg})"
        logger.debug("on_mount printer_status=%r", msg)
        self._refresh_all()

    def on_key(self, event: Key) -> None:
        if isinstance(self.screen, ModalScreen):
            return
        if not event.is_printable or not event.character or not event.character.isdigit():
            return

        logger.debug("on_key key=%r state=%r", event.key, self.screen_state)
        choice = int(event.character)
        event.stop()
        if self.screen_state == "home":
            self._handle_home_choice(choice)
        else:
            self._handle_order_choice(choice)

    def _handle_home_choice(self, choice: int) -> None:
        if choice == 1:
            self.order = Order()
            self.screen_state = "order"
            self._set_status("New order started.")
        elif choice == 2:
            self._show_order_history()
        elif choice == 0:
            logger.info("app_exit")
            self.exit()
        else:
            self._set_status("Invalid choice. Please try again.")

    def _handle_order_choice(self, choice: int) -> None:
        if choice == 1:
            self._start_add_sandwich()
        elif choice == 2:
            self._start_add_drink()
        elif choice == 3:
            self._start_add_chips()
        elif choice == 4:
            self._start_checkout()
        elif choice == 0:
            self._start_cancel_order()
        else:
            self._set_status("Invalid choice. Please try again.")

    def _add_product(self, product: Product, message: str) -> None:
        if self.order is None:
            return
        self.order.add_product(product)
        logger.debug("product_added type=%s price=%s", type(product).__name__, product.price())
        self._set_status(message)

    def _start_add_sandwich(self) -> None:
        def picked(choice: int | None) -> None:
            if choice == 0:
                self.push_screen(SandwichModal(SandwichWizard()), self._sandwich_built)
            elif choice == 1:
                self._start_signature_sandwich()

        self.push_screen(
            ChoiceModal(
                "Add Sandwich",
                ["Custom Sandwich (build your own)", "Signature Sandwich (chef's special)"],
                body="What type of sandwich would you like?",
            ),
            picked,
        )

    def _sandwich_built(self, sandwich: Sandwich | None) -> None:
        if sandwich is None:
            self._set_status("Sandwich cancelled.")
            return
        if sandwich.signature is not None:
            self._add_product(sandwich, f"✓ {sandwich.signature.display_name} added to order!")
        else:
            self._add_product(sandwich, "✓ Sandwich added to order!")

    def _start_signature_sandwich(self) -> None:
        signatures = list(SignatureSandwichType)

        def signature_picked(choice: int | None) -> None:
            if choice is None:
                return
            signature = signatures[choice]
            self._pick_sandwich_size(lambda size: self._signature_sized(signature, size))

        self.push_screen(
            ChoiceModal("Signature Sandwich Menu", [option.label for option in signature_options()]),
            signature_picked,
        )

    def _signature_sized(self, signature: SignatureSandwichType, size: SandwichSize) -> None:
        sandwich = build_signature_sandwich(signature, size)

        def customized(_: Sandwich | None) -> None:
            # Esc during customization keeps whatever was added so far.
            self._sandwich_built(sandwich)

        def customize_answer(choice: int | None) -> None:
            if choice is None:
                return
            if choice == 0:
                self.push_screen(
                    SandwichModal(SandwichWizard(sandwich), title=f"Customize Your {signature.display_name}"),
                    customized,
                )
            else:
                self._sandwich_built(sandwich)

        self.push_screen(
            ChoiceModal(
                f"Your {signature.display_name} has been prepared!",
                ["Yes", "No"],
                body=Text(f"{sandwich.description()}\n\nWould you like to add additional toppings?"),
                zero_label=None,
            ),
            customize_answer,
        )

    def _pick_sandwich_size(self, on_size: Callable[[SandwichSize], None]) -> None:
        sizes = list(SANDWICH_PRICING)

        def picked(choice: int | None) -> None:
            if choice is None:
                return
            on_size(SandwichSize(sizes[choice]))

        self.push_screen(
            ChoiceModal("Select Sandwich Size", [option.label for option in sandwich_size_options()]),
            picked,
        )

    def _start_add_drink(self) -> None:
        sizes = list(DRINK_PRICING)

        def size_picked(choice: int | None) -> None:
            if choice is None:
                return
            size = DrinkSize(sizes[choice])

            def flavor_entered(flavor: str | None) -> None:
                if flavor is None:
                    return
                self._add_product(Drink(size=size, flavor=flavor), "✓ Drink added to order!")

            self.push_screen(
                PromptModal("Add Drink", "Enter drink flavor (e.g., Coke, Sprite, Lemonade)", "Flavor"),
                flavor_entered,
            )

        self.push_screen(
            ChoiceModal("Add Drink", [option.label for option in drink_size_options()], body="Select drink size:"),
            size_picked,
        )

    def _start_add_chips(self) -> None:
        def type_entered(chip_type: str | None) -> None:
            if chip_type is None:
                return
            self._add_product(Chips(chip_type=chip_type), "✓ Chips added to order!")

        self.push_screen(
            PromptModal("Add Chips", "Enter chip type (e.g., Lays, Doritos, Cheetos)", "Chip type"),
            type_entered,
        )

    def _start_checkout(self) -> None:
        if self.order is None:
            return
        problem = self.order.validation_message()
        if problem is not None:
            self._set_status(problem)
            logger.debug("checkout_blocked reason=%r", problem)
            return

        def confirmed(choice: int | None) -> None:
            if choice == 0:
                self._complete_checkout()

        self.push_screen(
            ChoiceModal("Checkout", ["Confirm Order"], body=Text(self.order.render()), zero_label="Return to order"),
            confirmed,
        )

    def _complete_checkout(self) -> None:
        order = self.order
        if order is None:
            return

        now = datetime.now()
        ok, result = save_receipt(order, now)
        if not ok:
            self._set_status(f"{result} (order kept, try checkout again)")
            return

        try:
            saved = save_order(order, receipt_path=result, created_at=now)
        except sqlite3.Error as exc:
            logger.error("checkout_ledger_failed receipt=%s error=%r", result, exc)
            self._discard_receipt(result)
            self._set_status(f"Could not record order: {exc} (order kept, try checkout again)")
            return

        status = f"Order completed! Receipt saved: {result}"
        if self.printer_ready:
            try:
                print_receipt(render_receipt(order.render(), now))
            except Exception as exc:
                print_status = "PRINT_FAILED"
                status = f"Saved {saved.order_id[:8]} but print failed: {exc}"
                logger.error("checkout_print_failed order_id=%s error=%r", saved.order_id, exc)
            else:
                print_status = "PRINTED"
                status = f"Saved + printed: {saved.order_id[:8]}"
            try:
                update_order_status(saved.order_id, print_status)
            except sqlite3.Error as exc:
                status += f" (status not recorded: {exc})"
                logger.error("checkout_status_failed order_id=%s error=%r", saved.order_id, exc)

        logger.info("checkout_complete order_id=%s total=%s", saved.order_id, saved.total)
        self.order = None
        self.screen_state = "home"
        self._set_status(status)

    def _discard_receipt(self, receipt_path: str) -> None:
        try:
            Path(receipt_path).unlink(missing_ok=True)
        except OSError as exc:
            logger.error("receipt_discard_failed path=%s error=%r", receipt_path, exc)

    def _start_cancel_order(self) -> None:
        if self.order is None or self.order.is_empty():
            self._discard_order()
            return

        def answered(choice: int | None) -> None:
            if choice == 0:
                self._discard_order()

        self.push_screen(
            ChoiceModal(
                "Cancel Order",
                ["Yes", "No"],
                body="Are you sure you want to cancel this order?",
                zero_label=None,
            ),
            answered,
        )

    def _discard_order(self) -> None:
        self.order = None
        self.screen_state = "home"
        self._set_status("Order cancelled.")

    def _show_order_history(self) -> None:
        summaries = load_order_summaries()
        if not summaries:
            self._set_status("No orders recorded yet.")
            return
        body = Text()
        for idx, summary in enumerate(summaries):
            if idx > 0:
                body.append("\n")
            body.append(
                f"{summary.created_at[:19]}  {summary.item_count} item(s)  "
                f"${summary.total}  {summary.status}"
            )
        self.push_screen(ChoiceModal("Order History", [], body=body, zero_label="Back"))

    def watch_screen_state(self, _: str) -> None:
        self._refresh_all()

    def _set_status(self, message: str) -> None:
        self.system_status = message
        self._refresh_all()

    def _refresh_all(self) -> None:
        self._refresh_order()
        self._refresh_menu()

    def _refresh_order(self) -> None:
        try:
            order_widget = self.query_one("#order-list", Static)
        except NoMatches:
            return
        order_widget.update(format_order_lines(self.order))

    def _refresh_menu(self) -> None:
        try:
            title = self.query_one("#menu-title", Static)
            menu = self.query_one("#menu", Static)
            status_bar = self.query_one("#status-bar", Static)
        except NoMatches:
            return

        if self.screen_state == "home":
            title.update("Home Screen")
            menu.update(format_menu(HOME_OPTIONS, "Exit"))
        else:
            title.update("Order Screen")
            menu.update(format_menu(ORDER_OPTIONS, "Cancel Order"))

        text = Text(self.system_status or "Ready")
        if self.order is not None and not self.order.is_empty():
            text.append(f"\nCurrent items: {self.order.product_count}", style="dim")
        status_bar.update(text)
