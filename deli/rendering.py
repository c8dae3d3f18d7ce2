"""Rich text helpers for the order and menu panes."""

from __future__ import annotations

from rich.text import Text

from deli.data import format_money
from deli.models import Chips, Drink, Order, Product, Sandwich


def product_badge(product: Product) -> str:
    """Single-letter tag shown before a product row."""
    match product:
        case Sandwich(signature=None):
            return "S"
        case Sandwich():
            return "★"
        case Drink():
            return "D"
        case Chips():
            return "C"
    return "?"


def badge_style(badge: str) -> str:
    """Return a consistent badge style for product tags."""
    if badge in {"S", "★"}:
        return "bold #ffffff on #b23a48"
    if badge == "D":
        return "bold #ffffff on #2f6db5"
    return "bold #0b1f0f on #5fbf72"


def format_product_label(product: Product) -> Text:
    """Render a product row with its colored tag and price."""
    badge = product_badge(product)
    text = Text()
    text.append(badge, style=badge_style(badge))
    text.append(f" {product.description()}")
    if isinstance(product, Sandwich):
        text.append(f"  {format_money(product.price())}", style="bold")
    return text


def format_order_lines(order: Order | None) -> Text:
    if order is None:
        return Text("(no active order)", style="dim")
    if order.is_empty():
        return Text("(no items yet)", style="dim")

    lines = Text()
    for idx, product in enumerate(order.products, start=1):
        if idx > 1:
            lines.append("\n")
        lines.append(f"{idx}. ")
        lines.append_text(format_product_label(product))
    lines.append("\n\n")
    lines.append(f"Total: {format_money(order.total_price())}", style="bold")
    return lines


def format_menu(options: list[str], zero_label: str | None = None, cursor: int | None = None) -> Text:
    """Render numbered menu rows, with an optional `0)` row at the end."""
    text = Text()
    for idx, label in enumerate(options):
        if idx > 0:
            text.append("\n")
        pointer = "➤ " if idx == cursor else "  "
        style = "bold white" if idx == cursor else "white"
        text.append(f"{pointer}{idx + 1}) {label}", style=style)
    if zero_label is not None:
        if options:
            text.append("\n")
        text.append(f"  0) {zero_label}", style="white")
    return text
