"""Receipt text rendering and receipt file storage."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from deli.config import RECEIPTS_DIR
from deli.models import Order

logger = logging.getLogger(__name__)

_BOX_WIDTH = 48
_FOOTER_RULE = "═" * 50
_FILE_NAME_FORMAT = "%Y%m%d-%H%M%S"
_DATE_LINE_FORMAT = "%m/%d/%Y %I:%M:%S %p"


def _box_line(text: str) -> str:
    return f"║{('          ' + text).ljust(_BOX_WIDTH)}║"


def render_receipt(order_text: str, timestamp: datetime) -> str:
    """Wrap rendered order text with the receipt header, date line and footer."""
    lines = [
        "╔" + "═" * _BOX_WIDTH + "╗",
        _box_line("DELI-cious Sandwiches"),
        _box_line("Official Receipt"),
        "╚" + "═" * _BOX_WIDTH + "╝",
        "",
        f"Date: {timestamp.strftime(_DATE_LINE_FORMAT)}",
        "",
        order_text.rstrip("\n"),
        "",
        _FOOTER_RULE,
        "Thank you for your order!",
        "We hope you enjoy your meal!",
    ]
    return "\n".join(lines) + "\n"


def receipt_file_name(timestamp: datetime, attempt: int = 0) -> str:
    stem = timestamp.strftime(_FILE_NAME_FORMAT)
    if attempt:
        return f"{stem}-{attempt}.txt"
    return f"{stem}.txt"


def save_receipt(order: Order, timestamp: datetime | None = None) -> tuple[bool, str]:
    """
    Write the receipt for an order to the receipts folder.

    Returns (True, path) on success and (False, reason) on failure; the order is
    never modified, so a failed save can simply be retried. Existing receipts are
    never overwritten: a checkout in the same second gets a numbered suffix.
    """
    now = timestamp or datetime.now()
    folder = Path(RECEIPTS_DIR)
    text = render_receipt(order.render(), now)
    receipt_path = folder / receipt_file_name(now)
    try:
        folder.mkdir(parents=True, exist_ok=True)
        attempt = 0
        while True:
            receipt_path = folder / receipt_file_name(now, attempt)
            try:
                with receipt_path.open("x", encoding="utf-8") as fh:
                    fh.write(text)
            except FileExistsError:
                attempt += 1
                continue
            break
    except OSError as exc:
        logger.error("receipt_save_failed path=%s error=%r", receipt_path, exc)
        return (False, f"Error saving receipt: {exc}")

    logger.info("receipt_saved path=%s items=%d", receipt_path, order.product_count)
    return (True, str(receipt_path))
