"""SQLite ledger of checked-out orders."""

from __future__ import annotations

import logging
import sqlite3
from contextlib import closing
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from uuid import uuid4

from deli.config import DB_PATH
from deli.models import Chips, Drink, Order, Product, Sandwich

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SavedOrder:
    """Saved order metadata and the products that were recorded."""

    order_id: str
    created_at: str
    total: str
    receipt_path: str | None
    products: tuple[Product, ...]


@dataclass(frozen=True)
class OrderSummary:
    order_id: str
    created_at: str
    total: str
    status: str
    item_count: int


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _connect() -> sqlite3.Connection:
    db_file = Path(DB_PATH)
    db_file.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(db_file)
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


def _product_type(product: Product) -> str:
    match product:
        case Sandwich(signature=None):
            return "sandwich"
        case Sandwich():
            return "signature_sandwich"
        case Drink():
            return "drink"
        case Chips():
            return "chips"
    raise ValueError(f"Unsupported product: {product!r}")


def bootstrap_schema() -> None:
    """Create persistence schema if it does not already exist."""
    with closing(_connect()) as conn:
        conn.executescript(
            """
            CREATE TABLE IF NOT EXISTS orders (
                id TEXT PRIMARY KEY,
                created_at TEXT NOT NULL,
                total TEXT NOT NULL,
                receipt_path TEXT,
                status TEXT NOT NULL
            );

            CREATE TABLE IF NOT EXISTS order_items (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                order_id TEXT NOT NULL,
                line_index INTEGER NOT NULL,
                product_type TEXT NOT NULL,
                description TEXT NOT NULL,
                price TEXT NOT NULL,
                FOREIGN KEY(order_id) REFERENCES orders(id) ON DELETE CASCADE
            );

            CREATE TABLE IF NOT EXISTS order_item_toppings (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                order_item_id INTEGER NOT NULL,
                position INTEGER NOT NULL,
                category TEXT NOT NULL,
                kind TEXT NOT NULL,
                extra INTEGER NOT NULL,
                price TEXT NOT NULL,
                FOREIGN KEY(order_item_id) REFERENCES order_items(id) ON DELETE CASCADE
            );

            CREATE INDEX IF NOT EXISTS idx_order_items_order_id_line
                ON order_items(order_id, line_index);

            CREATE INDEX IF NOT EXISTS idx_order_item_toppings_item_id
                ON order_item_toppings(order_item_id);
            """
        )


def save_order(order: Order, receipt_path: str | None, created_at: datetime | None = None) -> SavedOrder:
    """Persist a checked-out order and return saved order metadata."""
    products = order.products
    if not products:
        raise ValueError("Cannot save empty order")

    order_id = uuid4().hex
    created = created_at.astimezone(timezone.utc).isoformat() if created_at else _utc_now_iso()
    total = f"{order.total_price():.2f}"

    with closing(_connect()) as conn:
        with conn:
            conn.execute(
                "INSERT INTO orders (id, created_at, total, receipt_path, status) VALUES (?, ?, ?, ?, 'SAVED')",
                (order_id, created, total, receipt_path),
            )

            for idx, product in enumerate(products):
                cur = conn.execute(
                    """
                    INSERT INTO order_items (order_id, line_index, product_type, description, price)
                    VALUES (?, ?, ?, ?, ?)
                    """,
                    (order_id, idx, _product_type(product), product.description(), f"{product.price():.2f}"),
                )
                order_item_id = int(cur.lastrowid)

                if not isinstance(product, Sandwich):
                    continue
                for position, topping in enumerate(product.toppings):
                    conn.execute(
                        """
                        INSERT INTO order_item_toppings (order_item_id, position, category, kind, extra, price)
                        VALUES (?, ?, ?, ?, ?, ?)
                        """,
                        (
                            order_item_id,
                            position,
                            topping.category.value,
                            topping.kind,
                            int(topping.extra),
                            f"{topping.price(product.size):.2f}",
                        ),
                    )

    logger.debug("order_saved order_id=%s items=%d total=%s", order_id, len(products), total)
    return SavedOrder(
        order_id=order_id,
        created_at=created,
        total=total,
        receipt_path=receipt_path,
        products=products,
    )


def update_order_status(order_id: str, status: str) -> None:
    """Update status for a persisted order."""
    with closing(_connect()) as conn:
        with conn:
            conn.execute("UPDATE orders SET status = ? WHERE id = ?", (status, order_id))


def load_order_summaries(limit: int = 20) -> list[OrderSummary]:
    """Return the most recent orders, newest first."""
    with closing(_connect()) as conn:
        rows = conn.execute(
            """
            SELECT o.id, o.created_at, o.total, o.status, COUNT(i.id)
            FROM orders o
            LEFT JOIN order_items i ON i.order_id = o.id
            GROUP BY o.id
            ORDER BY o.created_at DESC
            LIMIT ?
            """,
            (limit,),
        ).fetchall()
    return [
        OrderSummary(order_id=row[0], created_at=row[1], total=row[2], status=row[3], item_count=int(row[4]))
        for row in rows
    ]
