"""
Tests for receipt rendering and receipt files.
"""

from datetime import datetime

import deli.receipts as receipts
from deli.models import Chips, Drink, DrinkSize, Order

TIMESTAMP = datetime(2024, 3, 15, 14, 30, 52)


def _order() -> Order:
    order = Order()
    order.add_product(Drink(size=DrinkSize.LARGE, flavor="Coke"))
    order.add_product(Chips(chip_type="Lays"))
    return order


class TestRenderReceipt:
    """Tests for receipt text layout."""

    def test_layout(self):
        """Test header, date line, order text and footer appear in order."""
        order = _order()
        lines = receipts.render_receipt(order.render(), TIMESTAMP).split("\n")

        assert lines[0] == "╔" + "═" * 48 + "╗"
        assert lines[1].startswith("║          DELI-cious Sandwiches")
        assert lines[1].endswith("║")
        assert len(lines[1]) == len(lines[0])
        assert lines[2].startswith("║          Official Receipt")
        assert lines[3] == "╚" + "═" * 48 + "╝"
        assert lines[4] == ""
        assert lines[5] == "Date: 03/15/2024 02:30:52 PM"
        assert lines[6] == ""
        assert lines[7] == "Order Summary:"
        assert "1. Large Coke - $3.00" in lines
        assert "2. Lays Chips - $1.50" in lines
        assert lines[-4:] == ["═" * 50, "Thank you for your order!", "We hope you enjoy your meal!", ""]

    def test_file_name(self):
        """Test receipt files are named by timestamp."""
        assert receipts.receipt_file_name(TIMESTAMP) == "20240315-143052.txt"


class TestSaveReceipt:
    """Tests for writing receipt files."""

    def test_writes_file(self, tmp_path, monkeypatch):
        """Test a receipt is written under the receipts folder."""
        folder = tmp_path / "receipts"
        monkeypatch.setattr(receipts, "RECEIPTS_DIR", str(folder))
        order = _order()

        ok, result = receipts.save_receipt(order, TIMESTAMP)

        assert ok
        path = folder / "20240315-143052.txt"
        assert result == str(path)
        assert path.read_text(encoding="utf-8") == receipts.render_receipt(order.render(), TIMESTAMP)

    def test_same_second_keeps_both(self, tmp_path, monkeypatch):
        """Test a second receipt in the same second gets a suffix instead of overwriting."""
        folder = tmp_path / "receipts"
        monkeypatch.setattr(receipts, "RECEIPTS_DIR", str(folder))
        first = _order()
        second = Order()
        second.add_product(Chips(chip_type="Doritos"))

        ok_first, first_path = receipts.save_receipt(first, TIMESTAMP)
        ok_second, second_path = receipts.save_receipt(second, TIMESTAMP)

        assert ok_first and ok_second
        assert first_path == str(folder / "20240315-143052.txt")
        assert second_path == str(folder / "20240315-143052-1.txt")
        assert "Lays Chips" in (folder / "20240315-143052.txt").read_text(encoding="utf-8")
        assert "Doritos Chips" in (folder / "20240315-143052-1.txt").read_text(encoding="utf-8")

    def test_suffixed_file_name(self):
        """Test later attempts are numbered after the timestamp."""
        assert receipts.receipt_file_name(TIMESTAMP, 2) == "20240315-143052-2.txt"

    def test_failure_reported(self, tmp_path, monkeypatch):
        """Test a write failure is reported without touching the order."""
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("x", encoding="utf-8")
        monkeypatch.setattr(receipts, "RECEIPTS_DIR", str(blocker))
        order = _order()

        ok, result = receipts.save_receipt(order, TIMESTAMP)

        assert not ok
        assert result.startswith("Error saving receipt:")
        assert order.product_count == 2
