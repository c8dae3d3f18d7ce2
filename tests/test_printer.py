"""
Tests for receipt printing helpers that do not need printer hardware.
"""

import pytest

import deli.printer as printer


class TestReceiptPrintLines:
    """Tests for fitting receipt text to paper width."""

    def test_short_lines_unchanged(self):
        """Test lines within the width pass through."""
        assert printer.receipt_print_lines("Total: $9.00\n\nThanks\n", max_chars=20) == ["Total: $9.00", "", "Thanks"]

    def test_rules_shortened(self):
        """Test ruled lines are cut to the paper width keeping their corners."""
        lines = printer.receipt_print_lines("╔" + "═" * 48 + "╗\n" + "=" * 50, max_chars=10)
        assert lines == ["╔════════╗", "=" * 10]

    def test_long_lines_wrap_with_indent(self):
        """Test wrapped lines keep and extend their indent."""
        text = "  Meats: Bacon (+$2.00), Extra Ham (+$3.00)"
        lines = printer.receipt_print_lines(text, max_chars=24)
        assert lines[0].startswith("  Meats:")
        assert all(len(line) <= 24 for line in lines)
        assert all(line.startswith("    ") for line in lines[1:])
        assert " ".join(part.strip() for part in lines) == text.strip()


class TestPrinterDependencies:
    """Tests for printer readiness checks."""

    def test_missing_font_reported(self, monkeypatch):
        """Test a missing font is reported instead of raised."""
        monkeypatch.setattr(printer, "PRINTER_FONT_PATH", "/nonexistent/font.ttf")
        monkeypatch.setattr(printer, "_LINUX_FONT_FALLBACKS", ())
        monkeypatch.delenv("DELI_PRINTER_FONT_PATH", raising=False)

        ok, message = printer.check_printer_dependencies()

        assert not ok
        assert message.startswith("Printer unavailable:")

    def test_font_override(self, tmp_path, monkeypatch):
        """Test the environment override wins when the file exists."""
        font = tmp_path / "font.ttf"
        font.write_bytes(b"")
        monkeypatch.setenv("DELI_PRINTER_FONT_PATH", str(font))
        assert printer.resolve_printer_font_path() == str(font)

    def test_no_font_raises(self, monkeypatch):
        """Test resolution fails when no candidate exists."""
        monkeypatch.setattr(printer, "PRINTER_FONT_PATH", "/nonexistent/font.ttf")
        monkeypatch.setattr(printer, "_LINUX_FONT_FALLBACKS", ())
        monkeypatch.delenv("DELI_PRINTER_FONT_PATH", raising=False)
        with pytest.raises(RuntimeError, match="No usable printer font"):
            printer.resolve_printer_font_path()
