"""Runtime configuration defaults for persistence, receipts and printing."""

from __future__ import annotations

import os

DB_PATH = os.environ.get("DELI_DB_PATH", "data/deli.db")
RECEIPTS_DIR = os.environ.get("DELI_RECEIPTS_DIR", "receipts")
LOG_PATH = os.environ.get("DELI_LOG_PATH", "/tmp/deli-debug.log")

# 58mm ESC/POS thermal printer defaults.
PRINTER_USB_VENDOR_ID = 0x28E9
PRINTER_USB_PRODUCT_ID = 0x0289
PRINTER_WIDTH_PX = 384
PRINTER_FONT_SIZE = 22
PRINTER_FONT_PATH = "/System/Library/Fonts/Menlo.ttc"
PRINTER_LEFT_INDENT_PX = 4
PRINTER_LINE_SPACING_PX = 4
PRINTER_TAIL_SPACER_PX = 70
