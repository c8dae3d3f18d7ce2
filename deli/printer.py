"""ESC/POS thermal printer output for receipts."""

from __future__ import annotations

import logging
import os
import textwrap
from pathlib import Path

from deli.config import (
    PRINTER_FONT_PATH,
    PRINTER_FONT_SIZE,
    PRINTER_LEFT_INDENT_PX,
    PRINTER_LINE_SPACING_PX,
    PRINTER_TAIL_SPACER_PX,
    PRINTER_USB_PRODUCT_ID,
    PRINTER_USB_VENDOR_ID,
    PRINTER_WIDTH_PX,
)

logger = logging.getLogger(__name__)

_FONT_OVERRIDE_ENV = "DELI_PRINTER_FONT_PATH"
_LINUX_FONT_FALLBACKS = (
    "/usr/share/fonts/TTF/DejaVuSansMono.ttf",
    "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf",
    "/usr/share/fonts/dejavu/DejaVuSansMono.ttf",
    "/usr/share/fonts/liberation/LiberationMono-Regular.ttf",
)
# Monospace glyphs at PRINTER_FONT_SIZE fit about this many columns on 58mm paper.
PRINTER_MAX_CHARS = 32


def resolve_printer_font_path() -> str:
    """
    Resolve a printer font path.

    Resolution order:
    1. DELI_PRINTER_FONT_PATH (if set)
    2. PRINTER_FONT_PATH
    3. Known Linux fallbacks
    """
    env_override = os.environ.get(_FONT_OVERRIDE_ENV, "").strip()
    candidates: list[str] = []
    if env_override:
        candidates.append(env_override)
    candidates.append(PRINTER_FONT_PATH)
    candidates.extend(_LINUX_FONT_FALLBACKS)

    seen: set[str] = set()
    for candidate in candidates:
        if not candidate or candidate in seen:
            continue
        seen.add(candidate)
        if Path(candidate).is_file():
            return candidate

    raise RuntimeError(
        f"No usable printer font found. Set {_FONT_OVERRIDE_ENV} to a valid .ttf/.otf file. "
        f"Tried: {', '.join(seen)}"
    )


def check_printer_dependencies() -> tuple[bool, str]:
    """Check whether printer dependencies are importable."""
    try:
        from escpos.printer import Usb  # noqa: F401
        from PIL import ImageFont

        ImageFont.truetype(resolve_printer_font_path(), PRINTER_FONT_SIZE)
    except Exception as exc:
        return (False, f"Printer unavailable: {exc}")
    return (True, "Printer ready")


def receipt_print_lines(receipt_text: str, max_chars: int = PRINTER_MAX_CHARS) -> list[str]:
    """
    Fit receipt text to the paper width.

    Ruled lines are shortened to the paper width; other long lines wrap
    with their leading indent kept on continuation lines.
    """
    lines: list[str] = []
    for raw in receipt_text.rstrip("\n").split("\n"):
        line = raw.rstrip()
        if len(line) <= max_chars:
            lines.append(line)
            continue
        if set(line) <= set("═=╔╗╚╝"):
            lines.append(line[0] + line[1] * (max_chars - 2) + line[-1])
            continue
        indent = line[: len(line) - len(line.lstrip())]
        lines.extend(
            textwrap.wrap(
                line.strip(),
                width=max_chars,
                initial_indent=indent,
                subsequent_indent=indent + "  ",
            )
        )
    return lines


def _render_line(text: str, font: object) -> object:
    from PIL import Image, ImageDraw

    probe = Image.new("1", (1, 1), color=1)
    bbox = ImageDraw.Draw(probe).textbbox((0, 0), text or " ", font=font)
    text_height = bbox[3] - bbox[1]
    canvas_height = max(PRINTER_FONT_SIZE, text_height) + PRINTER_LINE_SPACING_PX

    img = Image.new("1", (PRINTER_WIDTH_PX, canvas_height), color=1)
    draw = ImageDraw.Draw(img)
    # Offset by bbox top so descenders are not clipped.
    y = (canvas_height - text_height) // 2 - bbox[1]
    draw.text((PRINTER_LEFT_INDENT_PX, y), text, font=font, fill=0)
    return img


def _render_spacer(height_px: int) -> object:
    from PIL import Image

    return Image.new("1", (PRINTER_WIDTH_PX, max(1, height_px)), color=1)


def print_receipt(receipt_text: str) -> None:
    """Print a receipt line by line and cut the ticket at the end."""
    lines = receipt_print_lines(receipt_text)
    if not lines:
        return

    try:
        from escpos.printer import Usb
        from PIL import ImageFont
    except Exception as exc:
        raise RuntimeError(f"Printer dependencies unavailable: {exc}") from exc

    printer = Usb(PRINTER_USB_VENDOR_ID, PRINTER_USB_PRODUCT_ID)
    font = ImageFont.truetype(resolve_printer_font_path(), PRINTER_FONT_SIZE)
    for line in lines:
        printer.image(_render_line(line, font))
    printer.image(_render_spacer(PRINTER_TAIL_SPACER_PX))
    printer.cut()
    logger.info("receipt_printed lines=%d", len(lines))
