"""Thermal receipt printing for a table's orders."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable

from tableorder.config import (
    PRINTER_FONT_ENV,
    PRINTER_FONT_PATH,
    PRINTER_FONT_SIZE,
    PRINTER_LEFT_INDENT_PX,
    PRINTER_TAIL_SPACER_PX,
    PRINTER_USB_PRODUCT_ID,
    PRINTER_USB_VENDOR_ID,
    PRINTER_WIDTH_PX,
)
from tableorder.debug_log import log_debug
from tableorder.errors import PrinterUnavailableError
from tableorder.ledger import STATUS_LABELS, LedgerEntry
from tableorder.models import OrderStatus
from tableorder.rendering import format_price

# Fonts with CJK coverage; menu names are Traditional Chinese.
_FONT_FALLBACKS = (
    "/usr/share/fonts/noto-cjk/NotoSansCJK-Regular.ttc",
    "/usr/share/fonts/opentype/noto/NotoSansCJK-Regular.ttc",
    "/usr/share/fonts/truetype/wqy/wqy-zenhei.ttc",
    "/System/Library/Fonts/PingFang.ttc",
)
_LINE_EXTRA_PX = 14
_RULE_TOKEN = "__RULE__"
_RULE_HEIGHT_PX = 12
_RULE_THICKNESS_PX = 2


def receipt_lines(table_id: str, entries: Iterable[LedgerEntry]) -> list[str]:
    """
    Lay out a table receipt as plain text lines.

    Cancelled orders are listed but excluded from the amount due.
    """
    lines = [f"Table {table_id}", _RULE_TOKEN]
    amount_due = 0
    for entry in entries:
        if entry.table_id != table_id:
            continue
        status = STATUS_LABELS[entry.status]
        lines.append(f"#{entry.order_number}  {status}")
        for line in entry.order.lines:
            lines.append(f"  {line.name} x{line.quantity}  {format_price(line.line_total)}")
            if line.note:
                lines.append(f"    * {line.note}")
        if entry.discount > 0:
            lines.append(f"  Discount -{format_price(entry.discount)}")
        if entry.status is not OrderStatus.CANCELLED:
            amount_due += entry.final_total
    lines.append(_RULE_TOKEN)
    lines.append(f"Total {format_price(amount_due)}")
    return lines


def resolve_printer_font_path() -> str:
    """
    Resolve the receipt font.

    Resolution order:
    1. TABLE_ORDER_PRINTER_FONT_PATH (if set)
    2. PRINTER_FONT_PATH
    3. Known CJK font locations
    """
    env_override = os.environ.get(PRINTER_FONT_ENV, "").strip()
    candidates: list[str] = []
    if env_override:
        candidates.append(env_override)
    candidates.append(PRINTER_FONT_PATH)
    candidates.extend(_FONT_FALLBACKS)

    seen: list[str] = []
    for candidate in candidates:
        if not candidate or candidate in seen:
            continue
        seen.append(candidate)
        if Path(candidate).is_file():
            return candidate

    raise PrinterUnavailableError(
        f"No usable printer font found. Set {PRINTER_FONT_ENV} to a valid .ttf/.ttc file. "
        f"Tried: {', '.join(seen)}"
    )


def check_printer_dependencies() -> tuple[bool, str]:
    """Check whether printer dependencies are importable and a font is present."""
    try:
        from escpos.printer import Usb  # noqa: F401
        from PIL import ImageFont

        font_path = resolve_printer_font_path()
        ImageFont.truetype(font_path, PRINTER_FONT_SIZE)
    except Exception as exc:
        return (False, f"Printer deps unavailable: {exc}")
    return (True, "Printer ready")


def _render_line(text: str, font: object) -> object:
    from PIL import Image, ImageDraw

    canvas_height = PRINTER_FONT_SIZE + _LINE_EXTRA_PX
    img = Image.new("1", (PRINTER_WIDTH_PX, canvas_height), color=1)
    draw = ImageDraw.Draw(img)

    bbox = draw.textbbox((0, 0), text, font=font)
    text_height = bbox[3] - bbox[1]
    # Offset by bbox top so descenders are not clipped.
    y = (canvas_height - text_height) // 2 - bbox[1]
    draw.text((PRINTER_LEFT_INDENT_PX, y), text, font=font, fill=0)
    return img


def _render_rule() -> object:
    from PIL import Image, ImageDraw

    img = Image.new("1", (PRINTER_WIDTH_PX, _RULE_HEIGHT_PX), color=1)
    draw = ImageDraw.Draw(img)
    top = (_RULE_HEIGHT_PX - _RULE_THICKNESS_PX) // 2
    draw.rectangle((0, top, PRINTER_WIDTH_PX - 1, top + _RULE_THICKNESS_PX - 1), fill=0)
    return img


def _render_spacer(height_px: int) -> object:
    from PIL import Image

    return Image.new("1", (PRINTER_WIDTH_PX, max(1, height_px)), color=1)


def print_table_receipt(table_id: str, entries: Iterable[LedgerEntry]) -> None:
    """Print every order of one table and cut the ticket at the end."""
    lines = receipt_lines(table_id, entries)

    try:
        from escpos.printer import Usb
        from PIL import ImageFont
    except Exception as exc:
        raise PrinterUnavailableError(f"Printer dependencies unavailable: {exc}") from exc

    font = ImageFont.truetype(resolve_printer_font_path(), PRINTER_FONT_SIZE)
    printer = Usb(PRINTER_USB_VENDOR_ID, PRINTER_USB_PRODUCT_ID)
    log_debug(f"print_receipt table={table_id!r} lines={len(lines)}")

    for line in lines:
        if line == _RULE_TOKEN:
            printer.image(_render_rule())
        else:
            printer.image(_render_line(line, font))

    printer.image(_render_spacer(PRINTER_TAIL_SPACER_PX))
    printer.cut()
