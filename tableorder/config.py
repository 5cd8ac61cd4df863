"""Runtime configuration defaults for ordering, logging and printing."""

from __future__ import annotations

DEFAULT_TABLE_ID = "1"

# First number handed out when no submitted orders exist yet.
ORDER_NUMBER_START = 1001

DEBUG_LOG_PATH = "/tmp/table-order-debug.log"
DEBUG_LOG_ENV = "TABLE_ORDER_DEBUG_LOG"

PRINTER_USB_VENDOR_ID = 0x28E9
PRINTER_USB_PRODUCT_ID = 0x0289
PRINTER_WIDTH_PX = 384
PRINTER_FONT_SIZE = 28
PRINTER_FONT_PATH = "/usr/share/fonts/opentype/noto/NotoSansCJK-Regular.ttc"
PRINTER_FONT_ENV = "TABLE_ORDER_PRINTER_FONT_PATH"
PRINTER_LEFT_INDENT_PX = 16
PRINTER_TAIL_SPACER_PX = 70
