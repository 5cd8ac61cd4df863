"""Rendering helpers for cart, menu and ledger rows."""

from __future__ import annotations

from rich.text import Text

from tableorder.constant import CURRENCY_LABEL
from tableorder.ledger import STATUS_LABELS, LedgerEntry
from tableorder.models import CartLine, MenuEntry, OrderStatus, SubmittedOrder


def format_price(amount: int) -> str:
    return f"{CURRENCY_LABEL} {amount}"


def status_style(status: OrderStatus) -> str:
    """Return a consistent badge style for order statuses."""
    if status is OrderStatus.PENDING:
        return "bold #1f1a00 on #e6c229"
    if status is OrderStatus.PROCESSING:
        return "bold #ffffff on #2f6db5"
    if status is OrderStatus.COMPLETED:
        return "bold #0b1f0f on #5fbf72"
    return "bold #ffffff on #b23a48"


def format_status_badge(status: OrderStatus) -> Text:
    return Text(f" {STATUS_LABELS[status]} ", style=status_style(status))


def format_menu_row(item: MenuEntry) -> Text:
    text = Text()
    text.append(item.name, style="bold")
    text.append(f"  {format_price(item.price)}")
    return text


def format_cart_line(line: CartLine) -> Text:
    """Render a cart line with its note on a second, dimmed row."""
    text = Text()
    text.append(line.name, style="bold")
    text.append(f"  {format_price(line.unit_price)} x {line.quantity}")
    text.append(f"  = {format_price(line.line_total)}")
    if line.note:
        text.append(f"\n      Request: {line.note}", style="dim")
    return text


def format_ledger_entry(entry: LedgerEntry) -> Text:
    text = Text()
    text.append(f"#{entry.order_number} ", style="bold")
    text.append_text(format_status_badge(entry.status))
    text.append(f"  Table {entry.table_id}  {format_price(entry.final_total)}")
    if entry.discount > 0:
        text.append(f"  (discount {format_price(entry.discount)})", style="green")
    for line in entry.order.lines:
        text.append(f"\n      {line.name} x{line.quantity}  {format_price(line.line_total)}")
        if line.note:
            text.append(f"  [{line.note}]", style="dim")
    return text


def describe_addition(line: CartLine, added_quantity: int) -> str:
    """Body of the "added to cart" notification."""
    suffix = " (special request)" if line.note else ""
    return f"{line.name} x{added_quantity}{suffix}"


def describe_submission(order: SubmittedOrder) -> str:
    return f"Order #{order.order_number} for table {order.table_id}: {format_price(order.total)}"


def window_bounds(total: int, rows: int, selected: int | None) -> tuple[int, int]:
    """Slice of a list to show in ``rows`` lines, keeping the selection centred."""
    if total <= 0:
        return (0, 0)

    rows = max(1, rows)
    if total <= rows:
        return (0, total)

    if selected is None:
        start = 0
    else:
        half = rows // 2
        start = selected - half
        start = max(0, start)
        start = min(start, total - rows)

    return (start, start + rows)
