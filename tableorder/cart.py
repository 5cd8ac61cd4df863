"""Order cart engine for one table's ordering session."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone
from typing import Callable, Iterator

from tableorder.config import ORDER_NUMBER_START
from tableorder.debug_log import log_debug
from tableorder.errors import EmptyCartError, InvalidQuantityError
from tableorder.models import CartLine, MenuEntry, SubmittedOrder

LineKey = tuple[int, str | None]


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def normalize_note(note: str | None) -> str | None:
    """Collapse empty and whitespace-only notes to None; strip the rest."""
    if note is None:
        return None
    stripped = note.strip()
    return stripped or None


def _require_int(value: object, label: str) -> int:
    # bool is an int subclass but never a meaningful quantity.
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidQuantityError(f"{label} must be an integer, got {value!r}")
    return value


class OrderNumberSequence:
    """Monotonic order number source; never hands out the same number twice."""

    def __init__(self, start: int = ORDER_NUMBER_START) -> None:
        self._next = start

    def peek(self) -> int:
        return self._next

    def next(self) -> int:
        value = self._next
        self._next += 1
        return value


class Cart:
    """
    The line items a single customer is assembling for one table.

    Lines are keyed by ``(menu_item_id, note)`` so the same dish with a
    different note is a separate line. A line never stays in the cart at
    quantity zero. Iteration follows the order lines were first added.
    """

    def __init__(
        self,
        order_numbers: OrderNumberSequence | None = None,
        clock: Callable[[], str] = _utc_now_iso,
    ) -> None:
        self._lines: dict[LineKey, CartLine] = {}
        self._order_numbers = order_numbers if order_numbers is not None else OrderNumberSequence()
        self._clock = clock

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[CartLine]:
        return iter(list(self._lines.values()))

    def lines(self) -> list[CartLine]:
        return list(self._lines.values())

    def get(self, menu_item_id: int, note: str | None = None) -> CartLine | None:
        return self._lines.get((menu_item_id, normalize_note(note)))

    def is_empty(self) -> bool:
        return not self._lines

    def item_count(self) -> int:
        return sum(line.quantity for line in self._lines.values())

    def subtotal(self) -> int:
        return sum(line.line_total for line in self._lines.values())

    def add_item(self, menu_item: MenuEntry, quantity: int = 1, note: str | None = None) -> CartLine:
        """Add ``quantity`` of a menu item, merging into an existing line with the same note."""
        quantity = max(1, _require_int(quantity, "quantity"))
        note = normalize_note(note)
        key = (menu_item.item_id, note)

        existing = self._lines.get(key)
        if existing is not None:
            line = replace(existing, quantity=existing.quantity + quantity)
        else:
            line = CartLine(
                menu_item_id=menu_item.item_id,
                name=menu_item.name,
                unit_price=menu_item.price,
                quantity=quantity,
                note=note,
            )
        # Reassigning an existing key keeps its insertion position.
        self._lines[key] = line
        log_debug(f"cart_add item={menu_item.item_id} qty={quantity} note={note!r} line_qty={line.quantity}")
        return line

    def update_quantity(self, menu_item_id: int, note: str | None, delta: int) -> CartLine | None:
        """
        Shift a line's quantity by ``delta``.

        Returns the updated line, or None when the key is absent or the line
        was removed because its quantity reached zero.
        """
        delta = _require_int(delta, "delta")
        key = (menu_item_id, normalize_note(note))
        existing = self._lines.get(key)
        if existing is None:
            return None

        new_quantity = max(0, existing.quantity + delta)
        if new_quantity == 0:
            del self._lines[key]
            log_debug(f"cart_remove item={menu_item_id} note={key[1]!r}")
            return None

        line = replace(existing, quantity=new_quantity)
        self._lines[key] = line
        log_debug(f"cart_update item={menu_item_id} note={key[1]!r} qty={new_quantity}")
        return line

    def submit(self, table_id: str) -> SubmittedOrder:
        """Snapshot the cart into a SubmittedOrder and start a fresh cart."""
        if not self._lines:
            log_debug(f"cart_submit_rejected table={table_id!r} reason=empty")
            raise EmptyCartError("Cannot submit an empty cart")

        order = SubmittedOrder(
            order_number=self._order_numbers.next(),
            table_id=str(table_id),
            lines=tuple(replace(line) for line in self._lines.values()),
            total=self.subtotal(),
            created_at=self._clock(),
        )
        self._lines.clear()
        log_debug(f"cart_submit order={order.order_number} table={order.table_id!r} total={order.total}")
        return order

    def reset(self) -> None:
        """Discard every line; used by the "start new order" action."""
        self._lines.clear()
        log_debug("cart_reset")
