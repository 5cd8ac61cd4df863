"""Admin-side ledger of submitted orders and their kitchen status."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterable, Iterator

from tableorder.constant import SEED_ORDERS
from tableorder.data import menu_item_by_id
from tableorder.debug_log import log_debug
from tableorder.errors import InvalidTransitionError, LedgerError, UnknownOrderError
from tableorder.models import CartLine, OrderStatus, SubmittedOrder

STATUS_LABELS: dict[OrderStatus, str] = {
    OrderStatus.PENDING: "Pending",
    OrderStatus.PROCESSING: "Processing",
    OrderStatus.COMPLETED: "Completed",
    OrderStatus.CANCELLED: "Cancelled",
}

ALLOWED_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({OrderStatus.PROCESSING, OrderStatus.CANCELLED}),
    OrderStatus.PROCESSING: frozenset({OrderStatus.COMPLETED, OrderStatus.CANCELLED}),
    OrderStatus.COMPLETED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}

_NEXT_STEP: dict[OrderStatus, OrderStatus] = {
    OrderStatus.PENDING: OrderStatus.PROCESSING,
    OrderStatus.PROCESSING: OrderStatus.COMPLETED,
}


@dataclass
class LedgerEntry:
    """A submitted order as tracked by staff."""

    order: SubmittedOrder
    status: OrderStatus = OrderStatus.PENDING
    discount: int = 0
    completed_at: str | None = None

    @property
    def order_number(self) -> int:
        return self.order.order_number

    @property
    def table_id(self) -> str:
        return self.order.table_id

    @property
    def final_total(self) -> int:
        return max(0, self.order.total - self.discount)

    @property
    def is_open(self) -> bool:
        return self.status in (OrderStatus.PENDING, OrderStatus.PROCESSING)


def _coerce_status(status: OrderStatus | str) -> OrderStatus:
    try:
        return OrderStatus(status)
    except ValueError as exc:
        raise InvalidTransitionError(f"Unknown order status: {status!r}") from exc


class OrderLedger:
    """Submitted orders keyed by order number, in adoption order."""

    def __init__(self) -> None:
        self._entries: dict[int, LedgerEntry] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[LedgerEntry]:
        return iter(list(self._entries.values()))

    @classmethod
    def seeded(cls) -> OrderLedger:
        """A ledger pre-filled with the demo orders."""
        ledger = cls()
        for raw in SEED_ORDERS:
            lines = []
            for item_id, quantity in raw["items"]:  # type: ignore[union-attr]
                item = menu_item_by_id(item_id)
                lines.append(CartLine(item.item_id, item.name, item.price, quantity))
            order = SubmittedOrder(
                order_number=int(raw["order_number"]),  # type: ignore[arg-type]
                table_id=str(raw["table_id"]),
                lines=tuple(lines),
                total=sum(line.line_total for line in lines),
                created_at=str(raw["created_at"]),
            )
            entry = ledger.adopt(
                order,
                status=OrderStatus(str(raw["status"])),
                discount=int(raw.get("discount", 0)),  # type: ignore[arg-type]
            )
            completed_at = raw.get("completed_at")
            if completed_at is not None:
                entry.completed_at = str(completed_at)
        return ledger

    def adopt(
        self,
        order: SubmittedOrder,
        status: OrderStatus | str = OrderStatus.PENDING,
        discount: int = 0,
    ) -> LedgerEntry:
        """Start tracking a submitted order."""
        if order.order_number in self._entries:
            raise LedgerError(f"Order #{order.order_number} is already in the ledger")
        if discount < 0:
            raise LedgerError("discount must not be negative")

        entry = LedgerEntry(order=order, status=_coerce_status(status), discount=discount)
        self._entries[order.order_number] = entry
        log_debug(f"ledger_adopt order={order.order_number} table={order.table_id!r} status={entry.status.value}")
        return entry

    def get(self, order_number: int) -> LedgerEntry:
        entry = self._entries.get(order_number)
        if entry is None:
            raise UnknownOrderError(f"No order #{order_number}")
        return entry

    def transition(self, order_number: int, new_status: OrderStatus | str) -> LedgerEntry:
        """Move an order one step along its lifecycle."""
        entry = self.get(order_number)
        target = _coerce_status(new_status)
        if target not in ALLOWED_TRANSITIONS[entry.status]:
            raise InvalidTransitionError(
                f"Order #{order_number} cannot go from {entry.status.value} to {target.value}"
            )

        previous = entry.status
        entry.status = target
        if target is OrderStatus.COMPLETED:
            entry.completed_at = datetime.now(timezone.utc).isoformat()
        log_debug(f"ledger_transition order={order_number} {previous.value}->{target.value}")
        return entry

    def advance(self, order_number: int) -> LedgerEntry:
        """Apply the next forward step: pending to processing, processing to completed."""
        entry = self.get(order_number)
        target = _NEXT_STEP.get(entry.status)
        if target is None:
            raise InvalidTransitionError(f"Order #{order_number} is already {entry.status.value}")
        return self.transition(order_number, target)

    def cancel(self, order_number: int) -> LedgerEntry:
        return self.transition(order_number, OrderStatus.CANCELLED)

    def filter(
        self,
        status: OrderStatus | str | None = None,
        table_id: str | None = None,
        query: str = "",
    ) -> list[LedgerEntry]:
        """Entries matching a status tab, a table and a search query on order number or table."""
        wanted = None if status in (None, "all") else _coerce_status(status)  # type: ignore[arg-type]
        needle = query.strip()

        results: list[LedgerEntry] = []
        for entry in self._entries.values():
            if wanted is not None and entry.status is not wanted:
                continue
            if table_id is not None and entry.table_id != table_id:
                continue
            if needle and needle not in str(entry.order_number) and needle not in entry.table_id:
                continue
            results.append(entry)
        return results

    @staticmethod
    def group_by_table(entries: Iterable[LedgerEntry]) -> dict[str, list[LedgerEntry]]:
        """Group entries by table, tables in first-seen order."""
        groups: dict[str, list[LedgerEntry]] = {}
        for entry in entries:
            groups.setdefault(entry.table_id, []).append(entry)
        return groups

    def table_ids(self) -> list[str]:
        """Tables that have at least one order, sorted numerically where possible."""
        ids = {entry.table_id for entry in self._entries.values()}
        return sorted(ids, key=lambda value: (not value.isdigit(), int(value) if value.isdigit() else 0, value))

    def max_order_number(self) -> int | None:
        if not self._entries:
            return None
        return max(self._entries)
