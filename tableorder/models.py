"""Domain models for table-order."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class MenuCategory:
    """A menu section shown as a tab on the ordering screen."""

    category_id: int
    name: str
    icon: str = ""


@dataclass(frozen=True)
class MenuEntry:
    """A read-only catalog item. Prices are integer minor units."""

    item_id: int
    category_id: int
    name: str
    description: str
    price: int
    image: str = ""


@dataclass(frozen=True)
class Promotion:
    """A promotion advertised on the ordering screen."""

    promotion_id: int
    name: str
    description: str
    kind: str
    value: float
    active: bool


@dataclass(frozen=True)
class CartLine:
    """One distinct (menu item, note) pairing and its quantity."""

    menu_item_id: int
    name: str
    unit_price: int
    quantity: int
    note: str | None = None

    @property
    def key(self) -> tuple[int, str | None]:
        return (self.menu_item_id, self.note)

    @property
    def line_total(self) -> int:
        return self.unit_price * self.quantity


@dataclass(frozen=True)
class SubmittedOrder:
    """An immutable snapshot of a cart taken at submit time."""

    order_number: int
    table_id: str
    lines: tuple[CartLine, ...]
    total: int
    created_at: str

    @property
    def item_count(self) -> int:
        return sum(line.quantity for line in self.lines)


class OrderStatus(str, Enum):
    """Ledger status of a submitted order."""

    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
