"""Error types raised by the cart engine, the order ledger and the printer."""

from __future__ import annotations


class TableOrderError(Exception):
    """Base error for table-order."""


class CartError(TableOrderError):
    """A cart operation could not be applied."""


class EmptyCartError(CartError):
    """Submit was called on a cart without lines."""


class InvalidQuantityError(CartError, ValueError):
    """A quantity or delta was not an integer."""


class LedgerError(TableOrderError):
    """An order ledger operation could not be applied."""


class UnknownOrderError(LedgerError, KeyError):
    """No ledger entry exists for the order number."""


class InvalidTransitionError(LedgerError, ValueError):
    """The requested status change is not allowed from the current status."""


class PrinterUnavailableError(TableOrderError, RuntimeError):
    """Printer dependencies, font or device are not usable."""
