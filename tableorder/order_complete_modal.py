"""Order confirmation modal shown after a successful submit."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Static

from tableorder.models import SubmittedOrder
from tableorder.rendering import format_price


class OrderCompleteModal(ModalScreen[None]):
    """Thank-you dialog with the order number, table and total."""

    CSS = """
    OrderCompleteModal {
        align: center middle;
        background: $background 60%;
    }

    #complete-dialog {
        width: 56;
        height: auto;
        border: round $success;
        background: $panel;
        padding: 1 2;
    }

    #complete-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #complete-body {
        color: white;
        margin-bottom: 1;
    }

    #complete-help {
        color: #dddddd;
    }
    """

    def __init__(self, order: SubmittedOrder) -> None:
        super().__init__()
        self.order = order

    def compose(self) -> ComposeResult:
        with Container(id="complete-dialog"):
            yield Static("Order submitted", id="complete-title")
            yield Static(self._summary(), id="complete-body")
            yield Static("Enter / Esc to order again.", id="complete-help")

    def on_key(self, event: Key) -> None:
        if event.key in {"enter", "escape", "q", "ctrl+c"}:
            self.dismiss(None)
        event.stop()

    def _summary(self) -> str:
        return "\n".join(
            [
                "Thank you, your meal is being prepared.",
                "",
                f"Order number: {self.order.order_number}",
                f"Table: {self.order.table_id}",
                f"Items: {self.order.item_count}",
                f"Total: {format_price(self.order.total)}",
            ]
        )
