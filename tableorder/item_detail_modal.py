"""Item detail modal: pick a quantity and type a special request."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Static

from tableorder.models import MenuEntry
from tableorder.rendering import format_price

ItemDetailResult = tuple[int, str]


class ItemDetailModal(ModalScreen[ItemDetailResult | None]):
    """Centered modal returning ``(quantity, note)`` or None when cancelled."""

    CSS = """
    ItemDetailModal {
        align: center middle;
        background: $background 60%;
    }

    #item-dialog {
        width: 60;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #item-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #item-body {
        margin-bottom: 1;
        color: white;
    }

    #item-note {
        border: heavy $secondary;
        padding: 0 1;
        color: white;
        margin-bottom: 1;
    }

    #item-help {
        color: #dddddd;
    }
    """

    def __init__(self, item: MenuEntry) -> None:
        super().__init__()
        self.item = item
        self.quantity = 1
        self.note = ""

    def compose(self) -> ComposeResult:
        with Container(id="item-dialog"):
            yield Static(self.item.name, id="item-title")
            yield Static(id="item-body")
            yield Static(id="item-note")
            yield Static("↑/↓ quantity. Type a request. Enter add to cart. Esc cancel.", id="item-help")

    def on_mount(self) -> None:
        self._refresh_content()

    def on_key(self, event: Key) -> None:
        if event.key in {"escape", "ctrl+c"}:
            self.dismiss(None)
            event.stop()
            return

        if event.key == "enter":
            self.dismiss((self.quantity, self.note))
            event.stop()
            return

        if event.key == "up":
            self.quantity += 1
            self._refresh_content()
            event.stop()
            return

        if event.key == "down":
            self.quantity = max(1, self.quantity - 1)
            self._refresh_content()
            event.stop()
            return

        if event.key == "backspace":
            if self.note:
                self.note = self.note[:-1]
                self._refresh_content()
            event.stop()
            return

        if event.is_printable and event.character:
            self.note += event.character
            self._refresh_content()
            event.stop()
            return

        # Ignore all other keys while the dialog is open.
        event.stop()

    def _refresh_content(self) -> None:
        body = self.query_one("#item-body", Static)
        note_widget = self.query_one("#item-note", Static)

        content = Text(style="white")
        content.append(self.item.description)
        content.append(f"\n{format_price(self.item.price)}", style="bold")
        content.append(f"\n\nQuantity: {self.quantity}")
        content.append(f"\nLine total: {format_price(self.item.price * self.quantity)}", style="bold")
        body.update(content)
        note_widget.update(f"Request: {self.note}|")
