"""Customer-facing table ordering app."""

from __future__ import annotations

from functools import partial

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.screen import Screen
from textual.widgets import Header, Static

from tableorder.cart import Cart, OrderNumberSequence
from tableorder.config import DEFAULT_TABLE_ID, ORDER_NUMBER_START
from tableorder.data import ACTIVE_PROMOTIONS, MENU_CATEGORIES, items_in_category
from tableorder.debug_log import log_debug
from tableorder.errors import EmptyCartError
from tableorder.item_detail_modal import ItemDetailResult, ItemDetailModal
from tableorder.ledger import OrderLedger
from tableorder.models import CartLine, MenuEntry
from tableorder.order_complete_modal import OrderCompleteModal
from tableorder.orders_screen import OrdersScreen
from tableorder.rendering import (
    describe_addition,
    describe_submission,
    format_cart_line,
    format_menu_row,
    format_price,
    window_bounds,
)


class TableOrderScreen(Screen[None]):
    """Menu browsing on the left, the cart on the right."""

    CSS = """
    #main-layout {
        height: 1fr;
    }

    #menu-pane {
        width: 3fr;
        border: round $primary;
        padding: 1;
    }

    #cart-pane {
        width: 2fr;
        border: round $secondary;
        padding: 1;
    }

    #category-bar {
        margin-bottom: 1;
    }

    #promo-bar {
        color: #e6c229;
        margin-bottom: 1;
    }

    #menu-list {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #cart-list {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #cart-summary {
        border: heavy $secondary;
        padding: 0 1;
        height: 3;
    }

    #status-bar {
        height: 2;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    BINDINGS = [
        ("left", "cycle_category(-1)", "Previous category"),
        ("right", "cycle_category(1)", "Next category"),
        ("up", "move_cursor(-1)", "Up"),
        ("down", "move_cursor(1)", "Down"),
        ("tab", "toggle_focus", "Menu/Cart"),
        ("enter", "open_details", "Details"),
        ("a", "quick_add", "Quick add"),
        Binding("plus,equals_sign", "adjust_quantity(1)", "More"),
        ("minus", "adjust_quantity(-1)", "Less"),
        Binding("ctrl+s", "submit_order", "Submit", priority=True),
        ("ctrl+n", "new_order", "New order"),
        ("ctrl+o", "open_orders", "Orders"),
    ]

    def __init__(self, cart: Cart, ledger: OrderLedger, table_id: str) -> None:
        super().__init__()
        self.cart = cart
        self.ledger = ledger
        self.table_id = table_id
        self.category_index = 0
        self.menu_index = 0
        self.focus_area = "menu"
        self.cart_index: int | None = None
        self.status_message = ""

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main-layout"):
            with Vertical(id="menu-pane"):
                yield Static(id="category-bar")
                yield Static(id="promo-bar")
                yield Static(id="menu-list")
            with Vertical(id="cart-pane"):
                yield Static("Cart", classes="pane-title")
                yield Static("(cart is empty)", id="cart-list")
                yield Static(id="cart-summary")
                yield Static(id="status-bar")

    def on_mount(self) -> None:
        self._refresh_all()

    def on_screen_resume(self) -> None:
        self._refresh_all()

    def menu_items(self) -> list[MenuEntry]:
        if not MENU_CATEGORIES:
            return items_in_category(None)
        return items_in_category(MENU_CATEGORIES[self.category_index].category_id)

    def selected_menu_item(self) -> MenuEntry | None:
        items = self.menu_items()
        if not (0 <= self.menu_index < len(items)):
            return None
        return items[self.menu_index]

    def selected_cart_line(self) -> CartLine | None:
        lines = self.cart.lines()
        if self.cart_index is None or not (0 <= self.cart_index < len(lines)):
            return None
        return lines[self.cart_index]

    def action_cycle_category(self, delta: int) -> None:
        if self.focus_area != "menu" or not MENU_CATEGORIES:
            return
        self.category_index = (self.category_index + delta) % len(MENU_CATEGORIES)
        self.menu_index = 0
        self._refresh_menu()

    def action_move_cursor(self, delta: int) -> None:
        if self.focus_area == "menu":
            items = self.menu_items()
            if items:
                self.menu_index = (self.menu_index + delta) % len(items)
            self._refresh_menu()
            return

        lines = self.cart.lines()
        if not lines:
            self.cart_index = None
        elif self.cart_index is None:
            self.cart_index = 0 if delta > 0 else len(lines) - 1
        else:
            self.cart_index = (self.cart_index + delta) % len(lines)
        self._refresh_cart()

    def action_toggle_focus(self) -> None:
        if self.focus_area == "menu" and not self.cart.is_empty():
            self.focus_area = "cart"
            if self.cart_index is None:
                self.cart_index = 0
        else:
            self.focus_area = "menu"
        self._refresh_all()

    def action_quick_add(self) -> None:
        item = self.selected_menu_item()
        if self.focus_area != "menu" or item is None:
            return
        line = self.cart.add_item(item)
        self.app.notify(describe_addition(line, 1), title="Added to cart", timeout=1.5)
        self._refresh_cart()

    def action_open_details(self) -> None:
        item = self.selected_menu_item()
        if self.focus_area != "menu" or item is None:
            return
        self.app.push_screen(ItemDetailModal(item), callback=partial(self._add_with_details, item))

    def _add_with_details(self, item: MenuEntry, result: ItemDetailResult | None) -> None:
        if result is None:
            return
        quantity, note = result
        line = self.cart.add_item(item, quantity=quantity, note=note)
        self.app.notify(describe_addition(line, quantity), title="Added to cart", timeout=1.5)
        self._refresh_cart()

    def action_adjust_quantity(self, delta: int) -> None:
        line = self.selected_cart_line()
        if self.focus_area != "cart" or line is None:
            return
        self.cart.update_quantity(line.menu_item_id, line.note, delta)
        if self.cart.is_empty():
            self.cart_index = None
            self.focus_area = "menu"
        elif self.cart_index is not None and self.cart_index >= len(self.cart):
            self.cart_index = len(self.cart) - 1
        self._refresh_all()

    def action_submit_order(self) -> None:
        log_debug(f"submit_enter table={self.table_id!r} lines={len(self.cart)}")
        try:
            order = self.cart.submit(self.table_id)
        except EmptyCartError:
            self._set_status("Nothing to submit: the cart is empty")
            self.app.notify("Add something to the cart first.", title="Cart is empty", severity="warning")
            return

        self.ledger.adopt(order)
        self.cart_index = None
        self.focus_area = "menu"
        self._set_status(describe_submission(order))
        self.app.notify(f"Order number: {order.order_number}", title="Order submitted")
        self._refresh_all()
        self.app.push_screen(OrderCompleteModal(order))

    def action_new_order(self) -> None:
        self.cart.reset()
        self.cart_index = None
        self.focus_area = "menu"
        self._set_status("Started a new order")
        self._refresh_all()

    def action_open_orders(self) -> None:
        self.app.push_screen(OrdersScreen(self.ledger, closable=True))

    def _set_status(self, message: str) -> None:
        self.status_message = message
        self._refresh_summary()

    def _visible_rows(self, widget: Static) -> int:
        """Rows available in ``widget``; menu entries use two rows each, cart lines one."""
        height = widget.size.height
        if height <= 0:
            return 8
        return max(1, height)

    def _refresh_all(self) -> None:
        self._refresh_menu()
        self._refresh_cart()

    def _refresh_menu(self) -> None:
        try:
            category_bar = self.query_one("#category-bar", Static)
            promo_bar = self.query_one("#promo-bar", Static)
            menu_widget = self.query_one("#menu-list", Static)
        except NoMatches:
            return

        categories = Text()
        for idx, category in enumerate(MENU_CATEGORIES):
            if idx > 0:
                categories.append(" ")
            style = "bold reverse" if idx == self.category_index else "dim"
            categories.append(f" {category.icon} {category.name} ", style=style)
        category_bar.update(categories)

        promo_bar.update("\n".join(f"★ {promo.name}: {promo.description}" for promo in ACTIVE_PROMOTIONS))

        items = self.menu_items()
        if not items:
            menu_widget.update("No items")
            return
        if self.menu_index >= len(items):
            self.menu_index = 0

        # Each item takes two rows: name/price and description.
        rows = max(1, self._visible_rows(menu_widget) // 2)
        start, end = window_bounds(len(items), rows, self.menu_index)

        lines = Text()
        if start > 0:
            lines.append("⋮\n", style="dim")
        for idx in range(start, end):
            if idx > start:
                lines.append("\n")
            active = self.focus_area == "menu" and idx == self.menu_index
            lines.append("➤ " if active else "  ")
            lines.append_text(format_menu_row(items[idx]))
            lines.append(f"\n    {items[idx].description}", style="dim")
        if end < len(items):
            lines.append("\n⋮", style="dim")
        menu_widget.update(lines)

    def _refresh_cart(self) -> None:
        try:
            cart_widget = self.query_one("#cart-list", Static)
        except NoMatches:
            return

        lines = self.cart.lines()
        if not lines:
            self.cart_index = None
            cart_widget.update("(cart is empty)")
            self._refresh_summary()
            return

        if self.cart_index is not None and self.cart_index >= len(lines):
            self.cart_index = len(lines) - 1

        start, end = window_bounds(len(lines), self._visible_rows(cart_widget), self.cart_index)

        text = Text()
        if start > 0:
            text.append("⋮\n", style="dim")
        for idx in range(start, end):
            if idx > start:
                text.append("\n")
            active = self.focus_area == "cart" and idx == self.cart_index
            text.append("➤ " if active else "  ")
            text.append_text(format_cart_line(lines[idx]))
        if end < len(lines):
            text.append("\n⋮", style="dim")
        cart_widget.update(text)
        self._refresh_summary()

    def _refresh_summary(self) -> None:
        try:
            summary = self.query_one("#cart-summary", Static)
            status_bar = self.query_one("#status-bar", Static)
        except NoMatches:
            return
        summary.update(f"{self.cart.item_count()} items | Total {format_price(self.cart.subtotal())}")
        hint = "Tab cart  +/- qty  Ctrl+S submit" if self.focus_area == "menu" else "Tab menu  +/- qty  Ctrl+S submit"
        status_bar.update(f"{self.status_message or hint}")


class TableOrderApp(App):
    """A Textual app for ordering from a table."""

    TITLE = "Table Order"

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, table_id: str = DEFAULT_TABLE_ID, ledger: OrderLedger | None = None) -> None:
        super().__init__()
        self.table_id = str(table_id)
        self.ledger = ledger if ledger is not None else OrderLedger.seeded()
        latest = self.ledger.max_order_number()
        start = ORDER_NUMBER_START if latest is None else max(ORDER_NUMBER_START, latest + 1)
        self.cart = Cart(order_numbers=OrderNumberSequence(start))
        self.sub_title = f"Table {self.table_id}"
        log_debug(f"app_init table={self.table_id!r} next_order={start}")

    def get_default_screen(self) -> Screen:
        return TableOrderScreen(self.cart, self.ledger, self.table_id)


class OrderAdminApp(App):
    """Standalone order management."""

    TITLE = "Order Management"

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, ledger: OrderLedger | None = None) -> None:
        super().__init__()
        self.ledger = ledger if ledger is not None else OrderLedger.seeded()

    def get_default_screen(self) -> Screen:
        return OrdersScreen(self.ledger, closable=False)
