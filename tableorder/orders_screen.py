"""Order management screen: status tabs, table filter, search and status changes."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.css.query import NoMatches
from textual.events import Key
from textual.screen import Screen
from textual.widgets import Header, Static

from tableorder.debug_log import log_debug
from tableorder.errors import LedgerError
from tableorder.ledger import STATUS_LABELS, LedgerEntry, OrderLedger
from tableorder.models import OrderStatus
from tableorder.printer import check_printer_dependencies, print_table_receipt
from tableorder.rendering import format_ledger_entry, status_style, window_bounds

STATUS_TABS: list[OrderStatus | None] = [
    None,
    OrderStatus.PENDING,
    OrderStatus.PROCESSING,
    OrderStatus.COMPLETED,
    OrderStatus.CANCELLED,
]


class OrdersScreen(Screen[None]):
    """Submitted orders grouped by table."""

    CSS = """
    #orders-layout {
        height: 1fr;
        border: round $primary;
        padding: 1;
    }

    #orders-tabs {
        margin-bottom: 1;
    }

    #orders-filter {
        border: heavy $secondary;
        padding: 0 1;
        margin-bottom: 1;
        height: 5;
    }

    #orders-list {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }
    """

    BINDINGS = [
        ("left", "cycle_tab(-1)", "Previous tab"),
        ("right", "cycle_tab(1)", "Next tab"),
        ("up", "move_cursor(-1)", "Previous order"),
        ("down", "move_cursor(1)", "Next order"),
        ("t", "cycle_table", "Table filter"),
        ("slash", "start_search", "Search"),
        ("p", "advance_selected", "Next step"),
        ("x", "cancel_selected", "Cancel order"),
        ("r", "print_receipt", "Print receipt"),
        ("escape", "close", "Back"),
    ]

    def __init__(self, ledger: OrderLedger, closable: bool = True) -> None:
        super().__init__()
        self.ledger = ledger
        self.closable = closable
        self.tab_index = 0
        self.table_filter: str | None = None
        self.search_query = ""
        self.searching = False
        self.cursor: int | None = None
        self.status_message = ""
        self.printer_status = ""

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="orders-layout"):
            yield Static(id="orders-tabs")
            yield Static(id="orders-filter")
            yield Static(id="orders-list")

    def on_mount(self) -> None:
        _, msg = check_printer_dependencies()
        self.printer_status = msg
        log_debug(f"orders_mount printer_status={msg!r}")
        self._refresh_all()

    def on_screen_resume(self) -> None:
        self._refresh_all()

    def on_key(self, event: Key) -> None:
        if not self.searching:
            return

        if event.key == "escape":
            self.searching = False
            self.search_query = ""
        elif event.key == "enter":
            self.searching = False
        elif event.key == "backspace":
            self.search_query = self.search_query[:-1]
        elif event.is_printable and event.character:
            self.search_query += event.character
        else:
            event.stop()
            return

        self.cursor = None
        self._refresh_all()
        event.stop()

    @property
    def active_status(self) -> OrderStatus | None:
        return STATUS_TABS[self.tab_index]

    def visible_entries(self) -> list[LedgerEntry]:
        """Filtered entries in display order (grouped by table)."""
        filtered = self.ledger.filter(status=self.active_status, table_id=self.table_filter, query=self.search_query)
        grouped = OrderLedger.group_by_table(filtered)
        return [entry for entries in grouped.values() for entry in entries]

    def selected_entry(self) -> LedgerEntry | None:
        entries = self.visible_entries()
        if self.cursor is None or not (0 <= self.cursor < len(entries)):
            return None
        return entries[self.cursor]

    def action_cycle_tab(self, delta: int) -> None:
        self.tab_index = (self.tab_index + delta) % len(STATUS_TABS)
        self.cursor = None
        self._refresh_all()

    def action_move_cursor(self, delta: int) -> None:
        entries = self.visible_entries()
        if not entries:
            self.cursor = None
        elif self.cursor is None:
            self.cursor = 0 if delta > 0 else len(entries) - 1
        else:
            self.cursor = (self.cursor + delta) % len(entries)
        self._refresh_orders()

    def action_cycle_table(self) -> None:
        options: list[str | None] = [None, *self.ledger.table_ids()]
        current = options.index(self.table_filter) if self.table_filter in options else 0
        self.table_filter = options[(current + 1) % len(options)]
        self.cursor = None
        self._refresh_all()

    def action_start_search(self) -> None:
        self.searching = True
        self._refresh_filter()

    def action_advance_selected(self) -> None:
        entry = self.selected_entry()
        if entry is None:
            return
        try:
            self.ledger.advance(entry.order_number)
        except LedgerError as exc:
            self._set_status(str(exc))
            return
        self._announce(entry)

    def action_cancel_selected(self) -> None:
        entry = self.selected_entry()
        if entry is None:
            return
        try:
            self.ledger.cancel(entry.order_number)
        except LedgerError as exc:
            self._set_status(str(exc))
            return
        self._announce(entry)

    def action_print_receipt(self) -> None:
        entry = self.selected_entry()
        if entry is None:
            return
        table_id = entry.table_id
        try:
            print_table_receipt(table_id, self.ledger)
        except Exception as exc:
            log_debug(f"print_receipt_failed table={table_id!r} error={exc!r}")
            self._set_status(f"Receipt for table {table_id} failed: {exc}")
            self.app.notify(str(exc), title="Print failed", severity="error", markup=False)
            return
        self._set_status(f"Receipt for table {table_id} printed")

    def action_close(self) -> None:
        if self.searching or not self.closable:
            return
        self.app.pop_screen()

    def _announce(self, entry: LedgerEntry) -> None:
        label = STATUS_LABELS[entry.status]
        self.app.notify(f"Order #{entry.order_number} is now {label}", title="Order updated")
        self._set_status(f"Order #{entry.order_number} -> {label}")
        entries = self.visible_entries()
        if self.cursor is not None and self.cursor >= len(entries):
            self.cursor = len(entries) - 1 if entries else None
        self._refresh_orders()

    def _set_status(self, message: str) -> None:
        self.status_message = message
        self._refresh_filter()

    def _refresh_all(self) -> None:
        self._refresh_tabs()
        self._refresh_filter()
        self._refresh_orders()

    def _refresh_tabs(self) -> None:
        try:
            tabs = self.query_one("#orders-tabs", Static)
        except NoMatches:
            return
        text = Text()
        for idx, status in enumerate(STATUS_TABS):
            if idx > 0:
                text.append("  ")
            label = "All" if status is None else STATUS_LABELS[status]
            count = len(self.ledger.filter(status=status))
            if idx == self.tab_index:
                style = "bold reverse" if status is None else status_style(status)
                text.append(f" {label} ({count}) ", style=style)
            else:
                text.append(f" {label} ({count}) ", style="dim")
        tabs.update(text)

    def filter_bar_text(self) -> str:
        table = "all tables" if self.table_filter is None else f"table {self.table_filter}"
        cursor = "|" if self.searching else ""
        lines = [
            f"Showing {table}. Search: {self.search_query}{cursor}",
            "←/→ tab  ↑/↓ select  t table  / search  p next step  x cancel  r receipt",
            self.status_message or self.printer_status,
        ]
        return "\n".join(line for line in lines if line)

    def _refresh_filter(self) -> None:
        try:
            bar = self.query_one("#orders-filter", Static)
        except NoMatches:
            return
        bar.update(self.filter_bar_text())

    def _refresh_orders(self) -> None:
        try:
            widget = self.query_one("#orders-list", Static)
        except NoMatches:
            return
        entries = self.visible_entries()
        if not entries:
            widget.update("(no orders)")
            return

        # Entries span several rows; budget roughly four rows each.
        rows = max(1, widget.size.height // 4) if widget.size.height > 0 else 6
        start, end = window_bounds(len(entries), rows, self.cursor)

        text = Text()
        if start > 0:
            text.append("⋮\n", style="dim")
        current_table: str | None = None
        for idx in range(start, end):
            entry = entries[idx]
            if entry.table_id != current_table:
                if idx > start:
                    text.append("\n")
                text.append(f"Table {entry.table_id}\n", style="bold underline")
                current_table = entry.table_id
            pointer = "➤ " if idx == self.cursor else "  "
            text.append(pointer)
            text.append_text(format_ledger_entry(entry))
            text.append("\n")
        if end < len(entries):
            text.append("⋮", style="dim")
        widget.update(text)
