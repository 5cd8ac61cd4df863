"""Headless tests for the Textual screens."""

from __future__ import annotations

import asyncio

from tableorder import orders_screen
from tableorder.errors import PrinterUnavailableError
from tableorder.item_detail_modal import ItemDetailModal
from tableorder.ledger import OrderLedger
from tableorder.models import OrderStatus
from tableorder.order_complete_modal import OrderCompleteModal
from tableorder.orders_screen import OrdersScreen
from tableorder.table_order_app import OrderAdminApp, TableOrderApp, TableOrderScreen


def _press(app, *keys: str, check=None) -> None:
    """Run ``app`` headless, press ``keys`` and optionally inspect it before exit."""

    async def scenario() -> None:
        async with app.run_test() as pilot:
            for key in keys:
                await pilot.press(key)
                await pilot.pause()
            if check is not None:
                check(app)

    asyncio.run(scenario())


class TestTableOrderApp:
    def test_quick_add_merges(self) -> None:
        app = TableOrderApp(table_id="5", ledger=OrderLedger())
        _press(app, "a", "a")

        line = app.cart.get(1)
        assert line is not None and line.quantity == 2
        assert app.cart.subtotal() == 360

    def test_category_switch(self) -> None:
        app = TableOrderApp(ledger=OrderLedger())
        _press(app, "right", "a", "down", "a")

        assert [line.name for line in app.cart] == ["珍珠奶茶", "檸檬綠茶"]

    def test_detail_modal_adds_quantity_and_note(self) -> None:
        app = TableOrderApp(ledger=OrderLedger())

        def modal_open(app) -> None:
            assert isinstance(app.screen, ItemDetailModal)

        _press(app, "enter", check=modal_open)

        app = TableOrderApp(ledger=OrderLedger())
        _press(app, "enter", "up", "l", "e", "s", "s", "enter")

        line = app.cart.get(1, "less")
        assert line is not None and line.quantity == 2

    def test_detail_modal_cancel_adds_nothing(self) -> None:
        app = TableOrderApp(ledger=OrderLedger())
        _press(app, "enter", "up", "escape")

        assert app.cart.is_empty()

    def test_cart_quantity_keys(self) -> None:
        app = TableOrderApp(ledger=OrderLedger())
        _press(app, "a", "tab", "+", "+")

        assert app.cart.get(1).quantity == 3

        app = TableOrderApp(ledger=OrderLedger())
        _press(app, "a", "tab", "-")

        assert app.cart.is_empty()

    def test_submit_adopts_order_and_clears_cart(self) -> None:
        ledger = OrderLedger()
        app = TableOrderApp(table_id="5", ledger=ledger)

        def confirmation_shown(app) -> None:
            assert isinstance(app.screen, OrderCompleteModal)
            assert app.screen.order.total == 180

        _press(app, "a", "ctrl+s", check=confirmation_shown)

        assert app.cart.is_empty()
        assert len(ledger) == 1
        entry = ledger.get(1001)
        assert entry.table_id == "5"
        assert entry.status is OrderStatus.PENDING

    def test_order_numbers_continue_after_seeded_ledger(self) -> None:
        app = TableOrderApp(table_id="2")
        _press(app, "a", "ctrl+s", "enter", "a", "ctrl+s")

        assert app.ledger.get(1006).table_id == "2"
        assert app.ledger.get(1007).table_id == "2"

    def test_empty_submit_is_rejected(self) -> None:
        ledger = OrderLedger()
        app = TableOrderApp(ledger=ledger)

        def still_ordering(app) -> None:
            assert isinstance(app.screen, TableOrderScreen)
            assert "Nothing to submit" in app.screen.status_message

        _press(app, "ctrl+s", check=still_ordering)

        assert len(ledger) == 0

    def test_new_order_resets_cart(self) -> None:
        app = TableOrderApp(ledger=OrderLedger())
        _press(app, "a", "right", "a", "ctrl+n")

        assert app.cart.is_empty()

    def test_order_management_from_ordering_screen(self) -> None:
        ledger = OrderLedger()
        app = TableOrderApp(ledger=ledger)

        def back_on_ordering(app) -> None:
            assert isinstance(app.screen, TableOrderScreen)

        _press(app, "a", "ctrl+s", "enter", "ctrl+o", "down", "p", "escape", check=back_on_ordering)

        assert ledger.get(1001).status is OrderStatus.PROCESSING


class TestOrderAdminApp:
    def test_cancel_first_pending(self) -> None:
        app = OrderAdminApp()
        _press(app, "right", "down", "x")

        assert app.ledger.get(1003).status is OrderStatus.CANCELLED
        assert app.ledger.get(1004).status is OrderStatus.PENDING

    def test_completed_order_cannot_advance(self) -> None:
        app = OrderAdminApp()

        def rejection_shown(app) -> None:
            assert "already completed" in app.screen.status_message

        # The first visible entry on the "all" tab is the completed order 1001.
        _press(app, "down", "p", check=rejection_shown)

        assert app.ledger.get(1001).status is OrderStatus.COMPLETED

    def test_search(self) -> None:
        app = OrderAdminApp()

        def only_match(app) -> None:
            screen = app.screen
            assert isinstance(screen, OrdersScreen)
            assert [entry.order_number for entry in screen.visible_entries()] == [1004]

        _press(app, "/", "1", "0", "0", "4", "enter", check=only_match)

    def test_table_filter_cycles(self) -> None:
        app = OrderAdminApp()

        def table_three(app) -> None:
            assert app.screen.table_filter == "3"
            assert [entry.order_number for entry in app.screen.visible_entries()] == [1003]

        _press(app, "t", check=table_three)

    def test_escape_does_not_close_standalone_screen(self) -> None:
        app = OrderAdminApp()

        def still_there(app) -> None:
            assert isinstance(app.screen, OrdersScreen)

        _press(app, "escape", check=still_there)

    def test_printer_status_shown_on_mount(self, monkeypatch) -> None:
        monkeypatch.setattr(
            orders_screen, "check_printer_dependencies", lambda: (False, "Printer deps unavailable: no usb")
        )
        app = OrderAdminApp()

        def status_in_filter_bar(app) -> None:
            assert app.screen.printer_status == "Printer deps unavailable: no usb"
            assert "Printer deps unavailable: no usb" in app.screen.filter_bar_text()

        _press(app, check=status_in_filter_bar)

    def test_receipt_failure_reported(self, monkeypatch) -> None:
        def broken_printer(table_id, entries) -> None:
            raise PrinterUnavailableError("Printer dependencies unavailable: no usb")

        monkeypatch.setattr(orders_screen, "print_table_receipt", broken_printer)
        app = OrderAdminApp()

        def failure_shown(app) -> None:
            message = app.screen.status_message
            assert "failed" in message
            assert "no usb" in app.screen.filter_bar_text()

        _press(app, "down", "r", check=failure_shown)

    def test_receipt_printed_for_selected_table(self, monkeypatch) -> None:
        printed: list[str] = []
        monkeypatch.setattr(orders_screen, "print_table_receipt", lambda table_id, entries: printed.append(table_id))
        app = OrderAdminApp()

        def success_shown(app) -> None:
            table_id = app.screen.selected_entry().table_id
            assert printed == [table_id]
            assert app.screen.status_message == f"Receipt for table {table_id} printed"

        _press(app, "down", "r", check=success_shown)
