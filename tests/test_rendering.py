"""Rendering helper tests."""

from __future__ import annotations

from tableorder.ledger import OrderLedger
from tableorder.models import CartLine, OrderStatus, SubmittedOrder
from tableorder.rendering import (
    describe_addition,
    describe_submission,
    format_cart_line,
    format_ledger_entry,
    format_menu_row,
    format_price,
    format_status_badge,
    status_style,
    window_bounds,
)


class TestFormatPrice:
    def test_currency_prefix(self) -> None:
        assert format_price(180) == "NT$ 180"


class TestCartLine:
    def test_plain_line(self) -> None:
        text = format_cart_line(CartLine(1, "牛肉飯", 180, 2))

        assert text.plain == "牛肉飯  NT$ 180 x 2  = NT$ 360"

    def test_note_on_second_row(self) -> None:
        text = format_cart_line(CartLine(4, "珍珠奶茶", 60, 1, note="no ice"))

        assert text.plain.splitlines()[1].strip() == "Request: no ice"


class TestMenuRow:
    def test_name_and_price(self, beef_rice) -> None:
        assert format_menu_row(beef_rice).plain == "牛肉飯  NT$ 180"


class TestStatus:
    def test_every_status_has_a_distinct_style(self) -> None:
        styles = {status_style(status) for status in OrderStatus}

        assert len(styles) == len(OrderStatus)

    def test_badge_label(self) -> None:
        assert format_status_badge(OrderStatus.PROCESSING).plain.strip() == "Processing"


class TestLedgerEntry:
    def test_includes_discount_and_lines(self) -> None:
        entry = OrderLedger.seeded().get(1002)
        plain = format_ledger_entry(entry).plain

        assert plain.startswith("#1002")
        assert "Table 8" in plain
        assert "NT$ 280" in plain
        assert "discount NT$ 20" in plain
        assert "雞肉飯 x1" in plain


class TestDescriptions:
    def test_addition_without_note(self) -> None:
        line = CartLine(1, "牛肉飯", 180, 3)

        assert describe_addition(line, 1) == "牛肉飯 x1"

    def test_addition_with_note_is_flagged(self) -> None:
        line = CartLine(4, "珍珠奶茶", 60, 2, note="less sugar")

        assert describe_addition(line, 2) == "珍珠奶茶 x2 (special request)"

    def test_submission(self) -> None:
        order = SubmittedOrder(1001, "5", (CartLine(1, "牛肉飯", 180, 1),), 180, "t")

        assert describe_submission(order) == "Order #1001 for table 5: NT$ 180"


class TestWindowBounds:
    def test_empty(self) -> None:
        assert window_bounds(0, 5, None) == (0, 0)

    def test_fits(self) -> None:
        assert window_bounds(3, 5, 2) == (0, 3)

    def test_centres_selection(self) -> None:
        assert window_bounds(20, 5, 10) == (8, 13)

    def test_clamps_at_end(self) -> None:
        assert window_bounds(20, 5, 19) == (15, 20)

    def test_no_selection_starts_at_top(self) -> None:
        assert window_bounds(20, 5, None) == (0, 5)
