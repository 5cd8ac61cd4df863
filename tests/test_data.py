"""Catalog data tests."""

from __future__ import annotations

import pytest

from tableorder.data import (
    ACTIVE_PROMOTIONS,
    MENU_BY_CATEGORY,
    MENU_CATEGORIES,
    MENU_ITEMS,
    TABLE_IDS,
    items_in_category,
    menu_item_by_id,
)


class TestCatalog:
    def test_item_ids_unique(self) -> None:
        ids = [item.item_id for item in MENU_ITEMS]

        assert len(ids) == len(set(ids))

    def test_every_item_belongs_to_a_category(self) -> None:
        category_ids = {category.category_id for category in MENU_CATEGORIES}

        assert all(item.category_id in category_ids for item in MENU_ITEMS)
        assert sum(len(items) for items in MENU_BY_CATEGORY.values()) == len(MENU_ITEMS)

    def test_prices_are_non_negative_integers(self) -> None:
        assert all(isinstance(item.price, int) and item.price >= 0 for item in MENU_ITEMS)

    def test_lookup(self) -> None:
        item = menu_item_by_id(1)

        assert item.name == "牛肉飯"
        assert item.price == 180

    def test_unknown_id(self) -> None:
        with pytest.raises(KeyError):
            menu_item_by_id(999)

    def test_items_in_category(self) -> None:
        assert [item.item_id for item in items_in_category(2)] == [4, 5]
        assert len(items_in_category(None)) == len(MENU_ITEMS)
        assert items_in_category(42) == []

    def test_only_active_promotions(self) -> None:
        assert ACTIVE_PROMOTIONS
        assert all(promo.active for promo in ACTIVE_PROMOTIONS)

    def test_tables(self) -> None:
        assert TABLE_IDS[0] == "1"
        assert len(TABLE_IDS) == 30
