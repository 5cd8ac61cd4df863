"""Static catalog data."""

from __future__ import annotations

from tableorder.constant import (
    MENU_CATEGORIES as _MENU_CATEGORIES_RAW,
    MENU_ITEMS as _MENU_ITEMS_RAW,
    PROMOTIONS as _PROMOTIONS_RAW,
    TABLE_COUNT,
)
from tableorder.models import MenuCategory, MenuEntry, Promotion

MENU_CATEGORIES: list[MenuCategory] = [
    MenuCategory(category_id=int(raw["id"]), name=str(raw["name"]), icon=str(raw["icon"]))  # type: ignore[arg-type]
    for raw in _MENU_CATEGORIES_RAW
]

MENU_ITEMS: list[MenuEntry] = [
    MenuEntry(
        item_id=int(raw["id"]),  # type: ignore[arg-type]
        category_id=int(raw["category_id"]),  # type: ignore[arg-type]
        name=str(raw["name"]),
        description=str(raw["description"]),
        price=int(raw["price"]),  # type: ignore[arg-type]
        image=str(raw["image"]),
    )
    for raw in _MENU_ITEMS_RAW
]

MENU_BY_ID: dict[int, MenuEntry] = {item.item_id: item for item in MENU_ITEMS}

MENU_BY_CATEGORY: dict[int, list[MenuEntry]] = {
    category.category_id: [item for item in MENU_ITEMS if item.category_id == category.category_id]
    for category in MENU_CATEGORIES
}

PROMOTIONS: list[Promotion] = [
    Promotion(
        promotion_id=int(raw["id"]),  # type: ignore[arg-type]
        name=str(raw["name"]),
        description=str(raw["description"]),
        kind=str(raw["type"]),
        value=float(raw["value"]),  # type: ignore[arg-type]
        active=bool(raw["active"]),
    )
    for raw in _PROMOTIONS_RAW
]

ACTIVE_PROMOTIONS: list[Promotion] = [promo for promo in PROMOTIONS if promo.active]

TABLE_IDS: list[str] = [str(number) for number in range(1, TABLE_COUNT + 1)]


def menu_item_by_id(item_id: int) -> MenuEntry:
    """Look up a catalog item; raises KeyError for unknown ids."""
    return MENU_BY_ID[item_id]


def items_in_category(category_id: int | None) -> list[MenuEntry]:
    """Items of one category, or the whole menu when no category is selected."""
    if category_id is None:
        return list(MENU_ITEMS)
    return list(MENU_BY_CATEGORY.get(category_id, []))
