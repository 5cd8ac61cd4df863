"""Editable static menu, promotion and seed order data."""

from __future__ import annotations

CURRENCY_LABEL = "NT$"

TABLE_COUNT = 30

MENU_CATEGORIES: list[dict[str, object]] = [
    {"id": 1, "name": "主菜", "icon": "🍲"},
    {"id": 2, "name": "飲料", "icon": "🥤"},
    {"id": 3, "name": "甜點", "icon": "🍰"},
    {"id": 4, "name": "小吃", "icon": "🍟"},
    {"id": 5, "name": "湯品", "icon": "🍜"},
]

_IMAGE_BASE = "https://images.unsplash.com"

MENU_ITEMS: list[dict[str, object]] = [
    {
        "id": 1,
        "category_id": 1,
        "name": "牛肉飯",
        "description": "澳洲進口牛肉，搭配特調醬汁",
        "price": 180,
        "image": f"{_IMAGE_BASE}/photo-1574484284002-952d92456975",
    },
    {
        "id": 2,
        "category_id": 1,
        "name": "雞肉飯",
        "description": "台灣本地雞肉，鮮嫩多汁",
        "price": 150,
        "image": f"{_IMAGE_BASE}/photo-1512058564366-18510be2db19",
    },
    {
        "id": 3,
        "category_id": 1,
        "name": "豬肉飯",
        "description": "台灣本地豬肉，香氣四溢",
        "price": 160,
        "image": f"{_IMAGE_BASE}/photo-1625938144067-b1fd645a8935",
    },
    {
        "id": 4,
        "category_id": 2,
        "name": "珍珠奶茶",
        "description": "新鮮台灣茶葉，波霸來自台南",
        "price": 60,
        "image": f"{_IMAGE_BASE}/photo-1558857563-c0c6ee4ff84f",
    },
    {
        "id": 5,
        "category_id": 2,
        "name": "檸檬綠茶",
        "description": "台灣高山茶，新鮮檸檬",
        "price": 50,
        "image": f"{_IMAGE_BASE}/photo-1556680080-3a20e09269cd",
    },
    {
        "id": 6,
        "category_id": 3,
        "name": "芒果冰",
        "description": "台南愛文芒果，綿密冰沙",
        "price": 120,
        "image": f"{_IMAGE_BASE}/photo-1501443762994-82bd5dace89a",
    },
    {
        "id": 7,
        "category_id": 3,
        "name": "紅豆湯圓",
        "description": "手工湯圓，台南紅豆",
        "price": 90,
        "image": f"{_IMAGE_BASE}/photo-1563379091339-03b21ab4a4f8",
    },
    {
        "id": 8,
        "category_id": 4,
        "name": "炸雞塊",
        "description": "台灣本地雞肉，特調醬料",
        "price": 100,
        "image": f"{_IMAGE_BASE}/photo-1562967915-92ae0c330dde",
    },
    {
        "id": 9,
        "category_id": 4,
        "name": "薯條",
        "description": "美國進口馬鈴薯，酥脆可口",
        "price": 80,
        "image": f"{_IMAGE_BASE}/photo-1573080496219-bb080dd4f877",
    },
    {
        "id": 10,
        "category_id": 5,
        "name": "味噌湯",
        "description": "日本進口味噌，蔬菜豐富",
        "price": 70,
        "image": f"{_IMAGE_BASE}/photo-1547592166-23ac45744acd",
    },
]

PROMOTIONS: list[dict[str, object]] = [
    {"id": 1, "name": "全單8折", "description": "全部品項享8折優惠", "type": "discount", "value": 0.8, "active": True},
    {"id": 2, "name": "主菜+飲料省20元", "description": "任一主菜搭配飲料省20元", "type": "combo", "value": 20, "active": True},
    {"id": 3, "name": "買一送一", "description": "指定飲料買一送一", "type": "buy_one_get_one", "value": 0, "active": False},
]

# Orders already in the ledger when the management screen starts.
# Items are (menu item id, quantity).
SEED_ORDERS: list[dict[str, object]] = [
    {
        "order_number": 1001,
        "table_id": "5",
        "status": "completed",
        "items": [(1, 2), (4, 2)],
        "discount": 0,
        "created_at": "2023-05-10T12:30:00",
        "completed_at": "2023-05-10T13:00:00",
    },
    {
        "order_number": 1002,
        "table_id": "8",
        "status": "processing",
        "items": [(2, 1), (5, 1), (8, 1)],
        "discount": 20,
        "created_at": "2023-05-10T12:45:00",
    },
    {
        "order_number": 1003,
        "table_id": "3",
        "status": "pending",
        "items": [(3, 3), (9, 2), (4, 3)],
        "discount": 0,
        "created_at": "2023-05-10T13:00:00",
    },
    {
        "order_number": 1004,
        "table_id": "12",
        "status": "pending",
        "items": [(1, 1), (10, 1)],
        "discount": 0,
        "created_at": "2023-05-10T13:15:00",
    },
    {
        "order_number": 1005,
        "table_id": "7",
        "status": "processing",
        "items": [(6, 2), (7, 1)],
        "discount": 0,
        "created_at": "2023-05-10T13:30:00",
    },
]
