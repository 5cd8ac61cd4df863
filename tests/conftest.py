"""Shared pytest fixtures."""

from __future__ import annotations

import pytest

from tableorder.config import DEBUG_LOG_ENV
from tableorder.models import MenuEntry


@pytest.fixture(autouse=True)
def _debug_log_in_tmp(tmp_path, monkeypatch):
    """Keep debug logging out of /tmp during tests."""
    log_path = tmp_path / "debug.log"
    monkeypatch.setenv(DEBUG_LOG_ENV, str(log_path))
    return log_path


@pytest.fixture
def beef_rice() -> MenuEntry:
    return MenuEntry(item_id=1, category_id=1, name="牛肉飯", description="澳洲進口牛肉", price=180)


@pytest.fixture
def milk_tea() -> MenuEntry:
    return MenuEntry(item_id=4, category_id=2, name="珍珠奶茶", description="新鮮台灣茶葉", price=60)


@pytest.fixture
def fixed_clock():
    return lambda: "2024-01-01T12:00:00+00:00"
