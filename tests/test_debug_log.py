"""Debug log tests."""

from __future__ import annotations

from tableorder.cart import Cart
from tableorder.config import DEBUG_LOG_ENV
from tableorder.debug_log import debug_log_path, log_debug


class TestDebugLog:
    def test_path_follows_env(self, _debug_log_in_tmp) -> None:
        assert debug_log_path() == _debug_log_in_tmp

    def test_appends_timestamped_lines(self, _debug_log_in_tmp) -> None:
        log_debug("first")
        log_debug("second")

        lines = _debug_log_in_tmp.read_text(encoding="utf-8").splitlines()
        assert [line.split(" ", 1)[1] for line in lines] == ["first", "second"]

    def test_cart_operations_are_logged(self, _debug_log_in_tmp, beef_rice) -> None:
        cart = Cart()
        cart.add_item(beef_rice)
        cart.submit("5")

        content = _debug_log_in_tmp.read_text(encoding="utf-8")
        assert "cart_add item=1" in content
        assert "cart_submit order=" in content

    def test_unwritable_path_is_ignored(self, tmp_path, monkeypatch) -> None:
        blocker = tmp_path / "file"
        blocker.write_text("x", encoding="utf-8")
        monkeypatch.setenv(DEBUG_LOG_ENV, str(blocker / "nested.log"))

        log_debug("dropped")
