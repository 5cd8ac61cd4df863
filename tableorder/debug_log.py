"""Append-only debug log shared by the engine and the screens."""

from __future__ import annotations

import os
from datetime import datetime, timezone
from pathlib import Path

from tableorder.config import DEBUG_LOG_ENV, DEBUG_LOG_PATH


def debug_log_path() -> Path:
    """Resolve the log file, honouring the environment override."""
    override = os.environ.get(DEBUG_LOG_ENV, "").strip()
    return Path(override or DEBUG_LOG_PATH)


def log_debug(message: str) -> None:
    try:
        ts = datetime.now(timezone.utc).isoformat()
        path = debug_log_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("a", encoding="utf-8") as fh:
            fh.write(f"{ts} {message}\n")
    except Exception:
        # Logging must never interfere with app flow.
        return
