# catalog/events.py
"""
Event logging for the recipe catalog.

Responsibilities:
- Provide a single log_event(...) function that:
  - Always logs the event through the standard logging module.
  - Appends a JSONL record to the file named by RECIPE_EVENT_LOG when set.
  - Never raises exceptions (event logging is strictly non-blocking).

- Provide small helper functions for the user interactions the app tracks:
  - log_favorite_added(...)
  - log_favorite_removed(...)
  - log_allergen_toggled(...)
  - log_recipe_viewed(...)
"""

from __future__ import annotations

import json
import logging
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

EVENT_LOG_ENV_VAR = "RECIPE_EVENT_LOG"


def get_event_log_file() -> Optional[Path]:
    """
    Path of the JSONL event file, or None when file logging is disabled.

    Read on every call so tests and .env changes take effect without reloading.
    """
    raw = os.getenv(EVENT_LOG_ENV_VAR)
    if not raw:
        return None
    return Path(raw)


def _write_to_file(path: Path, record: Dict[str, Any]) -> None:
    """
    Append a single JSON record to the event file as JSONL.
    Never raise exceptions.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("a", encoding="utf-8") as f:
            f.write(json.dumps(record, ensure_ascii=False) + "\n")
    except Exception as exc:
        logger.debug("Failed to write event to %s: %s", path, exc)


def log_event(event: str, payload: Optional[Dict[str, Any]] = None) -> None:
    """
    Core event logger.

    Behavior:
    - Build a record with keys: ts, event, payload.
    - Log it at INFO through the module logger.
    - If RECIPE_EVENT_LOG is set, append the record to that file.
    - Never raise exceptions.
    """
    record = {
        "ts": datetime.now(timezone.utc).isoformat(),
        "event": event,
        "payload": payload or {},
    }

    logger.info("event=%s payload=%s", event, record["payload"])

    path = get_event_log_file()
    if path is not None:
        _write_to_file(path, record)


# ---------------------------------------------------------------------------
# Helper functions for common event types
# ---------------------------------------------------------------------------

def log_favorite_added(recipe_id: str, recipe_name: str, favorites_count: int) -> None:
    """
    Log a favorite_added event.

    payload:
    {
        "recipe_id": "...",
        "recipe_name": "Spaghetti Carbonara",
        "favorites_count": 3
    }
    """
    log_event(
        "favorite_added",
        {"recipe_id": recipe_id, "recipe_name": recipe_name, "favorites_count": favorites_count},
    )


def log_favorite_removed(recipe_id: str, favorites_count: int) -> None:
    """Log a favorite_removed event."""
    log_event("favorite_removed", {"recipe_id": recipe_id, "favorites_count": favorites_count})


def log_allergen_toggled(allergen: str, enabled: bool, selected_count: int) -> None:
    """
    Log an allergen_toggled event.

    payload:
    {
        "allergen": "eggs",
        "enabled": true,
        "selected_count": 2
    }
    """
    log_event(
        "allergen_toggled",
        {"allergen": allergen, "enabled": enabled, "selected_count": selected_count},
    )


def log_recipe_viewed(recipe_id: str, recipe_name: str) -> None:
    log_event("recipe_viewed", {"recipe_id": recipe_id, "recipe_name": recipe_name})
