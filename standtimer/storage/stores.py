"""Key-value stores the activity log persists through.

Both implement ``get(key) -> list[float] | None`` and
``set(key, value)``.
"""

from __future__ import annotations

import json

from .db import get_session
from .models import KeyValueEntry


class MemoryStore:
    """Process-local store.  Values are copied in and out."""

    def __init__(self, initial: dict[str, list[float]] | None = None) -> None:
        self._data: dict[str, list[float]] = {
            k: list(v) for k, v in (initial or {}).items()
        }

    def get(self, key: str) -> list[float] | None:
        value = self._data.get(key)
        return list(value) if value is not None else None

    def set(self, key: str, value: list[float]) -> None:
        self._data[key] = list(value)

    def __contains__(self, key: str) -> bool:
        return key in self._data


class SqlStore:
    """Store backed by the ``kv_entries`` table.

    Call ``init_db()`` (or point ``configure_engine`` somewhere and call
    it) before first use.  Errors propagate; the activity log decides
    what a failed read or write means.
    """

    def get(self, key: str) -> list[float] | None:
        with get_session() as db:
            entry = db.get(KeyValueEntry, key)
            if entry is None:
                return None
            # Malformed JSON raises ValueError: treated as a read failure
            return json.loads(entry.value)

    def set(self, key: str, value: list[float]) -> None:
        payload = json.dumps(list(value))
        with get_session() as db:
            entry = db.get(KeyValueEntry, key)
            if entry is None:
                db.add(KeyValueEntry(key=key, value=payload))
            else:
                entry.value = payload
