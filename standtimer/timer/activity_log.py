"""Ordered, persisted record of "I stood up" events.

Entries are epoch-second floats kept most-recent-first.  Every
confirmation is recorded, even two seconds apart; there is no
duplicate suppression.

The log never touches disk itself: it writes a flat list of numbers
through an injected key-value store (anything with ``get``/``set``).
"""

from __future__ import annotations

import logging
import math
import numbers
from datetime import datetime
from typing import Iterator, Protocol

from .errors import PersistenceReadFailure, PersistenceWriteFailure

logger = logging.getLogger(__name__)

LOG_KEY = "StandTimerLogs"


class KeyValueStore(Protocol):
    """Persistence capability injected into the log."""

    def get(self, key: str) -> list[float] | None: ...

    def set(self, key: str, value: list[float]) -> None: ...


class ActivityLog:
    """Most-recent-first list of stand-up timestamps."""

    def __init__(self, store: KeyValueStore | None = None, key: str = LOG_KEY) -> None:
        if store is None:
            from ..storage.stores import MemoryStore
            store = MemoryStore()
        self._store = store
        self._key = key
        self._entries: list[float] = []
        self._write_failure: PersistenceWriteFailure | None = None
        self.load()

    # ── read side ─────────────────────────────────────────────────────

    @property
    def key(self) -> str:
        return self._key

    @property
    def entries(self) -> tuple[float, ...]:
        return tuple(self._entries)

    @property
    def latest(self) -> float | None:
        return self._entries[0] if self._entries else None

    @property
    def write_failure(self) -> PersistenceWriteFailure | None:
        """The last unrecovered write failure, if any."""
        return self._write_failure

    def datetimes(self) -> list[datetime]:
        """Entries as local-time datetimes, for display."""
        return [datetime.fromtimestamp(ts) for ts in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[float]:
        return iter(tuple(self._entries))

    def __bool__(self) -> bool:
        return bool(self._entries)

    # ── mutation ──────────────────────────────────────────────────────

    def load(self) -> None:
        """(Re)load from the store.  Anything unreadable means empty."""
        try:
            self._entries = self._read()
        except PersistenceReadFailure as exc:
            logger.warning("Activity log unreadable, starting empty: %s", exc)
            self._entries = []

    def append(self, timestamp: float) -> PersistenceWriteFailure | None:
        self._entries.insert(0, float(timestamp))
        return self._write()

    def clear(self) -> PersistenceWriteFailure | None:
        self._entries.clear()
        return self._write()

    def flush(self) -> bool:
        """Write the in-memory list again.  True when the store took it."""
        return self._write() is None

    # ── internals ─────────────────────────────────────────────────────

    def _read(self) -> list[float]:
        try:
            raw = self._store.get(self._key)
        except Exception as exc:
            raise PersistenceReadFailure(str(exc)) from exc

        if raw is None:
            return []
        if not isinstance(raw, (list, tuple)):
            raise PersistenceReadFailure(
                f"expected a list under {self._key!r}, got {type(raw).__name__}"
            )
        # All or nothing: one bad value discards the whole list
        entries = [self._timestamp(value) for value in raw]
        return sorted(entries, reverse=True)

    def _timestamp(self, value: object) -> float:
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise PersistenceReadFailure(
                f"non-numeric timestamp {value!r} under {self._key!r}"
            )
        try:
            ts = float(value)
            if not math.isfinite(ts):
                raise ValueError("not finite")
            # must be displayable as a local time
            datetime.fromtimestamp(ts)
        except (OverflowError, ValueError, OSError) as exc:
            raise PersistenceReadFailure(
                f"unusable timestamp {value!r} under {self._key!r}: {exc}"
            ) from exc
        return ts

    def _write(self) -> PersistenceWriteFailure | None:
        try:
            self._store.set(self._key, list(self._entries))
        except Exception as exc:
            failure = PersistenceWriteFailure(self._key, exc)
            logger.warning("%s", failure)
            self._write_failure = failure
            return failure
        self._write_failure = None
        return None
