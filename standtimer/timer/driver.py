"""Qt host for the timer engine.

The engine is a plain object that has to be handed the time on every
call.  ``TimerDriver`` is the piece that does that inside a Qt app: it
owns the 1 Hz ``QTimer``, reads the clock, forwards user actions, and
re-publishes a fresh ``Snapshot`` as a signal after each one.

Signals
-------
snapshot_changed(snapshot: Snapshot)
    Emitted after every tick and every forwarded action.
persistence_failed(message: str)
    Emitted when the activity log could not be written.
"""

from __future__ import annotations

import time
from typing import Callable

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

from .engine import TimerEngine, Snapshot


class TimerDriver(QObject):
    """Drives a ``TimerEngine`` from the Qt event loop."""

    snapshot_changed = pyqtSignal(object)
    persistence_failed = pyqtSignal(str)

    def __init__(
        self,
        engine: TimerEngine,
        parent: QObject | None = None,
        *,
        clock: Callable[[], float] = time.time,
        interval_ms: int = 1000,
    ) -> None:
        super().__init__(parent)
        self._engine = engine
        self._clock = clock

        self._qt_timer = QTimer(self)
        self._qt_timer.setInterval(interval_ms)
        self._qt_timer.timeout.connect(self._on_tick)

    # ── properties ────────────────────────────────────────────────────

    @property
    def engine(self) -> TimerEngine:
        return self._engine

    @property
    def is_ticking(self) -> bool:
        return self._qt_timer.isActive()

    def snapshot(self) -> Snapshot:
        return self._engine.snapshot(self._clock())

    # ── ticker ────────────────────────────────────────────────────────

    def start(self) -> None:
        self._qt_timer.start()
        self.refresh()

    def stop(self) -> None:
        self._qt_timer.stop()

    def refresh(self) -> None:
        """Re-emit the current snapshot (e.g. after a view rebuild)."""
        self._publish()

    # ── forwarded controls ────────────────────────────────────────────

    def set_enabled(self, on: bool) -> None:
        self._engine.set_enabled(on, self._clock())
        self._publish()

    def confirm_stood_up(self) -> None:
        self._engine.confirm_stood_up(self._clock())
        self._publish()

    def cancel(self) -> None:
        self._engine.cancel(self._clock())
        self._publish()

    def configure_auto_restart(self, threshold: float | None) -> None:
        self._engine.configure_auto_restart(threshold)
        self._publish()

    def clear_log(self) -> None:
        self._engine.clear_log()
        self._publish()

    def retry_persist(self) -> bool:
        ok = self._engine.retry_persist()
        self._publish()
        return ok

    # ── internals ─────────────────────────────────────────────────────

    def _on_tick(self) -> None:
        self._engine.tick(self._clock())
        self._publish()

    def _publish(self) -> None:
        snap = self._engine.snapshot()
        self.snapshot_changed.emit(snap)
        if snap.persistence_warning is not None:
            self.persistence_failed.emit(snap.persistence_warning)
