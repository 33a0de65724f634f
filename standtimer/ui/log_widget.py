"""Activity log panel: every "I stood up", most recent first.

Bottom bar holds the auto-restart picker and "Clear Log", which asks
for confirmation before wiping the log.
"""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton,
    QListWidget, QComboBox, QMessageBox, QFrame,
)

from ..settings import AUTO_RESTART_PRESETS
from ..timer.driver import TimerDriver
from ..timer.engine import Snapshot, format_clock


class ActivityLogWidget(QWidget):
    """Logged stand-ups plus the auto-restart / clear-log bar."""

    auto_restart_changed = pyqtSignal(object)  # seconds or None

    def __init__(self, driver: TimerDriver, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._driver = driver
        self._shown_count: int | None = None
        self._build_ui()
        self._select_threshold(driver.engine.auto_restart_threshold)
        self._connect_signals()
        self.apply_snapshot(driver.engine.snapshot())

    # ── build ─────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)
        root.setSpacing(12)

        card = QFrame(self)
        card.setObjectName("card")
        card_layout = QVBoxLayout(card)
        card_layout.setContentsMargins(8, 8, 8, 8)
        card_layout.setSpacing(6)

        header = QLabel("Time", card)
        header.setStyleSheet("font-weight: 600; background: transparent;")
        card_layout.addWidget(header)

        self._list = QListWidget(card)
        self._list.setMinimumHeight(180)
        card_layout.addWidget(self._list)

        self._empty_label = QLabel("Nothing logged yet.", card)
        self._empty_label.setStyleSheet("background: transparent;")
        card_layout.addWidget(self._empty_label)
        root.addWidget(card)

        # ── bottom bar ───────────────────────────────────────────────
        bar = QHBoxLayout()
        bar.setSpacing(8)

        bar.addWidget(QLabel("Auto-Restart", self))
        self._auto_restart = QComboBox(self)
        for label, seconds in AUTO_RESTART_PRESETS:
            self._auto_restart.addItem(label, seconds)
        bar.addWidget(self._auto_restart)

        bar.addStretch()

        self._clear_btn = QPushButton("Clear Log", self)
        bar.addWidget(self._clear_btn)
        root.addLayout(bar)

    def _connect_signals(self) -> None:
        self._auto_restart.currentIndexChanged.connect(self._on_auto_restart_changed)
        self._clear_btn.clicked.connect(self._on_clear_clicked)
        self._driver.snapshot_changed.connect(self.apply_snapshot)

    # ── slots ─────────────────────────────────────────────────────────

    def _on_auto_restart_changed(self, index: int) -> None:
        seconds = self._auto_restart.itemData(index)
        self._driver.configure_auto_restart(seconds)
        self.auto_restart_changed.emit(seconds)

    def _on_clear_clicked(self) -> None:
        if self.confirm_clear():
            self._driver.clear_log()

    def confirm_clear(self) -> bool:
        """Ask before wiping the log.  Split out so tests can patch it."""
        answer = QMessageBox.question(
            self,
            "Clear all log entries?",
            "This action cannot be undone.",
            QMessageBox.StandardButton.Cancel | QMessageBox.StandardButton.Yes,
            QMessageBox.StandardButton.Cancel,
        )
        return answer == QMessageBox.StandardButton.Yes

    # ── rendering ─────────────────────────────────────────────────────

    def apply_snapshot(self, snap: Snapshot) -> None:
        count = snap.log_count
        # Ticks don't touch the log; only rebuild when it changed
        if count != self._shown_count:
            self.refresh()
        self._clear_btn.setText(f"Clear Log ({count})" if count else "Clear Log")
        self._clear_btn.setEnabled(count > 0)

    def refresh(self) -> None:
        """Rebuild the list from the engine's activity log."""
        self._list.clear()
        for when in self._driver.engine.log.datetimes():
            self._list.addItem(f"{when:%H:%M}    Logged: Yes")
        self._shown_count = self._list.count()
        self._empty_label.setVisible(self._shown_count == 0)

    def selected_threshold(self) -> float | None:
        return self._auto_restart.currentData()

    def _select_threshold(self, seconds: float | None) -> None:
        for index in range(self._auto_restart.count()):
            if self._auto_restart.itemData(index) == seconds:
                self._auto_restart.setCurrentIndex(index)
                return
        # Custom value from settings: list it so the picker stays truthful
        self._auto_restart.addItem(format_clock(seconds), seconds)
        self._auto_restart.setCurrentIndex(self._auto_restart.count() - 1)
