"""Main timer card.

Layout (left → right):
    - ProgressRing (gauge + MM:SS)
    - Column: "Time to get up!" banner, then the control row
      ("I stood up" / "Cancel" stacked, ON/OFF toggle)
"""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout,
    QLabel, QPushButton, QFrame, QSizePolicy,
)

from ..timer.driver import TimerDriver
from ..timer.engine import Snapshot
from .progress_ring import ProgressRing

BANNER_TEXT = "Time to get up!"


class TimerWidget(QWidget):
    """Gauge plus controls.  Renders whatever snapshot the driver emits."""

    def __init__(self, driver: TimerDriver, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._driver = driver
        self._build_ui()
        self._connect_signals()
        self.apply_snapshot(driver.engine.snapshot())

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)
        root.setSpacing(0)

        card = QFrame(self)
        card.setObjectName("card")
        root.addWidget(card)

        layout = QHBoxLayout(card)
        layout.setContentsMargins(24, 16, 24, 16)
        layout.setSpacing(28)

        # ── gauge ────────────────────────────────────────────────────
        self._ring = ProgressRing(card)
        self._ring.setSizePolicy(
            QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed,
        )
        self._ring.setFixedSize(140, 140)
        layout.addWidget(self._ring)

        column = QVBoxLayout()
        column.setSpacing(16)
        column.setAlignment(Qt.AlignmentFlag.AlignCenter)

        # ── banner (fixed height so the layout doesn't jump) ─────────
        self._banner = QLabel("", card)
        self._banner.setObjectName("banner")
        self._banner.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._banner.setFixedHeight(30)
        column.addWidget(self._banner)

        # ── controls ─────────────────────────────────────────────────
        controls = QHBoxLayout()
        controls.setSpacing(12)

        stacked = QVBoxLayout()
        stacked.setSpacing(12)
        self._stood_up_btn = QPushButton("I stood up", card)
        self._stood_up_btn.setObjectName("primaryButton")
        self._cancel_btn = QPushButton("Cancel", card)
        self._cancel_btn.setObjectName("dangerButton")
        stacked.addWidget(self._stood_up_btn)
        stacked.addWidget(self._cancel_btn)
        controls.addLayout(stacked)

        controls.addStretch()

        self._toggle_btn = QPushButton("OFF", card)
        self._toggle_btn.setObjectName("toggleButton")
        self._toggle_btn.setCheckable(True)
        self._toggle_btn.setFixedWidth(100)
        controls.addWidget(self._toggle_btn)

        column.addLayout(controls)
        layout.addLayout(column)
        layout.addStretch()

    # ── signals ───────────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        self._toggle_btn.clicked.connect(self._driver.set_enabled)
        self._stood_up_btn.clicked.connect(self._driver.confirm_stood_up)
        self._cancel_btn.clicked.connect(self._driver.cancel)
        self._driver.snapshot_changed.connect(self.apply_snapshot)

    # ── rendering ─────────────────────────────────────────────────────────

    def apply_snapshot(self, snap: Snapshot) -> None:
        self._ring.apply_snapshot(snap)
        self._banner.setText(BANNER_TEXT if snap.show_pre_alert_banner else "")

        # Keep the toggle in sync without re-triggering clicked
        self._toggle_btn.blockSignals(True)
        self._toggle_btn.setChecked(snap.enabled)
        self._toggle_btn.blockSignals(False)
        self._toggle_btn.setText("ON" if snap.enabled else "OFF")

        self._stood_up_btn.setEnabled(snap.enabled)
