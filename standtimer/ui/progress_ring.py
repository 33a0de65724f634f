"""Circular gauge widget rendered with QPainter.

- Fills clockwise from 12 o'clock as the countdown runs down.
- Green throughout; in the pre-alert window the tail of the arc and
  the centre label turn red.
- Stays full while counting up in overtime.
"""

from __future__ import annotations

from PyQt6.QtCore import Qt, QRectF
from PyQt6.QtGui import QPainter, QPen, QColor, QConicalGradient, QFont
from PyQt6.QtWidgets import QWidget

from ..timer.engine import Snapshot
from .styles import GAUGE_OK, GAUGE_ALERT, GAUGE_TRACK, GAUGE_PAUSED

# Fraction of the arc that stays green while in pre-alert
_ALERT_GREEN_SPAN = 0.83


class ProgressRing(QWidget):
    """Custom-painted circular timer gauge."""

    RING_DIAMETER = 120
    RING_THICKNESS = 10

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setMinimumSize(self.RING_DIAMETER + 20, self.RING_DIAMETER + 20)

        self._progress: float = 0.0
        self._label: str = "00:00"
        self._pre_alert: bool = False
        self._counting_up: bool = False
        self._enabled: bool = False

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC API
    # ══════════════════════════════════════════════════════════════════

    @property
    def progress(self) -> float:
        return self._progress

    @property
    def label(self) -> str:
        return self._label

    @property
    def is_pre_alert(self) -> bool:
        return self._pre_alert

    @property
    def is_counting_up(self) -> bool:
        return self._counting_up

    def apply_snapshot(self, snap: Snapshot) -> None:
        self._progress = 1.0 if snap.is_overtime else max(0.0, min(1.0, snap.progress))
        self._label = snap.displayed_label
        self._pre_alert = snap.pre_alert_active
        self._counting_up = snap.is_overtime
        self._enabled = snap.enabled
        self.update()

    # ══════════════════════════════════════════════════════════════════
    #  PAINTING
    # ══════════════════════════════════════════════════════════════════

    def paintEvent(self, event) -> None:  # type: ignore[override]
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        w = self.width()
        h = self.height()
        cx, cy = w / 2, h / 2
        thickness = self.RING_THICKNESS
        diameter = max(40, min(w, h) - thickness * 2)
        radius = diameter / 2
        ring_rect = QRectF(cx - radius, cy - radius, diameter, diameter)

        # ── background track ─────────────────────────────────────────
        track_color = QColor(GAUGE_TRACK)
        track_color.setAlpha(50)
        painter.setPen(QPen(track_color, thickness, Qt.PenStyle.SolidLine))
        painter.drawEllipse(ring_rect)

        # ── progress arc ─────────────────────────────────────────────
        if self._progress > 0.001:
            ok = QColor(GAUGE_OK)
            alert = QColor(GAUGE_ALERT)
            # Qt conical gradients run counter-clockwise; the arc is
            # drawn clockwise, so position t along the arc is 1 - t.
            gradient = QConicalGradient(cx, cy, 90)
            if self._pre_alert:
                gradient.setColorAt(0.0, alert)
                gradient.setColorAt(1.0 - _ALERT_GREEN_SPAN, ok)
                gradient.setColorAt(1.0, ok)
            else:
                gradient.setColorAt(0.0, ok)
                gradient.setColorAt(1.0, ok)

            arc_pen = QPen(gradient, thickness, Qt.PenStyle.SolidLine)
            arc_pen.setCapStyle(Qt.PenCapStyle.FlatCap)
            painter.setPen(arc_pen)

            # Qt arcs: start at 12 o'clock (90*16), go clockwise (negative)
            painter.drawArc(ring_rect, 90 * 16, -int(self._progress * 360 * 16))

        # ── centre label ─────────────────────────────────────────────
        font = QFont()
        font.setPixelSize(max(12, int(diameter * 0.15)))
        painter.setFont(font)
        if not self._enabled and not self._counting_up:
            painter.setPen(QColor(GAUGE_PAUSED))
        else:
            painter.setPen(QColor(GAUGE_ALERT if self._pre_alert else GAUGE_OK))
        painter.drawText(ring_rect, Qt.AlignmentFlag.AlignCenter, self._label)

        painter.end()
