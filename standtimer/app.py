"""Main application window for StandTimer."""

from __future__ import annotations

import logging
import time
from typing import Callable

from PyQt6.QtGui import QAction, QActionGroup, QKeySequence
from PyQt6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QStatusBar, QMessageBox,
)

from .settings import (
    Settings, load_settings, save_settings,
    VIEW_TIMER_AND_LOGS, VIEW_COMPACT,
)
from .timer.activity_log import KeyValueStore
from .timer.driver import TimerDriver
from .timer.engine import TimerEngine
from .timer.errors import InvalidConfiguration
from .ui.log_widget import ActivityLogWidget
from .ui.styles import build_stylesheet
from .ui.timer_widget import TimerWidget

logger = logging.getLogger(__name__)


def build_engine(settings: Settings, store: KeyValueStore | None) -> TimerEngine:
    """Engine from saved settings; bad saved values fall back to defaults."""
    try:
        return TimerEngine(
            settings.total_seconds,
            settings.pre_alert_seconds,
            settings.auto_restart_seconds,
            store=store,
        )
    except InvalidConfiguration as exc:
        logger.warning("Saved timer settings rejected (%s); using defaults", exc)
        defaults = Settings()
        settings.total_seconds = defaults.total_seconds
        settings.pre_alert_seconds = defaults.pre_alert_seconds
        settings.auto_restart_seconds = defaults.auto_restart_seconds
        return TimerEngine(
            defaults.total_seconds,
            defaults.pre_alert_seconds,
            defaults.auto_restart_seconds,
            store=store,
        )


class StandTimerApp(QMainWindow):
    """Main application window."""

    def __init__(
        self,
        settings: Settings | None = None,
        store: KeyValueStore | None = None,
        *,
        clock: Callable[[], float] = time.time,
        persist_settings: bool = True,
    ) -> None:
        super().__init__()
        self.setWindowTitle("StandTimer")

        # ── settings ──────────────────────────────────────────────────
        self._settings: Settings = settings if settings is not None else load_settings()
        self._persist_settings = persist_settings

        # ── engine + Qt host ──────────────────────────────────────────
        self._engine = build_engine(self._settings, store)
        self._driver = TimerDriver(self._engine, self, clock=clock)

        self.setStyleSheet(build_stylesheet())

        # ── central widget ────────────────────────────────────────────
        central = QWidget()
        self.setCentralWidget(central)
        root_layout = QVBoxLayout(central)
        root_layout.setContentsMargins(24, 24, 24, 24)
        root_layout.setSpacing(16)

        self._timer_widget = TimerWidget(self._driver, central)
        root_layout.addWidget(self._timer_widget)

        self._log_widget = ActivityLogWidget(self._driver, central)
        self._log_widget.auto_restart_changed.connect(self._on_auto_restart_changed)
        root_layout.addWidget(self._log_widget)

        # Status bar
        self._status_bar = QStatusBar(self)
        self.setStatusBar(self._status_bar)

        # ── native menu bar ───────────────────────────────────────────
        self._build_menu_bar()

        # ── wire signals ──────────────────────────────────────────────
        self._driver.persistence_failed.connect(self._on_persistence_failed)

        self._apply_view_mode(self._settings.view_mode)
        self._driver.start()

    # ══════════════════════════════════════════════════════════════════
    #  PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def engine(self) -> TimerEngine:
        return self._engine

    @property
    def driver(self) -> TimerDriver:
        return self._driver

    @property
    def view_mode(self) -> str:
        return self._settings.view_mode

    # ══════════════════════════════════════════════════════════════════
    #  MENU BAR
    # ══════════════════════════════════════════════════════════════════

    def _build_menu_bar(self) -> None:
        menu_bar = self.menuBar()

        # ── StandTimer menu (About, Quit with macOS roles) ──────────────
        about_action = QAction("About StandTimer", self)
        about_action.setMenuRole(QAction.MenuRole.AboutRole)
        about_action.triggered.connect(self._show_about)

        quit_action = QAction("Quit StandTimer", self)
        quit_action.setMenuRole(QAction.MenuRole.QuitRole)
        quit_action.setShortcut(QKeySequence("Ctrl+Q"))
        quit_action.triggered.connect(self.close)

        app_menu = menu_bar.addMenu("StandTimer")
        app_menu.addAction(about_action)
        app_menu.addAction(quit_action)

        # ── View menu: layout radio group ────────────────────────────
        view_menu = menu_bar.addMenu("View")
        group = QActionGroup(self)
        group.setExclusive(True)

        self._full_action = QAction("Timer && Logs", self)
        self._full_action.setShortcut(QKeySequence("Ctrl+1"))
        self._compact_action = QAction("Compact Timer", self)
        self._compact_action.setShortcut(QKeySequence("Ctrl+2"))

        for action, mode in (
            (self._full_action, VIEW_TIMER_AND_LOGS),
            (self._compact_action, VIEW_COMPACT),
        ):
            action.setCheckable(True)
            action.triggered.connect(lambda _checked, m=mode: self.set_view_mode(m))
            group.addAction(action)
            view_menu.addAction(action)

    def _show_about(self) -> None:
        QMessageBox.about(
            self,
            "About StandTimer",
            "<h3>StandTimer</h3>"
            "<p>A reminder to stand up and move, with a log of every "
            "time you did.</p>",
        )

    # ══════════════════════════════════════════════════════════════════
    #  VIEW MODE
    # ══════════════════════════════════════════════════════════════════

    def set_view_mode(self, mode: str) -> None:
        if mode not in (VIEW_TIMER_AND_LOGS, VIEW_COMPACT):
            raise ValueError(f"unknown view mode {mode!r}")
        changed = mode != self._settings.view_mode
        self._apply_view_mode(mode)
        if changed:
            self._save_settings()
        self.show()
        self.raise_()
        self.activateWindow()

    def _apply_view_mode(self, mode: str) -> None:
        if mode not in (VIEW_TIMER_AND_LOGS, VIEW_COMPACT):
            mode = VIEW_TIMER_AND_LOGS
        self._settings.view_mode = mode
        compact = mode == VIEW_COMPACT
        self._log_widget.setVisible(not compact)
        self._full_action.setChecked(not compact)
        self._compact_action.setChecked(compact)
        self.adjustSize()

    # ══════════════════════════════════════════════════════════════════
    #  SLOTS
    # ══════════════════════════════════════════════════════════════════

    def _on_auto_restart_changed(self, seconds: int | None) -> None:
        self._settings.auto_restart_seconds = seconds
        self._save_settings()

    def _on_persistence_failed(self, message: str) -> None:
        self._status_bar.showMessage(f"Log not saved: {message}")

    def _save_settings(self) -> None:
        if self._persist_settings:
            save_settings(self._settings)

    def closeEvent(self, event) -> None:  # type: ignore[override]
        self._driver.stop()
        super().closeEvent(event)
