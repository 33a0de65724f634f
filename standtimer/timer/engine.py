"""Timer state machine for StandTimer.

States
------
PAUSED_COUNTDOWN    Clock stopped, ``remaining`` frozen.  Initial state.
RUNNING_COUNTDOWN   Counting down towards the deadline.
PAUSED_OVERTIME     Clock stopped past zero, ``elapsed_overtime`` frozen.
RUNNING_OVERTIME    Counting up since the countdown expired.

Transitions
-----------
PAUSED_*  → RUNNING_*          (set_enabled(True))
RUNNING_* → PAUSED_*           (set_enabled(False))
RUNNING_COUNTDOWN → RUNNING_OVERTIME   (tick reaches zero)
RUNNING_OVERTIME  → RUNNING_COUNTDOWN  (auto-restart threshold reached)
Any → *_COUNTDOWN with a full clock    (confirm_stood_up)
Any → PAUSED_COUNTDOWN                 (cancel)

Timing model
------------
Nothing is accumulated per tick.  While running the engine holds one
wall-clock anchor (the countdown *deadline*, or the *overtime start*)
and every read derives from ``deadline - now`` / ``now - start``.  A
missed tick (slow loop, laptop asleep) is corrected by the next one.
While paused the anchor is dropped and the frozen value is the truth.

The engine never reads the clock: every call takes ``now`` (epoch
seconds) from the host.
"""

from __future__ import annotations

import logging
import numbers
from dataclasses import dataclass
from enum import Enum

from .activity_log import ActivityLog, KeyValueStore
from .errors import InvalidConfiguration, PersistenceWriteFailure

logger = logging.getLogger(__name__)


# ── enums ─────────────────────────────────────────────────────────────────


class Phase(Enum):
    COUNTDOWN = "countdown"
    OVERTIME = "overtime"


class TimerState(Enum):
    PAUSED_COUNTDOWN = "paused_countdown"
    RUNNING_COUNTDOWN = "running_countdown"
    PAUSED_OVERTIME = "paused_overtime"
    RUNNING_OVERTIME = "running_overtime"


# ── constants ─────────────────────────────────────────────────────────────

DEFAULT_TOTAL = 60 * 60             # one hour of sitting
DEFAULT_PRE_ALERT_WINDOW = 10 * 60  # last ten minutes

_STATES: dict[tuple[bool, Phase], TimerState] = {
    (False, Phase.COUNTDOWN): TimerState.PAUSED_COUNTDOWN,
    (True, Phase.COUNTDOWN): TimerState.RUNNING_COUNTDOWN,
    (False, Phase.OVERTIME): TimerState.PAUSED_OVERTIME,
    (True, Phase.OVERTIME): TimerState.RUNNING_OVERTIME,
}


# ── helpers ───────────────────────────────────────────────────────────────


def format_clock(seconds: float) -> str:
    """``MM:SS`` with whole seconds truncated (minutes may exceed 59)."""
    whole = int(max(0.0, seconds))
    minutes, secs = divmod(whole, 60)
    return f"{minutes:02d}:{secs:02d}"


def _seconds(value: object, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidConfiguration(f"{name} must be a number of seconds, got {value!r}")
    return float(value)


def _threshold(value: object) -> float | None:
    if value is None:
        return None
    threshold = _seconds(value, "auto_restart_threshold")
    if threshold <= 0:
        raise InvalidConfiguration(
            f"auto_restart_threshold must be > 0 or None, got {value!r}"
        )
    return threshold


# ── snapshot ──────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Snapshot:
    """Read-only view handed to the renderer after every engine call."""

    progress: float
    displayed_label: str
    pre_alert_active: bool
    is_overtime: bool
    enabled: bool
    state: TimerState
    remaining: float
    elapsed_overtime: float
    log_count: int
    persistence_warning: str | None = None

    @property
    def show_pre_alert_banner(self) -> bool:
        return self.pre_alert_active


# ── engine ────────────────────────────────────────────────────────────────


class TimerEngine:
    """Countdown → overtime → (auto-)restart state machine with an
    activity log.

    Single writer: drive it from one thread / event loop.  There is no
    internal locking.
    """

    def __init__(
        self,
        total: float = DEFAULT_TOTAL,
        pre_alert_window: float = DEFAULT_PRE_ALERT_WINDOW,
        auto_restart_threshold: float | None = None,
        *,
        store: KeyValueStore | None = None,
    ) -> None:
        # ── configuration ─────────────────────────────────────────────
        total = _seconds(total, "total")
        if total <= 0:
            raise InvalidConfiguration(f"total must be > 0, got {total!r}")
        window = _seconds(pre_alert_window, "pre_alert_window")
        if not 0 <= window <= total:
            raise InvalidConfiguration(
                f"pre_alert_window must be within [0, {total:g}], got {window!r}"
            )
        self._total: float = total
        self._pre_alert_window: float = window
        self._auto_restart_threshold: float | None = _threshold(auto_restart_threshold)

        # ── timing state ──────────────────────────────────────────────
        self._enabled: bool = False
        self._phase: Phase = Phase.COUNTDOWN
        self._remaining: float = total
        self._elapsed_overtime: float = 0.0
        self._anchor: float | None = None  # deadline / overtime start
        self._pre_alert_active: bool = False
        self._auto_restart_armed: bool = False

        # ── activity log ──────────────────────────────────────────────
        self._log = ActivityLog(store)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def total(self) -> float:
        return self._total

    @property
    def pre_alert_window(self) -> float:
        return self._pre_alert_window

    @property
    def auto_restart_threshold(self) -> float | None:
        return self._auto_restart_threshold

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def state(self) -> TimerState:
        return _STATES[(self._enabled, self._phase)]

    @property
    def remaining(self) -> float:
        """Seconds left as of the last call (``0`` once in overtime)."""
        return self._remaining

    @property
    def elapsed_overtime(self) -> float:
        """Seconds past zero as of the last call."""
        return self._elapsed_overtime

    @property
    def pre_alert_active(self) -> bool:
        return self._pre_alert_active

    @property
    def auto_restart_armed(self) -> bool:
        return self._auto_restart_armed

    @property
    def log(self) -> ActivityLog:
        return self._log

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def set_enabled(self, on: bool, now: float) -> None:
        """The ON/OFF switch.  Pausing never counts towards the clock."""
        if on == self._enabled:
            return

        if on:
            if self._phase is Phase.COUNTDOWN:
                self._anchor = now + self._remaining
                self._pre_alert_active = self._remaining <= self._pre_alert_window
            else:
                self._anchor = now - self._elapsed_overtime
                self._pre_alert_active = True
            self._enabled = True
        else:
            if self._phase is Phase.COUNTDOWN:
                self._remaining = self._clamp_remaining(self._anchor - now)
            else:
                self._elapsed_overtime = max(0.0, now - self._anchor)
            self._anchor = None
            self._enabled = False

        logger.debug("Timer %s at %.3f (%s)", "on" if on else "off", now, self.state.value)

    def tick(self, now: float) -> None:
        """Re-derive the clock from ``now``.  Safe at any cadence."""
        if not self._enabled:
            return

        if self._phase is Phase.COUNTDOWN:
            self._remaining = self._clamp_remaining(self._anchor - now)
            self._pre_alert_active = self._remaining <= self._pre_alert_window
            if self._remaining == 0:
                self._enter_overtime(now)
            return

        self._elapsed_overtime = max(0.0, now - self._anchor)
        self._pre_alert_active = True
        threshold = self._auto_restart_threshold
        if (
            threshold is not None
            and self._auto_restart_armed
            and self._elapsed_overtime >= threshold
        ):
            logger.info(
                "Auto-restart after %.0fs of overtime", self._elapsed_overtime,
            )
            self.confirm_stood_up(now)
            self._auto_restart_armed = False

    def confirm_stood_up(self, now: float) -> PersistenceWriteFailure | None:
        """Log a stand-up and start a fresh cycle.

        The one place a completed cycle is recorded; the manual button and
        auto-restart both come through here.  Returns the persistence
        failure, if the store refused the write; timing state is reset
        either way.
        """
        failure = self._log.append(now)

        self._phase = Phase.COUNTDOWN
        self._remaining = self._total
        self._elapsed_overtime = 0.0
        self._pre_alert_active = False
        self._auto_restart_armed = False
        self._anchor = now + self._total if self._enabled else None

        logger.info("Stood up at %.3f (%d logged)", now, len(self._log))
        return failure

    def cancel(self, now: float | None = None) -> None:
        """Switch off and put a full clock back.  The log is kept."""
        self._enabled = False
        self._phase = Phase.COUNTDOWN
        self._remaining = self._total
        self._elapsed_overtime = 0.0
        self._pre_alert_active = False
        self._auto_restart_armed = False
        self._anchor = None
        if now is None:
            logger.debug("Timer cancelled")
        else:
            logger.debug("Timer cancelled at %.3f", now)

    def configure_auto_restart(self, threshold: float | None) -> None:
        """Set (seconds > 0) or clear (``None``) the auto-restart threshold.

        Takes effect on the next tick.  An armed overtime episode that is
        already past the new threshold fires on that tick.
        """
        self._auto_restart_threshold = _threshold(threshold)
        logger.debug("Auto-restart threshold: %s", self._auto_restart_threshold)

    def clear_log(self) -> PersistenceWriteFailure | None:
        return self._log.clear()

    def retry_persist(self) -> bool:
        """Write the in-memory log to the store again after a failure."""
        return self._log.flush()

    # ══════════════════════════════════════════════════════════════════
    #  SNAPSHOT
    # ══════════════════════════════════════════════════════════════════

    def snapshot(self, now: float | None = None) -> Snapshot:
        """Renderer view.  With ``now`` the live values are derived for
        that instant without changing any state."""
        remaining = self._remaining
        elapsed = self._elapsed_overtime
        pre_alert = self._pre_alert_active

        if now is not None and self._enabled:
            if self._phase is Phase.COUNTDOWN:
                remaining = self._clamp_remaining(self._anchor - now)
                pre_alert = remaining <= self._pre_alert_window
            else:
                elapsed = max(0.0, now - self._anchor)

        overtime = self._phase is Phase.OVERTIME
        if overtime:
            progress = 1.0
            label = format_clock(elapsed)
        else:
            progress = min(1.0, max(0.0, 1.0 - remaining / self._total))
            label = format_clock(remaining)

        failure = self._log.write_failure
        return Snapshot(
            progress=progress,
            displayed_label=label,
            pre_alert_active=pre_alert,
            is_overtime=overtime,
            enabled=self._enabled,
            state=self.state,
            remaining=remaining,
            elapsed_overtime=elapsed,
            log_count=len(self._log),
            persistence_warning=str(failure) if failure is not None else None,
        )

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL
    # ══════════════════════════════════════════════════════════════════

    def _clamp_remaining(self, value: float) -> float:
        return min(self._total, max(0.0, value))

    def _enter_overtime(self, now: float) -> None:
        self._phase = Phase.OVERTIME
        self._anchor = now
        self._remaining = 0.0
        self._elapsed_overtime = 0.0
        self._pre_alert_active = True
        self._auto_restart_armed = True
        logger.debug("Countdown expired at %.3f, counting up", now)
