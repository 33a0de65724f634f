"""Timer package."""

from .activity_log import ActivityLog, KeyValueStore, LOG_KEY
from .engine import (
    TimerEngine,
    TimerState,
    Phase,
    Snapshot,
    format_clock,
    DEFAULT_TOTAL,
    DEFAULT_PRE_ALERT_WINDOW,
)
from .errors import (
    InvalidConfiguration,
    PersistenceReadFailure,
    PersistenceWriteFailure,
)

__all__ = [
    "ActivityLog",
    "KeyValueStore",
    "LOG_KEY",
    "TimerEngine",
    "TimerState",
    "Phase",
    "Snapshot",
    "format_clock",
    "DEFAULT_TOTAL",
    "DEFAULT_PRE_ALERT_WINDOW",
    "InvalidConfiguration",
    "PersistenceReadFailure",
    "PersistenceWriteFailure",
]
