"""UI package."""

from .timer_widget import TimerWidget
from .log_widget import ActivityLogWidget
from .progress_ring import ProgressRing

__all__ = [
    "TimerWidget",
    "ActivityLogWidget",
    "ProgressRing",
]
