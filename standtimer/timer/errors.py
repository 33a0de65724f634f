"""Exceptions raised (or reported) by the timer engine and activity log."""

from __future__ import annotations


class InvalidConfiguration(ValueError):
    """Bad constructor / reconfiguration arguments.  Fatal: no engine
    is produced."""


class PersistenceReadFailure(RuntimeError):
    """The store could not be read.  Recovered locally: the log starts
    empty."""


class PersistenceWriteFailure(RuntimeError):
    """The store rejected a write.

    Never raised out of the engine.  The in-memory log keeps the change
    and the failure is handed back to the caller, who may retry with
    ``TimerEngine.retry_persist()``.
    """

    def __init__(self, key: str, cause: BaseException) -> None:
        super().__init__(f"could not persist {key!r}: {cause}")
        self.key = key
        self.cause = cause
