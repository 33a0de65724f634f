"""Shared test helpers for StandTimer."""

from standtimer.timer.engine import TimerEngine


class SignalCollector:
    """Utility to capture pyqtSignal emissions into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def clear(self):
        self.items.clear()


class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> float:
        self.now += seconds
        return self.now


class FlakyStore:
    """Key-value store whose reads/writes can be made to fail."""

    def __init__(self, data=None):
        self.data = dict(data or {})
        self.fail_reads = False
        self.fail_writes = False
        self.writes = 0

    def get(self, key):
        if self.fail_reads:
            raise OSError("disk unreadable")
        return self.data.get(key)

    def set(self, key, value):
        if self.fail_writes:
            raise OSError("disk full")
        self.writes += 1
        self.data[key] = list(value)


def run_to_overtime(engine: TimerEngine, start: float = 0.0) -> float:
    """Enable at *start* and tick straight to expiry.  Returns that instant."""
    engine.set_enabled(True, start)
    expiry = start + engine.total
    engine.tick(expiry)
    return expiry
