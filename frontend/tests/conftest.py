"""Shared fixtures for frontend helper tests."""
import pytest


class FakeTimer:
    """threading.Timer look-alike driven by VirtualScheduler instead of a thread."""

    def __init__(self, scheduler, interval, function, args=()):
        self.scheduler = scheduler
        self.interval = interval
        self.function = function
        self.args = args
        self.due = None
        self.daemon = False
        self.cancelled = False
        self.fired_at = None

    def start(self):
        self.due = self.scheduler.now + self.interval

    def cancel(self):
        self.cancelled = True


class VirtualScheduler:
    """Timer factory with a manual clock; `advance()` fires timers that come due."""

    def __init__(self):
        self.now = 0.0
        self.timers = []

    def __call__(self, interval, function, args=()):
        timer = FakeTimer(self, interval, function, args)
        self.timers.append(timer)
        return timer

    def advance(self, seconds):
        target = self.now + seconds
        while True:
            due = [t for t in self.timers
                   if t.due is not None and not t.cancelled and t.fired_at is None and t.due <= target]
            if not due:
                break
            timer = min(due, key=lambda t: t.due)
            self.now = timer.due
            timer.fired_at = self.now
            timer.function(*timer.args)
        self.now = target

    @property
    def fired(self):
        return [t for t in self.timers if t.fired_at is not None]


@pytest.fixture
def scheduler():
    return VirtualScheduler()


@pytest.fixture
def sample_forecast():
    return [
        {"date": "2026-10-19", "max_temp": 20.0, "min_temp": 11.0},
        {"date": "2026-10-20", "max_temp": 22.5, "min_temp": 12.0},
        {"date": "2026-10-21", "max_temp": 25.0, "min_temp": 13.5},
    ]
