"""Host clocks feeding timestamps into the animation driver."""

from datetime import datetime, timedelta
from typing import Protocol


class Clock(Protocol):
    def now(self) -> datetime: ...


class SystemClock:
    """Local wall-clock time."""

    def now(self) -> datetime:
        return datetime.now()


class FixedClock:
    """Always returns the same moment."""

    def __init__(self, moment: datetime):
        self.moment = moment

    def now(self) -> datetime:
        return self.moment


class SteppedClock:
    """Deterministic clock that advances by ``step`` after every read."""

    def __init__(self, start: datetime, step: timedelta):
        self.current = start
        self.step = step

    def now(self) -> datetime:
        moment = self.current
        self.current = moment + self.step
        return moment
