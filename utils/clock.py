# utils/clock.py
from abc import ABC, abstractmethod
from datetime import date


class Clock(ABC):
    # Supplies "today" to the register, so tests can pin the date.

    @abstractmethod
    def today(self) -> date:
        pass


class SystemClock(Clock):
    def today(self) -> date:
        return date.today()


class FixedClock(Clock):
    """
    Always returns the same day.
    Handy in tests and when replaying a day of sales.
    """

    def __init__(self, day: date):
        self.day = day

    def today(self) -> date:
        return self.day
