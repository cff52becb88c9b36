from datetime import date, datetime
from typing import Protocol


class Clock(Protocol):
    """Source of the current moment for roster checks and audit timestamps."""

    def now(self) -> datetime: ...

    def today(self) -> date: ...


class SystemClock:
    """Wall-clock time of the local machine."""

    def now(self) -> datetime:
        return datetime.now()

    def today(self) -> date:
        return date.today()


class FixedClock:
    """A clock that only moves when told to. Used to pin roster checks in tests."""

    def __init__(self, moment: datetime):
        self._moment = moment

    def now(self) -> datetime:
        return self._moment

    def today(self) -> date:
        return self._moment.date()

    def set(self, moment: datetime) -> None:
        self._moment = moment

    def at(self, hour: int, minute: int = 0) -> "FixedClock":
        """Move to another time of day on the current date."""
        self._moment = self._moment.replace(hour=hour, minute=minute, second=0, microsecond=0)
        return self
