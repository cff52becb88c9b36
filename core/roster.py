from dataclasses import dataclass, field
from datetime import date, time
from enum import Enum, IntEnum
from typing import Dict, Optional, Union
from utils.constants import SHIFTS, DOCTOR_DEFAULT_START, DOCTOR_WORK_HOURS
from utils.shift_utils import parse_time, add_hours, within_window

"""
Roster model: when each staff variant is on duty.

Nurses hold a weekly map of weekday -> shift, doctors a single daily window,
managers are always on duty (handled by the staff dispatch, no roster data).
"""


class Weekday(IntEnum):
    """Day of week, numbered like `date.weekday()` (Monday is 0)."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @classmethod
    def of(cls, value: Union["Weekday", date, int, str]) -> "Weekday":
        """Normalise a date, an index (0-6) or a name ('Mon', 'monday') to a Weekday."""
        if isinstance(value, cls):
            return value
        if isinstance(value, date):
            return cls(value.weekday())
        if isinstance(value, int):
            return cls(value)
        if isinstance(value, str):
            key = value.strip().upper()
            for day in cls:
                if day.name == key or day.name[:3] == key:
                    return day
        raise ValueError(f"Unrecognised weekday: {value!r}")

    @property
    def label(self) -> str:
        return self.name[:3].title()


class Shift(Enum):
    """Nurse shifts. Times come from constants.json, e.g. MORNING 08:00-16:00."""

    MORNING = "MORNING"
    AFTERNOON = "AFTERNOON"

    @property
    def start(self) -> time:
        return parse_time(SHIFTS[self.value]["start"])

    @property
    def end(self) -> time:
        return parse_time(SHIFTS[self.value]["end"])

    @property
    def duration_hours(self) -> int:
        return SHIFTS[self.value]["hours"]

    def covers(self, moment: time) -> bool:
        """Both ends of a nurse shift are inclusive."""
        return within_window(moment, self.start, self.end, include_end=True)


@dataclass
class NurseRoster:
    """Weekly schedule of a nurse. A weekday missing from `schedule` is a day off."""

    schedule: Dict[Weekday, Shift] = field(default_factory=dict)

    def shift_on(self, day: Weekday) -> Optional[Shift]:
        return self.schedule.get(Weekday.of(day))

    def assign(self, day: Weekday, shift: Shift) -> None:
        self.schedule[Weekday.of(day)] = shift

    def hours_on(self, day: Weekday) -> int:
        shift = self.shift_on(day)
        return shift.duration_hours if shift is not None else 0

    def weekly_hours(self) -> int:
        return sum(shift.duration_hours for shift in self.schedule.values())

    def is_on_duty(self, day: Weekday, moment: time) -> bool:
        shift = self.shift_on(day)
        if shift is None:
            return False
        return shift.covers(moment)


@dataclass
class DoctorRoster:
    """A doctor works the same one-hour window every day of the week."""

    work_start: time = field(default_factory=lambda: parse_time(DOCTOR_DEFAULT_START))
    work_hours: int = DOCTOR_WORK_HOURS

    def __post_init__(self):
        self.work_start = parse_time(self.work_start)
        if self.work_start >= add_hours(self.work_start, self.work_hours):
            raise ValueError(
                f"Work window starting {self.work_start} must end before midnight"
            )

    @property
    def work_end(self) -> time:
        return add_hours(self.work_start, self.work_hours)

    def is_on_duty(self, day: Weekday, moment: time) -> bool:
        # start inclusive, end exclusive; identical for every weekday
        return within_window(moment, self.work_start, self.work_end, include_end=False)
