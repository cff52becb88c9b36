from datetime import datetime, time, timedelta, date as dt_date
from typing import Union


def parse_time(value: Union[str, time]) -> time:
    """
    Convert input to a datetime.time object.
    Supports 'HH:MM' and 'HH:MM:SS' strings as well as time instances.
    """
    if isinstance(value, time):
        return value
    if isinstance(value, str):
        text = value.strip()
        for fmt in ("%H:%M", "%H:%M:%S"):
            try:
                return datetime.strptime(text, fmt).time()
            except ValueError:
                continue
        raise ValueError(f"Could not parse time string '{value}'")
    raise ValueError(f"Unsupported time type: {type(value)}")


def add_hours(start: time, hours: int) -> time:
    """Add whole hours to a time of day, wrapping past midnight."""
    anchor = datetime.combine(dt_date.min, start)
    return (anchor + timedelta(hours=hours)).time()


def within_window(moment: time, start: time, end: time, include_end: bool = True) -> bool:
    """Check whether a time of day falls inside [start, end] or [start, end)."""
    if moment < start:
        return False
    return moment <= end if include_end else moment < end


def format_time(value: time) -> str:
    return value.strftime("%H:%M")
