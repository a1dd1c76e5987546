"""Time-of-day utilities (12-hour wire format, minute offsets)."""

import re
from datetime import time

from app.domain.errors import InvalidTimeFormat

MINUTES_IN_HOUR = 60
DAY_TOTAL_MINUTES = 24 * MINUTES_IN_HOUR

# h:mma, e.g. "3:00pm", "11:30AM", "6:30 PM"
_TIME_PATTERN = re.compile(r"^\s*(\d{1,2}):(\d{2})\s?([AaPp][Mm])\s*$")


def parse_time_of_day(value: str) -> time:
    """
    Parse an ``h:mma`` string into a minute-precision ``time``.

    Raises:
        InvalidTimeFormat: value is not a valid 12-hour time
    """
    if not isinstance(value, str):
        raise InvalidTimeFormat(str(value))

    match = _TIME_PATTERN.match(value)
    if not match:
        raise InvalidTimeFormat(value)

    hour, minute, meridiem = int(match.group(1)), int(match.group(2)), match.group(3).upper()
    if not 1 <= hour <= 12 or minute >= MINUTES_IN_HOUR:
        raise InvalidTimeFormat(value)

    hour = hour % 12
    if meridiem == "PM":
        hour += 12
    return time(hour, minute)


def format_time_of_day(value: time) -> str:
    """Format a ``time`` as ``h:mma`` with an upper-case meridiem."""
    hour = value.hour % 12 or 12
    meridiem = "PM" if value.hour >= 12 else "AM"
    return f"{hour}:{value.minute:02d}{meridiem}"


def to_minutes(value: time) -> int:
    """Minute offset from midnight (0..1439)."""
    return value.hour * MINUTES_IN_HOUR + value.minute


def from_minutes(minutes: int) -> time:
    """Inverse of :func:`to_minutes`."""
    if not 0 <= minutes < DAY_TOTAL_MINUTES:
        raise ValueError(f"Minute offset out of range: {minutes}")
    return time(minutes // MINUTES_IN_HOUR, minutes % MINUTES_IN_HOUR)
