"""
Display formatters for report values

Pure value -> string conversions in the built-in en-US style: `,` groups
thousands, `.` separates decimals and a non-breaking space sits between a
value and its unit.
"""

import math
from datetime import datetime, timezone
from typing import Union

from core.exceptions import ValidationError

NBSP = "\xa0"
MAX_FRACTION_DIGITS = 3

MONTH_ABBREVIATIONS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

DURATION_UNITS = (
    ("d", 60 * 60 * 24),
    ("h", 60 * 60),
    ("m", 60),
    ("s", 1),
)

Number = Union[int, float]


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def format_number(number: Number, granularity: float = 0.1) -> str:
    """
    Format a number rounded to the nearest multiple of `granularity`

    Examples:
        >>> format_number(13000.456)
        '13,000.5'
        >>> format_number(100.01)
        '100'
    """
    if granularity <= 0:
        raise ValidationError("Granularity must be positive", field="granularity", value=granularity)

    coarse_value = _round_half_up(number / granularity) * granularity
    if coarse_value == 0:
        coarse_value = 0  # no "-0"

    formatted = f"{coarse_value:,.{MAX_FRACTION_DIGITS}f}"
    if "." in formatted:
        formatted = formatted.rstrip("0").rstrip(".")
    return formatted


def format_bytes_to_kb(size: Number, granularity: float = 0.1) -> str:
    """Format a byte count as kilobytes"""
    return f"{format_number(size / 1024, granularity)}{NBSP}KB"


def format_milliseconds(ms: Number, granularity: float = 10) -> str:
    """Format a duration in milliseconds, rounded to 10ms by default"""
    return f"{format_number(ms, granularity)}{NBSP}ms"


def format_seconds(ms: Number, granularity: float = 0.1) -> str:
    """Format a duration given in milliseconds as seconds"""
    return f"{format_number(ms / 1000, granularity)}{NBSP}s"


def format_duration(time_in_milliseconds: Number) -> str:
    """
    Format a duration as days, hours, minutes and seconds

    Units with a zero count are omitted, e.g. one hour and five seconds is
    "1 h 5 s". Durations without a whole second are "None".
    """
    time_in_seconds = time_in_milliseconds / 1000
    if _round_half_up(time_in_seconds) == 0:
        return "None"

    parts = []
    for label, unit in DURATION_UNITS:
        number_of_units = math.floor(time_in_seconds / unit)
        if number_of_units > 0:
            time_in_seconds -= number_of_units * unit
            parts.append(f"{number_of_units}{NBSP}{label}")

    return " ".join(parts) or "None"


def format_date_time(value: Union[str, datetime]) -> str:
    """
    Format an ISO 8601 timestamp like "Apr 28, 2017, 11:07 PM UTC"

    Naive timestamps are taken to be UTC.
    """
    if isinstance(value, datetime):
        moment = value
    else:
        try:
            moment = datetime.fromisoformat(str(value).strip().replace("Z", "+00:00"))
        except ValueError as e:
            raise ValidationError(f"Invalid timestamp: {value!r}", field="timestamp") from e

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)

    hour = moment.hour % 12 or 12
    meridiem = "AM" if moment.hour < 12 else "PM"
    month = MONTH_ABBREVIATIONS[moment.month - 1]

    return f"{month} {moment.day}, {moment.year}, {hour}:{moment.minute:02d} {meridiem} UTC"
