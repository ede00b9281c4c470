"""
D3 Formatting - Display values for audit reports

Formats numbers, byte sizes, durations and timestamps, rates scores and
describes device emulation for report renderers.
"""

from .emulation import get_device_emulation_description
from .formatters import (
    NBSP,
    format_bytes_to_kb,
    format_date_time,
    format_duration,
    format_milliseconds,
    format_number,
    format_seconds,
)
from .rating import Rating, calculate_rating

__all__ = [
    "NBSP",
    "format_number",
    "format_bytes_to_kb",
    "format_milliseconds",
    "format_seconds",
    "format_duration",
    "format_date_time",
    "calculate_rating",
    "Rating",
    "get_device_emulation_description",
]
