"""
Local time-of-day helpers: parsing, window membership and display formatting
"""
import re

from exceptions import InvalidFormat

MINUTES_PER_DAY = 24 * 60

LOCAL_TIME_PATTERN = re.compile(r"([0-9]{1,2}):([0-9]{1,2})")


def parse_local_time(value: str) -> int:
    """Convert a local "HH:MM" string to minutes since midnight.

    Raises:
        InvalidFormat: if the value is not two colon-separated groups of one
            or two ASCII digits within 00-23 and 00-59
    """
    if not isinstance(value, str):
        raise InvalidFormat(value)

    match = LOCAL_TIME_PATTERN.fullmatch(value.strip())
    if match is None:
        raise InvalidFormat(value)

    hour, minute = int(match.group(1)), int(match.group(2))

    if not (0 <= hour <= 23 and 0 <= minute <= 59):
        raise InvalidFormat(value)

    return hour * 60 + minute


def is_within_window(minute: int, start: int, end: int) -> bool:
    """Check if a minute of day falls in [start, end), wrapping past midnight when start > end"""
    if start <= end:
        return start <= minute < end
    return minute >= start or minute < end


def format_time(value: str, time_format: str = '12h') -> str:
    """Render an "HH:MM" value as "9:00 AM" (12h) or "09:00" (24h)"""
    minutes = parse_local_time(value)
    hour, minute = divmod(minutes, 60)

    if time_format == '24h':
        return f"{hour:02d}:{minute:02d}"

    period = 'PM' if hour >= 12 else 'AM'
    return f"{hour % 12 or 12}:{minute:02d} {period}"


def format_hour_label(hour: int, time_format: str = '12h') -> str:
    """Short axis label for an hour of day"""
    if time_format == '24h':
        return f"{hour:02d}:00"

    if hour == 0:
        return '12am'
    if hour == 12:
        return '12pm'
    return f"{hour}am" if hour < 12 else f"{hour - 12}pm"


def format_offset(minutes: int) -> str:
    """Format a UTC offset in minutes, e.g. 330 -> "UTC+5:30", -300 -> "UTC-5" """
    sign = '+' if minutes >= 0 else '-'
    hours, mins = divmod(abs(minutes), 60)
    suffix = f":{mins:02d}" if mins else ''
    return f"UTC{sign}{hours}{suffix}"
