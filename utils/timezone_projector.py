"""
Projects UTC instants onto participants' wall clocks using the pytz database
"""
from collections import namedtuple
from datetime import date, datetime, timedelta
from functools import lru_cache
from typing import Optional
import pytz

from config import SCHEDULER_CONFIG
from exceptions import UnknownTimezone

LocalClock = namedtuple('LocalClock', ['hour', 'minute'])


@lru_cache(maxsize=None)
def get_zone(timezone: str):
    """Look up a pytz zone, raising UnknownTimezone instead of falling back"""
    try:
        return pytz.timezone(timezone)
    except (pytz.UnknownTimeZoneError, AttributeError):
        raise UnknownTimezone(timezone) from None


def _as_utc(instant: datetime) -> datetime:
    if instant.tzinfo is None:
        return pytz.utc.localize(instant)
    return instant.astimezone(pytz.utc)


def local_clock_at(instant_utc: datetime, timezone: str) -> LocalClock:
    """Wall-clock hour and minute of a UTC instant in the given timezone"""
    local = _as_utc(instant_utc).astimezone(get_zone(timezone))
    return LocalClock(local.hour, local.minute)


def local_minute_of_day(instant_utc: datetime, timezone: str) -> int:
    clock = local_clock_at(instant_utc, timezone)
    return clock.hour * 60 + clock.minute


def current_offset_minutes(timezone: str, now: Optional[datetime] = None) -> int:
    """Signed offset from UTC in minutes, as of now (DST-sensitive)"""
    now = _as_utc(now) if now else datetime.now(pytz.utc)
    offset = now.astimezone(get_zone(timezone)).utcoffset()
    return int(offset.total_seconds() // 60)


def format_local_time(instant_utc: datetime, timezone: str, time_format: str = '12h') -> str:
    """Render a UTC instant as "02:30 PM" (12h) or "14:30" (24h) in the given timezone"""
    local = _as_utc(instant_utc).astimezone(get_zone(timezone))
    if time_format == '24h':
        return local.strftime('%H:%M')
    return local.strftime('%I:%M %p')


def utc_day_start(day: date) -> datetime:
    return pytz.utc.localize(datetime(day.year, day.month, day.day))


def slot_instant(day: date, index: int) -> datetime:
    """UTC instant at which slot `index` of `day` begins"""
    return utc_day_start(day) + timedelta(minutes=index * SCHEDULER_CONFIG['slot_minutes'])
