"""Calendar-day clock used by the future-dating check."""

from datetime import date, datetime, timezone
from typing import Callable

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


LOCAL_TIMEZONE = 'local'
UTC_TIMEZONE = 'UTC'

Clock = Callable[[], date]


def validate_timezone(timezone_name: str) -> None:
    """Raise ValueError unless timezone_name is 'local', 'UTC' or a known IANA zone"""
    if not isinstance(timezone_name, str) or not timezone_name.strip():
        raise ValueError("timezone must be a non-empty string")
    if timezone_name.lower() == LOCAL_TIMEZONE or timezone_name.upper() == UTC_TIMEZONE:
        return
    try:
        ZoneInfo(timezone_name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"Unknown timezone: {timezone_name}") from e


def today_in(timezone_name: str = UTC_TIMEZONE) -> date:
    """Current calendar date under the given timezone policy"""
    if timezone_name.lower() == LOCAL_TIMEZONE:
        return date.today()
    if timezone_name.upper() == UTC_TIMEZONE:
        return datetime.now(timezone.utc).date()
    return datetime.now(ZoneInfo(timezone_name)).date()


def make_clock(timezone_name: str = UTC_TIMEZONE) -> Clock:
    validate_timezone(timezone_name)
    return lambda: today_in(timezone_name)
