from datetime import date, datetime, time, tzinfo

import pytz


def to_minutes(t: time) -> int:
    return t.hour * 60 + t.minute


def from_minutes(minutes: int) -> time:
    return time(*divmod(minutes, 60))


def format_time(t: time) -> str:
    return f"{t.hour:02d}:{t.minute:02d}"


def clock_time(hour: int | str, minute: int | str | None = None) -> time | None:
    """Build a wall clock time, or return None if the values are not a valid time of day."""

    try:
        return time(int(hour), int(minute or 0))
    except ValueError:
        return None


def local_timezone(name: str) -> tzinfo:
    return pytz.timezone(name)


def today(tz: tzinfo | None = None) -> date:
    return datetime.now(tz).date()
