"""Conversions between millisecond timestamps and local calendar values."""

from __future__ import annotations

import re
import time
from datetime import datetime, timedelta, timezone

from tds.localzone import local_zone

DAY_MILLISECONDS = 24 * 60 * 60 * 1000
SECOND_FORMAT = "%Y%m%d %H:%M:%S"
DAY_FORMAT = "%Y%m%d"

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MS = timedelta(milliseconds=1)
_SECOND_PATTERN = re.compile(r"\d{8} \d{2}:\d{2}:\d{2}")
_DAY_PATTERN = re.compile(r"\d{8}")


def _from_ms(ts: int) -> datetime:
    moment = _EPOCH + timedelta(seconds=ts // 1000, milliseconds=ts % 1000)
    return moment.astimezone(local_zone())


def _to_ms(moment: datetime) -> int:
    return (moment - _EPOCH) // _ONE_MS


def _parse(text: str, fmt: str, pattern: re.Pattern[str]) -> int:
    if not pattern.fullmatch(text):
        raise ValueError(f"cannot parse {text!r} as {fmt!r}")
    parsed = datetime.strptime(text, fmt).replace(tzinfo=local_zone())
    return _to_ms(parsed)


def day_timestamp(ts: int) -> int:
    """Timestamp of local midnight on the day containing ts."""
    moment = _from_ms(ts)
    midnight = datetime(moment.year, moment.month, moment.day, tzinfo=local_zone())
    return _to_ms(midnight)


def date_day(ts: int) -> int:
    """Local date as YYYYMMDD."""
    moment = _from_ms(ts)
    return moment.year * 10000 + moment.month * 100 + moment.day


def date_week(ts: int) -> int:
    """ISO year and week as YYYYWW."""
    year, week, _ = _from_ms(ts).isocalendar()
    return year * 100 + week


def date_weekday(ts: int) -> int:
    """Day of the week, Sunday being 0."""
    return (_from_ms(ts).weekday() + 1) % 7


def date_month(ts: int) -> int:
    """Local month as YYYYMM."""
    moment = _from_ms(ts)
    return moment.year * 100 + moment.month


def date_quarter(ts: int) -> int:
    """Quarter as YYYYMM, MM being the quarter's last month."""
    moment = _from_ms(ts)
    return moment.year * 100 + ((moment.month - 1) // 3 + 1) * 3


def date_year(ts: int) -> int:
    return _from_ms(ts).year


def timestamp_to_day_string(ts: int) -> str:
    return _from_ms(ts).strftime(DAY_FORMAT)


def timestamp_to_second_string(ts: int) -> str:
    return _from_ms(ts).strftime(SECOND_FORMAT)


def second_string_to_timestamp(text: str) -> int:
    """Parse 'YYYYMMDD HH:MM:SS' in local time; raises ValueError."""
    return _parse(text, SECOND_FORMAT, _SECOND_PATTERN)


def day_string_to_timestamp(text: str) -> int:
    """Parse 'YYYYMMDD' as local midnight; raises ValueError."""
    return _parse(text, DAY_FORMAT, _DAY_PATTERN)


def tick() -> int:
    """Current time in milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


def now_string() -> str:
    return datetime.now(local_zone()).strftime(SECOND_FORMAT)


def today_string() -> str:
    return to_day_string(datetime.now(timezone.utc))


def to_day_string(moment: datetime) -> str:
    return moment.astimezone(local_zone()).strftime(DAY_FORMAT)


def today_int() -> int:
    return to_day_int(datetime.now(timezone.utc))


def to_day_int(moment: datetime) -> int:
    local = moment.astimezone(local_zone())
    return local.year * 10000 + local.month * 100 + local.day