"""Trade dates and per-minute trading tickers of securities."""

from __future__ import annotations

import bisect
import threading
from dataclasses import dataclass
from typing import NamedTuple

from tds.dates import (
    date_weekday,
    day_string_to_timestamp,
    second_string_to_timestamp,
    timestamp_to_day_string,
    timestamp_to_second_string,
)
from tds.security import Security
from tds.trademeta import TimeSpan, TradeMeta, load_meta

TRADE_DATE_SEP_TIME = "17:00:00"
TRADE_DATE_DAY_START = "08:00:00"

DAY_MILLIS = 24 * 60 * 60 * 1000
MINUTE_MILLIS = 60 * 1000
MINUTES_PER_DAY = DAY_MILLIS // MINUTE_MILLIS

_SUNDAY, _SATURDAY = 0, 6


class TradeDateRange(NamedTuple):
    """The time range of one trade date, from 17:00 of the previous one."""

    start: str
    end: str
    trade_date: str
    prev_trade_date: str


@dataclass(frozen=True)
class _TickerCacheItem:
    start_ts: int
    end_ts: int
    tickers: tuple[int, ...]


def trade_date_range(date_string: str) -> tuple[str, str]:
    """The calendar day of date_string as ('YYYYMMDD 00:00:00', next midnight)."""
    if len(date_string) < 8:
        raise ValueError(f"date string too short: {date_string!r}")
    start = date_string[:8] + " 00:00:00"
    start_ts = second_string_to_timestamp(start)
    return start, timestamp_to_second_string(start_ts + DAY_MILLIS)


class TradeCalendar:
    """Trade dates and tickers computed from a TradeMeta, with caching."""

    def __init__(self, meta: TradeMeta | None = None) -> None:
        self._meta = meta if meta is not None else load_meta()
        self._trade_dates: dict[str, tuple[str, ...]] = {}
        self._tickers: dict[str, _TickerCacheItem] = {}
        self._lock = threading.Lock()

    @property
    def meta(self) -> TradeMeta:
        return self._meta

    def trade_dates(self, security: Security) -> list[str]:
        """Every trade date ('YYYYMMDD') of the security's exchange, ascending.

        Raises ValueError if the exchange has no calendar.
        """
        exchange = security.exchange
        with self._lock:
            cached = self._trade_dates.get(exchange)
        if cached:
            return list(cached)

        date_meta = self._meta.trade_date_meta(exchange)
        if date_meta is None:
            raise ValueError(f"no trade calendar for exchange {exchange!r}")
        weekend_trading = self._meta.is_weekend_trading(exchange)
        start = day_string_to_timestamp(date_meta.from_date)
        end = day_string_to_timestamp(date_meta.to_date)
        excluded = set(date_meta.non_trading_dates)

        dates = []
        for ts in range(start, end + 1, DAY_MILLIS):
            day = timestamp_to_day_string(ts)
            if day in excluded:
                continue
            if not weekend_trading and date_weekday(ts) in (_SUNDAY, _SATURDAY):
                continue
            dates.append(day)

        with self._lock:
            self._trade_dates[exchange] = tuple(dates)
        return dates

    def trade_date_range_by_date_string(
        self, security: Security, date_string: str
    ) -> TradeDateRange | None:
        """The trade date whose range holds date_string, or None."""
        dates = self.trade_dates(security)
        bounds = [f"{day} {TRADE_DATE_SEP_TIME}" for day in dates]
        index = bisect.bisect_right(bounds, date_string)
        if index < 1 or index >= len(bounds):
            return None
        return TradeDateRange(bounds[index - 1], bounds[index], dates[index], dates[index - 1])

    def trade_tickers(self, security: Security, timestamp: int) -> list[int]:
        """Start of every trading minute of the trade date holding timestamp.

        Raises ValueError if the timestamp lies outside the trade calendar.
        """
        comm_code = f"{security.category}.{security.exchange}"
        with self._lock:
            item = self._tickers.get(comm_code)
        if item is not None and item.start_ts <= timestamp < item.end_ts:
            return list(item.tickers)

        date_string = timestamp_to_second_string(timestamp)
        found = self.trade_date_range_by_date_string(security, date_string)
        if found is None:
            raise ValueError(f"{date_string} is outside the trade calendar of {security}")

        spans = self._meta.date_time_spans(security, found.trade_date)
        if self._meta.is_non_night_date(security.exchange, found.trade_date):
            spans = [span for span in spans if _is_day_session(span)]

        tickers: list[int] = []
        for span in spans:
            end = "23:59:59" if span.end == "24:00:00" else span.end
            day = found.prev_trade_date if span.start >= TRADE_DATE_SEP_TIME else found.trade_date
            from_ts = second_string_to_timestamp(f"{day} {span.start}")
            to_ts = second_string_to_timestamp(f"{day} {end}")
            tickers.extend(range(from_ts, to_ts, MINUTE_MILLIS))
        tickers.sort()

        with self._lock:
            self._tickers[comm_code] = _TickerCacheItem(
                second_string_to_timestamp(found.start),
                second_string_to_timestamp(found.end),
                tuple(tickers),
            )
        return tickers

    def to_trade_ticker(self, security: Security, timestamp: int) -> int:
        """The trading minute that timestamp belongs to, clamped to the session."""
        tickers = self.trade_tickers(security, timestamp)
        if not tickers:
            raise ValueError(f"no trading minutes for {security}")
        if timestamp < tickers[0]:
            return tickers[0]
        if timestamp >= tickers[-1]:
            return tickers[-1]
        return tickers[bisect.bisect_right(tickers, timestamp) - 1]


def _is_day_session(span: TimeSpan) -> bool:
    return TRADE_DATE_DAY_START <= span.start < TRADE_DATE_SEP_TIME