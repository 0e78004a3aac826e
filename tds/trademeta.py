"""Trading calendars and trading hours per exchange."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from tds.security import Security

DEFAULT_META_FILE = "trade-meta.json"

_log = logging.getLogger(__name__)


def _lookup(data: dict[str, Any] | None, key: str) -> Any:
    """Value for key, matching names without regard to case."""
    if not data:
        return None
    if key in data:
        return data[key]
    lowered = key.lower()
    for name, value in data.items():
        if name.lower() == lowered:
            return value
    return None


@dataclass(frozen=True)
class TimeSpan:
    """A trading session between two 'HH:MM:SS' times."""

    start: str
    end: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TimeSpan:
        return cls(_lookup(data, "Start") or "", _lookup(data, "End") or "")


@dataclass
class TimeSpans:
    """Sessions in force for trade dates from from_date up to to_date."""

    from_date: str
    to_date: str
    spans: list[TimeSpan] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TimeSpans:
        return cls(
            _lookup(data, "From") or "",
            _lookup(data, "To") or "",
            [TimeSpan.from_dict(item) for item in _lookup(data, "Spans") or []],
        )


@dataclass
class TradeDateMeta:
    """The span of the trade calendar and the dates without trading."""

    from_date: str
    to_date: str
    non_trading_dates: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TradeDateMeta:
        return cls(
            _lookup(data, "From") or "",
            _lookup(data, "To") or "",
            list(_lookup(data, "NonTradingDates") or []),
        )


@dataclass
class TradeMeta:
    """Trading hours and calendars keyed by exchange or 'CATEGORY.EXCHANGE'."""

    weekend_trading_exchanges: dict[str, bool] = field(default_factory=dict)
    trading_time_meta: dict[str, list[TimeSpans]] = field(default_factory=dict)
    non_night_dates: dict[str, list[str]] = field(default_factory=dict)
    trade_date_metas: dict[str, TradeDateMeta] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TradeMeta:
        """Build from the JSON layout of the meta file."""
        weekend = _lookup(data, "WeekendTradingExchanges") or {}
        times = _lookup(data, "TradingTimeMeta") or {}
        non_night = _lookup(data, "NonNightDates") or {}
        date_metas = _lookup(data, "TradeDateMeta") or {}
        return cls(
            weekend_trading_exchanges={k: bool(v) for k, v in weekend.items()},
            trading_time_meta={
                k: [TimeSpans.from_dict(item) for item in v or []]
                for k, v in times.items()
            },
            non_night_dates={k: list(v or []) for k, v in non_night.items()},
            trade_date_metas={
                k: TradeDateMeta.from_dict(v) for k, v in date_metas.items() if v is not None
            },
        )

    def is_weekend_trading(self, exchange: str) -> bool:
        return self.weekend_trading_exchanges.get(exchange, False)

    def time_spans(self, security: Security) -> list[TimeSpans]:
        """Session sets for the security's category, else for its exchange."""
        spans = self.trading_time_meta.get(f"{security.category}.{security.exchange}")
        if spans is not None:
            return spans
        return self.trading_time_meta.get(security.exchange, [])

    def date_time_spans(self, security: Security, day: str) -> list[TimeSpan]:
        """Sessions in force on trade date day; raises ValueError if none cover it."""
        for item in self.time_spans(security):
            if item.from_date <= day < item.to_date:
                return item.spans
        raise ValueError(f"no trading hours for {security} on {day!r}")

    def is_non_night_date(self, exchange: str, day: str) -> bool:
        return day in self.non_night_dates.get(exchange, ())

    def trade_date_meta(self, exchange: str) -> TradeDateMeta | None:
        return self.trade_date_metas.get(exchange)


def _all_day_spans() -> list[TimeSpans]:
    return [
        TimeSpans(
            "20130706",
            "20380101",
            [TimeSpan("00:00:00", "17:00:00"), TimeSpan("17:00:00", "24:00:00")],
        )
    ]


def default_trade_meta() -> TradeMeta:
    """The built-in meta: round-the-clock, all-week trading on OKEX and BITMEX."""
    return TradeMeta(
        weekend_trading_exchanges={"OKEX": True, "BITMEX": True},
        trading_time_meta={"OKEX": _all_day_spans(), "BITMEX": _all_day_spans()},
        non_night_dates={},
        trade_date_metas={
            "OKEX": TradeDateMeta("20150101", "20381230", []),
            "BITMEX": TradeDateMeta("20150101", "20381230", []),
        },
    )


def load_meta(path: str | Path = DEFAULT_META_FILE) -> TradeMeta:
    """Read the meta file; the built-in meta is used if it cannot be read.

    Raises ValueError if the file holds malformed JSON.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        _log.error("Load %s fail. error: %s", path, exc)
        return default_trade_meta()
    data = json.loads(text)
    if data is None:
        return default_trade_meta()
    return TradeMeta.from_dict(data)