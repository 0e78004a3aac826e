"""Market data records: bars, ex-rights items and ticks."""

from __future__ import annotations

import json
from dataclasses import dataclass, field, fields
from enum import IntEnum
from typing import Any

from tds.dates import second_string_to_timestamp, timestamp_to_second_string


def _json_key(name: str) -> str:
    return "".join(part.capitalize() for part in name.split("_"))


def _to_json(item: Any) -> str:
    payload = {_json_key(f.name): getattr(item, f.name) for f in fields(item)}
    return json.dumps(payload, ensure_ascii=False)


@dataclass
class Record:
    """One bar. Prices may be negative after adjustment."""

    date: int = 0  # UTC milliseconds
    open: float = 0.0
    close: float = 0.0
    high: float = 0.0
    low: float = 0.0
    volume: float = 0.0
    amount: float = 0.0
    buy_volume: float = 0.0
    sell_volume: float = 0.0

    def matches(self, other: Record) -> bool:
        """Equal in date, prices, volume and amount; buy and sell volume ignored."""
        return (
            self.date == other.date
            and self.open == other.open
            and self.close == other.close
            and self.high == other.high
            and self.low == other.low
            and self.volume == other.volume
            and self.amount == other.amount
        )

    def date_string(self) -> str:
        return timestamp_to_second_string(self.date)

    def set_date(self, text: str) -> None:
        """Set the date from 'YYYYMMDD HH:MM:SS'; unparsable text is ignored."""
        try:
            self.date = second_string_to_timestamp(text)
        except ValueError:
            return

    def to_json(self) -> str:
        return _to_json(self)

    def __str__(self) -> str:
        return (
            f"Record {{Date: {self.date_string()} Open: {self.open:.8f} "
            f"Close: {self.close:.8f} Low: {self.low:.8f} High: {self.high:.8f} "
            f"Amount: {self.amount:.8f} Volume: {self.volume:.8f} "
            f"BuyVolume: {self.buy_volume:.8f} SellVolume: {self.sell_volume:.8f}}}"
        )


@dataclass
class RecordEx(Record):
    """A bar tagged with its security code."""

    code: str = ""

    def to_json(self) -> str:
        return _to_json(self)


@dataclass
class InfoExItem:
    """Ex-rights and ex-dividend information for one date."""

    date: int = 0
    bonus: float = 0.0
    delivered_shares: float = 0.0
    rationed_share_price: float = 0.0
    rationed_shares: float = 0.0


class TickSide(IntEnum):
    UNKNOWN = 0
    BUY = 1
    SELL = 2


@dataclass
class TickItem:
    """A market quote snapshot."""

    code: str = ""
    timestamp: int = 0
    high_limited: float = 0.0
    low_limited: float = 0.0
    price: float = 0.0
    position: float = 0.0
    settle: float = 0.0
    open: float = 0.0
    close: float = 0.0
    high: float = 0.0
    low: float = 0.0
    volume: float = 0.0
    total_volume: float = 0.0
    amount: float = 0.0
    total_amount: float = 0.0
    pre_settle: float = 0.0
    pre_position: float = 0.0
    pre_close: float = 0.0
    ask_prices: list[float] = field(default_factory=list)
    ask_volumes: list[float] = field(default_factory=list)
    bid_prices: list[float] = field(default_factory=list)
    bid_volumes: list[float] = field(default_factory=list)
    side: int = TickSide.UNKNOWN
    buy_volume: float = 0.0
    sell_volume: float = 0.0

    def date_string(self) -> str:
        return timestamp_to_second_string(self.timestamp)

    def to_json(self) -> str:
        return _to_json(self)