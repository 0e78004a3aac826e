"""Bar periods such as M5 (five minutes) or D1 (one day)."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum


class PeriodUnit(IntEnum):
    MINUTE = 0
    DAY = 1
    WEEK = 2
    MONTH = 3
    QUARTER = 4
    YEAR = 5


_SHORT_NAMES = {
    PeriodUnit.MINUTE: "M",
    PeriodUnit.DAY: "D",
    PeriodUnit.WEEK: "W",
    PeriodUnit.MONTH: "N",
    PeriodUnit.QUARTER: "Q",
    PeriodUnit.YEAR: "Y",
}

_UNIT_BY_NAME = {
    **{short: unit for unit, short in _SHORT_NAMES.items()},
    **{unit.name: unit for unit in PeriodUnit},
}

_DISPLAY_SUFFIX = {
    PeriodUnit.DAY: "日线",
    PeriodUnit.WEEK: "周线",
    PeriodUnit.MONTH: "月线",
    PeriodUnit.QUARTER: "季线",
    PeriodUnit.YEAR: "年线",
}

# For each target unit, the other units that convert to it when both counts are 1.
_ONE_TO_ONE_SOURCES = {
    PeriodUnit.WEEK: {PeriodUnit.DAY},
    PeriodUnit.MONTH: {PeriodUnit.DAY},
    PeriodUnit.QUARTER: {PeriodUnit.DAY, PeriodUnit.MONTH},
    PeriodUnit.YEAR: {PeriodUnit.DAY, PeriodUnit.MONTH, PeriodUnit.QUARTER},
}

_PERIOD_PATTERN = re.compile(r"([A-Z]+)([0-9]+)")


@dataclass(frozen=True, order=True)
class Period:
    """A period; ordered by unit first, then by unit count."""

    unit: PeriodUnit
    unit_count: int

    def name(self) -> str:
        return f"{self.unit.name}{self.unit_count}"

    def short_name(self) -> str:
        return f"{_SHORT_NAMES[self.unit]}{self.unit_count}"

    def display_name(self) -> str:
        if self.unit == PeriodUnit.MINUTE:
            return f"{self.unit_count}分钟"
        suffix = _DISPLAY_SUFFIX[self.unit]
        return suffix if self.unit_count == 1 else f"{self.unit_count}{suffix}"

    def can_convert_to(self, other: Period) -> bool:
        """Whether bars of this period can be merged into bars of other."""
        if self.unit == other.unit:
            return other.unit_count % self.unit_count == 0
        if other.unit == PeriodUnit.DAY:
            return self.unit == PeriodUnit.MINUTE and other.unit_count == 1
        if self.unit in _ONE_TO_ONE_SOURCES.get(other.unit, ()):
            return self.unit_count == 1 and other.unit_count == 1
        return False

    def can_convert_from(self, other: Period) -> bool:
        return other.can_convert_to(self)

    def basic_merge_period(self) -> Period:
        """The period this one is ordinarily built from."""
        if self.unit == PeriodUnit.MINUTE:
            return PERIOD_M
        if self.unit_count != 1:
            return Period(self.unit, 1)
        return {
            PeriodUnit.DAY: PERIOD_M,
            PeriodUnit.WEEK: PERIOD_D,
            PeriodUnit.MONTH: PERIOD_D,
            PeriodUnit.QUARTER: PERIOD_MONTH,
            PeriodUnit.YEAR: PERIOD_D,
        }[self.unit]

    def kline_per_day(self, n_minutes: int = 0) -> int:
        """Bars per trading day of n_minutes (240 when 0)."""
        if n_minutes == 0:
            n_minutes = 240
        if self.unit == PeriodUnit.MINUTE:
            return (n_minutes + self.unit_count - 1) // self.unit_count
        return 1

    def __str__(self) -> str:
        return self.short_name()


def period_from_string(period_str: str) -> Period:
    """Parse 'M1', 'MINUTE1', 'D5' and the like; raises ValueError."""
    match = _PERIOD_PATTERN.fullmatch(period_str.upper())
    if match is None:
        raise ValueError("bad period string")
    unit_name, count_text = match.groups()
    count = int(count_text)
    if count == 0:
        raise ValueError("bad unit count")
    unit = _UNIT_BY_NAME.get(unit_name)
    if unit is None:
        raise ValueError("bad period string")
    return Period(unit, count)


PERIOD_M = Period(PeriodUnit.MINUTE, 1)
PERIOD_M5 = Period(PeriodUnit.MINUTE, 5)
PERIOD_M15 = Period(PeriodUnit.MINUTE, 15)
PERIOD_M30 = Period(PeriodUnit.MINUTE, 30)
PERIOD_M60 = Period(PeriodUnit.MINUTE, 60)
PERIOD_D = Period(PeriodUnit.DAY, 1)
PERIOD_W = Period(PeriodUnit.WEEK, 1)
PERIOD_MONTH = Period(PeriodUnit.MONTH, 1)
PERIOD_Q = Period(PeriodUnit.QUARTER, 1)
PERIOD_Y = Period(PeriodUnit.YEAR, 1)