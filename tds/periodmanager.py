"""Tracks the periods in use and the order in which bars must be merged."""

from __future__ import annotations

import threading
from collections.abc import Iterable

from tds.period import Period


class PeriodManager:
    """Knows which periods each added period is built from.

    Basic periods are those available directly; every other period is
    merged from a basic period or from a previously added one.
    """

    def __init__(self, basic_periods: Iterable[Period]) -> None:
        self._basic: list[Period] = sorted(basic_periods)
        self._periods: list[Period] = []
        self._ordered: list[Period] = list(self._basic)
        self._dependencies: dict[str, list[Period]] = {}
        self._lock = threading.RLock()

    def has_period(self, period: Period) -> bool:
        """Whether period is a basic period or has been added."""
        name = period.short_name()
        with self._lock:
            return any(p.short_name() == name for p in self._basic) or any(
                p.short_name() == name for p in self._periods
            )

    def add_period(self, period: Period) -> None:
        """Add period, together with whatever it must be merged from."""
        with self._lock:
            if self.has_period(period):
                return
            chain = self.dependencies(period) + [period]
            self._ordered = sorted(set(self._ordered).union(chain))
            self._periods.append(period)

    def is_basic_period(self, period: Period) -> bool:
        with self._lock:
            return any(p == period for p in self._basic)

    def dependencies(self, period: Period) -> list[Period]:
        """Periods, smallest first, that period is merged from in turn.

        Raises ValueError if no known period leads to it.
        """
        key = period.short_name()
        with self._lock:
            cached = self._dependencies.get(key)
            if cached is not None:
                return list(cached)
            found = self._resolve(period)
            self._dependencies[key] = list(found)
            return found

    def ordered_periods(self) -> list[Period]:
        """Every known period in the order they are to be merged."""
        with self._lock:
            return list(self._ordered)

    def _resolve(self, period: Period) -> list[Period]:
        for candidates in (self._periods, self._basic):
            sources = [p for p in candidates if period.can_convert_from(p)]
            if sources:
                best = max(sources)
                return [] if best == period else [best]

        base = period.basic_merge_period()
        if base == period:
            raise ValueError(f"no known period to build {period.short_name()} from")
        return self._resolve(base) + [base]