"""Performance statistics of value series."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TypeVar

from tds.util import mean, std

T = TypeVar("T")


def _divide(a: float, b: float) -> float:
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _power(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except ValueError:
        return math.nan
    except OverflowError:
        return math.inf


def calc_apr(values: Sequence[float], scale: float) -> float:
    """Annualised return of a value series; -100 when undefined."""
    if not values:
        return 0.0
    ratio = _divide(values[-1], values[0])
    apr = _power(ratio, scale / len(values)) - 1.0
    return -100.0 if math.isnan(apr) else apr


def calc_max_drawdown(values: Sequence[float]) -> tuple[int, float]:
    """Return (position, size) of the largest fall from a running peak."""
    if not values:
        raise ValueError("no values")
    peak = values[0]
    position, worst = 0, 0.0
    for index, value in enumerate(values):
        peak = max(peak, value)
        drawdown = _divide(peak - value, peak)
        if drawdown > worst:
            worst = drawdown
            position = index
    return position, worst


def sample(values: Sequence[T], rate: int) -> list[T]:
    """Every rate-th value, starting with the rate-th."""
    if rate <= 0:
        raise ValueError("rate must be positive")
    return list(values[rate - 1 :: rate])


def calc_sharpe_ratio(values: Sequence[float], scale: float) -> float:
    """Sharpe ratio of per-step returns, scaled by sqrt(scale); -100 when undefined."""
    if not values:
        raise ValueError("no values")
    returns = [0.0] + [_divide(b, a) - 1 for a, b in zip(values, values[1:])]
    centre = mean(returns)
    spread = std(returns)
    if math.isnan(centre) or math.isnan(spread) or spread == 0.0:
        return -100.0
    return math.sqrt(scale) * centre / spread