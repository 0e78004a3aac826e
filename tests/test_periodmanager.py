import pytest

from tds.period import PERIOD_D, PERIOD_M, PERIOD_M5, period_from_string
from tds.periodmanager import PeriodManager

BASIC_PERIODS = [PERIOD_M, PERIOD_M5, PERIOD_D]


def short_names(periods):
    return [p.short_name() for p in periods]


def test_dependencies_after_adding_d3():
    pm = PeriodManager(BASIC_PERIODS)
    pm.add_period(period_from_string("D3"))
    periods = pm.dependencies(period_from_string("N1"))
    assert short_names(periods) == ["D1"]


def test_ordered_periods():
    pm = PeriodManager(BASIC_PERIODS)
    for name in ["M10", "M10", "Y3", "W3", "D2", "M30", "D3", "M60"]:
        pm.add_period(period_from_string(name))
    assert short_names(pm.ordered_periods()) == [
        "M1", "M5", "M10", "M30", "M60",
        "D1", "D2", "D3",
        "W1", "W3",
        "Y1", "Y3",
    ]


def test_basic_periods_are_sorted():
    pm = PeriodManager([PERIOD_D, PERIOD_M5, PERIOD_M])
    assert short_names(pm.ordered_periods()) == ["M1", "M5", "D1"]


def test_has_period_and_is_basic():
    pm = PeriodManager(BASIC_PERIODS)
    m10 = period_from_string("M10")
    assert pm.has_period(PERIOD_M5)
    assert not pm.has_period(m10)
    pm.add_period(m10)
    assert pm.has_period(m10)
    assert pm.is_basic_period(PERIOD_D)
    assert not pm.is_basic_period(m10)


def test_dependency_chain_through_merge_period():
    pm = PeriodManager(BASIC_PERIODS)
    assert short_names(pm.dependencies(period_from_string("W3"))) == ["D1", "W1"]


def test_dependencies_returns_copy():
    pm = PeriodManager(BASIC_PERIODS)
    first = pm.dependencies(period_from_string("M10"))
    first.append(PERIOD_D)
    assert short_names(pm.dependencies(period_from_string("M10"))) == ["M5"]


def test_basic_period_has_no_dependencies():
    pm = PeriodManager(BASIC_PERIODS)
    assert pm.dependencies(PERIOD_M5) == []


def test_unreachable_period_raises():
    pm = PeriodManager([PERIOD_D])
    with pytest.raises(ValueError):
        pm.dependencies(PERIOD_M5)