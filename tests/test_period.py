import pytest

from tds.period import (
    PERIOD_D,
    PERIOD_M,
    PERIOD_MONTH,
    PERIOD_W,
    PeriodUnit,
    period_from_string,
)


def p(text):
    return period_from_string(text)


def test_names():
    m1 = p("M1")
    assert m1.short_name() == "M1"
    assert m1.name() == "MINUTE1"
    assert p("N3").name() == "MONTH3"
    assert p("quarter2").short_name() == "Q2"


@pytest.mark.parametrize("text", ["M", "M0", "X1", "1M", "", "M-1"])
def test_bad_strings(text):
    with pytest.raises(ValueError):
        period_from_string(text)


def test_ordering_and_equality():
    m1, m5, d1 = p("M1"), p("M5"), p("D1")
    assert m1 < m5
    assert m5 > m1
    assert m1 == p("M1")
    assert m1 < d1
    assert d1 > m1
    assert p("MINUTE1") == m1


def test_hashable_as_key():
    mapping = {p("M1"): p("D1")}
    assert mapping[p("M1")] == p("D1")


def test_can_convert_to_matrix():
    pm, pm1 = p("M1"), p("M5")
    pd, pd1 = p("D1"), p("D5")
    pw, pw1 = p("W1"), p("W5")
    pn, pn1 = p("N1"), p("N5")
    pq, pq1 = p("Q1"), p("Q5")
    py, py1 = p("Y1"), p("Y5")

    assert pm.can_convert_to(pm1)
    assert pm.can_convert_to(pd)
    assert not pm.can_convert_to(pd1)
    assert not pm.can_convert_to(pw)
    assert not pm.can_convert_to(pn)
    assert not pm.can_convert_to(pq)
    assert not pm.can_convert_to(py)

    assert not pd.can_convert_to(pm)
    assert pd.can_convert_to(pd1)
    assert pd.can_convert_to(pw)
    assert pd.can_convert_to(pn)
    assert pd.can_convert_to(pq)
    assert pd.can_convert_to(py)

    assert not pw.can_convert_to(pm)
    assert not pw.can_convert_to(pd)
    assert pw.can_convert_to(pw1)
    assert not pw.can_convert_to(pn)
    assert not pw.can_convert_to(pq)
    assert not pw.can_convert_to(py)

    assert not pn.can_convert_to(pm)
    assert not pn.can_convert_to(pd)
    assert not pn.can_convert_to(pw)
    assert pn.can_convert_to(pn1)
    assert pn.can_convert_to(pq)
    assert pn.can_convert_to(py)

    assert not pq.can_convert_to(pm)
    assert not pq.can_convert_to(pd)
    assert not pq.can_convert_to(pw)
    assert not pq.can_convert_to(pn)
    assert pq.can_convert_to(pq1)
    assert pq.can_convert_to(py)

    assert not py.can_convert_to(pm)
    assert not py.can_convert_to(pd)
    assert not py.can_convert_to(pw)
    assert not py.can_convert_to(pn)
    assert not py.can_convert_to(pq)
    assert py.can_convert_to(py1)

    assert py.can_convert_to(py1) == py1.can_convert_from(py)
    assert not p("Q1").can_convert_from(p("D3"))


def test_minute_multiples():
    assert p("M5").can_convert_to(p("M15"))
    assert not p("M5").can_convert_to(p("M7"))
    assert p("M5").can_convert_to(p("D1"))


def test_display_names():
    assert p("M5").display_name() == "5分钟"
    assert p("D1").display_name() == "日线"
    assert p("D3").display_name() == "3日线"
    assert p("W1").display_name() == "周线"
    assert p("N2").display_name() == "2月线"
    assert p("Q1").display_name() == "季线"
    assert p("Y4").display_name() == "4年线"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("M5", PERIOD_M),
        ("D1", PERIOD_M),
        ("D3", PERIOD_D),
        ("W1", PERIOD_D),
        ("W2", PERIOD_W),
        ("N1", PERIOD_D),
        ("N4", PERIOD_MONTH),
        ("Q1", PERIOD_MONTH),
        ("Y1", PERIOD_D),
        ("Y3", p("Y1")),
    ],
)
def test_basic_merge_period(text, expected):
    assert p(text).basic_merge_period() == expected


def test_kline_per_day():
    assert p("M5").kline_per_day() == 48
    assert p("M7").kline_per_day(240) == 35
    assert p("M1").kline_per_day(330) == 330
    assert p("D1").kline_per_day(240) == 1


def test_unit_values_and_str():
    assert p("Y2").unit == PeriodUnit.YEAR
    assert p("Y2").unit_count == 2
    assert str(p("minute30")) == "M30"