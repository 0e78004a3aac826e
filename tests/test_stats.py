import math

import pytest

from tds.stats import calc_apr, calc_max_drawdown, calc_sharpe_ratio, sample


def test_sample():
    assert sample([1, 2, 3, 4, 5, 6, 7], 2) == [2, 4, 6]


def test_sample_strings():
    assert sample(["a", "b", "c", "d", "e", "f"], 3) == ["c", "f"]


def test_sample_shorter_than_rate():
    assert sample([1, 2], 3) == []


def test_sample_bad_rate():
    with pytest.raises(ValueError):
        sample([1, 2, 3], 0)


def test_apr_empty():
    assert calc_apr([], 250) == 0


def test_apr_flat():
    assert calc_apr([1.0, 1.0], 250) == 0.0


def test_apr_growth():
    assert calc_apr([1.0, 4.0], 2) == pytest.approx(3.0)


def test_apr_negative_ratio_is_undefined():
    assert calc_apr([1.0, -2.0], 3) == -100.0


def test_max_drawdown():
    assert calc_max_drawdown([1.0, 2.0, 1.0, 3.0]) == (2, 0.5)


def test_max_drawdown_rising():
    assert calc_max_drawdown([1.0, 2.0, 3.0]) == (0, 0.0)


def test_max_drawdown_empty():
    with pytest.raises(ValueError):
        calc_max_drawdown([])


def test_sharpe_constant_series():
    assert calc_sharpe_ratio([5.0, 5.0, 5.0], 250) == -100.0


def test_sharpe_value():
    assert calc_sharpe_ratio([1.0, 2.0, 4.0], 1) == pytest.approx(math.sqrt(2))


def test_sharpe_empty():
    with pytest.raises(ValueError):
        calc_sharpe_ratio([], 250)