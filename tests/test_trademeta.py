import json

import pytest

from tds.security import parse_security
from tds.trademeta import (
    TimeSpan,
    TimeSpans,
    TradeDateMeta,
    TradeMeta,
    default_trade_meta,
    load_meta,
)


def test_default_weekend_trading():
    meta = default_trade_meta()
    assert meta.is_weekend_trading("OKEX") is True
    assert meta.is_weekend_trading("BITMEX") is True
    assert meta.is_weekend_trading("SHFE") is False


def test_time_spans_fall_back_to_exchange():
    meta = default_trade_meta()
    spans = meta.time_spans(parse_security("EOSQFUT.OKEX"))
    assert spans[0].from_date == "20130706"
    assert spans[0].to_date == "20380101"


def test_time_spans_prefer_category():
    specific = [TimeSpans("20180101", "20190101", [TimeSpan("09:00:00", "15:00:00")])]
    general = [TimeSpans("20180101", "20190101", [TimeSpan("21:00:00", "23:00:00")])]
    meta = TradeMeta(trading_time_meta={"RB.SHFE": specific, "SHFE": general})
    assert meta.time_spans(parse_security("RB1901.SHFE")) == specific
    assert meta.time_spans(parse_security("CU1901.SHFE")) == general


def test_time_spans_unknown_exchange_is_empty():
    assert default_trade_meta().time_spans(parse_security("RB1901.SHFE")) == []


def test_date_time_spans():
    meta = default_trade_meta()
    spans = meta.date_time_spans(parse_security("BTCFUT.BITMEX"), "20180820")
    assert spans == [TimeSpan("00:00:00", "17:00:00"), TimeSpan("17:00:00", "24:00:00")]


def test_date_time_spans_outside_range():
    meta = default_trade_meta()
    with pytest.raises(ValueError):
        meta.date_time_spans(parse_security("BTCFUT.BITMEX"), "20380101")


def test_non_night_dates():
    meta = TradeMeta(non_night_dates={"DCE": ["20181008"]})
    assert meta.is_non_night_date("DCE", "20181008")
    assert not meta.is_non_night_date("DCE", "20181009")
    assert not meta.is_non_night_date("SHFE", "20181008")


def test_trade_date_meta_lookup():
    meta = default_trade_meta()
    assert meta.trade_date_meta("OKEX") == TradeDateMeta("20150101", "20381230", [])
    assert meta.trade_date_meta("SHFE") is None


def test_from_dict_reads_file_layout():
    data = {
        "WeekendTradingExchanges": {"OKEX": True},
        "TradingTimeMeta": {
            "OKEX": [
                {"From": "20130706", "To": "20380101",
                 "Spans": [{"Start": "00:00:00", "End": "17:00:00"}]}
            ]
        },
        "NonNightDates": {"DCE": ["20181008"]},
        "TradeDateMeta": {
            "OKEX": {"From": "20150101", "To": "20381230", "NonTradingDates": ["20150102"]}
        },
    }
    meta = TradeMeta.from_dict(data)
    assert meta.is_weekend_trading("OKEX")
    assert meta.trading_time_meta["OKEX"][0].spans == [TimeSpan("00:00:00", "17:00:00")]
    assert meta.is_non_night_date("DCE", "20181008")
    assert meta.trade_date_meta("OKEX").non_trading_dates == ["20150102"]


def test_from_dict_ignores_key_case_and_nulls():
    data = {"weekendtradingexchanges": {"BITMEX": True}, "NonNightDates": None}
    meta = TradeMeta.from_dict(data)
    assert meta.is_weekend_trading("BITMEX")
    assert meta.non_night_dates == {}


def test_load_meta_missing_file_uses_default(tmp_path):
    assert load_meta(tmp_path / "absent.json") == default_trade_meta()


def test_load_meta_reads_file(tmp_path):
    path = tmp_path / "trade-meta.json"
    path.write_text(json.dumps({"WeekendTradingExchanges": {"HUOBI": True}}))
    meta = load_meta(path)
    assert meta.is_weekend_trading("HUOBI")
    assert not meta.is_weekend_trading("OKEX")


def test_load_meta_bad_json(tmp_path):
    path = tmp_path / "trade-meta.json"
    path.write_text("{not json")
    with pytest.raises(ValueError):
        load_meta(path)