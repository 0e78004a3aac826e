# tds

A toolkit for working with trading data: bar records and ticks, security
codes, bar periods and how they merge into one another, trading calendars
and per-minute tickers, and performance statistics for equity curves.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

- `tds.localzone`: the zone in which market times are read. It is
  Asia/Shanghai by default (the system zone on Windows). `local_zone()`
  returns it and `set_location_name(name)` switches to another IANA zone,
  raising `ValueError` for an unknown name.
- `tds.dates`: millisecond timestamps to and from `"YYYYMMDD"` and
  `"YYYYMMDD HH:MM:SS"` strings in the local zone
  (`timestamp_to_day_string`, `timestamp_to_second_string`,
  `day_string_to_timestamp`, `second_string_to_timestamp`), and calendar keys
  of a timestamp: `date_day` (YYYYMMDD), `date_week` (ISO YYYYWW),
  `date_weekday` (Sunday is 0), `date_month`, `date_quarter` (YYYYMM of the
  quarter's last month), `date_year`, `day_timestamp` (local midnight).
  `tick`, `now_string`, `today_string`, `today_int`, `to_day_string` and
  `to_day_int` work from the current time or a `datetime`.
- `tds.entity`: dataclasses `Record` (one bar), `RecordEx` (a bar with a
  code), `InfoExItem` (ex-rights data), `TickItem` (a quote snapshot) and the
  `TickSide` enum. Records and ticks serialize with `to_json()`;
  `Record.matches` compares date, prices, volume and amount.
- `tds.security`: `parse_security` splits codes such as `600000.SH`,
  `EOSQFUT.OKEX`, `BTCH19.BITMEX`, `BTC_USDTSPOT.HUOBI` or `RB1901.SHFE` into
  category, code and exchange, case-insensitively, raising `ValueError` for
  a code it does not recognise.
- `tds.period`: `period_from_string("M5")` (or `"MINUTE5"`, `"D1"`, `"W1"`,
  `"N1"`, `"Q1"`, `"Y1"`) gives a `Period`. Periods are ordered by unit, then
  count, and offer `can_convert_to`, `can_convert_from`, `basic_merge_period`
  and `kline_per_day`. Constants such as `PERIOD_M`, `PERIOD_M5` and
  `PERIOD_D` are provided.
- `tds.periodmanager`: `PeriodManager` takes the basic periods and, as
  periods are added, works out what each is built from (`dependencies`) and
  the order to merge them in (`ordered_periods`).
- `tds.stats`: `calc_apr`, `calc_max_drawdown`, `calc_sharpe_ratio` and
  `sample`.
- `tds.plotting`: `plot` draws one line per series on an A4 landscape page
  and saves it (for example to a PDF file), optionally on a log scale.
- `tds.csvengine`: `CsvEngine` saves dataclass records with `str`, `float`
  and `int` fields to CSV and loads them back; column names come from
  `field_name_to_header`.
- `tds.trademeta`: trading sessions and trade calendars per exchange
  (`TradeMeta`, `TimeSpans`, `TimeSpan`, `TradeDateMeta`). `load_meta` reads
  `trade-meta.json` and falls back to `default_trade_meta()`, which covers
  round-the-clock, all-week trading on OKEX and BITMEX.
- `tds.tradedate`: `TradeCalendar` lists the trade dates of an exchange, the
  range of the trade date holding a time (a trade date starts at 17:00 of
  the previous one), its one-minute tickers, and the ticker a timestamp
  falls in. Created without a meta, it loads one with `load_meta()`.
  `trade_date_range` gives the calendar day of a date string.
- `tds.redisstore`: `RedisStore` stores byte blobs in Redis sorted sets
  scored by timestamp; it is also a context manager.
- `tds.util`: `RingBuffer`, `IncrementalStd`, `mean`, `std`,
  `round_places`, sorted-sequence search, Cartesian `production`, float
  formatting, `unzip_file`, and zlib helpers.
- `tds.archive`: `compress` and `decompress` for `.tar.gz` archives.
- `tds.columns`: spreadsheet column letters (`column_name`) and cell
  references (`get_axis`).

## Example

```python
from tds.security import parse_security
from tds.period import period_from_string
from tds.periodmanager import PeriodManager
from tds.stats import calc_max_drawdown

security = parse_security("EOSQFUT.OKEX")
print(security.category_name(), security.code, security.exchange)
# EOS QFUT OKEX

m1, m5, d1 = (period_from_string(s) for s in ("M1", "M5", "D1"))
manager = PeriodManager([m1, m5, d1])
manager.add_period(period_from_string("M30"))
print([p.short_name() for p in manager.ordered_periods()])

position, drawdown = calc_max_drawdown([1.0, 1.2, 0.9, 1.3])
print(position, drawdown)  # 2 0.25
```

## What it does not do

- It is a library only; it installs no command-line program.
- Records and ticks serialize to JSON only; there is no binary wire format.
- It does not write spreadsheet workbooks; `tds.columns` only names cells.
- It does not fetch live quotes; data has to come from elsewhere.