from datetime import datetime, timedelta

import pytest

from tds.localzone import DEFAULT_ZONE_NAME, local_zone, set_location_name


@pytest.fixture(autouse=True)
def _restore_zone():
    yield
    set_location_name(DEFAULT_ZONE_NAME)


def test_default_zone_is_shanghai():
    set_location_name(DEFAULT_ZONE_NAME)
    assert local_zone().utcoffset(datetime(2020, 1, 1)) == timedelta(hours=8)


def test_set_utc():
    set_location_name("UTC")
    assert local_zone().utcoffset(datetime(2020, 6, 1)) == timedelta(0)


def test_set_named_zone_round_trip():
    set_location_name("Europe/London")
    assert local_zone().key == "Europe/London"


def test_unknown_zone_raises_and_keeps_current():
    set_location_name("UTC")
    before = local_zone()
    with pytest.raises(ValueError):
        set_location_name("Not/AZone")
    assert local_zone() is before


def test_empty_name_means_utc():
    set_location_name("")
    assert local_zone().utcoffset(datetime(2020, 6, 1)) == timedelta(0)