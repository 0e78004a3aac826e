"""The time zone in which market timestamps are interpreted."""

from __future__ import annotations

import sys
from datetime import datetime, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

DEFAULT_ZONE_NAME = "Asia/Shanghai"


def _system_zone() -> tzinfo:
    zone = datetime.now().astimezone().tzinfo
    return zone if zone is not None else timezone.utc


def _load(name: str) -> tzinfo:
    if name in ("", "UTC"):
        return timezone.utc
    if name == "Local":
        return _system_zone()
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ValueError(f"unknown time zone: {name!r}") from exc


def _default_zone() -> tzinfo:
    if sys.platform == "win32":
        return _system_zone()
    try:
        return _load(DEFAULT_ZONE_NAME)
    except ValueError:
        return _system_zone()


class _ZoneState:
    __slots__ = ("zone",)

    def __init__(self, zone: tzinfo) -> None:
        self.zone = zone


_state = _ZoneState(_default_zone())


def local_zone() -> tzinfo:
    """Return the zone currently used for local market time."""
    return _state.zone


def set_location_name(name: str) -> None:
    """Switch local market time to the named IANA zone.

    Raises ValueError if the zone is unknown; the current zone is kept then.
    """
    _state.zone = _load(name)