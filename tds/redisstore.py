"""Sorted-set storage of serialized records in Redis."""

from __future__ import annotations

from typing import Any

import redis

DEFAULT_REDIS_SERVER = "localhost:6379"


def _split_address(address: str) -> tuple[str, int]:
    host, _, port = address.rpartition(":")
    if not host:
        raise ValueError(f"bad redis address: {address!r}")
    return host, int(port)


def _as_bytes(value: Any) -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else bytes(value)


class RedisStore:
    """Stores byte blobs in Redis sorted sets, scored by timestamp."""

    def __init__(self, address: str = "", password: str = "") -> None:
        host, port = _split_address(address or DEFAULT_REDIS_SERVER)
        self._client = redis.Redis(
            host=host,
            port=port,
            password=password or None,
            health_check_interval=240,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> RedisStore:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def sorted_set_add(self, key: str, data: bytes, score: int) -> None:
        self._client.zadd(key, {data: score})

    def sorted_set_range_by_score(
        self, key: str, min_score: int, max_score: int, offset: int = 0, count: int = 0
    ) -> list[bytes]:
        """Members with min_score <= score <= max_score, ascending.

        With a positive count, at most count members after skipping offset.
        """
        if count > 0:
            values = self._client.zrangebyscore(
                key, min_score, max_score, start=offset, num=count
            )
        else:
            values = self._client.zrangebyscore(key, min_score, max_score)
        return [_as_bytes(v) for v in values or []]

    def sorted_set_rev_range_by_score(
        self, key: str, min_score: int, max_score: int, offset: int = 0, count: int = 0
    ) -> list[bytes]:
        """Members with min_score <= score <= max_score, descending."""
        if count > 0:
            values = self._client.zrevrangebyscore(
                key, max_score, min_score, start=offset, num=count
            )
        else:
            values = self._client.zrevrangebyscore(key, max_score, min_score)
        return [_as_bytes(v) for v in values or []]

    def sorted_set_remove_by_score(self, key: str, min_score: int, max_score: int) -> None:
        """Remove members with min_score <= score <= max_score."""
        self._client.zremrangebyscore(key, min_score, max_score)