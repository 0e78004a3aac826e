"""Small helpers: searching, statistics, rounding, buffers and compression."""

from __future__ import annotations

import bisect
import itertools
import math
import shutil
import time
import zlib
import zipfile
from collections.abc import Iterator, Sequence
from pathlib import Path
from typing import Any


def in_sorted_strings(value: str, items: Sequence[str]) -> bool:
    """Whether value occurs in the ascending sequence items."""
    index = bisect.bisect_left(items, value)
    return index < len(items) and items[index] == value


def production(*args: Sequence[Any]) -> list[list[Any]]:
    """Cartesian product of the given sequences, as lists."""
    return [list(combo) for combo in itertools.product(*args)]


def trim_float_string_zero(text: str) -> str:
    """Drop trailing zeros after a decimal point, and the point itself if bare."""
    if "." not in text:
        return text
    return text.rstrip("0").removesuffix(".")


def format_float(value: float) -> str:
    """Fixed-point text with six decimals, trailing zeros trimmed."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    return trim_float_string_zero(f"{value:f}")


class RingBuffer:
    """Fixed-capacity buffer keeping the most recent values, oldest first."""

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError("ring buffer size must be positive")
        self._buffer: list[Any] = [None] * size
        self._top = 0
        self._length = 0

    @property
    def capacity(self) -> int:
        return len(self._buffer)

    def append(self, value: Any) -> None:
        self._buffer[self._top] = value
        if self._length < len(self._buffer):
            self._length += 1
        self._top = (self._top + 1) % len(self._buffer)

    def __getitem__(self, index: int) -> Any:
        if index < 0 or index >= self._length:
            raise IndexError("ring buffer index out of range")
        if self._length < len(self._buffer):
            return self._buffer[index]
        return self._buffer[(index + self._top) % self._length]

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Any]:
        for index in range(self._length):
            yield self[index]

    def clone(self) -> RingBuffer:
        other = RingBuffer(len(self._buffer))
        other._buffer = list(self._buffer)
        other._top = self._top
        other._length = self._length
        return other


def search_sorted(items: Sequence[int], value: int) -> int:
    """First index whose item is >= value."""
    return bisect.bisect_left(items, value)


def find_sorted(items: Sequence[int], value: int) -> int:
    """Index of value in ascending items, or -1 if absent."""
    index = bisect.bisect_left(items, value)
    if index < len(items) and items[index] == value:
        return index
    return -1


def mean(values: Sequence[float]) -> float:
    if not values:
        return math.nan
    return sum(values, 0.0) / len(values)


def std(values: Sequence[float]) -> float:
    """Population standard deviation; NaN for no values."""
    if not values:
        return math.nan
    centre = mean(values)
    return math.sqrt(sum(((v - centre) ** 2 for v in values), 0.0) / len(values))


class IncrementalStd:
    """Population standard deviation updated one value at a time."""

    def __init__(self) -> None:
        self._count = 0
        self._sum = 0.0
        self._variance = 0.0

    def feed(self, value: float) -> float:
        """Add a value and return the standard deviation so far."""
        if self._count == 0:
            self._count = 1
            self._sum = value
            return self._variance

        new_sum = self._sum + value
        old_len = float(self._count)
        new_len = old_len + 1
        new_mean = new_sum / new_len
        delta = new_mean - self._sum / old_len
        new_variance = (
            old_len * (self._variance + delta * delta) + (new_mean - value) ** 2
        ) / new_len

        self._count += 1
        self._sum = new_sum
        self._variance = new_variance
        return math.sqrt(new_variance)


def round_places(value: float, places: int) -> float:
    """Round half away from zero to the given number of decimal places."""
    try:
        factor = 10.0**places
    except OverflowError:
        factor = math.inf
    x = value * factor
    if math.isinf(x) or math.isnan(x):
        return value
    if x >= 0.0:
        t = float(math.ceil(x))
        if t - x > 0.50000000001:
            t -= 1.0
    else:
        t = float(math.ceil(-x))
        if t + x > 0.50000000001:
            t -= 1.0
        t = -t
    if factor == 0.0:
        return math.nan
    result = t / factor
    return t if math.isinf(result) else result


def tick() -> int:
    """Current time in milliseconds."""
    return time.time_ns() // 1_000_000


def nano_tick() -> int:
    """Current time in nanoseconds."""
    return time.time_ns()


def unzip_file(file_name: str | Path, output_dir: str | Path) -> None:
    """Extract every entry of a zip archive under output_dir."""
    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(file_name) as archive:
        for info in archive.infolist():
            target = out / info.filename
            if info.is_dir():
                target.mkdir(parents=True, exist_ok=True)
                continue
            target.parent.mkdir(parents=True, exist_ok=True)
            with archive.open(info) as source, open(target, "wb") as sink:
                shutil.copyfileobj(source, sink)


def zlib_compress(data: bytes) -> bytes:
    return zlib.compress(data)


def zlib_decompress(data: bytes) -> bytes:
    """Inflate zlib data; raises zlib.error on malformed input."""
    return zlib.decompress(data)