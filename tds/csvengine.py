"""Saving dataclass records to CSV files and loading them back."""

from __future__ import annotations

import csv
import dataclasses
import os
import re
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from tds.util import format_float

_SUPPORTED_TYPES = (str, float, int)
_TYPE_NAMES = {"str": str, "float": float, "int": int}
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def field_name_to_header(name: str) -> str:
    """Turn 'BuyVolume' into 'buy_volume'; lower-case names are kept."""
    return "".join(
        ("_" if position else "") + char.lower() if char.isupper() else char
        for position, char in enumerate(name)
    )


def _field_kind(annotation: Any) -> Any:
    if isinstance(annotation, str):
        return _TYPE_NAMES.get(annotation.strip())
    return annotation


class CsvEngine:
    """Reads and writes CSV files whose columns are the fields of a dataclass.

    Fields must be of type str, float or int. When loading, a method
    ``set_<field>`` taking the column text is preferred over parsing; when
    saving, a method ``<field>_string`` supplies the cell text if present.
    """

    def __init__(self, record_type: type) -> None:
        if not (isinstance(record_type, type) and dataclasses.is_dataclass(record_type)):
            raise TypeError("record type must be a dataclass")
        self._record_type = record_type
        self._fields: list[tuple[str, type, bool]] = []
        for item in dataclasses.fields(record_type):
            kind = _field_kind(item.type)
            if kind not in _SUPPORTED_TYPES:
                raise TypeError(f"unsupported type for field {item.name!r}: {item.type!r}")
            self._fields.append((item.name, kind, item.init))

    def headers(self) -> list[str]:
        return [field_name_to_header(name) for name, _, _ in self._fields]

    def load(self, csv_file: str | Path) -> list[Any]:
        """Read every record from csv_file; raises ValueError on bad content."""
        with open(csv_file, newline="", encoding="utf-8") as handle:
            rows = [row for row in csv.reader(handle) if row]
        if not rows:
            return []

        header_row, *body = rows
        column_of = {header: index for index, header in enumerate(self.headers())}
        records = []
        for line, row in enumerate(body, start=2):
            if len(row) != len(header_row):
                raise ValueError(f"line {line}: wrong number of fields")
            record = self._record_type(
                **{name: kind() for name, kind, init in self._fields if init}
            )
            for header, text in zip(header_row, row):
                index = column_of.get(header)
                if index is None:
                    continue
                name, kind, _ = self._fields[index]
                setter = getattr(record, f"set_{name}", None)
                if callable(setter):
                    setter(text)
                    continue
                setattr(record, name, self._parse(kind, text))
            records.append(record)
        return records

    def save(self, csv_file: str | Path, data: Iterable[Any]) -> None:
        """Write a header row and one row per record to csv_file.

        Raises ValueError for an item that is not of the record type.
        """
        with open(csv_file, "w", newline="", encoding="utf-8") as handle:
            writer = csv.writer(handle, lineterminator="\n")
            writer.writerow(self.headers())
            for record in data:
                if type(record) is not self._record_type:
                    raise ValueError("bad data")
                writer.writerow(
                    [self._format(self._value(record, name)) for name, _, _ in self._fields]
                )
            handle.flush()
            os.fsync(handle.fileno())

    @staticmethod
    def _parse(kind: type, text: str) -> Any:
        if kind is str:
            return text
        if kind is float:
            return float(text)
        if not _INT_PATTERN.fullmatch(text):
            raise ValueError(f"invalid integer: {text!r}")
        return int(text)

    @staticmethod
    def _value(record: Any, name: str) -> Any:
        formatter = getattr(record, f"{name}_string", None)
        if callable(formatter):
            try:
                return formatter()
            except Exception:
                pass
        return getattr(record, name)

    @staticmethod
    def _format(value: Any) -> str:
        if isinstance(value, str):
            return value
        if isinstance(value, bool):
            raise TypeError("boolean values are not supported")
        if isinstance(value, float):
            return format_float(value)
        if isinstance(value, int):
            return str(value)
        raise TypeError(f"unsupported value: {value!r}")