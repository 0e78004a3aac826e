"""Security codes such as '600000.SH' or 'EOSQFUT.OKEX'."""

from __future__ import annotations

import re
from dataclasses import dataclass

_CODE_PATTERNS = [
    re.compile(r"()([0-9]+)\.([0-9a-zA-Z]+)"),
    re.compile(r"([A-Z]+)([TNQ]FUT[A-Z]*)\.([A-Z]+)"),
    re.compile(r"([A-Z]+)(FUTF?)\.(OKEX)"),
    re.compile(r"([A-Z]+)(FUT)\.(BITMEX)"),
    re.compile(r"([A-Z]+)([A-Z][0-9]+)\.(BITMEX)"),
    re.compile(r"([A-Z]+)(FUT|INDEX)\.(PLO)"),
    re.compile(r"([A-Z0-9]+_[A-Z0-9]+)(SPOT)\.([A-Z]+)"),
    re.compile(r"([A-Z]+)([0-9]+)\.([A-Z]+)"),
    re.compile(r"([A-Z]+)(FUT|INDEX)\.([A-Z]+)"),
    re.compile(r"([A-Z]+)(FL)\.([A-Z]+)"),
]

_DIGIT_CURRENCY_EXCHANGES = ("OKEX", "HUOBI")


@dataclass(frozen=True)
class Security:
    category: str
    code: str
    exchange: str
    full_code: str

    def __str__(self) -> str:
        return self.full_code

    def category_name(self) -> str:
        """The category, 'ASTOCK' when none was given."""
        return self.category or "ASTOCK"

    def cat_code(self) -> str:
        return f"{self.category_name()}.{self.exchange}"

    def is_spot(self) -> bool:
        return self.code == "SPOT"

    def is_index(self) -> bool:
        return self.code == "INDEX"

    def is_digit_currency(self) -> bool:
        return self.exchange in _DIGIT_CURRENCY_EXCHANGES


def parse_security(security_code: str) -> Security:
    """Parse a security code, case-insensitively; raises ValueError."""
    upper = security_code.upper()
    for pattern in _CODE_PATTERNS:
        match = pattern.fullmatch(upper)
        if match:
            category, code, exchange = match.groups()
            return Security(category, code, exchange, upper)
    raise ValueError("Bad security code")