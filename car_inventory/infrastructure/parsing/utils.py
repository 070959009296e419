"""Shared token grammar for text record ingestion."""
from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation

INTEGER_RE = re.compile(r"^[+-]?\d+$")
DECIMAL_RE = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)$")

# Quantities are 32-bit signed; prices keep at most 15 integer digits.
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
MAX_PRICE_EXPONENT = 14


def split_fields(line: str) -> list[str]:
    return line.split()


def parse_int(token: str) -> int | None:
    if not INTEGER_RE.match(token):
        return None
    try:
        value = int(token)
    except ValueError:
        return None
    if not INT_MIN <= value <= INT_MAX:
        return None
    return value


def parse_decimal(token: str) -> Decimal | None:
    # Decimal() alone would also take "NaN", "Infinity", "1e5" and "1_000".
    if not DECIMAL_RE.match(token):
        return None
    try:
        value = Decimal(token)
    except InvalidOperation:
        return None
    if not value.is_finite() or value.adjusted() > MAX_PRICE_EXPONENT:
        return None
    return value
