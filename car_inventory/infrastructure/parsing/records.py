"""Whitespace-delimited line parser producing candidate car records."""
from __future__ import annotations

from car_inventory.domain.models import CandidateRecord, FormatFailure
from car_inventory.domain.rules import BAD_FORMAT
from car_inventory.infrastructure.parsing.utils import parse_decimal, parse_int, split_fields

FIELD_COUNT = 4


class RecordParser:
    """Turns one ``ID MODEL QUANTITY PRICE`` line into a candidate record.

    Tokens past the fourth are ignored. A line with fewer tokens, or with a
    quantity or price that does not parse, becomes a ``FormatFailure``.
    """

    def parse(self, line: str) -> CandidateRecord | FormatFailure:
        raw = line.rstrip("\r\n")
        tokens = split_fields(raw)
        if len(tokens) < FIELD_COUNT:
            return FormatFailure(line=raw, reason=BAD_FORMAT)
        car_id, model, quantity_token, price_token = tokens[:FIELD_COUNT]
        quantity = parse_int(quantity_token)
        price = parse_decimal(price_token)
        if quantity is None or price is None:
            return FormatFailure(line=raw, reason=BAD_FORMAT)
        return CandidateRecord(
            id=car_id,
            model=model,
            quantity=quantity,
            price=price,
        )
