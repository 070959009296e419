"""Domain services implementing the record field rules."""
from __future__ import annotations

from .models import CandidateRecord, InventoryRecord, RejectionRecord
from .rules import (
    BANNED_ID_LETTER,
    ID_BODY_END,
    ID_PREFIX_LENGTH,
    INVALID_ID,
    INVALID_MODEL,
    QUANTITY_NOT_POSITIVE,
    ValidationRules,
)


def _is_letter(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def _is_alnum(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


def _is_digit(ch: str) -> bool:
    return ch.isascii() and ch.isdigit()


def _is_banned(ch: str) -> bool:
    return ch.upper() == BANNED_ID_LETTER


def is_valid_id(car_id: str, id_length: int = 10) -> bool:
    """Check the ``LL AAAAAA DD`` shape of a car ID.

    Two letters, six alphanumerics, then digits up to ``id_length``. The letter
    O is not allowed in the first eight positions in either case.
    """
    if len(car_id) != id_length:
        return False
    prefix = car_id[:ID_PREFIX_LENGTH]
    body = car_id[ID_PREFIX_LENGTH:ID_BODY_END]
    suffix = car_id[ID_BODY_END:]
    if not all(_is_letter(ch) and not _is_banned(ch) for ch in prefix):
        return False
    if not all(_is_alnum(ch) and not _is_banned(ch) for ch in body):
        return False
    return all(_is_digit(ch) for ch in suffix)


def is_valid_model(model: str, min_length: int = 3) -> bool:
    if len(model) < min_length:
        return False
    if not _is_letter(model[0]):
        return False
    return all(_is_alnum(ch) for ch in model)


class RecordValidator:
    """Runs every field rule against a candidate and collects all failures."""

    def __init__(self, rules: ValidationRules | None = None) -> None:
        self._rules = rules or ValidationRules()

    def reasons(self, candidate: CandidateRecord) -> list[str]:
        rules = self._rules
        reasons: list[str] = []
        if not is_valid_id(candidate.id, rules.id_length):
            reasons.append(INVALID_ID)
        if not is_valid_model(candidate.model, rules.min_model_length):
            reasons.append(INVALID_MODEL)
        if candidate.quantity <= 0:
            reasons.append(QUANTITY_NOT_POSITIVE)
        if candidate.price <= rules.price_floor:
            reasons.append(rules.price_reason)
        return reasons

    def validate(self, candidate: CandidateRecord) -> InventoryRecord | RejectionRecord:
        reasons = self.reasons(candidate)
        if reasons:
            return RejectionRecord(text=candidate.as_text(), reasons=tuple(reasons))
        return InventoryRecord(
            id=candidate.id,
            model=candidate.model,
            quantity=candidate.quantity,
            price=candidate.price,
        )
