"""Domain models for the car inventory loading pipeline.

These dataclasses capture each stage a raw line moves through: a parsed
candidate, then either an accepted inventory record or an annotated rejection.
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

REASON_SEPARATOR = "; "
LOG_FIELD_SEPARATOR = " - "


@dataclass(frozen=True)
class CandidateRecord:
    """Four typed fields extracted from a raw line, not yet validated."""

    id: str
    model: str
    quantity: int
    price: Decimal

    def as_text(self) -> str:
        return f"{self.id} {self.model} {self.quantity} {self.price}"


@dataclass(frozen=True)
class FormatFailure:
    """A raw line that could not be split into four well-typed fields."""

    line: str
    reason: str


@dataclass(frozen=True)
class InventoryRecord:
    """Accepted inventory entry; only built once every field rule passes."""

    id: str
    model: str
    quantity: int
    price: Decimal


@dataclass(frozen=True)
class RejectionRecord:
    """A line that failed parsing or validation, with every reason found."""

    text: str
    reasons: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.reasons:
            raise ValueError("A rejection needs at least one reason")

    @property
    def reason_text(self) -> str:
        return "".join(f"{reason}{REASON_SEPARATOR}" for reason in self.reasons).rstrip()

    def to_log_line(self) -> str:
        return f"{self.text}{LOG_FIELD_SEPARATOR}{self.reason_text}"
