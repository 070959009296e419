"""Field rules and the reason tokens reported when they fail."""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

BAD_FORMAT = "Bad format"
INVALID_ID = "Invalid ID"
INVALID_MODEL = "Invalid model"
QUANTITY_NOT_POSITIVE = "Quantity must be above zero"

# Letter O is banned from ID prefixes and bodies; it reads too much like 0.
BANNED_ID_LETTER = "O"
ID_PREFIX_LENGTH = 2
ID_BODY_END = 8


def price_floor_reason(price_floor: Decimal) -> str:
    return f"Price must be above ${price_floor:.2f}"


@dataclass(slots=True, frozen=True)
class ValidationRules:
    id_length: int = 10
    min_model_length: int = 3
    price_floor: Decimal = Decimal("24995.00")

    def __post_init__(self) -> None:
        if self.id_length < ID_BODY_END:
            raise ValueError(f"id_length must be at least {ID_BODY_END}, got {self.id_length}")
        if self.min_model_length < 1:
            raise ValueError("min_model_length must be positive")

    @property
    def price_reason(self) -> str:
        return price_floor_reason(self.price_floor)
