"""Central configuration for the car inventory package."""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path

from car_inventory.domain.rules import ValidationRules

INPUT_FILE = Path("car_records.txt")
REJECT_LOG_FILE = Path("invalid_records.txt")
MAX_RECORDS = 100
ID_LENGTH = 10
MIN_MODEL_LENGTH = 3
MIN_PRICE = Decimal("24995.00")


@dataclass(slots=True, frozen=True)
class Settings:
    input_path: Path
    reject_log_path: Path
    max_records: int
    id_length: int
    min_model_length: int
    price_floor: Decimal
    log_level: str

    def rules(self) -> ValidationRules:
        return ValidationRules(
            id_length=self.id_length,
            min_model_length=self.min_model_length,
            price_floor=self.price_floor,
        )


SETTINGS = Settings(
    input_path=INPUT_FILE,
    reject_log_path=REJECT_LOG_FILE,
    max_records=MAX_RECORDS,
    id_length=ID_LENGTH,
    min_model_length=MIN_MODEL_LENGTH,
    price_floor=MIN_PRICE,
    log_level="WARNING",
)
