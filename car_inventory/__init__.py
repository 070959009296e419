"""Car inventory record validation toolkit."""
from car_inventory.application.use_cases import LoadInventoryContext, LoadInventoryUseCase
from car_inventory.domain.services import RecordValidator, is_valid_id, is_valid_model
from car_inventory.infrastructure.parsing.records import RecordParser
from car_inventory.infrastructure.repositories.text_repositories import (
    TextFileRejectionLog,
    TextRecordSource,
)

__all__ = [
    "LoadInventoryUseCase",
    "LoadInventoryContext",
    "RecordParser",
    "RecordValidator",
    "is_valid_id",
    "is_valid_model",
    "TextRecordSource",
    "TextFileRejectionLog",
]
