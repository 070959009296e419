"""Domain-level results for an inventory load."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Sequence

from .models import InventoryRecord, RejectionRecord


@dataclass(frozen=True)
class LoadSummary:
    lines_read: int
    accepted: int
    rejected: int
    format_failures: int
    max_records: int
    capacity_reached: bool
    generated_at: datetime


@dataclass(frozen=True)
class LoadResult:
    summary: LoadSummary
    accepted: Sequence[InventoryRecord] = field(default_factory=tuple)
    rejected: Sequence[RejectionRecord] = field(default_factory=tuple)

    @property
    def capacity_reached(self) -> bool:
        return self.summary.capacity_reached

    def has_rejections(self) -> bool:
        return bool(self.rejected)
