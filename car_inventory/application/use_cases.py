"""Application services orchestrating the inventory load workflow."""
from __future__ import annotations

from contextlib import closing
from dataclasses import dataclass, field
from datetime import datetime, timezone

from loguru import logger

from car_inventory.domain.models import FormatFailure, InventoryRecord, RejectionRecord
from car_inventory.domain.repositories import RecordSource, RejectionLog
from car_inventory.domain.results import LoadResult, LoadSummary
from car_inventory.domain.services import RecordValidator
from car_inventory.infrastructure.parsing.records import RecordParser

DEFAULT_MAX_RECORDS = 100


@dataclass(slots=True)
class LoadInventoryContext:
    source: RecordSource
    rejection_log: RejectionLog
    validator: RecordValidator
    parser: RecordParser = field(default_factory=RecordParser)
    max_records: int = DEFAULT_MAX_RECORDS


class LoadInventoryUseCase:
    """Parses and validates every line until input or capacity runs out.

    The rejection log is reset before the source is opened.
    """

    def __init__(self, context: LoadInventoryContext) -> None:
        if context.max_records < 1:
            raise ValueError(f"max_records must be positive, got {context.max_records}")
        self._context = context

    def execute(self) -> LoadResult:
        context = self._context
        context.rejection_log.reset()

        accepted: list[InventoryRecord] = []
        rejected: list[RejectionRecord] = []
        lines_read = 0
        format_failures = 0
        capacity_reached = False

        with closing(context.source.iter_lines()) as lines:
            for line in lines:
                if len(accepted) >= context.max_records:
                    capacity_reached = True
                    logger.info("Capacity of {} records reached; remaining lines skipped", context.max_records)
                    break
                lines_read += 1

                parsed = context.parser.parse(line)
                if isinstance(parsed, FormatFailure):
                    format_failures += 1
                    outcome: InventoryRecord | RejectionRecord = RejectionRecord(
                        text=parsed.line,
                        reasons=(parsed.reason,),
                    )
                else:
                    outcome = context.validator.validate(parsed)

                if isinstance(outcome, InventoryRecord):
                    accepted.append(outcome)
                    continue
                rejected.append(outcome)
                context.rejection_log.append(outcome)
                logger.debug("Rejected line {}: {}", lines_read, outcome.to_log_line())

        summary = LoadSummary(
            lines_read=lines_read,
            accepted=len(accepted),
            rejected=len(rejected),
            format_failures=format_failures,
            max_records=context.max_records,
            capacity_reached=capacity_reached,
            generated_at=datetime.now(timezone.utc),
        )
        logger.info(
            "Loaded {} lines: {} accepted, {} rejected ({} bad format)",
            summary.lines_read,
            summary.accepted,
            summary.rejected,
            summary.format_failures,
        )
        return LoadResult(summary=summary, accepted=tuple(accepted), rejected=tuple(rejected))
