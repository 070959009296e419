"""Repository interfaces anchoring the domain layer."""
from __future__ import annotations

from typing import Iterator, Protocol, Sequence

from .models import RejectionRecord


class RecordSource(Protocol):
    """Provides raw record lines, one at a time, in file order."""

    def iter_lines(self) -> Iterator[str]:
        ...


class RejectionLog(Protocol):
    """Append-only store for rejected lines, reset at the start of each run."""

    def reset(self) -> None:
        ...

    def append(self, rejection: RejectionRecord) -> None:
        ...

    def read_lines(self) -> Sequence[str] | None:
        ...
