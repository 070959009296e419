"""Text-file backed repositories for car records and rejections."""
from __future__ import annotations

import io
from pathlib import Path
from typing import Iterator, Sequence

from car_inventory.domain.errors import InputFileEmptyError, InputFileMissingError, RejectionLogError
from car_inventory.domain.models import RejectionRecord
from car_inventory.domain.repositories import RecordSource, RejectionLog

DEFAULT_ENCODING = "utf-8"
# Undecodable bytes become U+FFFD, which no field rule accepts.
DECODE_ERRORS = "replace"


class TextRecordSource(RecordSource):
    """Reads record lines lazily from a file path or from uploaded bytes."""

    def __init__(self, source: Path | str | bytes, name: str | None = None) -> None:
        if isinstance(source, bytes):
            self._path = None
            self._content = source
            self._name = name or "<upload>"
        else:
            self._path = Path(source)
            self._content = None
            self._name = name or str(self._path)

    def iter_lines(self) -> Iterator[str]:
        if self._content is not None:
            if not self._content:
                raise InputFileEmptyError(Path(self._name))
            with io.StringIO(self._content.decode(DEFAULT_ENCODING, errors=DECODE_ERRORS)) as stream:
                yield from stream
            return

        if not self._path.is_file():
            raise InputFileMissingError(self._path)
        if self._path.stat().st_size == 0:
            raise InputFileEmptyError(self._path)
        with self._path.open("r", encoding=DEFAULT_ENCODING, errors=DECODE_ERRORS) as stream:
            yield from stream


class TextFileRejectionLog(RejectionLog):
    """One ``<text> - <reasons>`` line per rejected record."""

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def reset(self) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text("", encoding=DEFAULT_ENCODING)
        except OSError as exc:
            raise RejectionLogError(self._path) from exc

    def append(self, rejection: RejectionRecord) -> None:
        try:
            with self._path.open("a", encoding=DEFAULT_ENCODING) as stream:
                stream.write(rejection.to_log_line() + "\n")
        except OSError as exc:
            raise RejectionLogError(self._path) from exc

    def read_lines(self) -> Sequence[str] | None:
        if not self._path.is_file():
            return None
        return self._path.read_text(encoding=DEFAULT_ENCODING, errors=DECODE_ERRORS).splitlines()

    def read_bytes(self) -> bytes:
        if not self._path.is_file():
            return b""
        return self._path.read_bytes()
