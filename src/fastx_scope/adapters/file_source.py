from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

from fastx_scope.adapters.fasta_reader import ScopedRecordReader
from fastx_scope.config.models import ReaderConfig
from fastx_scope.domain.records import Record
from fastx_scope.ports.log_sink import LogSink
from fastx_scope.ports.record_source import RecordSource


def open_binary(path: Path) -> Callable[[], BinaryIO]:
    # Deferred opener: nothing touches the filesystem until the scope calls it.
    def _open() -> BinaryIO:
        return path.open("rb")

    return _open


@dataclass(frozen=True, slots=True)
class FileRecordSource(RecordSource):
    # File-backed RecordSource adapter; the file stays open only while read() is being iterated.
    path: Path
    config: ReaderConfig | None = None
    log_sink: LogSink | None = None

    def read(self) -> Iterator[Record]:
        # Closing the generator early (break, GeneratorExit) still releases the file through the reader scope.
        reader = ScopedRecordReader.from_opener(open_binary(self.path), self.config, log_sink=self.log_sink)
        with reader:
            yield from reader
