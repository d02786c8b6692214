from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TypeVar

from fastx_scope.adapters.fasta_reader import ScopedRecordReader
from fastx_scope.adapters.file_source import open_binary
from fastx_scope.adapters.log_sinks import NullLogSink
from fastx_scope.config.models import ReaderConfig
from fastx_scope.domain.errors import InvalidFormatError, MalformedRecordError
from fastx_scope.domain.logging import LogMessage
from fastx_scope.domain.reasons import ReasonCode
from fastx_scope.domain.records import Record
from fastx_scope.ports.log_sink import LogSink
from fastx_scope.ports.record_source import ByteSource

T = TypeVar("T")

Opener = Callable[[], ByteSource]


def run_scoped(
    opener: Opener,
    body: Callable[[ScopedRecordReader], T],
    config: ReaderConfig | None = None,
    *,
    log_sink: LogSink | None = None,
) -> T:
    """Open a source, hand a reader over it to ``body``, and always release it.

    The reader is released whether ``body`` returns or raises. A failure from
    ``body`` propagates after cleanup; if releasing fails as well, the body
    failure stays the raised exception and carries the release failure as a
    note. When only the release fails, ``ReleaseError`` is raised.
    """
    sink = log_sink or NullLogSink()
    reader = ScopedRecordReader.from_opener(opener, config, log_sink=sink)
    with reader:
        try:
            return body(reader)
        except Exception as exc:
            sink.emit(LogMessage(level="error", message="scope.body_failed", fields={"error": repr(exc)}))
            raise


@contextmanager
def scoped_reader(
    opener: Opener,
    config: ReaderConfig | None = None,
    *,
    log_sink: LogSink | None = None,
) -> Iterator[ScopedRecordReader]:
    # Statement form of run_scoped: `with scoped_reader(opener) as reader: ...`
    reader = ScopedRecordReader.from_opener(opener, config, log_sink=log_sink)
    with reader:
        yield reader


def iter_records(
    reader: ScopedRecordReader,
    *,
    skip_malformed: bool = False,
    on_skip: Callable[[MalformedRecordError], None] | None = None,
) -> Iterator[Record]:
    # Record-level failures either abort (default) or are reported to on_skip and skipped.
    while True:
        try:
            record = reader.read_record()
        except MalformedRecordError as exc:
            if not skip_malformed:
                raise
            if on_skip is not None:
                on_skip(exc)
            continue
        if record is None:
            return
        yield record


def collect_records(
    target: Path | str | Opener,
    config: ReaderConfig | None = None,
    *,
    skip_malformed: bool = False,
    log_sink: LogSink | None = None,
) -> list[Record]:
    """Read every record of ``target`` into a list; the source is closed on return."""
    return run_scoped(
        _as_opener(target),
        lambda reader: list(iter_records(reader, skip_malformed=skip_malformed)),
        config,
        log_sink=log_sink,
    )


def first_record(
    target: Path | str | Opener,
    config: ReaderConfig | None = None,
    *,
    log_sink: LogSink | None = None,
) -> Record:
    record = run_scoped(_as_opener(target), lambda reader: reader.read_record(), config, log_sink=log_sink)
    if record is None:
        raise InvalidFormatError("source holds no records", reason=ReasonCode.EMPTY_SOURCE)
    return record


def record_options(records: Iterable[Record]) -> list[tuple[int, str]]:
    # 1-based (index, description) pairs for selection lists.
    return [(idx, record.description) for idx, record in enumerate(records, start=1)]


def _as_opener(target: Path | str | Opener) -> Opener:
    if isinstance(target, (str, Path)):
        return open_binary(Path(target))
    return target
