from __future__ import annotations

from collections.abc import Callable
from types import TracebackType
from typing import NoReturn

from fastx_scope.adapters.log_sinks import NullLogSink
from fastx_scope.config.models import ReaderConfig
from fastx_scope.domain.alphabet import AlphabetPolicy, get_alphabet
from fastx_scope.domain.errors import (
    InvalidFormatError,
    MalformedRecordError,
    ReleaseError,
    UseAfterCloseError,
)
from fastx_scope.domain.logging import LogMessage
from fastx_scope.domain.reasons import ReasonCode
from fastx_scope.domain.records import ReaderState, Record
from fastx_scope.ports.log_sink import LogSink
from fastx_scope.ports.record_source import ByteSource

HEADER_MARKER = ">"


class ScopedRecordReader:
    """Forward-only FASTA record reader that owns an already-open byte source.

    The reader validates the first header on construction, produces one
    ``Record`` per ``__next__`` call, and closes the source exactly once when
    released. Use it as a context manager, or call ``close()`` on every exit
    path yourself.
    """

    def __init__(
        self,
        source: ByteSource,
        config: ReaderConfig | None = None,
        *,
        log_sink: LogSink | None = None,
    ) -> None:
        self._source = source
        self._config = config or ReaderConfig()
        self._alphabet = get_alphabet(self._config.alphabet)
        self._log = log_sink or NullLogSink()
        self._state = ReaderState.UNOPENED
        self._line_no = 0
        self._records_read = 0
        # Set once a mid-stream read error leaves the source position unknown.
        self._failed = False
        # Pending header line and its 1-based line number; None once the source is exhausted.
        self._lookahead: str | None = None
        self._lookahead_line_no = 0

        self._lookahead = self._read_first_header()
        self._lookahead_line_no = self._line_no
        self._state = ReaderState.OPEN
        self._emit("info", "reader.opened", alphabet=self._alphabet.name, policy=self._config.policy.value)

    @classmethod
    def from_opener(
        cls,
        opener: Callable[[], ByteSource],
        config: ReaderConfig | None = None,
        *,
        log_sink: LogSink | None = None,
    ) -> "ScopedRecordReader":
        # Ownership only passes on successful construction, so the opener's handle is closed here otherwise.
        source = opener()
        try:
            return cls(source, config, log_sink=log_sink)
        except BaseException as exc:
            try:
                source.close()
            except Exception as close_exc:
                exc.add_note(f"closing source after failed construction also failed: {close_exc!r}")
            raise

    @property
    def state(self) -> ReaderState:
        return self._state

    @property
    def closed(self) -> bool:
        return self._state is ReaderState.CLOSED

    @property
    def records_read(self) -> int:
        return self._records_read

    @property
    def line_no(self) -> int:
        return self._line_no

    @property
    def config(self) -> ReaderConfig:
        return self._config

    def read_record(self) -> Record | None:
        """Produce the next record, or None at end of source.

        Raises ``MalformedRecordError`` for a record that violates the
        alphabet policy or has no payload; the reader is already positioned on
        the following record, so the caller may skip it and continue.
        """
        if self._state is ReaderState.CLOSED:
            raise UseAfterCloseError()
        if self._failed:
            raise InvalidFormatError(
                f"source failed after line {self._line_no}", reason=ReasonCode.SOURCE_UNREADABLE
            )
        if self._lookahead is None:
            return None

        header_line_no = self._lookahead_line_no
        description = self._lookahead[len(HEADER_MARKER) :].strip()
        chunks: list[str] = []
        while True:
            try:
                line = self._readline()
            except UnicodeDecodeError as exc:
                bad_line_no = self._line_no
                self._skip_to_next_header()
                self._reject(
                    MalformedRecordError(
                        f"record {description!r} at line {header_line_no} has undecodable "
                        f"{self._config.encoding} text at line {bad_line_no}: {exc.reason}",
                        reason=ReasonCode.UNDECODABLE_RECORD,
                        line_no=header_line_no,
                        description=description,
                    )
                )
            except (OSError, ValueError) as exc:
                self._fail(exc)
            if line is None:
                self._lookahead = None
                break
            if _is_header(line):
                self._lookahead = line.lstrip()
                self._lookahead_line_no = self._line_no
                break
            chunk = "".join(line.split())
            if chunk:
                chunks.append(chunk)
        sequence = "".join(chunks)

        if not sequence and not self._config.allow_empty_sequence:
            self._reject(
                MalformedRecordError(
                    f"record {description!r} at line {header_line_no} has no sequence",
                    reason=ReasonCode.TRUNCATED_RECORD,
                    line_no=header_line_no,
                    description=description,
                )
            )

        if self._config.policy is AlphabetPolicy.STRICT:
            invalid = self._alphabet.invalid_symbols(sequence)
            if invalid:
                self._reject(
                    MalformedRecordError(
                        f"record {description!r} at line {header_line_no} has symbols outside "
                        f"{self._alphabet.name} alphabet: {''.join(sorted(invalid))}",
                        line_no=header_line_no,
                        description=description,
                        invalid_chars=invalid,
                    )
                )

        self._records_read += 1
        return Record(description=description, sequence=sequence)

    def close(self) -> None:
        # Release is idempotent; the reader is CLOSED even when the source fails to close.
        if self._state is ReaderState.CLOSED:
            return
        self._state = ReaderState.CLOSED
        self._lookahead = None
        try:
            self._source.close()
        except Exception as exc:
            self._emit("error", "reader.release_failed", error=repr(exc))
            raise ReleaseError(f"closing source failed: {exc!r}") from exc
        self._emit("info", "reader.closed", records_read=self._records_read)

    def __iter__(self) -> "ScopedRecordReader":
        return self

    def __next__(self) -> Record:
        record = self.read_record()
        if record is None:
            raise StopIteration
        return record

    def __enter__(self) -> "ScopedRecordReader":
        if self._state is ReaderState.CLOSED:
            raise UseAfterCloseError()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if exc is None:
            self.close()
            return
        # An in-flight failure stays the primary error; a release failure rides along as a note.
        try:
            self.close()
        except ReleaseError as release_exc:
            exc.add_note(f"release also failed: {release_exc}")

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(state={self._state.value}, alphabet={self._alphabet.name}, "
            f"records_read={self._records_read})"
        )

    def _read_first_header(self) -> str:
        # Construction-time reads surface every access problem as InvalidFormatError.
        while True:
            try:
                line = self._readline()
            except (OSError, ValueError) as exc:
                raise InvalidFormatError(
                    f"source cannot be read: {exc}", reason=ReasonCode.SOURCE_UNREADABLE
                ) from exc
            if line is None:
                raise InvalidFormatError("source holds no records", reason=ReasonCode.EMPTY_SOURCE)
            if not line.strip():
                continue
            if not _is_header(line):
                raise InvalidFormatError(
                    f"line {self._line_no} does not start with {HEADER_MARKER!r}: {line[:40]!r}"
                )
            return line.lstrip()

    def _skip_to_next_header(self) -> None:
        # Drop the rest of an undecodable record so the reader stays aligned on record boundaries.
        while True:
            try:
                line = self._readline()
            except UnicodeDecodeError:
                continue
            except (OSError, ValueError) as exc:
                self._fail(exc)
            if line is None:
                self._lookahead = None
                return
            if _is_header(line):
                self._lookahead = line.lstrip()
                self._lookahead_line_no = self._line_no
                return

    def _fail(self, exc: BaseException) -> NoReturn:
        # Position in the source is unknown after a read error; no further records are produced.
        self._failed = True
        self._lookahead = None
        self._emit("error", "reader.source_failed", line_no=self._line_no, error=repr(exc))
        raise InvalidFormatError(
            f"source read failed after line {self._line_no}: {exc}", reason=ReasonCode.SOURCE_UNREADABLE
        ) from exc

    def _readline(self) -> str | None:
        raw = self._source.readline()
        if not raw:
            return None
        self._line_no += 1
        text = raw.decode(self._config.encoding) if isinstance(raw, bytes) else raw
        return text.rstrip("\r\n")

    def _reject(self, error: MalformedRecordError) -> NoReturn:
        self._emit(
            "warning",
            "reader.record_rejected",
            reason=error.reason.value,
            line_no=error.line_no,
            description=error.description,
        )
        raise error

    def _emit(self, level: str, message: str, **fields: object) -> None:
        self._log.emit(LogMessage(level=level, message=message, fields=dict(fields)))


def _is_header(line: str) -> bool:
    # Leading whitespace before the marker is tolerated.
    return line.lstrip().startswith(HEADER_MARKER)
