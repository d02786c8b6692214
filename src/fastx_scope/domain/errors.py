from __future__ import annotations

from .reasons import ReasonCode


class ReaderError(Exception):
    # Base for all reader failures; reason is a stable ReasonCode.
    def __init__(self, reason: ReasonCode, detail: str = "") -> None:
        super().__init__(f"{reason.value}: {detail}" if detail else reason.value)
        self.reason = reason
        self.detail = detail


class InvalidFormatError(ReaderError, ValueError):
    # Source does not start with a record header, is empty, or cannot be read.
    def __init__(self, detail: str = "", *, reason: ReasonCode = ReasonCode.INVALID_FORMAT) -> None:
        super().__init__(reason, detail)


class MalformedRecordError(ReaderError, ValueError):
    # Raised per record; the reader has already advanced past the offending record.
    def __init__(
        self,
        detail: str = "",
        *,
        reason: ReasonCode = ReasonCode.MALFORMED_RECORD,
        line_no: int | None = None,
        description: str = "",
        invalid_chars: frozenset[str] = frozenset(),
    ) -> None:
        super().__init__(reason, detail)
        self.line_no = line_no
        self.description = description
        self.invalid_chars = invalid_chars


class UseAfterCloseError(ReaderError, RuntimeError):
    # Programming error: operation attempted on a released reader.
    def __init__(self, detail: str = "reader is closed") -> None:
        super().__init__(ReasonCode.USE_AFTER_CLOSE, detail)


class ReleaseError(ReaderError):
    # Closing the underlying source failed.
    def __init__(self, detail: str = "") -> None:
        super().__init__(ReasonCode.RELEASE_FAILED, detail)
