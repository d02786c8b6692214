from __future__ import annotations

from typing import Protocol, runtime_checkable

from fastx_scope.domain.logging import LogMessage


# LogSink port receives structured reader/scope lifecycle messages.
@runtime_checkable
class LogSink(Protocol):
    def emit(self, message: LogMessage) -> None:
        """Deliver one structured log message."""
        # Port contract has no implementation; calling it directly is a wiring error.
        raise NotImplementedError("LogSink is a port; use a concrete adapter.")
