from __future__ import annotations

import pytest

from fastx_scope.domain.logging import LogMessage
from fastx_scope.ports.log_sink import LogSink
from fastx_scope.ports.record_source import RecordSource


def test_record_source_port_default_raises() -> None:
    # Direct port calls without an adapter are wiring errors (port methods raise by default).
    class _PortOnly(RecordSource):
        pass

    port = _PortOnly()  # type: ignore[misc]
    with pytest.raises(NotImplementedError):
        list(port.read())


def test_log_sink_port_default_raises() -> None:
    class _PortOnly(LogSink):
        pass

    port = _PortOnly()  # type: ignore[misc]
    with pytest.raises(NotImplementedError):
        port.emit(LogMessage(level="info", message="x"))
