from __future__ import annotations

import json
from pathlib import Path

from fastx_scope.config.models import LoggingConfig
from fastx_scope.domain.logging import LogMessage
from fastx_scope.ports.log_sink import LogSink


class NullLogSink(LogSink):
    # Default sink: readers always have somewhere to emit.
    def emit(self, message: LogMessage) -> None:
        _ = message

    def close(self) -> None:
        return None


class StdoutLogSink(LogSink):
    # Compact JSON per line on stdout.
    def emit(self, message: LogMessage) -> None:
        print(json.dumps(log_to_dict(message), separators=(",", ":"), ensure_ascii=False, default=str))

    def close(self) -> None:
        return None


class JsonlLogSink(LogSink):
    # File-backed structured log sink; appends and flushes one message per line.
    def __init__(self, path: Path) -> None:
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._file = self._path.open("a", encoding="utf-8")

    def emit(self, message: LogMessage) -> None:
        payload = json.dumps(log_to_dict(message), separators=(",", ":"), ensure_ascii=False, default=str)
        self._file.write(payload + "\n")
        self._file.flush()

    def close(self) -> None:
        # Close is idempotent.
        if not self._file.closed:
            self._file.close()


def log_to_dict(message: LogMessage) -> dict[str, object]:
    return {
        "level": message.level,
        "message": message.message,
        "timestamp": message.timestamp.isoformat().replace("+00:00", "Z"),
        "fields": message.fields,
    }


def build_log_sink(config: LoggingConfig) -> NullLogSink | StdoutLogSink | JsonlLogSink:
    # Sink selection follows the logging config section.
    if config.sink == "stdout":
        return StdoutLogSink()
    if config.sink == "jsonl":
        assert config.path is not None
        return JsonlLogSink(Path(config.path))
    return NullLogSink()
