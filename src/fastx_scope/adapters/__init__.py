from .fasta_reader import ScopedRecordReader
from .file_source import FileRecordSource, open_binary
from .log_sinks import JsonlLogSink, NullLogSink, StdoutLogSink, build_log_sink

# Public adapter exports are optional but make wiring simpler.
__all__ = [
    "FileRecordSource",
    "JsonlLogSink",
    "NullLogSink",
    "ScopedRecordReader",
    "StdoutLogSink",
    "build_log_sink",
    "open_binary",
]
