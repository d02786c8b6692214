from .log_sink import LogSink
from .record_source import ByteSource, RecordSource

# Public port exports keep wiring explicit at composition time.
__all__ = ["ByteSource", "LogSink", "RecordSource"]
