from .adapters import FileRecordSource, ScopedRecordReader
from .config import AppConfig, ConfigError, ReaderConfig, load_config
from .domain import (
    AlphabetPolicy,
    InvalidFormatError,
    MalformedRecordError,
    ReaderError,
    ReaderState,
    ReasonCode,
    Record,
    ReleaseError,
    UseAfterCloseError,
)
from .usecases import collect_records, first_record, iter_records, record_options, run_scoped, scoped_reader

__all__ = [
    "AlphabetPolicy",
    "AppConfig",
    "ConfigError",
    "FileRecordSource",
    "InvalidFormatError",
    "MalformedRecordError",
    "ReaderConfig",
    "ReaderError",
    "ReaderState",
    "ReasonCode",
    "Record",
    "ReleaseError",
    "ScopedRecordReader",
    "UseAfterCloseError",
    "collect_records",
    "first_record",
    "iter_records",
    "load_config",
    "record_options",
    "run_scoped",
    "scoped_reader",
]
