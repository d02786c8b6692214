from .scoped import (
    collect_records,
    first_record,
    iter_records,
    record_options,
    run_scoped,
    scoped_reader,
)

__all__ = [
    "collect_records",
    "first_record",
    "iter_records",
    "record_options",
    "run_scoped",
    "scoped_reader",
]
