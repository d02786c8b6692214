from __future__ import annotations

from pathlib import Path

import pytest

from fastx_scope import (
    FileRecordSource,
    InvalidFormatError,
    Record,
    ScopedRecordReader,
    UseAfterCloseError,
    collect_records,
    record_options,
    run_scoped,
)
from fastx_scope.adapters.file_source import open_binary


def _example_path() -> Path:
    return Path(__file__).resolve().parents[1] / "data" / "example.fasta"


def test_collect_example_file() -> None:
    records = collect_records(_example_path())
    assert records == [
        Record(description="human", sequence="ACCGTGATGTAGAGACCACGGGCCC"),
        Record(description="mouse", sequence="CCCAGTGTGTAACA"),
        Record(description="cat", sequence="AGTGTGTGTTGTGCCCG"),
    ]
    assert record_options(records) == [(1, "human"), (2, "mouse"), (3, "cat")]


def test_reader_returned_from_closed_scope_cannot_be_iterated() -> None:
    # Returning the reader out of its scope leaves a released reader behind; iterating it fails loudly.
    reader = run_scoped(open_binary(_example_path()), lambda r: r)
    assert reader.closed
    with pytest.raises(UseAfterCloseError):
        for _ in reader:
            pass


def test_manual_open_iterate_close() -> None:
    reader = ScopedRecordReader(_example_path().open("rb"))
    try:
        first = next(reader)
    finally:
        reader.close()
    assert first.identifier == "human"
    assert first.sequence == "ACCGTGATGTAGAGACCACGGGCCC"


def test_file_handle_reused_after_scope_is_rejected() -> None:
    handle = _example_path().open("rb")
    assert len(run_scoped(lambda: handle, list)) == 3
    assert handle.closed
    with pytest.raises(InvalidFormatError):
        ScopedRecordReader(handle)


def test_file_record_source_over_example() -> None:
    assert [r.identifier for r in FileRecordSource(_example_path()).read()] == ["human", "mouse", "cat"]
