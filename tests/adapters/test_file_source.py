from __future__ import annotations

from pathlib import Path

import pytest

from fastx_scope.adapters.file_source import FileRecordSource, open_binary
from fastx_scope.config.models import ReaderConfig
from fastx_scope.domain.alphabet import AlphabetPolicy
from fastx_scope.domain.errors import InvalidFormatError
from fastx_scope.domain.logging import LogMessage
from fastx_scope.domain.records import Record
from fastx_scope.ports.record_source import RecordSource

EXAMPLE = ">human\nACCGTGATGTAGAGACCACGGGCCC\n>mouse\nCCCAGTGTGTAACA\n>cat\nAGTGTGTGTTGTGCCCG\n"


class _ListSink:
    def __init__(self) -> None:
        self.messages: list[LogMessage] = []

    def emit(self, message: LogMessage) -> None:
        self.messages.append(message)


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "example.fasta"
    path.write_text(text, encoding="utf-8")
    return path


def test_open_binary_defers_opening(tmp_path: Path) -> None:
    # Building the opener must not touch the filesystem.
    opener = open_binary(tmp_path / "missing.fasta")
    with pytest.raises(FileNotFoundError):
        opener()


def test_open_binary_returns_binary_handle(tmp_path: Path) -> None:
    handle = open_binary(_write(tmp_path, EXAMPLE))()
    try:
        assert handle.readline() == b">human\n"
    finally:
        handle.close()


def test_file_record_source_implements_port(tmp_path: Path) -> None:
    assert isinstance(FileRecordSource(tmp_path / "x.fasta"), RecordSource)


def test_file_record_source_reads_records_in_order(tmp_path: Path) -> None:
    source = FileRecordSource(_write(tmp_path, EXAMPLE))
    assert [record.description for record in source.read()] == ["human", "mouse", "cat"]


def test_file_record_source_is_rereadable(tmp_path: Path) -> None:
    # Each read() opens its own scope over the file.
    source = FileRecordSource(_write(tmp_path, EXAMPLE))
    assert list(source.read()) == list(source.read())


def test_file_record_source_releases_on_early_close(tmp_path: Path) -> None:
    sink = _ListSink()
    records = FileRecordSource(_write(tmp_path, EXAMPLE), log_sink=sink).read()
    assert next(iter(records)) == Record(description="human", sequence="ACCGTGATGTAGAGACCACGGGCCC")
    records.close()  # type: ignore[attr-defined]
    assert sink.messages[-1].message == "reader.closed"
    assert sink.messages[-1].fields == {"records_read": 1}


def test_file_record_source_uses_config(tmp_path: Path) -> None:
    path = _write(tmp_path, ">x\nACGZ\n")
    config = ReaderConfig(policy=AlphabetPolicy.PERMISSIVE)
    assert list(FileRecordSource(path, config=config).read()) == [Record(description="x", sequence="ACGZ")]


def test_file_record_source_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        list(FileRecordSource(tmp_path / "missing.fasta").read())


def test_file_record_source_invalid_file_raises(tmp_path: Path) -> None:
    with pytest.raises(InvalidFormatError):
        list(FileRecordSource(_write(tmp_path, "hello\n")).read())
