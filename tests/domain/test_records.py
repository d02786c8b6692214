from __future__ import annotations

import dataclasses

import pytest

from fastx_scope.domain.records import ReaderState, Record


def test_identifier_is_first_header_token() -> None:
    # Description keeps the whole header; identifier is its first word.
    record = Record(description="chr1 Homo sapiens chromosome 1", sequence="ACGT")
    assert record.identifier == "chr1"
    assert record.description == "chr1 Homo sapiens chromosome 1"


def test_identifier_of_empty_description_is_empty() -> None:
    assert Record(description="", sequence="A").identifier == ""


def test_record_is_immutable() -> None:
    record = Record(description="human", sequence="ACGT")
    with pytest.raises(dataclasses.FrozenInstanceError):
        record.sequence = "TTTT"  # type: ignore[misc]


def test_len_is_sequence_length() -> None:
    assert len(Record(description="mouse", sequence="CCCAGTGTGTAACA")) == 14


def test_to_fasta_wraps_sequence() -> None:
    record = Record(description="x", sequence="ACGTACGT")
    assert record.to_fasta(3) == ">x\nACG\nTAC\nGT"
    assert record.to_fasta(0) == ">x\nACGTACGT"
    assert record.to_fasta() == ">x\nACGTACGT"


def test_to_fasta_rejects_negative_width() -> None:
    with pytest.raises(ValueError):
        Record(description="x", sequence="A").to_fasta(-1)


def test_reader_state_values_are_stable() -> None:
    assert [state.value for state in ReaderState] == ["UNOPENED", "OPEN", "CLOSED"]
