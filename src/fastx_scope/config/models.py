from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from fastx_scope.domain.alphabet import ALPHABETS, AlphabetPolicy

# Config models map YAML sections to typed structures.


class ReaderConfig(BaseModel):
    # Parsing policy for a single ScopedRecordReader.
    model_config = ConfigDict(extra="forbid", frozen=True)
    alphabet: str = "dna"
    policy: AlphabetPolicy = AlphabetPolicy.STRICT
    # Header with no payload lines: error when false, empty-sequence record when true.
    allow_empty_sequence: bool = False
    encoding: str = "utf-8"

    @field_validator("alphabet")
    @classmethod
    def _known_alphabet(cls, value: str) -> str:
        name = value.lower()
        if name not in ALPHABETS:
            raise ValueError(f"alphabet must be one of {sorted(ALPHABETS)}")
        return name

    @field_validator("encoding")
    @classmethod
    def _non_empty_encoding(cls, value: str) -> str:
        if not value:
            raise ValueError("encoding must be a non-empty string")
        return value


class LoggingConfig(BaseModel):
    # Structured log sink selection.
    model_config = ConfigDict(extra="forbid")
    sink: Literal["none", "stdout", "jsonl"] = "none"
    path: str | None = None

    @model_validator(mode="after")
    def _jsonl_requires_path(self) -> "LoggingConfig":
        if self.sink == "jsonl" and not self.path:
            raise ValueError("logging.path is required when logging.sink is jsonl")
        return self


class AppConfig(BaseModel):
    # Root config document.
    model_config = ConfigDict(extra="forbid")
    version: int = 1
    reader: ReaderConfig = Field(default_factory=ReaderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
