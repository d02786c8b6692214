from .alphabet import ALPHABETS, Alphabet, AlphabetPolicy, get_alphabet
from .errors import (
    InvalidFormatError,
    MalformedRecordError,
    ReaderError,
    ReleaseError,
    UseAfterCloseError,
)
from .logging import LogMessage
from .reasons import ReasonCode
from .records import ReaderState, Record

# Public domain exports keep imports explicit across layers.
__all__ = [
    "ALPHABETS",
    "Alphabet",
    "AlphabetPolicy",
    "InvalidFormatError",
    "LogMessage",
    "MalformedRecordError",
    "ReaderError",
    "ReaderState",
    "ReasonCode",
    "Record",
    "ReleaseError",
    "UseAfterCloseError",
    "get_alphabet",
]
