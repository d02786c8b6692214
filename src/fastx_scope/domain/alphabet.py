from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class AlphabetPolicy(str, Enum):
    # strict rejects records with foreign symbols; permissive passes payload through.
    STRICT = "strict"
    PERMISSIVE = "permissive"


@dataclass(frozen=True, slots=True)
class Alphabet:
    name: str
    # Empty symbol set means "accept anything".
    symbols: frozenset[str]

    def invalid_symbols(self, sequence: str) -> frozenset[str]:
        """Return the symbols of ``sequence`` outside this alphabet (case-insensitive)."""
        if not self.symbols:
            return frozenset()
        return frozenset(sequence.upper()) - self.symbols


# IUPAC nucleotide ambiguity codes plus gap.
_NUCLEOTIDE_AMBIGUITY = "RYSWKMBDHVN-"

ALPHABETS: dict[str, Alphabet] = {
    "dna": Alphabet("dna", frozenset("ACGT" + _NUCLEOTIDE_AMBIGUITY)),
    "rna": Alphabet("rna", frozenset("ACGU" + _NUCLEOTIDE_AMBIGUITY)),
    "protein": Alphabet("protein", frozenset("ACDEFGHIKLMNPQRSTVWYBZXJUO*-")),
    "any": Alphabet("any", frozenset()),
}


def get_alphabet(name: str) -> Alphabet:
    try:
        return ALPHABETS[name.lower()]
    except KeyError as exc:
        raise ValueError(f"Unknown alphabet: {name!r} (expected one of {sorted(ALPHABETS)})") from exc
