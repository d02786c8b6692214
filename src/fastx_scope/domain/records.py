from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ReaderState(str, Enum):
    # Reader lifecycle; CLOSED is terminal.
    UNOPENED = "UNOPENED"
    OPEN = "OPEN"
    CLOSED = "CLOSED"


@dataclass(frozen=True, slots=True)
class Record:
    # One header + payload unit; description is the full header text after the marker.
    description: str
    sequence: str

    @property
    def identifier(self) -> str:
        # First whitespace-delimited token of the header.
        parts = self.description.split(maxsplit=1)
        return parts[0] if parts else ""

    def __len__(self) -> int:
        return len(self.sequence)

    def to_fasta(self, width: int = 60) -> str:
        """Render the record as FASTA text, wrapping the sequence at ``width`` (0 disables wrapping)."""
        if width < 0:
            raise ValueError("width must be non-negative")
        lines = [">" + self.description]
        if width == 0 or len(self.sequence) <= width:
            lines.append(self.sequence)
        else:
            lines.extend(self.sequence[i : i + width] for i in range(0, len(self.sequence), width))
        return "\n".join(lines)
