from __future__ import annotations

from typing import Iterable, Protocol, runtime_checkable

from fastx_scope.domain.records import Record


class ByteSource(Protocol):
    # Minimal handle surface a reader needs: line reads and release.
    def readline(self) -> bytes | str: ...

    def close(self) -> None: ...


# RecordSource port defines how parsed records enter a caller.
@runtime_checkable
class RecordSource(Protocol):
    def read(self) -> Iterable[Record]:
        """Yield Record values in file order, releasing the source when iteration ends."""
        # Port contract has no implementation; calling it directly is a wiring error.
        raise NotImplementedError("RecordSource is a port; use a concrete adapter.")
