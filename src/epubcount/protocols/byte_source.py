"""Protocol for random-access byte sources."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ByteSource(Protocol):
    """A seekable, readable view over one file's bytes.

    Matches the subset of the binary file API that ``zipfile`` relies on, so a
    source can be handed straight to ``zipfile.ZipFile``.
    """

    @property
    def kind(self) -> str:
        """Return how the bytes are backed (e.g., 'mmap', 'buffered')."""
        ...

    def read(self, size: int = -1) -> bytes:
        ...

    def seek(self, offset: int, whence: int = 0) -> int:
        ...

    def tell(self) -> int:
        ...

    def seekable(self) -> bool:
        ...

    def close(self) -> None:
        ...
