"""Buffered file byte source, used when mapping is unavailable."""

import io
from typing import BinaryIO


class BufferedSource:
    """Byte source over a regular buffered file handle."""

    kind = "buffered"

    def __init__(self, handle: BinaryIO):
        self._handle = handle
        self.name = getattr(handle, "name", None)

    def __enter__(self) -> "BufferedSource":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return self._handle.closed

    def read(self, size: int = -1) -> bytes:
        return self._handle.read(size)

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        return self._handle.seek(offset, whence)

    def tell(self) -> int:
        return self._handle.tell()

    def seekable(self) -> bool:
        return True

    def close(self) -> None:
        self._handle.close()
