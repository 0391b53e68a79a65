"""Memory-mapped byte source."""

import errno
import io
import mmap
from typing import BinaryIO


class MappedSource:
    """Read-only byte source backed by a memory mapping of the whole file.

    Keeps its own position so seeking past the end behaves like a regular
    file (reads return ``b""``) instead of raising like ``mmap.seek`` does.
    """

    kind = "mmap"

    def __init__(self, handle: BinaryIO, mapping: mmap.mmap):
        self._handle = handle
        self._map = mapping
        self._pos = 0
        self.name = getattr(handle, "name", None)

    def __len__(self) -> int:
        return len(self._map)

    def __enter__(self) -> "MappedSource":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return self._map.closed

    def read(self, size: int = -1) -> bytes:
        if self._map.closed:
            raise ValueError("read from closed source")
        if size is None or size < 0:
            end = len(self._map)
        else:
            end = min(self._pos + size, len(self._map))
        if self._pos >= end:
            return b""
        data = self._map[self._pos : end]
        self._pos = end
        return data

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        if whence == io.SEEK_SET:
            target = offset
        elif whence == io.SEEK_CUR:
            target = self._pos + offset
        elif whence == io.SEEK_END:
            target = len(self._map) + offset
        else:
            raise ValueError(f"invalid whence ({whence})")
        if target < 0:
            raise OSError(errno.EINVAL, "Invalid argument")
        self._pos = target
        return self._pos

    def tell(self) -> int:
        return self._pos

    def seekable(self) -> bool:
        return True

    def close(self) -> None:
        """Release the mapping and the underlying descriptor."""
        if not self._map.closed:
            self._map.close()
        self._handle.close()
