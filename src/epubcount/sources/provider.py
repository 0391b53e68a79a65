"""Open a file as the cheapest available byte source."""

import logging
import mmap
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from epubcount.errors import OpenError
from epubcount.protocols import ByteSource
from epubcount.sources.buffered import BufferedSource
from epubcount.sources.mapped import MappedSource

logger = logging.getLogger(__name__)


def _open(path: Path) -> ByteSource:
    if not path.exists():
        raise OpenError(path, "no such file")
    if not path.is_file():
        raise OpenError(path, "not a regular file")

    try:
        handle = open(path, "rb")
    except OSError as exc:
        raise OpenError(path, exc.strerror or str(exc)) from exc

    # Empty files and some filesystems cannot be mapped
    try:
        mapping = mmap.mmap(handle.fileno(), 0, access=mmap.ACCESS_READ)
    except Exception as exc:
        logger.debug(f"{path}: mmap unavailable ({exc}), using buffered reads")
        return BufferedSource(handle)

    return MappedSource(handle, mapping)


@contextmanager
def open_byte_source(path: Path | str) -> Iterator[ByteSource]:
    """Open ``path`` for random-access reads, preferring a memory mapping.

    Args:
        path: Path to an existing regular file

    Yields:
        A MappedSource, or a BufferedSource if mapping failed

    Raises:
        OpenError: If the path cannot be opened as a regular file
    """
    source = _open(Path(path))
    try:
        yield source
    finally:
        source.close()
