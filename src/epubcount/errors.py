"""Exception hierarchy for epubcount.

Per-entry and per-file errors are recoverable: the pipeline records them and
moves on to the next unit of work. Only argument errors (raised by argparse)
end a run early.
"""

from pathlib import Path
from typing import Optional


class EpubCountError(Exception):
    """Base class for all epubcount errors."""

    def __init__(self, path: Optional[Path | str], message: str):
        self.path = Path(path) if path is not None else None
        self.message = message
        super().__init__(f"{path}: {message}" if path is not None else message)


class PathNotFoundError(EpubCountError):
    """A supplied path does not exist."""

    def __init__(self, path: Path | str):
        super().__init__(path, "no such file or directory")


class OpenError(EpubCountError):
    """A path exists but cannot be opened as a regular file."""


class ArchiveFormatError(EpubCountError):
    """A file's bytes are not a valid archive container."""


class ContentDecodeError(EpubCountError):
    """One archive entry cannot be read as text (damaged payload or bad encoding)."""

    def __init__(self, path: Path | str, entry: str, message: str):
        self.entry = entry
        super().__init__(path, f"{entry}: {message}")


class NoFilesFoundError(EpubCountError):
    """Discovery produced no candidate files. Informational, not a failure."""

    def __init__(self, extension: str):
        self.extension = extension
        super().__init__(None, f"No {extension} files found")
