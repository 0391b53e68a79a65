"""Protocol for archive content extractors."""

from pathlib import Path
from typing import Protocol, runtime_checkable

from epubcount.models import Extraction
from epubcount.protocols.byte_source import ByteSource


@runtime_checkable
class Ingester(Protocol):
    """Protocol for archive content extractors.

    Implementations handle different container flavours. Uses structural
    subtyping - no inheritance required.
    """

    @property
    def source_type(self) -> str:
        """Return identifier for this archive type (e.g., 'epub')."""
        ...

    def extract(self, source: ByteSource, path: Path) -> Extraction:
        """Return the decoded narrative documents held in the archive.

        Documents that fail to decode are reported in ``Extraction.skipped``.
        ``path`` is only used to label errors.
        """
        ...
