"""Models for archive entries and the documents extracted from them."""

import zipfile
from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class ArchiveEntry:
    """A named record in an archive's central directory.

    ``info`` points at the exact directory record, so entries sharing a name
    are still read separately.
    """

    name: str
    size: int
    compressed_size: int
    offset: int
    info: Optional[zipfile.ZipInfo] = field(default=None, compare=False, repr=False)


@dataclass
class ContentDocument:
    """Decoded text of one matching archive entry."""

    name: str
    text: str


@dataclass(frozen=True)
class SkippedEntry:
    """A matching entry that could not be read or decoded."""

    name: str
    reason: str


@dataclass
class Extraction:
    """Everything pulled out of one archive, in directory order."""

    documents: list[ContentDocument] = field(default_factory=list)
    skipped: list[SkippedEntry] = field(default_factory=list)
