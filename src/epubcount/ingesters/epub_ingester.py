"""Ingester for EPUB (ZIP) archives."""

import logging
import posixpath
import zipfile
import zlib
from pathlib import Path
from typing import Iterable, Iterator

from epubcount.config import CONTENT_SUFFIXES, RESERVED_NAMES
from epubcount.errors import ArchiveFormatError, ContentDecodeError
from epubcount.models import ArchiveEntry, ContentDocument, Extraction, SkippedEntry
from epubcount.protocols import ByteSource

logger = logging.getLogger(__name__)

# Errors zipfile raises while inflating a damaged member
_ENTRY_READ_ERRORS = (zipfile.BadZipFile, zlib.error, EOFError, OSError)


def is_content_entry(
    name: str,
    suffixes: Iterable[str] = CONTENT_SUFFIXES,
    reserved_names: Iterable[str] = RESERVED_NAMES,
) -> bool:
    """Check if an archive entry holds narrative markup.

    An entry qualifies when its name ends with one of ``suffixes`` and its
    base name is not a reserved navigation document. Both checks are
    case-sensitive.
    """
    if not name.endswith(tuple(suffixes)):
        return False
    return posixpath.basename(name) not in set(reserved_names)


class EpubIngester:
    """Extracts narrative XHTML/HTML documents from an EPUB archive."""

    source_type = "epub"

    def __init__(
        self,
        content_suffixes: Iterable[str] = CONTENT_SUFFIXES,
        reserved_names: Iterable[str] = RESERVED_NAMES,
    ):
        self.content_suffixes = tuple(content_suffixes)
        self.reserved_names = frozenset(reserved_names)

    def entries(self, archive: zipfile.ZipFile) -> Iterator[ArchiveEntry]:
        """Yield the archive's file entries in directory order."""
        for info in archive.infolist():
            if info.is_dir():
                continue
            yield ArchiveEntry(
                name=info.filename,
                size=info.file_size,
                compressed_size=info.compress_size,
                offset=info.header_offset,
                info=info,
            )

    def matches(self, entry: ArchiveEntry) -> bool:
        return is_content_entry(entry.name, self.content_suffixes, self.reserved_names)

    def extract(self, source: ByteSource, path: Path) -> Extraction:
        """Decode every matching entry of the archive.

        A matching entry whose payload is damaged, unsupported or not UTF-8
        is recorded in ``Extraction.skipped``; the other entries still count.

        Args:
            source: Byte source positioned anywhere in the archive file
            path: Path of the archive, used to label errors

        Returns:
            Extraction holding the decoded documents and any skipped entries

        Raises:
            ArchiveFormatError: If the container's directory cannot be parsed
        """
        try:
            archive = zipfile.ZipFile(source, "r")
        except (zipfile.BadZipFile, EOFError, OSError) as exc:
            raise ArchiveFormatError(path, f"not a valid archive ({exc})") from exc

        extraction = Extraction()
        with archive:
            for entry in self.entries(archive):
                if not self.matches(entry):
                    continue

                try:
                    text = self._decode(archive, entry, path)
                except ContentDecodeError as error:
                    logger.debug(f"Skipping {error}")
                    extraction.skipped.append(SkippedEntry(name=entry.name, reason=error.message))
                    continue

                extraction.documents.append(ContentDocument(name=entry.name, text=text))

        return extraction

    def _decode(self, archive: zipfile.ZipFile, entry: ArchiveEntry, path: Path) -> str:
        try:
            raw = archive.read(entry.info or entry.name)
        except (RuntimeError, NotImplementedError) as exc:
            # Encrypted members and unknown compression methods
            raise ContentDecodeError(path, entry.name, f"unsupported entry ({exc})") from exc
        except _ENTRY_READ_ERRORS as exc:
            raise ContentDecodeError(path, entry.name, f"corrupt entry ({exc})") from exc

        try:
            return raw.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise ContentDecodeError(path, entry.name, f"invalid UTF-8 at byte {exc.start}") from exc
