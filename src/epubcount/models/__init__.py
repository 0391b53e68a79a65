"""Data models for epubcount."""

from epubcount.models.document import ArchiveEntry, ContentDocument, Extraction, SkippedEntry
from epubcount.models.task import FileFailure, FileResult, FileTask, RunReport

__all__ = [
    "ArchiveEntry",
    "ContentDocument",
    "Extraction",
    "SkippedEntry",
    "FileTask",
    "FileResult",
    "FileFailure",
    "RunReport",
]
