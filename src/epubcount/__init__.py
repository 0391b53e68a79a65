"""epubcount - count the narrative characters in EPUB files."""

from epubcount.config import CountOptions
from epubcount.counters import HtmlTextCounter, count_characters
from epubcount.discovery import discover
from epubcount.ingesters import EpubIngester
from epubcount.models import FileResult, FileTask, RunReport
from epubcount.pipeline import count_file
from epubcount.scheduler import WorkScheduler, partition

__version__ = "0.3.0"

__all__ = [
    "CountOptions",
    "EpubIngester",
    "FileResult",
    "FileTask",
    "HtmlTextCounter",
    "RunReport",
    "WorkScheduler",
    "count_characters",
    "count_file",
    "discover",
    "partition",
]
