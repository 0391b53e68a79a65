"""Per-file counting pipeline: byte source -> archive extraction -> counting."""

import logging
from pathlib import Path
from typing import Optional

from epubcount.config import CountOptions
from epubcount.counters import HtmlTextCounter
from epubcount.errors import EpubCountError
from epubcount.ingesters import EpubIngester
from epubcount.models import FileFailure, FileResult, FileTask
from epubcount.protocols import CountingStrategy, Ingester
from epubcount.sources import open_byte_source

logger = logging.getLogger(__name__)


def count_task(
    task: FileTask,
    options: CountOptions,
    counter: Optional[CountingStrategy] = None,
    ingester: Optional[Ingester] = None,
) -> FileResult:
    """Count one file, raising on failure.

    Args:
        task: The file to process
        options: Run options (filter names, parser)
        counter: Counting strategy, defaults to HtmlTextCounter
        ingester: Archive extractor, defaults to EpubIngester

    Returns:
        FileResult with the summed count of every matching document

    Raises:
        OpenError: If the file cannot be opened
        ArchiveFormatError: If the file is not a readable archive
    """
    counter = counter or HtmlTextCounter(options.parser)
    ingester = ingester or EpubIngester(options.content_suffixes, options.reserved_names)

    with open_byte_source(task.path) as source:
        logger.debug(f"{task.display_name}: reading via {source.kind}")
        extraction = ingester.extract(source, task.path)

    total = 0
    for doc in extraction.documents:
        doc_count = counter.count(doc.text)
        logger.debug(f"  {doc.name}: {doc_count}")
        total += doc_count

    return FileResult(
        display_name=task.display_name,
        count=total,
        documents=len(extraction.documents),
        skipped_entries=[f"{entry.name}: {entry.reason}" for entry in extraction.skipped],
    )


def process_task(
    task: FileTask,
    options: CountOptions,
    counter: Optional[CountingStrategy] = None,
) -> FileResult | FileFailure:
    """Count one file, converting any failure into a FileFailure."""
    try:
        return count_task(task, options, counter)
    except EpubCountError as exc:
        return FileFailure(display_name=task.display_name, error=type(exc).__name__, message=str(exc))
    except Exception as exc:
        logger.debug(f"Unexpected error in {task.path}", exc_info=True)
        return FileFailure(
            display_name=task.display_name,
            error=type(exc).__name__,
            message=f"{task.path}: unexpected error ({exc})",
        )


def count_file(path: Path | str, options: Optional[CountOptions] = None) -> int:
    """Return the character count of a single archive.

    Raises:
        EpubCountError: If the file cannot be opened or is not an archive
    """
    path = Path(path)
    options = options or CountOptions(workers=1)
    return count_task(FileTask(display_name=str(path), path=path), options).count
