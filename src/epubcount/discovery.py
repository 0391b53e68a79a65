"""Turn user-supplied paths into file tasks."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator

from epubcount.config import DEFAULT_EXTENSION
from epubcount.errors import EpubCountError, OpenError, PathNotFoundError
from epubcount.models import FileTask


@dataclass
class Discovery:
    """Tasks found for a run, plus the paths that had to be skipped."""

    tasks: list[FileTask] = field(default_factory=list)
    problems: list[EpubCountError] = field(default_factory=list)


def walk_directory(root: Path, extension: str = DEFAULT_EXTENSION) -> Iterator[Path]:
    """Yield regular files under ``root`` whose suffix matches ``extension``.

    Recurses without a depth limit, in sorted order. Unreadable directories
    and non-regular files are skipped silently.
    """
    if not extension.startswith("."):
        extension = f".{extension}"
    extension = extension.lower()

    for dirpath, dirnames, filenames in os.walk(root):
        dirnames.sort()
        for filename in sorted(filenames):
            full_path = Path(dirpath) / filename
            if full_path.suffix.lower() != extension:
                continue
            if not full_path.is_file():
                continue
            yield full_path


def discover(
    paths: Iterable[Path | str],
    walk: bool = False,
    extension: str = DEFAULT_EXTENSION,
) -> Discovery:
    """Collect file tasks from files and (optionally) directories.

    Files named directly are taken as-is, whatever their extension.
    Directories are only scanned when ``walk`` is set. A file reached twice is
    kept once.

    Args:
        paths: Paths given by the user, in order
        walk: Recurse into directories
        extension: Suffix to look for while walking

    Returns:
        Discovery with tasks in input order and any skipped paths
    """
    discovery = Discovery()
    seen: set[str] = set()

    def add(path: Path, display_name: str) -> None:
        key = os.path.realpath(path)
        if key in seen:
            return
        seen.add(key)
        discovery.tasks.append(FileTask(display_name=display_name, path=path))

    for raw in paths:
        path = Path(raw)
        if not path.exists():
            discovery.problems.append(PathNotFoundError(path))
        elif path.is_dir():
            if not walk:
                discovery.problems.append(OpenError(path, "is a directory (use --walk to scan it)"))
                continue
            for found in walk_directory(path, extension):
                add(found, str(found))
        elif path.is_file():
            add(path, str(raw))
        else:
            discovery.problems.append(OpenError(path, "not a regular file"))

    return discovery
