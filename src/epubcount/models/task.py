"""Units of work and their outcomes."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class FileTask:
    """One file to count. The path is only opened by the worker that claims it."""

    display_name: str
    path: Path


@dataclass
class FileResult:
    """Character count for one successfully processed file."""

    display_name: str
    count: int
    documents: int = 0
    skipped_entries: list[str] = field(default_factory=list)


@dataclass
class FileFailure:
    """A task that produced no count."""

    display_name: str
    error: str  # exception class name
    message: str


@dataclass
class RunReport:
    """Aggregated outcome of a scheduler run.

    ``groups`` holds one list per worker chunk, in submission order.
    """

    groups: list[list[FileResult]] = field(default_factory=list)
    failures: list[FileFailure] = field(default_factory=list)
    total: int = 0

    @property
    def results(self) -> list[FileResult]:
        """All results flattened in input order."""
        return [result for group in self.groups for result in group]

    @property
    def files_counted(self) -> int:
        return sum(len(group) for group in self.groups)
