"""Run configuration for epubcount."""

import argparse
import os
from dataclasses import dataclass, field

DEFAULT_EXTENSION = ".epub"
CONTENT_SUFFIXES = (".xhtml", ".html")
RESERVED_NAMES = frozenset({"toc.xhtml", "toc.html"})
DEFAULT_PARSER = "html.parser"
EXECUTORS = ("process", "thread")
PARSERS = ("html.parser", "lxml")


def default_workers() -> int:
    """Return the number of hardware threads, at least 1."""
    return os.cpu_count() or 1


@dataclass(frozen=True)
class CountOptions:
    """Settings shared by discovery, the scheduler and every worker.

    Instances are sent to worker processes, so every field must be picklable.
    """

    workers: int = field(default_factory=default_workers)
    walk: bool = False
    extension: str = DEFAULT_EXTENSION
    content_suffixes: tuple[str, ...] = CONTENT_SUFFIXES
    reserved_names: frozenset[str] = RESERVED_NAMES
    parser: str = DEFAULT_PARSER
    executor: str = "process"

    def __post_init__(self) -> None:
        if self.workers < 1:
            raise ValueError(f"workers must be at least 1, got {self.workers}")
        if self.executor not in EXECUTORS:
            raise ValueError(f"executor must be one of {EXECUTORS}, got {self.executor!r}")

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "CountOptions":
        """Build options from parsed command-line arguments."""
        return cls(
            workers=args.cpu_nums,
            walk=args.walk,
            extension=args.extension,
            parser=args.parser,
            executor="thread" if args.threads else "process",
        )
