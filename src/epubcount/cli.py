"""CLI entry point for epubcount."""

import argparse
import logging
from pathlib import Path
from typing import Sequence

from epubcount import __version__
from epubcount.config import DEFAULT_EXTENSION, DEFAULT_PARSER, PARSERS, CountOptions, default_workers
from epubcount.discovery import discover
from epubcount.errors import NoFilesFoundError
from epubcount.models import RunReport
from epubcount.scheduler import WorkScheduler

logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
)
logger = logging.getLogger(__name__)


def count(paths: Sequence[Path | str], options: CountOptions) -> RunReport:
    """Discover and count every file reachable from ``paths``.

    Args:
        paths: Files, or directories when ``options.walk`` is set
        options: Run options

    Returns:
        RunReport with per-file results and the grand total

    Raises:
        NoFilesFoundError: If discovery found nothing to count
    """
    discovery = discover(paths, walk=options.walk, extension=options.extension)
    for problem in discovery.problems:
        logger.warning(f"Skipping {problem}")

    if not discovery.tasks:
        raise NoFilesFoundError(options.extension)

    report = WorkScheduler(options).run(discovery.tasks)

    for failure in report.failures:
        logger.warning(f"Failed {failure.message}")
    for result in report.results:
        for entry in result.skipped_entries:
            logger.warning(f"{result.display_name}: skipped {entry}")

    return report


def print_report(report: RunReport) -> None:
    """Print one line per counted file, then the grand total."""
    for result in report.results:
        print(f"{result.display_name}: {result.count}")
    print(f"Total: {report.total}")


def _worker_count(value: str) -> int:
    try:
        workers = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid worker count: {value!r}")
    if workers < 1:
        raise argparse.ArgumentTypeError(f"worker count must be at least 1, got {workers}")
    return workers


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="epubcount",
        description="Count the narrative characters (whitespace excluded) in EPUB files",
    )
    parser.add_argument("paths", nargs="+", help="EPUB files, or directories with --walk")
    parser.add_argument(
        "-w",
        "--walk",
        action="store_true",
        help="Recurse into directories collecting .epub files",
    )
    parser.add_argument(
        "-c",
        "--cpu-nums",
        type=_worker_count,
        default=default_workers(),
        help="Number of parallel workers (default: hardware thread count)",
    )
    parser.add_argument(
        "-e",
        "--extension",
        default=DEFAULT_EXTENSION,
        help=f"File suffix collected by --walk (default: {DEFAULT_EXTENSION})",
    )
    parser.add_argument(
        "--parser",
        choices=PARSERS,
        default=DEFAULT_PARSER,
        help=f"HTML parser used for text extraction (default: {DEFAULT_PARSER}; lxml needs the lxml extra)",
    )
    parser.add_argument(
        "--threads",
        action="store_true",
        help="Use worker threads instead of processes",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show per-document counts and debug output",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    options = CountOptions.from_args(args)

    try:
        report = count(args.paths, options)
    except NoFilesFoundError as exc:
        logger.warning(str(exc))
        report = RunReport()

    print_report(report)


if __name__ == "__main__":
    main()
