"""Fan file tasks out across a fixed pool of workers and aggregate the results."""

import logging
import math
from concurrent.futures import Executor, Future, ProcessPoolExecutor, ThreadPoolExecutor
from typing import Sequence

from epubcount.config import CountOptions
from epubcount.counters import HtmlTextCounter
from epubcount.models import FileFailure, FileResult, FileTask, RunReport
from epubcount.pipeline import process_task

logger = logging.getLogger(__name__)

ChunkOutcome = tuple[list[FileResult], list[FileFailure]]


def partition(tasks: Sequence[FileTask], workers: int) -> list[list[FileTask]]:
    """Split tasks into ``workers`` contiguous chunks of ``ceil(N / workers)``.

    Trailing chunks may be shorter or empty when tasks do not divide evenly.

    Raises:
        ValueError: If workers is less than 1
    """
    if workers < 1:
        raise ValueError(f"workers must be at least 1, got {workers}")

    chunk_size = math.ceil(len(tasks) / workers)
    return [list(tasks[i * chunk_size : (i + 1) * chunk_size]) for i in range(workers)]


def run_chunk(chunk: list[FileTask], options: CountOptions) -> ChunkOutcome:
    """Process one chunk sequentially. Runs inside a worker."""
    counter = HtmlTextCounter(options.parser)
    results: list[FileResult] = []
    failures: list[FileFailure] = []

    for task in chunk:
        outcome = process_task(task, options, counter)
        if isinstance(outcome, FileFailure):
            failures.append(outcome)
        else:
            results.append(outcome)

    return results, failures


class WorkScheduler:
    """Runs one chunk of tasks per worker and joins them into a RunReport.

    Workers never share state; counts are only combined after every worker
    has returned.
    """

    def __init__(self, options: CountOptions):
        self.options = options

    def _executor(self, max_workers: int) -> Executor:
        if self.options.executor == "thread":
            return ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="epubcount")
        return ProcessPoolExecutor(max_workers=max_workers)

    def run(self, tasks: Sequence[FileTask]) -> RunReport:
        """Count every task and return the aggregated report.

        Results keep input order: chunks are collected in submission order and
        each worker preserves the order within its chunk.
        """
        report = RunReport()
        chunks = [chunk for chunk in partition(tasks, self.options.workers) if chunk]
        if not chunks:
            return report

        logger.debug(f"Counting {len(tasks)} files with {len(chunks)} workers")

        with self._executor(len(chunks)) as executor:
            futures = [executor.submit(run_chunk, chunk, self.options) for chunk in chunks]
            outcomes = [self._collect(future, chunk) for future, chunk in zip(futures, chunks)]

        for results, failures in outcomes:
            report.groups.append(results)
            report.failures.extend(failures)

        report.total = sum(result.count for result in report.results)
        return report

    def _collect(self, future: Future, chunk: list[FileTask]) -> ChunkOutcome:
        """Wait for one worker, turning a crashed worker into per-task failures."""
        try:
            return future.result()
        except Exception as exc:
            logger.debug("Worker failed", exc_info=True)
            failures = [
                FileFailure(
                    display_name=task.display_name,
                    error=type(exc).__name__,
                    message=f"{task.path}: worker failed ({exc})",
                )
                for task in chunk
            ]
            return [], failures
