import logging
import os
import time
from concurrent.futures import as_completed
from pathlib import Path

from chunk_copier.config import RunConfig
from chunk_copier.errors import InputNotFoundError, OutputIsInputError, WorkerIOError
from chunk_copier.plan import build_tasks, plan_chunks, probe_line_plan, verify_line_width
from chunk_copier.plan.types import ChunkTask, LinePlan
from chunk_copier.runner.execution import (
    CC_EXECUTOR_ENV,
    ExecutorClass,
    describe_executor,
    get_executor_class,
    is_gil_enabled,
)
from chunk_copier.runner.ordering import ReorderBuffer
from chunk_copier.runner.types import RunReport
from chunk_copier.worker import ChunkOutcome, ChunkWriter, GateWriter, OutputGate, process_chunk

logger = logging.getLogger(__name__)


def run(config: RunConfig) -> RunReport:
    """
    Copy the input file to the output file chunk by chunk.

    1. Probe the first line for the fixed line width
    2. Plan chunks under the soft size and the concurrency cap
    3. Read, parse and write every chunk concurrently
    4. Collect one outcome per chunk

    Missing and empty inputs, and an output path naming the input, abort
    the run. Chunk failures do not; they are
    reported in the returned RunReport.
    """
    total_start = time.perf_counter()
    input_file = Path(config.input_path)

    if not input_file.is_file() or not os.access(input_file, os.R_OK):
        raise InputNotFoundError(config.input_path)
    input_path = str(input_file.resolve())

    output_file = Path(config.output_path)
    if output_file.exists() and os.path.samefile(input_file, output_file):
        raise OutputIsInputError(config.output_path)

    executor_class = get_executor_class()
    executor_name = describe_executor(executor_class)
    gil_status = "enabled" if is_gil_enabled() else "disabled"
    executor_override = os.environ.get(CC_EXECUTOR_ENV, "")
    override_info = f", {CC_EXECUTOR_ENV}={executor_override}" if executor_override else ""

    logger.info(
        f"Starting: file={input_file.name}, max_chunks={config.max_concurrent_chunks}, "
        f"ordered={config.ordered}, executor={executor_name}, GIL={gil_status}{override_info}"
    )

    # Output is truncated before the input is probed, so an empty input
    # still leaves an empty output file behind.
    with open(config.output_path, "w", encoding=config.encoding, newline="") as sink:
        line_plan = probe_line_plan(input_path)
        if config.verify_sample_lines:
            verify_line_width(input_path, line_plan, config.verify_sample_lines)

        file_size = input_file.stat().st_size
        plan = plan_chunks(
            file_size,
            line_plan,
            soft_lines_per_chunk=config.soft_lines_per_chunk,
            max_concurrent_chunks=config.max_concurrent_chunks,
        )
        tasks = build_tasks(plan, line_plan)

        logger.info(
            "Plan: %d chunks x %d lines (%d-byte lines, %d-byte buffers, file %d bytes)",
            plan.task_count,
            plan.lines_per_chunk,
            line_plan.line_byte_length,
            plan.buffer_bytes,
            file_size,
        )

        gate = OutputGate()
        if config.ordered:
            writer: ChunkWriter = ReorderBuffer(sink, gate)
        else:
            writer = GateWriter(sink, gate)

        t_start = time.perf_counter()
        outcomes = run_tasks(
            tasks,
            input_path,
            line_plan,
            writer,
            executor_class,
            encoding=config.encoding,
            launch_delay=config.launch_delay,
        )
        t_chunks = time.perf_counter() - t_start

        if isinstance(writer, ReorderBuffer):
            writer.finish()
            outcomes = apply_write_errors(outcomes, writer.take_write_errors())

    report = RunReport(
        plan=plan,
        line_plan=line_plan,
        outcomes=outcomes,
        elapsed=time.perf_counter() - total_start,
    )

    if report.failed:
        logger.warning(
            "%d of %d chunks failed; their lines are missing from %s",
            len(report.failed),
            plan.task_count,
            config.output_path,
        )

    logger.info(
        "Result: %d lines written from %d/%d chunks (chunks %.2fs, total %.2fs)",
        report.lines_written,
        len(report.succeeded),
        plan.task_count,
        t_chunks,
        report.elapsed,
    )
    return report


def run_tasks(
    tasks: list[ChunkTask],
    input_path: str,
    line_plan: LinePlan,
    writer: ChunkWriter,
    executor_class: ExecutorClass,
    encoding: str = "utf-8",
    launch_delay: float = 0.0,
) -> list[ChunkOutcome]:
    """
    Run one worker per task and return their outcomes sorted by index.

    With an executor, the pool is sized to the task count and launches are
    separated by ``launch_delay`` seconds. A failing worker never cancels
    its siblings.
    """

    def guarded(task: ChunkTask) -> ChunkOutcome:
        try:
            return process_chunk(task, input_path, line_plan, writer, encoding)
        except Exception as exc:
            error = WorkerIOError(task.index, f"unexpected error: {exc}")
            error.__cause__ = exc
            logger.exception("%s", error)
            writer.skip_chunk(task.index)
            return ChunkOutcome(index=task.index, error=error)

    if executor_class is None:
        return [guarded(task) for task in tasks]

    outcomes: list[ChunkOutcome] = []
    with executor_class(max_workers=len(tasks)) as executor:
        futures = []
        for position, task in enumerate(tasks):
            if position and launch_delay:
                time.sleep(launch_delay)
            futures.append(executor.submit(guarded, task))

        for future in as_completed(futures):
            outcomes.append(future.result())

    outcomes.sort(key=lambda outcome: outcome.index)
    return outcomes


def apply_write_errors(
    outcomes: list[ChunkOutcome],
    write_errors: dict[int, OSError],
) -> list[ChunkOutcome]:
    """Mark chunks whose text was lost in a write performed by another worker."""
    if not write_errors:
        return outcomes

    merged = []
    for outcome in outcomes:
        exc = write_errors.get(outcome.index)
        if exc is None or not outcome.ok:
            merged.append(outcome)
            continue

        error = WorkerIOError(outcome.index, f"error writing chunk: {exc}")
        error.__cause__ = exc
        logger.error("%s", error)
        merged.append(ChunkOutcome(index=outcome.index, bytes_read=outcome.bytes_read, error=error))
    return merged


def main_run(config: RunConfig, strict: bool = False) -> RunReport:
    """Main entry point that prints the number of lines written to stdout."""
    report = run(config)
    if strict:
        report.raise_for_failures()

    print(report.lines_written)
    return report
