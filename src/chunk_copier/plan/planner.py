"""Chunk planning under a soft chunk size and a hard concurrency cap."""

from chunk_copier.config import DEFAULT_MAX_CONCURRENT_CHUNKS, DEFAULT_SOFT_LINES_PER_CHUNK
from chunk_copier.plan.types import ChunkTask, LinePlan, Plan


def _ceil_div(numerator: int, denominator: int) -> int:
    return -(-numerator // denominator)


def plan_chunks(
    file_size_bytes: int,
    line_plan: LinePlan,
    soft_lines_per_chunk: int = DEFAULT_SOFT_LINES_PER_CHUNK,
    max_concurrent_chunks: int = DEFAULT_MAX_CONCURRENT_CHUNKS,
) -> Plan:
    """
    Compute task count, lines per chunk and buffer size for a file.

    If the soft target would need more than ``max_concurrent_chunks`` chunks,
    the task count is clamped to the cap and lines per chunk grows so the
    clamped chunks still cover the whole file. A short trailing line counts
    as a full line, so ``task_count * buffer_bytes >= file_size_bytes``
    always holds after rounding.
    """
    if file_size_bytes < 0:
        raise ValueError(f"file_size_bytes must not be negative, got {file_size_bytes}")
    if soft_lines_per_chunk < 1:
        raise ValueError(f"soft_lines_per_chunk must be positive, got {soft_lines_per_chunk}")
    if max_concurrent_chunks < 1:
        raise ValueError(f"max_concurrent_chunks must be positive, got {max_concurrent_chunks}")

    line_length = line_plan.line_byte_length
    raw_task_count = _ceil_div(file_size_bytes, soft_lines_per_chunk * line_length)

    if raw_task_count > max_concurrent_chunks:
        task_count = max_concurrent_chunks
        total_lines = _ceil_div(file_size_bytes, line_length)
        lines_per_chunk = _ceil_div(total_lines, task_count)
    else:
        task_count = raw_task_count
        lines_per_chunk = soft_lines_per_chunk

    return Plan(
        task_count=task_count,
        lines_per_chunk=lines_per_chunk,
        buffer_bytes=lines_per_chunk * line_length,
    )


def build_tasks(plan: Plan, line_plan: LinePlan) -> list[ChunkTask]:
    """Materialise one ChunkTask per planned chunk."""
    return [
        ChunkTask(
            index=index,
            start_offset=index * plan.lines_per_chunk * line_plan.line_byte_length,
            line_count=plan.lines_per_chunk,
            buffer_bytes=plan.buffer_bytes,
        )
        for index in range(plan.task_count)
    ]
