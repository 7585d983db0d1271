"""Read, parse and write a single chunk."""

import logging

from chunk_copier.errors import WorkerIOError
from chunk_copier.plan.types import ChunkTask, LinePlan
from chunk_copier.worker.parse import parse_chunk_lines
from chunk_copier.worker.read import read_chunk
from chunk_copier.worker.types import ChunkOutcome, ChunkWriter

logger = logging.getLogger(__name__)


def process_chunk(
    task: ChunkTask,
    input_path: str,
    line_plan: LinePlan,
    writer: ChunkWriter,
    encoding: str = "utf-8",
) -> ChunkOutcome:
    """
    Process one chunk end to end.

    The whole chunk is written in one call. I/O and decode failures are
    logged and returned in the outcome; the chunk's lines are then absent
    from the output and other chunks carry on.
    """
    bytes_read = 0
    try:
        buffer = read_chunk(input_path, task.start_offset, task.buffer_bytes)
        bytes_read = len(buffer)

        if not buffer:
            writer.skip_chunk(task.index)
            logger.debug("Chunk %d: range starts past end of file", task.index)
            return ChunkOutcome(index=task.index)

        lines = parse_chunk_lines(buffer, line_plan.line_byte_length, encoding)
        writer.write_chunk(task.index, "".join(lines))

    except (OSError, UnicodeDecodeError) as exc:
        error = WorkerIOError(task.index, f"error reading or writing chunk: {exc}")
        error.__cause__ = exc
        logger.error("%s", error)
        writer.skip_chunk(task.index)
        return ChunkOutcome(index=task.index, bytes_read=bytes_read, error=error)

    logger.debug(
        "Chunk %d: %d bytes, %d lines written",
        task.index,
        bytes_read,
        len(lines),
    )
    return ChunkOutcome(index=task.index, bytes_read=bytes_read, lines_written=len(lines))
