"""Shared plan structures for chunked reads."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LinePlan:
    """Assumed fixed width of every line, terminator included."""

    line_byte_length: int
    terminator: bytes = b"\r\n"


@dataclass(frozen=True, slots=True)
class Plan:
    """How the input file is divided into chunks."""

    task_count: int
    lines_per_chunk: int
    buffer_bytes: int


@dataclass(frozen=True, slots=True)
class ChunkTask:
    """One contiguous byte range of the input, consumed by exactly one worker."""

    index: int
    start_offset: int
    line_count: int
    buffer_bytes: int
