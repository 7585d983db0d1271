"""Shared types for chunk workers."""

from dataclasses import dataclass
from typing import Protocol

from chunk_copier.errors import WorkerIOError


@dataclass(frozen=True, slots=True)
class ChunkOutcome:
    """Result of processing one chunk: success, or failure with its cause."""

    index: int
    bytes_read: int = 0
    lines_written: int = 0
    error: WorkerIOError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class ChunkWriter(Protocol):
    """Destination for assembled chunk text."""

    def write_chunk(self, index: int, text: str) -> None: ...

    def skip_chunk(self, index: int) -> None: ...
