"""Re-sequencing chunk output into input order."""

import logging
from typing import TextIO

from chunk_copier.worker.gate import OutputGate

logger = logging.getLogger(__name__)


class ReorderBuffer:
    """
    Writes chunks strictly by index, whatever order they complete in.

    Chunks arriving ahead of the next expected index are held in memory.
    Every index must eventually be either written or skipped, otherwise
    everything after it stays pending.

    A submitting worker may end up writing chunks of other workers. A failed
    write is kept against the chunk it belongs to: the submitter's own
    failure is raised to it, the others are collected by
    ``take_write_errors``.
    """

    def __init__(self, sink: TextIO, gate: OutputGate):
        self._sink = sink
        self._gate = gate
        self._next_index = 0
        self._pending: dict[int, str] = {}
        self._skipped: set[int] = set()
        self._write_errors: dict[int, OSError] = {}

    @property
    def next_index(self) -> int:
        return self._next_index

    @property
    def pending_indexes(self) -> list[int]:
        return sorted(self._pending)

    def write_chunk(self, index: int, text: str) -> None:
        with self._gate:
            self._pending[index] = text
            self._drain()
            error = self._write_errors.pop(index, None)
        if error is not None:
            raise error

    def skip_chunk(self, index: int) -> None:
        """Mark a chunk that will never arrive (failed or empty)."""
        with self._gate:
            if index >= self._next_index:
                self._skipped.add(index)
            self._drain()

    def take_write_errors(self) -> dict[int, OSError]:
        """Return and forget write failures of chunks drained by other workers."""
        with self._gate:
            errors = self._write_errors
            self._write_errors = {}
        return errors

    def _drain(self) -> None:
        # Caller holds the gate.
        while True:
            index = self._next_index
            if index in self._skipped:
                self._skipped.discard(index)
                self._next_index += 1
            elif index in self._pending:
                text = self._pending.pop(index)
                self._next_index += 1
                try:
                    self._sink.write(text)
                except OSError as exc:
                    self._write_errors[index] = exc
            else:
                return

    def finish(self) -> None:
        """Log chunks that were submitted but never reached the sink."""
        with self._gate:
            if self._pending:
                logger.warning(
                    "Ordered output stalled at chunk %d; %d chunk(s) never written: %s",
                    self._next_index,
                    len(self._pending),
                    self.pending_indexes,
                )
