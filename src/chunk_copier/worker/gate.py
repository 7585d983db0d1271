"""Mutual exclusion around the single shared output sink."""

import threading
from typing import TextIO


class OutputGate:
    """
    Binary gate admitting one writer at a time.

    No ordering is imposed beyond exclusion: whoever acquires first writes
    first.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def acquire(self) -> None:
        """Block until no other holder is active."""
        self._lock.acquire()

    def release(self) -> None:
        """Admit the next waiter."""
        self._lock.release()

    @property
    def held(self) -> bool:
        return self._lock.locked()

    def __enter__(self) -> "OutputGate":
        self.acquire()
        return self

    def __exit__(self, *exc_info) -> None:
        self.release()


class GateWriter:
    """Writes each chunk through the gate as soon as it is submitted."""

    def __init__(self, sink: TextIO, gate: OutputGate):
        self._sink = sink
        self._gate = gate

    def write_chunk(self, index: int, text: str) -> None:
        with self._gate:
            self._sink.write(text)

    def skip_chunk(self, index: int) -> None:
        """Nothing to advance when writes are unordered."""
