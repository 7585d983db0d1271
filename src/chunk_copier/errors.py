"""Exception hierarchy for chunk copying runs."""


class ChunkCopierError(Exception):
    """Base class for all errors raised by chunk_copier."""


class InputNotFoundError(ChunkCopierError):
    """The input path does not resolve to a readable file."""

    def __init__(self, path: str):
        super().__init__(f"Input file not found: {path}")
        self.path = path


class EmptyInputError(ChunkCopierError):
    """The first-line probe found no content."""

    def __init__(self, path: str):
        super().__init__(f"Input file is empty: {path}")
        self.path = path


class LineWidthError(ChunkCopierError):
    """A sampled line does not match the probed fixed line width."""

    def __init__(
        self,
        line_number: int,
        actual: int,
        expected: int,
        terminator: bytes | None = None,
    ):
        if terminator is None:
            detail = f"is {actual} bytes, expected {expected}"
        else:
            detail = f"does not end with the probed terminator {terminator!r}"
        super().__init__(
            f"Line {line_number} {detail} (input lines must share one byte length)"
        )
        self.line_number = line_number
        self.actual = actual
        self.expected = expected


class WorkerIOError(ChunkCopierError):
    """A chunk's read, decode or write failed. Never aborts the run."""

    def __init__(self, chunk_index: int, message: str):
        super().__init__(f"Chunk {chunk_index}: {message}")
        self.chunk_index = chunk_index


class PartialRunError(ChunkCopierError):
    """One or more chunks failed and the caller asked for a complete run."""

    def __init__(self, failed_indexes: list[int]):
        joined = ", ".join(str(i) for i in failed_indexes)
        super().__init__(f"{len(failed_indexes)} chunk(s) failed: {joined}")
        self.failed_indexes = failed_indexes


class OutputIsInputError(ChunkCopierError):
    """The output path names the input file; opening it would truncate the input."""

    def __init__(self, path: str):
        super().__init__(f"Output file is the input file: {path}")
        self.path = path
