"""Parsing chunk buffers into fixed-width lines."""

from collections.abc import Iterator


def iter_chunk_lines(buffer: bytes, line_byte_length: int) -> Iterator[bytes]:
    """
    Yield fixed-width slices of ``buffer``, terminator included.

    The final slice is bounded by the bytes actually present, so a short
    trailing line comes back as-is.
    """
    if line_byte_length < 1:
        raise ValueError(f"line_byte_length must be positive, got {line_byte_length}")

    bytes_read = len(buffer)
    for offset in range(0, bytes_read, line_byte_length):
        length = min(line_byte_length, bytes_read - offset)
        yield buffer[offset : offset + length]


def parse_chunk_lines(buffer: bytes, line_byte_length: int, encoding: str = "utf-8") -> list[str]:
    """Decode every fixed-width slice of ``buffer`` into text."""
    return [raw.decode(encoding) for raw in iter_chunk_lines(buffer, line_byte_length)]
