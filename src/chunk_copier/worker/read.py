"""Positioned reads of input byte ranges."""


def read_chunk(input_path: str, offset: int, size: int) -> bytes:
    """
    Read up to ``size`` bytes starting at ``offset``.

    Every call opens its own handle, so concurrent callers never share a
    read cursor. Returns fewer bytes (possibly none) near end of file.
    """
    with open(input_path, "rb") as handle:
        handle.seek(offset)
        return handle.read(size)
