"""First-line probing and optional line-width sampling."""

import logging

from chunk_copier.errors import EmptyInputError, LineWidthError
from chunk_copier.plan.types import LinePlan

logger = logging.getLogger(__name__)


def probe_line_plan(input_path: str) -> LinePlan:
    """
    Derive the uniform line width from the first line of the input.

    The width is the byte length of the first line including its actual
    terminator. Uses its own handle, so nothing leaks into later reads.
    """
    with open(input_path, "rb") as handle:
        first_line = handle.readline()

    if not first_line:
        raise EmptyInputError(input_path)

    content = first_line.rstrip(b"\r\n")
    terminator = first_line[len(content) :]
    line_plan = LinePlan(line_byte_length=len(first_line), terminator=terminator)

    logger.debug(
        "Probed line width: %d bytes (terminator=%r)",
        line_plan.line_byte_length,
        terminator,
    )
    return line_plan


def verify_line_width(input_path: str, line_plan: LinePlan, sample_lines: int) -> int:
    """
    Check that the first ``sample_lines`` lines share the probed width.

    Every full-width line must end with the probed terminator; a final line
    without terminator may be shorter. Returns the number of lines checked;
    raises LineWidthError on the first mismatch.
    """
    width = line_plan.line_byte_length
    terminator = line_plan.terminator
    checked = 0
    with open(input_path, "rb") as handle:
        for line_number, line in enumerate(handle, start=1):
            if line_number > sample_lines:
                break
            checked += 1
            if len(line) == width:
                if line.endswith(terminator):
                    continue
                raise LineWidthError(line_number, len(line), width, terminator=terminator)
            # Unterminated last line.
            if not line.endswith(b"\n") and len(line) <= width - len(terminator):
                continue
            raise LineWidthError(line_number, len(line), width)

    logger.debug("Verified line width over %d sampled lines", checked)
    return checked
