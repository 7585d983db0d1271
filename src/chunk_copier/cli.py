"""Command-line interface for chunk copier."""

import argparse
import logging
import sys

from chunk_copier.config import (
    DEFAULT_ENCODING,
    DEFAULT_LAUNCH_DELAY,
    DEFAULT_MAX_CONCURRENT_CHUNKS,
    DEFAULT_SOFT_LINES_PER_CHUNK,
    RunConfig,
)
from chunk_copier.errors import ChunkCopierError
from chunk_copier.runner import main_run

logger = logging.getLogger(__name__)


def configure_logging(level: int = logging.INFO) -> None:
    """Configure logging to write to stderr."""
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="chunk-copier",
        description="Copy a fixed-width text file by reading chunks concurrently.",
    )

    parser.add_argument(
        "input_file",
        help="Path to the input file (all lines must share one byte length)",
    )
    parser.add_argument(
        "output_file",
        help="Path to the output file (created or truncated)",
    )

    parser.add_argument(
        "--lines-per-chunk",
        type=int,
        default=DEFAULT_SOFT_LINES_PER_CHUNK,
        help=f"Soft target of lines per chunk (default: {DEFAULT_SOFT_LINES_PER_CHUNK})",
    )
    parser.add_argument(
        "--max-chunks",
        type=int,
        default=DEFAULT_MAX_CONCURRENT_CHUNKS,
        help=f"Hard cap on concurrent chunks (default: {DEFAULT_MAX_CONCURRENT_CHUNKS})",
    )
    parser.add_argument(
        "--launch-delay",
        type=float,
        default=DEFAULT_LAUNCH_DELAY,
        help=f"Seconds between worker launches (default: {DEFAULT_LAUNCH_DELAY})",
    )
    parser.add_argument(
        "--ordered",
        action="store_true",
        help="Write chunks in input order instead of completion order",
    )
    parser.add_argument(
        "--verify-lines",
        type=int,
        default=0,
        help="Check that the first N lines share the probed width (default: 0, off)",
    )
    parser.add_argument(
        "--encoding",
        default=DEFAULT_ENCODING,
        help=f"Text encoding of input and output (default: {DEFAULT_ENCODING})",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit non-zero if any chunk fails",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging level (default: INFO)",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Configure logging based on --log-level
    log_level = getattr(logging, args.log_level)
    configure_logging(log_level)

    try:
        config = RunConfig(
            input_path=args.input_file,
            output_path=args.output_file,
            soft_lines_per_chunk=args.lines_per_chunk,
            max_concurrent_chunks=args.max_chunks,
            launch_delay=args.launch_delay,
            ordered=args.ordered,
            encoding=args.encoding,
            verify_sample_lines=args.verify_lines,
        )
    except ValueError as exc:
        parser.error(str(exc))

    try:
        main_run(config, strict=args.strict)
    except ChunkCopierError as exc:
        logger.error("%s", exc)
        return 1
    except Exception as exc:
        logger.error("Error: %s", exc)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
