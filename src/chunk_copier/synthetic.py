"""
Synthetic fixed-width dataset generator.

Writes a file of deterministic, equally sized lines, suitable as input for
chunk-copier runs and benchmarks. Every line is ``<prefix><index> <filler>``
padded to the same byte width, followed by the chosen terminator.
"""

import argparse
import random
import sys

# Large buffer for efficient streaming writes.
BUFFER_SIZE = 1024 * 1024  # 1MB

TERMINATORS = {"crlf": "\r\n", "lf": "\n"}

_FILLER_ALPHABET = "abcdefghijklmnopqrstuvwxyz0123456789"


def make_line(index: int, width: int, rng: random.Random, prefix: str = "L") -> str:
    """
    Build one line of exactly ``width`` characters, without terminator.

    The line starts with a zero-padded index so every line is unique.
    """
    head = f"{prefix}{index:010d} "
    if len(head) > width:
        raise ValueError(f"width {width} is too small for line header {head!r}")
    filler = "".join(rng.choice(_FILLER_ALPHABET) for _ in range(width - len(head)))
    return head + filler


def generate_fixed_width_file(
    output_path: str,
    num_lines: int,
    width: int = 32,
    terminator: str = "crlf",
    seed: int = 1,
    trailing_terminator: bool = True,
) -> int:
    """
    Generate ``num_lines`` fixed-width lines into ``output_path``.

    Streams output line-by-line to avoid memory issues. Returns the number of
    bytes written. With ``trailing_terminator=False`` the last line is left
    unterminated (one short final line).
    """
    rng = random.Random(seed)
    eol = TERMINATORS[terminator]
    total_bytes = 0

    with open(output_path, "w", encoding="ascii", newline="", buffering=BUFFER_SIZE) as f:
        for i in range(num_lines):
            line = make_line(i, width, rng)
            if trailing_terminator or i < num_lines - 1:
                line += eol
            f.write(line)
            total_bytes += len(line)

            # Progress indicator every 1M lines.
            if (i + 1) % 1_000_000 == 0:
                print(f"  Generated {i + 1}/{num_lines} lines...", file=sys.stderr)

    return total_bytes


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="chunk-copier-generate",
        description="Generate a synthetic fixed-width text file.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # ~1 GB of 100-byte CRLF lines
  chunk-copier-generate --out data/big.txt --lines 10000000 --width 98

  # Small LF file for quick checks
  chunk-copier-generate --out data/small.txt --lines 5000 --terminator lf
""",
    )

    parser.add_argument("--out", required=True, help="Output file path")
    parser.add_argument(
        "--lines",
        type=int,
        default=100000,
        help="Number of lines (default: 100000)",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=32,
        help="Line width in characters, terminator excluded (default: 32)",
    )
    parser.add_argument(
        "--terminator",
        choices=sorted(TERMINATORS),
        default="crlf",
        help="Line terminator (default: crlf)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=1,
        help="Random seed for reproducibility (default: 1)",
    )

    args = parser.parse_args()

    if args.lines < 0:
        parser.error("--lines must not be negative")
    if args.width < 12:
        parser.error("--width must be at least 12")

    line_bytes = args.width + len(TERMINATORS[args.terminator])
    approx_size_mb = (args.lines * line_bytes) / (1024 * 1024)
    print(f"Generating {args.lines:,} lines of {line_bytes} bytes (~{approx_size_mb:.1f} MB)...", file=sys.stderr)

    total_bytes = generate_fixed_width_file(
        output_path=args.out,
        num_lines=args.lines,
        width=args.width,
        terminator=args.terminator,
        seed=args.seed,
    )

    print(f"Done! Wrote {total_bytes:,} bytes to {args.out}", file=sys.stderr)


if __name__ == "__main__":
    main()
