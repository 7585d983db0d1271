"""Run configuration."""

from dataclasses import dataclass

DEFAULT_SOFT_LINES_PER_CHUNK = 1000
DEFAULT_MAX_CONCURRENT_CHUNKS = 10

# Seconds between successive worker launches. Throttle only.
DEFAULT_LAUNCH_DELAY = 0.1

DEFAULT_ENCODING = "utf-8"


@dataclass(frozen=True, slots=True)
class RunConfig:
    """Everything a run needs: paths, chunk sizing and output policy."""

    input_path: str
    output_path: str
    soft_lines_per_chunk: int = DEFAULT_SOFT_LINES_PER_CHUNK
    max_concurrent_chunks: int = DEFAULT_MAX_CONCURRENT_CHUNKS
    launch_delay: float = DEFAULT_LAUNCH_DELAY
    ordered: bool = False
    encoding: str = DEFAULT_ENCODING
    verify_sample_lines: int = 0

    def __post_init__(self) -> None:
        if self.soft_lines_per_chunk < 1:
            raise ValueError(
                f"soft_lines_per_chunk must be positive, got {self.soft_lines_per_chunk}"
            )
        if self.max_concurrent_chunks < 1:
            raise ValueError(
                f"max_concurrent_chunks must be positive, got {self.max_concurrent_chunks}"
            )
        if self.launch_delay < 0:
            raise ValueError(f"launch_delay must not be negative, got {self.launch_delay}")
        if self.verify_sample_lines < 0:
            raise ValueError(
                f"verify_sample_lines must not be negative, got {self.verify_sample_lines}"
            )
