"""Chunk orchestration."""

from chunk_copier.runner.run import apply_write_errors, main_run, run, run_tasks
from chunk_copier.runner.types import RunReport

__all__ = ["RunReport", "apply_write_errors", "main_run", "run", "run_tasks"]
