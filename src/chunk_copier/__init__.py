"""Chunk Copier - copy fixed-width text files with concurrent chunked reads."""

from chunk_copier.config import RunConfig
from chunk_copier.runner import RunReport, main_run, run

__all__ = ["RunConfig", "RunReport", "main_run", "run"]
