"""Chunk workers and the shared output gate."""

from chunk_copier.worker.chunk import process_chunk
from chunk_copier.worker.gate import GateWriter, OutputGate
from chunk_copier.worker.types import ChunkOutcome, ChunkWriter

__all__ = ["ChunkOutcome", "ChunkWriter", "GateWriter", "OutputGate", "process_chunk"]
