"""Line probing and chunk planning."""

from chunk_copier.plan.planner import build_tasks, plan_chunks
from chunk_copier.plan.probe import probe_line_plan, verify_line_width
from chunk_copier.plan.types import ChunkTask, LinePlan, Plan

__all__ = [
    "ChunkTask",
    "LinePlan",
    "Plan",
    "build_tasks",
    "plan_chunks",
    "probe_line_plan",
    "verify_line_width",
]
