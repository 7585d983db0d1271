"""Tests for chunk planning."""

import pytest

from chunk_copier.plan.planner import build_tasks, plan_chunks
from chunk_copier.plan.types import LinePlan, Plan

LINE = LinePlan(line_byte_length=34)


class TestPlanChunks:
    """Test cases for plan_chunks."""

    def test_scenario_under_cap_keeps_soft_target(self) -> None:
        """5000 lines at 1000 lines per chunk -> 5 chunks."""
        plan = plan_chunks(5000 * 34, LINE, soft_lines_per_chunk=1000, max_concurrent_chunks=10)
        assert plan == Plan(task_count=5, lines_per_chunk=1000, buffer_bytes=34000)

    def test_small_file_single_chunk(self) -> None:
        plan = plan_chunks(50 * 34, LINE)
        assert plan.task_count == 1
        assert plan.lines_per_chunk == 1000
        assert plan.buffer_bytes >= 50 * 34

    def test_clamps_to_cap_and_grows_chunks(self) -> None:
        """A file needing 20 chunks is clamped to 10 larger ones."""
        plan = plan_chunks(20000 * 34, LINE, soft_lines_per_chunk=1000, max_concurrent_chunks=10)
        assert plan.task_count == 10
        assert plan.lines_per_chunk == 2000
        assert plan.buffer_bytes == 2000 * 34

    def test_clamp_rounds_lines_per_chunk_up(self) -> None:
        plan = plan_chunks(19501 * 34, LINE, soft_lines_per_chunk=1000, max_concurrent_chunks=10)
        assert plan.task_count == 10
        assert plan.lines_per_chunk == 1951

    def test_exactly_at_cap_is_not_recomputed(self) -> None:
        plan = plan_chunks(10000 * 34, LINE, soft_lines_per_chunk=1000, max_concurrent_chunks=10)
        assert plan.task_count == 10
        assert plan.lines_per_chunk == 1000

    def test_short_trailing_line_is_covered_after_clamp(self) -> None:
        file_size = 2000 * 34 + 32
        plan = plan_chunks(file_size, LINE, soft_lines_per_chunk=100, max_concurrent_chunks=10)
        assert plan.task_count == 10
        assert plan.lines_per_chunk == 201
        assert plan.task_count * plan.buffer_bytes >= file_size

    def test_cap_and_coverage_hold_across_inputs(self) -> None:
        for line_length in (1, 2, 7, 34, 101):
            line_plan = LinePlan(line_length)
            for file_size in (1, 5, 33, 34, 35, 999, 10_007, 123_457):
                for soft in (1, 3, 1000):
                    for cap in (1, 2, 10):
                        plan = plan_chunks(file_size, line_plan, soft, cap)
                        assert 1 <= plan.task_count <= cap
                        assert (
                            plan.task_count * plan.lines_per_chunk * line_length >= file_size
                        )

    @pytest.mark.parametrize(
        ("file_size", "soft", "cap"),
        [(-1, 1000, 10), (100, 0, 10), (100, 1000, 0)],
    )
    def test_rejects_invalid_arguments(self, file_size: int, soft: int, cap: int) -> None:
        with pytest.raises(ValueError):
            plan_chunks(file_size, LINE, soft, cap)


class TestBuildTasks:
    """Test cases for build_tasks."""

    def test_offsets_are_contiguous(self) -> None:
        plan = Plan(task_count=3, lines_per_chunk=10, buffer_bytes=340)
        tasks = build_tasks(plan, LINE)

        assert [task.index for task in tasks] == [0, 1, 2]
        assert [task.start_offset for task in tasks] == [0, 340, 680]
        for task in tasks:
            assert task.start_offset == task.index * task.line_count * LINE.line_byte_length
            assert task.buffer_bytes == 340

    def test_tasks_are_immutable(self) -> None:
        task = build_tasks(Plan(1, 10, 340), LINE)[0]
        with pytest.raises(AttributeError):
            task.start_offset = 5  # type: ignore[misc]
