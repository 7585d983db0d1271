"""Run-level result types."""

from dataclasses import dataclass, field

from chunk_copier.errors import PartialRunError
from chunk_copier.plan.types import LinePlan, Plan
from chunk_copier.worker.types import ChunkOutcome


@dataclass(slots=True)
class RunReport:
    """Aggregated outcomes of one run, ordered by chunk index."""

    plan: Plan
    line_plan: LinePlan
    outcomes: list[ChunkOutcome] = field(default_factory=list)
    elapsed: float = 0.0

    @property
    def succeeded(self) -> list[ChunkOutcome]:
        return [outcome for outcome in self.outcomes if outcome.ok]

    @property
    def failed(self) -> list[ChunkOutcome]:
        return [outcome for outcome in self.outcomes if not outcome.ok]

    @property
    def complete(self) -> bool:
        return not self.failed

    @property
    def lines_written(self) -> int:
        return sum(outcome.lines_written for outcome in self.outcomes)

    def raise_for_failures(self) -> None:
        """Raise PartialRunError if any chunk failed."""
        failed = self.failed
        if failed:
            raise PartialRunError([outcome.index for outcome in failed])
