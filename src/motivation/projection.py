"""Point-in-time snapshots of progressions, single and aggregated."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from motivation.progression import Progression


@dataclass(frozen=True)
class StepProjection:
    """State of one step at snapshot time."""

    name: str
    is_complete: bool
    translation_key: str


@dataclass(frozen=True)
class ProgressionSnapshot:
    """Every check of one progression evaluated exactly once."""

    translation_key: str
    applies: bool
    steps: Tuple[StepProjection, ...]

    @property
    def completed_steps(self) -> Tuple[StepProjection, ...]:
        return tuple(step for step in self.steps if step.is_complete)

    @property
    def pending_steps(self) -> Tuple[StepProjection, ...]:
        return tuple(step for step in self.steps if not step.is_complete)

    @property
    def percent(self) -> float:
        if not self.steps:
            return 100.0
        return len(self.completed_steps) / len(self.steps) * 100.0

    @property
    def is_complete(self) -> bool:
        return all(step.is_complete for step in self.steps)

    @property
    def next_step(self) -> Optional[StepProjection]:
        return next(iter(self.pending_steps), None)

    def get_step(self, name: str) -> Optional[StepProjection]:
        return next((step for step in self.steps if step.name == name), None)


@dataclass
class ProgressionSummary:
    """Aggregate over many progressions of one type."""

    snapshots: List[ProgressionSnapshot] = field(default_factory=list)
    completed_counts: Dict[str, int] = field(default_factory=dict)
    skipped: int = 0
    overall_percent: float = 0.0

    @property
    def total(self) -> int:
        return len(self.snapshots)

    @property
    def fully_complete(self) -> int:
        return sum(1 for snapshot in self.snapshots if snapshot.is_complete)

    def count_completed(self, step_name: str) -> int:
        return self.completed_counts.get(step_name, 0)


def build_snapshot(progression: Progression) -> ProgressionSnapshot:
    config = progression.translation_config
    steps: List[StepProjection] = []
    for step in progression.checks():
        completed = step.is_completed()
        steps.append(
            StepProjection(
                name=step.name,
                is_complete=completed,
                translation_key=step.translation_key(config.status_key(completed)),
            )
        )
    return ProgressionSnapshot(
        translation_key=progression.translation_key(),
        applies=progression.applies(),
        steps=tuple(steps),
    )


def summarize(progressions: Iterable[Progression]) -> ProgressionSummary:
    """Snapshot every applicable progression and count completions per step."""
    summary = ProgressionSummary()
    for progression in progressions:
        if not progression.applies():
            summary.skipped += 1
            continue
        snapshot = build_snapshot(progression)
        summary.snapshots.append(snapshot)
        for step in snapshot.steps:
            summary.completed_counts.setdefault(step.name, 0)
            if step.is_complete:
                summary.completed_counts[step.name] += 1

    if summary.snapshots:
        summary.overall_percent = (
            sum(snapshot.percent for snapshot in summary.snapshots)
            / len(summary.snapshots)
        )
    return summary
