"""Ordered per-type step registry and the definition attached to a progression type."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Tuple, Any

from .definition import StepDefinition, StepDefinitionError, StepKind


ApplicabilityPredicate = Callable[[Any], Any]


class StepRegistryABC(ABC):
    """Nominal contract for step registries."""

    @property
    @abstractmethod
    def checks(self) -> Tuple[StepDefinition, ...]:
        """Return check definitions in declaration order."""

    @property
    @abstractmethod
    def completions(self) -> Tuple[StepDefinition, ...]:
        """Return completion definitions in declaration order."""

    @abstractmethod
    def find_check(self, name: str) -> Optional[StepDefinition]:
        """Return the check registered under ``name``, or None."""

    @abstractmethod
    def find_completion(self, name: str) -> Optional[StepDefinition]:
        """Return the completion registered under ``name``, or None."""


def _validate_sequence(steps: Iterable[StepDefinition], kind: StepKind) -> None:
    seen = set()
    for step in steps:
        if step.kind is not kind:
            raise StepDefinitionError(
                f"Step {step.name!r} is a {step.kind.value}, expected {kind.value}"
            )
        if step.name in seen:
            raise StepDefinitionError(
                f"Duplicate {kind.value} for step {step.name!r}"
            )
        seen.add(step.name)


@dataclass(frozen=True)
class StepRegistry(StepRegistryABC):
    """Immutable, insertion-ordered checks and completions of one progression type.

    Checks and completions are populated independently and paired by name:
    a step may have a check without a completion or the other way round.
    Names are unique within each sequence.
    """

    # Dataclass fields are suffixed so the ABC properties keep their names.
    check_steps: Tuple[StepDefinition, ...] = ()
    completion_steps: Tuple[StepDefinition, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "check_steps", tuple(self.check_steps))
        object.__setattr__(self, "completion_steps", tuple(self.completion_steps))
        _validate_sequence(self.check_steps, StepKind.CHECK)
        _validate_sequence(self.completion_steps, StepKind.COMPLETION)

    @property
    def checks(self) -> Tuple[StepDefinition, ...]:
        return self.check_steps

    @property
    def completions(self) -> Tuple[StepDefinition, ...]:
        return self.completion_steps

    @property
    def check_names(self) -> Tuple[str, ...]:
        return tuple(step.name for step in self.check_steps)

    @property
    def completion_names(self) -> Tuple[str, ...]:
        return tuple(step.name for step in self.completion_steps)

    def find_check(self, name: str) -> Optional[StepDefinition]:
        return next((step for step in self.check_steps if step.name == name), None)

    def find_completion(self, name: str) -> Optional[StepDefinition]:
        return next(
            (step for step in self.completion_steps if step.name == name), None
        )

    def __len__(self) -> int:
        return len(self.check_steps)


@dataclass(frozen=True)
class ProgressionDefinition:
    """Everything declared for one progression type, frozen after build."""

    registry: StepRegistry = StepRegistry()
    applies: Optional[ApplicabilityPredicate] = None
    subject_aliases: Tuple[str, ...] = ()


EMPTY_DEFINITION = ProgressionDefinition()
