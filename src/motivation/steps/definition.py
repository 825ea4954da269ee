"""Immutable step definitions shared by every progression of a type."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable


DEFAULT_OWNING_CONTEXT = "progression_name"

StepAction = Callable[[Any], Any]


class StepDefinitionError(ValueError):
    """Raised while declaring steps, e.g. when no step name can be resolved."""


class UnknownStepError(KeyError):
    """Raised when a step is addressed by a name the registry does not know."""

    def __init__(self, step_name: str, kind: "StepKind") -> None:
        super().__init__(step_name)
        self.step_name = step_name
        self.kind = kind

    def __str__(self) -> str:
        return f"No {self.kind.value} registered for step {self.step_name!r}"


class StepKind(Enum):
    """What a step's action does when it runs."""
    CHECK = "check"  # predicate, result coerced to bool
    COMPLETION = "completion"  # side effect persisted onto the subject


@dataclass(frozen=True)
class StepDefinition:
    """One named unit of logic bound to a callable.

    The action receives the progression instance explicitly; it can reach
    the subject (and any helper methods of the progression) through it.
    """

    name: str
    action: StepAction
    kind: StepKind = StepKind.CHECK
    owning_context: str = DEFAULT_OWNING_CONTEXT

    def __post_init__(self) -> None:
        if not self.name:
            raise StepDefinitionError("No step name")
        if not isinstance(self.name, str):
            raise StepDefinitionError(f"Step name must be a string: {self.name!r}")
        if not callable(self.action):
            raise StepDefinitionError(
                f"Action for step {self.name!r} is not callable: {self.action!r}"
            )

    @property
    def is_check(self) -> bool:
        return self.kind is StepKind.CHECK

    @property
    def is_completion(self) -> bool:
        return self.kind is StepKind.COMPLETION

    def run(self, context: Any) -> Any:
        """Invoke the action with ``context``; errors propagate unchanged."""
        return self.action(context)
