"""Declaration DSL for building a ProgressionDefinition."""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Union

from .definition import (
    StepAction,
    StepDefinition,
    StepDefinitionError,
    StepKind,
)
from .registry import ApplicabilityPredicate, ProgressionDefinition, StepRegistry


logger = logging.getLogger(__name__)


class ProgressionBuilder:
    """Collects step declarations in order and freezes them with ``build()``.

    ``step(name)`` sets the current step name used by later ``check`` and
    ``completion`` calls that do not name a step themselves::

        steps = ProgressionBuilder()
        steps.subject_alias("project")
        steps.check("name_setup", lambda m: bool(m.project.name))

        steps.step("users_signed_up")

        @steps.check
        def users_signed_up(m):
            return m.project.users_count > 0

        @steps.completion
        def store_users_count(m):
            m.project.users_count = len(m.project.users)

        class ProjectMotivation(Progression, definition=steps.build()):
            pass

    ``check``, ``completion`` and ``applies`` return the registered callable,
    so they also work as decorators; without an action they return a
    decorator. ``step`` and ``subject_alias`` return the builder.
    """

    def __init__(self) -> None:
        self._checks: List[StepDefinition] = []
        self._completions: List[StepDefinition] = []
        self._current_step_name: Optional[str] = None
        self._applies: Optional[ApplicabilityPredicate] = None
        self._subject_aliases: List[str] = []

    @property
    def current_step_name(self) -> Optional[str]:
        return self._current_step_name

    def step(self, name: str) -> "ProgressionBuilder":
        """Set the current step name; does not register anything by itself."""
        self._current_step_name = name
        return self

    def check(
        self,
        name: Union[str, StepAction, None] = None,
        action: Optional[StepAction] = None,
    ):
        """Register a completion predicate for ``name`` or the current step."""
        if callable(name) and action is None:
            name, action = None, name
        step_name = self._current_step_name if name is None else name
        if not step_name:
            raise StepDefinitionError("No step name")

        if action is None:
            return self._decorator(lambda fn: self._add_check(step_name, fn))
        self._add_check(step_name, action)
        return action

    def completion(self, action: Optional[StepAction] = None):
        """Register a side-effecting action that persists completion of the current step."""
        step_name = self._current_step_name
        if not step_name:
            raise StepDefinitionError("No step name")

        if action is None:
            return self._decorator(lambda fn: self._add_completion(step_name, fn))
        self._add_completion(step_name, action)
        return action

    def applies(self, predicate: Optional[ApplicabilityPredicate] = None):
        """Override the default always-true applicability predicate."""
        if predicate is None:
            return self._decorator(self._set_applies)
        self._set_applies(predicate)
        return predicate

    def subject_alias(self, attr_name: str) -> "ProgressionBuilder":
        """Expose the subject under an additional read-only attribute name."""
        if not attr_name or not attr_name.isidentifier() or attr_name == "subject":
            raise StepDefinitionError(f"Invalid subject alias: {attr_name!r}")
        if attr_name not in self._subject_aliases:
            self._subject_aliases.append(attr_name)
        return self

    def build(self) -> ProgressionDefinition:
        return ProgressionDefinition(
            registry=StepRegistry(
                check_steps=tuple(self._checks),
                completion_steps=tuple(self._completions),
            ),
            applies=self._applies,
            subject_aliases=tuple(self._subject_aliases),
        )

    def _decorator(self, register: Callable[[StepAction], None]):
        def decorate(fn: StepAction) -> StepAction:
            register(fn)
            return fn

        return decorate

    def _add_check(self, name: str, action: StepAction) -> None:
        if any(step.name == name for step in self._checks):
            raise StepDefinitionError(f"Duplicate check for step {name!r}")
        self._checks.append(StepDefinition(name, action, StepKind.CHECK))
        if self._current_step_name is None:
            self._current_step_name = name
        logger.debug("Declared check %r", name)

    def _add_completion(self, name: str, action: StepAction) -> None:
        if any(step.name == name for step in self._completions):
            raise StepDefinitionError(f"Duplicate completion for step {name!r}")
        self._completions.append(StepDefinition(name, action, StepKind.COMPLETION))
        logger.debug("Declared completion %r", name)

    def _set_applies(self, predicate: ApplicabilityPredicate) -> None:
        if not callable(predicate):
            raise StepDefinitionError(f"Applicability predicate is not callable: {predicate!r}")
        self._applies = predicate
