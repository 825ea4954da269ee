"""Runtime progression bound to one subject, and its bound steps."""

from __future__ import annotations

import logging
from operator import attrgetter
from typing import Any, Callable, ClassVar, Iterator, List, Optional, Tuple

from motivation.steps import (
    EMPTY_DEFINITION,
    ProgressionDefinition,
    StepDefinition,
    StepDefinitionError,
    StepKind,
    UnknownStepError,
)
from motivation.translation import (
    DEFAULT_TRANSLATION_CONFIG,
    TranslationConfig,
    derive_translation_key,
)


logger = logging.getLogger(__name__)


class BoundStep:
    """A check paired with the progression it is evaluated against.

    Forwards the definition's ``name``, ``kind`` and ``owning_context`` and
    adds completion and translation key queries. Nothing is cached: every
    ``is_completed()`` call runs the check again.
    """

    __slots__ = ("_step", "_progression")

    def __init__(self, step: StepDefinition, progression: "Progression") -> None:
        self._step = step
        self._progression = progression

    @property
    def step(self) -> StepDefinition:
        return self._step

    @property
    def progression(self) -> "Progression":
        return self._progression

    @property
    def name(self) -> str:
        return self._step.name

    @property
    def kind(self) -> StepKind:
        return self._step.kind

    @property
    def owning_context(self) -> str:
        return self._step.owning_context

    def run(self) -> Any:
        return self._step.run(self._progression)

    def is_completed(self) -> bool:
        return bool(self.run())

    def translation_key(self, end_key: Optional[str] = None) -> str:
        """Return an i18n key like ``motivations.project.name_setup.default``.

        The terminal segment is ``complete`` or ``default`` depending on the
        current state unless ``end_key`` is given.
        """
        if end_key is None:
            end_key = self._status_key()
        return self._config.step_key(
            self._progression.translation_key(), self.name, end_key
        )

    def default_translation_key(self) -> str:
        return self.translation_key(self._config.default_key)

    @property
    def _config(self) -> TranslationConfig:
        return self._progression.translation_config

    def _status_key(self) -> str:
        return self._config.status_key(self.is_completed())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoundStep):
            return NotImplemented
        return self._step == other._step and self._progression is other._progression

    def __hash__(self) -> int:
        return hash((self._step, id(self._progression)))

    def __repr__(self) -> str:
        return (
            f"BoundStep(name={self.name!r}, "
            f"progression={type(self._progression).__name__})"
        )


class Progression:
    """Ordered steps of a subject type, evaluated live against one subject.

    Subclasses attach a frozen definition built with ``ProgressionBuilder``::

        class ProjectMotivation(Progression, definition=steps.build()):
            pass

    At class creation every identifier-safe check name ``x`` gets an
    ``is_x()`` method and every completion gets ``complete_x()``; subject
    aliases become read-only properties. Attributes the class defines
    itself are left alone.
    """

    definition: ClassVar[ProgressionDefinition] = EMPTY_DEFINITION
    translation_config: ClassVar[TranslationConfig] = DEFAULT_TRANSLATION_CONFIG

    def __init_subclass__(
        cls, definition: Optional[ProgressionDefinition] = None, **kwargs: Any
    ) -> None:
        super().__init_subclass__(**kwargs)
        if definition is not None:
            cls.definition = definition
            _install_accessors(cls, definition)

    def __init__(self, subject: Any) -> None:
        self.subject = subject

    def applies(self) -> bool:
        predicate = type(self).definition.applies
        if predicate is None:
            return True
        return bool(predicate(self))

    @classmethod
    def unwrapped_checks(cls) -> Tuple[StepDefinition, ...]:
        return cls.definition.registry.checks

    @classmethod
    def unwrapped_completions(cls) -> Tuple[StepDefinition, ...]:
        return cls.definition.registry.completions

    def checks(self) -> List[BoundStep]:
        return [BoundStep(step, self) for step in self.unwrapped_checks()]

    def each_check(self, visitor: Callable[[BoundStep], Any]) -> None:
        for step in self.checks():
            visitor(step)

    def __iter__(self) -> Iterator[BoundStep]:
        return iter(self.checks())

    def next_check(self) -> Optional[BoundStep]:
        """Return the first incomplete step in declaration order, or None."""
        return next((step for step in self.checks() if not step.is_completed()), None)

    def lookup(self, check_name: str) -> Optional[BoundStep]:
        return next((step for step in self.checks() if step.name == check_name), None)

    def is_complete(self, step_name: Optional[str] = None) -> bool:
        """Report whether one step, or with no argument every step, is complete."""
        if step_name is None:
            return all(step.is_completed() for step in self.checks())
        step = self.lookup(step_name)
        if step is None:
            raise UnknownStepError(step_name, StepKind.CHECK)
        return step.is_completed()

    def complete(self, step_name: str) -> Any:
        """Run the completion registered for ``step_name`` and return its result."""
        completion = type(self).definition.registry.find_completion(step_name)
        if completion is None:
            raise UnknownStepError(step_name, StepKind.COMPLETION)
        logger.debug("Running completion %r for %s", step_name, type(self).__name__)
        return completion.run(self)

    @classmethod
    def translation_key(cls) -> str:
        return derive_translation_key(
            cls.__qualname__, cls.translation_config.type_suffix
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(subject={self.subject!r})"


def _check_accessor(step_name: str) -> Callable[[Progression], bool]:
    def accessor(self: Progression) -> bool:
        return self.is_complete(step_name)

    accessor.__doc__ = f"Return True when step {step_name!r} is complete."
    return accessor


def _completion_accessor(step_name: str) -> Callable[[Progression], Any]:
    def accessor(self: Progression) -> Any:
        return self.complete(step_name)

    accessor.__doc__ = f"Run the completion for step {step_name!r}."
    return accessor


def _install(cls: type, attr_name: str, value: Any) -> None:
    if attr_name in cls.__dict__ or hasattr(Progression, attr_name):
        logger.debug("%s already defines %r, not generating it", cls.__name__, attr_name)
        return
    if callable(value):
        value.__name__ = attr_name
        value.__qualname__ = f"{cls.__qualname__}.{attr_name}"
    setattr(cls, attr_name, value)


def _install_accessors(cls: type, definition: ProgressionDefinition) -> None:
    for alias in definition.subject_aliases:
        if alias in cls.__dict__ or hasattr(Progression, alias):
            raise StepDefinitionError(
                f"Subject alias {alias!r} collides with an attribute of {cls.__name__}"
            )
        _install(cls, alias, property(attrgetter("subject"), doc="Alias of subject."))
    for name in definition.registry.check_names:
        if name.isidentifier():
            _install(cls, f"is_{name}", _check_accessor(name))
    for name in definition.registry.completion_names:
        if name.isidentifier():
            _install(cls, f"complete_{name}", _completion_accessor(name))
