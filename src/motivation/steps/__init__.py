"""Step definitions, registries and the declaration builder."""

from .definition import (
    DEFAULT_OWNING_CONTEXT,
    StepAction,
    StepDefinition,
    StepDefinitionError,
    StepKind,
    UnknownStepError,
)
from .registry import (
    EMPTY_DEFINITION,
    ProgressionDefinition,
    StepRegistry,
    StepRegistryABC,
)
from .builder import ProgressionBuilder

__all__ = [
    "DEFAULT_OWNING_CONTEXT",
    "StepAction",
    "StepDefinition",
    "StepDefinitionError",
    "StepKind",
    "UnknownStepError",
    "EMPTY_DEFINITION",
    "ProgressionDefinition",
    "StepRegistry",
    "StepRegistryABC",
    "ProgressionBuilder",
]
