"""Public API for motivation."""

from __future__ import annotations

__version__ = "0.1.0"

from motivation.steps import (
    DEFAULT_OWNING_CONTEXT,
    EMPTY_DEFINITION,
    ProgressionBuilder,
    ProgressionDefinition,
    StepAction,
    StepDefinition,
    StepDefinitionError,
    StepKind,
    StepRegistry,
    StepRegistryABC,
    UnknownStepError,
)
from motivation.translation import (
    DEFAULT_TRANSLATION_CONFIG,
    TranslationConfig,
    derive_translation_key,
)
from motivation.progression import BoundStep, Progression
from motivation.projection import (
    ProgressionSnapshot,
    ProgressionSummary,
    StepProjection,
    build_snapshot,
    summarize,
)

__all__ = [
    "DEFAULT_OWNING_CONTEXT",
    "EMPTY_DEFINITION",
    "ProgressionBuilder",
    "ProgressionDefinition",
    "StepAction",
    "StepDefinition",
    "StepDefinitionError",
    "StepKind",
    "StepRegistry",
    "StepRegistryABC",
    "UnknownStepError",
    "DEFAULT_TRANSLATION_CONFIG",
    "TranslationConfig",
    "derive_translation_key",
    "BoundStep",
    "Progression",
    "ProgressionSnapshot",
    "ProgressionSummary",
    "StepProjection",
    "build_snapshot",
    "summarize",
]
