"""i18n key derivation for progression types and their steps."""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache


_NAMESPACE_PREFIX = re.compile(r"^.*(::|\.)")
_ACRONYM_BOUNDARY = re.compile(r"([A-Z\d]+)([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z\d])([A-Z])")


@dataclass(frozen=True)
class TranslationConfig:
    """Segments used to build step keys like ``motivations.project.name_setup.complete``."""

    root: str = "motivations"
    separator: str = "."
    complete_key: str = "complete"
    default_key: str = "default"
    type_suffix: str = "Motivation"

    def status_key(self, completed: bool) -> str:
        return self.complete_key if completed else self.default_key

    def join(self, *segments: object) -> str:
        return self.separator.join(str(segment) for segment in segments)

    def step_key(self, type_key: str, step_name: str, end_key: str) -> str:
        return self.join(self.root, type_key, step_name, end_key)


DEFAULT_TRANSLATION_CONFIG = TranslationConfig()


@lru_cache(maxsize=None)
def derive_translation_key(type_name: str, suffix: str = "Motivation") -> str:
    """Return the underscored key for a progression type name.

    >>> derive_translation_key("UserProjectMotivation")
    'user_project'
    >>> derive_translation_key("app.onboarding.HTTPSetupMotivation")
    'http_setup'
    """
    key = type_name
    if suffix and key.endswith(suffix):
        key = key[: -len(suffix)]
    key = _NAMESPACE_PREFIX.sub("", key)
    key = _ACRONYM_BOUNDARY.sub(r"\1_\2", key)
    key = _WORD_BOUNDARY.sub(r"\1_\2", key)
    return key.replace("-", "_").lower()
