from __future__ import annotations
from dataclasses import dataclass, field
from typing import FrozenSet

# Latin-script languages where English-style suffix stripping is allowed
STEMMABLE_LANGUAGES: FrozenSet[str] = frozenset(
    {"en", "es", "fr", "it", "pt", "de", "nl"}
)


@dataclass(frozen=True)
class StemmingConfig:
    languages: FrozenSet[str] = field(default_factory=lambda: STEMMABLE_LANGUAGES)

    def supports(self, language: str) -> bool:
        return language in self.languages
