from __future__ import annotations
from dataclasses import dataclass
from typing import FrozenSet, Tuple

# scripts written without spaces between words; segmented with a dictionary
DICTIONARY_LANGUAGES: FrozenSet[str] = frozenset({"th"})


@dataclass(frozen=True)
class TokenizationConfig:
    lowercase: bool = True  # skipped for dictionary languages (no case)
    remove_stopwords: bool = False
    stemming: bool = False  # only for stemmable Latin-script languages
    language: str = "en"
    custom_stopwords: Tuple[str, ...] = ()

    @property
    def uses_dictionary(self) -> bool:
        return self.language in DICTIONARY_LANGUAGES

    def __post_init__(self):
        # lists and sets are accepted, stored as a tuple
        object.__setattr__(
            self, "custom_stopwords", tuple(self.custom_stopwords or ())
        )
