from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class StopwordConfig:
    language: str = "en"  # language-specific list is added on top of English
    custom_stopwords: Tuple[str, ...] = ()  # extra words to remove
