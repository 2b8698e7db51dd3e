from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class CorpusAnalysisConfig:
    text_column: str = "text"
    language_column: str = "language"  # codes joined by "-", e.g. "en-th"
    top_terms: int = 10
    ngram_size: int = 2
    ngram_top_k: int = 10
    exclude_numbers: bool = False  # leave digit runs out of top_terms
