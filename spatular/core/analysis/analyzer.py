from __future__ import annotations
from collections import Counter
from typing import Any, Dict, List

import pandas as pd

from spatular.core.analysis.base import CorpusAnalyzer
from spatular.core.analysis.config import CorpusAnalysisConfig
from spatular.core.tokenization.tokenizer import DefaultTokenizer, build_ngrams
from spatular.core.tokenization.universal import token_kind


class DefaultCorpusAnalyzer(CorpusAnalyzer):
    """Adapter: term, n-gram, length and language statistics for a corpus."""

    def __init__(
        self,
        tokenizer: DefaultTokenizer | None = None,
        config: CorpusAnalysisConfig | None = None,
    ):
        self.tokenizer = tokenizer or DefaultTokenizer()
        self.cfg = config or CorpusAnalysisConfig()

    def _language_distribution(self, df: pd.DataFrame) -> Dict[str, float]:
        if self.cfg.language_column not in df.columns or df.empty:
            return {}
        codes = (
            df[self.cfg.language_column]
            .fillna("")
            .astype(str)
            .str.split("-")
            .explode()
            .str.strip()
        )
        counts = codes[codes != ""].value_counts()
        # a bilingual document counts once for each of its languages
        return {
            str(lang): round(float(n) / len(df) * 100, 2)
            for lang, n in counts.items()
        }

    def analyze(self, df: pd.DataFrame) -> Dict[str, Any]:
        if self.cfg.text_column not in df.columns:
            raise KeyError(f"Column '{self.cfg.text_column}' not found in DataFrame.")

        docs = df[self.cfg.text_column].fillna("").astype(str).tolist()
        token_lists = [self.tokenizer.tokenize(d) for d in docs]

        terms = Counter(
            t
            for tokens in token_lists
            for t in tokens
            if not (self.cfg.exclude_numbers and token_kind(t) == "number")
        )
        top_terms = [
            {"term": t, "frequency": int(c)}
            for t, c in terms.most_common(self.cfg.top_terms)
        ]

        ngrams = Counter(
            g
            for tokens in token_lists
            for g in build_ngrams(tokens, self.cfg.ngram_size)
        )
        top_ngrams = [
            {"ngram": g, "count": int(c)}
            for g, c in ngrams.most_common(self.cfg.ngram_top_k)
        ]

        lengths = pd.Series([len(t) for t in token_lists], dtype="int64")
        length_counts = lengths.value_counts().sort_index()
        length_distribution: List[Dict[str, int]] = [
            {"length": int(length), "count": int(count)}
            for length, count in length_counts.items()
        ]

        return {
            "document_count": len(docs),
            "token_count": int(lengths.sum()),
            "language_distribution": self._language_distribution(df),
            "top_terms": top_terms,
            "top_ngrams": top_ngrams,
            "length_distribution": length_distribution,
        }
