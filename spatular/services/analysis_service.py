from __future__ import annotations
from typing import Any, Dict, List

import pandas as pd

from spatular.core.analysis.analyzer import DefaultCorpusAnalyzer
from spatular.core.analysis.config import CorpusAnalysisConfig
from spatular.schemas.analysis import AnalysisDocument
from spatular.schemas.tokenize import TokenizeOptions
from spatular.services.tokenization_service import TokenizationService


class AnalysisService:
    """Runs corpus analysis with a tokenizer built by the tokenization service."""

    def __init__(self, tokenization: TokenizationService):
        self.tokenization = tokenization

    @staticmethod
    def to_frame(documents: List[AnalysisDocument]) -> pd.DataFrame:
        return pd.DataFrame(
            {
                "text": [d.text for d in documents],
                "language": [d.language for d in documents],
            }
        )

    def summarize(
        self,
        documents: List[AnalysisDocument],
        options: TokenizeOptions,
        config: CorpusAnalysisConfig | None = None,
    ) -> Dict[str, Any]:
        analyzer = DefaultCorpusAnalyzer(
            tokenizer=self.tokenization.tokenizer_for(options),
            config=config or CorpusAnalysisConfig(),
        )
        return analyzer.analyze(self.to_frame(documents))
