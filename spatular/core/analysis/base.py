from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Dict

import pandas as pd


class CorpusAnalyzer(ABC):
    """Port: summarize a DataFrame of documents."""

    @abstractmethod
    def analyze(self, df: pd.DataFrame) -> Dict[str, Any]: ...
