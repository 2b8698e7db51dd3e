from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List


class Stemmer(ABC):
    """Port: reduce a list of tokens to their stems."""

    @abstractmethod
    def stem(self, tokens: List[str]) -> List[str]: ...
