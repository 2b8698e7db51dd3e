from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Callable, Iterable, List, Optional, Tuple

# language code -> extra stopwords, or None when the language has no list
StopwordLookup = Callable[[str], Optional[List[str]]]


class StopwordRemover(ABC):
    """Port: remove stopwords from a token list."""

    @abstractmethod
    def remove(self, tokens: List[str]) -> Tuple[List[str], List[str]]:
        """
        Returns (cleaned_tokens, removed_stopwords)
        """
        ...

    @abstractmethod
    def add(self, words: Iterable[str]) -> None: ...

    @abstractmethod
    def discard(self, words: Iterable[str]) -> None: ...
