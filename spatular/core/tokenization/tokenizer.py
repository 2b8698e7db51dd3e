from __future__ import annotations
import logging
from collections import Counter
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Set, Union

from spatular.core.dictionary.loader import (
    clean_words,
    read_segmenter,
    read_segmenter_async,
)
from spatular.core.stemming.config import StemmingConfig
from spatular.core.stemming.stemmer import SuffixStemmer
from spatular.core.stopword_removal.base import StopwordLookup
from spatular.core.stopword_removal.config import StopwordConfig
from spatular.core.stopword_removal.lookup import json_stopword_lookup
from spatular.core.stopword_removal.removal import DefaultStopwordRemover
from spatular.core.tokenization.base import Tokenizer
from spatular.core.tokenization.config import TokenizationConfig
from spatular.core.tokenization.thai import DictionarySegmenter, heuristic_segment
from spatular.core.tokenization.universal import UniversalMatcher

logger = logging.getLogger(__name__)


def _as_word_list(words: Union[str, Iterable[str], None]) -> List[str]:
    if words is None:
        return []
    if isinstance(words, str):
        return [words]
    return [w for w in words if isinstance(w, str)]


def build_ngrams(tokens: List[str], n: int) -> List[str]:
    """Space-joined windows of ``n`` consecutive tokens."""
    if n < 1:
        return []
    return [" ".join(tokens[i : i + n]) for i in range(len(tokens) - n + 1)]


class DefaultTokenizer(Tokenizer):
    """Adapter: multilingual tokenizer with a fixed post-processing pipeline.

    Raw tokens come from the universal matcher, or for dictionary languages
    (Thai) from longest-match dictionary segmentation, falling back to the
    heuristic segmenter while the dictionary is missing or empty. They then
    go through lowercasing, stopword removal and stemming, in that order,
    each stage enabled by the config.

    The stopword set and dictionary belong to the instance. A
    ``DictionarySegmenter`` passed in is shared for reads only; the first
    add or remove through this tokenizer works on a private copy. Sharing
    one instance between threads that mutate it needs external locking.
    """

    def __init__(
        self,
        config: TokenizationConfig | None = None,
        dictionary: Optional[Iterable[str]] = None,
        stopword_lookup: Optional[StopwordLookup] = None,
        stemming_config: StemmingConfig | None = None,
    ):
        self.cfg = config or TokenizationConfig()
        self._matcher = UniversalMatcher()
        self._stopwords = DefaultStopwordRemover(
            StopwordConfig(
                language=self.cfg.language,
                custom_stopwords=self.cfg.custom_stopwords,
            ),
            lookup=stopword_lookup or json_stopword_lookup(),
        )
        self._stemming = stemming_config or StemmingConfig()
        self._stemmer = SuffixStemmer()
        self._dictionary: Optional[DictionarySegmenter] = None
        self._owns_dictionary = True
        if isinstance(dictionary, DictionarySegmenter):
            # shared index, e.g. one service-wide dictionary
            self._dictionary = dictionary
            self._owns_dictionary = False
        elif dictionary is not None:
            self._dictionary = DictionarySegmenter(clean_words(dictionary))

    # ------------------------------------------------------------------
    # Segmentation + pipeline
    # ------------------------------------------------------------------
    def segment(self, text: str) -> List[str]:
        """Raw tokens, before any post-processing."""
        if not text or not isinstance(text, str):
            return []
        if self.cfg.uses_dictionary:
            if self._dictionary is not None and len(self._dictionary):
                return self._dictionary.segment(text)
            return heuristic_segment(text)
        return self._matcher.findall(text)

    def tokenize(self, text: str) -> List[str]:
        tokens = self.segment(text)
        if not tokens:
            return []

        if self.cfg.lowercase and not self.cfg.uses_dictionary:
            tokens = [t.lower() for t in tokens]

        if self.cfg.remove_stopwords:
            tokens, _removed = self._stopwords.remove(tokens)

        if self.cfg.stemming and self._stemming.supports(self.cfg.language):
            tokens = self._stemmer.stem(tokens)

        return tokens

    def ngram_tokenize(self, text: str, n: int = 2) -> List[str]:
        if not isinstance(n, int) or n < 1:
            return []
        return build_ngrams(self.tokenize(text), n)

    def get_token_frequency(self, text: str) -> Dict[str, int]:
        return dict(Counter(self.tokenize(text)))

    # ------------------------------------------------------------------
    # Stopwords
    # ------------------------------------------------------------------
    @property
    def stopwords(self) -> Set[str]:
        return self._stopwords.stopwords

    def add_stopwords(self, words: Union[str, Iterable[str], None]) -> None:
        self._stopwords.add(_as_word_list(words))

    def remove_stopwords(self, words: Union[str, Iterable[str], None]) -> None:
        self._stopwords.discard(_as_word_list(words))

    # ------------------------------------------------------------------
    # Dictionary
    # ------------------------------------------------------------------
    @property
    def dictionary(self) -> Optional[Set[str]]:
        return None if self._dictionary is None else self._dictionary.words

    def _own_dictionary(self) -> None:
        if not self._owns_dictionary:
            self._dictionary = DictionarySegmenter(self._dictionary.words)
            self._owns_dictionary = True

    def _install_dictionary(self, segmenter: DictionarySegmenter) -> int:
        self._dictionary = segmenter
        self._owns_dictionary = True
        logger.info(f"✅ Dictionary installed with {len(segmenter)} words")
        return len(self._dictionary)

    def load_dictionary(self, path: Union[str, Path]) -> int:
        """Replace the dictionary with a word list file; returns its size.

        Raises ``DictionaryLoadError`` and keeps the current dictionary if the
        file cannot be read.
        """
        return self._install_dictionary(read_segmenter(path))

    async def load_dictionary_async(self, path: Union[str, Path]) -> int:
        """Non-blocking ``load_dictionary``: reads and indexes in a worker thread."""
        return self._install_dictionary(await read_segmenter_async(path))

    def add_dictionary_words(self, words: Union[str, Iterable[str], None]) -> int:
        if self._dictionary is None:
            self._dictionary = DictionarySegmenter()
        self._own_dictionary()
        self._dictionary.update(clean_words(_as_word_list(words)))
        return len(self._dictionary)

    def remove_dictionary_words(self, words: Union[str, Iterable[str], None]) -> int:
        if self._dictionary is None:
            return 0
        self._own_dictionary()
        for word in clean_words(_as_word_list(words)):
            self._dictionary.discard(word)
        return len(self._dictionary)
