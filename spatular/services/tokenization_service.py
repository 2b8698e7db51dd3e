from __future__ import annotations
import logging
from typing import Dict, Iterable, List, Optional, Tuple

from fastapi import Request

from spatular.core.config import Settings
from spatular.core.dictionary.loader import clean_words, read_segmenter_async
from spatular.core.stopword_removal.base import StopwordLookup
from spatular.core.stopword_removal.lookup import default_stopword_lookup
from spatular.core.tokenization.config import TokenizationConfig
from spatular.core.tokenization.thai import DictionarySegmenter
from spatular.core.tokenization.tokenizer import DefaultTokenizer
from spatular.schemas.tokenize import TokenizeOptions

logger = logging.getLogger(__name__)


class TokenizationService:
    """
    Builds request-scoped tokenizers.
    - One Thai dictionary shared by every request (loaded from file and/or
      extended through the API)
    - Stopword lists come from the configured lookup (bundled JSON or NLTK)
    """

    def __init__(
        self,
        stopword_lookup: StopwordLookup,
        default_language: str = "en",
        dictionary_path: Optional[str] = None,
    ):
        self.stopword_lookup = stopword_lookup
        self.default_language = default_language
        self.dictionary_path = dictionary_path
        self.dictionary = DictionarySegmenter()

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenizationService":
        return cls(
            stopword_lookup=default_stopword_lookup(
                settings.STOPWORD_SOURCE, settings.STOPWORDS_DIR
            ),
            default_language=settings.DEFAULT_LANGUAGE,
            dictionary_path=settings.THAI_DICTIONARY_PATH,
        )

    # ------------------------------------------------------------------
    # Tokenization
    # ------------------------------------------------------------------
    def config_for(self, options: TokenizeOptions) -> TokenizationConfig:
        return TokenizationConfig(
            lowercase=options.lowercase,
            remove_stopwords=options.remove_stopwords,
            stemming=options.stemming,
            language=(options.language or self.default_language).lower(),
            custom_stopwords=tuple(options.custom_stopwords),
        )

    def tokenizer_for(self, options: TokenizeOptions) -> DefaultTokenizer:
        return DefaultTokenizer(
            self.config_for(options),
            dictionary=self.dictionary if options.use_dictionary else None,
            stopword_lookup=self.stopword_lookup,
        )

    def tokenize(self, text: str, options: TokenizeOptions) -> List[str]:
        return self.tokenizer_for(options).tokenize(text)

    def ngrams(self, text: str, n: int, options: TokenizeOptions) -> List[str]:
        return self.tokenizer_for(options).ngram_tokenize(text, n)

    def frequencies(self, text: str, options: TokenizeOptions) -> Dict[str, int]:
        return self.tokenizer_for(options).get_token_frequency(text)

    @staticmethod
    def top_frequencies(
        freq: Dict[str, int], top_k: Optional[int] = None
    ) -> List[Tuple[str, int]]:
        # most frequent first, ties alphabetical
        ranked = sorted(freq.items(), key=lambda kv: (-kv[1], kv[0]))
        return ranked[:top_k] if top_k else ranked

    # ------------------------------------------------------------------
    # Shared dictionary
    # ------------------------------------------------------------------
    async def reload_dictionary(self) -> int:
        """Replace the shared dictionary with ``dictionary_path``'s contents.

        On ``DictionaryLoadError`` the current dictionary stays in place.
        """
        if not self.dictionary_path:
            return len(self.dictionary)
        self.dictionary = await read_segmenter_async(self.dictionary_path)
        logger.info(
            f"✅ Thai dictionary ready ({len(self.dictionary)} words "
            f"from {self.dictionary_path})"
        )
        return len(self.dictionary)

    def add_words(self, words: Iterable[str]) -> int:
        self.dictionary.update(clean_words(words))
        return len(self.dictionary)

    def remove_words(self, words: Iterable[str]) -> int:
        for word in clean_words(words):
            self.dictionary.discard(word)
        return len(self.dictionary)


def get_tokenization_service(request: Request) -> TokenizationService:
    return request.app.state.tokenization_service
