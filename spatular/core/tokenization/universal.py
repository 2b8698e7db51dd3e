from __future__ import annotations
from typing import Iterator, List

import regex

from spatular.core.tokenization.characters import is_number

# letters, optionally joined through combining marks, or a run of digits
UNIVERSAL_WORD_PATTERN = regex.compile(r"\p{L}+(?:\p{M}*\p{L}+)*|\p{N}+")


class UniversalMatcher:
    """Scans text for word and number runs in any Unicode script.

    Punctuation, symbols, emoji and whitespace never form tokens. Each call to
    ``finditer`` starts a fresh scan, so a matcher can be reused freely.
    """

    def __init__(self, pattern: regex.Pattern = UNIVERSAL_WORD_PATTERN):
        self._pattern = pattern

    def finditer(self, text: str) -> Iterator[str]:
        if not text or not isinstance(text, str):
            return iter(())
        return (m.group(0) for m in self._pattern.finditer(text))

    def findall(self, text: str) -> List[str]:
        return list(self.finditer(text))


def token_kind(token: str) -> str:
    """'number' for digit runs, 'word' otherwise."""
    return "number" if token and is_number(token[0]) else "word"


def universal_tokenize(text: str) -> List[str]:
    return UniversalMatcher().findall(text)
