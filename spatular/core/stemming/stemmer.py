from __future__ import annotations
import re
from typing import List

from spatular.core.stemming.base import Stemmer

_VOWEL = re.compile(r"[aeiou]")


def _has_vowel(s: str) -> bool:
    return _VOWEL.search(s) is not None


def _step_1a(word: str) -> str:
    # plurals
    if word.endswith("sses") or word.endswith("ies"):
        return word[:-2]
    if word.endswith("ss"):
        return word
    if word.endswith("s"):
        return word[:-1]
    return word


def _step_1b(word: str) -> str:
    # -eed, -ed, -ing
    if word.endswith("eed"):
        return word[:-1]

    if word.endswith("ed") and _has_vowel(word[:-2]):
        word = word[:-2]
    elif word.endswith("ing") and _has_vowel(word[:-3]):
        word = word[:-3]
    else:
        return word

    if word.endswith(("at", "bl", "iz")):
        return word + "e"
    if len(word) > 2 and word[-1] == word[-2] and word[-1] not in "lsz":
        return word[:-1]
    return word


def _step_1c(word: str) -> str:
    # y -> i after a consonant
    if word.endswith("y") and len(word) > 2 and not _has_vowel(word[-2]):
        return word[:-1] + "i"
    return word


def stem(token: str) -> str:
    """Approximate Porter stemmer covering steps 1a, 1b and 1c only.

    The token is lowercased first. Later Porter steps (-ational, -ness, ...)
    are not implemented, so results are coarser than a full stemmer.

    >>> stem("caresses"), stem("running"), stem("happy")
    ('caress', 'run', 'happi')
    """
    if not token or not isinstance(token, str):
        return ""
    word = token.lower()
    word = _step_1a(word)
    word = _step_1b(word)
    return _step_1c(word)


class SuffixStemmer(Stemmer):
    """Adapter: applies ``stem`` to every token."""

    def stem(self, tokens: List[str]) -> List[str]:
        return [stem(t) for t in tokens]
