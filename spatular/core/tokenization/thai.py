"""Thai word segmentation.

Two strategies are provided:

* ``DictionarySegmenter`` - greedy longest-match over a word list. At each
  position the longest dictionary word that is a prefix of the remaining text
  is emitted; when nothing matches, a single character is emitted instead.
  ASCII spaces between tokens are skipped. Words are indexed in a character
  trie, which yields exactly the same segmentation as scanning every entry.
  Two distinct words can never tie, since equal-length prefixes of the same
  text are the same string, so the output does not depend on insertion order.

* ``heuristic_segment`` - used when no dictionary is available. It only looks
  at character classes: non-Thai characters and spaces are boundaries, and a
  new token starts at a vowel that follows a consonant. This is a rough
  syllable-level approximation for Thai, not a linguistic segmenter.
"""

from __future__ import annotations
from typing import Dict, Iterable, List, Optional, Set

from spatular.core.tokenization.characters import (
    is_thai,
    is_thai_tone_mark,
    is_thai_vowel,
)

_END = "\0end"


def heuristic_segment(text: str) -> List[str]:
    if not text or not isinstance(text, str):
        return []

    tokens: List[str] = []
    current = ""
    last = len(text) - 1

    for i, char in enumerate(text):
        if char == " " or not is_thai(char):
            if current:
                tokens.append(current)
                current = ""
            if char.strip():
                tokens.append(char)
            continue

        current += char

        next_char = text[i + 1] if i < last else ""
        if (
            not is_thai_vowel(char)
            and not is_thai_tone_mark(char)
            and is_thai_vowel(next_char)
        ):
            tokens.append(current)
            current = ""

    if current:
        tokens.append(current)
    return tokens


class DictionarySegmenter:
    """Longest-match segmenter backed by a character trie."""

    def __init__(self, words: Optional[Iterable[str]] = None):
        self._root: Dict[str, dict] = {}
        self._words: Set[str] = set()
        self.update(words or ())

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __iter__(self):
        return iter(self._words)

    @property
    def words(self) -> Set[str]:
        return set(self._words)

    def add(self, word: str) -> None:
        if not word or word in self._words:
            return
        node = self._root
        for char in word:
            node = node.setdefault(char, {})
        node[_END] = True
        self._words.add(word)

    def update(self, words: Iterable[str]) -> None:
        for word in words:
            self.add(word)

    def discard(self, word: str) -> None:
        if word not in self._words:
            return
        node = self._root
        for char in word:
            node = node[char]
        node.pop(_END, None)
        self._words.discard(word)

    def longest_prefix(self, text: str, start: int = 0) -> int:
        """Length of the longest word starting at ``text[start]``, 0 if none."""
        node = self._root
        longest = 0
        for i in range(start, len(text)):
            node = node.get(text[i])
            if node is None:
                break
            if _END in node:
                longest = i - start + 1
        return longest

    def segment(self, text: str) -> List[str]:
        if not text or not isinstance(text, str):
            return []
        if not self._words:
            return heuristic_segment(text)

        tokens: List[str] = []
        pos = 0
        size = len(text)
        while pos < size:
            length = self.longest_prefix(text, pos) or 1
            tokens.append(text[pos : pos + length])
            pos += length
            while pos < size and text[pos] == " ":
                pos += 1
        return tokens


def dictionary_segment(text: str, dictionary: Optional[Iterable[str]]) -> List[str]:
    """Segment ``text`` against a plain word collection."""
    if isinstance(dictionary, DictionarySegmenter):
        return dictionary.segment(text)
    return DictionarySegmenter(dictionary).segment(text)
