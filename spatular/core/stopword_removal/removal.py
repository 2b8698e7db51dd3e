from __future__ import annotations
import logging
from typing import Iterable, List, Optional, Set, Tuple

from spatular.core.stopword_removal.base import StopwordLookup, StopwordRemover
from spatular.core.stopword_removal.config import StopwordConfig

logger = logging.getLogger(__name__)

# English base list, always present regardless of language
BASE_STOPWORDS = frozenset(
    """
    a an the and or but is are was were be been being in on at to for with by
    about against between into through during before after above below from up
    down of off over under again further then once here there when where why
    how all any both each few more most other some such no nor not only own
    same so than too very i me my myself we our ours ourselves you your yours
    yourself yourselves he him his himself she her hers herself it its itself
    they them their theirs themselves what which who whom this that these
    those am have has had having do does did doing would should could ought
    i'm you're he's she's it's we're they're i've you've we've they've i'd
    you'd he'd she'd we'd they'd i'll you'll he'll she'll we'll they'll isn't
    aren't wasn't weren't hasn't haven't hadn't doesn't don't didn't won't
    wouldn't shan't shouldn't can't cannot couldn't mustn't let's that's
    who's what's here's there's when's where's why's how's
    """.split()
)


def _lowered(words: Iterable[str]) -> Set[str]:
    return {w.lower() for w in words if isinstance(w, str)}


class DefaultStopwordRemover(StopwordRemover):
    """Case-insensitive stopword filter owning a mutable stopword set."""

    def __init__(
        self,
        config: StopwordConfig | None = None,
        lookup: Optional[StopwordLookup] = None,
    ):
        self.cfg = config or StopwordConfig()
        self._lookup = lookup
        self._stopset = self._build_stopset()

    def _build_stopset(self) -> Set[str]:
        base: Set[str] = set(BASE_STOPWORDS)

        if self.cfg.language != "en" and self._lookup is not None:
            extra = self._lookup(self.cfg.language)
            if extra is None:
                logger.debug(
                    f"No stopword list for '{self.cfg.language}', using English only"
                )
            else:
                base |= _lowered(extra)

        base |= _lowered(self.cfg.custom_stopwords)
        return base

    @property
    def stopwords(self) -> Set[str]:
        return set(self._stopset)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.lower() in self._stopset

    def __len__(self) -> int:
        return len(self._stopset)

    def add(self, words: Iterable[str]) -> None:
        self._stopset |= _lowered(words)

    def discard(self, words: Iterable[str]) -> None:
        self._stopset -= _lowered(words)

    def remove(self, tokens: List[str]) -> Tuple[List[str], List[str]]:
        cleaned: List[str] = []
        removed: List[str] = []
        for t in tokens:
            if t.lower() in self._stopset:
                removed.append(t)
                continue
            cleaned.append(t)
        return cleaned, removed
