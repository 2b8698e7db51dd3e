from __future__ import annotations
import asyncio
import logging
import re
from pathlib import Path
from typing import Iterable, Set, Union

from spatular.core.tokenization.thai import DictionarySegmenter
from spatular.utils.exceptions import DictionaryLoadError

logger = logging.getLogger(__name__)

_LINE_SPLIT = re.compile(r"\r?\n")

PathLike = Union[str, Path]


def parse_word_list(content: str) -> Set[str]:
    """One word per line; surrounding whitespace trimmed, blank lines skipped."""
    return {w.strip() for w in _LINE_SPLIT.split(content) if w.strip()}


def clean_words(words: Iterable[str]) -> Set[str]:
    """Keep non-blank strings, trimmed. Anything else is ignored."""
    return {w.strip() for w in words if isinstance(w, str) and w.strip()}


def read_word_list(path: PathLike) -> Set[str]:
    """Blocking read of a UTF-8 word list. Raises ``DictionaryLoadError``."""
    try:
        content = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.exception(f"❌ Failed to load dictionary from {path}: {e}")
        raise DictionaryLoadError(path, e) from e

    words = parse_word_list(content)
    logger.info(f"📖 Loaded {len(words)} words from {path}")
    return words


def read_segmenter(path: PathLike) -> DictionarySegmenter:
    return DictionarySegmenter(read_word_list(path))


async def read_segmenter_async(path: PathLike) -> DictionarySegmenter:
    """Reads the file and builds the trie in a worker thread."""
    return await asyncio.to_thread(read_segmenter, path)
