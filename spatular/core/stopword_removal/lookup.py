from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import List, Optional, Union

from nltk.corpus import stopwords as nltk_stopwords  # type: ignore

from spatular.core.stopword_removal.base import StopwordLookup

logger = logging.getLogger(__name__)

DEFAULT_STOPWORDS_DIR = Path(__file__).resolve().parents[2] / "data" / "stopwords"

# ISO 639-1 code -> NLTK corpus file id
NLTK_LANGUAGES = {
    "ar": "arabic",
    "da": "danish",
    "de": "german",
    "el": "greek",
    "en": "english",
    "es": "spanish",
    "fi": "finnish",
    "fr": "french",
    "hu": "hungarian",
    "id": "indonesian",
    "it": "italian",
    "nl": "dutch",
    "no": "norwegian",
    "pt": "portuguese",
    "ru": "russian",
    "sv": "swedish",
    "tr": "turkish",
}


def json_stopword_lookup(directory: Union[str, Path, None] = None) -> StopwordLookup:
    """Lookup reading ``<directory>/<code>.json`` (a JSON array of strings)."""
    root = Path(directory) if directory else DEFAULT_STOPWORDS_DIR

    def lookup(language: str) -> Optional[List[str]]:
        path = root / f"{language}.json"
        # bare codes only, never a path out of the directory
        if path.parent != root or not path.is_file():
            return None
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"⚠️ Ignoring unreadable stopword file {path}: {e}")
            return None
        if not isinstance(data, list):
            return None
        return [w for w in data if isinstance(w, str)]

    return lookup


def nltk_stopword_lookup(language: str) -> Optional[List[str]]:
    """Lookup backed by the NLTK stopwords corpus (needs ``nltk.download``)."""
    name = NLTK_LANGUAGES.get(language)
    if name is None:
        return None
    try:
        return list(nltk_stopwords.words(name))
    except (LookupError, OSError):
        logger.debug(f"NLTK stopwords corpus unavailable for '{name}'")
        return None


def default_stopword_lookup(source: str = "json", directory=None) -> StopwordLookup:
    if source == "nltk":
        return nltk_stopword_lookup
    return json_stopword_lookup(directory)
