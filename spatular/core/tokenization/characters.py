from __future__ import annotations
import unicodedata

# Thai block and the sub-ranges used by the heuristic segmenter
THAI_BLOCK = (0x0E00, 0x0E7F)
THAI_VOWEL_RANGES = ((0x0E30, 0x0E3A), (0x0E40, 0x0E45))
THAI_TONE_MARK_RANGES = ((0x0E47, 0x0E4E),)


def _in_ranges(char: str, ranges) -> bool:
    if len(char) != 1:
        return False
    cp = ord(char)
    return any(lo <= cp <= hi for lo, hi in ranges)


def is_letter(char: str) -> bool:
    """Unicode general category L* (Lu, Ll, Lt, Lm, Lo)."""
    return len(char) == 1 and unicodedata.category(char).startswith("L")


def is_mark(char: str) -> bool:
    """Unicode general category M* (Mn, Mc, Me)."""
    return len(char) == 1 and unicodedata.category(char).startswith("M")


def is_number(char: str) -> bool:
    """Unicode general category N* (Nd, Nl, No)."""
    return len(char) == 1 and unicodedata.category(char).startswith("N")


def is_thai(char: str) -> bool:
    return _in_ranges(char, (THAI_BLOCK,))


def is_thai_vowel(char: str) -> bool:
    return _in_ranges(char, THAI_VOWEL_RANGES)


def is_thai_tone_mark(char: str) -> bool:
    return _in_ranges(char, THAI_TONE_MARK_RANGES)
