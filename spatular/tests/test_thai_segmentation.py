import pytest

from spatular.core.tokenization.thai import (
    DictionarySegmenter,
    dictionary_segment,
    heuristic_segment,
)


def naive_segment(text, words):
    """Linear-scan longest match, the reference behaviour."""
    tokens = []
    remaining = text
    while remaining:
        longest = ""
        for word in words:
            if remaining.startswith(word) and len(word) > len(longest):
                longest = word
        token = longest or remaining[0]
        tokens.append(token)
        remaining = remaining[len(token):].lstrip(" ")
    return tokens


def test_known_words_are_kept_whole():
    assert dictionary_segment("การประมวล", {"การ", "ประมวล"}) == ["การ", "ประมวล"]


def test_longest_prefix_wins():
    assert dictionary_segment("abcd", {"a", "ab", "abc"}) == ["abc", "d"]


def test_unknown_characters_are_emitted_one_by_one():
    assert dictionary_segment("xyการ", {"การ"}) == ["x", "y", "การ"]


def test_ascii_spaces_between_tokens_are_skipped():
    assert dictionary_segment("ab   ab", {"ab"}) == ["ab", "ab"]
    # other whitespace is not skipped
    assert dictionary_segment("ab\tab", {"ab"}) == ["ab", "\t", "ab"]


def test_entries_with_spaces_match_literally():
    assert dictionary_segment("new york city", {"new york"}) == [
        "new york",
        "c",
        "i",
        "t",
        "y",
    ]


def test_empty_dictionary_falls_back_to_heuristic():
    assert dictionary_segment("กข ค", set()) == heuristic_segment("กข ค")
    assert dictionary_segment("กข ค", None) == ["กข", "ค"]


@pytest.mark.parametrize(
    "text",
    [
        "การประมวลผลภาษาธรรมชาติเป็นสาขาหนึ่งของปัญญาประดิษฐ์",
        "นายกรัฐมนตรีประกาศมาตรการใหม่เพื่อกระตุ้นเศรษฐกิจ",
        "ผมทำงานเป็น software engineer ที่บริษัทในกรุงเทพฯ",
        "ประชากรของประเทศไทยมีประมาณ 70 ล้านคนในปี 2023",
    ],
)
def test_trie_matches_linear_scan(text, sample_dictionary_path):
    words = {
        w.strip()
        for w in sample_dictionary_path.read_text(encoding="utf-8").splitlines()
        if w.strip()
    }
    assert DictionarySegmenter(words).segment(text) == naive_segment(text, words)


def test_segmenter_add_and_discard():
    seg = DictionarySegmenter(["ab", "abc"])
    assert len(seg) == 2 and "abc" in seg
    seg.discard("abc")
    assert seg.segment("abc") == ["ab", "c"]
    seg.add("abc")
    assert seg.segment("abc") == ["abc"]
    seg.add("")
    assert len(seg) == 2


def test_longest_prefix_from_offset():
    seg = DictionarySegmenter(["ค", "คน"])
    assert seg.longest_prefix("ดีคนดี", 2) == 2
    assert seg.longest_prefix("ดีคนดี", 0) == 0


def test_heuristic_splits_before_vowel_after_consonant():
    assert heuristic_segment("สวัสดี") == ["สว", "ัสด", "ี"]
    assert heuristic_segment("การประมวล") == ["ก", "ารปร", "ะมวล"]


def test_heuristic_tone_mark_does_not_split():
    # mai ek followed by sara aa: tone marks never close a token
    assert heuristic_segment("\u0e01\u0e48\u0e32") == ["\u0e01\u0e48\u0e32"]


def test_heuristic_boundaries_on_non_thai():
    assert heuristic_segment("กข ค") == ["กข", "ค"]
    assert heuristic_segment("กข!ค") == ["กข", "!", "ค"]
    assert heuristic_segment("กข\nค") == ["กข", "ค"]
    assert heuristic_segment("ab") == ["a", "b"]


def test_segmenters_accept_bad_input():
    assert heuristic_segment("") == []
    assert heuristic_segment(None) == []
    assert DictionarySegmenter(["ab"]).segment(None) == []
