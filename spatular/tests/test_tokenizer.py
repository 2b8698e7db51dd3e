import asyncio
import threading

import pytest

from spatular.core.dictionary import loader
from spatular.core.tokenization.config import TokenizationConfig
from spatular.core.tokenization.thai import DictionarySegmenter
from spatular.core.tokenization.tokenizer import DefaultTokenizer, build_ngrams
from spatular.utils.exceptions import DictionaryLoadError


def make(**kwargs) -> DefaultTokenizer:
    return DefaultTokenizer(TokenizationConfig(**kwargs))


# -------------------------------------
# Universal mode + pipeline
# -------------------------------------
def test_default_tokenize():
    assert make().tokenize("the cat sat") == ["the", "cat", "sat"]
    assert make().tokenize("abc123") == ["abc", "123"]


def test_mixed_scripts_without_dictionary():
    assert make().tokenize("English, 日本語, ไทย") == ["english", "日本語", "ไทย"]


def test_lowercase_can_be_disabled():
    assert make(lowercase=False).tokenize("Hello World") == ["Hello", "World"]


def test_stopwords_compare_lowercase_even_without_folding():
    tok = make(lowercase=False, remove_stopwords=True)
    assert tok.tokenize("The Cat IS Here") == ["Cat"]


def test_stemming_for_supported_language():
    tok = make(remove_stopwords=True, stemming=True)
    assert tok.tokenize("The cats were running") == ["cat", "run"]


def test_stemming_skipped_for_other_languages():
    assert make(stemming=True, language="ru").tokenize("cats") == ["cats"]


def test_custom_stopwords_from_config():
    tok = make(remove_stopwords=True, custom_stopwords=["Cat"])
    assert tok.tokenize("the cat sat") == ["sat"]


def test_language_stopwords_are_loaded():
    tok = make(remove_stopwords=True, language="es")
    assert tok.tokenize("el gato y la casa") == ["gato", "casa"]


def test_stopwords_added_and_removed_at_runtime():
    tok = make(remove_stopwords=True)
    tok.add_stopwords(["Sat"])
    assert tok.tokenize("the cat sat") == ["cat"]
    tok.remove_stopwords(["the"])
    assert tok.tokenize("the cat sat") == ["the", "cat"]
    tok.add_stopwords("cat")
    tok.add_stopwords(None)
    assert tok.tokenize("the cat sat") == ["the"]
    assert "cat" in tok.stopwords


def test_instances_do_not_share_stopwords():
    first, second = make(remove_stopwords=True), make(remove_stopwords=True)
    first.add_stopwords(["cat"])
    assert second.tokenize("cat") == ["cat"]


# -------------------------------------
# Dictionary mode
# -------------------------------------
def test_thai_without_dictionary_uses_heuristic():
    assert make(language="th").tokenize("กข ค") == ["กข", "ค"]


def test_thai_with_dictionary_uses_longest_match():
    tok = DefaultTokenizer(
        TokenizationConfig(language="th"), dictionary={"การ", "ประมวล"}
    )
    assert tok.tokenize("การประมวล") == ["การ", "ประมวล"]


def test_thai_with_empty_dictionary_uses_heuristic():
    tok = DefaultTokenizer(TokenizationConfig(language="th"), dictionary=set())
    assert tok.tokenize("กข ค") == ["กข", "ค"]


def test_thai_tokens_are_not_lowercased_or_stemmed():
    tok = DefaultTokenizer(
        TokenizationConfig(language="th", stemming=True), dictionary={"การ", "cats"}
    )
    assert tok.tokenize("การABC") == ["การ", "A", "B", "C"]
    assert tok.tokenize("cats") == ["cats"]


def test_dictionary_ignored_for_other_languages():
    tok = DefaultTokenizer(dictionary={"ab"})
    assert tok.tokenize("abc de") == ["abc", "de"]


def test_shared_segmenter_is_not_copied():
    shared = DictionarySegmenter(["การ"])
    tok = DefaultTokenizer(TokenizationConfig(language="th"), dictionary=shared)
    shared.add("ประมวล")
    assert tok.tokenize("การประมวล") == ["การ", "ประมวล"]


def test_tokenizers_on_one_segmenter_keep_their_own_edits():
    shared = DictionarySegmenter(["การ"])
    first = DefaultTokenizer(TokenizationConfig(language="th"), dictionary=shared)
    second = DefaultTokenizer(TokenizationConfig(language="th"), dictionary=shared)

    first.add_dictionary_words(["ประมวล"])
    first.remove_dictionary_words(["การ"])

    assert first.dictionary == {"ประมวล"}
    assert second.dictionary == {"การ"}
    assert shared.words == {"การ"}


def test_add_dictionary_words_creates_dictionary():
    tok = make(language="th")
    assert tok.dictionary is None
    assert tok.add_dictionary_words(["การ", "  ประมวล ", "", 5]) == 2
    assert tok.dictionary == {"การ", "ประมวล"}
    assert tok.tokenize("การประมวล") == ["การ", "ประมวล"]


def test_remove_dictionary_words():
    tok = make(language="th")
    assert tok.remove_dictionary_words(["การ"]) == 0
    tok.add_dictionary_words(["ab", "abc"])
    assert tok.remove_dictionary_words(["abc"]) == 1
    assert tok.dictionary == {"ab"}


def test_load_dictionary(word_file):
    path = word_file("การ\r\nประมวล\n\n   \n  ผล  \nการ\n")
    tok = make(language="th")
    assert tok.load_dictionary(path) == 3
    assert tok.dictionary == {"การ", "ประมวล", "ผล"}
    assert tok.tokenize("การประมวลผล") == ["การ", "ประมวล", "ผล"]


def test_load_dictionary_async_matches_blocking(word_file, sample_dictionary_path):
    blocking = make(language="th")
    non_blocking = make(language="th")
    count = blocking.load_dictionary(sample_dictionary_path)
    loaded = asyncio.run(non_blocking.load_dictionary_async(sample_dictionary_path))
    assert loaded == count
    assert blocking.dictionary == non_blocking.dictionary

    text = "การประมวลผลภาษาธรรมชาติเป็นสาขาหนึ่งของปัญญาประดิษฐ์"
    assert blocking.tokenize(text) == non_blocking.tokenize(text)


def test_async_load_indexes_off_the_calling_thread(monkeypatch, word_file):
    built_on = []

    class RecordingSegmenter(DictionarySegmenter):
        def __init__(self, words=()):
            built_on.append(threading.get_ident())
            super().__init__(words)

    monkeypatch.setattr(loader, "DictionarySegmenter", RecordingSegmenter)
    tok = make(language="th")

    assert asyncio.run(tok.load_dictionary_async(word_file("การ\nผล\n"))) == 2
    assert built_on and threading.get_ident() not in built_on


def test_failed_load_keeps_previous_dictionary(tmp_path):
    tok = make(language="th")
    tok.add_dictionary_words(["การ"])

    with pytest.raises(DictionaryLoadError) as exc:
        tok.load_dictionary(tmp_path / "missing.txt")
    assert "missing.txt" in exc.value.path
    assert tok.dictionary == {"การ"}

    bad = tmp_path / "latin1.txt"
    bad.write_bytes(b"caf\xe9\n")
    with pytest.raises(DictionaryLoadError):
        asyncio.run(tok.load_dictionary_async(bad))
    assert tok.dictionary == {"การ"}


# -------------------------------------
# Derived operations
# -------------------------------------
def test_ngram_tokenize():
    tok = make()
    assert tok.ngram_tokenize("a b c d") == ["a b", "b c", "c d"]
    assert tok.ngram_tokenize("a b c d", 1) == ["a", "b", "c", "d"]
    assert tok.ngram_tokenize("a b c d", 4) == ["a b c d"]
    assert tok.ngram_tokenize("a b c d", 5) == []
    assert tok.ngram_tokenize("a b c d", 0) == []


@pytest.mark.parametrize("n", [1, 2, 3, 6, 7, 10])
def test_ngram_count(n):
    tokens = ["t1", "t2", "t3", "t4", "t5", "t6"]
    assert len(build_ngrams(tokens, n)) == max(len(tokens) - n + 1, 0)


def test_token_frequency():
    freq = make().get_token_frequency("The cat and the hat")
    assert freq == {"the": 2, "cat": 1, "and": 1, "hat": 1}


def test_bad_input_never_raises():
    tok = make()
    for value in (None, "", 123, ["a"]):
        assert tok.tokenize(value) == []
        assert tok.ngram_tokenize(value) == []
        assert tok.get_token_frequency(value) == {}
    assert make(language="th").tokenize(None) == []


def test_config_is_immutable():
    cfg = TokenizationConfig(custom_stopwords=["a", "b"])
    assert cfg.custom_stopwords == ("a", "b")
    with pytest.raises(AttributeError):
        cfg.language = "th"
