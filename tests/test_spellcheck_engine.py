from spelltrie.spellcheck.engine import (
    check_text,
    check_word,
    iter_words,
    normalize_word,
)
from spelltrie.spellcheck.trie import Trie


def _trie(*words: str) -> Trie:
    trie = Trie()
    for word in words:
        trie.insert(word)
    return trie


def test_normalize_word_strips_and_lowercases() -> None:
    assert normalize_word("  Word ") == "word"
    assert normalize_word("") == ""


def test_iter_words_keeps_ascii_letters_only() -> None:
    assert list(iter_words("The cat's 2 hats!")) == ["the", "cat", "s", "hats"]


def test_check_word_normalizes_before_lookup() -> None:
    trie = _trie("word")

    assert check_word(trie, " WORD ") == (True, [])
    found, suggestions = check_word(trie, "Wrod")
    assert not found
    assert suggestions == ["word"]


def test_check_text_reports_each_misspelling_once() -> None:
    trie = _trie("the", "cat", "sat", "on", "mat")

    misspelled = check_text(trie, "The cta sat on teh mat, the cta")

    assert misspelled == {"cta": ["cat"], "teh": ["the"]}


def test_check_text_on_clean_text_is_empty() -> None:
    trie = _trie("hello", "world")

    assert check_text(trie, "Hello world") == {}
