import re
from typing import Iterable

from spelltrie.spellcheck.trie import Trie

WORD_RE = re.compile(r"\b[a-zA-Z]{1,32}\b")


class SpellCheckerEngine:
    def normalize_word(self, word: str) -> str:
        return (word or "").strip().lower()

    def iter_words(self, text: str) -> Iterable[str]:
        for token in WORD_RE.findall((text or "").lower()):
            if token:
                yield token

    def check_word(self, trie: Trie, word: str) -> tuple[bool, list[str]]:
        return trie.search(self.normalize_word(word))

    def check_text(self, trie: Trie, text: str) -> dict[str, list[str]]:
        misspelled: dict[str, list[str]] = {}
        seen: set[str] = set()
        for word in self.iter_words(text):
            if word in seen:
                continue
            seen.add(word)

            found, suggestions = trie.search(word)
            if not found:
                misspelled[word] = suggestions
        return misspelled


spellchecker_engine = SpellCheckerEngine()


def normalize_word(word: str) -> str:
    return spellchecker_engine.normalize_word(word)


def iter_words(text: str) -> Iterable[str]:
    return spellchecker_engine.iter_words(text)


def check_word(trie: Trie, word: str) -> tuple[bool, list[str]]:
    return spellchecker_engine.check_word(trie, word)


def check_text(trie: Trie, text: str) -> dict[str, list[str]]:
    return spellchecker_engine.check_text(trie, text)
