from .engine import (
    WORD_RE,
    SpellCheckerEngine,
    check_text,
    check_word,
    iter_words,
    normalize_word,
)
from .trie import DEFAULT_DEPTH, LetterNode, Trie
from .variations import (
    DEFAULT_ALPHABET,
    clear_suggestions,
    deletes,
    generate_variations,
    inserts,
    replaces,
    transposes,
)

__all__ = [
    "DEFAULT_ALPHABET",
    "DEFAULT_DEPTH",
    "LetterNode",
    "Trie",
    "WORD_RE",
    "SpellCheckerEngine",
    "check_text",
    "check_word",
    "clear_suggestions",
    "deletes",
    "generate_variations",
    "inserts",
    "iter_words",
    "normalize_word",
    "replaces",
    "transposes",
]
