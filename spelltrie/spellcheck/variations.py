from typing import Iterable

DEFAULT_ALPHABET = "abcdefghijklmnopqrstuvwxyz"


def deletes(word: str) -> list[str]:
    # cat -> at, ct, ca
    return [word[:i] + word[i + 1 :] for i in range(len(word))]


def transposes(word: str) -> list[str]:
    # cat -> act, cta
    return [word[:i] + word[i + 1] + word[i] + word[i + 2 :] for i in range(len(word) - 1)]


def replaces(word: str, alphabet: str = DEFAULT_ALPHABET) -> list[str]:
    # cat -> aat, bat, ... caz
    return [word[:i] + c + word[i + 1 :] for i in range(len(word)) for c in alphabet]


def inserts(word: str, alphabet: str = DEFAULT_ALPHABET) -> list[str]:
    # cat -> acat, bcat, ... catz
    return [word[:i] + c + word[i:] for i in range(len(word) + 1) for c in alphabet]


def clear_suggestions(suggestions: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    result: list[str] = []
    for suggestion in suggestions:
        if suggestion in seen:
            continue
        seen.add(suggestion)
        result.append(suggestion)
    return result


def generate_variations(word: str, depth: int, alphabet: str = DEFAULT_ALPHABET) -> list[str]:
    """Every string within ``depth`` single-character edits of ``word``.

    Only the first-level candidates are expanded further, each with
    ``depth - 1``. The result keeps first-seen order: deletions,
    transpositions, replacements and insertions of ``word`` itself, then the
    expansions in the same order. The candidate count grows roughly by a
    factor of ``27 * len(word)`` per level, so keep ``depth`` small.
    """
    if depth <= 0 or not word:
        return []

    base = clear_suggestions(
        deletes(word) + transposes(word) + replaces(word, alphabet) + inserts(word, alphabet)
    )

    result = list(base)
    if depth > 1:
        for variation in base:
            result.extend(generate_variations(variation, depth - 1, alphabet))

    return clear_suggestions(result)
