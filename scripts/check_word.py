#!/usr/bin/env python3
import argparse
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from spelltrie.batch.word_loader import new_trie
from spelltrie.spellcheck.engine import normalize_word


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Load a word list and check words against it."
    )
    parser.add_argument("words", nargs="+", help="Words to check")
    parser.add_argument("--words-file", help="Local word list, one word per line")
    parser.add_argument("--url", help="Remote word list URL")
    parser.add_argument("--depth", type=int, default=None, help="Edit depth for suggestions")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO)
    trie = new_trie(args.depth, url=args.url, path=args.words_file, strict=True)

    for raw_word in args.words:
        word = normalize_word(raw_word)
        found, suggestions = trie.search(word)
        if found:
            print(f"{word}: ok")
        else:
            print(f"{word}: unknown -> {', '.join(suggestions) or '(none)'}")


if __name__ == "__main__":
    main()
