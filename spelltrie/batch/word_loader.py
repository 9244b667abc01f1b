import logging
import time
from pathlib import Path
from typing import Iterable, Iterator

import httpx

from spelltrie.common.config import settings
from spelltrie.spellcheck.engine import normalize_word
from spelltrie.spellcheck.trie import Trie

logger = logging.getLogger(__name__)


def _fetch_lines(url: str) -> Iterator[str]:
    timeout = httpx.Timeout(settings.request_timeout_s)
    with httpx.stream(
        "GET",
        url,
        headers={"User-Agent": settings.user_agent},
        timeout=timeout,
        follow_redirects=True,
    ) as resp:
        resp.raise_for_status()
        for raw_line in resp.iter_lines():
            line = raw_line.strip()
            if line:
                yield line


def _read_lines(path: str | Path) -> Iterator[str]:
    with Path(path).open(encoding="utf-8", errors="ignore") as fp:
        for raw_line in fp:
            line = raw_line.strip()
            if line:
                yield line


def insert_lines(trie: Trie, lines: Iterable[str]) -> int:
    inserted = 0
    for raw_line in lines:
        word = normalize_word(raw_line)
        if not word:
            continue
        trie.insert(word)
        inserted += 1
    return inserted


def load_words(
    trie: Trie,
    *,
    url: str | None = None,
    path: str | Path | None = None,
    strict: bool = False,
) -> int:
    """Populate ``trie`` from a word file or URL, one word per line.

    ``path`` wins over ``url``; with neither, the configured source is used.
    Entries are normalized the same way queries are. A failing source leaves
    whatever was inserted before the failure, unless ``strict`` is set.
    """
    if path is None and url is None:
        path = settings.words_path
        url = settings.words_url

    if path is not None:
        source, lines = str(path), _read_lines(path)
    else:
        source, lines = url, _fetch_lines(url)

    loaded = insert_lines(trie, _guarded_lines(lines, source, strict))
    logger.info("loaded %s words from %s", loaded, source)
    return loaded


def _guarded_lines(lines: Iterable[str], source: str, strict: bool) -> Iterator[str]:
    try:
        yield from lines
    except (OSError, httpx.HTTPError):
        if strict:
            raise
        logger.exception("failed to load words from %s", source)


def new_trie(
    depth: int | None = None,
    *,
    url: str | None = None,
    path: str | Path | None = None,
    strict: bool = False,
) -> Trie:
    trie = Trie(settings.edit_depth() if depth is None else depth)
    load_words(trie, url=url, path=path, strict=strict)
    return trie


def build_default_trie() -> Trie:
    return new_trie()


def run() -> Trie:
    started = time.time()
    trie = build_default_trie()
    logger.info("word trie ready depth=%s in %.2fs", trie.depth, time.time() - started)
    return trie


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    run()
