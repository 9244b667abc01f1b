import logging
import threading
from typing import Callable

from fastapi import FastAPI, Query
from pydantic import BaseModel

from spelltrie.batch.word_loader import build_default_trie
from spelltrie.spellcheck.engine import SpellCheckerEngine
from spelltrie.spellcheck.trie import Trie

logger = logging.getLogger(__name__)

app = FastAPI(title="Spellcheck API")

MAX_WORD_LENGTH = 64
MAX_TEXT_LENGTH = 2000


class SpellcheckResponse(BaseModel):
    word: str
    found: bool
    suggestions: list[str]


class DirectLookupResponse(BaseModel):
    word: str
    found: bool


class InsertResponse(BaseModel):
    word: str
    inserted: bool


class TextCheckResponse(BaseModel):
    misspelled: dict[str, list[str]]


class SpellcheckService:
    def __init__(
        self,
        *,
        trie: Trie | None = None,
        trie_factory: Callable[[], Trie] | None = None,
        engine: SpellCheckerEngine | None = None,
    ) -> None:
        self.engine = engine or SpellCheckerEngine()
        self._trie = trie
        self._trie_factory = trie_factory or build_default_trie
        self._build_lock = threading.Lock()

    @property
    def trie(self) -> Trie:
        if self._trie is None:
            with self._build_lock:
                if self._trie is None:
                    logger.info("building word trie on first use")
                    self._trie = self._trie_factory()
        return self._trie

    def check(self, q: str) -> SpellcheckResponse:
        word = self.engine.normalize_word(q)
        found, suggestions = self.trie.search(word)
        return SpellcheckResponse(word=word, found=found, suggestions=suggestions)

    def check_direct(self, q: str) -> DirectLookupResponse:
        word = self.engine.normalize_word(q)
        return DirectLookupResponse(word=word, found=self.trie.search_direct(word))

    def check_text(self, text: str) -> TextCheckResponse:
        return TextCheckResponse(misspelled=self.engine.check_text(self.trie, text))

    def add_word(self, raw_word: str) -> InsertResponse:
        word = self.engine.normalize_word(raw_word)
        if not word:
            return InsertResponse(word=word, inserted=False)
        self.trie.insert(word)
        logger.info("inserted word=%s", word)
        return InsertResponse(word=word, inserted=True)


spellcheck_service = SpellcheckService()


@app.get("/spellcheck", response_model=SpellcheckResponse)
def spellcheck(
    q: str = Query(..., min_length=1, max_length=MAX_WORD_LENGTH),
) -> SpellcheckResponse:
    return spellcheck_service.check(q)


@app.get("/spellcheck/direct", response_model=DirectLookupResponse)
def spellcheck_direct(
    q: str = Query(..., min_length=1, max_length=MAX_WORD_LENGTH),
) -> DirectLookupResponse:
    return spellcheck_service.check_direct(q)


@app.get("/spellcheck/text", response_model=TextCheckResponse)
def spellcheck_text(
    q: str = Query(..., min_length=1, max_length=MAX_TEXT_LENGTH),
) -> TextCheckResponse:
    return spellcheck_service.check_text(q)


@app.post("/words", response_model=InsertResponse)
def add_word(
    word: str = Query(..., min_length=1, max_length=MAX_WORD_LENGTH),
) -> InsertResponse:
    return spellcheck_service.add_word(word)
