import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

DEFAULT_REMOTE_WORDS_URL = "https://raw.githubusercontent.com/makifdb/spellcheck/main/words.txt"


@dataclass(frozen=True)
class Settings:
    words_url: str = os.getenv("SPELLCHECK_WORDS_URL", DEFAULT_REMOTE_WORDS_URL)
    words_path: str | None = os.getenv("SPELLCHECK_WORDS_PATH") or None
    depth: int = int(os.getenv("SPELLCHECK_DEPTH", "1"))
    max_depth: int = int(os.getenv("SPELLCHECK_MAX_DEPTH", "2"))
    request_timeout_s: int = int(os.getenv("REQUEST_TIMEOUT_S", "8"))
    user_agent: str = os.getenv("SPELLCHECK_USER_AGENT", "spelltrie/1.0")

    def edit_depth(self) -> int:
        # Candidate count grows roughly 27x per level.
        if self.depth < 0 or self.depth > self.max_depth:
            raise ValueError(f"SPELLCHECK_DEPTH must be between 0 and {self.max_depth}, got {self.depth}")
        return self.depth


settings = Settings()
