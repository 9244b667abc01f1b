from __future__ import annotations

from spelltrie.api.main import MAX_TEXT_LENGTH, MAX_WORD_LENGTH, spellcheck_service

try:
    from fastmcp import FastMCP
except ImportError as exc:  # pragma: no cover - runtime dependency guard
    raise RuntimeError(
        "FastMCP is required to run the MCP server. Install the package dependencies first."
    ) from exc


SERVER_TITLE = "Spelltrie"
SERVER_INSTRUCTIONS = (
    "Use check_word to look up a single word and get corrections when it is unknown. "
    "Use check_text to list the misspelled words of a sentence."
)

mcp = FastMCP(
    name=SERVER_TITLE,
    instructions=SERVER_INSTRUCTIONS,
    version='1',
)


def _render_suggestions(suggestions: list[str]) -> str:
    if not suggestions:
        return "no suggestions"
    return ", ".join(suggestions)


@mcp.tool(name="check_word", description="Check the spelling of one word.")
def check_word(word: str) -> str:
    """Look a word up in the dictionary."""
    if len(word) > MAX_WORD_LENGTH:
        return f"word too long (max {MAX_WORD_LENGTH} characters)"
    result = spellcheck_service.check(word)
    if result.found:
        return f"{result.word}: ok"
    return f"{result.word}: unknown ({_render_suggestions(result.suggestions)})"


@mcp.tool(name="check_text", description="List misspelled words in a text.")
def check_text(text: str) -> str:
    """Check every word of a text."""
    if len(text) > MAX_TEXT_LENGTH:
        return f"text too long (max {MAX_TEXT_LENGTH} characters)"
    result = spellcheck_service.check_text(text)
    if not result.misspelled:
        return "no misspelled words"

    lines = ""
    for word, suggestions in result.misspelled.items():
        lines += f"{word}: {_render_suggestions(suggestions)}"
        lines += '\n'

    return lines.strip()


if __name__ == "__main__":
    mcp.run("http")
