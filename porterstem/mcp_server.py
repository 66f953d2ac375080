"""
porterstem MCP Server: expose the stemmer as MCP tools.

Usage:
    python3 -m porterstem.mcp_server

Configure with PORTERSTEM_IRREGULAR / PORTERSTEM_RESTORE_CASE env vars.

Add to an MCP client config:
    {
      "mcpServers": {
        "porterstem": {
          "command": "python3",
          "args": ["-m", "porterstem.mcp_server"]
        }
      }
    }
"""

import logging

from mcp.server.fastmcp import FastMCP

from porterstem.config import StemmerConfig
from porterstem.stemmer import PorterStemmer
from porterstem.tokenizers import tokenize

logger = logging.getLogger(__name__)

mcp = FastMCP("porterstem")

# Lazy singleton
_stemmer: PorterStemmer | None = None


def _get_stemmer() -> PorterStemmer:
    global _stemmer
    if _stemmer is None:
        _stemmer = PorterStemmer(StemmerConfig.from_env())
        logger.info("Stemmer initialized for MCP")
    return _stemmer


@mcp.tool(name="stem", description="Reduce English words to their Porter stems")
def stem_words(words: list[str], lower: bool = False) -> dict:
    """Stem each word. Set lower=True to skip case restoration."""
    stemmer = _get_stemmer()
    stem_fn = stemmer.stem_lower if lower else stemmer.stem
    return {word: stem_fn(word) for word in words}


@mcp.tool(name="stem_text", description="Tokenize text and return the stem of every token")
def stem_text(text: str, lower: bool = True) -> list[dict]:
    """Stem every word token of a text, in order."""
    stemmer = _get_stemmer()
    stem_fn = stemmer.stem_lower if lower else stemmer.stem
    return [{"token": token, "stem": stem_fn(token)} for token in tokenize(text)]


@mcp.tool(name="trace", description="Show how a word changes through each Porter step")
def trace_word(word: str) -> list[dict]:
    """The word after each pipeline step."""
    return [{"step": name, "result": region} for name, region in _get_stemmer().trace(word)]


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [porterstem] %(message)s")
    mcp.run()


if __name__ == "__main__":
    main()
