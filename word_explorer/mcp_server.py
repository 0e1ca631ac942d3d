"""MCP Server – exposes Word Explorer lookups as tools for Cursor, Claude Desktop, etc."""

from __future__ import annotations

import json

from mcp.server.fastmcp import FastMCP

from word_explorer.config import load_settings
from word_explorer.controller import rhyme_description, similar_description
from word_explorer.datamuse import DatamuseClient, DatamuseError
from word_explorer.grouping import by_field, group_by

mcp = FastMCP(
    name="WordExplorer",
    instructions=(
        "Word Explorer: finds rhymes (grouped by syllable count) and words "
        "with a similar meaning using the Datamuse API."
    ),
)


def _client() -> DatamuseClient:
    return DatamuseClient.from_settings(load_settings())


@mcp.tool()
def find_rhymes(word: str) -> str:
    """Find words that rhyme with *word*, grouped by syllable count.

    Args:
        word: The word to rhyme with.

    Returns:
        JSON string with a description and a mapping of syllable count to words.
    """
    word = word.strip()
    try:
        records = _client().rhymes(word)
    except DatamuseError as exc:
        return json.dumps({"error": str(exc)})

    groups = {
        key: [str(r.get("word")) for r in members]
        for key, members in group_by(records, by_field("numSyllables")).items()
    }
    return json.dumps({
        "description": rhyme_description(word),
        "groups": groups,
    }, indent=2)


@mcp.tool()
def find_similar(word: str) -> str:
    """Find words with a meaning similar to *word*.

    Args:
        word: The word to find neighbours for.

    Returns:
        JSON string with a description and the list of words in API order.
    """
    word = word.strip()
    try:
        records = _client().similar(word)
    except DatamuseError as exc:
        return json.dumps({"error": str(exc)})

    return json.dumps({
        "description": similar_description(word),
        "words": [str(r.get("word")) for r in records],
    }, indent=2)


def run_server() -> None:
    """Start the MCP server using stdio transport."""
    mcp.run(transport="stdio")


if __name__ == "__main__":
    run_server()
