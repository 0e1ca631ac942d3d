"""Controller module – owns the page state and turns lookups into result views."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from word_explorer.datamuse import DatamuseClient, DatamuseError
from word_explorer.grouping import by_field, group_by

logger = logging.getLogger(__name__)

NO_RESULTS = "(no results)"


@dataclass
class ResultGroup:
    """One block of output: an optional heading followed by words."""

    heading: str | None
    words: list[str] = field(default_factory=list)


@dataclass
class ResultView:
    """Everything the page shows below the description for one lookup."""

    description: str
    groups: list[ResultGroup] = field(default_factory=list)
    records: list[dict[str, Any]] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.groups


def rhyme_description(word: str) -> str:
    return f"Words that rhyme with {word}"


def similar_description(word: str) -> str:
    return f"Words with a similar meaning to {word}"


def build_rhyme_groups(records: list[dict[str, Any]]) -> list[ResultGroup]:
    """Group rhyme records by syllable count, one headed group per count."""
    groups: list[ResultGroup] = []
    for members in group_by(records, by_field("numSyllables")).values():
        heading = f"Syllables: {members[0].get('numSyllables')}"
        groups.append(ResultGroup(heading=heading, words=[str(r.get("word")) for r in members]))
    return groups


def build_flat_group(records: list[dict[str, Any]]) -> list[ResultGroup]:
    """Single un-headed group holding every word in response order."""
    if not records:
        return []
    return [ResultGroup(heading=None, words=[str(r.get("word")) for r in records])]


class PageController:
    """State for one page session: description, current results and saved words.

    A failed lookup is logged and leaves the output cleared; it never raises.
    """

    def __init__(self, client: DatamuseClient) -> None:
        self.client = client
        self.description = ""
        self.view: ResultView | None = None
        self.saved_words: list[str] = []

    def show_rhymes(self, word: str) -> ResultView | None:
        word = word.strip()
        self._start(rhyme_description(word))
        try:
            records = self.client.rhymes(word)
        except DatamuseError as exc:
            logger.error("Rhyme lookup for %r failed: %s", word, exc)
            return None
        self.view = ResultView(self.description, build_rhyme_groups(records), records)
        return self.view

    def show_similar(self, word: str) -> ResultView | None:
        word = word.strip()
        self._start(similar_description(word))
        try:
            records = self.client.similar(word)
        except DatamuseError as exc:
            logger.error("Similar-meaning lookup for %r failed: %s", word, exc)
            return None
        self.view = ResultView(self.description, build_flat_group(records), records)
        return self.view

    def save_word(self, word: str) -> str:
        """Append *word* to the saved list (duplicates allowed) and return the display."""
        self.saved_words.append(word)
        logger.debug("Saved %r (%d saved)", word, len(self.saved_words))
        return self.saved_words_display

    @property
    def saved_words_display(self) -> str:
        return ",".join(self.saved_words)

    def _start(self, description: str) -> None:
        self.description = description
        self.view = None
