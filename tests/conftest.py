"""Shared fakes so no test touches the network."""

from __future__ import annotations

from typing import Any

import pytest
import requests

from word_explorer.datamuse import DatamuseClient


class FakeResponse:
    def __init__(self, payload: Any = None, status_code: int = 200, text: str | None = None) -> None:
        self.payload = payload
        self.status_code = status_code
        self.text = text

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self) -> Any:
        if self.text is not None:
            raise ValueError(f"Expecting value: {self.text!r}")
        return self.payload


class FakeSession:
    """Returns queued responses (or raises queued exceptions) and records URLs."""

    def __init__(self, *responses: Any) -> None:
        self.responses = list(responses)
        self.calls: list[tuple[str, float | None]] = []

    def get(self, url: str, timeout: float | None = None) -> FakeResponse:
        self.calls.append((url, timeout))
        item = self.responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


RHYMES_FOR_CAT = [
    {"word": "hat", "score": 3000, "numSyllables": 1},
    {"word": "acrobat", "score": 2000, "numSyllables": 3},
    {"word": "mat", "score": 1500, "numSyllables": 1},
    {"word": "combat", "score": 1200, "numSyllables": 2},
]

SIMILAR_TO_CAT = [
    {"word": "kitty", "score": 90000},
    {"word": "feline", "score": 85000},
    {"word": "tomcat", "score": 80000},
]


@pytest.fixture
def make_client():
    def _make(*responses: Any) -> DatamuseClient:
        return DatamuseClient(base_url="https://api.example.test", timeout=2.5, session=FakeSession(*responses))

    return _make
