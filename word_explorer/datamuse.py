"""Datamuse module – builds lookup URLs and fetches word records."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any
from urllib.parse import urlencode

import requests

from word_explorer.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, Settings

logger = logging.getLogger(__name__)


class DatamuseError(Exception):
    """Raised when a lookup fails in transit or returns something unreadable."""


def _words_url(base_url: str, params: dict[str, str]) -> str:
    return f"{base_url.rstrip('/')}/words?{urlencode(params)}"


def rhyme_url(word: str, base_url: str = DEFAULT_BASE_URL) -> str:
    """URL for words that rhyme with *word*."""
    return _words_url(base_url, {"rel_rhy": word})


def similar_url(word: str, base_url: str = DEFAULT_BASE_URL) -> str:
    """URL for words with a meaning similar to *word*."""
    return _words_url(base_url, {"ml": word})


class DatamuseClient:
    """Thin wrapper over a :class:`requests.Session` for the ``/words`` endpoint."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_settings(cls, settings: Settings) -> DatamuseClient:
        return cls(base_url=settings.base_url, timeout=settings.timeout)

    def fetch(self, url: str) -> list[dict[str, Any]]:
        """GET *url* and return the decoded list of records.

        Raises :class:`DatamuseError` on connection failures, non-2xx
        responses, invalid JSON, or a JSON body that is not a list of objects.
        """
        logger.debug("GET %s", url)
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as exc:
            raise DatamuseError(f"Request to {url} failed: {exc}") from exc
        except ValueError as exc:
            raise DatamuseError(f"Invalid JSON from {url}: {exc}") from exc

        if not isinstance(data, list):
            raise DatamuseError(f"Expected a list from {url}, got {type(data).__name__}")
        if not all(isinstance(record, Mapping) for record in data):
            raise DatamuseError(f"Expected a list of word records from {url}")
        logger.debug("Received %d record(s) from %s", len(data), url)
        return data

    def rhymes(self, word: str) -> list[dict[str, Any]]:
        return self.fetch(rhyme_url(word, self.base_url))

    def similar(self, word: str) -> list[dict[str, Any]]:
        return self.fetch(similar_url(word, self.base_url))
