"""Tests for word_explorer.datamuse."""

import pytest
import requests

from conftest import RHYMES_FOR_CAT, FakeResponse, FakeSession
from word_explorer.datamuse import DatamuseClient, DatamuseError, rhyme_url, similar_url


def test_rhyme_url_default_base() -> None:
    assert rhyme_url("cat") == "https://api.datamuse.com/words?rel_rhy=cat"


def test_similar_url_default_base() -> None:
    assert similar_url("cat") == "https://api.datamuse.com/words?ml=cat"


def test_urls_are_query_encoded() -> None:
    assert rhyme_url("ice cream&co") == "https://api.datamuse.com/words?rel_rhy=ice+cream%26co"
    assert similar_url("café", base_url="https://x.test/") == "https://x.test/words?ml=caf%C3%A9"


def test_rhymes_fetches_records_with_timeout() -> None:
    session = FakeSession(FakeResponse(RHYMES_FOR_CAT))
    client = DatamuseClient(base_url="https://api.example.test", timeout=2.5, session=session)

    assert client.rhymes("cat") == RHYMES_FOR_CAT
    assert session.calls == [("https://api.example.test/words?rel_rhy=cat", 2.5)]


def test_similar_hits_ml_endpoint() -> None:
    session = FakeSession(FakeResponse([]))
    client = DatamuseClient(session=session)

    assert client.similar("happy") == []
    assert session.calls[0][0] == "https://api.datamuse.com/words?ml=happy"


def test_fetch_wraps_connection_errors() -> None:
    client = DatamuseClient(session=FakeSession(requests.ConnectionError("boom")))
    with pytest.raises(DatamuseError, match="boom"):
        client.rhymes("cat")


def test_fetch_wraps_http_errors() -> None:
    client = DatamuseClient(session=FakeSession(FakeResponse(status_code=503)))
    with pytest.raises(DatamuseError, match="503"):
        client.similar("cat")


def test_fetch_wraps_invalid_json() -> None:
    client = DatamuseClient(session=FakeSession(FakeResponse(text="<html>")))
    with pytest.raises(DatamuseError, match="Invalid JSON"):
        client.rhymes("cat")


def test_fetch_rejects_non_list_json() -> None:
    client = DatamuseClient(session=FakeSession(FakeResponse({"error": "nope"})))
    with pytest.raises(DatamuseError, match="Expected a list"):
        client.rhymes("cat")


def test_fetch_rejects_records_that_are_not_objects() -> None:
    client = DatamuseClient(session=FakeSession(FakeResponse(["hat", "mat"])))
    with pytest.raises(DatamuseError, match="word records"):
        client.rhymes("cat")
