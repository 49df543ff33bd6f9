"""
Unit tests for the source loader. HTTP is stubbed with monkeypatch.
"""

import pytest
import requests

from severe_dashboard.data import loader
from severe_dashboard.data.loader import (
    SourceUnavailableError,
    fetch_source_text,
    load_events_from_text,
)


class FakeResponse:
    def __init__(self, text="", status_code=200):
        self.text = text
        self.status_code = status_code
        self.encoding = None

    @property
    def ok(self):
        return 200 <= self.status_code < 400


@pytest.fixture
def stub_get(monkeypatch):
    calls = []

    def install(response=None, exc=None):
        def fake_get(url, timeout=None):
            calls.append((url, timeout))
            if exc is not None:
                raise exc
            return response

        monkeypatch.setattr(loader.requests, "get", fake_get)
        return calls

    return install


class TestFetchSourceText:
    def test_success_returns_text(self, stub_get, sample_text):
        calls = stub_get(FakeResponse(sample_text))
        assert fetch_source_text("https://example.test/sheet.csv", timeout=5) == sample_text
        assert calls == [("https://example.test/sheet.csv", 5)]

    def test_http_error(self, stub_get):
        stub_get(FakeResponse("Not found", status_code=404))
        with pytest.raises(SourceUnavailableError, match="404"):
            fetch_source_text("https://example.test/sheet.csv")

    def test_transport_error(self, stub_get):
        stub_get(exc=requests.ConnectionError("boom"))
        with pytest.raises(SourceUnavailableError):
            fetch_source_text("https://example.test/sheet.csv")

    def test_empty_body(self, stub_get):
        stub_get(FakeResponse("  \n"))
        with pytest.raises(SourceUnavailableError):
            fetch_source_text("https://example.test/sheet.csv")


class TestLoadEventsFromText:
    def test_parses_events(self, sample_text):
        assert len(load_events_from_text(sample_text)) == 6

    def test_empty_text_is_source_error(self):
        with pytest.raises(SourceUnavailableError):
            load_events_from_text("")
