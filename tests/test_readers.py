"""Tests for content readers."""

import pytest
import requests

from defscrape.config import Config
from defscrape.exceptions import ConfigError, ReaderError
from defscrape.readers import (
    BrowserReader,
    CachedPageReader,
    FileReader,
    HttpReader,
    create_reader,
)
from defscrape.readers import web


class DummyResp:
    def __init__(self, text="<html></html>", status=200):
        self.text = text
        self.status = status

    def raise_for_status(self):
        if self.status >= 400:
            raise requests.exceptions.HTTPError(f"{self.status} error")


class TestHttpReader:

    def test_get_body(self, monkeypatch):
        captured = {}

        def fake_get(url, headers=None, timeout=None):
            captured.update(url=url, headers=headers, timeout=timeout)
            return DummyResp("<p>hi</p>")

        monkeypatch.setattr(web.requests, "get", fake_get)
        reader = HttpReader(timeout=5, user_agent="tester/1.0")
        assert reader.get_body("http://example.com") == "<p>hi</p>"
        assert captured == {
            "url": "http://example.com",
            "headers": {"User-Agent": "tester/1.0"},
            "timeout": 5,
        }

    def test_http_error(self, monkeypatch):
        monkeypatch.setattr(web.requests, "get", lambda url, headers=None, timeout=None: DummyResp(status=503))
        with pytest.raises(ReaderError):
            HttpReader().get_body("http://example.com")

    def test_connection_error(self, monkeypatch):
        def fake_get(url, headers=None, timeout=None):
            raise requests.exceptions.ConnectionError("refused")

        monkeypatch.setattr(web.requests, "get", fake_get)
        with pytest.raises(ReaderError) as exc:
            HttpReader().get_body("http://example.com")
        assert "refused" in str(exc.value)

    def test_empty_url(self):
        with pytest.raises(ReaderError):
            HttpReader().get_body("")


class TestCachedPageReader:

    def test_prefixes_url(self, monkeypatch):
        urls = []

        def fake_get(url, headers=None, timeout=None):
            urls.append(url)
            return DummyResp()

        monkeypatch.setattr(web.requests, "get", fake_get)
        reader = CachedPageReader(prefix="http://cache.example/search?q=cache:")
        reader.get_body("www.shop.example/fruit")
        assert urls == ["http://cache.example/search?q=cache:www.shop.example/fruit"]

    def test_empty_url(self):
        with pytest.raises(ReaderError) as exc:
            CachedPageReader().get_body("")
        assert "url length cannot be 0" in str(exc.value)


class TestFileReader:

    def test_reads_file(self, tmp_path):
        page = tmp_path / "page.html"
        page.write_text("<p>saved</p>", encoding="utf-8")
        assert FileReader().get_body(str(page)) == "<p>saved</p>"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ReaderError):
            FileReader().get_body(str(tmp_path / "nope.html"))


class TestCreateReader:

    def test_known_readers(self):
        cfg = Config(request_timeout=7, cache_prefix="http://c/", headless=False)
        assert isinstance(create_reader("http", cfg), HttpReader)
        cache = create_reader("cache", cfg)
        assert isinstance(cache, CachedPageReader)
        assert cache.prefix == "http://c/"
        assert cache.timeout == 7
        browser = create_reader("browser", cfg)
        assert isinstance(browser, BrowserReader)
        assert browser.headless is False

    def test_defaults_to_config_reader(self):
        assert isinstance(create_reader(config=Config(reader="cache")), CachedPageReader)

    def test_unknown_reader(self):
        with pytest.raises(ConfigError):
            create_reader("ftp", Config())

    def test_browser_rejects_empty_url(self):
        with pytest.raises(ReaderError):
            BrowserReader().get_body("")
