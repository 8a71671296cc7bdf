"""Tests for the extraction pipeline."""

import pytest

from defscrape.definition import DefinitionParser
from defscrape.exceptions import ReaderError
from defscrape.pipeline import ExtractionResult, Pipeline
from defscrape.readers import WebReader

PAGES = {
    "http://one": "<!-- --><path>foo.jpg</path><!-- -->",
    "http://two": "<path>foo.jpg</path><!-- --><path>bar.jpg</path> EOF",
    "http://empty": "",
}


class FakeReader(WebReader):
    name = "fake"

    def __init__(self, pages):
        self.pages = pages
        self.calls = []

    def get_body(self, url):
        self.calls.append(url)
        if url not in self.pages:
            raise ReaderError(f"could not get from url {url}: 404")
        return self.pages[url]


@pytest.fixture
def pipeline():
    definition = DefinitionParser.from_source("<path>{{path}}</path>")
    with Pipeline(definition, FakeReader(PAGES), getter_workers=2, parser_workers=2) as p:
        yield p


class TestPipeline:

    def test_process_url(self, pipeline):
        result = pipeline.process_url("http://one")
        assert result.success
        assert result.records == [{"path": "foo.jpg"}]
        assert result.size == 36
        assert result.url == "http://one"

    def test_process_url_repeated_block(self, pipeline):
        result = pipeline.process_url("http://two")
        assert result.records == [{"path": "foo.jpg"}, {"path": "bar.jpg"}]
        assert result.size == 52

    def test_reader_error_becomes_failed_result(self, pipeline):
        result = pipeline.process_url("http://missing")
        assert not result.success
        assert result.records == []
        assert "404" in result.error

    def test_empty_body(self, pipeline):
        result = pipeline.process_url("http://empty")
        assert not result.success
        assert result.error == "body was empty"

    def test_process_body_counts_bytes(self, pipeline):
        result = pipeline.process_body("<path>£</path>", "inline")
        assert result.records == [{"path": "£"}]
        assert result.size == len("<path>£</path>".encode("utf-8"))

    def test_to_dict(self):
        result = ExtractionResult(url="u", success=True, records=[{"a": "1"}], size=3)
        data = result.to_dict()
        assert data["records"] == [{"a": "1"}]
        assert data["error"] is None
        assert "timestamp" in data


class TestPipelineAsync:

    @pytest.mark.asyncio
    async def test_run_keeps_input_order(self, pipeline):
        urls = ["http://two", "http://missing", "http://one"]
        results = await pipeline.run(urls)
        assert [r.url for r in results] == urls
        assert [r.success for r in results] == [True, False, True]
        assert results[0].records == [{"path": "foo.jpg"}, {"path": "bar.jpg"}]

    @pytest.mark.asyncio
    async def test_run_converts_unexpected_errors(self):
        class BrokenReader(WebReader):
            def get_body(self, url):
                raise RuntimeError("socket exploded")

        definition = DefinitionParser.from_source("<p>{{x}}</p>")
        with Pipeline(definition, BrokenReader(), 1, 1) as p:
            results = await p.run(["http://a"])
        assert not results[0].success
        assert "socket exploded" in results[0].error

    @pytest.mark.asyncio
    async def test_stream_yields_every_result(self, pipeline):
        seen = [result.url async for result in pipeline.stream(["http://one", "http://two"])]
        assert sorted(seen) == ["http://one", "http://two"]
