"""Tests for output formatting."""

import json

from defscrape.pipeline import ExtractionResult
from defscrape.presenter import format_json, format_records, format_text, total


class TestPresenter:

    def test_format_records(self):
        text = format_records([{"a": "1", "b": "2"}, {"a": "3"}])
        assert text == "a: 1\nb: 2\n\na: 3\n\n"

    def test_format_no_records(self):
        assert format_records([]) == ""

    def test_format_text(self):
        results = [
            ExtractionResult(url="http://one", success=True, records=[{"path": "foo.jpg"}], size=36),
            ExtractionResult(url="http://bad", success=False, error="404"),
        ]
        text = format_text(results)
        assert "# http://one (1 records, 36 bytes)" in text
        assert "path: foo.jpg" in text
        assert "# http://bad: error: 404" in text

    def test_format_json(self):
        results = [ExtractionResult(url="u", success=True, records=[{"name": "Kiwi"}], size=10)]
        data = json.loads(format_json(results))
        assert data[0]["records"] == [{"name": "Kiwi"}]
        assert data[0]["size"] == 10

    def test_total(self):
        records = [{"price": "350"}, {"price": "180"}, {"price": "n/a"}, {"name": "x"}]
        assert total(records, "price") == 530
        assert total([], "price") == 0
