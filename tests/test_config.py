"""Tests for configuration."""

import pytest

from defscrape.config import Config, READERS
from defscrape.exceptions import ConfigError


class TestConfig:

    def test_validate_ok(self):
        cfg = Config(reader="cache", output_format="json", getter_workers=2, parser_workers=2)
        assert cfg.validate() is cfg

    @pytest.mark.parametrize("overrides", [
        {"reader": "ftp"},
        {"output_format": "xml"},
        {"getter_workers": 0},
        {"parser_workers": -1},
        {"request_timeout": 0},
    ])
    def test_validate_rejects(self, overrides):
        with pytest.raises(ConfigError):
            Config(**overrides).validate()

    def test_readers(self):
        assert READERS == ("http", "cache", "browser")
