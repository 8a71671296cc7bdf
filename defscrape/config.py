#!/usr/bin/env python3
from dataclasses import dataclass
import os
from dotenv import load_dotenv

from defscrape import __version__
from defscrape.exceptions import ConfigError

load_dotenv()

READERS = ("http", "cache", "browser")
OUTPUT_FORMATS = ("text", "json")

# Google cache serves an SEO friendly, already rendered copy of the page
DEFAULT_CACHE_PREFIX = "http://webcache.googleusercontent.com/search?q=cache:"


@dataclass
class Config:
    """Application configuration"""
    definition_file: str = os.getenv("DEFSCRAPE_DEFINITION", "definitions/links.definition")
    reader: str = os.getenv("DEFSCRAPE_READER", "http").lower()
    cache_prefix: str = os.getenv("DEFSCRAPE_CACHE_PREFIX", DEFAULT_CACHE_PREFIX)
    request_timeout: int = int(os.getenv("DEFSCRAPE_TIMEOUT", "30"))
    user_agent: str = os.getenv("DEFSCRAPE_USER_AGENT", f"defscrape/{__version__}")

    # Size of the thread pool used to fetch pages
    getter_workers: int = int(os.getenv("DEFSCRAPE_GETTER_WORKERS", "4"))
    parser_workers: int = int(os.getenv("DEFSCRAPE_PARSER_WORKERS", "4"))

    output_format: str = os.getenv("DEFSCRAPE_FORMAT", "text").lower()
    headless: bool = os.getenv("DEFSCRAPE_HEADLESS", "true").lower() in ["true", "1", "yes"]
    debug: bool = os.getenv("DEFSCRAPE_DEBUG", "false").lower() == "true"

    def validate(self) -> "Config":
        if self.reader not in READERS:
            raise ConfigError(f"Unknown reader '{self.reader}', expected one of {', '.join(READERS)}")
        if self.output_format not in OUTPUT_FORMATS:
            raise ConfigError(
                f"Unknown output format '{self.output_format}', expected one of {', '.join(OUTPUT_FORMATS)}"
            )
        if self.getter_workers < 1 or self.parser_workers < 1:
            raise ConfigError("Worker counts must be at least 1")
        if self.request_timeout <= 0:
            raise ConfigError("DEFSCRAPE_TIMEOUT must be positive")
        return self


config = Config()
