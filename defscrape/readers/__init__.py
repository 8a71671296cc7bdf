"""
Readers - strategies for getting the content of a page

Usage:
    from defscrape.readers import create_reader

    reader = create_reader("cache")
    html = reader.get_body("https://example.com/groceries")
"""

from typing import Optional

from defscrape.config import Config, READERS, config as default_config
from defscrape.exceptions import ConfigError
from defscrape.readers.base import WebReader
from defscrape.readers.browser import BrowserReader
from defscrape.readers.file import FileReader
from defscrape.readers.web import CachedPageReader, HttpReader


def create_reader(name: Optional[str] = None, config: Optional[Config] = None) -> WebReader:
    """
    Build the reader called ``name`` (http, cache or browser).

    Args:
        name: Reader name, defaults to ``config.reader``
        config: Settings for timeouts, user agent and cache prefix

    Raises:
        ConfigError: If the name is not a known reader
    """
    config = config or default_config
    name = (name or config.reader).lower()

    if name == "http":
        return HttpReader(timeout=config.request_timeout, user_agent=config.user_agent)
    if name == "cache":
        return CachedPageReader(
            prefix=config.cache_prefix,
            timeout=config.request_timeout,
            user_agent=config.user_agent,
        )
    if name == "browser":
        return BrowserReader(headless=config.headless, timeout=config.request_timeout)
    raise ConfigError(f"Unknown reader '{name}', expected one of {', '.join(READERS)}")


__all__ = [
    'WebReader',
    'HttpReader',
    'CachedPageReader',
    'BrowserReader',
    'FileReader',
    'create_reader',
]
