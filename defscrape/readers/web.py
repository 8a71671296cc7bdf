"""
HTTP readers for plain and cached pages
"""

import requests

from defscrape.config import DEFAULT_CACHE_PREFIX
from defscrape.diagnostics import get_logger
from defscrape.exceptions import ReaderError
from defscrape.readers.base import WebReader

logger = get_logger(__name__)


class HttpReader(WebReader):
    """Plain ``GET`` of the URL"""

    name = "http"

    def __init__(self, timeout: int = 30, user_agent: str = ""):
        self.timeout = timeout
        self.headers = {"User-Agent": user_agent} if user_agent else {}

    def get_body(self, url: str) -> str:
        if not url:
            raise ReaderError("url length cannot be 0")
        try:
            logger.debug(f"HTTP GET {url}")
            response = requests.get(url, headers=self.headers, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            raise ReaderError(f"could not get from url {url}: {e}") from e
        return response.text


class CachedPageReader(HttpReader):
    """
    Fetches the search engine's cached copy of a page.

    The cached copy has already been rendered, so content that the live page
    builds with JavaScript is present in the HTML.
    """

    name = "cache"

    def __init__(self, prefix: str = DEFAULT_CACHE_PREFIX, timeout: int = 30, user_agent: str = ""):
        super().__init__(timeout=timeout, user_agent=user_agent)
        self.prefix = prefix

    def cache_url(self, url: str) -> str:
        return f"{self.prefix}{url}"

    def get_body(self, url: str) -> str:
        if not url:
            raise ReaderError("url length cannot be 0")
        return super().get_body(self.cache_url(url))
