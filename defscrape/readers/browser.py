"""
Headless browser reader
"""

from defscrape.diagnostics import get_logger
from defscrape.exceptions import ReaderError
from defscrape.readers.base import WebReader

logger = get_logger(__name__)


class BrowserReader(WebReader):
    """
    Renders the page in headless Chromium and returns the resulting HTML.

    A browser is launched per call; sharing one would need locking between
    worker threads.
    """

    name = "browser"

    def __init__(self, headless: bool = True, timeout: int = 30):
        self.headless = headless
        self.timeout = timeout

    def get_body(self, url: str) -> str:
        if not url:
            raise ReaderError("url length cannot be 0")

        from playwright.sync_api import Error as PlaywrightError
        from playwright.sync_api import sync_playwright

        try:
            with sync_playwright() as p:
                browser = p.chromium.launch(headless=self.headless)
                try:
                    page = browser.new_page()
                    logger.debug(f"Browser GET {url}")
                    page.goto(url, timeout=self.timeout * 1000, wait_until="networkidle")
                    return page.content()
                finally:
                    browser.close()
        except PlaywrightError as e:
            raise ReaderError(f"could not open url {url}: {e}") from e
