"""
Extraction pipeline

Fetches pages with a reader and runs a definition over each body. Fetching
and parsing happen on thread pools so that many URLs can be in flight at
once; the definition itself is shared read-only between workers.
"""

import asyncio
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, AsyncIterator, Dict, List, Optional

from defscrape.config import config as default_config
from defscrape.definition import DefinitionParser
from defscrape.diagnostics import get_logger
from defscrape.exceptions import ReaderError
from defscrape.matcher import Record
from defscrape.readers import WebReader

logger = get_logger(__name__)


@dataclass
class ExtractionResult:
    """Records found in one page"""
    url: str
    success: bool
    records: List[Record] = field(default_factory=list)
    size: int = 0
    error: Optional[str] = None
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "url": self.url,
            "success": self.success,
            "records": self.records,
            "size": self.size,
            "error": self.error,
            "timestamp": self.timestamp,
        }


class Pipeline:
    """
    URL in, records out.

    Workflow:
    1. Fetch each URL with the reader on the getter pool
    2. Apply the definition on the parser pool
    3. Hand back one ExtractionResult per URL
    """

    def __init__(
        self,
        definition: DefinitionParser,
        reader: WebReader,
        getter_workers: Optional[int] = None,
        parser_workers: Optional[int] = None,
    ):
        """
        Args:
            definition: Parser applied to every page
            reader: Strategy used to fetch pages
            getter_workers: Concurrent fetches, from config if omitted
            parser_workers: Concurrent parses, from config if omitted
        """
        self.definition = definition
        self.reader = reader
        self.getter_pool = ThreadPoolExecutor(max_workers=getter_workers or default_config.getter_workers)
        self.parser_pool = ThreadPoolExecutor(max_workers=parser_workers or default_config.parser_workers)

    def __enter__(self) -> "Pipeline":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def close(self) -> None:
        self.getter_pool.shutdown(wait=True)
        self.parser_pool.shutdown(wait=True)

    def process_body(self, body: str, source: str = "") -> ExtractionResult:
        """Apply the definition to content that has already been fetched."""
        records = self.definition.parse(body)
        logger.info(f"Extracted {len(records)} records from {source or 'input'}")
        return ExtractionResult(
            url=source,
            success=True,
            records=records,
            size=len(body.encode("utf-8")),
        )

    def fetch(self, url: str) -> str:
        body = self.reader.get_body(url)
        if not body:
            raise ReaderError("body was empty")
        return body

    def process_url(self, url: str) -> ExtractionResult:
        """Fetch and parse one URL on the calling thread."""
        try:
            body = self.fetch(url)
        except ReaderError as e:
            logger.error(f"Could not read {url}: {e}")
            return ExtractionResult(url=url, success=False, error=str(e))
        return self.process_body(body, url)

    async def process_url_async(self, url: str) -> ExtractionResult:
        loop = asyncio.get_running_loop()
        try:
            body = await loop.run_in_executor(self.getter_pool, self.fetch, url)
        except ReaderError as e:
            logger.error(f"Could not read {url}: {e}")
            return ExtractionResult(url=url, success=False, error=str(e))
        return await loop.run_in_executor(self.parser_pool, self.process_body, body, url)

    async def run(self, urls: List[str]) -> List[ExtractionResult]:
        """
        Process every URL concurrently.

        Returns:
            One result per URL, in the order the URLs were given
        """
        tasks = [self.process_url_async(url) for url in urls]
        results = await asyncio.gather(*tasks, return_exceptions=True)

        extraction_results = []
        for url, result in zip(urls, results):
            if isinstance(result, Exception):
                logger.error(f"Extraction failed for {url}: {result}")
                extraction_results.append(ExtractionResult(url=url, success=False, error=str(result)))
            else:
                extraction_results.append(result)
        return extraction_results

    async def stream(self, urls: List[str]) -> AsyncIterator[ExtractionResult]:
        """Yield results as soon as each URL finishes, in completion order."""
        for future in asyncio.as_completed([self.process_url_async(url) for url in urls]):
            yield await future
