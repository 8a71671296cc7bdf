"""Local file reader"""

from pathlib import Path

from defscrape.exceptions import ReaderError
from defscrape.readers.base import WebReader


class FileReader(WebReader):
    """Treats the "url" as a path on disk, handy for saved pages."""

    name = "file"

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def get_body(self, url: str) -> str:
        try:
            return Path(url).read_text(encoding=self.encoding, errors="replace")
        except OSError as e:
            raise ReaderError(f"could not read file {url}: {e}") from e
