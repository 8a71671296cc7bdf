"""Reader interface"""

from abc import ABC, abstractmethod


class WebReader(ABC):
    """
    Anything that can return the body of a page.

    Readers must be safe to call from several worker threads at once.
    """

    name = "reader"

    @abstractmethod
    def get_body(self, url: str) -> str:
        """
        Fetch the page at ``url``.

        Raises:
            ReaderError: If the page could not be retrieved
        """
        pass
