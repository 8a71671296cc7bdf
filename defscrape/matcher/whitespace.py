"""Whitespace-insensitive prefix matching"""

from typing import Tuple

from defscrape.types import WHITESPACE


def has_prefix_ignore_whitespace(content: str, prefix: str, start: int = 0) -> Tuple[bool, int]:
    """Check whether ``content[start:]`` begins with ``prefix``, ignoring whitespace.

    Both strings are walked in lockstep. Equal characters advance both sides,
    whitespace present on one side only is skipped on that side, anything else
    is a mismatch.

    Args:
        content: Text being searched
        prefix: Literal expected at ``start``
        start: Offset into ``content`` to match from

    Returns:
        (matched, consumed) where consumed is the number of content characters
        the match covered, 0 when it did not match
    """
    i = 0
    j = start
    end = len(content)
    while i < len(prefix):
        if j < end and content[j] == prefix[i]:
            i += 1
            j += 1
        elif j < end and content[j] in WHITESPACE:
            j += 1
        elif prefix[i] in WHITESPACE:
            i += 1
        else:
            return False, 0
    return True, j - start
