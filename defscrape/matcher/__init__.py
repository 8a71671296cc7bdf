from defscrape.matcher.matcher import Record, match
from defscrape.matcher.whitespace import has_prefix_ignore_whitespace

__all__ = [
    'Record',
    'match',
    'has_prefix_ignore_whitespace',
]
