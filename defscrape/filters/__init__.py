"""
Filters - named text transforms applied to captured values

Definitions chain filters onto a placeholder: ``{{price|trim|pence}}``.
"""

from defscrape.filters.builtin import UNESCAPE_ERROR, lowercase, pence, respace, trim, unescape, uppercase
from defscrape.filters.registry import (
    FILTER_ERROR,
    FilterFunction,
    FilterInfo,
    FilterRegistry,
    FilterRegistryBuilder,
    default_registry,
)

__all__ = [
    'FilterFunction',
    'FilterInfo',
    'FilterRegistry',
    'FilterRegistryBuilder',
    'default_registry',
    'FILTER_ERROR',
    'UNESCAPE_ERROR',
    'trim',
    'unescape',
    'lowercase',
    'uppercase',
    'respace',
    'pence',
]
