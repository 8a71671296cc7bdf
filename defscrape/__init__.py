"""
defscrape - pull repeated records out of HTML with reverse templates

A definition is a piece of the page with the interesting values replaced by
placeholders:

    <a href="{{link|trim}}">{{title|trim}}</a>

Applying it to a page yields one record per occurrence of the block.
"""

__version__ = "0.1.0"

from defscrape.exceptions import (
    DefscrapeError,
    DefinitionError,
    TokenizationError,
    TemplateValidationError,
    ReaderError,
    ConfigError,
)
from defscrape.types import Token, TokenType, Template, DISCARD
from defscrape.lexer import Lexer, tokenize
from defscrape.filters import FilterRegistry, FilterRegistryBuilder, default_registry
from defscrape.matcher import Record, match, has_prefix_ignore_whitespace
from defscrape.definition import DefinitionParser

__all__ = [
    'DefscrapeError',
    'DefinitionError',
    'TokenizationError',
    'TemplateValidationError',
    'ReaderError',
    'ConfigError',
    'Token',
    'TokenType',
    'Template',
    'DISCARD',
    'Lexer',
    'tokenize',
    'FilterRegistry',
    'FilterRegistryBuilder',
    'default_registry',
    'Record',
    'match',
    'has_prefix_ignore_whitespace',
    'DefinitionParser',
]
