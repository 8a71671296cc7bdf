from defscrape.types.token_type import TokenType
from defscrape.types.token import Token
from defscrape.types.template import DISCARD, WHITESPACE, Template

__all__ = [
    'TokenType',
    'Token',
    'Template',
    'DISCARD',
    'WHITESPACE',
]
