"""Definition token type enumeration"""

from enum import Enum


class TokenType(Enum):
    """Lexical types produced by the definition lexer"""
    TEXT = "text"
    LEFT_DELIM = "left_delim"
    RIGHT_DELIM = "right_delim"
    VARIABLE = "variable"
    PIPE = "pipe"
    FILTER = "filter"
    EOF = "eof"
    ERROR = "error"
