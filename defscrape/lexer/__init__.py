from defscrape.lexer.lexer import LEFT_META, PIPE, RIGHT_META, LexState, Lexer, tokenize

__all__ = [
    'Lexer',
    'LexState',
    'tokenize',
    'LEFT_META',
    'RIGHT_META',
    'PIPE',
]
