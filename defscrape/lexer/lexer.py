"""
Definition Lexer - turns definition source into a Template

The lexer is a small state machine. Each state handler scans from the current
position, emits zero or more tokens and returns the next state; the dispatch
loop in ``scan`` runs handlers until the DONE state is reached.
"""

from enum import Enum
from typing import Callable, Dict, List, Optional

from defscrape.diagnostics import get_logger
from defscrape.exceptions import TokenizationError
from defscrape.types import WHITESPACE, Template, Token, TokenType

logger = get_logger(__name__)

LEFT_META = "{{"
RIGHT_META = "}}"
PIPE = "|"


class LexState(Enum):
    """States of the definition scanner"""
    TEXT = "text"
    LEFT_DELIM = "left_delim"
    VARIABLE = "variable"
    PIPE = "pipe"
    FILTER = "filter"
    RIGHT_DELIM = "right_delim"
    DONE = "done"


class Lexer:
    """Scanner for the placeholder definition language"""

    def __init__(self, content: str):
        self.content = content
        self.tokens: List[Token] = []
        self.error: Optional[TokenizationError] = None
        self.start = 0
        self.pos = 0
        self._handlers: Dict[LexState, Callable[[], LexState]] = {
            LexState.TEXT: self._text,
            LexState.LEFT_DELIM: self._left_delim,
            LexState.VARIABLE: self._variable,
            LexState.PIPE: self._pipe,
            LexState.FILTER: self._filter,
            LexState.RIGHT_DELIM: self._right_delim,
        }

    def scan(self) -> List[Token]:
        """Run the state machine to completion and return every token emitted.

        Never raises; a grammar violation shows up as a trailing ERROR token
        and the matching exception is kept on ``self.error``.
        """
        state = LexState.TEXT
        while state is not LexState.DONE:
            state = self._handlers[state]()
        return self.tokens

    def tokenize(self) -> Template:
        """Scan the content into a Template.

        Raises:
            TokenizationError: If a placeholder breaks the grammar
            TemplateValidationError: If a placeholder has no closing text
        """
        tokens = self.scan()
        if self.error is not None:
            raise self.error
        return Template(tokens)

    def _emit(self, token_type: TokenType) -> None:
        self.tokens.append(Token(token_type, self.content[self.start:self.pos]))
        self.start = self.pos

    def _fail(self, reason: str) -> LexState:
        logger.error(f"Definition rejected: {reason} at position {self.pos}")
        self.error = TokenizationError(reason, self.pos)
        self._emit(TokenType.ERROR)
        return LexState.DONE

    def _text(self) -> LexState:
        opener = self.content.find(LEFT_META, self.pos)
        if opener == -1:
            self.pos = len(self.content)
            if self.pos > self.start:
                self._emit(TokenType.TEXT)
            self._emit(TokenType.EOF)
            return LexState.DONE

        self.pos = opener
        if self.pos > self.start:
            self._emit(TokenType.TEXT)
        return LexState.LEFT_DELIM

    def _left_delim(self) -> LexState:
        self.pos += len(LEFT_META)
        self._emit(TokenType.LEFT_DELIM)
        return LexState.VARIABLE

    def _right_delim(self) -> LexState:
        self.pos += len(RIGHT_META)
        self._emit(TokenType.RIGHT_DELIM)
        return LexState.TEXT

    def _pipe(self) -> LexState:
        self.pos += len(PIPE)
        self._emit(TokenType.PIPE)
        return LexState.FILTER

    def _variable(self) -> LexState:
        return self._placeholder(TokenType.VARIABLE)

    def _filter(self) -> LexState:
        return self._placeholder(TokenType.FILTER)

    def _placeholder(self, token_type: TokenType) -> LexState:
        # Shared by variables and filters, only the emitted type differs
        while True:
            if self.content.startswith(RIGHT_META, self.pos):
                if self.pos > self.start:
                    self._emit(token_type)
                return LexState.RIGHT_DELIM
            if self.pos >= len(self.content):
                return self._fail("unterminated placeholder")

            char = self.content[self.pos]
            if char in WHITESPACE:
                return self._fail("whitespace in placeholder")
            if char == PIPE:
                if self.pos > self.start:
                    self._emit(token_type)
                return LexState.PIPE
            self.pos += 1


def tokenize(content: str) -> Template:
    """Tokenize definition source into a Template."""
    template = Lexer(content).tokenize()
    logger.debug(f"Tokenized definition into {len(template)} tokens")
    return template
