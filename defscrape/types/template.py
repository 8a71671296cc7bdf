"""
Template - immutable token sequence built from a definition

A template is a flat list of tokens closed by exactly one EOF (or ERROR)
token. It is never modified after construction, so a single instance can be
shared by any number of concurrent matcher calls.
"""

from typing import Iterator, List, Sequence, Tuple

from defscrape.exceptions import TemplateValidationError
from defscrape.types.token import Token
from defscrape.types.token_type import TokenType

DISCARD = "_"

# Characters the matcher treats as insignificant in literal text
WHITESPACE = " \n\r\t"

_TERMINATORS = (TokenType.EOF, TokenType.ERROR)


class Template:
    """Read-only sequence of definition tokens"""

    __slots__ = ("_tokens",)

    def __init__(self, tokens: Sequence[Token]):
        tokens = tuple(tokens)
        _check_terminator(tokens)
        if tokens[-1].type is TokenType.EOF:
            _check_boundaries(tokens)
        object.__setattr__(self, "_tokens", tokens)

    def __setattr__(self, name, value):
        raise AttributeError("Template is immutable")

    def __len__(self) -> int:
        return len(self._tokens)

    def __getitem__(self, index: int) -> Token:
        return self._tokens[index]

    def __iter__(self) -> Iterator[Token]:
        return iter(self._tokens)

    def __eq__(self, other) -> bool:
        if isinstance(other, Template):
            return self._tokens == other._tokens
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._tokens)

    def __repr__(self) -> str:
        return f"Template({list(self._tokens)!r})"

    @property
    def tokens(self) -> Tuple[Token, ...]:
        return self._tokens

    @property
    def is_empty(self) -> bool:
        """True when the definition had no content at all."""
        return len(self._tokens) == 1 and self._tokens[0].type is TokenType.EOF

    @property
    def is_error(self) -> bool:
        return self._tokens[-1].type is TokenType.ERROR

    @property
    def has_literal(self) -> bool:
        """True when some text token has non-whitespace characters to match."""
        return any(
            t.type is TokenType.TEXT and t.literal.strip(WHITESPACE)
            for t in self._tokens
        )

    def variables(self) -> List[str]:
        """Declared variable names in order, the discard name excluded."""
        return [
            t.literal for t in self._tokens
            if t.type is TokenType.VARIABLE and t.literal != DISCARD
        ]

    def filters_for(self, variable_index: int) -> List[str]:
        """Filter names chained onto the variable token at ``variable_index``."""
        names = []
        for tok in self._tokens[variable_index + 1:]:
            if tok.type is TokenType.PIPE:
                continue
            if tok.type is not TokenType.FILTER:
                break
            names.append(tok.literal)
        return names


def _check_terminator(tokens: Tuple[Token, ...]) -> None:
    if not tokens:
        raise TemplateValidationError("Template must end in an EOF or ERROR token")
    positions = [i for i, t in enumerate(tokens) if t.type in _TERMINATORS]
    if positions != [len(tokens) - 1]:
        raise TemplateValidationError("Template must end in exactly one EOF or ERROR token")


def _check_boundaries(tokens: Tuple[Token, ...]) -> None:
    # Every placeholder needs literal text after it, that text is what ends
    # the capture. Whitespace-only text matches anywhere so it does not count.
    open_variable = None
    for tok in tokens:
        if tok.type is TokenType.VARIABLE:
            if open_variable is not None:
                raise TemplateValidationError(
                    f"Placeholders '{open_variable}' and '{tok.literal}' have no literal text between them"
                )
            open_variable = tok.literal
        elif tok.type is TokenType.TEXT and tok.literal.strip(WHITESPACE):
            open_variable = None
    if open_variable is not None:
        raise TemplateValidationError(
            f"Placeholder '{open_variable}' is not followed by any literal text"
        )
