"""Definition token dataclass"""

from dataclasses import dataclass

from defscrape.types.token_type import TokenType


@dataclass(frozen=True)
class Token:
    """A lexical type plus the source text it was scanned from"""
    type: TokenType
    literal: str = ""

    def __str__(self) -> str:
        return f"{self.type.name:<11} {self.literal!r}"
