"""Token kinds produced by the lexer and consumed by the parser."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class TokenType(IntEnum):
    """Kinds of lexical tokens, in operator-priority order."""

    # Redirection
    LTLTLT = 0  # <<<
    LTLT = 1  # <<
    LEFT_AMP = 2  # <&
    LTGT = 3  # <>
    LT = 4  # <
    GTGT = 5  # >>
    RIGHT_AMP = 6  # >&
    GT = 7  # >

    # Pipes and logic
    AND = 8  # &&
    BACK = 9  # &
    OR = 10  # ||
    PIPE_AMP = 11  # |&
    BAR = 12  # |
    SEMICOLON = 13  # ;

    # Grouping
    LLPAREN = 14  # ((
    RRPAREN = 15  # ))
    LPAREN = 16  # (
    RPAREN = 17  # )
    LBRACE = 18  # {
    RBRACE = 19  # }

    # Other
    ERROR = 20
    EOF = 21
    WORD = 22

    def is_redirection(self) -> bool:
        """True for the redirection operators (<<< through >)."""
        return TokenType.LTLTLT <= self <= TokenType.GT

    def is_open_group(self) -> bool:
        """True for ((, ( and {."""
        return self in (TokenType.LLPAREN, TokenType.LPAREN, TokenType.LBRACE)

    def is_close_group(self) -> bool:
        """True for )), ) and }."""
        return self in (TokenType.RRPAREN, TokenType.RPAREN, TokenType.RBRACE)


@dataclass(frozen=True)
class Token:
    """A lexical token: its kind and the text it was read from."""

    type: TokenType
    text: str | None = None