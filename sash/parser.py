"""Recursive-descent parser turning a token list into a syntax tree."""

from __future__ import annotations

from collections.abc import Iterable

from .nodes import Binary, Command, Node, NodeType, Redirection, RedirType, Unary
from .tokens import Token, TokenType


class ParseError(ValueError):
    """Raised when a token sequence does not form a valid command line."""


_REDIR_TYPES: dict[TokenType, RedirType] = {
    TokenType.LTLTLT: RedirType.IN_BUF,
    TokenType.LTLT: RedirType.IN_END,
    TokenType.LEFT_AMP: RedirType.IN_ERR,
    TokenType.LTGT: RedirType.IN_NEW,
    TokenType.LT: RedirType.IN_OUT,
    TokenType.GTGT: RedirType.OUT_END,
    TokenType.RIGHT_AMP: RedirType.OUT_ERR,
    TokenType.GT: RedirType.OUT_NEW,
}

_CLOSERS: dict[TokenType, TokenType] = {
    TokenType.LLPAREN: TokenType.RRPAREN,
    TokenType.LPAREN: TokenType.RPAREN,
    TokenType.LBRACE: TokenType.RBRACE,
}

_CONTROL_OPERATORS = frozenset(
    {
        TokenType.SEMICOLON,
        TokenType.AND,
        TokenType.OR,
        TokenType.BACK,
        TokenType.BAR,
        TokenType.PIPE_AMP,
    }
)

_EOF = Token(TokenType.EOF)


def redir_type_for(token: Token) -> RedirType:
    """Return the redirection kind written by a redirection token."""
    try:
        return _REDIR_TYPES[token.type]
    except KeyError:
        raise ParseError("invalid redirection token") from None


def matching_close(token_type: TokenType) -> TokenType:
    """Return the closing bracket for an opening one, or EOF for anything else."""
    return _CLOSERS.get(token_type, TokenType.EOF)


def is_operator(token: Token) -> bool:
    """True for tokens that end a simple command: control operators and brackets."""
    return (
        token.type in _CONTROL_OPERATORS
        or token.type.is_open_group()
        or token.type.is_close_group()
    )


class Parser:
    """Parses one command line; lower methods bind tighter than higher ones."""

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._tokens = list(tokens)
        self._pos = 0

    def _peek(self) -> Token:
        if self._pos < len(self._tokens):
            return self._tokens[self._pos]
        return _EOF

    def _at(self, *kinds: TokenType) -> bool:
        return self._peek().type in kinds

    def _advance(self) -> Token:
        token = self._peek()
        self._pos += 1
        return token

    def parse(self) -> Node | None:
        """Parse the whole line; an empty line gives None."""
        return self.parse_seq()

    def parse_seq(self) -> Node | None:
        """Parse commands joined by ``;``, the loosest binding."""
        left = self.parse_logic()
        while self._at(TokenType.SEMICOLON):
            self._advance()
            if self._at(TokenType.EOF):
                break
            left = Binary(NodeType.SEQ, left, self.parse_logic())
        return left

    def parse_logic(self) -> Node | None:
        """Parse ``&&`` and ``||`` chains, left to right."""
        left = self.parse_back()
        while self._at(TokenType.AND, TokenType.OR):
            kind = NodeType.AND if self._advance().type is TokenType.AND else NodeType.OR
            left = Binary(kind, left, self.parse_back())
        return left

    def parse_back(self) -> Node | None:
        """Parse trailing ``&`` markers."""
        left = self.parse_pipe()
        while self._at(TokenType.BACK):
            self._advance()
            left = Unary(NodeType.BACK, left)
        return left

    def parse_pipe(self) -> Node | None:
        """Parse ``|`` and ``|&`` chains."""
        left = self.parse_group()
        while self._at(TokenType.BAR, TokenType.PIPE_AMP):
            self._advance()
            left = Binary(NodeType.PIPE, left, self.parse_group())
        return left

    def parse_group(self) -> Node | None:
        """Parse a bracketed group, or fall back to a simple command."""
        opening = self._peek().type
        if not opening.is_open_group():
            return self.parse_command()
        closing = matching_close(opening)
        kind = NodeType.ARITHMETIC if opening is TokenType.LLPAREN else NodeType.SUBSHELL
        self._advance()
        child = self.parse_seq()
        if not self._at(closing):
            raise ParseError("expected closing bracket")
        self._advance()
        return Unary(kind, child)

    def parse_command(self) -> Command | None:
        """Parse words and redirections up to the next operator."""
        argv: list[str] = []
        redirections: list[Redirection] = []
        while not self._at(TokenType.EOF) and not is_operator(self._peek()):
            token = self._advance()
            if token.type.is_redirection():
                kind = redir_type_for(token)
                target = self._peek()
                if target.type is not TokenType.WORD:
                    raise ParseError("expected file name after redirection")
                self._advance()
                redirections.append(Redirection(kind, target.text or ""))
            elif token.type is TokenType.WORD:
                argv.append(token.text or "")
            else:
                raise ParseError("unexpected token in command")
        if not argv:
            return None
        return Command(argv, redirections)


def parse(tokens: Iterable[Token]) -> Node | None:
    """Parse a token list into a syntax tree."""
    return Parser(tokens).parse()