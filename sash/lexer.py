"""Splitting a command line into tokens."""

from __future__ import annotations

import re
from itertools import takewhile

from .tokens import Token, TokenType

METACHARS = "<>&|;(){}"
_SPACES = " \t\n\v\f\r"

# Longer operators come first so that the longest match wins.
OPERATORS: tuple[tuple[str, TokenType], ...] = (
    ("<<<", TokenType.LTLTLT),
    ("<<", TokenType.LTLT),
    ("<&", TokenType.LEFT_AMP),
    ("<>", TokenType.LTGT),
    ("<", TokenType.LT),
    (">>", TokenType.GTGT),
    (">&", TokenType.RIGHT_AMP),
    (">", TokenType.GT),
    ("&&", TokenType.AND),
    ("&", TokenType.BACK),
    ("||", TokenType.OR),
    ("|&", TokenType.PIPE_AMP),
    ("|", TokenType.BAR),
    (";", TokenType.SEMICOLON),
    ("((", TokenType.LLPAREN),
    ("))", TokenType.RRPAREN),
    ("(", TokenType.LPAREN),
    (")", TokenType.RPAREN),
    ("{", TokenType.LBRACE),
    ("}", TokenType.RBRACE),
)

_LINE_END_RE = re.compile(r"[\n\0#]")
_WORD_RE = re.compile(r"[^ \t\n\v\f\r<>&|;(){}\0]+")
_STRING_END_RE = re.compile(r'["\0]')


def is_word_char(ch: str) -> bool:
    """Return True if ``ch`` may be part of a bare word."""
    return bool(ch) and ch != "\0" and ch not in _SPACES and ch not in METACHARS


def _line_end(text: str) -> int:
    match = _LINE_END_RE.search(text)
    return match.start() if match else len(text)


def _read_string(text: str, pos: int) -> tuple[Token, int]:
    match = _STRING_END_RE.search(text, pos + 1)
    if match is None or match.group() != '"':
        raise ValueError('unterminated quoted string: missing closing "')
    end = match.end()
    return Token(TokenType.WORD, text[pos:end]), end


def _read_operator(text: str, pos: int) -> tuple[Token, int]:
    for symbol, kind in OPERATORS:
        if text.startswith(symbol, pos):
            return Token(kind, symbol), pos + len(symbol)
    raise ValueError(f"invalid operator {text[pos]!r} at position {pos + 1}")


def _read_word(text: str, pos: int) -> tuple[Token, int]:
    match = _WORD_RE.match(text, pos)
    word = match.group() if match else ""
    return Token(TokenType.WORD, word), pos + len(word)


def tokenize(text: str) -> list[Token]:
    """Split a command line into tokens, ending with a single EOF token.

    Input stops at the first newline, NUL or ``#`` that begins a comment.
    Quoted strings keep their quotes. Raises ValueError on an unclosed quote.
    """
    limit = _line_end(text)
    tokens: list[Token] = []
    pos = 0
    while pos < limit:
        while pos < limit and text[pos] in _SPACES:
            pos += 1
        if pos >= limit:
            break
        ch = text[pos]
        if ch == '"':
            token, pos = _read_string(text, pos)
        elif ch in METACHARS:
            token, pos = _read_operator(text, pos)
        else:
            token, pos = _read_word(text, pos)
        tokens.append(token)
    tokens.append(Token(TokenType.EOF))
    return tokens


def format_tokens(tokens: list[Token]) -> str:
    """Render tokens up to the first EOF, one ``<kind> - <text>`` per line."""
    return "".join(
        f"{int(token.type)} - {token.text}\n"
        for token in takewhile(lambda t: t.type is not TokenType.EOF, tokens)
    )