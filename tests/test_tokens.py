import dataclasses

import pytest

from sash.tokens import Token, TokenType


def test_redirection_kinds_are_redirections():
    assert TokenType.LTLTLT.is_redirection() is True
    assert TokenType.LTLT.is_redirection() is True
    assert TokenType.LEFT_AMP.is_redirection() is True
    assert TokenType.LTGT.is_redirection() is True
    assert TokenType.LT.is_redirection() is True
    assert TokenType.GTGT.is_redirection() is True
    assert TokenType.RIGHT_AMP.is_redirection() is True
    assert TokenType.GT.is_redirection() is True


def test_other_kinds_are_not_redirections():
    assert TokenType.AND.is_redirection() is False
    assert TokenType.BACK.is_redirection() is False
    assert TokenType.OR.is_redirection() is False
    assert TokenType.PIPE_AMP.is_redirection() is False
    assert TokenType.BAR.is_redirection() is False
    assert TokenType.SEMICOLON.is_redirection() is False
    assert TokenType.LPAREN.is_redirection() is False
    assert TokenType.RBRACE.is_redirection() is False
    assert TokenType.ERROR.is_redirection() is False
    assert TokenType.EOF.is_redirection() is False
    assert TokenType.WORD.is_redirection() is False


def test_open_groups():
    assert TokenType.LLPAREN.is_open_group() is True
    assert TokenType.LPAREN.is_open_group() is True
    assert TokenType.LBRACE.is_open_group() is True
    assert TokenType.RRPAREN.is_open_group() is False
    assert TokenType.RPAREN.is_open_group() is False
    assert TokenType.RBRACE.is_open_group() is False
    assert TokenType.WORD.is_open_group() is False
    assert TokenType.LT.is_open_group() is False
    assert TokenType.SEMICOLON.is_open_group() is False


def test_close_groups():
    assert TokenType.RRPAREN.is_close_group() is True
    assert TokenType.RPAREN.is_close_group() is True
    assert TokenType.RBRACE.is_close_group() is True
    assert TokenType.LLPAREN.is_close_group() is False
    assert TokenType.LPAREN.is_close_group() is False
    assert TokenType.LBRACE.is_close_group() is False
    assert TokenType.WORD.is_close_group() is False
    assert TokenType.GT.is_close_group() is False
    assert TokenType.EOF.is_close_group() is False


def test_open_and_close_groups_disjoint():
    assert not (TokenType.LPAREN.is_open_group() and TokenType.LPAREN.is_close_group())
    assert not (TokenType.RPAREN.is_open_group() and TokenType.RPAREN.is_close_group())
    assert not (TokenType.LBRACE.is_open_group() and TokenType.LBRACE.is_close_group())
    assert not (TokenType.RBRACE.is_open_group() and TokenType.RBRACE.is_close_group())
    assert not (TokenType.LLPAREN.is_open_group() and TokenType.LLPAREN.is_close_group())
    assert not (TokenType.RRPAREN.is_open_group() and TokenType.RRPAREN.is_close_group())


def test_token_equality_and_default_text():
    assert Token(TokenType.WORD, "ls") == Token(TokenType.WORD, "ls")
    assert Token(TokenType.EOF).text is None
    assert Token(TokenType.WORD, "ls") != Token(TokenType.WORD, "cat")


def test_token_is_immutable():
    token = Token(TokenType.WORD, "ls")
    with pytest.raises(dataclasses.FrozenInstanceError):
        token.text = "cat"
    assert token.text == "ls"