import pytest

from sash.lexer import tokenize
from sash.nodes import Binary, Command, NodeType, Redirection, RedirType, Unary
from sash.parser import (
    ParseError,
    Parser,
    is_operator,
    matching_close,
    parse,
    redir_type_for,
)
from sash.tokens import Token, TokenType


def tree(line):
    return parse(tokenize(line))


def test_simple_command():
    assert tree("ls -l") == Command(["ls", "-l"])


def test_empty_line_is_none():
    assert tree("") is None
    assert tree("   # only a comment") is None


def test_sequence():
    assert tree("a; b") == Binary(NodeType.SEQ, Command(["a"]), Command(["b"]))


def test_trailing_semicolon_is_dropped():
    assert tree("a;") == Command(["a"])


def test_sequence_with_empty_left():
    assert tree("; a") == Binary(NodeType.SEQ, None, Command(["a"]))


def test_logic_is_left_associative():
    expected = Binary(
        NodeType.OR,
        Binary(NodeType.AND, Command(["a"]), Command(["b"])),
        Command(["c"]),
    )
    assert tree("a && b || c") == expected


def test_pipes_of_both_kinds():
    expected = Binary(
        NodeType.PIPE,
        Binary(NodeType.PIPE, Command(["a"]), Command(["b"])),
        Command(["c"]),
    )
    assert tree("a | b |& c") == expected


def test_background():
    assert tree("a &") == Unary(NodeType.BACK, Command(["a"]))


def test_pipe_binds_tighter_than_sequence():
    expected = Binary(
        NodeType.SEQ,
        Binary(NodeType.PIPE, Command(["a"]), Command(["b"])),
        Command(["c"]),
    )
    assert tree("a | b; c") == expected


def test_subshell():
    expected = Unary(
        NodeType.SUBSHELL, Binary(NodeType.SEQ, Command(["a"]), Command(["b"]))
    )
    assert tree("(a; b)") == expected


def test_brace_group_is_subshell():
    assert tree("{ a }") == Unary(NodeType.SUBSHELL, Command(["a"]))


def test_double_paren_is_arithmetic():
    assert tree("((a))") == Unary(NodeType.ARITHMETIC, Command(["a"]))


def test_empty_group():
    assert tree("()") == Unary(NodeType.SUBSHELL, None)


def test_redirections_in_order():
    expected = Command(
        ["cat", "-n"],
        [Redirection(RedirType.IN_OUT, "in"), Redirection(RedirType.OUT_NEW, "out")],
    )
    assert tree("cat < in -n > out") == expected


def test_quoted_word_keeps_quotes():
    assert tree('echo "a b"') == Command(["echo", '"a b"'])


def test_unclosed_group_raises():
    with pytest.raises(ParseError):
        tree("(a")


def test_mismatched_group_raises():
    with pytest.raises(ParseError):
        tree("(a }")


def test_missing_redirection_target_raises():
    with pytest.raises(ParseError):
        tree("cat >")


def test_operator_as_redirection_target_raises():
    with pytest.raises(ParseError):
        tree("cat > | b")


def test_unexpected_token_raises():
    tokens = [Token(TokenType.ERROR, "x"), Token(TokenType.EOF)]
    with pytest.raises(ParseError):
        Parser(tokens).parse()


def test_missing_eof_is_tolerated():
    assert parse([Token(TokenType.WORD, "a")]) == Command(["a"])


@pytest.mark.parametrize(
    ("kind", "expected"),
    [
        (TokenType.LTLTLT, RedirType.IN_BUF),
        (TokenType.LTLT, RedirType.IN_END),
        (TokenType.LEFT_AMP, RedirType.IN_ERR),
        (TokenType.LTGT, RedirType.IN_NEW),
        (TokenType.LT, RedirType.IN_OUT),
        (TokenType.GTGT, RedirType.OUT_END),
        (TokenType.RIGHT_AMP, RedirType.OUT_ERR),
        (TokenType.GT, RedirType.OUT_NEW),
    ],
)
def test_redir_type_for(kind, expected):
    assert redir_type_for(Token(kind)) is expected


def test_redir_type_for_non_redirection_raises():
    with pytest.raises(ParseError):
        redir_type_for(Token(TokenType.WORD, "x"))


@pytest.mark.parametrize(
    ("opening", "closing"),
    [
        (TokenType.LLPAREN, TokenType.RRPAREN),
        (TokenType.LPAREN, TokenType.RPAREN),
        (TokenType.LBRACE, TokenType.RBRACE),
        (TokenType.WORD, TokenType.EOF),
    ],
)
def test_matching_close(opening, closing):
    assert matching_close(opening) is closing


@pytest.mark.parametrize(
    ("kind", "expected"),
    [
        (TokenType.SEMICOLON, True),
        (TokenType.AND, True),
        (TokenType.OR, True),
        (TokenType.BACK, True),
        (TokenType.BAR, True),
        (TokenType.PIPE_AMP, True),
        (TokenType.LPAREN, True),
        (TokenType.RBRACE, True),
        (TokenType.GT, False),
        (TokenType.WORD, False),
    ],
)
def test_is_operator(kind, expected):
    assert is_operator(Token(kind)) is expected