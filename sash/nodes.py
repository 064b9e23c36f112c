"""Syntax tree nodes for parsed command lines, and their text rendering."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class NodeType(Enum):
    """Kinds of syntax tree nodes."""

    COMMAND = "COMMAND"
    PIPE = "PIPE"
    SEQ = "SEQUENCE"
    AND = "AND"
    OR = "OR"
    BACK = "BACKGROUND"
    SUBSHELL = "SUBSHELL"
    ARITHMETIC = "ARITHMETIC"


class RedirType(Enum):
    """Kinds of redirection, valued by their operator."""

    IN_BUF = "<<<"
    IN_END = "<<"
    IN_ERR = "<&"
    IN_NEW = "<>"
    IN_OUT = "<"
    OUT_END = ">>"
    OUT_ERR = ">&"
    OUT_NEW = ">"


_BINARY_TYPES = frozenset({NodeType.PIPE, NodeType.SEQ, NodeType.AND, NodeType.OR})
_UNARY_TYPES = frozenset({NodeType.BACK, NodeType.SUBSHELL, NodeType.ARITHMETIC})


@dataclass
class Redirection:
    """A single redirection of a command."""

    type: RedirType
    file: str


@dataclass
class Command:
    """A simple command: its arguments and redirections, in order."""

    argv: list[str]
    redirections: list[Redirection] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.argv:
            raise ValueError("a command needs at least one argument")

    @property
    def type(self) -> NodeType:
        return NodeType.COMMAND


@dataclass
class Binary:
    """A node joining two subtrees: pipe, sequence, and, or."""

    type: NodeType
    left: Node | None
    right: Node | None

    def __post_init__(self) -> None:
        if self.type not in _BINARY_TYPES:
            raise ValueError(f"{self.type.value} is not a binary node type")


@dataclass
class Unary:
    """A node wrapping one subtree: background, subshell, arithmetic."""

    type: NodeType
    child: Node | None

    def __post_init__(self) -> None:
        if self.type not in _UNARY_TYPES:
            raise ValueError(f"{self.type.value} is not a unary node type")


Node = Command | Binary | Unary


def node_name(node_type: NodeType) -> str:
    """Return the display name of a node type."""
    return node_type.value


def redir_symbol(redir_type: RedirType) -> str:
    """Return the operator that writes a redirection type."""
    return redir_type.value


def _indent(level: int) -> str:
    return "  " * level


def _tree_lines(node: Node | None, level: int) -> list[str]:
    pad = _indent(level)
    if node is None:
        return [f"{pad}(Null)"]

    lines = [f"{pad}[{node_name(node.type)}]"]
    inner = _indent(level + 1)
    if isinstance(node, Command):
        lines.append(f"{inner}argv: " + ", ".join(f'"{arg}"' for arg in node.argv))
        if node.redirections:
            lines.append(f"{inner}redirections:")
            lines.extend(
                f"{_indent(level + 2)}{redir_symbol(r.type)} {r.file} "
                for r in node.redirections
            )
    elif isinstance(node, Binary):
        lines.append(f"{inner}left:")
        lines.extend(_tree_lines(node.left, level + 2))
        lines.append(f"{inner}right:")
        lines.extend(_tree_lines(node.right, level + 2))
    else:
        lines.append(f"{inner}child:")
        lines.extend(_tree_lines(node.child, level + 2))
    return lines


def format_tree(node: Node | None, level: int = 0) -> str:
    """Render a subtree as indented text, two spaces per level."""
    return "".join(f"{line}\n" for line in _tree_lines(node, level))


def format_ast(node: Node | None) -> str:
    """Render a whole tree between banner lines."""
    return (
        "\n============== AST ==============\n"
        + format_tree(node, 0)
        + "=================================\n"
    )


def print_ast(node: Node | None) -> None:
    """Write the rendering of a whole tree to standard output."""
    print(format_ast(node), end="")