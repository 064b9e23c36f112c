"""A small interactive shell: lexer, parser, syntax tree, builtins and executor."""

__version__ = "0.1.0"
__all__ = ["__version__"]