"""Interactive read-eval loop of the shell."""

from __future__ import annotations

import argparse
import os
import pwd
import socket
import sys
import time
from collections.abc import Sequence

from .executor import execute
from .lexer import tokenize
from .parser import ParseError, parse

GREETING = (
    "Welcome to sash!\n"
    "It is not as big as fish or zsh, but it is a shell of its own\n"
)


def _user_name() -> str:
    return pwd.getpwuid(os.geteuid()).pw_name


def greeting(delay: float = 0.03) -> None:
    """Type the welcome message out one character at a time."""
    for ch in GREETING:
        sys.stdout.write(ch)
        sys.stdout.flush()
        if delay > 0:
            time.sleep(delay)


def prompt_text() -> str:
    """Return the prompt ``user@host dir> ``, with the home directory shown as ~."""
    user = _user_name()
    cwd = os.getcwd()
    home = "/home/" + user
    if cwd.startswith(home):
        cwd = "~" + cwd[len(home):]
    return f"{user}@{socket.gethostname()} {cwd}> "


def run_line(line: str) -> int:
    """Tokenize, parse and run one command line; return its exit status.

    Raises ValueError (including ParseError) for a malformed line.
    """
    return execute(parse(tokenize(line)))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive shell until end of input."""
    argparse.ArgumentParser(prog="sash", description="A small interactive shell.").parse_args(argv)
    greeting()
    while True:
        print(prompt_text(), end="", flush=True)
        line = sys.stdin.readline()
        if not line:
            print()
            return 0
        try:
            run_line(line.removesuffix("\n"))
        except ParseError as exc:
            print(f"sash: parse error: {exc}", file=sys.stderr)
        except ValueError as exc:
            print(f"sash: {exc}", file=sys.stderr)