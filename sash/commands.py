"""Commands run inside the shell process itself."""

from __future__ import annotations

import os
import pwd
from collections.abc import Callable, Sequence
from contextlib import suppress
from typing import TextIO

Builtin = Callable[[Sequence[str], TextIO, TextIO], int]


def _home_directory() -> str:
    return "/home/" + pwd.getpwuid(os.geteuid()).pw_name


def echo(argv: Sequence[str], stdout: TextIO, stderr: TextIO) -> int:
    """Write the first argument, without a newline. Takes one or two arguments."""
    if not 2 <= len(argv) <= 3:
        stderr.write("Incorrect amount of arguments")
        return 1
    stdout.write(argv[1])
    stdout.flush()
    return 0


def cd(argv: Sequence[str], stdout: TextIO, stderr: TextIO) -> int:
    """Change directory to the argument, or to the user's home with none.

    A directory that cannot be entered is ignored; more than one argument fails.
    """
    if len(argv) > 2:
        return 1
    target = argv[1] if len(argv) == 2 else _home_directory()
    with suppress(OSError):
        os.chdir(target)
    return 0


_BUILTINS: dict[str, Builtin] = {"echo": echo, "cd": cd}


def find_builtin(name: str) -> Builtin | None:
    """Return the builtin called ``name``, or None."""
    return _BUILTINS.get(name)