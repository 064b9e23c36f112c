"""Running syntax trees: builtins in process, other commands as child processes."""

from __future__ import annotations

import io
import os
import subprocess
import sys
import threading
from collections.abc import Iterable, Iterator
from contextlib import ExitStack, contextmanager
from typing import TextIO

from .commands import find_builtin
from .nodes import Binary, Command, Node, NodeType, Redirection, RedirType, Unary


class RedirectionError(OSError):
    """Raised when a redirection target cannot be opened."""


# Each redirection kind names the stream it replaces and the file mode it opens.
_REDIRECT_MODES: dict[RedirType, tuple[str, str]] = {
    RedirType.IN_BUF: ("stdin", "r"),
    RedirType.IN_END: ("stdin", "r"),
    RedirType.IN_ERR: ("stdin", "r"),
    RedirType.IN_NEW: ("stdin", "r"),
    RedirType.IN_OUT: ("stdout", "a"),
    RedirType.OUT_END: ("stdout", "a"),
    RedirType.OUT_ERR: ("stdout", "w"),
    RedirType.OUT_NEW: ("stdout", "w"),
}


@contextmanager
def open_redirections(
    redirections: Iterable[Redirection],
) -> Iterator[tuple[TextIO | None, TextIO | None]]:
    """Open redirection targets in order and yield ``(stdin, stdout)``.

    A later redirection of the same stream wins; None means not redirected.
    Every opened file is closed on exit.
    """
    streams: dict[str, TextIO | None] = {"stdin": None, "stdout": None}
    with ExitStack() as stack:
        for redirection in redirections:
            stream, mode = _REDIRECT_MODES[redirection.type]
            try:
                handle = open(redirection.file, mode, encoding="utf-8")
            except OSError as exc:
                raise RedirectionError(
                    exc.errno, exc.strerror, redirection.file
                ) from exc
            streams[stream] = stack.enter_context(handle)
        yield streams["stdin"], streams["stdout"]


def execute_builtin(node: Command) -> int | None:
    """Run a builtin command; None if the command is not a builtin."""
    builtin = find_builtin(node.argv[0])
    if builtin is None:
        return None
    with open_redirections(node.redirections) as (_, stdout):
        return builtin(node.argv, stdout or sys.stdout, sys.stderr)


def execute_command(node: Command) -> int:
    """Run a simple command and return its exit status."""
    try:
        status = execute_builtin(node)
        if status is not None:
            return status
        sys.stdout.flush()
        with open_redirections(node.redirections) as (stdin, stdout):
            completed = subprocess.run(node.argv, stdin=stdin, stdout=stdout, check=False)
    except RedirectionError as exc:
        print(f"sash: {exc.filename}: {exc.strerror}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"sash: {node.argv[0]}: {exc.strerror}", file=sys.stderr)
        return 1
    # A child killed by a signal reports no exit code of its own.
    return max(completed.returncode, 0)


def _pipeline_stages(node: Node | None) -> Iterator[Node | None]:
    if isinstance(node, Binary) and node.type is NodeType.PIPE:
        yield from _pipeline_stages(node.left)
        yield from _pipeline_stages(node.right)
    else:
        yield node


def _run_stage(stage: Node | None, data: bytes | None, capture: bool) -> tuple[int, bytes]:
    """Run one pipeline stage, feeding it ``data`` and returning its piped output."""
    if not isinstance(stage, Command):
        return execute(stage), b""
    builtin = find_builtin(stage.argv[0])
    try:
        with open_redirections(stage.redirections) as (stdin, stdout):
            if builtin is not None:
                if stdout is None and capture:
                    buffer = io.StringIO()
                    status = builtin(stage.argv, buffer, sys.stderr)
                    return status, buffer.getvalue().encode()
                return builtin(stage.argv, stdout or sys.stdout, sys.stderr), b""
            sys.stdout.flush()
            target = stdout if stdout is not None else (subprocess.PIPE if capture else None)
            if stdin is not None:
                completed = subprocess.run(stage.argv, stdin=stdin, stdout=target, check=False)
            else:
                completed = subprocess.run(
                    stage.argv, input=data if data is not None else b"",
                    stdout=target, check=False,
                )
    except RedirectionError as exc:
        print(f"sash: {exc.filename}: {exc.strerror}", file=sys.stderr)
        return 1, b""
    except OSError as exc:
        print(f"sash: {stage.argv[0]}: {exc.strerror}", file=sys.stderr)
        return 1, b""
    return max(completed.returncode, 0), completed.stdout or b""


def execute_pipe(node: Binary) -> int:
    """Run a pipeline stage by stage, each stage's output feeding the next.

    Returns the status of the last stage.
    """
    stages = list(_pipeline_stages(node))
    data: bytes | None = None
    status = 0
    for position, stage in enumerate(stages):
        status, data = _run_stage(stage, data, capture=position < len(stages) - 1)
    return status


def execute_back(node: Node | None) -> int:
    """Start a job in the background and return 0 at once."""
    job = threading.Thread(target=execute, args=(node,), daemon=True)
    job.start()
    return 0


def _execute_subshell(node: Unary) -> int:
    cwd = os.getcwd()
    try:
        return execute(node.child) & 0xFF
    finally:
        os.chdir(cwd)


def execute(node: Node | None) -> int:
    """Run a syntax tree and return its exit status; an empty tree gives 1."""
    if node is None:
        return 1
    if isinstance(node, Command):
        return execute_command(node)
    if isinstance(node, Binary):
        if node.type is NodeType.SEQ:
            execute(node.left)
            return execute(node.right)
        if node.type is NodeType.AND:
            return execute(node.right) if execute(node.left) == 0 else 1
        if node.type is NodeType.OR:
            if execute(node.left) != 0:
                execute(node.right)
            return 0
        return execute_pipe(node)
    if node.type is NodeType.BACK:
        return execute_back(node.child)
    if node.type is NodeType.SUBSHELL:
        return _execute_subshell(node)
    return 0