# sash

`sash` is a small interactive shell for POSIX systems. It reads a line,
splits it into tokens, builds a syntax tree and runs it. It runs external
programs and has two built-in commands, `echo` and `cd`.

## Installation

```
pip install .
```

To install with the test dependencies:

```
pip install ".[test]"
```

## Usage

Start the shell:

```
sash
```

It takes no options besides `--help`. A short greeting is typed out first,
then a prompt of the form `user@host ~/current/dir> ` is shown, where a
working directory under `/home/<user>` is written with `~`. Each line is run
as it is entered. The shell exits at end of input (Ctrl-D).

A line that cannot be parsed (an unclosed `"`, a missing closing bracket, a
redirection without a file name) prints an error on standard error and the
shell carries on. Everything from a `#` to the end of the line is ignored.

### Supported syntax

| Syntax                 | What the shell does                                                 |
|------------------------|---------------------------------------------------------------------|
| `cmd1 ; cmd2`          | runs both, in order; the status is that of `cmd2`                   |
| `cmd1 && cmd2`         | runs `cmd2` only if `cmd1` exits with 0                             |
| `cmd1 \|\| cmd2`       | runs `cmd2` only if `cmd1` fails; the status is always 0            |
| `cmd1 \| cmd2`, `\|&`  | runs the stages one after another, each stage's output fed to the next; the status is that of the last stage |
| `cmd &`                | starts the command in a background thread and returns 0 at once     |
| `( ... )`, `{ ... }`   | runs the group; a `cd` inside it does not outlast the group         |
| `(( ... ))`            | parsed, but not evaluated: returns 0                                |
| `"some text"`          | one word; the quotes are kept as part of it                         |

Redirections apply to the command they follow, in order, and a later one of
the same stream wins:

| Operator                   | Effect                                        |
|----------------------------|-----------------------------------------------|
| `>`, `>&`                  | standard output to the file, truncating it    |
| `>>`, `<`                  | standard output appended to the file          |
| `<<<`, `<<`, `<&`, `<>`    | standard input read from the file             |

Note that `<` appends standard output to the file rather than reading from
it; to read standard input from a file, use one of the operators in the
last row.

### Built-in commands

- `echo TEXT` writes `TEXT` to standard output, with no newline. It takes one
  or two arguments and writes only the first; otherwise it prints
  `Incorrect amount of arguments` and fails.
- `cd [DIR]` changes the working directory. With no argument it goes to
  `/home/<user>`. A directory that cannot be entered is silently ignored;
  more than one argument fails.

## What it does not do

`sash` has no variable or parameter expansion, no globbing, no quote
removal or escapes, no here-documents (`<<` and `<<<` read from a named
file), no arithmetic evaluation, no job control, no history and no line
editing. Pipeline stages do not run at the same time: each one finishes
before the next starts.

## Using it as a library

```python
from sash.lexer import tokenize, format_tokens
from sash.parser import parse
from sash.nodes import format_ast
from sash.executor import execute

tokens = tokenize("echo hi && ls > listing.txt")
print(format_tokens(tokens))
tree = parse(tokens)
print(format_ast(tree))
status = execute(tree)
```

- `sash.lexer.tokenize(text)` returns a list of `Token` objects ending with an
  EOF token; it raises `ValueError` on an unclosed quote.
- `sash.parser.parse(tokens)` returns a tree of `Command`, `Binary` and
  `Unary` nodes (from `sash.nodes`), or `None` for an empty line; it raises
  `sash.parser.ParseError` on malformed input.
- `sash.nodes.format_tree`, `format_ast` and `print_ast` render a tree as
  indented text.
- `sash.executor.execute(node)` runs a tree and returns its exit status
  (1 for an empty tree).
- `sash.shell.run_line(line)` does all three steps for one input line.

## Running the tests

```
pytest
```