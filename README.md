# minisyn

The front end of a small interactive shell, as a plain Python library. It
takes one command line at a time and tells you what a shell would make of it
before anything is run.

## Modules

- `minisyn.tokens`: `tokenize(line)` splits a line into `Token` objects
  (`text` and `type`). Words are separated by spaces and tabs; `|`, `<`, `>`,
  `<<` and `>>` are tokens of their own, and quoted text, quotes included,
  stays inside its word. `classify(text)` gives the `TokenType` of a piece of
  text, `is_operator_char(char)` recognises `|`, `<` and `>`,
  `quotes_balanced(line)` checks that every `'` and `"` is closed, and
  `last_word(tokens)` returns the text of the last `WORD` token or `None`.
- `minisyn.syntax`: `check_redirections(line)` raises `ShellSyntaxError` for
  the first misplaced pipe or redirection, for example `| ls`, `ls >`,
  `cat < | wc` or `echo >> >> f`. Operators inside quotes are ignored and
  checking stops at a newline. The error carries the offending token in
  `token` (`newline` when the line ends too early) and an `exit_status` of 2;
  its message reads ``syntax error near unexpected token `|'``.
  `is_blank(line)` is true for lines of only spaces and tabs, and
  `validate_input(line)` returns `False` for a blank line, `True` for a line
  worth running, and raises `ShellSyntaxError` otherwise.
- `minisyn.session`: `Session` keeps state across lines: `history`,
  `exit_code` and `loop_count`. `accept(line)` checks one line and returns its
  tokens, or an empty list for a blank line, a line with unbalanced quotes
  or a syntax error. Syntax errors and unbalanced quotes are reported on
  stderr; the exit code becomes 2 after a syntax error and 0 after a blank
  line. Only non-blank lines with balanced quotes go into `history`.
  `reset()` clears the per-line state.
- `minisyn.strings`: small string helpers with C-like edge cases: `atoi`,
  `itoa`, `split_words`, `trim`, `substr`, `find_within`, `compare_prefix`,
  `same`, `is_space` and `join`.
- `minisyn.cformat`: `cformat(fmt, *args)` formats `%c`, `%s`, `%p`, `%d`,
  `%i`, `%u`, `%x`, `%X` and `%%` with 32-bit integer semantics, and
  `cprintf(fmt, *args, file=None)` writes the result and returns its length.
  Unknown conversions, a trailing `%` or a missing argument raise
  `FormatError`.
- `minisyn.lines`: `LineReader(stream)` hands out lines, newline kept, from a
  text or binary stream through `next_line()` or iteration.

## Example

```python
from minisyn.tokens import tokenize
from minisyn.syntax import validate_input, ShellSyntaxError

for token in tokenize('echo "a | b" > out.txt'):
    print(token.type.name, token.text)
# WORD echo
# WORD "a | b"
# OUTPUT >
# WORD out.txt

try:
    validate_input("ls | | wc")
except ShellSyntaxError as err:
    print(err)          # syntax error near unexpected token `|'
```

## What it does not do

This package only reads and checks command lines. It does not run commands,
build pipelines, open redirection targets, read here-documents, expand
variables or offer built-in commands, and it has no interactive prompt or
command of its own.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```

The package has no runtime dependencies and needs Python 3.10 or newer.