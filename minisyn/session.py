"""State kept across the lines an interactive shell reads."""

from __future__ import annotations

import sys

from .syntax import ShellSyntaxError, is_blank, validate_input
from .tokens import Token, quotes_balanced, tokenize

_UNEQUAL_QUOTES = "Unequal amount of quotes\n"


class Session:
    """Checks each input line, keeps history and the last exit code."""

    def __init__(self) -> None:
        self.history: list[str] = []
        self.exit_code = 0
        self.loop_count = 0
        self.blank = False
        self.unequal_quotes = False

    def _record(self, line: str) -> None:
        if not quotes_balanced(line):
            self.unequal_quotes = True
        if line and not is_blank(line) and not self.unequal_quotes:
            self.history.append(line)
        else:
            self.blank = True

    def accept(self, line: str) -> list[Token]:
        """Take one input line and return its tokens.

        Lines that are blank, have unbalanced quotes or fail the syntax
        check give an empty list; problems are reported on stderr.
        """
        self.loop_count += 1
        self._record(line)
        tokens: list[Token] = []
        try:
            runnable = validate_input(line)
        except ShellSyntaxError as err:
            print(err, file=sys.stderr)
            self.exit_code = err.exit_status
            runnable = False
        else:
            if not runnable:
                self.exit_code = 0
        if runnable and not self.blank:
            tokens = tokenize(line)
        self.reset()
        return tokens

    def reset(self) -> None:
        """Clear per-line state, reporting unbalanced quotes if seen."""
        self.blank = False
        if self.unequal_quotes:
            sys.stderr.write(_UNEQUAL_QUOTES)
        self.unequal_quotes = False