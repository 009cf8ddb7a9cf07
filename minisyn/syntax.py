"""Syntax checks run on a command line before it is tokenized."""

from __future__ import annotations

_BLANKS = " \t"
_END = "\0"
_QUOTES = "'\""

# Characters that may not follow an operator, per operator kind.
_LEADING_STOPS = "\n\0|<>"
_INPUT_STOPS = "\n\0|>"
_OUTPUT_STOPS = "\n\0|<"
_DOUBLE_STOPS = "\n\0|<>"
_PIPE_STOPS = "\n\0|"


class ShellSyntaxError(ValueError):
    """A command line with a misplaced pipe or redirection operator."""

    exit_status = 2

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"syntax error near unexpected token `{token}'")


def _truncate(line: str) -> str:
    return line.split(_END, 1)[0]


def is_blank(line: str) -> bool:
    """True when ``line`` holds only spaces and tabs before its end or newline."""
    rest = _truncate(line).lstrip(_BLANKS)
    return not rest or rest[0] == "\n"


class _Scan:
    """One pass over a line, remembering the first offending position."""

    def __init__(self, line: str) -> None:
        self.line = _truncate(line)
        self.error: int | None = None
        self.doubled = False

    def at(self, index: int) -> str:
        if 0 <= index < len(self.line):
            return self.line[index]
        return _END

    def skip_blanks(self, index: int) -> int:
        while self.at(index) in _BLANKS and self.at(index) != _END:
            index += 1
        return index

    def back_over_blanks(self, index: int) -> int:
        while index >= 0 and self.at(index) in _BLANKS and self.at(index) != _END:
            index -= 1
        return index

    def fail(self, index: int, doubled: bool = False) -> None:
        self.error = index
        if doubled:
            self.doubled = True

    def check_after(self, index: int, stops: str, may_double: bool = True) -> None:
        """Look at the first non-blank after ``index`` for a forbidden character."""
        pos = self.skip_blanks(index + 1)
        char = self.at(pos)
        if char in stops:
            follower = self.at(pos + 1)
            self.fail(pos, may_double and follower != _END and follower == char)

    def check_input(self, index: int) -> None:
        if index == 0:
            self.check_after(0, _LEADING_STOPS)
            return
        if index == 1 and self.at(0) in ">|":
            self.fail(1)
            return
        prev = self.back_over_blanks(index - 1)
        if prev >= 0:
            char = self.at(prev)
            if char == ">" or (char == "<" and prev + 1 != index):
                self.fail(index)
                return
        self.check_after(index, _INPUT_STOPS)

    def check_output(self, index: int) -> None:
        if index == 0:
            self.check_after(0, _LEADING_STOPS)
            return
        if index == 1 and self.at(0) in "<|":
            self.fail(1)
            return
        prev = self.back_over_blanks(index - 1)
        if prev >= 0:
            char = self.at(prev)
            if char == "<" or (char == ">" and prev + 1 != index):
                self.fail(index)
                return
        self.check_after(index, _OUTPUT_STOPS)

    def check_pipe(self, index: int) -> None:
        if index == 0:
            self.fail(0)
            return
        if index == 1 and self.at(0) in "<|>":
            self.fail(1)
            return
        prev = self.back_over_blanks(index - 1)
        if prev >= 0 and self.at(prev) in "<|>":
            self.fail(prev)
            return
        self.check_after(index, _PIPE_STOPS, may_double=False)

    def check_double(self, index: int) -> None:
        """Check a ``<<`` or ``>>`` whose first character is at ``index``."""
        second = index + 1
        if index == 0:
            self.check_after(second, _LEADING_STOPS)
            return
        if index == 1 and self.at(0) in "<|>":
            self.fail(2, doubled=True)
            return
        prev = self.back_over_blanks(index - 1)
        if prev >= 0 and self.at(prev) in "<>":
            self.fail(prev, doubled=True)
            return
        self.check_after(second, _DOUBLE_STOPS)

    def offending_token(self) -> str:
        assert self.error is not None
        char = self.at(self.error)
        if char in "\n\0":
            return "newline"
        return char * 2 if self.doubled else char

    def run(self) -> None:
        quote: str | None = None
        index = 0
        while index < len(self.line) and self.line[index] != "\n":
            char = self.line[index]
            step = 1
            if quote is not None:
                if char == quote:
                    quote = None
            elif char in _QUOTES:
                quote = char
            elif char in "<>" and self.at(index + 1) == char:
                self.check_double(index)
                step = 2
            elif char == ">":
                self.check_output(index)
            elif char == "<":
                self.check_input(index)
            elif char == "|":
                self.check_pipe(index)
            if self.error is not None:
                raise ShellSyntaxError(self.offending_token())
            index += step


def check_redirections(line: str) -> None:
    """Raise ShellSyntaxError for the first misplaced operator in ``line``.

    Operators inside quotes are ignored; checking stops at a newline.
    """
    _Scan(line).run()


def validate_input(line: str) -> bool:
    """Return False for a blank line, True for one worth running.

    Raises ShellSyntaxError when the operators are misplaced.
    """
    if is_blank(line):
        return False
    check_redirections(line)
    return True