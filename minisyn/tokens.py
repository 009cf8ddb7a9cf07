"""Splitting a command line into words and operator tokens."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, Iterator

_BLANKS = " \t"
_OPERATORS = "|<>"
_QUOTES = "'\""


class TokenType(Enum):
    """Kinds of token and command-table entry."""

    WORD = auto()
    PIPE = auto()
    INPUT = auto()
    OUTPUT = auto()
    APPEND = auto()
    HEREDOC = auto()
    COMMAND = auto()
    ARGS = auto()
    REDIR = auto()
    BREAK_NODE = auto()
    EMPTY_EXPANSION = auto()
    EMPTY = auto()


_OPERATOR_TYPES = {
    "|": TokenType.PIPE,
    "<": TokenType.INPUT,
    ">": TokenType.OUTPUT,
    "<<": TokenType.HEREDOC,
    ">>": TokenType.APPEND,
}


@dataclass(frozen=True)
class Token:
    """One piece of a command line with its kind."""

    text: str
    type: TokenType = TokenType.WORD


def is_operator_char(char: str) -> bool:
    """True for the pipe and redirection characters."""
    return len(char) == 1 and char in _OPERATORS


def classify(text: str) -> TokenType:
    """Give the token type of a piece of text."""
    return _OPERATOR_TYPES.get(text, TokenType.WORD)


def _word_end(line: str, start: int) -> int:
    """Index just past the word beginning at ``start``.

    Blanks and operator characters inside quotes belong to the word.
    """
    quote = None
    for index, char in enumerate(line[start:], start):
        if quote:
            if char == quote:
                quote = None
        elif char in _QUOTES:
            quote = char
        elif char in _BLANKS or char in _OPERATORS:
            return index
    return len(line)


def _scan(line: str) -> Iterator[str]:
    pos = 0
    while pos < len(line):
        char = line[pos]
        if char in _BLANKS:
            pos += 1
        elif char in _OPERATORS:
            doubled = char in "<>" and line[pos + 1:pos + 2] == char
            piece = char * 2 if doubled else char
            yield piece
            pos += len(piece)
        else:
            end = _word_end(line, pos)
            yield line[pos:end]
            pos = end


def tokenize(line: str) -> list[Token]:
    """Split ``line`` into typed tokens.

    Words are separated by spaces and tabs; ``|``, ``<``, ``>``, ``<<``
    and ``>>`` stand as tokens of their own. Quotes are kept in words.
    """
    return [Token(piece, classify(piece)) for piece in _scan(line)]


def quotes_balanced(line: str) -> bool:
    """True when every single or double quote in ``line`` is closed."""
    chars = iter(line)
    for char in chars:
        if char in _QUOTES:
            if char not in chars:
                return False
    return True


def last_word(tokens: Iterable[Token]) -> str | None:
    """Text of the last WORD token, or None if there is none."""
    for token in reversed(list(tokens)):
        if token.type is TokenType.WORD:
            return token.text
    return None