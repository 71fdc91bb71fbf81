"""Indentation-aware tokenizer that splits lines on whitespace."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

_SYMBOLS = frozenset(
    {"+", "-", "*", "**", "/", "//", "%", "==", "!=", "<=", ">=", "<", ">", "="}
)


class TokenKind(Enum):
    INDENT = "indent"
    DEDENT = "dedent"
    NEWLINE = "newline"
    NAME = "name"
    NUMBER = "number"
    STRING = "string"
    SYMBOL = "symbol"
    OTHER = "other"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str = ""


def _split_lines(source: str) -> list[str]:
    if not source:
        return []
    lines = source.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _indent_width(line: str) -> int:
    width = 0
    for char in line:
        if char == " ":
            width += 1
        elif char == "\t":
            width += 4
        else:
            break
    return width


def _classify(part: str) -> Token:
    if part in _SYMBOLS:
        return Token(TokenKind.SYMBOL, part)
    if part.isnumeric():
        return Token(TokenKind.NUMBER, part)
    if part.startswith(('"', "'")):
        return Token(TokenKind.STRING, part)
    return Token(TokenKind.NAME, part)


class Lexer:
    """Iterator over the tokens of a source text."""

    def __init__(self, source: str) -> None:
        self._lines = deque(_split_lines(source))
        self._indent_stack = [0]
        self._buffer: deque[Token] = deque()

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        while not self._buffer:
            if not self._lines:
                if len(self._indent_stack) > 1:
                    self._indent_stack.pop()
                    return Token(TokenKind.DEDENT)
                raise StopIteration
            self._process_line(self._lines.popleft())
        return self._buffer.popleft()

    def _process_line(self, line: str) -> None:
        indent = _indent_width(line)
        if indent > self._indent_stack[-1]:
            self._indent_stack.append(indent)
            self._buffer.append(Token(TokenKind.INDENT))
        else:
            while indent < self._indent_stack[-1]:
                self._indent_stack.pop()
                self._buffer.append(Token(TokenKind.DEDENT))

        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            return

        self._buffer.extend(_classify(part) for part in stripped.split())
        self._buffer.append(Token(TokenKind.NEWLINE))


def tokenize(source: str) -> list[Token]:
    """Return every token of ``source``."""
    return list(Lexer(source))