"""Small combinator-style parser for assignments, returns and functions."""

from __future__ import annotations

import pprint
import sys
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, TypeVar, Union

_I64_MAX = 2**63 - 1
_MULTISPACE = " \t\r\n"

EXAMPLE_SOURCE = """
def add():
    return 1 + 2 * 3

x = 42
"""

T = TypeVar("T")


class ParseError(Exception):
    """Raised when a parser does not match at a position."""

    def __init__(self, position: int, expected: str) -> None:
        super().__init__(f"expected {expected} at offset {position}")
        self.position = position
        self.expected = expected


class BinaryOperator(Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


@dataclass(frozen=True)
class Number:
    value: int


@dataclass(frozen=True)
class Ident:
    name: str


@dataclass(frozen=True)
class BinOpExpr:
    left: Expr
    op: BinaryOperator
    right: Expr


Expr = Union[Number, Ident, BinOpExpr]


@dataclass(frozen=True)
class Assign:
    name: str
    value: Expr


@dataclass(frozen=True)
class Return:
    value: Expr


@dataclass(frozen=True)
class FunctionDef:
    name: str
    params: list[str] = field(default_factory=list)
    body: list[Stmt] = field(default_factory=list)


Stmt = Union[Assign, Return, FunctionDef]


class _Parser:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def _peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def _ws0(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos] in _MULTISPACE:
            self.pos += 1

    def _ws1(self) -> None:
        start = self.pos
        self._ws0()
        if self.pos == start:
            raise ParseError(start, "whitespace")

    def _tag(self, word: str) -> None:
        if not self.text.startswith(word, self.pos):
            raise ParseError(self.pos, repr(word))
        self.pos += len(word)

    def _take_while1(self, accept: Callable[[str], bool], expected: str) -> str:
        start = self.pos
        while self.pos < len(self.text) and accept(self.text[self.pos]):
            self.pos += 1
        if self.pos == start:
            raise ParseError(start, expected)
        return self.text[start:self.pos]

    def _alt(self, *parsers: Callable[[], T]) -> T:
        start = self.pos
        error: ParseError | None = None
        for parser in parsers:
            try:
                return parser()
            except ParseError as exc:
                self.pos = start
                error = exc
        assert error is not None
        raise error

    def _many0(self, parser: Callable[[], T]) -> list[T]:
        items: list[T] = []
        while True:
            start = self.pos
            try:
                items.append(parser())
            except ParseError:
                self.pos = start
                return items

    def ident(self) -> str:
        return self._take_while1(
            lambda c: (c.isascii() and c.isalpha()) or c == "_", "identifier"
        )

    def number(self) -> Number:
        start = self.pos
        digits = self._take_while1(lambda c: "0" <= c <= "9", "digits")
        value = int(digits)
        if value > _I64_MAX:
            self.pos = start
            raise ParseError(start, "64-bit integer")
        return Number(value)

    def _parenthesised(self) -> Expr:
        self._tag("(")
        inner = self.expr()
        self._tag(")")
        return inner

    def factor(self) -> Expr:
        return self._alt(self.number, lambda: Ident(self.ident()), self._parenthesised)

    def _left_assoc(self, operand: Callable[[], Expr], ops: str) -> Expr:
        acc = operand()
        while True:
            before = self.pos
            self._ws0()
            symbol = self._peek()
            if symbol and symbol in ops:
                self.pos += 1
                acc = BinOpExpr(acc, BinaryOperator(symbol), operand())
                continue
            self.pos = before
            return acc

    def term(self) -> Expr:
        return self._left_assoc(self.factor, "*/")

    def expr(self) -> Expr:
        return self._left_assoc(self.term, "+-")

    def return_stmt(self) -> Return:
        self._tag("return")
        self._ws1()
        return Return(self.expr())

    def assign(self) -> Assign:
        name = self.ident()
        self._ws0()
        self._tag("=")
        self._ws0()
        return Assign(name, self.expr())

    def stmt(self) -> Stmt:
        return self._alt(self.return_stmt, self.assign)

    def function(self) -> FunctionDef:
        self._tag("def")
        self._ws1()
        name = self.ident()
        self._tag("(")
        self._tag(")")
        self._tag(":")
        self._ws0()
        return FunctionDef(name, [], self._many0(self.stmt))

    def program(self) -> list[Stmt]:
        return self._many0(lambda: self._alt(self.function, self.stmt))


def parse_program(text: str) -> tuple[list[Stmt], str]:
    """Parse as many statements as match; return them with the unparsed rest."""
    parser = _Parser(text)
    statements = parser.program()
    return statements, text[parser.pos:]


def main(argv: list[str] | None = None) -> int:
    """Parse a file named in ``argv`` (or a built-in example) and print the tree."""
    args = sys.argv[1:] if argv is None else list(argv)
    source = Path(args[0]).read_text(encoding="utf-8") if args else EXAMPLE_SOURCE
    statements, _rest = parse_program(source)
    print(f"Parsed AST: {pprint.pformat(statements)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())