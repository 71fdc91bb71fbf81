"""Naive tree built from a flat token stream, one statement per line."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from .lexer import Token, TokenKind

_ATOM_KINDS = frozenset({TokenKind.NAME, TokenKind.NUMBER, TokenKind.STRING})


@dataclass(frozen=True)
class Atom:
    kind: TokenKind
    text: str


@dataclass
class Expression:
    atoms: list[Atom] = field(default_factory=list)


@dataclass
class Statement:
    expr: Expression


@dataclass
class File:
    statements: list[Statement] = field(default_factory=list)


def parse_tokens(tokens: Iterable[Token]) -> File:
    """Group name, number and string tokens into one statement per line.

    Symbols and indentation are dropped; atoms not followed by a newline are
    discarded.
    """
    statements: list[Statement] = []
    current: list[Atom] = []
    for token in tokens:
        if token.kind in _ATOM_KINDS:
            current.append(Atom(token.kind, token.text))
        elif token.kind is TokenKind.NEWLINE and current:
            statements.append(Statement(Expression(current)))
            current = []
    return File(statements)