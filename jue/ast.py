"""Syntax tree produced by the front end."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union


class ParamKind(Enum):
    """How a parameter binds its arguments."""

    POSITIONAL = "positional"
    STAR = "star"
    DOUBLE_STAR = "double_star"


@dataclass
class Name:
    id: str


@dataclass
class Number:
    text: str


@dataclass
class Str:
    text: str


@dataclass
class Bool:
    value: bool


@dataclass
class NoneLit:
    pass


@dataclass
class BinOp:
    left: Expr
    op: str
    right: Expr


@dataclass
class UnaryOp:
    op: str
    operand: Expr


@dataclass
class Call:
    func: Expr
    args: list[Expr] = field(default_factory=list)


@dataclass
class Lambda:
    params: list[str]
    body: Expr


Expr = Union[Name, Number, Str, Bool, NoneLit, BinOp, UnaryOp, Call, Lambda]


@dataclass
class Param:
    name: str
    default: Optional[Expr] = None
    kind: ParamKind = ParamKind.POSITIONAL


@dataclass
class ExprStmt:
    expr: Expr


@dataclass
class Assign:
    targets: list[Expr]
    value: Expr


@dataclass
class AugAssign:
    target: Expr
    op: str
    value: Expr


@dataclass
class FuncDef:
    name: str
    params: list[Param] = field(default_factory=list)
    body: list[Stmt] = field(default_factory=list)
    decorators: list[str] = field(default_factory=list)


@dataclass
class ClassDef:
    name: str
    body: list[Stmt] = field(default_factory=list)
    decorators: list[str] = field(default_factory=list)


@dataclass
class If:
    test: Expr
    body: list[Stmt] = field(default_factory=list)
    orelse: list[Stmt] = field(default_factory=list)


@dataclass
class For:
    target: Expr
    iter: Expr
    body: list[Stmt] = field(default_factory=list)
    orelse: list[Stmt] = field(default_factory=list)


@dataclass
class While:
    test: Expr
    body: list[Stmt] = field(default_factory=list)
    orelse: list[Stmt] = field(default_factory=list)


@dataclass
class Return:
    value: Optional[Expr] = None


@dataclass
class Pass:
    pass


@dataclass
class Break:
    pass


@dataclass
class Continue:
    pass


@dataclass
class Raise:
    exc: Optional[Expr] = None


@dataclass
class With:
    """A ``with`` block; each item is a context expression and an optional alias."""

    items: list[tuple[Expr, Optional[Expr]]]
    body: list[Stmt] = field(default_factory=list)


@dataclass
class Try:
    """A ``try`` block; each handler is an optional exception type and its body."""

    body: list[Stmt] = field(default_factory=list)
    handlers: list[tuple[Optional[Expr], list[Stmt]]] = field(default_factory=list)
    orelse: list[Stmt] = field(default_factory=list)
    finalbody: list[Stmt] = field(default_factory=list)


Stmt = Union[
    ExprStmt,
    Assign,
    AugAssign,
    FuncDef,
    ClassDef,
    If,
    For,
    While,
    Return,
    Pass,
    Break,
    Continue,
    Raise,
    With,
    Try,
]


@dataclass
class Module:
    body: list[Stmt] = field(default_factory=list)