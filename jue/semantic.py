"""Name-resolution checks over a front-end syntax tree."""

from __future__ import annotations

from dataclasses import dataclass, field

from .ast import (
    Assign,
    AugAssign,
    BinOp,
    Bool,
    Break,
    Call,
    ClassDef,
    Continue,
    Expr,
    ExprStmt,
    For,
    FuncDef,
    If,
    Lambda,
    Module,
    Name,
    NoneLit,
    Number,
    Pass,
    Raise,
    Return,
    Stmt,
    Str,
    Try,
    UnaryOp,
    While,
    With,
)


class SemanticError(Exception):
    """Base class for errors found by the semantic analyzer."""


class UndefinedFunctionError(SemanticError):
    """A name was used before anything defined it."""

    def __init__(self, name: str) -> None:
        super().__init__(f"undefined name: {name}")
        self.name = name


class InvalidArgumentsError(SemanticError):
    """A call was made with arguments that do not fit."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


@dataclass
class _Environment:
    variables: set[str] = field(default_factory=set)
    functions: set[str] = field(default_factory=set)
    classes: set[str] = field(default_factory=set)

    def is_defined(self, name: str) -> bool:
        return name in self.variables or name in self.functions or name in self.classes


class SemanticAnalyzer:
    """Walks a module and checks that every name it reads is defined."""

    @staticmethod
    def analyze_module(module: Module) -> None:
        """Raise a :class:`SemanticError` at the first problem found in ``module``."""
        env = _Environment()
        for stmt in module.body:
            _analyze_stmt(stmt, env)


def _analyze_body(stmts: list[Stmt], env: _Environment) -> None:
    for stmt in stmts:
        _analyze_stmt(stmt, env)


def _analyze_stmt(stmt: Stmt, env: _Environment) -> None:
    match stmt:
        case ExprStmt(expr=expr):
            _analyze_expr(expr, env)
        case Assign(targets=targets, value=value):
            for target in targets:
                _analyze_expr(target, env)
            _analyze_expr(value, env)
        case FuncDef(name=name, body=body):
            env.functions.add(name)
            _analyze_body(body, env)
        case ClassDef(name=name, body=body):
            env.classes.add(name)
            _analyze_body(body, env)
        case Return(value=value):
            if value is not None:
                _analyze_expr(value, env)
        case If(test=test, body=body, orelse=orelse) | While(
            test=test, body=body, orelse=orelse
        ):
            _analyze_expr(test, env)
            _analyze_body(body, env)
            _analyze_body(orelse, env)
        case For(target=target, iter=iterable, body=body, orelse=orelse):
            _analyze_expr(target, env)
            _analyze_expr(iterable, env)
            _analyze_body(body, env)
            _analyze_body(orelse, env)
        case With(items=items, body=body):
            for context, _alias in items:
                _analyze_expr(context, env)
            _analyze_body(body, env)
        case Try(body=body, handlers=handlers, orelse=orelse, finalbody=finalbody):
            _analyze_body(body, env)
            for _exc, handler_body in handlers:
                _analyze_body(handler_body, env)
            _analyze_body(orelse, env)
            _analyze_body(finalbody, env)
        case Pass() | Break() | Continue():
            pass
        case Raise(exc=exc):
            if exc is not None:
                _analyze_expr(exc, env)
        case AugAssign(target=target, value=value):
            _analyze_expr(target, env)
            _analyze_expr(value, env)
        case _:
            raise TypeError(f"not a statement: {stmt!r}")


def _analyze_expr(expr: Expr, env: _Environment) -> None:
    match expr:
        case Name(id=name):
            if not env.is_defined(name):
                raise UndefinedFunctionError(name)
        case Call(func=func, args=args):
            _analyze_expr(func, env)
            for arg in args:
                _analyze_expr(arg, env)
        case BinOp(left=left, right=right):
            _analyze_expr(left, env)
            _analyze_expr(right, env)
        case UnaryOp(operand=operand):
            _analyze_expr(operand, env)
        case Lambda(params=params, body=body):
            env.variables.update(params)
            _analyze_expr(body, env)
        case Number() | Str() | Bool() | NoneLit():
            pass
        case _:
            raise TypeError(f"not an expression: {expr!r}")