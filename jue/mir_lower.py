"""Lowering of the front-end syntax tree into the MIR arena."""

from __future__ import annotations

import re
from typing import Optional, Union

from . import ast as syntax
from .mir import (
    Assign,
    BinaryOp,
    Block,
    Call,
    FunctionDef,
    Identifier,
    Lambda,
    Literal,
    Meta,
    Mir,
    ModuleNode,
    NodeId,
    UnaryOp,
    Unknown,
)

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1
_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)",
    re.IGNORECASE,
)


def _number_value(text: str) -> Union[int, float, str]:
    """Read a numeric literal as a 64-bit int, else a float, else keep the text."""
    if _INT_RE.fullmatch(text):
        value = int(text)
        if _I64_MIN <= value <= _I64_MAX:
            return value
    if _FLOAT_RE.fullmatch(text):
        return float(text)
    return text


def lower_frontend_module(front: syntax.Module) -> Mir:
    """Lower a front-end module into a new arena whose node 0 is the module."""
    mir = Mir()
    module_id = mir.alloc(ModuleNode(), Meta.now())
    for stmt in front.body:
        _lower_stmt_into(mir, module_id, stmt)
    return mir


def _lower_stmt_into(mir: Mir, parent: NodeId, stmt: syntax.Stmt) -> Optional[NodeId]:
    match stmt:
        case syntax.ExprStmt(expr=expr):
            expr_id = _lower_expr(mir, expr)
            mir.insert_node(parent, Block([expr_id]), Meta.now())
            return None
        case syntax.Assign(targets=targets, value=value):
            target_ids = [_lower_expr(mir, target) for target in targets]
            value_id = _lower_expr(mir, value)
            return mir.insert_node(parent, Assign(target_ids, value_id), Meta.now())
        case syntax.FuncDef(name=name, params=params, body=body, decorators=decorators):
            func_name = mir.symbol_table.intern(name)
            param_ids = [mir.symbol_table.intern(param.name) for param in params]
            stmt_ids = [
                node_id
                for inner in body
                if (node_id := _lower_stmt_into(mir, parent, inner)) is not None
            ]
            block_id = mir.alloc(Block(stmt_ids), Meta.now())
            deco_ids = [
                mir.alloc(Identifier(mir.symbol_table.intern(decorator)), Meta.now())
                for decorator in decorators
            ]
            return mir.insert_node(
                parent,
                FunctionDef(func_name, param_ids, block_id, deco_ids),
                Meta.now(),
            )
        case _:
            return None


def _lower_expr(mir: Mir, expr: syntax.Expr) -> NodeId:
    match expr:
        case syntax.Name(id=name):
            return mir.alloc(Identifier(mir.symbol_table.intern(name)), Meta.now())
        case syntax.Number(text=text):
            return mir.alloc(Literal(_number_value(text)), Meta.now())
        case syntax.Str(text=text):
            return mir.alloc(Literal(text), Meta.now())
        case syntax.Bool(value=value):
            return mir.alloc(Literal(value), Meta.now())
        case syntax.NoneLit():
            return mir.alloc(Literal(None), Meta.now())
        case syntax.BinOp(left=left, op=op, right=right):
            lhs = _lower_expr(mir, left)
            rhs = _lower_expr(mir, right)
            return mir.alloc(BinaryOp(op, lhs, rhs), Meta.now())
        case syntax.UnaryOp(op=op, operand=operand):
            inner = _lower_expr(mir, operand)
            return mir.alloc(UnaryOp(op, inner), Meta.now())
        case syntax.Call(func=func, args=args):
            func_id = _lower_expr(mir, func)
            arg_ids = [_lower_expr(mir, arg) for arg in args]
            return mir.alloc(Call(func_id, arg_ids), Meta.now())
        case syntax.Lambda(params=params, body=body):
            param_ids = [mir.symbol_table.intern(param) for param in params]
            body_id = _lower_expr(mir, body)
            return mir.alloc(Lambda(param_ids, body_id), Meta.now())
        case _:
            return mir.alloc(Unknown(), Meta.now())