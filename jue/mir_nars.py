"""Extraction of simple belief statements (function, parameter, call) from MIR."""

from __future__ import annotations

from dataclasses import dataclass

from .mir import Block, Call, FunctionDef, Identifier, If, Mir, NodeId

_FACT_CONFIDENCE = 0.9
_CALL_CONFIDENCE = 0.7
_ARG_DECAY = 0.8


@dataclass
class NarsStatement:
    term: str
    confidence: float


def mir_to_nars_terms(mir: Mir) -> list[NarsStatement]:
    """Describe every function in ``mir``: its existence, its parameters and its calls."""
    out: list[NarsStatement] = []
    for node in mir.nodes:
        if not isinstance(node.kind, FunctionDef):
            continue
        kind = node.kind
        fname = mir.symbol_table.lookup(kind.name)
        if fname is None:
            fname = "<anon>"
        out.append(NarsStatement(f"(function {fname})", _FACT_CONFIDENCE))
        for param in kind.params:
            pname = mir.symbol_table.lookup(param)
            if pname is not None:
                out.append(NarsStatement(f"(has_param {fname} {pname})", _FACT_CONFIDENCE))
        _collect_calls(mir, kind.body, out, _CALL_CONFIDENCE)
    return out


def _callee_name(mir: Mir, func_id: NodeId) -> str:
    func_node = mir.get(func_id)
    if func_node is None:
        return "<missing>"
    if isinstance(func_node.kind, Identifier):
        name = mir.symbol_table.lookup(func_node.kind.symbol)
        return "<unk>" if name is None else name
    return "<complex>"


def _collect_calls(
    mir: Mir, node_id: NodeId, out: list[NarsStatement], confidence: float
) -> None:
    node = mir.get(node_id)
    if node is None:
        return
    match node.kind:
        case Call(func=func, args=args):
            callee = _callee_name(mir, func)
            out.append(NarsStatement(f"(calls <node{node_id}> {callee})", confidence))
            for arg in args:
                _collect_calls(mir, arg, out, confidence * _ARG_DECAY)
        case Block(stmts=stmts):
            for stmt in stmts:
                _collect_calls(mir, stmt, out, confidence)
        case If(test=test, body=body, orelse=orelse):
            _collect_calls(mir, test, out, confidence)
            _collect_calls(mir, body, out, confidence)
            if orelse is not None:
                _collect_calls(mir, orelse, out, confidence)
        case _:
            pass