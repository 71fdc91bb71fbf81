"""Builds a small MIR by hand and dumps it."""

from __future__ import annotations

import sys
from typing import Optional

from .mir import (
    BinaryOp,
    Block,
    FunctionDef,
    Identifier,
    Literal,
    Meta,
    Mir,
    ModuleNode,
    Node,
    Return,
)
from .mir_pretty import _kind_debug, _meta_debug

_DEMO_MODULE_SYM = 1
_ADD_ONE_SYM = 2
_X_SYM = 3
_DECO_SYM = 4
_ACTOR = "demo"
_PLACEHOLDER_BODY = 2**64 - 1


def build_demo_mir() -> Mir:
    """Build a module holding ``add_one(x)`` that returns ``x + 1``."""
    mir = Mir()
    module_id = mir.insert_node(
        None, ModuleNode(name=_DEMO_MODULE_SYM, body=[]), Meta(), None, _ACTOR
    )
    deco_id = mir.insert_node(module_id, Identifier(_DECO_SYM), Meta(), None, _ACTOR)
    fn_id = mir.insert_node(
        module_id,
        FunctionDef(_ADD_ONE_SYM, [_X_SYM], _PLACEHOLDER_BODY, [deco_id]),
        Meta(),
        None,
        _ACTOR,
    )
    block_id = mir.insert_node(fn_id, Block([]), Meta(), None, _ACTOR)
    fn_node = mir.get(fn_id)
    if fn_node is not None and isinstance(fn_node.kind, FunctionDef):
        fn_node.kind.body = block_id

    one_id = mir.insert_node(block_id, Literal(1), Meta(), None, _ACTOR)
    x_id = mir.insert_node(block_id, Identifier(_X_SYM), Meta(), None, _ACTOR)
    sum_id = mir.insert_node(
        block_id, BinaryOp("Operator::Add", x_id, one_id), Meta(), None, _ACTOR
    )
    mir.insert_node(block_id, Return(sum_id), Meta(), None, _ACTOR)
    return mir


def _node_debug(node: Node) -> str:
    return (
        f"Node {{ id: {node.id}, kind: {_kind_debug(node.kind)}, "
        f"meta: {_meta_debug(node.meta)} }}"
    )


def dump_mir(mir: Mir) -> str:
    """Return one structured line per node, in arena order."""
    return "".join(_node_debug(node) + "\n" for node in mir.nodes)


def main(argv: Optional[list[str]] = None) -> int:
    """Build the demo MIR and print its dump."""
    print("=== MIR Dump ===")
    sys.stdout.write(dump_mir(build_demo_mir()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())