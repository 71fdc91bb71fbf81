"""Arena-based mid-level IR with a symbol table and an edit log."""

from __future__ import annotations

import copy
import time
from dataclasses import dataclass, field
from typing import Optional, Union

from .mir_events import EditEvent

NodeId = int
SymbolId = int


def _now_ts() -> int:
    return int(time.time())


@dataclass
class Provenance:
    """Where a node came from: file, byte span, front-end id and a printing hint."""

    file: Optional[str] = None
    span: Optional[tuple[int, int]] = None
    frontend_id: Optional[int] = None
    pretty_hint: Optional[str] = None


@dataclass
class Meta:
    prov: Optional[Provenance] = None
    created_at: int = field(default_factory=_now_ts)

    @classmethod
    def now(cls) -> Meta:
        return cls()


# Modules and declarations


@dataclass
class ModuleNode:
    name: Optional[SymbolId] = None
    body: list[NodeId] = field(default_factory=list)


@dataclass
class FunctionDef:
    name: SymbolId
    params: list[SymbolId]
    body: NodeId
    decorators: list[NodeId] = field(default_factory=list)


@dataclass
class ClassDef:
    name: SymbolId
    bases: list[NodeId]
    body: NodeId
    decorators: list[NodeId] = field(default_factory=list)


# Statements


@dataclass
class ExprStmt:
    expr: NodeId


@dataclass
class Block:
    stmts: list[NodeId] = field(default_factory=list)


@dataclass
class Assign:
    targets: list[NodeId]
    value: NodeId


@dataclass
class AugAssign:
    target: NodeId
    op: str
    value: NodeId


@dataclass
class Return:
    value: Optional[NodeId] = None


@dataclass
class If:
    test: NodeId
    body: NodeId
    orelse: Optional[NodeId] = None


@dataclass
class For:
    target: NodeId
    iter: NodeId
    body: NodeId
    orelse: Optional[NodeId] = None


@dataclass
class While:
    test: NodeId
    body: NodeId
    orelse: Optional[NodeId] = None


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
    value: Optional[NodeId] = None


@dataclass
class With:
    items: list[tuple[NodeId, Optional[NodeId]]]
    body: NodeId


@dataclass
class Try:
    body: NodeId
    handlers: list[tuple[Optional[NodeId], NodeId]]
    orelse: NodeId
    finalbody: NodeId


# Expressions


@dataclass
class Identifier:
    symbol: SymbolId


@dataclass
class Literal:
    """A constant: an int, float, str, bool or None."""

    value: Union[int, float, str, bool, None]


@dataclass
class BinaryOp:
    op: str
    lhs: NodeId
    rhs: NodeId


@dataclass
class UnaryOp:
    op: str
    expr: NodeId


@dataclass
class Call:
    func: NodeId
    args: list[NodeId] = field(default_factory=list)


@dataclass
class Lambda:
    params: list[SymbolId]
    body: NodeId


@dataclass
class Attr:
    object: NodeId
    attr: SymbolId


@dataclass
class Index:
    object: NodeId
    index: NodeId


@dataclass
class ListLiteral:
    elts: list[NodeId] = field(default_factory=list)


@dataclass
class DictLiteral:
    entries: list[tuple[NodeId, NodeId]] = field(default_factory=list)


@dataclass
class TupleLiteral:
    elts: list[NodeId] = field(default_factory=list)


# Quoting, splicing and evaluation


@dataclass
class QuoteSyntax:
    node: NodeId


@dataclass
class QuoteValue:
    node: NodeId


@dataclass
class SpliceSyntax:
    node: NodeId


@dataclass
class SpliceValue:
    node: NodeId


@dataclass
class Eval:
    node: NodeId


# Macros


@dataclass
class MacroDef:
    name: SymbolId
    args: list[SymbolId]
    body: NodeId


@dataclass
class MacroCall:
    name: SymbolId
    args: list[NodeId] = field(default_factory=list)


@dataclass
class Unknown:
    """Placeholder for deleted or not yet understood nodes."""


NodeKind = Union[
    ModuleNode,
    FunctionDef,
    ClassDef,
    ExprStmt,
    Block,
    Assign,
    AugAssign,
    Return,
    If,
    For,
    While,
    Pass,
    Break,
    Continue,
    Raise,
    With,
    Try,
    Identifier,
    Literal,
    BinaryOp,
    UnaryOp,
    Call,
    Lambda,
    Attr,
    Index,
    ListLiteral,
    DictLiteral,
    TupleLiteral,
    QuoteSyntax,
    QuoteValue,
    SpliceSyntax,
    SpliceValue,
    Eval,
    MacroDef,
    MacroCall,
    Unknown,
]


@dataclass
class Node:
    id: NodeId
    kind: NodeKind
    meta: Meta = field(default_factory=Meta)


class NodeNotFoundError(LookupError):
    """Raised when a node id names no node in the arena."""

    def __init__(self, node_id: NodeId) -> None:
        super().__init__(f"No such node {node_id}")
        self.node_id = node_id


@dataclass
class SymbolTable:
    """Interns strings to stable integer ids."""

    symbols: list[str] = field(default_factory=list)
    map: dict[str, SymbolId] = field(default_factory=dict)

    def intern(self, name: str) -> SymbolId:
        existing = self.map.get(name)
        if existing is not None:
            return existing
        symbol_id = len(self.symbols)
        self.symbols.append(name)
        self.map[name] = symbol_id
        return symbol_id

    def lookup(self, symbol_id: SymbolId) -> Optional[str]:
        if 0 <= symbol_id < len(self.symbols):
            return self.symbols[symbol_id]
        return None


@dataclass
class Mir:
    """Node arena; ids are list positions and never change."""

    nodes: list[Node] = field(default_factory=list)
    symbol_table: SymbolTable = field(default_factory=SymbolTable)
    edit_log: list[EditEvent] = field(default_factory=list)

    def alloc(self, kind: NodeKind, meta: Optional[Meta] = None) -> NodeId:
        """Append a node without logging an edit and return its id."""
        node_id = len(self.nodes)
        self.nodes.append(Node(node_id, kind, meta if meta is not None else Meta()))
        return node_id

    def get(self, node_id: NodeId) -> Optional[Node]:
        if 0 <= node_id < len(self.nodes):
            return self.nodes[node_id]
        return None

    def insert_node(
        self,
        parent: Optional[NodeId],
        kind: NodeKind,
        meta: Optional[Meta] = None,
        position: Optional[int] = None,
        actor: Optional[str] = None,
    ) -> NodeId:
        """Allocate a node, attach it to a module or block parent, and log it.

        Parents of other kinds are left alone; the caller attaches the node.
        """
        node_id = self.alloc(kind, meta)
        parent_node = self.get(parent) if parent is not None else None
        if parent_node is not None:
            children: Optional[list[NodeId]] = None
            if isinstance(parent_node.kind, ModuleNode):
                children = parent_node.kind.body
            elif isinstance(parent_node.kind, Block):
                children = parent_node.kind.stmts
            if children is not None:
                pos = len(children) if position is None else position
                if not 0 <= pos <= len(children):
                    raise IndexError(
                        f"insertion index {pos} out of range for {len(children)} children"
                    )
                children.insert(pos, node_id)
        self.edit_log.append(EditEvent.insert(node_id, parent, position, actor))
        return node_id

    def replace_node(
        self, node_id: NodeId, new_kind: NodeKind, actor: Optional[str] = None
    ) -> None:
        node = self.get(node_id)
        if node is None:
            raise NodeNotFoundError(node_id)
        old_kind = node.kind
        node.kind = new_kind
        self.edit_log.append(
            EditEvent.replace(node_id, old_kind, copy.deepcopy(new_kind), actor)
        )

    def delete_node(self, node_id: NodeId, actor: Optional[str] = None) -> None:
        """Mark a node Unknown; it stays in the arena so ids remain stable."""
        node = self.get(node_id)
        if node is None:
            raise NodeNotFoundError(node_id)
        old_kind = node.kind
        node.kind = Unknown()
        self.edit_log.append(EditEvent.delete(node_id, old_kind, actor))