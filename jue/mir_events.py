"""Edit events recorded whenever the MIR arena changes."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from .mir import NodeKind
else:
    NodeKind = Any


def _now_ts() -> int:
    return int(time.time())


class EditOp(Enum):
    INSERT = "insert"
    REPLACE = "replace"
    DELETE = "delete"


@dataclass
class EditEvent:
    """One change to the arena, with who made it and when (seconds since the epoch)."""

    op: EditOp
    node_id: int
    parent: Optional[int] = None
    position: Optional[int] = None
    old: Optional[NodeKind] = None
    new: Optional[NodeKind] = None
    actor: Optional[str] = None
    ts: int = field(default_factory=_now_ts)

    @classmethod
    def insert(
        cls,
        node_id: int,
        parent: Optional[int] = None,
        position: Optional[int] = None,
        actor: Optional[str] = None,
    ) -> EditEvent:
        return cls(EditOp.INSERT, node_id, parent=parent, position=position, actor=actor)

    @classmethod
    def replace(
        cls, node_id: int, old: NodeKind, new: NodeKind, actor: Optional[str] = None
    ) -> EditEvent:
        return cls(EditOp.REPLACE, node_id, old=old, new=new, actor=actor)

    @classmethod
    def delete(cls, node_id: int, old: NodeKind, actor: Optional[str] = None) -> EditEvent:
        return cls(EditOp.DELETE, node_id, old=old, actor=actor)