"""Readable text rendering of a MIR arena."""

from __future__ import annotations

import dataclasses
import math
import unicodedata
from decimal import Decimal
from typing import Any, Callable, Iterable, Optional

from .mir import (
    Assign,
    Block,
    Call,
    For,
    FunctionDef,
    Identifier,
    If,
    Literal,
    Meta,
    Mir,
    ModuleNode,
    NodeId,
    NodeKind,
    Provenance,
    Raise,
    Return,
    Try,
    While,
    With,
)

_STR_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\0": "\\0",
}
_HIDDEN_CATEGORIES = frozenset({"Cc", "Cf", "Zl", "Zp"})
_OPTIONAL_FIELDS = frozenset(
    {
        (ModuleNode, "name"),
        (Return, "value"),
        (If, "orelse"),
        (For, "orelse"),
        (While, "orelse"),
        (Raise, "value"),
    }
)


def _str_debug(text: str) -> str:
    parts = ['"']
    for char in text:
        if char in _STR_ESCAPES:
            parts.append(_STR_ESCAPES[char])
        elif unicodedata.category(char) in _HIDDEN_CATEGORIES:
            parts.append(f"\\u{{{ord(char):x}}}")
        else:
            parts.append(char)
    parts.append('"')
    return "".join(parts)


def _float_special(value: float) -> Optional[str]:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return None


def _float_display(value: float) -> str:
    special = _float_special(value)
    if special is not None:
        return special
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _float_debug(value: float) -> str:
    special = _float_special(value)
    if special is not None:
        return special
    text = repr(value)
    if "e" in text:
        mantissa, exponent = text.split("e")
        return f"{mantissa}e{int(exponent)}"
    return text


def _literal_debug(value: Any) -> str:
    if value is None:
        return "None"
    if isinstance(value, bool):
        return f"Bool({'true' if value else 'false'})"
    if isinstance(value, int):
        return f"Int({value})"
    if isinstance(value, float):
        return f"Float({_float_debug(value)})"
    return f"String({_str_debug(value)})"


def _option_debug(value: Any, render: Callable[[Any], str] = str) -> str:
    return "None" if value is None else f"Some({render(value)})"


def _seq_debug(items: Iterable[str]) -> str:
    return "[" + ", ".join(items) + "]"


def _plain_debug(value: Any) -> str:
    if isinstance(value, str):
        return _str_debug(value)
    if isinstance(value, list):
        return _seq_debug(_plain_debug(item) for item in value)
    if isinstance(value, tuple):
        return "(" + ", ".join(_plain_debug(item) for item in value) + ")"
    return str(value)


def _field_debug(kind: NodeKind, name: str, value: Any) -> str:
    if (type(kind), name) in _OPTIONAL_FIELDS:
        return _option_debug(value)
    if isinstance(kind, With) and name == "items":
        return _seq_debug(f"({ctx}, {_option_debug(alias)})" for ctx, alias in value)
    if isinstance(kind, Try) and name == "handlers":
        return _seq_debug(f"({_option_debug(exc)}, {body})" for exc, body in value)
    return _plain_debug(value)


def _kind_debug(kind: NodeKind) -> str:
    """Render a node kind in the same structured form as the debug dump."""
    if isinstance(kind, Literal):
        return f"Literal({_literal_debug(kind.value)})"
    if isinstance(kind, Identifier):
        return f"Identifier({kind.symbol})"
    name = "Module" if isinstance(kind, ModuleNode) else type(kind).__name__
    fields = dataclasses.fields(kind)
    if not fields:
        return name
    body = ", ".join(
        f"{f.name}: {_field_debug(kind, f.name, getattr(kind, f.name))}" for f in fields
    )
    return f"{name} {{ {body} }}"


def _provenance_debug(prov: Provenance) -> str:
    span = _option_debug(prov.span, lambda s: f"({s[0]}, {s[1]})")
    return (
        f"Provenance {{ file: {_option_debug(prov.file, _str_debug)}, span: {span}, "
        f"frontend_id: {_option_debug(prov.frontend_id)}, "
        f"pretty_hint: {_option_debug(prov.pretty_hint, _str_debug)} }}"
    )


def _meta_debug(meta: Meta) -> str:
    prov = _option_debug(meta.prov, _provenance_debug)
    return f"Meta {{ prov: {prov}, created_at: {meta.created_at} }}"


def pretty_print_mir(mir: Mir) -> str:
    """Render the first module of ``mir`` as indented source-like text."""
    module = next(
        (node.kind for node in mir.nodes if isinstance(node.kind, ModuleNode)), None
    )
    if module is None:
        return ""
    parts = [f"# module {_option_debug(module.name)}\n"]
    parts.extend(_pretty_node(mir, stmt_id, 0) for stmt_id in module.body)
    return "".join(parts)


def _pretty_node(mir: Mir, node_id: NodeId, indent: int) -> str:
    node = mir.get(node_id)
    if node is None:
        return ""
    padding = "  " * indent
    kind = node.kind
    match kind:
        case Block(stmts=stmts):
            return "".join(_pretty_node(mir, stmt, indent) for stmt in stmts)
        case Assign(targets=targets, value=value):
            names = _present(_node_to_string(mir, target) for target in targets)
            rendered = _node_to_string(mir, value)
            if rendered is None:
                rendered = "<expr>"
            return f"{padding}{', '.join(names)} = {rendered}\n"
        case FunctionDef(name=name, params=params, body=body):
            fname = mir.symbol_table.lookup(name)
            if fname is None:
                fname = "<anon>"
            param_names = _present(mir.symbol_table.lookup(p) for p in params)
            header = f"{padding}def {fname}({', '.join(param_names)}) :\n"
            return header + _pretty_node(mir, body, indent + 1)
        case Call(func=func, args=args):
            callee = _node_to_string(mir, func)
            if callee is None:
                callee = "<call>"
            rendered_args = _present(_node_to_string(mir, arg) for arg in args)
            return f"{padding}{callee}({', '.join(rendered_args)})\n"
        case Literal(value=value):
            return f"{padding}{_literal_debug(value)}\n"
        case Identifier(symbol=symbol):
            text = mir.symbol_table.lookup(symbol)
            return f"{padding}{'<id>' if text is None else text}\n"
        case _:
            return f"{padding}/* {_kind_debug(kind)} */\n"


def _present(items: Iterable[Optional[str]]) -> list[str]:
    return [item for item in items if item is not None]


def _node_to_string(mir: Mir, node_id: NodeId) -> Optional[str]:
    node = mir.get(node_id)
    if node is None:
        return None
    match node.kind:
        case Identifier(symbol=symbol):
            return mir.symbol_table.lookup(symbol)
        case Literal(value=value):
            if value is None:
                return "None"
            if isinstance(value, bool):
                return "true" if value else "false"
            if isinstance(value, int):
                return str(value)
            if isinstance(value, float):
                return _float_display(value)
            return _str_debug(value)
        case _:
            return None