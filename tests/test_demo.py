from jue import mir as ir
from jue.demo import build_demo_mir, dump_mir, main


def _find(mir, kind_type):
    return [node for node in mir.nodes if isinstance(node.kind, kind_type)]


def test_module_holds_decorator_and_function():
    mir = build_demo_mir()
    module = mir.nodes[0].kind
    assert isinstance(module, ir.ModuleNode)
    (func,) = _find(mir, ir.FunctionDef)
    assert func.id in module.body
    deco = mir.get(func.kind.decorators[0])
    assert deco.id in module.body
    assert isinstance(deco.kind, ir.Identifier)


def test_function_body_points_at_block():
    mir = build_demo_mir()
    (func,) = _find(mir, ir.FunctionDef)
    block = mir.get(func.kind.body)
    assert isinstance(block.kind, ir.Block)
    assert block.kind.stmts == [n.id for n in mir.nodes if n.id > block.id]


def test_return_adds_one_to_parameter():
    mir = build_demo_mir()
    (ret,) = _find(mir, ir.Return)
    binop = mir.get(ret.kind.value).kind
    assert binop.op == "Operator::Add"
    assert mir.get(binop.rhs).kind.value == 1
    (func,) = _find(mir, ir.FunctionDef)
    assert mir.get(binop.lhs).kind == ir.Identifier(func.kind.params[0])


def test_every_node_was_logged_by_demo_actor():
    mir = build_demo_mir()
    assert [event.node_id for event in mir.edit_log] == [n.id for n in mir.nodes]
    assert {event.actor for event in mir.edit_log} == {"demo"}
    assert mir.symbol_table.symbols == []


def test_dump_has_one_line_per_node():
    mir = build_demo_mir()
    lines = dump_mir(mir).splitlines()
    assert len(lines) == len(mir.nodes)
    for node, line in zip(mir.nodes, lines):
        assert line.startswith(f"Node {{ id: {node.id}, kind: ")
        assert line.endswith(f"created_at: {node.meta.created_at} }} }}")
    assert "Module { name: Some(1)" in lines[0]
    assert 'op: "Operator::Add"' in lines[6]


def test_main_prints_header_and_dump(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "=== MIR Dump ==="
    assert len(lines) == len(build_demo_mir().nodes) + 1