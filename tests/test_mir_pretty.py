from jue import ast as front
from jue import mir as ir
from jue.mir_lower import lower_frontend_module
from jue.mir_pretty import pretty_print_mir


def _module_mir(name=None):
    mir = ir.Mir()
    module_id = mir.alloc(ir.ModuleNode(name=name))
    return mir, module_id


def test_empty_arena_renders_nothing():
    assert pretty_print_mir(ir.Mir()) == ""


def test_arena_without_module_renders_nothing():
    mir = ir.Mir()
    mir.alloc(ir.Pass())
    mir.alloc(ir.Literal(1))
    assert pretty_print_mir(mir) == ""


def test_lowered_assignment():
    mir = lower_frontend_module(
        front.Module([front.Assign([front.Name("x")], front.Number("42"))])
    )
    assert pretty_print_mir(mir) == "# module None\nx = 42\n"


def test_named_module_header():
    mir = ir.Mir()
    sid = mir.symbol_table.intern("demo")
    mir.alloc(ir.ModuleNode(name=sid))
    assert pretty_print_mir(mir).splitlines() == [f"# module Some({sid})"]


def test_function_body_is_indented():
    mir, module_id = _module_mir()
    f = mir.symbol_table.intern("f")
    a = mir.symbol_table.intern("a")
    block = mir.alloc(ir.Block())
    mir.insert_node(module_id, ir.FunctionDef(f, [a], block))
    mir.insert_node(block, ir.Identifier(a))
    assert pretty_print_mir(mir).splitlines() == ["# module None", "def f(a) :", "  a"]


def test_nested_function_indents_further():
    mir, module_id = _module_mir()
    outer = mir.symbol_table.intern("outer")
    inner = mir.symbol_table.intern("inner")
    value = mir.symbol_table.intern("v")
    outer_block = mir.alloc(ir.Block())
    inner_block = mir.alloc(ir.Block())
    mir.insert_node(module_id, ir.FunctionDef(outer, [], outer_block))
    mir.insert_node(outer_block, ir.FunctionDef(inner, [], inner_block))
    mir.insert_node(inner_block, ir.Identifier(value))
    lines = pretty_print_mir(mir).splitlines()
    assert lines[2].startswith("  def inner(")
    assert lines[3] == "    v"


def test_call_with_arguments():
    mir, module_id = _module_mir()
    func = mir.alloc(ir.Identifier(mir.symbol_table.intern("show")))
    text = mir.alloc(ir.Literal("hi"))
    number = mir.alloc(ir.Literal(7))
    mir.insert_node(module_id, ir.Call(func, [text, number]))
    assert pretty_print_mir(mir).endswith('show("hi", 7)\n')


def test_complex_assignment_value_is_placeholder():
    mir = lower_frontend_module(
        front.Module(
            [front.Assign([front.Name("x")], front.BinOp(front.Name("a"), "+", front.Name("b")))]
        )
    )
    assert pretty_print_mir(mir).splitlines()[-1].endswith("= <expr>")


def test_unknown_function_name():
    mir, module_id = _module_mir()
    block = mir.alloc(ir.Block())
    mir.insert_node(module_id, ir.FunctionDef(99, [], block))
    assert "<anon>" in pretty_print_mir(mir)


def test_other_kinds_render_as_comment():
    mir, module_id = _module_mir()
    mir.insert_node(module_id, ir.Pass())
    mir.insert_node(module_id, ir.Return(None))
    lines = pretty_print_mir(mir).splitlines()
    assert lines[1] == "/* Pass */"
    assert lines[2].startswith("/* Return")
    assert lines[2].endswith(" */")