import pytest

from jue.ast import (
    Assign,
    AugAssign,
    BinOp,
    Bool,
    Call,
    ClassDef,
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
    Str,
    Try,
    UnaryOp,
    While,
    With,
)
from jue.semantic import (
    InvalidArgumentsError,
    SemanticAnalyzer,
    SemanticError,
    UndefinedFunctionError,
)


def _undefined_name(module):
    with pytest.raises(UndefinedFunctionError) as info:
        SemanticAnalyzer.analyze_module(module)
    return info.value.name


def test_literals_need_no_definitions():
    module = Module(
        [
            ExprStmt(Number("1")),
            ExprStmt(Str('"hi"')),
            ExprStmt(Bool(True)),
            ExprStmt(NoneLit()),
            ExprStmt(BinOp(Number("1"), "+", UnaryOp("-", Number("2")))),
            Pass(),
        ]
    )
    assert SemanticAnalyzer.analyze_module(module) is None


def test_undefined_name_reports_name():
    assert _undefined_name(Module([ExprStmt(Name("foo"))])) == "foo"


def test_function_definition_makes_name_defined():
    module = Module([FuncDef("f"), ExprStmt(Call(Name("f"), [Number("1")]))])
    assert SemanticAnalyzer.analyze_module(module) is None


def test_use_before_definition_fails():
    module = Module([ExprStmt(Name("f")), FuncDef("f")])
    assert _undefined_name(module) == "f"


def test_class_definition_makes_name_defined():
    module = Module([ClassDef("Point"), ExprStmt(Call(Name("Point")))])
    assert SemanticAnalyzer.analyze_module(module) is None


def test_assignment_target_must_already_be_defined():
    module = Module([Assign([Name("x")], Number("1"))])
    assert _undefined_name(module) == "x"


def test_lambda_params_become_defined():
    module = Module(
        [ExprStmt(Lambda(["y"], Name("y"))), ExprStmt(Name("y"))]
    )
    assert SemanticAnalyzer.analyze_module(module) is None


def test_call_argument_is_checked():
    module = Module([FuncDef("f"), ExprStmt(Call(Name("f"), [Name("missing")]))])
    assert _undefined_name(module) == "missing"


def test_function_body_is_checked():
    module = Module([FuncDef("f", body=[Return(Name("q"))])])
    assert _undefined_name(module) == "q"


@pytest.mark.parametrize(
    "stmt",
    [
        If(Bool(True), [Pass()], [ExprStmt(Name("bad"))]),
        While(Name("bad")),
        For(Name("bad"), Number("1")),
        With([(Name("bad"), None)]),
        Try(handlers=[(None, [ExprStmt(Name("bad"))])]),
        Try(finalbody=[Raise(Name("bad"))]),
        AugAssign(Name("bad"), "+=", Number("1")),
        Raise(UnaryOp("not", Name("bad"))),
    ],
)
def test_nested_statements_are_traversed(stmt):
    assert _undefined_name(Module([stmt])) == "bad"


def test_first_error_wins():
    module = Module([ExprStmt(BinOp(Name("a"), "+", Name("b")))])
    assert _undefined_name(module) == "a"


def test_error_hierarchy():
    error = InvalidArgumentsError("too many")
    assert isinstance(error, SemanticError)
    assert error.message == "too many"
    assert issubclass(UndefinedFunctionError, SemanticError)