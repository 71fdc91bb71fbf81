import pytest

from jue.simple_parser import (
    EXAMPLE_SOURCE,
    Assign,
    BinaryOperator,
    BinOpExpr,
    FunctionDef,
    Ident,
    Number,
    ParseError,
    Return,
    main,
    parse_program,
)

ADD, SUB, MUL, DIV = (
    BinaryOperator.ADD,
    BinaryOperator.SUB,
    BinaryOperator.MUL,
    BinaryOperator.DIV,
)


def test_precedence():
    assert parse_program("x=1+2*3") == (
        [Assign("x", BinOpExpr(Number(1), ADD, BinOpExpr(Number(2), MUL, Number(3))))],
        "",
    )


def test_left_associativity():
    statements, rest = parse_program("x=8-2-3")
    assert rest == ""
    assert statements[0].value == BinOpExpr(
        BinOpExpr(Number(8), SUB, Number(2)), SUB, Number(3)
    )


def test_parentheses():
    statements, _ = parse_program("y=(a+b)/c")
    assert statements == [
        Assign("y", BinOpExpr(BinOpExpr(Ident("a"), ADD, Ident("b")), DIV, Ident("c")))
    ]


def test_return_statement():
    assert parse_program("return 7") == ([Return(Number(7))], "")


def test_return_needs_whitespace():
    text = "return(7)"
    assert parse_program(text) == ([], text)


def test_whitespace_only_allowed_before_operator():
    assert parse_program("x = 1 +2")[0] == [Assign("x", BinOpExpr(Number(1), ADD, Number(2)))]
    text = "x = 1 + 2"
    assert parse_program(text) == ([], text)


def test_function_definition():
    assert parse_program("def f():\n    return a*b") == (
        [FunctionDef("f", [], [Return(BinOpExpr(Ident("a"), MUL, Ident("b")))])],
        "",
    )


def test_parsing_stops_at_newline_between_statements():
    assert parse_program("x=1\ny=2") == ([Assign("x", Number(1))], "\ny=2")


def test_integer_limit():
    assert parse_program("x=9223372036854775807")[0] == [
        Assign("x", Number(2**63 - 1))
    ]
    text = "x=9223372036854775808"
    assert parse_program(text) == ([], text)


def test_identifiers_have_no_digits():
    text = "ab1=2"
    assert parse_program(text) == ([], text)


def test_leading_newline_stops_example():
    assert parse_program(EXAMPLE_SOURCE) == ([], EXAMPLE_SOURCE)


@pytest.mark.parametrize(
    "symbol, operator",
    [("+", ADD), ("-", SUB), ("*", MUL), ("/", DIV)],
)
def test_operator_symbols(symbol, operator):
    assert parse_program(f"x=a{symbol}b") == (
        [Assign("x", BinOpExpr(Ident("a"), operator, Ident("b")))],
        "",
    )


def test_parse_error_carries_position():
    error = ParseError(4, "digits")
    assert error.position == 4
    assert "digits" in str(error)


def test_main_prints_file_result(tmp_path, capsys):
    path = tmp_path / "prog.jue"
    path.write_text("x=42", encoding="utf-8")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Parsed AST:")
    assert "Assign(name='x'" in out


def test_main_without_arguments(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.startswith("Parsed AST:")


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        main([str(tmp_path / "absent.jue")])