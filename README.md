# jue

Building blocks for a compiler for Jue, a small language with indentation-based
syntax. The package covers pieces of the front end and the mid-level
representation (MIR):

- `jue.lexer`: an indentation-aware tokenizer. `Lexer(source)` is an iterator
  of `Token` values (a `TokenKind` and its text); `tokenize(source)` returns
  them as a list. Each line is split on whitespace; indentation changes produce
  `INDENT` and `DEDENT` tokens, every non-blank, non-comment line ends with a
  `NEWLINE`, and open indentation levels are closed with `DEDENT`s at the end.
  A tab counts as four columns.
- `jue.token_tree`: `parse_tokens(tokens)` groups name, number and string
  tokens into a `File` of `Statement`s, one per line, each holding an
  `Expression` of `Atom`s. Symbols and indentation tokens are dropped.
- `jue.simple_parser`: `parse_program(text)` parses a tiny language of
  assignments, `return` statements and parameterless `def` blocks over integer
  arithmetic with the usual precedence (`Number`, `Ident`, `BinOpExpr` with a
  `BinaryOperator`, `Assign`, `Return`, `FunctionDef`). It parses as many
  statements as match and returns them together with the unparsed rest of the
  text. `ParseError` reports where a parser failed to match.
- `jue.hex_color`: `parse_hex_color(text)` reads a leading `#RRGGBB` into a
  `Color` and returns it with the remaining text; bad input raises
  `HexColorError` (a `ValueError`).
- `jue.ast`: dataclasses for the syntax tree of the full language (`Module`,
  `FuncDef`, `ClassDef`, `If`, `For`, `While`, `Try`, `With`, `Assign`,
  `BinOp`, `Call`, `Lambda`, `Param` with a `ParamKind`, ...).
- `jue.semantic`: `SemanticAnalyzer.analyze_module(module)` walks a
  `jue.ast.Module`, recording function and class definitions and lambda
  parameters, and raises `UndefinedFunctionError` (a `SemanticError`) at the
  first name read before anything defined it.
- `jue.mir`: an arena-based mid-level IR. `Mir` stores `Node`s whose ids are
  their positions and never change, interns names in a `SymbolTable`, and
  records every `insert_node`, `replace_node` and `delete_node` as an
  `EditEvent` (see `jue.mir_events`, with `EditOp`). `insert_node` attaches the
  new node to a `ModuleNode` or `Block` parent; `alloc` adds a node without
  logging. Deleted nodes keep their id and become `Unknown`; replacing or
  deleting an id that does not exist raises `NodeNotFoundError`.
- `jue.mir_lower`: `lower_frontend_module(front)` turns a `jue.ast.Module`
  into a `Mir` whose node 0 is the module. Expression statements, assignments
  and function definitions are lowered; other statements are skipped.
- `jue.mir_pretty`: `pretty_print_mir(mir)` renders the first module of a
  `Mir` as indented, source-like text.
- `jue.mir_nars`: `mir_to_nars_terms(mir)` extracts `NarsStatement` beliefs
  about each function, its parameters and the calls found in its body.
- `jue.demo`: `build_demo_mir()` builds a small MIR by hand and
  `dump_mir(mir)` returns one structured line per node.

The package has no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command-line tools

```
jue-parse [FILE]
```

Parses `FILE` (or, without an argument, a small built-in example program) with
the simple parser and prints the resulting statements.

```
jue-demo
```

Builds the demonstration MIR (a module holding a decorated function
`add_one(x)` that returns `x + 1`) and prints a dump of its nodes.

## Library use

Tokenizing source:

```python
from jue.lexer import tokenize

for token in tokenize("x = 1\nif x\n    y = 2\n"):
    print(token.kind, token.text)
```

Parsing with the simple parser:

```python
from jue.simple_parser import parse_program

statements, rest = parse_program("def add():\n    return 1 + 2 * 3\n\nx = 42\n")
```

Checking names in a syntax tree:

```python
from jue.ast import ExprStmt, Module, Name
from jue.semantic import SemanticAnalyzer, UndefinedFunctionError

try:
    SemanticAnalyzer.analyze_module(Module([ExprStmt(Name("missing"))]))
except UndefinedFunctionError as exc:
    print(exc.name)
```

Working with the MIR:

```python
from jue.demo import build_demo_mir
from jue.mir_nars import mir_to_nars_terms
from jue.mir_pretty import pretty_print_mir

mir = build_demo_mir()
print(pretty_print_mir(mir))
for statement in mir_to_nars_terms(mir):
    print(statement.term, statement.confidence)
```

## What the package does not do

- There is no parser from Jue source text to `jue.ast`; trees are built by
  hand or come from other code. The only parsers read the small language of
  `jue.simple_parser` and hex colours.
- There is no code generation, bytecode output or runtime: the MIR can be
  built, edited, lowered into, printed and summarised, but not compiled or
  executed.