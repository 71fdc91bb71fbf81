[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jue"
version = "0.1.0"
description = "Front end and mid-level IR toolkit for the Jue language: lexer, small parsers, semantic checks and an editable arena MIR"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "compiler",
    "parser",
    "lexer",
    "intermediate-representation",
    "mir",
    "ast",
    "jue",
]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
jue-parse = "jue.simple_parser:main"
jue-demo = "jue.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["jue"]

[tool.hatch.build.targets.sdist]
include = ["jue", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
