"""Lexer, small parsers, semantic checks and an editable mid-level IR for the Jue language."""

__version__ = "0.1.0"