"""Lexer and parser for a small toy language, with a command that prints tokens and parse trees."""

__version__ = "0.1.0"

__all__ = ["cli", "lexer", "nodes", "parser", "tokens"]