"""Token kinds, the token record and lookups between kinds and their spellings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto


class TokenKind(IntEnum):
    """Every kind of token the lexer can produce."""

    IDENTIFIER = 0

    KEYWORD_LET = auto()
    KEYWORD_CONST = auto()
    KEYWORD_FN = auto()
    KEYWORD_FOR = auto()
    KEYWORD_WHILE = auto()
    KEYWORD_RETURN = auto()
    KEYWORD_IF = auto()
    KEYWORD_ELSE = auto()

    TYPE_NUMBER = auto()
    TYPE_STRING = auto()
    TYPE_BOOL = auto()

    LITERAL_NUMBER = auto()
    LITERAL_STRING = auto()
    LITERAL_BOOL = auto()

    SYMBOL_OPEN_PAREN = auto()
    SYMBOL_CLOSE_PAREN = auto()
    SYMBOL_PLUS = auto()
    SYMBOL_MINUS = auto()
    SYMBOL_LESS_THAN = auto()
    SYMBOL_GREATER_THAN = auto()
    SYMBOL_OPEN_BRACE = auto()
    SYMBOL_CLOSE_BRACE = auto()
    SYMBOL_OPEN_BRACKET = auto()
    SYMBOL_CLOSE_BRACKET = auto()
    SYMBOL_PERIOD = auto()
    SYMBOL_COMMA = auto()
    SYMBOL_EQUALS = auto()
    SYMBOL_COLON = auto()
    SYMBOL_SEMI_COLON = auto()
    SYMBOL_STAR = auto()
    SYMBOL_SLASH = auto()
    SYMBOL_AND = auto()
    SYMBOL_OR = auto()
    SYMBOL_NOT = auto()
    SYMBOL_NOT_EQUALS = auto()
    SYMBOL_GREATER_OR_EQUAL = auto()
    SYMBOL_LESS_OR_EQUAL = auto()
    SYMBOL_ARROW = auto()
    SYMBOL_INVALID = auto()

    EOF = auto()


@dataclass(frozen=True)
class Token:
    """A single lexed token; ``value`` is empty unless the kind carries text."""

    kind: TokenKind
    value: str = ""


_SYMBOL_KINDS: dict[str, TokenKind] = {
    "let": TokenKind.KEYWORD_LET,
    "const": TokenKind.KEYWORD_CONST,
    "fn": TokenKind.KEYWORD_FN,
    "for": TokenKind.KEYWORD_FOR,
    "while": TokenKind.KEYWORD_WHILE,
    "return": TokenKind.KEYWORD_RETURN,
    "if": TokenKind.KEYWORD_IF,
    "else": TokenKind.KEYWORD_ELSE,
    "num": TokenKind.TYPE_NUMBER,
    "str": TokenKind.TYPE_STRING,
    "bool": TokenKind.TYPE_BOOL,
    "true": TokenKind.LITERAL_BOOL,
    "false": TokenKind.LITERAL_BOOL,
    "(": TokenKind.SYMBOL_OPEN_PAREN,
    ")": TokenKind.SYMBOL_CLOSE_PAREN,
    "+": TokenKind.SYMBOL_PLUS,
    "-": TokenKind.SYMBOL_MINUS,
    "<": TokenKind.SYMBOL_LESS_THAN,
    ">": TokenKind.SYMBOL_GREATER_THAN,
    "{": TokenKind.SYMBOL_OPEN_BRACE,
    "}": TokenKind.SYMBOL_CLOSE_BRACE,
    "[": TokenKind.SYMBOL_OPEN_BRACKET,
    "]": TokenKind.SYMBOL_CLOSE_BRACKET,
    ".": TokenKind.SYMBOL_PERIOD,
    ",": TokenKind.SYMBOL_COMMA,
    "=": TokenKind.SYMBOL_EQUALS,
    ":": TokenKind.SYMBOL_COLON,
    ";": TokenKind.SYMBOL_SEMI_COLON,
    "*": TokenKind.SYMBOL_STAR,
    "/": TokenKind.SYMBOL_SLASH,
    "&&": TokenKind.SYMBOL_AND,
    "||": TokenKind.SYMBOL_OR,
    "!": TokenKind.SYMBOL_NOT,
    "!=": TokenKind.SYMBOL_NOT_EQUALS,
    ">=": TokenKind.SYMBOL_GREATER_OR_EQUAL,
    "<=": TokenKind.SYMBOL_LESS_OR_EQUAL,
    "->": TokenKind.SYMBOL_ARROW,
}

# ``while`` has no display name; lookups for it yield an empty string.
_KIND_NAMES: dict[TokenKind, str] = {
    TokenKind.IDENTIFIER: "identifier",
    TokenKind.KEYWORD_LET: "let",
    TokenKind.KEYWORD_CONST: "const",
    TokenKind.KEYWORD_FN: "fn",
    TokenKind.KEYWORD_FOR: "for",
    TokenKind.KEYWORD_RETURN: "return",
    TokenKind.KEYWORD_IF: "if",
    TokenKind.KEYWORD_ELSE: "else",
    TokenKind.TYPE_NUMBER: "number type",
    TokenKind.TYPE_STRING: "string type",
    TokenKind.TYPE_BOOL: "bool type",
    TokenKind.LITERAL_NUMBER: "number literal",
    TokenKind.LITERAL_STRING: "string literal",
    TokenKind.LITERAL_BOOL: "bool literal",
    TokenKind.SYMBOL_OPEN_PAREN: "(",
    TokenKind.SYMBOL_CLOSE_PAREN: ")",
    TokenKind.SYMBOL_PLUS: "+",
    TokenKind.SYMBOL_MINUS: "-",
    TokenKind.SYMBOL_STAR: "*",
    TokenKind.SYMBOL_SLASH: "/",
    TokenKind.SYMBOL_LESS_THAN: "<",
    TokenKind.SYMBOL_GREATER_THAN: ">",
    TokenKind.SYMBOL_OPEN_BRACE: "{",
    TokenKind.SYMBOL_CLOSE_BRACE: "}",
    TokenKind.SYMBOL_OPEN_BRACKET: "[",
    TokenKind.SYMBOL_CLOSE_BRACKET: "]",
    TokenKind.SYMBOL_PERIOD: ".",
    TokenKind.SYMBOL_COMMA: ",",
    TokenKind.SYMBOL_EQUALS: "=",
    TokenKind.SYMBOL_COLON: ":",
    TokenKind.SYMBOL_SEMI_COLON: ";",
    TokenKind.SYMBOL_AND: "&&",
    TokenKind.SYMBOL_OR: "||",
    TokenKind.SYMBOL_NOT: "!",
    TokenKind.SYMBOL_NOT_EQUALS: "!=",
    TokenKind.SYMBOL_GREATER_OR_EQUAL: ">=",
    TokenKind.SYMBOL_LESS_OR_EQUAL: "<=",
    TokenKind.SYMBOL_ARROW: "->",
    TokenKind.SYMBOL_INVALID: "invalid symbol",
    TokenKind.EOF: "EOF",
}


def kind_for_symbol(symbol: str) -> TokenKind:
    """Return the kind a keyword or symbol spells, or IDENTIFIER if it spells none."""
    return _SYMBOL_KINDS.get(symbol, TokenKind.IDENTIFIER)


def kind_name(kind: TokenKind) -> str:
    """Return the human-readable name of a token kind (empty if it has none)."""
    return _KIND_NAMES.get(kind, "")