"""Parse-tree node kinds and the node record."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum, auto


class NodeKind(IntEnum):
    """Every kind of node the parser can build."""

    ROOT = 0

    FACTOR_LITERAL_NUMBER = auto()
    FACTOR_LITERAL_STRING = auto()
    FACTOR_IDENTIFIER = auto()
    FACTOR_EXPRESSION = auto()
    FACTOR_NEGATE = auto()
    FACTOR_FUNCTION_CALL = auto()

    EXPRESSION_ADD = auto()
    EXPRESSION_SUBTRACT = auto()
    EXPRESSION_MULTIPLY = auto()
    EXPRESSION_DIVIDE = auto()

    STATEMENT_BLOCK = auto()
    STATEMENT_RETURN = auto()
    STATEMENT_LET_DECLARATION = auto()
    STATEMENT_CONST_DECLARATION = auto()
    STATEMENT_LET_ASSIGN = auto()
    STATEMENT_FUNCTION_DECLARATION = auto()
    STATEMENT_WHILE_LOOP = auto()
    STATEMENT_IF = auto()

    RETURN_TYPE_NUMBER = auto()
    RETURN_TYPE_STRING = auto()
    RETURN_TYPE_BOOL = auto()

    PARAMETER_TYPE_NUMBER = auto()
    PARAMETER_TYPE_STRING = auto()
    PARAMETER_TYPE_BOOL = auto()

    TYPE_NUMBER = auto()
    TYPE_STRING = auto()
    TYPE_BOOL = auto()

    END = auto()


@dataclass
class Node:
    """A parse-tree node: its kind, optional text and ordered children."""

    kind: NodeKind
    value: str = ""
    children: list[Node] = field(default_factory=list)