"""Builds a parse tree from a token list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from zlang.nodes import Node, NodeKind
from zlang.tokens import Token, TokenKind, kind_name


class ParseError(Exception):
    """Raised when the tokens do not form a valid program."""


_PARAMETER_KINDS = {
    TokenKind.TYPE_NUMBER: NodeKind.PARAMETER_TYPE_NUMBER,
    TokenKind.TYPE_STRING: NodeKind.PARAMETER_TYPE_STRING,
    TokenKind.TYPE_BOOL: NodeKind.PARAMETER_TYPE_BOOL,
}

_RETURN_KINDS = {
    TokenKind.TYPE_NUMBER: NodeKind.RETURN_TYPE_NUMBER,
    TokenKind.TYPE_STRING: NodeKind.RETURN_TYPE_STRING,
    TokenKind.TYPE_BOOL: NodeKind.RETURN_TYPE_BOOL,
}

_DECLARATION_TYPES = {
    TokenKind.TYPE_NUMBER: NodeKind.TYPE_NUMBER,
    TokenKind.TYPE_STRING: NodeKind.TYPE_STRING,
}

_LABELS = {
    NodeKind.FACTOR_LITERAL_NUMBER: "Number Literal",
    NodeKind.FACTOR_LITERAL_STRING: "String Literal",
    NodeKind.FACTOR_IDENTIFIER: "Identifier",
    NodeKind.FACTOR_NEGATE: "Negate",
    NodeKind.FACTOR_FUNCTION_CALL: "Function Call",
    NodeKind.EXPRESSION_ADD: "Add",
    NodeKind.EXPRESSION_SUBTRACT: "Subtract",
    NodeKind.EXPRESSION_MULTIPLY: "Multiply",
    NodeKind.EXPRESSION_DIVIDE: "Divide",
    NodeKind.STATEMENT_LET_DECLARATION: "Variable Declaration",
    NodeKind.STATEMENT_CONST_DECLARATION: "Constant Declaration",
    NodeKind.STATEMENT_LET_ASSIGN: "Variable Assign",
    NodeKind.STATEMENT_RETURN: "Return",
    NodeKind.STATEMENT_BLOCK: "Block",
    NodeKind.STATEMENT_FUNCTION_DECLARATION: "Function Declaration",
    NodeKind.STATEMENT_WHILE_LOOP: "While Loop",
    NodeKind.STATEMENT_IF: "If Statement",
    NodeKind.RETURN_TYPE_NUMBER: "Number Return Type",
    NodeKind.RETURN_TYPE_STRING: "String Return Type",
    NodeKind.RETURN_TYPE_BOOL: "Boolean Return Type",
    NodeKind.PARAMETER_TYPE_STRING: "String Parameter",
    NodeKind.PARAMETER_TYPE_NUMBER: "Number Parameter",
    NodeKind.PARAMETER_TYPE_BOOL: "Boolean Parameter",
    NodeKind.TYPE_STRING: "String Type",
    NodeKind.TYPE_NUMBER: "Number Type",
    NodeKind.TYPE_BOOL: "Boolean Type",
    NodeKind.ROOT: "Root",
}


class Parser:
    """Recursive-descent parser; ``parse`` fills and returns ``root``."""

    def __init__(self, tokens: Iterable[Token]) -> None:
        self.tokens = list(tokens)
        self.root = Node(NodeKind.ROOT)
        self._pos = 0

    # -- token cursor -------------------------------------------------

    def _inbounds(self) -> bool:
        return self._pos < len(self.tokens) and self.tokens[self._pos].kind is not TokenKind.EOF

    def _peek(self) -> Token:
        if self._pos >= len(self.tokens):
            raise ParseError("unexpected end of input")
        return self.tokens[self._pos]

    def _kind_after(self) -> TokenKind | None:
        nxt = self._pos + 1
        return self.tokens[nxt].kind if nxt < len(self.tokens) else None

    def _consume(self) -> Token:
        token = self._peek()
        self._pos += 1
        return token

    def _expect(self, kind: TokenKind) -> Token:
        found = self._peek().kind
        if found is not kind:
            raise ParseError(f'unexpected "{kind_name(found)}", expected "{kind_name(kind)}"')
        return self._consume()

    # -- expressions --------------------------------------------------
    # E -> T [+|- T]*
    # T -> F | F*T | F/T
    # F -> literal | identifier | call | (E) | -F

    def _factor(self) -> Node:
        tok = self._consume()

        if tok.kind is TokenKind.LITERAL_NUMBER:
            return Node(NodeKind.FACTOR_LITERAL_NUMBER, tok.value)
        if tok.kind is TokenKind.LITERAL_STRING:
            return Node(NodeKind.FACTOR_LITERAL_STRING, tok.value)
        if tok.kind is TokenKind.IDENTIFIER:
            if self._peek().kind is not TokenKind.SYMBOL_OPEN_PAREN:
                return Node(NodeKind.FACTOR_IDENTIFIER, tok.value)
            self._consume()
            return Node(NodeKind.FACTOR_FUNCTION_CALL, tok.value, self._call_arguments())
        if tok.kind is TokenKind.SYMBOL_OPEN_PAREN:
            inner = self._expr()
            self._expect(TokenKind.SYMBOL_CLOSE_PAREN)
            return inner
        if tok.kind is TokenKind.SYMBOL_MINUS:
            return Node(NodeKind.FACTOR_NEGATE, "", [self._factor()])
        raise ParseError(f'Error: unexpected "{kind_name(tok.kind)}", expected expression')

    def _call_arguments(self) -> list[Node]:
        args: list[Node] = []
        if self._peek().kind is TokenKind.SYMBOL_CLOSE_PAREN:
            self._consume()
            return args
        while True:
            args.append(self._expr())
            following = self._peek().kind
            if following is TokenKind.SYMBOL_CLOSE_PAREN:
                self._consume()
                return args
            if following is TokenKind.SYMBOL_COMMA:
                self._consume()

    def _term(self) -> Node:
        result = self._factor()
        if self._inbounds():
            kind = self._peek().kind
            if kind is TokenKind.SYMBOL_STAR:
                self._consume()
                result = Node(NodeKind.EXPRESSION_MULTIPLY, "", [result, self._term()])
            elif kind is TokenKind.SYMBOL_SLASH:
                self._consume()
                result = Node(NodeKind.EXPRESSION_DIVIDE, "", [result, self._term()])
        return result

    def _expr(self) -> Node:
        result = self._term()
        while self._inbounds():
            kind = self._peek().kind
            if kind is TokenKind.SYMBOL_PLUS:
                op = NodeKind.EXPRESSION_ADD
            elif kind is TokenKind.SYMBOL_MINUS:
                op = NodeKind.EXPRESSION_SUBTRACT
            else:
                break
            self._consume()
            result = Node(op, "", [result, self._term()])
        return result

    # -- statements ---------------------------------------------------

    def _declaration(self) -> Node:
        let_or_const = self._consume().kind
        name = self._expect(TokenKind.IDENTIFIER)
        self._expect(TokenKind.SYMBOL_COLON)

        type_token = self._consume()
        if type_token.kind is TokenKind.KEYWORD_CONST:
            raise ParseError("constants must be initialized")
        if type_token.kind not in _DECLARATION_TYPES:
            raise ParseError(f"unknown type: {kind_name(type_token.kind)}")
        type_node = Node(_DECLARATION_TYPES[type_token.kind])

        self._expect(TokenKind.SYMBOL_EQUALS)
        try:
            value = self._expr()
        except ParseError as err:
            raise ParseError('invalid expression following "="') from err
        self._expect(TokenKind.SYMBOL_SEMI_COLON)

        kind = (
            NodeKind.STATEMENT_LET_DECLARATION
            if let_or_const is TokenKind.KEYWORD_LET
            else NodeKind.STATEMENT_CONST_DECLARATION
        )
        return Node(kind, name.value, [type_node, value])

    def _variable_set(self) -> Node:
        name = self._expect(TokenKind.IDENTIFIER)
        self._expect(TokenKind.SYMBOL_EQUALS)
        value = self._expr()
        self._expect(TokenKind.SYMBOL_SEMI_COLON)
        return Node(NodeKind.STATEMENT_LET_ASSIGN, name.value, [value])

    def _return(self) -> Node:
        self._expect(TokenKind.KEYWORD_RETURN)
        value = self._expr()
        self._expect(TokenKind.SYMBOL_SEMI_COLON)
        return Node(NodeKind.STATEMENT_RETURN, "", [value])

    def _block(self) -> Node:
        self._expect(TokenKind.SYMBOL_OPEN_BRACE)
        block = Node(NodeKind.STATEMENT_BLOCK)
        while True:
            kind = self._peek().kind
            # A nested block is taken first and a statement is still
            # expected after it before the closing brace is looked for.
            if kind is TokenKind.SYMBOL_OPEN_BRACE:
                block.children.append(self._block())
            if kind is TokenKind.SYMBOL_CLOSE_BRACE:
                self._consume()
                return block
            block.children.append(self._statement())

    def _parameters(self) -> list[Node]:
        params: list[Node] = []
        if self._peek().kind is TokenKind.SYMBOL_CLOSE_PAREN:
            self._expect(TokenKind.SYMBOL_CLOSE_PAREN)
            return params
        while True:
            found = self._peek().kind
            if found is not TokenKind.IDENTIFIER:
                raise ParseError(f"invalid parameter: {kind_name(found)}")
            param_name = self._consume()
            self._expect(TokenKind.SYMBOL_COLON)
            type_kind = self._consume().kind
            if type_kind not in _PARAMETER_KINDS:
                raise ParseError('invalid return type following "->"')
            params.append(Node(_PARAMETER_KINDS[type_kind], param_name.value))

            following = self._peek().kind
            if following is TokenKind.SYMBOL_CLOSE_PAREN:
                self._consume()
                return params
            if following is TokenKind.SYMBOL_COMMA:
                self._consume()

    def _function_declaration(self) -> Node:
        self._expect(TokenKind.KEYWORD_FN)
        name = self._expect(TokenKind.IDENTIFIER)
        self._expect(TokenKind.SYMBOL_OPEN_PAREN)
        params = self._parameters()
        self._expect(TokenKind.SYMBOL_ARROW)
        return_type = self._consume()
        body = self._block()

        if return_type.kind not in _RETURN_KINDS:
            raise ParseError('invalid return type following "->"')
        return Node(
            NodeKind.STATEMENT_FUNCTION_DECLARATION,
            name.value,
            [Node(_RETURN_KINDS[return_type.kind]), *params, body],
        )

    def _while_loop(self) -> Node:
        self._expect(TokenKind.KEYWORD_WHILE)
        condition = self._expr()
        body = self._block()
        return Node(NodeKind.STATEMENT_WHILE_LOOP, "", [condition, body])

    def _conditional(self) -> Node:
        self._expect(TokenKind.KEYWORD_IF)
        condition = self._expr()
        body = self._block()
        if self._inbounds() and self._peek().kind is TokenKind.KEYWORD_ELSE:
            self._consume()
            alternative = self._statement()
            return Node(NodeKind.STATEMENT_IF, "", [condition, body, alternative])
        return Node(NodeKind.STATEMENT_IF, "", [condition, body])

    def _statement(self) -> Node:
        tok = self._peek()
        kind = tok.kind

        if kind in (TokenKind.KEYWORD_LET, TokenKind.KEYWORD_CONST):
            return self._declaration()
        if kind is TokenKind.IDENTIFIER and self._kind_after() is not TokenKind.SYMBOL_OPEN_PAREN:
            return self._variable_set()
        if kind is TokenKind.KEYWORD_RETURN:
            return self._return()
        if kind is TokenKind.SYMBOL_OPEN_BRACE:
            return self._block()
        if kind is TokenKind.KEYWORD_FN:
            return self._function_declaration()
        if kind is TokenKind.KEYWORD_WHILE:
            return self._while_loop()
        if kind is TokenKind.KEYWORD_IF:
            return self._conditional()

        try:
            expression = self._expr()
        except ParseError as err:
            shown = f"{kind_name(kind)} ({tok.value})" if tok.value else kind_name(kind)
            raise ParseError(f'unknown expression after "{shown}"') from err
        self._expect(TokenKind.SYMBOL_SEMI_COLON)
        return expression

    # -- public -------------------------------------------------------

    def parse(self) -> Node:
        """Parse every statement into a fresh root node and return it."""
        self.root = Node(NodeKind.ROOT)
        while self._inbounds():
            if self._peek().kind is TokenKind.SYMBOL_SEMI_COLON:
                self._consume()
                continue
            self.root.children.append(self._statement())
        return self.root

    def debug(self) -> None:
        """Print the parse tree."""
        print(format_tree(self.root), end="")


def _tree_lines(node: Node, depth: int) -> Iterator[str]:
    line = "  " + "-" * (depth * 2)
    label = _LABELS.get(node.kind)
    if label:
        line += f" {label}"
    if node.value:
        line += f" ({node.value})"
    yield line + "\n"
    for child in node.children:
        yield from _tree_lines(child, depth + 1)


def format_tree(node: Node) -> str:
    """Render a tree as indented lines, deeper nodes with longer dash runs."""
    return "".join(_tree_lines(node, 1))


def parse(tokens: Iterable[Token]) -> Node:
    """Parse a token list and return the root node."""
    return Parser(tokens).parse()