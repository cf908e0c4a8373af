"""Turns source text into a list of tokens."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from zlang.tokens import Token, TokenKind, kind_for_symbol, kind_name


def _is_letter(ch: str) -> bool:
    return ch.isalpha()


def _is_digit(ch: str) -> bool:
    return ch.isdecimal()


def _is_symbol(ch: str) -> bool:
    return not (ch.isspace() or _is_letter(ch) or _is_digit(ch) or ch == '"')


def _symbol_kind(symbol: str) -> TokenKind:
    kind = kind_for_symbol(symbol)
    return TokenKind.SYMBOL_INVALID if kind is TokenKind.IDENTIFIER else kind


class Lexer:
    """Scans a source string into ``tokens``, always terminated by an EOF token."""

    def __init__(self, source: str) -> None:
        self.source = source
        self.tokens: list[Token] = []
        self._pos = 0

    def _inbounds(self) -> bool:
        return self._pos < len(self.source)

    def _peek(self) -> str:
        return self.source[self._pos]

    def _consume(self) -> str:
        ch = self.source[self._pos]
        self._pos += 1
        return ch

    def _take_while(self, predicate: Callable[[str], bool]) -> str:
        start = self._pos
        while self._inbounds() and predicate(self._peek()):
            self._pos += 1
        return self.source[start:self._pos]

    def _ident_or_keyword(self) -> None:
        word = self._take_while(lambda ch: _is_letter(ch) or _is_digit(ch) or ch == "_")
        kind = kind_for_symbol(word)
        self.tokens.append(Token(kind, word if kind is TokenKind.IDENTIFIER else ""))

    def _number_literal(self) -> None:
        text = self._take_while(lambda ch: _is_digit(ch) or ch == ".")
        self.tokens.append(Token(TokenKind.LITERAL_NUMBER, text))

    def _string_literal(self) -> None:
        self._consume()
        end = self.source.find('"', self._pos)
        if end < 0:
            raise ValueError("unterminated string literal")
        text = self.source[self._pos:end]
        self._pos = end + 1
        self.tokens.append(Token(TokenKind.LITERAL_STRING, text))

    def _symbol(self) -> None:
        first = self._consume()
        first_kind = _symbol_kind(first)

        if not (self._inbounds() and _is_symbol(self._peek())):
            self.tokens.append(Token(first_kind))
            return

        second = self._consume()
        combined = kind_for_symbol(first + second)
        if combined is not TokenKind.IDENTIFIER:
            self.tokens.append(Token(combined))
            return

        self.tokens.append(Token(first_kind))
        self.tokens.append(Token(_symbol_kind(second)))

    def tokenize(self) -> list[Token]:
        """Scan the remaining source, append the tokens and an EOF, and return them."""
        while self._inbounds():
            ch = self._peek()
            if _is_letter(ch) or ch == "_":
                self._ident_or_keyword()
            elif _is_digit(ch):
                self._number_literal()
            elif ch == '"':
                self._string_literal()
            elif not ch.isspace():
                self._symbol()
            else:
                self._consume()

        self.tokens.append(Token(TokenKind.EOF))
        return self.tokens

    def debug(self) -> None:
        """Print the tokens, one per line."""
        print(format_tokens(self.tokens), end="")


def format_tokens(tokens: Iterable[Token]) -> str:
    """Render tokens as indented ``{ kind "value" }`` lines."""
    lines = []
    for token in tokens:
        name = kind_name(token.kind)
        if token.value:
            lines.append(f'  {{ {name} "{token.value}" }}\n')
        else:
            lines.append(f"  {{ {name} }}\n")
    return "".join(lines)


def tokenize(source: str) -> list[Token]:
    """Tokenize a whole source string."""
    return Lexer(source).tokenize()