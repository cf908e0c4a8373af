# zlang

`zlang` reads source files written in a small toy language. It splits a file
into tokens, builds a parse tree from them and prints both.

## The language

```
fn add(a: num, b: num) -> num {
    return a + b;
}

let total: num = add(1, 2) * (3 - 4);
const greeting: str = "hello";

while total {
    total = total - 1;
}

if total { print(total); } else { print(greeting); }
```

The parser accepts these statements:

- `let name: TYPE = expr;` and `const name: TYPE = expr;`, where `TYPE` is
  `num` or `str`
- `name = expr;`
- `return expr;`
- `fn name(param: TYPE, ...) -> TYPE { ... }`, where parameter and return
  types may be `num`, `str` or `bool`
- `while expr { ... }`
- `if expr { ... }`, with an optional `else` followed by any statement
- `{ ... }` blocks, and any expression followed by `;`

An expression is built from number and string literals, identifiers,
function calls, parentheses, unary minus and the operators `+ - * /`.
`*` and `/` bind tighter than `+` and `-`.

The lexer also recognises `for`, `true`, `false`, `[ ] . < > <= >= != ! && ||`
and `->`. Apart from `->` in function declarations, the parser does not
accept these yet; using one in an expression is a parse error.

## Command line

```
zlang program.0
```

This prints the token list first, then the parse tree. With no file argument
it prints the usage line and exits with status 1. A file that cannot be read,
an unterminated string literal or a syntax error is reported and the command
exits with status 1.

## Library use

```python
from zlang.lexer import tokenize, format_tokens
from zlang.parser import parse, format_tree, ParseError

tokens = tokenize('let x: num = 1 + 2;')
print(format_tokens(tokens), end="")

try:
    root = parse(tokens)
except ParseError as exc:
    print("parse failed:", exc)
else:
    print(format_tree(root), end="")
```

- `zlang.tokens` defines `TokenKind` and the `Token` record, with
  `kind_for_symbol` (the kind a keyword or symbol spells) and `kind_name`
  (a kind's display name).
- `zlang.lexer` has the `Lexer` class, `tokenize(source)` and
  `format_tokens(tokens)`. The token list always ends with an `EOF` token.
  An unterminated string literal raises `ValueError`.
- `zlang.nodes` defines `NodeKind` and the `Node` record (`kind`, `value`,
  `children`).
- `zlang.parser` has the `Parser` class, `parse(tokens)`, which returns the
  root node, `format_tree(node)` and `ParseError`.
- `zlang.cli.main(argv=None)` runs the command and returns its exit status.

`Lexer.debug()` and `Parser.debug()` print what `format_tokens` and
`format_tree` return.

## What it does not do

`zlang` stops at the parse tree. It does not check types, resolve names,
evaluate programs or generate code.

## Running the tests

```
pip install -e ".[test]"
pytest
```