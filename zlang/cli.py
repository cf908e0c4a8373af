"""Command-line entry point: tokenize and parse a source file, printing both stages."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path

from zlang.lexer import Lexer
from zlang.parser import ParseError, Parser

USAGE = "Usage: 00 <source.0>"


def main(argv: Sequence[str] | None = None) -> int:
    """Run the tokenizer and parser over the file named first in ``argv``.

    Prints the token list and the parse tree, and returns the exit status.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(USAGE)
        return 1

    try:
        source = Path(args[0]).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as err:
        print(f"Error: {err}")
        return 1

    lexer = Lexer(source)
    try:
        tokens = lexer.tokenize()
    except ValueError as err:
        print(f"Error: {err}")
        return 1

    print(f"\nTokens ({len(tokens)})")
    lexer.debug()

    parser = Parser(tokens)
    try:
        parser.parse()
    except ParseError as err:
        print(f"\nParsing error: {err}")
        return 1

    print("\nParse Tree ")
    parser.debug()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())