import sys

import pytest

from zlang.cli import main
from zlang.lexer import format_tokens, tokenize
from zlang.parser import format_tree, parse


def _write(tmp_path, text):
    path = tmp_path / "program.0"
    path.write_text(text, encoding="utf-8")
    return path


def test_no_arguments_prints_usage(capsys):
    status = main([])
    out = capsys.readouterr().out
    assert status == 1
    assert out == "Usage: 00 <source.0>\n"


def test_argv_none_reads_sys_argv(capsys, monkeypatch):
    monkeypatch.setattr(sys, "argv", ["zlang"])
    status = main()
    assert status == 1
    assert "Usage: 00 <source.0>" in capsys.readouterr().out


def test_missing_file_reports_error(tmp_path, capsys):
    status = main([str(tmp_path / "absent.0")])
    out = capsys.readouterr().out
    assert status == 1
    assert out.startswith("Error: ")


@pytest.mark.parametrize(
    "program",
    [
        "let x: num = 1 + 2 * 3;",
        'fn add(a: num, b: num) -> num { return a + b; }',
        "while x { x = x - 1; }",
        "if a { b = 1; } else { b = 2; }",
    ],
)
def test_valid_program_prints_tokens_and_tree(tmp_path, capsys, program):
    path = _write(tmp_path, program)
    status = main([str(path)])
    out = capsys.readouterr().out

    tokens = tokenize(program)
    expected = (
        f"\nTokens ({len(tokens)})\n"
        + format_tokens(tokens)
        + "\nParse Tree \n"
        + format_tree(parse(tokens))
    )
    assert status == 0
    assert out == expected


def test_token_count_includes_eof(tmp_path, capsys):
    path = _write(tmp_path, "x = 1;")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "Tokens (5)" in out
    assert "  { EOF }" in out


def test_parse_error_reported(tmp_path, capsys):
    path = _write(tmp_path, "let x: num = ;")
    status = main([str(path)])
    out = capsys.readouterr().out
    assert status == 1
    assert "\nParsing error: " in out
    assert "Parse Tree" not in out


def test_unterminated_string_reported(tmp_path, capsys):
    path = _write(tmp_path, 'let s: str = "open')
    status = main([str(path)])
    out = capsys.readouterr().out
    assert status == 1
    assert out == "Error: unterminated string literal\n"


def test_empty_file_prints_root_only(tmp_path, capsys):
    path = _write(tmp_path, "")
    status = main([str(path)])
    out = capsys.readouterr().out
    assert status == 0
    assert out.endswith("\nParse Tree \n" + format_tree(parse(tokenize(""))))
    assert "Root" in out