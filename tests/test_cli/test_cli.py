"""Tests for the timescript CLI."""

import io
import json

import pytest

from timescript.cli import main
from timescript.lexer.tokens import TokenKind
from timescript.viewer import STYLES, style_for


@pytest.fixture
def program(tmp_path):
    path = tmp_path / "alarm.ts"
    path.write_text("start\n  set x: hour = 5 # wake\nend\n", encoding="utf-8")
    return path


class TestTokenize:
    def test_listing(self, program, capsys):
        assert main(["tokenize", str(program), "--no-color"]) == 0
        out = capsys.readouterr().out
        assert "LEXICAL ANALYSIS RESULT" in out
        assert "IDENTIFIER" in out
        assert "Total Tokens: 15" in out

    def test_hide_comments(self, program, capsys):
        assert main(["tokenize", str(program), "--no-color", "--hide-comments"]) == 0
        out = capsys.readouterr().out
        assert "COMMENT" not in out
        assert "Total Tokens: 15 (1 comment(s) hidden)" in out

    def test_json(self, program, capsys):
        assert main(["tokenize", str(program), "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data[0] == {"kind": "START", "lexeme": "start", "line": 1, "column": 1}
        assert data[-1]["kind"] == "EOF"
        assert len(data) == 15

    def test_json_hide_comments(self, program, capsys):
        assert main(["tokenize", str(program), "--json", "--hide-comments"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert all(d["kind"] != "COMMENT" for d in data)

    def test_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("show 5\n"))
        assert main(["tokenize", "-", "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert [d["kind"] for d in data] == ["SHOW", "NUMBER", "NEWLINE", "EOF"]

    def test_lexical_error(self, tmp_path, capsys):
        path = tmp_path / "bad.ts"
        path.write_text("start\n    a\n  b\n", encoding="utf-8")
        assert main(["tokenize", str(path), "--no-color"]) == 1
        out = capsys.readouterr().out
        assert "LEXICAL ERROR" in out
        assert "Inconsistent dedent" in out
        assert "(Line 3, Column 1)" in out

    def test_blank_input_warns(self, tmp_path, capsys):
        path = tmp_path / "empty.ts"
        path.write_text("  \n\n", encoding="utf-8")
        assert main(["tokenize", str(path), "--no-color"]) == 1
        assert "Please enter some TimeScript code" in capsys.readouterr().out


class TestCommands:
    def test_no_arguments(self, capsys):
        assert main([]) == 1
        assert "Usage" in capsys.readouterr().out

    def test_help(self, capsys):
        assert main(["--help"]) == 0
        assert "tokenize" in capsys.readouterr().out

    def test_version(self, capsys):
        assert main(["--version"]) == 0
        assert capsys.readouterr().out.startswith("timescript ")

    def test_unknown_command(self, capsys):
        assert main(["parse", "x.ts"]) == 1
        assert "unknown command 'parse'" in capsys.readouterr().out

    def test_missing_file_argument(self, capsys):
        assert main(["tokenize"]) == 1
        assert "requires a file argument" in capsys.readouterr().out

    def test_file_not_found(self, tmp_path, capsys):
        assert main(["tokenize", str(tmp_path / "nope.ts")]) == 1
        assert "file not found" in capsys.readouterr().out

    def test_directory_argument(self, tmp_path, capsys):
        assert main(["tokenize", str(tmp_path)]) == 1
        assert "cannot read" in capsys.readouterr().out

    def test_invalid_utf8(self, tmp_path, capsys):
        path = tmp_path / "binary.ts"
        path.write_bytes(b"show \xff\n")
        assert main(["tokenize", str(path)]) == 1
        assert "cannot read" in capsys.readouterr().out

    def test_unknown_option(self, program, capsys):
        assert main(["tokenize", str(program), "--jsno"]) == 1
        out = capsys.readouterr().out
        assert "unknown option '--jsno'" in out
        assert "Usage" in out


class TestStyles:
    def test_categories(self):
        assert style_for(TokenKind.NUMBER) == STYLES["number"]
        assert style_for(TokenKind.STRING) == STYLES["string"]
        assert style_for(TokenKind.START) == STYLES["keyword"]
        assert style_for(TokenKind.BOOLEAN) == STYLES["keyword"]
        assert style_for(TokenKind.HOUR) == STYLES["type"]
        assert style_for(TokenKind.NEQ) == STYLES["operator"]
        assert style_for(TokenKind.DEDENT) == STYLES["structural"]
        assert style_for(TokenKind.COMMENT) == STYLES["comment"]
        assert style_for(TokenKind.COLON) == STYLES["default"]
