"""
Tests for the command line tokenizer.
"""

import pytest

from file_explorer.exceptions import CommandParseError
from file_explorer.shell.parser import CommandInvocation, parse, tokenize


class TestTokenize:
    """Test cases for tokenize."""

    def test_whitespace_runs(self):
        assert tokenize("copy   a.txt\t b.txt ") == ["copy", "a.txt", "b.txt"]

    @pytest.mark.parametrize("line", ["", "   ", "\t"])
    def test_blank_line(self, line):
        assert tokenize(line) == []

    def test_double_quotes(self):
        assert tokenize('touch "my notes.txt"') == ["touch", "my notes.txt"]

    def test_single_quotes(self):
        assert tokenize("cd 'Program Files'") == ["cd", "Program Files"]

    def test_quotes_inside_token(self):
        assert tokenize('mv a"b c"d x') == ["mv", "ab cd", "x"]

    def test_empty_quoted_token(self):
        assert tokenize('ls ""') == ["ls", ""]

    def test_unterminated_quote(self):
        with pytest.raises(CommandParseError):
            tokenize('cd "unclosed')


class TestParse:
    """Test cases for parse."""

    def test_parse(self):
        invocation = parse("chmod f.txt 644")

        assert invocation == CommandInvocation("chmod", ("f.txt", "644"))
        assert invocation.arg(0) == "f.txt"
        assert invocation.arg(2) == ""
        assert invocation.arg(2, "x") == "x"

    def test_parse_blank(self):
        assert parse("  ") is None

    def test_parse_keeps_case(self):
        assert parse("LS").name == "LS"
