"""
Shared fixtures for the Jack tokenizer tests.
"""

from pathlib import Path

import pytest

from jack_tokenizer.tokens import Keyword, Token


MAIN_SOURCE = """\
// comment
class Main {
   function void main() {
      let x = "hi";
      return;
   }
}
"""


@pytest.fixture
def main_source() -> str:
    """The small Main class used by end-to-end tests."""
    return MAIN_SOURCE


@pytest.fixture
def main_tokens() -> list[Token]:
    """Expected token sequence for MAIN_SOURCE."""
    return [
        Token.keyword(Keyword.CLASS),
        Token.identifier("Main"),
        Token.symbol("{"),
        Token.keyword(Keyword.FUNCTION),
        Token.keyword(Keyword.VOID),
        Token.identifier("main"),
        Token.symbol("("),
        Token.symbol(")"),
        Token.symbol("{"),
        Token.keyword(Keyword.LET),
        Token.identifier("x"),
        Token.symbol("="),
        Token.string("hi"),
        Token.symbol(";"),
        Token.keyword(Keyword.RETURN),
        Token.symbol(";"),
        Token.symbol("}"),
        Token.symbol("}"),
    ]


@pytest.fixture
def write_source(tmp_path):
    """Factory fixture: write Jack source to tmp_path and return its path."""
    def _write(source: str, name: str = "Main.jack") -> Path:
        path = tmp_path / name
        path.write_text(source, encoding="utf-8")
        return path
    return _write
