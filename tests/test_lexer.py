# =============================================================================
# test_lexer.py - Lexer Unit Tests
# =============================================================================
# Tests for the Jack lexer state machine.
#
# Test coverage includes:
#   - Keywords, identifiers and exact keyword matching
#   - Every symbol, alone and between other tokens
#   - Integer constants, leading zeros and the 32767 bound
#   - String constants, including unterminated strings
#   - Cursor-level has_next / next_token contract
#   - Source locations on tokens and errors
# =============================================================================

import pytest

from jack_tokenizer.errors import (
    IntegerOutOfRangeError,
    InvalidCharacterError,
    JackSyntaxError,
    SourceLocation,
    UnexpectedEndOfInputError,
    UnterminatedStringError,
)
from jack_tokenizer.lexer import Lexer
from jack_tokenizer.preprocessor import preprocess
from jack_tokenizer.tokens import KEYWORDS, SYMBOLS, Keyword, Token, TokenKind


# =============================================================================
# Helper Function
# =============================================================================

def tokenize(source: str) -> list[Token]:
    """Preprocess and tokenize source with the '<test>' filename."""
    return list(Lexer(preprocess(source, "<test>")).tokenize())


# =============================================================================
# Basic Token Recognition Tests
# =============================================================================

class TestBasicTokens:
    """Test basic token recognition for simple inputs."""

    def test_empty_source(self):
        """Empty source produces no tokens."""
        assert tokenize("") == []

    def test_whitespace_only(self):
        """Whitespace-only source produces no tokens."""
        assert tokenize("   \t  \n   \n") == []

    def test_identifier(self):
        tokens = tokenize("counter")
        assert tokens == [Token.identifier("counter")]

    def test_identifier_with_underscore(self):
        tokens = tokenize("_my_var")
        assert tokens == [Token.identifier("_my_var")]

    def test_identifier_with_digits(self):
        """Identifiers can contain digits after the first character."""
        tokens = tokenize("loop2")
        assert tokens == [Token.identifier("loop2")]

    def test_tab_separates_tokens(self):
        tokens = tokenize("let\tx")
        assert [t.kind for t in tokens] == [TokenKind.KEYWORD, TokenKind.IDENTIFIER]

    def test_item_count_matches_whitespace_split(self):
        """Space-separated words and symbols give one token each."""
        source = "class Main { field int x , y ; method void run ( ) { } }"
        tokens = tokenize(source)
        assert len(tokens) == len(source.split())


# =============================================================================
# Keyword Tests
# =============================================================================

class TestKeywords:
    """Test keyword classification."""

    @pytest.mark.parametrize("word", sorted(KEYWORDS))
    def test_every_keyword(self, word):
        tokens = tokenize(word)
        assert len(tokens) == 1
        assert tokens[0].kind == TokenKind.KEYWORD
        assert tokens[0].value is KEYWORDS[word]

    @pytest.mark.parametrize("word", ["classy", "class_", "iffy", "returned", "doit"])
    def test_keyword_prefix_is_identifier(self, word):
        """Only whole-word matches are keywords."""
        assert tokenize(word) == [Token.identifier(word)]

    def test_keywords_are_case_sensitive(self):
        assert tokenize("Class") == [Token.identifier("Class")]

    def test_keyword_before_symbol(self):
        tokens = tokenize("return;")
        assert tokens == [Token.keyword(Keyword.RETURN), Token.symbol(";")]


# =============================================================================
# Symbol Tests
# =============================================================================

class TestSymbols:
    """Test symbol tokenization."""

    @pytest.mark.parametrize("char", sorted(SYMBOLS))
    def test_every_symbol(self, char):
        assert tokenize(char) == [Token.symbol(char)]

    def test_symbols_are_single_characters(self):
        """Adjacent symbols never combine into operators."""
        tokens = tokenize("<=")
        assert tokens == [Token.symbol("<"), Token.symbol("=")]

    def test_expression_without_spaces(self):
        tokens = tokenize("x+1")
        assert tokens == [
            Token.identifier("x"),
            Token.symbol("+"),
            Token.integer(1),
        ]

    def test_method_call(self):
        tokens = tokenize("do Output.printInt(a[i]);")
        assert [t.text for t in tokens] == [
            "do", "Output", ".", "printInt", "(", "a", "[", "i", "]", ")", ";",
        ]

    def test_less_than_payload_is_raw(self):
        """The lexer stores '<' unescaped; escaping is a rendering concern."""
        tokens = tokenize("<")
        assert tokens[0].value == "<"


# =============================================================================
# Integer Constant Tests
# =============================================================================

class TestIntegerConstants:
    """Test integer constant recognition."""

    def test_decimal(self):
        assert tokenize("12345") == [Token.integer(12345)]

    def test_zero(self):
        assert tokenize("0") == [Token.integer(0)]

    def test_leading_zeros(self):
        """Leading zeros do not change the value and are not preserved."""
        tokens = tokenize("007")
        assert tokens == [Token.integer(7)]
        assert tokens[0].text == "7"

    def test_maximum(self):
        assert tokenize("32767") == [Token.integer(32767)]

    def test_out_of_range(self):
        with pytest.raises(IntegerOutOfRangeError) as exc_info:
            tokenize("let x = 32768;")
        assert exc_info.value.literal == "32768"
        assert exc_info.value.location == SourceLocation("<test>", 1, 9)

    def test_very_long_literal(self):
        """A long digit run is rejected without converting it."""
        literal = "9" * 5000
        with pytest.raises(IntegerOutOfRangeError) as exc_info:
            tokenize(f"let x = {literal};")
        message = exc_info.value.message
        assert "(5000 digits)" in message
        assert literal not in message
        assert exc_info.value.location == SourceLocation("<test>", 1, 9)

    def test_leading_zeros_out_of_range(self):
        with pytest.raises(IntegerOutOfRangeError) as exc_info:
            tokenize("0" * 20 + "32768")
        assert exc_info.value.literal == "32768"

    def test_leading_zeros_in_range(self):
        assert tokenize("0" * 20 + "7") == [Token.integer(7)]

    def test_all_zeros(self):
        assert tokenize("0" * 40) == [Token.integer(0)]

    def test_digits_then_letters(self):
        """A digit run ends where letters begin."""
        tokens = tokenize("123abc")
        assert tokens == [Token.integer(123), Token.identifier("abc")]


# =============================================================================
# String Constant Tests
# =============================================================================

class TestStringConstants:
    """Test string constant tokenization."""

    def test_simple_string(self):
        tokens = tokenize('"hello world"')
        assert tokens == [Token.string("hello world")]

    def test_empty_string(self):
        assert tokenize('""') == [Token.string("")]

    def test_string_keeps_symbols(self):
        tokens = tokenize('"a < b & c"')
        assert tokens[0].value == "a < b & c"

    def test_string_keeps_inner_spacing(self):
        tokens = tokenize('"  two  spaces  "')
        assert tokens[0].value == "  two  spaces  "

    def test_string_keeps_comment_markers(self):
        tokens = tokenize('"http://example.com /* x */"')
        assert tokens == [Token.string("http://example.com /* x */")]

    def test_string_between_symbols(self):
        tokens = tokenize('f("x")')
        assert tokens == [
            Token.identifier("f"),
            Token.symbol("("),
            Token.string("x"),
            Token.symbol(")"),
        ]

    def test_unterminated_string(self):
        with pytest.raises(UnterminatedStringError) as exc_info:
            tokenize('"unterminated')
        assert exc_info.value.location == SourceLocation("<test>", 1, 1)

    def test_string_cannot_span_lines(self):
        with pytest.raises(UnterminatedStringError) as exc_info:
            tokenize('let s = "abc\ndef";')
        assert exc_info.value.location.line == 1

    def test_string_keeps_unicode_separators(self):
        """Only CR and LF end a line, so U+2028 and U+0085 stay in the string."""
        assert tokenize('"a\u2028b\x85c"') == [Token.string("a\u2028b\x85c")]

    def test_unterminated_string_location_accounts_for_indent(self):
        with pytest.raises(UnterminatedStringError) as exc_info:
            tokenize('  let s = "abc')
        assert exc_info.value.location == SourceLocation("<test>", 1, 11)

    def test_error_message_format(self):
        with pytest.raises(UnterminatedStringError) as exc_info:
            tokenize('let s = "abc')
        message = exc_info.value.message
        assert message.startswith("<test>:1:9: error: unterminated string constant")
        assert 'let s = "abc' in message
        assert "hint:" in message


# =============================================================================
# Invalid Character Tests
# =============================================================================

class TestInvalidCharacters:
    """Test characters that cannot be part of any token."""

    def test_hash(self):
        with pytest.raises(InvalidCharacterError) as exc_info:
            tokenize("#")
        assert exc_info.value.char == "#"

    def test_inside_word(self):
        with pytest.raises(InvalidCharacterError) as exc_info:
            tokenize("a#b")
        assert exc_info.value.char == "#"
        assert exc_info.value.location.column == 2

    def test_is_syntax_error(self):
        with pytest.raises(JackSyntaxError):
            tokenize("let $x = 1;")


# =============================================================================
# Cursor Contract Tests
# =============================================================================

class TestCursorContract:
    """Test has_next / next_token driven by an explicit cursor."""

    def test_has_next_false_for_delimiters_only(self):
        lexer = Lexer(preprocess("   \n  "))
        assert lexer.has_next(0) is False

    def test_next_token_returns_new_cursor(self):
        lexer = Lexer(preprocess("let x"))
        token, cursor = lexer.next_token(0)
        assert token == Token.keyword(Keyword.LET)
        assert cursor == 3

        token, cursor = lexer.next_token(cursor)
        assert token == Token.identifier("x")
        assert lexer.has_next(cursor) is False

    def test_next_token_does_not_mutate_lexer(self):
        """The same cursor always yields the same token."""
        lexer = Lexer(preprocess("while (true)"))
        assert lexer.next_token(0) == lexer.next_token(0)

    def test_next_token_past_end(self):
        lexer = Lexer(preprocess("x"))
        _, cursor = lexer.next_token(0)
        with pytest.raises(UnexpectedEndOfInputError):
            lexer.next_token(cursor)


# =============================================================================
# Location and End-to-End Tests
# =============================================================================

class TestLocations:
    """Test that tokens remember where they came from."""

    def test_token_location(self):
        tokens = tokenize("class Main {\n  field int x;\n}")
        field_token = tokens[3]
        assert field_token == Token.keyword(Keyword.FIELD)
        assert field_token.location == SourceLocation("<test>", 2, 3)

    def test_location_after_comment(self):
        tokens = tokenize("/** doc\n */\n\nvar")
        assert tokens[0].location.line == 4


class TestEndToEnd:
    """Full token sequences for small programs."""

    def test_main_class(self, main_source, main_tokens):
        assert tokenize(main_source) == main_tokens

    def test_line_comment_then_keyword(self):
        assert tokenize("// comment\nclass") == [Token.keyword(Keyword.CLASS)]

    def test_doc_comment_then_keyword(self):
        assert tokenize("/** doc\nmore\n*/\nclass") == [Token.keyword(Keyword.CLASS)]

    def test_tokens_on_adjacent_lines_stay_separate(self):
        tokens = tokenize("var\nint")
        assert tokens == [Token.keyword(Keyword.VAR), Token.keyword(Keyword.INT)]
