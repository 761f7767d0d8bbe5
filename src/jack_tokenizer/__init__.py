"""
Jack Tokenizer - Lexical Analyzer for the Jack Language
=======================================================

This package converts Jack source text into a sequence of classified
tokens (keywords, symbols, integer constants, string constants and
identifiers) and renders them in the <tokens> report format.

Main Components
---------------
- **preprocessor**: removes comments and joins lines into a SourceBuffer
- **lexer**: classifies tokens with a maximal-munch state machine
- **tokens**: the Token value type and the Jack vocabulary
- **stream**: TokenStream, a parser-facing cursor over the tokens
- **serializer**: renders tokens as <tokens> ... </tokens>
- **cli**: the ``jacktok`` command-line tool

Quick Start
-----------
Tokenize a string:
    >>> from jack_tokenizer import tokenize
    >>> tokenize('let x = 1;')
    [Token(KEYWORD, 'let'), Token(IDENTIFIER, 'x'), Token(SYMBOL, '='), Token(INTEGER_CONSTANT, 1), Token(SYMBOL, ';')]

Write a report next to a source file:
    >>> from jack_tokenizer import JackTokenizer
    >>> JackTokenizer().write_file("Main.jack")
    PosixPath('MainT.xml')

Or use the command-line tool:
    $ jacktok Main.jack
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from jack_tokenizer.errors import (
    JackError,
    SourceLocation,
    JackSyntaxError,
    UnterminatedCommentError,
    UnterminatedStringError,
    IntegerOutOfRangeError,
    InvalidCharacterError,
    TokenStreamError,
    UnexpectedEndOfInputError,
    NoCurrentTokenError,
)
from jack_tokenizer.tokens import (
    Token,
    TokenKind,
    Keyword,
    KEYWORDS,
    SYMBOLS,
    MAX_INTEGER,
)
from jack_tokenizer.preprocessor import Preprocessor, SourceBuffer, preprocess
from jack_tokenizer.lexer import Lexer, LexerState
from jack_tokenizer.stream import TokenStream
from jack_tokenizer.serializer import render, render_token, escape_symbol
from jack_tokenizer.tokenizer import (
    JackTokenizer,
    TokenizerOptions,
    TokenizeResult,
    tokenize,
    tokenize_file,
)

__all__ = [
    "__version__",
    # Errors
    "JackError",
    "SourceLocation",
    "JackSyntaxError",
    "UnterminatedCommentError",
    "UnterminatedStringError",
    "IntegerOutOfRangeError",
    "InvalidCharacterError",
    "TokenStreamError",
    "UnexpectedEndOfInputError",
    "NoCurrentTokenError",
    # Token model
    "Token",
    "TokenKind",
    "Keyword",
    "KEYWORDS",
    "SYMBOLS",
    "MAX_INTEGER",
    # Pipeline
    "Preprocessor",
    "SourceBuffer",
    "preprocess",
    "Lexer",
    "LexerState",
    "TokenStream",
    "render",
    "render_token",
    "escape_symbol",
    "JackTokenizer",
    "TokenizerOptions",
    "TokenizeResult",
    "tokenize",
    "tokenize_file",
]
