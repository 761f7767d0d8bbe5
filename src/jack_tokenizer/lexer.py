"""
Jack Lexer (Tokenizer)
======================

This module scans a preprocessed SourceBuffer and classifies each maximal
token. Scanning is maximal munch, driven by the first character after a
run of delimiters:

| First character   | State      | Token produced                   |
|-------------------|------------|----------------------------------|
| symbol set member | IN_SYMBOL  | SYMBOL (one character)           |
| "                 | IN_STRING  | STRING_CONSTANT (quotes dropped) |
| decimal digit     | IN_NUMBER  | INTEGER_CONSTANT (0..32767)      |
| anything else     | IN_WORD    | KEYWORD or IDENTIFIER            |

The machine returns to SKIPPING_DELIMITERS after every token. Reaching the
end of the buffer while skipping delimiters ends tokenization cleanly;
reaching it inside a string constant is an error.

The lexer never moves a cursor itself: ``next_token`` takes a cursor and
returns the token together with the cursor just past it, so the same
Lexer can be queried from any offset.

Example Usage
-------------
>>> from jack_tokenizer.preprocessor import preprocess
>>> from jack_tokenizer.lexer import Lexer
>>> lexer = Lexer(preprocess('let x = 5;'))
>>> for token in lexer.tokenize():
...     print(token)
Token(KEYWORD, 'let')
Token(IDENTIFIER, 'x')
Token(SYMBOL, '=')
Token(INTEGER_CONSTANT, 5)
Token(SYMBOL, ';')
"""

import logging
from enum import Enum, auto
from typing import Callable, Iterator
import string

from jack_tokenizer.errors import (
    IntegerOutOfRangeError,
    InvalidCharacterError,
    UnexpectedEndOfInputError,
    UnterminatedStringError,
)
from jack_tokenizer.preprocessor import WHITESPACE, SourceBuffer
from jack_tokenizer.tokens import (
    IDENTIFIER_PATTERN,
    KEYWORDS,
    MAX_INTEGER,
    SYMBOLS,
    Token,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Scanner States
# =============================================================================

class LexerState(Enum):
    """States of the token classification machine."""

    SKIPPING_DELIMITERS = auto()
    IN_SYMBOL = auto()
    IN_STRING = auto()
    IN_NUMBER = auto()
    IN_WORD = auto()


# =============================================================================
# Lexer Implementation
# =============================================================================

class Lexer:
    """
    Tokenizes a preprocessed Jack SourceBuffer.

    Usage:
        lexer = Lexer(buffer)
        tokens = list(lexer.tokenize())

    Or, driving the cursor by hand:
        cursor = 0
        while lexer.has_next(cursor):
            token, cursor = lexer.next_token(cursor)

    Attributes:
        buffer: The SourceBuffer being tokenized
    """

    # Whitespace that separates tokens; preprocessing inserts spaces
    DELIMITERS = frozenset(WHITESPACE)

    QUOTE = '"'

    DIGITS = frozenset(string.digits)

    MAX_DIGITS = len(str(MAX_INTEGER))

    def __init__(self, buffer: SourceBuffer):
        self.buffer = buffer
        self._text = buffer.text

        self._scanners: dict[LexerState, Callable[[int], tuple[Token, int]]] = {
            LexerState.IN_SYMBOL: self._scan_symbol,
            LexerState.IN_STRING: self._scan_string,
            LexerState.IN_NUMBER: self._scan_number,
            LexerState.IN_WORD: self._scan_word,
        }

    def has_next(self, cursor: int) -> bool:
        """Check whether any token starts at or after cursor."""
        return self._skip_delimiters(cursor) < len(self._text)

    def next_token(self, cursor: int) -> tuple[Token, int]:
        """
        Scan the token starting at or after cursor.

        Args:
            cursor: Buffer offset to scan from

        Returns:
            The token and the offset just past it

        Raises:
            UnexpectedEndOfInputError: If only delimiters remain
            JackSyntaxError: If the source text is malformed
        """
        start = self._skip_delimiters(cursor)
        if start >= len(self._text):
            raise UnexpectedEndOfInputError(
                f"no token after offset {cursor} in {self.buffer.filename}"
            )

        state = self._classify(self._text[start])
        return self._scanners[state](start)

    def tokenize(self) -> Iterator[Token]:
        """
        Generate every token in the buffer.

        Yields:
            Token objects in source order

        Raises:
            JackSyntaxError: If invalid source is encountered
        """
        cursor = 0
        count = 0
        while self.has_next(cursor):
            token, cursor = self.next_token(cursor)
            count += 1
            yield token

        logger.debug(f"Tokenized {self.buffer.filename}: {count} tokens")

    # =========================================================================
    # State Transitions
    # =========================================================================

    def _skip_delimiters(self, cursor: int) -> int:
        """Return the first offset at or after cursor that is not a delimiter."""
        while cursor < len(self._text) and self._text[cursor] in self.DELIMITERS:
            cursor += 1
        return cursor

    def _classify(self, char: str) -> LexerState:
        """Choose the scanning state for a token starting with char."""
        if char in SYMBOLS:
            return LexerState.IN_SYMBOL
        if char == self.QUOTE:
            return LexerState.IN_STRING
        if char in self.DIGITS:
            return LexerState.IN_NUMBER
        return LexerState.IN_WORD

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def _scan_symbol(self, start: int) -> tuple[Token, int]:
        """Scan a one-character symbol."""
        return Token.symbol(self._text[start], self.buffer.location(start)), start + 1

    def _scan_string(self, start: int) -> tuple[Token, int]:
        """
        Scan a string constant.

        The content runs from after the opening quote up to the next quote.
        A string must close on its own line, so meeting an inserted line
        break is treated the same as running off the end of the buffer.
        """
        cursor = start + 1  # skip opening quote

        while cursor < len(self._text):
            if self.buffer.is_line_break(cursor):
                break
            if self._text[cursor] == self.QUOTE:
                value = self._text[start + 1:cursor]
                return Token.string(value, self.buffer.location(start)), cursor + 1
            cursor += 1

        raise UnterminatedStringError(*self._context(start))

    def _scan_number(self, start: int) -> tuple[Token, int]:
        """Scan a maximal run of decimal digits."""
        cursor = start
        while cursor < len(self._text) and self._text[cursor] in self.DIGITS:
            cursor += 1

        # Leading zeros carry no value; past the maximum's width the run is
        # out of range without converting it
        digits = self._text[start:cursor].lstrip("0") or "0"
        if len(digits) > self.MAX_DIGITS or int(digits) > MAX_INTEGER:
            raise IntegerOutOfRangeError(digits, MAX_INTEGER, *self._context(start))

        return Token.integer(int(digits), self.buffer.location(start)), cursor

    def _scan_word(self, start: int) -> tuple[Token, int]:
        """
        Scan a keyword or identifier.

        The word extends to the next delimiter or symbol. Keywords are
        matched by exact lookup, so 'classy' is an identifier.
        """
        cursor = start
        while (
            cursor < len(self._text)
            and self._text[cursor] not in self.DELIMITERS
            and self._text[cursor] not in SYMBOLS
        ):
            cursor += 1

        word = self._text[start:cursor]
        location = self.buffer.location(start)

        keyword = KEYWORDS.get(word)
        if keyword is not None:
            return Token.keyword(keyword, location), cursor

        if IDENTIFIER_PATTERN.fullmatch(word) is None:
            bad = start + self._first_invalid_index(word)
            raise InvalidCharacterError(self._text[bad], *self._context(bad))

        return Token.identifier(word, location), cursor

    # =========================================================================
    # Utility Methods
    # =========================================================================

    @staticmethod
    def _first_invalid_index(word: str) -> int:
        """Index of the first character that breaks identifier syntax."""
        for index, char in enumerate(word):
            if char == "_" or (char.isascii() and char.isalpha()):
                continue
            if index > 0 and char.isascii() and char.isdigit():
                continue
            return index
        return 0

    def _context(self, offset: int):
        """Location and original source line for an error at offset."""
        location = self.buffer.location(offset)
        return location, self.buffer.source_line(location.line)
