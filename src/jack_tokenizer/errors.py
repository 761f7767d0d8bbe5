"""
Jack Tokenizer Error Hierarchy
==============================

This module defines the exception hierarchy for the Jack tokenizer.
All exceptions inherit from JackError, allowing callers to catch every
tokenizer-related error with a single except clause if desired.

Exception Hierarchy
-------------------
JackError (base)
├── JackSyntaxError - malformed source text
│   ├── UnterminatedCommentError - block comment never closed
│   ├── UnterminatedStringError - missing closing quote
│   ├── IntegerOutOfRangeError - integer constant above 32767
│   └── InvalidCharacterError - character that cannot start or continue a token
└── TokenStreamError - misuse of the TokenStream contract
    ├── UnexpectedEndOfInputError - advance() past the last token
    └── NoCurrentTokenError - current read before the first advance()

File access problems are reported with the built-in FileNotFoundError
and OSError; the command-line tool maps them to exit codes.

Error Message Format
--------------------
Syntax errors carry a source location and follow this format:

    filename:line:column: error: description
        source_line_text
            ^ (pointer to error location)
    hint: suggestion for fixing

Example:
    Main.jack:3:17: error: unterminated string constant
        let s = "hello;
                ^
    hint: add closing '"' on the same line
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class JackError(Exception):
    """
    Base exception for all Jack tokenizer errors.

        try:
            tokens = tokenize_file("Main.jack")
        except JackError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Syntax Errors (Preprocessor and Lexer)
# =============================================================================

class JackSyntaxError(JackError):
    """
    Error in Jack source text found while preprocessing or tokenizing.

    Attributes:
        message: The error description
        location: Where in the source the error occurred
        hint: A suggestion for fixing the error
        source_line: The original source text at the error location
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            Main.jack:4:13: error: integer constant 40000 out of range
                let x = 40000;
                        ^
            hint: integer constants must be between 0 and 32767
        """
        parts = []

        # Location prefix
        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        # Source context with caret pointer
        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class UnterminatedCommentError(JackSyntaxError):
    """
    Block comment opened but never closed before the end of input.

    Example:
        /** Computes the sum
         * of two numbers.
        (end of file)
    """

    def __init__(
        self,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        super().__init__(
            "unterminated block comment",
            location=location,
            hint="add closing */ to terminate the comment",
            source_line=source_line,
        )


class UnterminatedStringError(JackSyntaxError):
    """
    String constant not closed before the end of its line.

    Jack string constants cannot span lines, so reaching a line break
    inside a string is the same failure as reaching the end of input.
    """

    def __init__(
        self,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        super().__init__(
            "unterminated string constant",
            location=location,
            hint="add closing '\"' on the same line",
            source_line=source_line,
        )


class IntegerOutOfRangeError(JackSyntaxError):
    """
    Integer constant larger than the 16-bit signed maximum.

    The literal is kept as text because an out-of-range run of digits
    can be arbitrarily long. Long literals are shortened in the message.
    """

    def __init__(
        self,
        literal: str,
        maximum: int,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.literal = literal
        self.maximum = maximum
        super().__init__(
            f"integer constant {_shorten_literal(literal)} out of range",
            location=location,
            hint=f"integer constants must be between 0 and {maximum}",
            source_line=source_line,
        )


def _shorten_literal(literal: str, limit: int = 12) -> str:
    """Abbreviate long digit runs as '123456...789 (5000 digits)'."""
    if len(literal) <= limit:
        return literal
    return f"{literal[:6]}...{literal[-3:]} ({len(literal)} digits)"


class InvalidCharacterError(JackSyntaxError):
    """
    Character that is not part of any Jack token.

    Raised for characters outside the symbol set that also cannot
    appear in an identifier, such as '#', '$' or '!'.
    """

    def __init__(
        self,
        char: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.char = char
        super().__init__(
            f"invalid character '{char}' (0x{ord(char):02X})",
            location=location,
            source_line=source_line,
        )


# =============================================================================
# TokenStream Contract Errors
# =============================================================================

class TokenStreamError(JackError):
    """
    Base exception for TokenStream misuse.

    These errors indicate a bug in the calling code rather than a
    problem with the source being tokenized.
    """
    pass


class UnexpectedEndOfInputError(TokenStreamError):
    """advance() or next_token() called with no tokens remaining."""

    def __init__(self, message: str = "no more tokens in input"):
        super().__init__(message)


class NoCurrentTokenError(TokenStreamError):
    """current read before any token has been advanced to."""

    def __init__(self, message: str = "advance() has not been called yet"):
        super().__init__(message)
