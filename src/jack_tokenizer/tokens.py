"""
Jack Token Model
================

Tokens are the classified lexical units produced by the lexer. Each token
has exactly one kind and one payload whose type is fixed by that kind:

| Kind             | Payload type | Example            |
|------------------|--------------|--------------------|
| KEYWORD          | Keyword      | Keyword.CLASS      |
| SYMBOL           | str (1 char) | "{"                |
| INTEGER_CONSTANT | int          | 42                 |
| STRING_CONSTANT  | str          | "hello world"      |
| IDENTIFIER       | str          | "Main"             |

The value of each TokenKind member is the tag name used when tokens are
rendered to the <tokens> report (see serializer.py).

Example Usage
-------------
>>> from jack_tokenizer.tokens import Token, Keyword
>>> Token.keyword(Keyword.CLASS)
Token(KEYWORD, 'class')
>>> Token.integer(7) == Token.integer(7)
True
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional
import re

from jack_tokenizer.errors import SourceLocation


# =============================================================================
# Token Kind Enumeration
# =============================================================================

class TokenKind(Enum):
    """Lexical category of a token. Values are the report tag names."""

    KEYWORD = "keyword"
    SYMBOL = "symbol"
    INTEGER_CONSTANT = "integerConstant"
    STRING_CONSTANT = "stringConstant"
    IDENTIFIER = "identifier"

    @property
    def tag(self) -> str:
        """Tag name used in the <tokens> report."""
        return self.value


# =============================================================================
# Keyword Vocabulary
# =============================================================================

class Keyword(Enum):
    """The closed set of Jack reserved words."""

    # === Program structure ===
    CLASS = "class"
    CONSTRUCTOR = "constructor"
    FUNCTION = "function"
    METHOD = "method"
    FIELD = "field"
    STATIC = "static"
    VAR = "var"

    # === Types ===
    INT = "int"
    CHAR = "char"
    BOOLEAN = "boolean"
    VOID = "void"

    # === Constants ===
    TRUE = "true"
    FALSE = "false"
    NULL = "null"
    THIS = "this"

    # === Statements ===
    LET = "let"
    DO = "do"
    IF = "if"
    ELSE = "else"
    WHILE = "while"
    RETURN = "return"

    def __str__(self) -> str:
        return self.value


# Map keyword strings to their enum members for constant-time lookup
KEYWORDS: dict[str, Keyword] = {keyword.value: keyword for keyword in Keyword}

# Single-character punctuation tokens
SYMBOLS: frozenset[str] = frozenset("{}()[].,;+-*/&|<>=~")

# Largest integer constant (15-bit magnitude of the 16-bit word)
MAX_INTEGER = 32767

IDENTIFIER_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single Jack token.

    The payload type is checked against the kind on construction, so a
    Token can never carry a value that is meaningless for its kind.
    The source location is informational only and is excluded from
    equality and hashing.

    Attributes:
        kind: The TokenKind classification
        value: The payload (Keyword, str or int depending on kind)
        location: Position of the token's first character, if known
    """
    kind: TokenKind
    value: Keyword | str | int
    location: Optional[SourceLocation] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        _validate_payload(self.kind, self.value)

    def __repr__(self) -> str:
        """Format token for debugging output."""
        if self.kind is TokenKind.INTEGER_CONSTANT:
            return f"Token({self.kind.name}, {self.value!r})"
        return f"Token({self.kind.name}, {self.text!r})"

    @property
    def text(self) -> str:
        """The payload as it appears in source (string content without quotes)."""
        if self.kind is TokenKind.KEYWORD:
            return self.value.value
        return str(self.value)

    # =========================================================================
    # Named Constructors
    # =========================================================================

    @classmethod
    def keyword(
        cls, keyword: Keyword, location: Optional[SourceLocation] = None
    ) -> "Token":
        return cls(TokenKind.KEYWORD, keyword, location)

    @classmethod
    def symbol(cls, char: str, location: Optional[SourceLocation] = None) -> "Token":
        return cls(TokenKind.SYMBOL, char, location)

    @classmethod
    def integer(cls, value: int, location: Optional[SourceLocation] = None) -> "Token":
        return cls(TokenKind.INTEGER_CONSTANT, value, location)

    @classmethod
    def string(cls, value: str, location: Optional[SourceLocation] = None) -> "Token":
        return cls(TokenKind.STRING_CONSTANT, value, location)

    @classmethod
    def identifier(
        cls, name: str, location: Optional[SourceLocation] = None
    ) -> "Token":
        return cls(TokenKind.IDENTIFIER, name, location)


def is_identifier(text: str) -> bool:
    """Return True if text is a valid Jack identifier (keywords excluded)."""
    return IDENTIFIER_PATTERN.fullmatch(text) is not None and text not in KEYWORDS


def _validate_payload(kind: TokenKind, value: object) -> None:
    """Raise ValueError if value is not a valid payload for kind."""
    if kind is TokenKind.KEYWORD:
        valid = isinstance(value, Keyword)
    elif kind is TokenKind.SYMBOL:
        valid = isinstance(value, str) and value in SYMBOLS
    elif kind is TokenKind.INTEGER_CONSTANT:
        # bool is an int subclass but never a Jack integer
        valid = (
            isinstance(value, int)
            and not isinstance(value, bool)
            and 0 <= value <= MAX_INTEGER
        )
    elif kind is TokenKind.STRING_CONSTANT:
        valid = isinstance(value, str) and not any(c in value for c in '"\r\n')
    elif kind is TokenKind.IDENTIFIER:
        valid = isinstance(value, str) and is_identifier(value)
    else:
        valid = False

    if not valid:
        raise ValueError(f"invalid payload {value!r} for {kind.name} token")
