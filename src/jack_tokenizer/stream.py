"""
Token Stream
============

Forward iteration over a tokenized Jack source, in the shape a
recursive-descent parser expects:

    stream = TokenStream.from_source(source, "Main.jack")
    while stream.has_more():
        stream.advance()
        handle(stream.current)

All tokens are scanned up front, so a syntax error in the source is raised
when the stream is built rather than halfway through a parse. Because the
tokens are held in memory the stream also supports look-ahead with
``peek``, indexing, and ``reset`` for a second pass.
"""

from typing import Iterable, Iterator, Optional

from jack_tokenizer.errors import NoCurrentTokenError, UnexpectedEndOfInputError
from jack_tokenizer.lexer import Lexer
from jack_tokenizer.preprocessor import preprocess
from jack_tokenizer.tokens import Token


class TokenStream:
    """
    Buffered, forward-moving cursor over a token sequence.

    The stream starts before the first token: ``current`` is unavailable
    until ``advance`` has been called once.

    Attributes:
        tokens: The buffered token sequence
    """

    def __init__(self, tokens: Iterable[Token]):
        self.tokens: tuple[Token, ...] = tuple(tokens)

        # Index of the current token; -1 before the first advance()
        self._pos = -1

    @classmethod
    def from_source(
        cls,
        source: str,
        filename: str = "<input>",
        doc_comments_only: bool = False,
    ) -> "TokenStream":
        """Preprocess and tokenize source text into a stream."""
        buffer = preprocess(source, filename, doc_comments_only)
        return cls(Lexer(buffer).tokenize())

    # =========================================================================
    # Minimal Contract
    # =========================================================================

    def has_more(self) -> bool:
        """Check whether advance() can move to another token."""
        return self._pos + 1 < len(self.tokens)

    def advance(self) -> Token:
        """
        Move to the next token and return it.

        Raises:
            UnexpectedEndOfInputError: If no tokens remain
        """
        if not self.has_more():
            raise UnexpectedEndOfInputError(
                f"advance() called after the last of {len(self.tokens)} tokens"
            )
        self._pos += 1
        return self.tokens[self._pos]

    @property
    def current(self) -> Token:
        """
        The token most recently moved to by advance().

        Raises:
            NoCurrentTokenError: If advance() has not been called
        """
        if self._pos < 0:
            raise NoCurrentTokenError()
        return self.tokens[self._pos]

    # =========================================================================
    # Buffered Access
    # =========================================================================

    @property
    def position(self) -> int:
        """Index of the current token, or -1 before the first advance()."""
        return self._pos

    def peek(self, offset: int = 1) -> Optional[Token]:
        """
        Look at the token offset places after the current one.

        Returns None when that position is outside the stream.
        """
        pos = self._pos + offset
        if 0 <= pos < len(self.tokens):
            return self.tokens[pos]
        return None

    def reset(self) -> None:
        """Rewind to before the first token."""
        self._pos = -1

    def __len__(self) -> int:
        return len(self.tokens)

    def __getitem__(self, index: int) -> Token:
        return self.tokens[index]

    def __iter__(self) -> Iterator[Token]:
        """Iterate over all tokens without moving the cursor."""
        return iter(self.tokens)

    def __repr__(self) -> str:
        return f"TokenStream({len(self.tokens)} tokens, position={self._pos})"
