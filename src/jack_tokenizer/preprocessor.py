"""
Jack Preprocessor
=================

This module removes comments and line structure from Jack source text,
producing a single SourceBuffer that the lexer scans with a cursor.

Processing Rules
----------------
The preprocessor works one physical line at a time:

1. Surrounding whitespace is trimmed.
2. ``//`` outside a string constant truncates the line.
3. ``/*`` outside a string constant opens a block comment. A comment that
   closes on the same line is replaced by a single space. Otherwise the
   text before the opener is kept and the following lines are discarded
   up to and including the line holding the closing ``*/``.
4. Every kept line is followed by one space, so tokens on adjacent lines
   can never run together once the line breaks are gone.

Both ``/* ... */`` and ``/** ... */`` comments are removed by default.
With ``doc_comments_only=True`` only ``/**`` opens a block comment.

Position Tracking
-----------------
Each character of the buffer remembers the line and column it came from,
so the lexer can report errors against the original text. The spaces
inserted at line ends are recorded in ``SourceBuffer.line_breaks``.

Example
-------
>>> from jack_tokenizer.preprocessor import preprocess
>>> buffer = preprocess('// header\\nclass Main { } /** doc */')
>>> buffer.text
' class Main { }   '
>>> buffer.location(1)
SourceLocation(filename='<input>', line=2, column=1)
"""

import logging
import re
from dataclasses import dataclass
from typing import Optional

from jack_tokenizer.errors import SourceLocation, UnterminatedCommentError

logger = logging.getLogger(__name__)

# Character inserted in place of line breaks and inline comments
DELIMITER = " "

# Characters trimmed from line ends; other Unicode spaces are kept as text
WHITESPACE = " \t\r\f\v"

# Only ASCII line terminators end a line
LINE_BREAK = re.compile(r"\r\n|\r|\n")


# =============================================================================
# Source Buffer
# =============================================================================

@dataclass(frozen=True)
class SourceBuffer:
    """
    Cleaned source text with a map back to the original positions.

    Attributes:
        text: Comment-free text with lines joined by single spaces
        filename: Source filename for error reporting
        lines: Original line number of each character in text
        columns: Original column number of each character in text
        line_breaks: Offsets of the spaces inserted at line ends
        source_lines: The original physical lines, for error context
    """
    text: str
    filename: str
    lines: tuple[int, ...]
    columns: tuple[int, ...]
    line_breaks: frozenset[int]
    source_lines: tuple[str, ...]

    def __len__(self) -> int:
        return len(self.text)

    def is_line_break(self, offset: int) -> bool:
        """Return True if offset holds a space inserted at a line end."""
        return offset in self.line_breaks

    def location(self, offset: int) -> SourceLocation:
        """
        Map a buffer offset to its position in the original source.

        Offsets at or past the end of the buffer map to the position
        just after the last character.
        """
        if offset < len(self.text):
            return SourceLocation(self.filename, self.lines[offset], self.columns[offset])
        if self.text:
            return SourceLocation(self.filename, self.lines[-1], self.columns[-1] + 1)
        return SourceLocation(self.filename, max(len(self.source_lines), 1), 1)

    def source_line(self, line: int) -> Optional[str]:
        """Get an original source line (1-indexed) for error reporting."""
        if 0 < line <= len(self.source_lines):
            return self.source_lines[line - 1]
        return None


# =============================================================================
# Preprocessor
# =============================================================================

class Preprocessor:
    """
    Strips comments and joins lines into a SourceBuffer.

    Usage:
        pp = Preprocessor(source_text, "Main.jack")
        buffer = pp.process()

    Attributes:
        source: Original source code
        filename: Source filename for error reporting
        doc_comments_only: Only treat '/**' as a block comment opener
    """

    LINE_COMMENT = "//"
    BLOCK_COMMENT_OPEN = "/*"
    DOC_COMMENT_OPEN = "/**"
    BLOCK_COMMENT_CLOSE = "*/"

    def __init__(
        self,
        source: str,
        filename: str = "<input>",
        doc_comments_only: bool = False,
    ):
        self.source = source
        self.filename = filename
        self.doc_comments_only = doc_comments_only

    def process(self) -> SourceBuffer:
        """
        Build the SourceBuffer for the source text.

        Raises:
            UnterminatedCommentError: If input ends inside a block comment
        """
        source_lines = LINE_BREAK.split(self.source)
        if source_lines[-1] == "":
            source_lines.pop()

        chars: list[str] = []
        lines: list[int] = []
        columns: list[int] = []
        line_breaks: set[int] = set()

        # Location of the opener while inside a multi-line block comment
        comment_start: Optional[SourceLocation] = None
        discarded = 0

        for line_number, raw_line in enumerate(source_lines, start=1):
            if comment_start is not None:
                discarded += 1
                close = raw_line.find(self.BLOCK_COMMENT_CLOSE)
                if close != -1:
                    comment_start = None
                    trailing = raw_line[close + len(self.BLOCK_COMMENT_CLOSE):]
                    if trailing.strip(WHITESPACE):
                        logger.warning(
                            f"{self.filename}:{line_number}: text after '*/' "
                            f"on a comment's closing line is ignored"
                        )
                continue

            stripped = raw_line.strip(WHITESPACE)
            indent = len(raw_line) - len(raw_line.lstrip(WHITESPACE))

            kept, open_index = self._clean_line(stripped)
            for index, char in kept:
                chars.append(char)
                lines.append(line_number)
                columns.append(indent + index + 1)

            if open_index is not None:
                comment_start = SourceLocation(
                    self.filename, line_number, indent + open_index + 1
                )
                if not kept:
                    discarded += 1

            # Line-end delimiter sits one column past the last character
            line_breaks.add(len(chars))
            chars.append(DELIMITER)
            lines.append(line_number)
            columns.append(len(raw_line.rstrip(WHITESPACE)) + 1)

        if comment_start is not None:
            raise UnterminatedCommentError(
                comment_start,
                source_lines[comment_start.line - 1],
            )

        logger.debug(
            f"Preprocessed {self.filename}: {len(source_lines)} lines, "
            f"{discarded} comment lines discarded, {len(chars)} characters"
        )

        return SourceBuffer(
            text="".join(chars),
            filename=self.filename,
            lines=tuple(lines),
            columns=tuple(columns),
            line_breaks=frozenset(line_breaks),
            source_lines=tuple(source_lines),
        )

    def _clean_line(self, text: str) -> tuple[list[tuple[int, str]], Optional[int]]:
        """
        Remove comments from a single trimmed line.

        Returns:
            The kept (index, char) pairs, and the index of a block comment
            opener that is not closed on this line (None if there is none)
        """
        kept: list[tuple[int, str]] = []
        in_string = False
        i = 0

        while i < len(text):
            char = text[i]

            if char == '"':
                in_string = not in_string
            elif not in_string:
                if text.startswith(self.LINE_COMMENT, i):
                    break

                if self._opens_block_comment(text, i):
                    close = text.find(
                        self.BLOCK_COMMENT_CLOSE, i + len(self.BLOCK_COMMENT_OPEN)
                    )
                    if close == -1:
                        return kept, i
                    kept.append((i, DELIMITER))
                    i = close + len(self.BLOCK_COMMENT_CLOSE)
                    continue

            kept.append((i, char))
            i += 1

        return kept, None

    def _opens_block_comment(self, text: str, index: int) -> bool:
        """Check whether a block comment starts at index."""
        if self.doc_comments_only:
            return text.startswith(self.DOC_COMMENT_OPEN, index)
        return text.startswith(self.BLOCK_COMMENT_OPEN, index)


def preprocess(
    source: str,
    filename: str = "<input>",
    doc_comments_only: bool = False,
) -> SourceBuffer:
    """
    Convenience function to preprocess Jack source.

    Args:
        source: Jack source code
        filename: Source filename for error messages
        doc_comments_only: Only treat '/**' as a block comment opener

    Returns:
        The cleaned SourceBuffer
    """
    return Preprocessor(source, filename, doc_comments_only).process()
