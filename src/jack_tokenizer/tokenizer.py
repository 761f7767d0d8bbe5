"""
Jack Tokenizer Main Module
==========================

This module provides the main tokenizer interface. It runs the complete
pipeline for one source file:

    Source → Preprocess → Lex → Render → <stem>T.xml

Usage
-----
Command line:
    $ jacktok Main.jack          # writes MainT.xml

Programmatic:
    >>> from jack_tokenizer import tokenize
    >>> [token.text for token in tokenize('do Output.printInt(1);')]
    ['do', 'Output', '.', 'printInt', '(', '1', ')', ';']

Error Handling
--------------
The first malformed construct stops tokenization with a JackSyntaxError
that names the file, line and column. The whole report is rendered in
memory before the output file is opened, so a failed run never leaves a
partial report behind.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from jack_tokenizer.lexer import Lexer
from jack_tokenizer.preprocessor import Preprocessor
from jack_tokenizer.serializer import render
from jack_tokenizer.stream import TokenStream
from jack_tokenizer.tokens import Token

logger = logging.getLogger(__name__)


@dataclass
class TokenizerOptions:
    """
    Tokenizer configuration options.

    Attributes:
        output_suffix: Appended to the input's stem to name the report
                       (Main.jack -> MainT.xml)
        doc_comments_only: Only '/**' opens a block comment; plain '/*'
                           is tokenized as two symbols
        encoding: Text encoding for reading source and writing reports
    """
    output_suffix: str = "T.xml"
    doc_comments_only: bool = False
    encoding: str = "utf-8"


@dataclass
class TokenizeResult:
    """
    Result of tokenizing one source.

    Attributes:
        filename: Source filename used in diagnostics
        tokens: The tokens in source order
        line_count: Number of physical lines in the source
    """
    filename: str
    tokens: list[Token] = field(default_factory=list)
    line_count: int = 0

    @property
    def token_count(self) -> int:
        return len(self.tokens)

    @property
    def xml(self) -> str:
        """The rendered <tokens> report."""
        return render(self.tokens)

    def stream(self) -> TokenStream:
        """A fresh TokenStream over the tokens."""
        return TokenStream(self.tokens)


class JackTokenizer:
    """
    Jack tokenizer front end.

    Example:
        tokenizer = JackTokenizer()
        output = tokenizer.write_file("Main.jack")   # MainT.xml

    Attributes:
        options: Tokenizer configuration options
    """

    def __init__(self, options: Optional[TokenizerOptions] = None):
        self.options = options or TokenizerOptions()

    def tokenize_source(self, source: str, filename: str = "<input>") -> TokenizeResult:
        """
        Tokenize Jack source text.

        Raises:
            JackSyntaxError: If the source is malformed
        """
        preprocessor = Preprocessor(
            source,
            filename,
            doc_comments_only=self.options.doc_comments_only,
        )
        buffer = preprocessor.process()
        tokens = list(Lexer(buffer).tokenize())

        return TokenizeResult(
            filename=filename,
            tokens=tokens,
            line_count=len(buffer.source_lines),
        )

    def tokenize_file(self, filepath: str | Path) -> TokenizeResult:
        """
        Tokenize a Jack source file.

        Raises:
            FileNotFoundError: If the source file does not exist
            OSError: If the file cannot be read
            JackSyntaxError: If the source is malformed
        """
        path = Path(filepath)
        if not path.is_file():
            raise FileNotFoundError(f"Source file not found: {filepath}")

        logger.debug(f"Reading {path}")
        source = path.read_text(encoding=self.options.encoding)
        return self.tokenize_source(source, str(path))

    def output_path(self, filepath: str | Path) -> Path:
        """Report path for a source file: same directory, stem + suffix."""
        path = Path(filepath)
        return path.with_name(path.stem + self.options.output_suffix)

    def write_file(
        self,
        filepath: str | Path,
        output: Optional[str | Path] = None,
    ) -> Path:
        """
        Tokenize a source file and write its report.

        Args:
            filepath: Path to the Jack source file
            output: Report path (default: derived with output_path())

        Returns:
            The path the report was written to

        Raises:
            FileNotFoundError: If the source file does not exist
            OSError: If reading or writing fails
            JackSyntaxError: If the source is malformed
        """
        result = self.tokenize_file(filepath)
        target = Path(output) if output is not None else self.output_path(filepath)
        return self.write_report(result, target)

    def write_report(self, result: TokenizeResult, target: str | Path) -> Path:
        """
        Render a result and write it to target.

        The report is written to a temporary file beside target and then
        renamed over it, so target either keeps its old contents or holds
        the complete new report.

        Raises:
            OSError: If writing fails; target is left as it was
        """
        text = result.xml
        target = Path(target)
        partial = target.with_name(f".{target.name}.tmp")
        try:
            partial.write_text(text, encoding=self.options.encoding)
            os.replace(partial, target)
        except OSError:
            partial.unlink(missing_ok=True)
            raise

        logger.debug(f"Wrote {result.token_count} tokens to {target}")
        return target


def tokenize(source: str, filename: str = "<input>") -> list[Token]:
    """
    Tokenize Jack source text with default options.

    Raises:
        JackSyntaxError: If the source is malformed
    """
    return JackTokenizer().tokenize_source(source, filename).tokens


def tokenize_file(filepath: str | Path) -> list[Token]:
    """
    Tokenize a Jack source file with default options.

    Raises:
        FileNotFoundError: If the source file does not exist
        JackSyntaxError: If the source is malformed
    """
    return JackTokenizer().tokenize_file(filepath).tokens
