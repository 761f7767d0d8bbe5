"""
Jack Tokenizer Command-Line Interface
=====================================

This package provides the command-line tool for the tokenizer:

- **jacktok**: tokenizes a Jack source file into a <tokens> report

The tool is a Click-based CLI application with help and error reporting.
"""

__all__ = ["jacktok"]
