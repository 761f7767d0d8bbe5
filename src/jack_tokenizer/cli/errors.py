"""
CLI Error Handling
==================

Maps exceptions raised while tokenizing to messages and exit codes.
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click

from jack_tokenizer.errors import JackError, JackSyntaxError


class ExitCode(IntEnum):
    """Standard exit codes for CLI tools."""
    SUCCESS = 0
    TOKENIZE_ERROR = 1   # Malformed source or report write failure
    INVALID_ARGS = 2     # Invalid arguments, missing or unreadable input
    INTERNAL_ERROR = 3   # Unexpected internal error


def handle_cli_exception(
    error: Exception,
    verbose: bool = False,
    reading: bool = True,
) -> NoReturn:
    """
    Report an exception on stderr and exit with the matching code.

    Args:
        error: The exception that was raised
        verbose: If True, print full traceback for internal errors
        reading: True if the failure happened before the report was written

    Raises:
        SystemExit: Always exits with an appropriate exit code
    """
    if isinstance(error, JackSyntaxError):
        # Already formatted as "file:line:col: error: ..."
        click.echo(str(error), err=True)
        sys.exit(ExitCode.TOKENIZE_ERROR)

    elif isinstance(error, JackError):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.TOKENIZE_ERROR)

    elif isinstance(error, (FileNotFoundError, PermissionError, UnicodeDecodeError)) and reading:
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    elif isinstance(error, OSError):
        action = "reading" if reading else "writing"
        click.echo(f"Error {action} file: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS if reading else ExitCode.TOKENIZE_ERROR)

    else:
        click.echo(f"Internal error: {error}", err=True)
        if verbose:
            traceback.print_exc()
        sys.exit(ExitCode.INTERNAL_ERROR)
