"""
jacktok - Jack Tokenizer Command-Line Interface
===============================================

Tokenizes one Jack source file and writes the <tokens> report beside it,
named after the source with a ``T.xml`` suffix.

Usage Examples
--------------
Basic tokenizing:
    $ jacktok Main.jack          # writes MainT.xml

Verbose mode:
    $ jacktok -v Square/Square.jack
"""

import logging
from pathlib import Path

import click

from jack_tokenizer import __version__
from jack_tokenizer.cli.errors import handle_cli_exception
from jack_tokenizer.tokenizer import JackTokenizer

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="jacktok")
def main(input_file: Path, verbose: bool) -> None:
    """
    Tokenize a Jack source file.

    INPUT_FILE is the Jack source file (.jack) to tokenize. The token
    report is written to the same directory as <name>T.xml.

    \b
    Examples:
        jacktok Main.jack            # Outputs MainT.xml
        jacktok -v Main.jack         # Verbose output
    """
    setup_logging(verbose)
    tokenizer = JackTokenizer()

    try:
        result = tokenizer.tokenize_file(input_file)
    except Exception as e:
        handle_cli_exception(e, verbose, reading=True)

    output = tokenizer.output_path(input_file)
    logger.debug(f"Writing report to {output}")
    try:
        tokenizer.write_report(result, output)
    except Exception as e:
        handle_cli_exception(e, verbose, reading=False)

    if verbose:
        click.echo(f"Read {result.line_count} lines")
        click.echo(f"Tokenized: {result.token_count} tokens")

    click.echo(f"Tokenized {input_file} -> {output}")


if __name__ == "__main__":
    main()
