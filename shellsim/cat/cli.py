"""
Command-line interface for the ``cat`` simulation.
"""

import click

from shellsim.cat import concatenate
from shellsim.cat.parser import parse_cat_args
from shellsim.cat.sink import Sink
from shellsim.exceptions import MissingOutputFileError, OutputWriteError, SourceReadError
from shellsim.utils import configure_logging, make_console

console = make_console()
err_console = make_console(stderr=True)

# Tokens such as '>', '-sa' and unknown flags must reach parse_cat_args untouched.
CONTEXT_SETTINGS = {"ignore_unknown_options": True, "help_option_names": []}


def _report_read_error(error: SourceReadError) -> None:
    err_console.print(error.message)


@click.command(name="cat", context_settings=CONTEXT_SETTINGS)
@click.argument("tokens", nargs=-1, type=click.UNPROCESSED)
def cli(tokens):
    """
    Concatenate files and print them, or redirect them into a file.

    Options: -n numbers lines, -v shows non-printable characters in caret
    notation, -sa sorts lines alphabetically. '> FILE' truncates FILE and
    '>> FILE' appends to it; quote the operators so the shell passes them on.

    Examples:

        shellsim-cat notes.txt todo.txt

        shellsim-cat -sa -n names.txt

        shellsim-cat -v a.txt b.txt '>>' all.txt
    """
    configure_logging()
    if not tokens:
        return

    try:
        config = parse_cat_args(tokens)
    except MissingOutputFileError as e:
        console.print(e.message)
        return

    lines = concatenate(config, error_callback=_report_read_error)

    try:
        status = Sink(config.output_target).emit(lines)
    except OutputWriteError as e:
        err_console.print(e.message)
        return

    if status:
        console.print(status)


if __name__ == '__main__':
    cli()
