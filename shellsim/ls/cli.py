"""
Command-line interface for the ``ls`` simulation.
"""

import click

from shellsim.exceptions import InvalidOptionError
from shellsim.ls.lister import iter_listing
from shellsim.ls.parser import parse_ls_args
from shellsim.utils import configure_logging, echo_line, make_console

console = make_console()

# Combined flags like '-la' and unknown options must reach parse_ls_args untouched.
CONTEXT_SETTINGS = {"ignore_unknown_options": True, "help_option_names": []}


@click.command(name="ls", context_settings=CONTEXT_SETTINGS)
@click.argument("tokens", nargs=-1, type=click.UNPROCESSED)
def cli(tokens):
    """
    List directory contents.

    Options: -a all entries including . and .., -A hidden entries without
    . and .., -d the paths themselves, -F type indicators (/ * @), -l long
    format, -r reverse order, -S sort by size, -t sort by time.

    Examples:

        shellsim-ls

        shellsim-ls -la /tmp

        shellsim-ls -dF src setup.py
    """
    configure_logging()
    try:
        config = parse_ls_args(tokens)
    except InvalidOptionError as e:
        console.print(e.message)
        return

    for line in iter_listing(config):
        echo_line(line)


if __name__ == '__main__':
    cli()
