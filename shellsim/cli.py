"""
Command-line entry point bundling the ``cat`` and ``ls`` simulations.
"""

import click

from shellsim import __version__
from shellsim.cat.cli import cli as cat_cli
from shellsim.ls.cli import cli as ls_cli


@click.group()
@click.version_option(version=__version__)
def cli():
    """
    shellsim - small simulations of the Unix cat and ls commands.
    """
    pass


cli.add_command(cat_cli, name="cat")
cli.add_command(ls_cli, name="ls")


if __name__ == '__main__':
    cli()
