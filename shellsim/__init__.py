"""
shellsim - small simulations of the Unix ``cat`` and ``ls`` commands.

Both tools are plain pipelines that can be used as a library as well as
from the command line.

Quick Start:
    >>> from shellsim import parse_cat_args, concatenate
    >>> lines = concatenate(parse_cat_args(["-sa", "-n", "names.txt"]))

    >>> from shellsim import parse_ls_args, iter_listing
    >>> for line in iter_listing(parse_ls_args(["-la", "/tmp"])):
    ...     print(line)

Packages:
    - shellsim.cat: ArgParser, LineSource, LinePipeline and Sink stages
    - shellsim.ls: OptionParser, PathResolver, Lister, Sorter and Formatter stages

Exceptions:
    - ShellSimException: Base exception
    - MissingOutputFileError: ``>``/``>>`` without a file name
    - InvalidOptionError: Unrecognized ``ls`` option
    - SourceReadError: Input file cannot be read
    - OutputWriteError: Redirect target cannot be written

For CLI usage, use the 'shellsim-cat' and 'shellsim-ls' commands after
installation.
"""

__version__ = "1.0.0"
__author__ = "shellsim contributors"
__license__ = "MIT"

# Tool pipelines
from shellsim.cat import CatConfig, concatenate, parse_cat_args
from shellsim.ls import ListConfig, iter_listing, parse_ls_args

# Exceptions
from shellsim.exceptions import (
    ShellSimException,
    UsageError,
    MissingOutputFileError,
    InvalidOptionError,
    SourceReadError,
    OutputWriteError,
)

__all__ = [
    # cat
    "CatConfig",
    "parse_cat_args",
    "concatenate",
    # ls
    "ListConfig",
    "parse_ls_args",
    "iter_listing",
    # Exceptions
    "ShellSimException",
    "UsageError",
    "MissingOutputFileError",
    "InvalidOptionError",
    "SourceReadError",
    "OutputWriteError",
    # Version info
    "__version__",
]
