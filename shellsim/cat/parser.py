"""Turn raw ``cat`` tokens into a :class:`CatConfig`."""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from ..exceptions import MissingOutputFileError
from .types import CatConfig, OutputTarget, RedirectMode

LOGGER = logging.getLogger("shellsim.cat.parser")

NUMBER_FLAG = "-n"
NON_PRINTABLE_FLAG = "-v"
SORT_FLAG = "-sa"
_REDIRECTS = {mode.value: mode for mode in RedirectMode}


def parse_cat_args(tokens: Sequence[str]) -> CatConfig:
    """Parse ``tokens`` into an immutable configuration.

    ``-n``, ``-v`` and ``-sa`` are flags, ``>`` and ``>>`` take the next
    token as the output file and every other token is an input path. When
    several redirections are given the last one wins.

    Raises:
        MissingOutputFileError: A redirection is the last token.
    """

    number_lines = False
    show_non_printable = False
    sort_alphabetically = False
    output_target: Optional[OutputTarget] = None
    input_paths: List[str] = []

    index = 0
    while index < len(tokens):
        token = tokens[index]
        if token == NUMBER_FLAG:
            number_lines = True
        elif token == NON_PRINTABLE_FLAG:
            show_non_printable = True
        elif token == SORT_FLAG:
            sort_alphabetically = True
        elif token in _REDIRECTS:
            if index + 1 >= len(tokens):
                raise MissingOutputFileError()
            index += 1
            output_target = OutputTarget(tokens[index], _REDIRECTS[token])
        else:
            input_paths.append(token)
        index += 1

    config = CatConfig(
        number_lines=number_lines,
        show_non_printable=show_non_printable,
        sort_alphabetically=sort_alphabetically,
        output_target=output_target,
        input_paths=tuple(input_paths),
    )
    LOGGER.debug("Parsed cat arguments %s into %s", list(tokens), config)
    return config
