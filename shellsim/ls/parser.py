"""Turn raw ``ls`` tokens into a :class:`ListConfig`."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Sequence

from ..exceptions import InvalidOptionError
from .types import ListConfig, LsOption, SortKey

LOGGER = logging.getLogger("shellsim.ls.parser")

DEFAULT_TARGET = "."


def split_option_token(token: str) -> List[str]:
    """Expand an option token into option names.

    ``--name`` stays one unit, ``-la`` becomes ``["l", "a"]`` and a lone
    ``-`` yields nothing.
    """

    if token.startswith("--"):
        return [token]
    return list(token[1:])


def lookup_option(name: str) -> LsOption:
    try:
        return LsOption(name)
    except ValueError:
        raise InvalidOptionError(name) from None


def _apply_option(option: LsOption, settings: Dict[str, Any]) -> None:
    if option is LsOption.ALL:
        settings["show_dot_entries"] = True
        settings["show_hidden"] = True
    elif option is LsOption.ALMOST_ALL:
        settings["show_hidden"] = True
    elif option is LsOption.DIRECTORY:
        settings["names_only"] = True
    elif option is LsOption.CLASSIFY:
        settings["classify"] = True
    elif option is LsOption.LONG:
        settings["long_format"] = True
    elif option is LsOption.REVERSE:
        settings["reverse"] = True
    elif option is LsOption.SORT_SIZE:
        settings["sort_key"] = SortKey.SIZE
    elif option is LsOption.SORT_TIME:
        settings["sort_key"] = SortKey.TIME
    else:  # pragma: no cover - exhaustive over LsOption
        raise AssertionError(f"Unhandled option: {option}")


def parse_ls_args(tokens: Sequence[str]) -> ListConfig:
    """Parse ``tokens`` into an immutable listing configuration.

    Tokens starting with ``-`` are options; everything else is a target
    path. Without targets the current directory is listed. Targets are
    sorted lexicographically. Name order is the default unless ``-d`` is
    given, in which case targets keep their resolved order.

    Raises:
        InvalidOptionError: On the first option that is not recognized.
    """

    settings: Dict[str, Any] = {"sort_key": SortKey.NONE}
    targets: List[str] = []

    for token in tokens:
        if not token.startswith("-"):
            targets.append(token)
            continue
        for name in split_option_token(token):
            _apply_option(lookup_option(name), settings)

    if not settings.get("names_only") and settings["sort_key"] is SortKey.NONE:
        settings["sort_key"] = SortKey.NAME

    config = ListConfig(target_paths=tuple(sorted(targets or [DEFAULT_TARGET])), **settings)
    LOGGER.debug("Parsed ls arguments %s into %s", list(tokens), config)
    return config
