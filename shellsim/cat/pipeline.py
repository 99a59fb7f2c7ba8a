"""Line transformations applied between reading and output."""

from __future__ import annotations

import heapq
import logging
import sys
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence

from ..utils import PARALLEL_SORT_ENV, env_flag
from .types import CatConfig

LOGGER = logging.getLogger("shellsim.cat.pipeline")

CARET = "^"
CARET_OFFSET = 64
_FIRST_PRINTABLE = 32
_LAST_PRINTABLE = 126
_PARALLEL_MIN_LINES = 4096


def _should_parallel_sort() -> bool:
    return env_flag(PARALLEL_SORT_ENV)


def sort_lines(lines: Sequence[str], *, parallel: Optional[bool] = None, workers: int = 4) -> List[str]:
    """Stable, case-sensitive ordinal sort.

    With ``parallel`` (default: ``SHELLSIM_PARALLEL_SORT``) large inputs are
    sorted in chunks on a thread pool and merged; the result is the same as
    the sequential sort.
    """

    if parallel is None:
        parallel = _should_parallel_sort()
    if not parallel or len(lines) < _PARALLEL_MIN_LINES or workers < 2:
        return sorted(lines)

    chunk_size = -(-len(lines) // workers)
    chunks = [lines[start:start + chunk_size] for start in range(0, len(lines), chunk_size)]
    LOGGER.debug("Sorting %d lines in %d chunk(s)", len(lines), len(chunks))
    with ThreadPoolExecutor(max_workers=workers) as executor:
        sorted_chunks = list(executor.map(sorted, chunks))
    # heapq.merge keeps earlier chunks first on ties.
    return list(heapq.merge(*sorted_chunks))


def number_lines(lines: Sequence[str]) -> List[str]:
    """Prefix each line with its 1-based position, as ``"<n>: "``."""

    return [f"{index}: {line}" for index, line in enumerate(lines, 1)]


def escape_char(char: str) -> str:
    code = ord(char)
    if _FIRST_PRINTABLE <= code <= _LAST_PRINTABLE:
        return char
    return CARET + chr((code + CARET_OFFSET) % (sys.maxunicode + 1))


def escape_non_printable(line: str) -> str:
    """Render every character outside ``' '..'~'`` in caret notation.

    The character is replaced by ``^`` and the character 64 code points
    higher. DEL and characters above 127 get the same shift as control
    characters, so DEL becomes ``^\\xbf`` rather than ``^?``.
    """

    return "".join(escape_char(char) for char in line)


class LinePipeline:
    """Applies the transforms enabled in a :class:`CatConfig`.

    Order: sort, number, escape. Numbers therefore follow the sorted order.
    """

    def __init__(self, config: CatConfig) -> None:
        self.config = config

    def run(self, lines: Sequence[str]) -> List[str]:
        result = list(lines)
        if self.config.sort_alphabetically:
            result = sort_lines(result)
        if self.config.number_lines:
            result = number_lines(result)
        if self.config.show_non_printable:
            result = [escape_non_printable(line) for line in result]
        LOGGER.debug("Pipeline produced %d line(s)", len(result))
        return result
