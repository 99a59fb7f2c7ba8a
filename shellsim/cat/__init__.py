"""``cat`` simulation: concatenate, sort, number and escape lines."""

from __future__ import annotations

from typing import Callable, List, Optional

from ..exceptions import SourceReadError
from .parser import parse_cat_args
from .pipeline import LinePipeline, escape_non_printable, number_lines, sort_lines
from .sink import Sink, print_lines, write_lines
from .source import LineSource, read_lines
from .types import CatConfig, OutputTarget, RedirectMode

__all__ = [
    "CatConfig",
    "OutputTarget",
    "RedirectMode",
    "parse_cat_args",
    "LineSource",
    "read_lines",
    "LinePipeline",
    "sort_lines",
    "number_lines",
    "escape_non_printable",
    "Sink",
    "print_lines",
    "write_lines",
    "concatenate",
]


def concatenate(
    config: CatConfig,
    error_callback: Optional[Callable[[SourceReadError], None]] = None,
) -> List[str]:
    """Read every input of ``config`` and apply its enabled transforms."""

    source = LineSource(config.input_paths, error_callback=error_callback)
    return LinePipeline(config).run(source.read_all())
