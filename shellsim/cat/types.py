"""
Type definitions and dataclasses for the ``cat`` simulation.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class RedirectMode(Enum):
    """How redirected output is written to its target file."""

    TRUNCATE = ">"
    APPEND = ">>"


@dataclass(frozen=True)
class OutputTarget:
    """
    Destination of redirected output.

    Attributes:
        path: File that receives the output
        mode: Truncate (``>``) or append (``>>``)
    """
    path: str
    mode: RedirectMode = RedirectMode.TRUNCATE

    @property
    def append(self) -> bool:
        return self.mode is RedirectMode.APPEND


@dataclass(frozen=True)
class CatConfig:
    """
    Configuration of one ``cat`` invocation.

    Attributes:
        number_lines: Prefix every line with ``"<n>: "``
        show_non_printable: Render control and non-ASCII characters in caret notation
        sort_alphabetically: Sort all lines before numbering
        output_target: Redirect target, or ``None`` to print to stdout
        input_paths: Input files in argument order
    """
    number_lines: bool = False
    show_non_printable: bool = False
    sort_alphabetically: bool = False
    output_target: Optional[OutputTarget] = None
    input_paths: Tuple[str, ...] = ()
