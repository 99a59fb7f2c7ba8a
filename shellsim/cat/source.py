"""Reading input files into lines."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional

from ..exceptions import SourceReadError
from ..utils import text_encoding

LOGGER = logging.getLogger("shellsim.cat.source")


def split_lines(text: str) -> List[str]:
    """Split newline-normalised ``text`` into lines without terminators.

    A trailing newline does not start an extra empty line and an empty text
    has no lines at all.
    """

    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def read_lines(path: str, encoding: Optional[str] = None) -> List[str]:
    """Read ``path`` fully and return its lines.

    ``\\n``, ``\\r\\n`` and ``\\r`` all end a line.

    Raises:
        SourceReadError: The file is missing, unreadable or not valid text.
    """

    encoding = encoding or text_encoding()
    try:
        with open(path, "r", encoding=encoding, newline=None) as stream:
            text = stream.read()
    except OSError as exc:
        reason = f"{path}: {exc.strerror}" if exc.strerror else str(exc)
        raise SourceReadError(path, reason) from exc
    except UnicodeDecodeError as exc:
        raise SourceReadError(path, f"{path}: {exc}") from exc

    lines = split_lines(text)
    LOGGER.debug("Read %d line(s) from %s", len(lines), path)
    return lines


class LineSource:
    """Concatenates the lines of several input files in argument order."""

    def __init__(
        self,
        paths: Iterable[str],
        *,
        encoding: Optional[str] = None,
        error_callback: Optional[Callable[[SourceReadError], None]] = None,
    ) -> None:
        self.paths = list(paths)
        self.encoding = encoding
        self.error_callback = error_callback
        self.errors: List[SourceReadError] = []

    def read_all(self) -> List[str]:
        """Return the lines of every readable input.

        Unreadable inputs contribute no lines; their errors are collected in
        :attr:`errors` and passed to ``error_callback`` as they happen.
        """

        combined: List[str] = []
        for path in self.paths:
            try:
                combined.extend(read_lines(path, self.encoding))
            except SourceReadError as exc:
                LOGGER.debug("Skipping %s: %s", path, exc.reason)
                self.errors.append(exc)
                if self.error_callback:
                    self.error_callback(exc)
        return combined
