"""Output of processed lines: the console or a redirect target."""

from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence

from ..exceptions import OutputWriteError
from ..utils import echo_line, text_encoding
from .types import OutputTarget

LOGGER = logging.getLogger("shellsim.cat.sink")


def print_lines(lines: Sequence[str], echo: Callable[[str], None] = echo_line) -> None:
    for line in lines:
        echo(line)


def write_lines(target: OutputTarget, lines: Sequence[str], encoding: Optional[str] = None) -> str:
    """Write ``lines`` to ``target`` in one go and return a status message.

    The whole content is buffered first; the file is opened once in
    truncate or append mode and always closed.

    Raises:
        OutputWriteError: The target cannot be opened or written.
    """

    content = "".join(f"{line}\n" for line in lines)
    mode = "a" if target.append else "w"
    try:
        with open(target.path, mode, encoding=encoding or text_encoding(), errors="replace", newline="\n") as stream:
            stream.write(content)
    except OSError as exc:
        reason = f"{target.path}: {exc.strerror}" if exc.strerror else str(exc)
        raise OutputWriteError(target.path, reason) from exc

    LOGGER.debug("Wrote %d line(s) to %s (mode %s)", len(lines), target.path, mode)
    if target.append:
        return f"Content appended to {target.path}"
    return f"Content written to {target.path}"


class Sink:
    """Sends lines to stdout, or to the redirect target when one is set."""

    def __init__(
        self,
        target: Optional[OutputTarget] = None,
        *,
        echo: Callable[[str], None] = echo_line,
        encoding: Optional[str] = None,
    ) -> None:
        self.target = target
        self.echo = echo
        self.encoding = encoding

    def emit(self, lines: Sequence[str]) -> Optional[str]:
        """Output ``lines``; returns the status message of a redirected write."""

        if self.target is None:
            print_lines(lines, self.echo)
            return None
        return write_lines(self.target, lines, self.encoding)
