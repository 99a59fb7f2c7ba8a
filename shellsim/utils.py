"""Utility helpers shared by the shellsim tools."""

from __future__ import annotations

import logging
import os
from typing import Optional

import click
from rich.console import Console

LOG_LEVEL_ENV = "SHELLSIM_LOG_LEVEL"
ENCODING_ENV = "SHELLSIM_ENCODING"
PARALLEL_SORT_ENV = "SHELLSIM_PARALLEL_SORT"

DEFAULT_ENCODING = "utf-8"
_TRUTHY = {"1", "true", "yes", "on"}


def env_flag(name: str) -> bool:
    """Return ``True`` when the environment variable ``name`` is truthy."""

    value = os.getenv(name)
    if value is None:
        return False
    return value.strip().lower() in _TRUTHY


def text_encoding() -> str:
    """Encoding used for reading and writing text files."""

    value = os.getenv(ENCODING_ENV)
    if value and value.strip():
        return value.strip()
    return DEFAULT_ENCODING


def configure_logging(level: Optional[str] = None) -> None:
    """Configure package-wide logging on stderr.

    The level comes from ``level`` or ``SHELLSIM_LOG_LEVEL`` and defaults to
    ``WARNING`` so that normal runs only print tool output.
    """
    name = (level or os.getenv(LOG_LEVEL_ENV) or "WARNING").strip().upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def make_console(stderr: bool = False) -> Console:
    """Console that prints text verbatim: no markup, emoji, highlighting or wrapping."""

    return Console(
        stderr=stderr,
        markup=False,
        emoji=False,
        highlight=False,
        soft_wrap=True,
    )


def terminal_safe(text: str) -> str:
    """Replace characters that cannot be encoded, such as lone surrogates, with ``?``."""

    return text.encode("utf-8", "replace").decode("utf-8")


def echo_line(line: str) -> None:
    """Print a data line as is; escape sequences are kept even when stdout is piped."""

    click.echo(terminal_safe(line), color=True)
