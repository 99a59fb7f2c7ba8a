"""Rendering of directory entries as output lines."""

from __future__ import annotations

from datetime import datetime

from .types import PERMISSION_ORDER, DirectoryEntry, ListConfig

TIME_FORMAT = "%b %d %H:%M"


def permission_string(entry: DirectoryEntry) -> str:
    """Return the type and permission column, e.g. ``drwxr-xr-x``."""

    bits = "".join(
        symbol if permission in entry.permissions else "-"
        for permission, symbol in PERMISSION_ORDER
    )
    return ("d" if entry.is_directory else "-") + bits


def format_time(timestamp: float) -> str:
    return datetime.fromtimestamp(timestamp).strftime(TIME_FORMAT)


def display_name(entry: DirectoryEntry, config: ListConfig) -> str:
    """Name shown for ``entry``: the path under ``-d``, the bare name otherwise,
    followed by the type indicator under ``-F``."""

    name = entry.path if config.names_only else entry.name
    if not config.classify:
        return name
    indicator = entry.indicator
    return indicator.render(name) if indicator else name


def format_long(entry: DirectoryEntry, config: ListConfig) -> str:
    return " ".join(
        [
            permission_string(entry),
            entry.owner,
            entry.group,
            str(entry.size),
            format_time(entry.modified_time),
            display_name(entry, config),
        ]
    )


class Formatter:
    """Renders entries in short or long format according to a :class:`ListConfig`."""

    def __init__(self, config: ListConfig) -> None:
        self.config = config

    def format(self, entry: DirectoryEntry) -> str:
        if self.config.long_format:
            return format_long(entry, self.config)
        return display_name(entry, self.config)
