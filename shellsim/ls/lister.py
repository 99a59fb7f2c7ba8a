"""Directory enumeration and the listing pipeline of the ``ls`` simulation."""

from __future__ import annotations

import grp
import logging
import os
import pwd
import stat
from typing import Iterator, List, Optional

from .formatter import Formatter
from .resolver import ResolvedTargets, missing_message, resolve_targets
from .sorter import sort_entries
from .types import DirectoryEntry, ListConfig, Permission

LOGGER = logging.getLogger("shellsim.ls.lister")

DOT_ENTRIES = (".", "..")


def entry_name(path: str) -> str:
    """Final component of ``path``, ignoring trailing separators."""
    return os.path.basename(os.path.normpath(path)) or path


def owner_name(uid: int) -> str:
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError:
        return str(uid)


def group_name(gid: int) -> str:
    try:
        return grp.getgrgid(gid).gr_name
    except KeyError:
        return str(gid)


def read_entry(path: str, name: Optional[str] = None) -> DirectoryEntry:
    """Read the metadata of ``path``.

    Symbolic links are followed for everything except ``is_symbolic_link``;
    a dangling link is described by the link itself.

    Raises:
        OSError: ``path`` does not exist or cannot be inspected.
    """

    link_info = os.lstat(path)
    is_link = stat.S_ISLNK(link_info.st_mode)
    info = link_info
    if is_link:
        try:
            info = os.stat(path)
        except OSError:
            LOGGER.debug("Dangling symbolic link %s", path)

    if name is None:
        name = entry_name(path)
    mode = info.st_mode
    is_file = stat.S_ISREG(mode)
    return DirectoryEntry(
        path=path,
        name=name,
        is_directory=stat.S_ISDIR(mode),
        is_file=is_file,
        is_hidden=name.startswith("."),
        size=info.st_size,
        modified_time=info.st_mtime,
        permissions=frozenset(bit for bit in Permission if mode & bit.value),
        owner=owner_name(info.st_uid),
        group=group_name(info.st_gid),
        is_symbolic_link=is_link,
        is_executable=is_file and bool(mode & stat.S_IXUSR),
    )


class Lister:
    """Produces the output lines of one ``ls`` invocation."""

    def __init__(self, config: ListConfig) -> None:
        self.config = config
        self.formatter = Formatter(config)

    def directory_entries(self, directory: str) -> List[DirectoryEntry]:
        """Entries of ``directory``, with ``.``/``..`` and hidden filtering
        applied as configured. An unreadable directory has no entries."""

        entries: List[DirectoryEntry] = []
        try:
            with os.scandir(directory) as iterator:
                for item in iterator:
                    try:
                        entries.append(read_entry(item.path, item.name))
                    except OSError as exc:
                        LOGGER.warning("Skipping %s: %s", item.path, exc)
        except OSError as exc:
            LOGGER.warning("Cannot read directory %s: %s", directory, exc)

        if self.config.show_dot_entries:
            for name in DOT_ENTRIES:
                path = os.path.join(directory, name)
                try:
                    entries.append(read_entry(path, name))
                except OSError as exc:
                    LOGGER.warning("Skipping %s: %s", path, exc)

        if not self.config.show_hidden:
            entries = [entry for entry in entries if not entry.is_hidden]
        return entries

    def _sorted(self, entries: List[DirectoryEntry]) -> List[DirectoryEntry]:
        return sort_entries(entries, self.config.sort_key, self.config.reverse)

    def _targets(self, paths: List[str]) -> List[DirectoryEntry]:
        entries = []
        for path in paths:
            try:
                entries.append(read_entry(path))
            except OSError as exc:
                LOGGER.warning("Skipping %s: %s", path, exc)
        return self._sorted(entries)

    def iter_lines(self, resolved: ResolvedTargets) -> Iterator[str]:
        """Yield the listing of already resolved targets."""

        if self.config.names_only:
            for entry in self._targets(resolved.directories + resolved.files):
                yield self.formatter.format(entry)
            return

        files = self._targets(resolved.files)
        for entry in files:
            yield self.formatter.format(entry)
        if files:
            yield ""

        show_headers = resolved.total > 1
        for directory in self._targets(resolved.directories):
            if show_headers:
                yield f"{os.path.normpath(directory.path)}:"
            for entry in self._sorted(self.directory_entries(directory.path)):
                yield self.formatter.format(entry)
            yield ""


def iter_listing(config: ListConfig) -> Iterator[str]:
    """Resolve the targets of ``config`` and yield every output line.

    Missing targets are reported first, one line each, followed by the
    listing of the remaining targets.
    """

    resolved = resolve_targets(config.target_paths)
    for path in resolved.missing:
        yield missing_message(path)
    yield from Lister(config).iter_lines(resolved)
