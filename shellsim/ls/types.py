"""
Type definitions and dataclasses for the ``ls`` simulation.

This module defines the option and indicator enumerations, the listing
configuration and the per-entry metadata record.
"""

from dataclasses import dataclass
from enum import Enum, Flag
from typing import FrozenSet, Optional, Tuple


class SortKey(Enum):
    """Primary ordering of listed entries."""

    NAME = "name"
    SIZE = "size"
    TIME = "time"
    NONE = "none"


class LsOption(Enum):
    """Recognized short options."""

    ALL = "a"
    ALMOST_ALL = "A"
    DIRECTORY = "d"
    CLASSIFY = "F"
    LONG = "l"
    REVERSE = "r"
    SORT_SIZE = "S"
    SORT_TIME = "t"


class Permission(Flag):
    """POSIX permission bits, listed in ``rwxrwxrwx`` display order."""

    OWNER_READ = 0o400
    OWNER_WRITE = 0o200
    OWNER_EXECUTE = 0o100
    GROUP_READ = 0o040
    GROUP_WRITE = 0o020
    GROUP_EXECUTE = 0o010
    OTHERS_READ = 0o004
    OTHERS_WRITE = 0o002
    OTHERS_EXECUTE = 0o001


PERMISSION_ORDER: Tuple[Tuple[Permission, str], ...] = (
    (Permission.OWNER_READ, "r"),
    (Permission.OWNER_WRITE, "w"),
    (Permission.OWNER_EXECUTE, "x"),
    (Permission.GROUP_READ, "r"),
    (Permission.GROUP_WRITE, "w"),
    (Permission.GROUP_EXECUTE, "x"),
    (Permission.OTHERS_READ, "r"),
    (Permission.OTHERS_WRITE, "w"),
    (Permission.OTHERS_EXECUTE, "x"),
)


class TypeIndicator(Enum):
    """Trailing character appended to a name under ``-F``."""

    DIRECTORY = "/"
    EXECUTABLE = "*"
    SYMBOLIC_LINK = "@"

    def render(self, name: str) -> str:
        return f"{name}{self.value}"


@dataclass(frozen=True)
class ListConfig:
    """
    Configuration of one ``ls`` invocation.

    Attributes:
        sort_key: Primary ordering of entries
        show_hidden: Keep entries whose name starts with ``.``
        show_dot_entries: Add synthetic ``.`` and ``..`` entries to directory listings
        names_only: List the targets themselves instead of their contents (``-d``)
        classify: Append a type indicator to names (``-F``)
        long_format: Render permission, owner, group, size and time (``-l``)
        reverse: Reverse the sorted order (``-r``)
        target_paths: Paths to list, sorted lexicographically
    """
    sort_key: SortKey = SortKey.NAME
    show_hidden: bool = False
    show_dot_entries: bool = False
    names_only: bool = False
    classify: bool = False
    long_format: bool = False
    reverse: bool = False
    target_paths: Tuple[str, ...] = (".",)


@dataclass(frozen=True)
class DirectoryEntry:
    """
    Metadata of one filesystem object, read fresh for every listing.

    Attributes:
        path: Path used to reach the object
        name: Final path component (``.`` and ``..`` for synthetic entries)
        is_directory: Object is a directory (symlinks followed)
        is_file: Object is a regular file (symlinks followed)
        is_hidden: Name starts with ``.``
        size: Size in bytes
        modified_time: Modification time in seconds since the epoch
        permissions: Granted permission bits
        owner: Owner account name, or numeric uid
        group: Group name, or numeric gid
        is_symbolic_link: Path itself is a symbolic link
        is_executable: Regular file with the owner execute bit set
    """
    path: str
    name: str
    is_directory: bool
    is_file: bool
    is_hidden: bool
    size: int
    modified_time: float
    permissions: FrozenSet[Permission]
    owner: str
    group: str
    is_symbolic_link: bool = False
    is_executable: bool = False

    @property
    def indicator(self) -> Optional[TypeIndicator]:
        """The :class:`TypeIndicator` for this entry, or ``None``."""
        if self.is_directory:
            return TypeIndicator.DIRECTORY
        if self.is_file and self.is_executable:
            return TypeIndicator.EXECUTABLE
        if self.is_symbolic_link:
            return TypeIndicator.SYMBOLIC_LINK
        return None
