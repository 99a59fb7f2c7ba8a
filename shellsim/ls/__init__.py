"""``ls`` simulation: list directories and files with sorting and long format."""

from __future__ import annotations

from .formatter import Formatter, display_name, format_long, permission_string
from .lister import Lister, iter_listing, read_entry
from .parser import parse_ls_args
from .resolver import ResolvedTargets, missing_message, resolve_targets
from .sorter import sort_entries
from .types import DirectoryEntry, ListConfig, LsOption, Permission, SortKey, TypeIndicator

__all__ = [
    "DirectoryEntry",
    "ListConfig",
    "LsOption",
    "Permission",
    "SortKey",
    "TypeIndicator",
    "parse_ls_args",
    "ResolvedTargets",
    "resolve_targets",
    "missing_message",
    "Lister",
    "iter_listing",
    "read_entry",
    "sort_entries",
    "Formatter",
    "display_name",
    "format_long",
    "permission_string",
]
