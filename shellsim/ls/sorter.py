"""Ordering of directory entries."""

from __future__ import annotations

from typing import Iterable, List

from .types import DirectoryEntry, SortKey


def sort_entries(entries: Iterable[DirectoryEntry], sort_key: SortKey, reverse: bool = False) -> List[DirectoryEntry]:
    """Sort ``entries`` by ``sort_key``, then reverse the result if asked.

    Size and time sort largest/newest first, names sort ascending and
    ``SortKey.NONE`` keeps the given order. Every ordering is stable.
    Reversal happens after sorting, so ``-S -r`` lists smallest first.
    """

    if sort_key is SortKey.SIZE:
        ordered = sorted(entries, key=lambda entry: entry.size, reverse=True)
    elif sort_key is SortKey.TIME:
        ordered = sorted(entries, key=lambda entry: entry.modified_time, reverse=True)
    elif sort_key is SortKey.NAME:
        ordered = sorted(entries, key=lambda entry: entry.name)
    else:
        ordered = list(entries)

    if reverse:
        ordered.reverse()
    return ordered
