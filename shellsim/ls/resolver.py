"""Classify target paths into directories, files and missing paths."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional

LOGGER = logging.getLogger("shellsim.ls.resolver")


def missing_message(path: str) -> str:
    return f"{path}: No such file or directory"


@dataclass
class ResolvedTargets:
    """
    Targets of one listing, split by kind.

    Attributes:
        directories: Existing directories, in target order
        files: Existing non-directories, in target order
        missing: Paths that do not exist
        total: Number of targets given, missing ones included
    """
    directories: List[str] = field(default_factory=list)
    files: List[str] = field(default_factory=list)
    missing: List[str] = field(default_factory=list)
    total: int = 0


def resolve_targets(
    paths: Iterable[str],
    missing_callback: Optional[Callable[[str], None]] = None,
) -> ResolvedTargets:
    """Split ``paths`` into directories, files and missing paths.

    Symbolic links are followed, so a dangling link counts as missing.
    ``missing_callback`` is called for each missing path as it is found.
    """

    resolved = ResolvedTargets()
    for path in paths:
        resolved.total += 1
        if not os.path.exists(path):
            LOGGER.debug("Target %s does not exist", path)
            resolved.missing.append(path)
            if missing_callback:
                missing_callback(path)
        elif os.path.isdir(path):
            resolved.directories.append(path)
        else:
            resolved.files.append(path)
    return resolved
