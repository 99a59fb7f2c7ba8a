from __future__ import annotations

import os
from pathlib import Path
from typing import Callable
import sys

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


def _write_sized(path: Path, size: int, mtime: float) -> Path:
    path.write_bytes(b"x" * size)
    os.utime(path, (mtime, mtime))
    return path


@pytest.fixture()
def text_file_factory(tmp_path: Path) -> Callable[[str, str], Path]:
    def _create(filename: str, content: str) -> Path:
        path = tmp_path / filename
        with path.open("w", encoding="utf-8", newline="") as handle:
            handle.write(content)
        return path

    return _create


@pytest.fixture()
def sized_dir(tmp_path: Path) -> Path:
    """Directory with a.txt (30 bytes, oldest), b.txt (10 bytes, newest)
    and c.txt (20 bytes)."""
    root = tmp_path / "sized"
    root.mkdir()
    _write_sized(root / "a.txt", 30, 1_000_000)
    _write_sized(root / "b.txt", 10, 3_000_000)
    _write_sized(root / "c.txt", 20, 2_000_000)
    return root


@pytest.fixture()
def mixed_dir(tmp_path: Path) -> Path:
    """Directory with a hidden file, a subdirectory, an executable script
    and a symbolic link to a plain file."""
    root = tmp_path / "mixed"
    root.mkdir()
    (root / ".hidden").write_text("secret\n", encoding="utf-8")
    (root / "notes.txt").write_text("hello\n", encoding="utf-8")
    script = root / "run.sh"
    script.write_text("#!/bin/sh\n", encoding="utf-8")
    script.chmod(0o755)
    (root / "sub").mkdir()
    (root / "link").symlink_to(root / "notes.txt")
    return root
