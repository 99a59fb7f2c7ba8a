from __future__ import annotations

import random
import string

import pytest

from shellsim.cat.pipeline import (
    LinePipeline,
    escape_non_printable,
    number_lines,
    sort_lines,
)
from shellsim.cat.types import CatConfig


def test_sort_then_number_uses_sorted_order() -> None:
    config = CatConfig(number_lines=True, sort_alphabetically=True)

    assert LinePipeline(config).run(["banana", "apple"]) == ["1: apple", "2: banana"]


def test_sort_is_case_sensitive_ordinal() -> None:
    assert sort_lines(["b", "B", "a", "A", "10", "9"]) == ["10", "9", "A", "B", "a", "b"]


def test_parallel_sort_matches_sequential_sort() -> None:
    rng = random.Random(1234)
    lines = ["".join(rng.choice(string.ascii_letters) for _ in range(6)) for _ in range(5000)]

    assert sort_lines(lines, parallel=True) == sorted(lines)


def test_parallel_sort_enabled_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SHELLSIM_PARALLEL_SORT", "yes")
    lines = [str(value) for value in range(5000, 0, -1)]

    assert sort_lines(lines) == sorted(lines)


def test_number_lines_starts_at_one() -> None:
    assert number_lines(["x", "", "y"]) == ["1: x", "2: ", "3: y"]


@pytest.mark.parametrize(
    "line, expected",
    [
        ("plain text", "plain text"),
        ("a\tb", "a^Ib"),
        ("\x00", "^@"),
        ("\x1b[0m", "^[[0m"),
        ("\x7f", "^\xbf"),
        ("\xe9", "^ĩ"),
        ("\ud7fb", "^\ud83b"),
        ("~ and space", "~ and space"),
    ],
)
def test_escape_non_printable(line: str, expected: str) -> None:
    assert escape_non_printable(line) == expected


def test_escape_is_idempotent_on_printable_input() -> None:
    printable = "".join(chr(code) for code in range(32, 127))
    once = escape_non_printable(printable)

    assert once == printable
    assert escape_non_printable(once) == once


def test_escape_runs_after_numbering() -> None:
    config = CatConfig(number_lines=True, show_non_printable=True)

    assert LinePipeline(config).run(["a\tb"]) == ["1: a^Ib"]


def test_pipeline_without_transforms_returns_copy() -> None:
    lines = ["b", "a"]
    result = LinePipeline(CatConfig()).run(lines)

    assert result == ["b", "a"]
    assert result is not lines
