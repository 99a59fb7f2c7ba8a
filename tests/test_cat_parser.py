from __future__ import annotations

import pytest

from shellsim.cat.parser import parse_cat_args
from shellsim.cat.types import CatConfig, OutputTarget, RedirectMode
from shellsim.exceptions import MissingOutputFileError, UsageError


def test_flags_and_paths_are_interleaved() -> None:
    config = parse_cat_args(["a.txt", "-n", "b.txt", "-v", "-sa", "c.txt"])

    assert config.number_lines is True
    assert config.show_non_printable is True
    assert config.sort_alphabetically is True
    assert config.input_paths == ("a.txt", "b.txt", "c.txt")
    assert config.output_target is None


def test_no_tokens_gives_default_config() -> None:
    assert parse_cat_args([]) == CatConfig()


def test_unrecognized_tokens_are_input_paths() -> None:
    config = parse_cat_args(["-s", "-nv", "--help"])

    assert config.input_paths == ("-s", "-nv", "--help")
    assert not config.number_lines
    assert not config.show_non_printable


def test_truncate_redirect_consumes_next_token() -> None:
    config = parse_cat_args(["a.txt", ">", "out.txt"])

    assert config.output_target == OutputTarget("out.txt", RedirectMode.TRUNCATE)
    assert config.input_paths == ("a.txt",)


def test_append_redirect() -> None:
    config = parse_cat_args([">>", "log.txt", "a.txt"])

    assert config.output_target.path == "log.txt"
    assert config.output_target.append is True
    assert config.input_paths == ("a.txt",)


@pytest.mark.parametrize(
    "tokens, expected",
    [
        ([">", "one", ">>", "two"], OutputTarget("two", RedirectMode.APPEND)),
        ([">>", "one", ">", "two"], OutputTarget("two", RedirectMode.TRUNCATE)),
    ],
)
def test_last_redirect_wins(tokens, expected) -> None:
    assert parse_cat_args(tokens).output_target == expected


@pytest.mark.parametrize("operator", [">", ">>"])
def test_redirect_without_file_raises(operator: str) -> None:
    with pytest.raises(MissingOutputFileError) as excinfo:
        parse_cat_args(["a.txt", operator])

    assert str(excinfo.value) == "Error: No output file specified"
    assert isinstance(excinfo.value, UsageError)


def test_config_is_immutable() -> None:
    config = parse_cat_args(["-n"])

    with pytest.raises(AttributeError):
        config.number_lines = False  # type: ignore[misc]
