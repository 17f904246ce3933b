"""Unit tests for the argument parser module in dirsize CLI."""

import argparse
from pathlib import Path

import pytest

from dirsize.cli.argparser import create_parser, display_unit, threshold_size, validate_args
from dirsize.size_unit import SizeUnit


@pytest.fixture
def parser():
    return create_parser()


def test_threshold_size_type():
    assert threshold_size("500M") == 500000000
    assert threshold_size("42") == 42


def test_threshold_size_type_invalid():
    with pytest.raises(argparse.ArgumentTypeError, match="Invalid size format"):
        threshold_size("lots")


def test_display_unit_type():
    assert display_unit("G") == SizeUnit.GIGABYTE
    with pytest.raises(argparse.ArgumentTypeError, match="Invalid size unit"):
        display_unit("X")


def test_parser_defaults(parser):
    args = parser.parse_args(["/some/dir", "-s", "1M"])

    assert args.directory == Path("/some/dir")
    assert args.dir_size == 1000000
    assert args.display_unit == SizeUnit.KILOBYTE
    assert args.output is None
    assert args.error_action == "ignore"
    assert args.summary is None


def test_parser_all_options(parser):
    args = parser.parse_args(
        ["data", "--dir-size", "1.5G", "--display-unit", "M", "-o", "out.txt", "-P", "warn", "-S", "file"]
    )

    assert args.directory == Path("data")
    assert args.dir_size == 1500000000
    assert args.display_unit == SizeUnit.MEGABYTE
    assert args.output == Path("out.txt")
    assert args.error_action == "warn"
    assert args.summary == "file"


def test_parser_requires_dir_size(parser, capsys):
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args(["data"])

    assert excinfo.value.code == 2
    assert "--dir-size" in capsys.readouterr().err


def test_parser_rejects_invalid_size(parser, capsys):
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args(["data", "-s", "12Q"])

    assert excinfo.value.code == 2
    assert "Invalid size format" in capsys.readouterr().err


def test_parser_rejects_invalid_unit(parser):
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args(["data", "-s", "1M", "-u", "T"])
    assert excinfo.value.code == 2


def test_parser_rejects_invalid_error_action(parser):
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args(["data", "-s", "1M", "-P", "fail"])
    assert excinfo.value.code == 2


def test_parser_version(parser, capsys):
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args(["-V"])

    assert excinfo.value.code == 0
    assert capsys.readouterr().out.startswith("dirsize ")


def test_validate_args_summary_file_requires_output(parser):
    args = parser.parse_args(["data", "-s", "1M", "-S", "file"])
    with pytest.raises(ValueError, match="--summary=file requires -o/--output"):
        validate_args(args)


def test_validate_args_accepts_valid_combinations(parser):
    validate_args(parser.parse_args(["data", "-s", "1M"]))
    validate_args(parser.parse_args(["data", "-s", "1M", "-S", "stderr"]))
    validate_args(parser.parse_args(["data", "-s", "1M", "-S", "file", "-o", "out.txt"]))
