"""Command-line argument parsing for dirsize.

This module defines the command-line interface for dirsize,
handling argument parsing and validation.
"""

import argparse
from pathlib import Path

from dirsize import __version__
from dirsize.size_tree.error_action import ErrorAction
from dirsize.size_unit import SizeUnit, parse_threshold


def threshold_size(value: str) -> int:
    """Argparse type converting a size literal such as '500M' into bytes.

    Raises:
        argparse.ArgumentTypeError: If the literal is not a valid size.
    """
    try:
        return parse_threshold(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def display_unit(value: str) -> SizeUnit:
    """Argparse type converting a unit symbol such as 'M' into a SizeUnit.

    Raises:
        argparse.ArgumentTypeError: If the symbol is not a known unit.
    """
    try:
        return SizeUnit.from_symbol(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with dirsize's options.
    """
    description = """
    dirsize: find out which parts of a directory tree are heavy enough to matter.

    The tool measures the recursive size of every file and subdirectory below
    DIRECTORY and prints, as an indented tree, only those entries whose size is at
    least the given threshold. Directory sizes always include everything beneath
    them, including entries too small to be listed.

    Sizes use decimal units: K = 1000 bytes, M = 1000^2 bytes, G = 1000^3 bytes.
    Entries that cannot be read are skipped and do not count towards any total.
    """

    epilog = """
    Examples:
      # Everything of at least 500 megabytes, sizes shown in kilobytes
      dirsize -s 500M /var

      # Show sizes in gigabytes instead
      dirsize -s 1G -u G /home

      # Report unreadable entries on stderr while scanning
      dirsize -s 100M -P warn /

      # Write the listing to a file and append a summary to it
      dirsize -s 10M -o usage.txt -S file ~/projects

      # Display version information and exit
      dirsize -V
    """

    parser = argparse.ArgumentParser(
        prog="dirsize",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"dirsize {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "directory",
        type=Path,
        help="The directory to measure. Entries are listed by name, relative to their parent.",
    )
    parser.add_argument(
        "-s",
        "--dir-size",
        type=threshold_size,
        metavar="SIZE",
        required=True,
        help=(
            "Minimum size an entry must have to be listed, e.g. 500M, 1.5G, 20K or a plain byte count. "
            "Entries exactly this size are listed."
        ),
    )
    parser.add_argument(
        "-u",
        "--display-unit",
        type=display_unit,
        metavar="UNIT",
        default=SizeUnit.KILOBYTE,
        help="Unit for displayed sizes: b, K, M or G (default: K).",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path. If not specified, output is written to stdout.",
    )
    parser.add_argument(
        "-P",
        "--error-action",
        choices=[action.value for action in ErrorAction],
        default=ErrorAction.IGNORE.value,
        help="How to report entries that cannot be read; they are always skipped (default: ignore).",
    )
    parser.add_argument(
        "-S",
        "--summary",
        metavar="DEST",
        choices=["stderr", "stdout", "file"],
        help="Print summary report. Valid destinations: stderr, stdout, file (requires -o)",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.summary == "file" and not args.output:
        raise ValueError("--summary=file requires -o/--output to be specified")
