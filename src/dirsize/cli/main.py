"""Command-line interface for dirsize.

This module provides the command-line entry point. It parses the arguments, walks the
requested directory, and writes the filtered size tree to stdout or a file, with
signal management for graceful interruption handling.

Signal Handling Notes:
    - SIGPIPE: Handled when the output pipe is closed (e.g., when piping to `head`)
    - SIGINT: Ctrl+C during the scan stops it immediately; during output it is
      handled for a clean exit
    Once output has started, both stop it at the next line. In every case the process
    exits with the conventional status code.

Exit Codes:
    0: Successful completion
    1: Runtime error, including a root path that is missing or not a directory
    2: Command-line syntax error
    126: Permission denied on the root path
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE)

Example:
    # Entries of at least 500 megabytes, shown in megabytes
    $ dirsize -s 500M -u M /path/to/dir
"""

import errno
import sys

from dirsize.cli.argparser import create_parser, validate_args
from dirsize.cli.safe_writer import SafeWriter
from dirsize.cli.signal_handler import EXIT_SIGINT, setup_signal_handling, signal_handler
from dirsize.exceptions import RootPathError
from dirsize.size_tree.error_action import ErrorAction
from dirsize.size_tree.size_walker import SizeWalker
from dirsize.size_tree.tree_renderer import TreeRenderer
from dirsize.size_unit import Size, SizeUnit

EXIT_PERMISSION_DENIED = 126


def format_summary(total_size: int, shown: int, skipped: int, unit: SizeUnit) -> str:
    """Format the scan totals into a human-readable string.

    Args:
        total_size: Aggregate size of the scanned directory in bytes.
        shown: Number of entries listed.
        skipped: Number of entries that could not be read.
        unit: Unit the total is displayed in.

    Returns:
        A formatted string showing all totals with labels.
    """
    return "\n".join(
        [
            f"Total: {Size.from_bytes(total_size, unit)}",
            f"Shown: {shown}",
            f"Skipped: {skipped}",
        ]
    )


def main() -> None:
    """Main entry point for the dirsize command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        126: Permission denied on the root path
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe (SIGPIPE)
    """
    try:
        parser = create_parser()
        args = parser.parse_args()
        validate_args(args)

        walker = SizeWalker(args.dir_size, error_action=ErrorAction(args.error_action))
        try:
            forest = walker.walk(args.directory)
        except RootPathError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(EXIT_PERMISSION_DENIED if e.errno in (errno.EACCES, errno.EPERM) else 1)
        except KeyboardInterrupt:
            sys.exit(EXIT_SIGINT)

        # Ctrl+C raises KeyboardInterrupt until here, then only flags the writer.
        setup_signal_handling()

        renderer = TreeRenderer(args.display_unit)
        output_file = args.output if args.output else sys.stdout.fileno()

        with SafeWriter(output_file) as safe_writer:
            try:
                shown = renderer.write(forest, safe_writer)

                if args.summary:
                    summary = format_summary(walker.total_size, shown, len(walker.skipped), args.display_unit)
                    if args.summary == "stderr":
                        print(summary, file=sys.stderr)
                    elif args.summary == "stdout" and args.output:
                        print(summary)
                    else:
                        safe_writer.write("\n" + summary + "\n")

            except BrokenPipeError:
                pass  # SafeWriter will automatically close in the context manager

    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    exit_code = signal_handler.exit_code()
    if exit_code is not None:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
