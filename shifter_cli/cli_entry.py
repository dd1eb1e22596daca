"""
cli_entry.py - CLI Entry Point

Usage:
    file-shifter <file_path_pattern> <signed integer> [-v]
    file-shifter -help
"""

import argparse
import sys
from typing import List, Optional

from shifter_core import (
    ArgumentError, NoMatchError, ShiftError, ShiftOptions,
    expand_pattern, order_for_shift, plan_shift, execute_shift, is_valid_shift,
)

from .progress import ProgressBar, VerboseReporter


HELP_FLAG = "-help"
VERBOSE_FLAG = "-v"

DESCRIPTION = """\
File Shifter
Shifts filenames containing integers by a specified integer value."""

EPILOG = """\
Examples:
  %(prog)s './file[0-9]*.txt' 1
    Shifts filenames matching './file[0-9]*.txt' by 1. For example, 'file1.txt' becomes 'file2.txt'.

  %(prog)s './file[0-9]*.txt' -1
    Shifts filenames matching './file[0-9]*.txt' by -1. For example, 'file2.txt' becomes 'file1.txt'.

  %(prog)s './item-[0-9]*.log' 10
    Shifts filenames matching './item-[0-9]*.log' by 10. For example, 'item-5.log' becomes 'item-15.log'.

Note: Only the integer (and a '-' sign) at the end of the file name is modified.
      Integers in the extension or earlier on in the filename are left alone.
"""


class ShiftArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting with status 2"""

    def error(self, message):
        raise ArgumentError(message)


def create_parser() -> ShiftArgumentParser:
    """Create command-line argument parser"""
    parser = ShiftArgumentParser(
        prog="file-shifter",
        usage="%(prog)s <file_path_pattern> <signed integer> [-v]",
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=EPILOG,
        add_help=False,
    )

    parser.add_argument("pattern", metavar="<file_path_pattern>", help="Pattern to match the files to be renamed.")
    parser.add_argument("shift", metavar="<signed integer>", help="Integer by which to shift the filenames.")
    parser.add_argument(VERBOSE_FLAG, dest="verbose", action="store_true", help="Enable verbose mode.")

    return parser


def parse_arguments(parser: argparse.ArgumentParser, argv: List[str]) -> argparse.Namespace:
    """
    Parse and validate arguments

    Raises:
        ArgumentError: Wrong argument count, unknown flag or malformed shift
    """
    if len(argv) < 2 or len(argv) > 3:
        raise ArgumentError(f"Expected 2 or 3 arguments, got {len(argv)}")

    # argparse would also accept bundles like "-vv"
    for token in argv:
        if token.startswith("-") and token != VERBOSE_FLAG and not is_valid_shift(token):
            raise ArgumentError(f"Unknown option: {token}")

    args = parser.parse_args(argv)

    if not is_valid_shift(args.shift):
        raise ArgumentError("The second argument must be an integer.")

    return args


def run_shift(
    pattern: str,
    shift: int,
    verbose: bool = False,
    options: Optional[ShiftOptions] = None
) -> int:
    """
    Shift every file matching pattern

    Returns:
        Exit code (per-entry failures do not change it)
    """
    if options is None:
        options = ShiftOptions()

    try:
        entries = expand_pattern(pattern, files_only=options.files_only)
    except NoMatchError as e:
        print(e, file=sys.stderr)
        return 1

    if verbose:
        print("Files to be processed:")
        for entry in order_for_shift(entries, shift):
            print(entry.path)
        print(f"Integer to shift filenames by: {shift}")

    plan = plan_shift(entries, shift, options)

    if verbose:
        print(plan.summary())

    for error in plan.skipped:
        print(f"Error: {error}", file=sys.stderr)

    reporter = VerboseReporter() if verbose else ProgressBar()

    def on_error(error: ShiftError):
        reporter.interrupt()
        print(f"Error: {error}", file=sys.stderr)

    if not verbose:
        print("Renaming files: ", end="", flush=True)

    execute_shift(plan, progress_callback=reporter, error_callback=on_error)
    reporter.close()

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    if argv is None:
        argv = sys.argv[1:]

    parser = create_parser()

    if argv and argv[0] == HELP_FLAG:
        parser.print_help()
        return 0

    try:
        args = parse_arguments(parser, argv)
    except ArgumentError as e:
        print(f"Error: {e}", file=sys.stderr)
        parser.print_help()
        return 1

    return run_shift(args.pattern, int(args.shift), verbose=args.verbose)


if __name__ == "__main__":
    sys.exit(main())
