"""Command-line argument parsing for dirtree.

This module defines the command-line interface for dirtree,
handling argument parsing and validation.
"""

import argparse
from pathlib import Path

from dirtree import __version__
from dirtree.config.ignore_file import IGNORE_FILE_NAME
from dirtree.report import OUTPUT_FILE_NAME

STDOUT_MARKER = "-"


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with dirtree's options.
    """
    description = """
    dirtree: render a directory as an indented text tree.

    The tree lists directories before files, each group in locale order, and
    leaves out every entry whose name matches an ignore pattern. Patterns come
    from an ignore file (.dirtree.ignore by default). When the ignore file does
    not exist yet, dirtree offers to create it with a default set of build, VCS
    and cache patterns, or with your own comma-separated list.

    Pattern syntax:
      *   matches any run of characters, including none
      ?   matches exactly one character
      Every other character matches itself, and a pattern must match the whole name.
    """

    epilog = """
    Examples:
      # Render the current directory into directory-tree.txt
      dirtree

      # Render another directory
      dirtree /path/to/project

      # Write the tree to stdout instead of a file
      dirtree -o - /path/to/project

      # Create the default ignore file without being asked
      dirtree -y

      # Use a different ignore file and add extra patterns
      dirtree --ignore-file ~/.config/tree.ignore -i "*.tmp" -i "fixtures"

      # Ignore nothing
      dirtree -n

      # Descend into symlinked directories
      dirtree -L
    """

    parser = argparse.ArgumentParser(
        prog="dirtree",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"dirtree {__version__}", help="Show the version and exit"
    )

    parser.add_argument(
        "directory",
        type=Path,
        nargs="?",
        default=Path("."),
        help="The directory to render (default: current directory).",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        default=Path(OUTPUT_FILE_NAME),
        help=f"Output file path (default: {OUTPUT_FILE_NAME}). Use '{STDOUT_MARKER}' to write to stdout.",
    )
    parser.add_argument(
        "--ignore-file",
        type=Path,
        metavar="FILE",
        default=Path(IGNORE_FILE_NAME),
        help=f"Ignore file to read, or to create on first run (default: {IGNORE_FILE_NAME}).",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        type=str,
        metavar="PATTERN",
        action="append",
        default=[],
        help="Additional pattern to ignore. Can be specified multiple times.",
    )

    first_run = parser.add_mutually_exclusive_group()
    first_run.add_argument(
        "-n",
        "--no-ignore",
        action="store_true",
        help="Do not read or create an ignore file. Only -i/--ignore patterns apply.",
    )
    first_run.add_argument(
        "-y",
        "--yes",
        action="store_true",
        help="Create a missing ignore file with the default patterns without prompting.",
    )

    parser.add_argument(
        "-L",
        "--follow-symlinks",
        action="store_true",
        help="Descend into symbolic links to directories. The depth limit still applies.",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Do not print the success message.",
    )

    return parser


def writes_to_stdout(args: argparse.Namespace) -> bool:
    return str(args.output) == STDOUT_MARKER


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if not args.directory.exists():
        raise ValueError(f"Directory does not exist: {args.directory}")
    if not args.directory.is_dir():
        raise ValueError(f"Not a directory: {args.directory}")
    if not writes_to_stdout(args) and args.output.is_dir():
        raise ValueError(f"Output path is a directory: {args.output}")
