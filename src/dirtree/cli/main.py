"""Command-line interface for dirtree.

This module provides the command-line entry point. It loads the ignore rules
(prompting on first run), renders the directory tree, and writes the report
to the output file or to stdout.

Exit Codes:
    0: Successful completion
    1: Runtime error (ignore configuration, unreadable root, write failure)
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) when writing to stdout

Example:
    # Render the current directory into directory-tree.txt
    $ dirtree

    # Render a project to stdout, ignoring nothing
    $ dirtree -n -o - /path/to/project
"""

import argparse
import locale
import sys

from dirtree.cli.argparser import create_parser, validate_args, writes_to_stdout
from dirtree.cli.safe_writer import SafeWriter
from dirtree.cli.signal_handler import EXIT_SIGINT, setup_signal_handling, signal_handler
from dirtree.config.ignore_file import IgnoreSource, load_ignore_source
from dirtree.dirtree import DirTree
from dirtree.exceptions import IgnoreConfigError
from dirtree.ignore_rules.glob_rules import GlobIgnoreRules


def setup_collation() -> None:
    """Use the user's locale for name ordering, falling back to code point order."""
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as e:
        print(f"Warning: cannot use the system locale for sorting ({e}); using code point order", file=sys.stderr)


def load_rules(args: argparse.Namespace) -> IgnoreSource:
    """Resolve the ignore rules for this run from the parsed arguments."""
    return load_ignore_source(
        args.ignore_file,
        no_ignore=args.no_ignore,
        assume_defaults=args.yes,
        interactive=sys.stdin.isatty(),
    )


def main() -> None:
    """Main entry point for the dirtree command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe (SIGPIPE) when writing to stdout
    """
    try:
        parser = create_parser()
        args = parser.parse_args()
        validate_args(args)

        try:
            ignore_source = load_rules(args)
        except KeyboardInterrupt:
            print("\nAborted.", file=sys.stderr)
            sys.exit(EXIT_SIGINT)

        # Installed after the prompt so Ctrl+C can still abort it
        setup_signal_handling()
        setup_collation()

        ignore_rules = GlobIgnoreRules(ignore_source.rules)
        for pattern in args.ignore:
            pattern = pattern.strip()
            if pattern:
                ignore_rules.add_rule(pattern)

        generator = DirTree(args.directory, ignore_rules=ignore_rules, follow_symlinks=args.follow_symlinks)
        report = generator.generate_report(ignore_source)

        to_stdout = writes_to_stdout(args)
        output = sys.stdout.fileno() if to_stdout else args.output
        sys.stdout.flush()

        with SafeWriter(output) as safe_writer:
            try:
                safe_writer.write(report)
            except BrokenPipeError:
                pass  # SafeWriter discards the output in the context manager

        if not to_stdout and not args.quiet and not signal_handler.interrupted:
            print(f"Directory tree generated successfully in {args.output}")

    except IgnoreConfigError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        print("Fix or remove the ignore file, or run with -n/--no-ignore.", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    # Handle exit codes based on received signals
    exit_code = signal_handler.exit_code()
    if exit_code is not None:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
