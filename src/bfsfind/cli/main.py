"""Command-line interface for bfsfind.

This module provides the command-line entry point: it parses arguments, compiles the
name pattern, runs the breadth-first search and streams each match to the output as
soon as it is found.

Signal Handling Notes:
    - SIGPIPE: Handled when the output pipe is closed (e.g., when piping to `head`) on
      Unix-like systems; the search stops at the next write
    - SIGINT: Handled for a clean exit on Ctrl+C; the search stops before visiting the
      next entry, whether or not anything has been written yet

Exit Codes:
    0: Successful completion, including searches with no matches
    1: Invalid regex pattern or other runtime error
    2: Command-line syntax error, including an invalid max_depth
    126: An entry could not be read and -P fail was given
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    # Python sources up to two levels below src
    $ bfsfind -d src -t file '\\.py$' 2

    # Warn about unreadable directories instead of skipping them silently
    $ bfsfind -P warn -d / '^passwd$' 2
"""

import sys
from collections.abc import Mapping

from bfsfind.cli.argparser import create_parser
from bfsfind.cli.safe_writer import SafeWriter
from bfsfind.cli.signal_handler import EXIT_SIGINT, EXIT_SIGPIPE, setup_signal_handling, signal_handler
from bfsfind.exceptions import InvalidPatternError, TraversalAccessError
from bfsfind.exclusion_rules.git_rules import GitIgnoreExclusionRules
from bfsfind.pattern import compile_pattern
from bfsfind.traversal.bfs_search import BFSSearch
from bfsfind.traversal.permission_action import PermissionAction


def format_counts(counts: Mapping[str, int]) -> str:
    """Format search counts into a human-readable string.

    Args:
        counts: Mapping with "visited", "matches" and "skipped" entries.

    Returns:
        One labelled count per line.
    """
    return "\n".join(
        [
            f"Visited: {counts['visited']}",
            f"Matches: {counts['matches']}",
            f"Skipped: {counts['skipped']}",
        ]
    )


def main() -> None:
    """Main entry point for the bfsfind command-line interface.

    Exit codes:
        0: Successful completion
        1: Invalid regex pattern or other runtime error
        2: Command-line syntax error
        126: Unreadable entry with -P fail
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe (SIGPIPE) on Unix-like systems
    """
    setup_signal_handling()

    try:
        # Populated by -e/-i while the arguments are parsed
        exclusion_rules = GitIgnoreExclusionRules()

        parser = create_parser(exclusion_rules)
        # argparse exits with status 2 on syntax errors, including a bad max_depth
        args = parser.parse_args()

        try:
            pattern = compile_pattern(args.pattern)
        except InvalidPatternError as e:
            print(f"Error: {str(e)}", file=sys.stderr)
            sys.exit(1)

        perm_action = {
            "ignore": PermissionAction.IGNORE,
            "warn": PermissionAction.WARN,
            "fail": PermissionAction.RAISE,
        }[args.permission_action]

        finder = BFSSearch(
            args.start_dir,
            pattern,
            args.max_depth,
            args.entry_type,
            exclusion_rules=exclusion_rules,
            permission_action=perm_action,
            should_stop=signal_handler.stop_requested,
        )

        output_file = args.output if args.output else sys.stdout.fileno()
        broken_pipe = False

        try:
            with SafeWriter(output_file) as safe_writer:
                try:
                    for path in finder:
                        safe_writer.write_line(path)
                except BrokenPipeError:
                    broken_pipe = True
        except TraversalAccessError as e:
            print(f"Error: {str(e)}", file=sys.stderr)
            sys.exit(126)

        for path, error in finder.errors:
            print(f"Warning: {path}: {error}", file=sys.stderr)

        if args.summary and not broken_pipe:
            counts = {
                "visited": finder.visited_count,
                "matches": finder.match_count,
                "skipped": finder.skipped_count,
            }
            destination = sys.stdout if args.summary == "stdout" else sys.stderr
            print(format_counts(counts), file=destination, flush=True)

    except KeyboardInterrupt:
        # Second Ctrl+C while the first was still being honored
        sys.exit(EXIT_SIGINT)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    exit_code = signal_handler.exit_code()
    if exit_code is not None:
        sys.exit(exit_code)
    if broken_pipe:
        sys.exit(EXIT_SIGPIPE)


if __name__ == "__main__":
    main()
