"""Command-line argument parsing for bfsfind.

This module defines the command-line interface for bfsfind, handling argument
parsing and validation.
"""

import argparse
import os
from pathlib import Path
from typing import Any, List, Optional, Sequence, Type, Union

from bfsfind import __version__
from bfsfind.exclusion_rules.base_rules import BaseExclusionRules
from bfsfind.types import EntryType


def non_negative_int(value: str) -> int:
    """Parse a max_depth argument.

    Args:
        value: The raw command-line string.

    Returns:
        The parsed depth.

    Raises:
        argparse.ArgumentTypeError: If the value is not a non-negative integer.
    """
    try:
        depth = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"invalid max depth value: '{value}'. Must be a non-negative integer."
        ) from None
    if depth < 0:
        raise argparse.ArgumentTypeError(f"invalid max depth value: '{value}'. Must be a non-negative integer.")
    return depth


def create_exclusion_action(exclusion_rules: BaseExclusionRules) -> Type[argparse.Action]:
    """Create an action class that feeds -e/--exclude and -i/--ignore into exclusion rules.

    Rules are added while arguments are parsed, so files and patterns keep the order in
    which they appear on the command line.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        A custom action class for use with argparse.
    """

    class ExclusionRulesAction(argparse.Action):
        def __init__(self, option_strings: List[str], dest: str, **kwargs: Any) -> None:
            super().__init__(option_strings, dest, **kwargs)

        def __call__(
            self,
            parser: argparse.ArgumentParser,
            namespace: argparse.Namespace,
            values: Union[str, Sequence[Any], None],
            option_string: Optional[str] = None,
        ) -> None:
            if values is None:
                return

            if option_string in ("-e", "--exclude"):
                rules_file = values if isinstance(values, (str, os.PathLike)) else Path(str(values))
                try:
                    exclusion_rules.load_rules(rules_file)
                except FileNotFoundError as e:
                    parser.error(str(e))
            else:  # -i/--ignore
                exclusion_rules.add_rule(str(values))

            # Keep the raw values on the namespace as well
            if getattr(namespace, self.dest, None) is None:
                setattr(namespace, self.dest, [])
            getattr(namespace, self.dest).append(values)

    return ExclusionRulesAction


def create_parser(exclusion_rules: BaseExclusionRules) -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        An ArgumentParser instance configured with bfsfind's options.
    """
    description = """
    bfsfind: Search for files and directories whose names match a regular expression.

    The directory tree is walked breadth-first, one level at a time, so shallower
    matches are always printed before deeper ones. The pattern is matched against
    each entry's base name (anywhere in the name, unless anchored), and traversal
    stops descending once the maximum depth is reached. The start directory itself
    is depth 0.

    Matches are printed one per line as soon as they are found. Entries that cannot
    be read are skipped silently unless -P/--permission-action says otherwise.
    """

    epilog = """
    Examples:
      # Text files in the current directory and its immediate subdirectories
      bfsfind '\\.txt$' 1

      # Only directories named like a test package, up to 3 levels below src
      bfsfind -t dir -d src '^tests?$' 3

      # Only consider the start path itself
      bfsfind -d setup.py 'setup' 0

      # Skip whatever the project's .gitignore ignores, plus any node_modules
      bfsfind -e .gitignore -i 'node_modules/' '\\.js$' 5

      # Report unreadable directories on stderr after the results
      bfsfind -P warn -d / '^passwd$' 2

      # Write results to a file and print counts to stderr
      bfsfind -o matches.txt -s stderr '\\.log$' 4

      # Display version information and exit
      bfsfind -V
    """

    parser = argparse.ArgumentParser(
        prog="bfsfind",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"bfsfind {__version__}", help="Show the version and exit"
    )

    ExclusionAction = create_exclusion_action(exclusion_rules)

    parser.add_argument(
        "pattern",
        help="Regular expression matched against file and directory base names.",
    )
    parser.add_argument(
        "max_depth",
        type=non_negative_int,
        help="Maximum directory depth to search (0 considers only the start path).",
    )
    parser.add_argument(
        "-t",
        "--type",
        dest="entry_type",
        choices=[entry_type.value for entry_type in EntryType],
        default=EntryType.ALL.value,
        help="Type of entries to search for (default: all).",
    )
    parser.add_argument(
        "-d",
        "--dir",
        dest="start_dir",
        metavar="PATH",
        default=".",
        help="Starting directory for the search (default: current directory).",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        type=Path,
        metavar="FILE",
        action=ExclusionAction,
        help="Path to a .gitignore-style file of entries to skip (can be specified multiple times).",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        type=str,
        metavar="PATTERN",
        action=ExclusionAction,
        help=(
            "Gitignore-style pattern of entries to skip, e.g. '*.pyc', 'build/' or '!keep.log'. "
            "Can be specified multiple times; applied in order, mixed with -e/--exclude."
        ),
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path. If not specified, results are written to stdout.",
    )
    parser.add_argument(
        "-s",
        "--summary",
        metavar="DEST",
        choices=["stderr", "stdout"],
        help="Print visited, matched and skipped counts. Valid destinations: stderr, stdout.",
    )
    parser.add_argument(
        "-P",
        "--permission-action",
        choices=["ignore", "warn", "fail"],
        default="ignore",
        help="How to handle entries that cannot be read (default: ignore).",
    )

    return parser
