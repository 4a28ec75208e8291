"""Exclusion rules using .gitignore pattern syntax."""

from os import PathLike
from pathlib import Path
from typing import List, Optional, Sequence, Union

from pathspec import PathSpec
from pathspec.patterns import GitWildMatchPattern  # type: ignore

from bfsfind.types import PathType

from .base_rules import BaseExclusionRules


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Exclusion rules written in .gitignore syntax, matched with the pathspec library.

    Rules can come from files (``-e/--exclude``) and from individual patterns
    (``-i/--ignore``). They are kept in the order they were added, so a later negation
    such as ``!keep.log`` can re-include something an earlier ``*.log`` excluded.

    Because the search engine passes directory paths with a trailing slash, directory-only
    patterns such as ``build/`` prune the whole directory while leaving a file named
    ``build`` alone.

    Attributes:
        spec (PathSpec): Compiled matcher for all rules added so far.

    Example:
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule("*.log")
        >>> rules.add_rule("build/")
        >>> rules.exclude("server.log")
        True
        >>> rules.exclude("build/")
        True
        >>> rules.exclude("build")
        False
        >>> rules.add_rule("!keep.log")
        >>> rules.exclude("keep.log")
        False
    """

    def __init__(self, rules_files: Optional[Union[PathType, Sequence[PathType]]] = None):
        """Initialize with rules from the given files, if any.

        Args:
            rules_files: Path or sequence of paths to files containing .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self._lines: List[str] = []
        self.spec = PathSpec.from_lines(GitWildMatchPattern, self._lines)

        if rules_files is not None:
            self.load_rules(rules_files)

    def exclude(self, path: str) -> bool:
        """Check a path against all rules, honoring negations in order.

        Args:
            path: Path relative to the search start, with forward slashes.

        Returns:
            bool: True if the last rule that matches the path is not a negation.
        """
        return self.spec.match_file(path)

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Append the patterns from one or more .gitignore-style files.

        Args:
            rules_files: Path or sequence of paths to rules files.

        Raises:
            FileNotFoundError: If any rules file does not exist. Rules from files listed
                before the missing one are kept.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.is_file():
                raise FileNotFoundError(f"Rules file not found: {path}")

            with open(path, "r") as f:
                self._extend(f.read().splitlines())

    def add_rule(self, rule: str) -> None:
        """Append a single .gitignore pattern such as "*.pyc", "node_modules/" or "!keep.txt"."""
        self._extend([rule])

    def _extend(self, lines: List[str]) -> None:
        self._lines.extend(lines)
        self.spec = PathSpec.from_lines(GitWildMatchPattern, self._lines)
