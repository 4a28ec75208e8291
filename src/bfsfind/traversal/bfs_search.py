"""Breadth-first, depth-bounded search for entries matching a name pattern.

This module provides the BFSSearch engine that walks a directory hierarchy level by
level, applies a depth bound, an entry-type filter and a name pattern to every visited
entry, and yields matching paths as soon as they are found.
"""

import os
import re
import stat
from collections import deque
from typing import Callable, Deque, Iterator, List, Optional, Tuple, Union

from bfsfind.exceptions import TraversalAccessError
from bfsfind.exclusion_rules.base_rules import BaseExclusionRules
from bfsfind.traversal.frontier import FrontierItem, entry_name
from bfsfind.traversal.permission_action import PermissionAction
from bfsfind.types import EntryType, PathType


class BFSSearch:
    """Breadth-first search over a directory tree for entries whose names match a pattern.

    Entries are visited level by level: every entry at depth N is evaluated before any
    entry at depth N+1. Siblings are visited in the order the operating system lists
    them, which is not sorted. The start path itself is depth 0 and is evaluated like
    any other entry.

    Iterating the search runs a fresh traversal each time. Results are yielded one at a
    time and directory listings are read on demand, so memory use is bounded by the
    width of the traversal frontier rather than the size of the tree.

    Symbolic links are followed when reading metadata. There is no cycle detection; a
    symlink loop is only bounded by max_depth.

    Error Handling:
        Failures to read an entry's metadata or list a directory are handled according
        to permission_action:
        - IGNORE (default): Skip the entry or subtree silently
        - WARN: Skip it and record (path, error) in ``errors``
        - RAISE: Raise TraversalAccessError immediately

    Attributes:
        start_path (str): Path the traversal starts from, in its display form.
        pattern (re.Pattern): Compiled pattern tested against each entry's base name.
        max_depth (int): Deepest level evaluated; directories at this level are not expanded.
        entry_type (EntryType): Kind of entries that may be reported.
        exclusion_rules (Optional[BaseExclusionRules]): Rules for pruning entries.
        permission_action (PermissionAction): How to handle filesystem errors.
        errors (List[Tuple[str, Exception]]): Errors recorded during the last run (WARN only).

    Example:
        >>> import re
        >>> search = BFSSearch("src", re.compile(r"\\.py$"), 2, EntryType.FILE)  # doctest: +SKIP
        >>> for path in search:  # doctest: +SKIP
        ...     print(path)
        src/setup.py
        src/pkg/__init__.py
        >>> search.match_count  # doctest: +SKIP
        2
    """

    def __init__(
        self,
        start_path: PathType,
        pattern: "re.Pattern[str]",
        max_depth: int,
        entry_type: Union[str, EntryType] = EntryType.ALL,
        *,
        exclusion_rules: Optional[BaseExclusionRules] = None,
        permission_action: Union[str, PermissionAction] = PermissionAction.IGNORE,
        should_stop: Optional[Callable[[], bool]] = None,
    ) -> None:
        """Initialize a breadth-first search.

        Args:
            start_path: Path to start from. It does not need to exist; a missing or
                unreadable start path produces no results.
            pattern: Compiled regular expression, matched with ``search`` against base names.
            max_depth: Maximum depth to evaluate. 0 considers only the start path.
            entry_type: Restrict results to files, directories, or both. Defaults to ALL.
            exclusion_rules: Optional rules; excluded entries are neither reported nor expanded.
            permission_action: How to handle filesystem errors. Defaults to IGNORE.
            should_stop: Optional callable polled before each entry is visited; once it
                returns True the run ends without visiting the rest of the queue.

        Raises:
            ValueError: If max_depth is negative, or entry_type or permission_action is
                not a recognized value.
        """
        if max_depth < 0:
            raise ValueError(f"max_depth must be a non-negative integer, got {max_depth}")

        self.start_path = os.fspath(start_path)
        self.pattern = pattern
        self.max_depth = max_depth
        self.entry_type = EntryType(entry_type)
        self.exclusion_rules = exclusion_rules
        self.permission_action = PermissionAction(permission_action)
        self.should_stop = should_stop
        self.errors: List[Tuple[str, Exception]] = []
        self._visited_count = 0
        self._match_count = 0
        self._skipped_count = 0

    @property
    def visited_count(self) -> int:
        """Number of entries whose metadata was read during the current or last run."""
        return self._visited_count

    @property
    def match_count(self) -> int:
        """Number of paths yielded during the current or last run."""
        return self._match_count

    @property
    def skipped_count(self) -> int:
        """Number of entries or listings skipped because of filesystem errors."""
        return self._skipped_count

    def __iter__(self) -> Iterator[str]:
        """Run the traversal from scratch, yielding matching paths in breadth-first order.

        Yields:
            Paths of matching entries, shallower entries before deeper ones.

        Raises:
            TraversalAccessError: If an entry cannot be read and permission_action is RAISE.
        """
        self.errors = []
        self._visited_count = 0
        self._match_count = 0
        self._skipped_count = 0

        queue: Deque[FrontierItem] = deque([FrontierItem(self.start_path, 0)])

        while queue:
            if self.should_stop is not None and self.should_stop():
                return

            item = queue.popleft()
            if item.depth > self.max_depth:
                continue

            try:
                is_dir = stat.S_ISDIR(os.stat(item.path).st_mode)
            except (OSError, ValueError) as e:
                self._handle_error(item.path, e)
                continue

            self._visited_count += 1

            if item.depth > 0 and self._is_excluded(item.path, is_dir):
                continue

            if self.entry_type.accepts(is_dir) and self.pattern.search(entry_name(item.path)):
                self._match_count += 1
                yield item.path

            if is_dir and item.depth < self.max_depth:
                queue.extend(self._list_children(item))

    def _list_children(self, item: FrontierItem) -> List[FrontierItem]:
        """List the immediate children of a directory as frontier items one level deeper.

        Children are returned in the order the operating system lists them. If listing
        fails partway, the children read so far are kept.
        """
        children: List[FrontierItem] = []
        try:
            with os.scandir(item.path) as entries:
                for entry in entries:
                    children.append(item.child(entry.path))
        except OSError as e:
            self._handle_error(item.path, e)
        return children

    def _is_excluded(self, path: str, is_dir: bool) -> bool:
        """Check a non-start entry against the exclusion rules.

        Rules see the path relative to the start path with forward slashes, and with a
        trailing slash for directories so that patterns such as "build/" apply.
        """
        if self.exclusion_rules is None:
            return False

        relative_path = os.path.relpath(path, self.start_path).replace(os.sep, "/")
        if is_dir:
            relative_path += "/"
        return self.exclusion_rules.exclude(relative_path)

    def _handle_error(self, path: str, error: Exception) -> None:
        self._skipped_count += 1
        if self.permission_action == PermissionAction.RAISE:
            raise TraversalAccessError(path, error) from error
        if self.permission_action == PermissionAction.WARN:
            self.errors.append((path, error))


def search(
    start_path: PathType,
    pattern: "re.Pattern[str]",
    max_depth: int,
    entry_type: Union[str, EntryType] = EntryType.ALL,
    *,
    exclusion_rules: Optional[BaseExclusionRules] = None,
    permission_action: Union[str, PermissionAction] = PermissionAction.IGNORE,
    should_stop: Optional[Callable[[], bool]] = None,
) -> Iterator[str]:
    """Yield paths under start_path whose base names match pattern, in breadth-first order.

    Convenience wrapper around BFSSearch for callers that only need the results. Each
    call starts a new traversal.

    Args:
        start_path: Path to start from. A missing or unreadable path yields nothing.
        pattern: Compiled regular expression, matched against base names.
        max_depth: Maximum depth to evaluate. 0 considers only the start path.
        entry_type: Restrict results to files, directories, or both.
        exclusion_rules: Optional rules for pruning entries.
        permission_action: How to handle filesystem errors. Defaults to IGNORE.
        should_stop: Optional callable that ends the run early when it returns True.

    Returns:
        An iterator over matching paths.

    Raises:
        ValueError: If max_depth is negative.
    """
    return iter(
        BFSSearch(
            start_path,
            pattern,
            max_depth,
            entry_type,
            exclusion_rules=exclusion_rules,
            permission_action=permission_action,
            should_stop=should_stop,
        )
    )
