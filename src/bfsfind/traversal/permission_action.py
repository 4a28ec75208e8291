"""Permission action enum for handling filesystem errors during traversal."""

from enum import Enum


class PermissionAction(str, Enum):
    """Action to take when an entry cannot be read during traversal.

    Values:
        IGNORE: Skip the entry or subtree silently (default behavior)
        WARN: Skip it, but record the error so it can be reported after the results
        RAISE: Raise a TraversalAccessError immediately
    """

    IGNORE = "ignore"
    WARN = "warn"
    RAISE = "raise"
