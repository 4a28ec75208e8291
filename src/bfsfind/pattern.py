"""Compilation of the name-matching regular expression."""

import re

from bfsfind.exceptions import InvalidPatternError


def compile_pattern(pattern: str) -> "re.Pattern[str]":
    """Compile a name-matching pattern, rejecting invalid syntax up front.

    The compiled pattern is later applied with ``search``, so it matches anywhere in an
    entry's base name unless it is anchored explicitly.

    Args:
        pattern: Regular expression in Python ``re`` syntax.

    Returns:
        The compiled pattern.

    Raises:
        InvalidPatternError: If the pattern cannot be compiled.

    Example:
        >>> compile_pattern(r".*\\.txt$").search("notes.txt") is not None
        True
        >>> compile_pattern("*")
        Traceback (most recent call last):
            ...
        bfsfind.exceptions.InvalidPatternError: Invalid regex pattern '*': nothing to repeat at position 0
    """
    try:
        return re.compile(pattern)
    except re.error as e:
        raise InvalidPatternError(pattern, str(e)) from e
