"""Breadth-first regex search over directory trees.

This package provides a depth-bounded, breadth-first traversal engine that
streams filesystem entries whose names match a regular expression.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("bfsfind")
except PackageNotFoundError:
    __version__ = "unknown"
