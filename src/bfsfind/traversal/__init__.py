"""Breadth-first traversal engine with depth bounding and name/type filtering.

This package provides the BFSSearch engine that walks a directory hierarchy level by
level and streams the entries whose base names match a compiled pattern.
"""

from .bfs_search import BFSSearch, search
from .frontier import FrontierItem, entry_name
from .permission_action import PermissionAction

__all__ = [
    "BFSSearch",
    "FrontierItem",
    "PermissionAction",
    "entry_name",
    "search",
]
