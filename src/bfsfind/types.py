from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class EntryType(str, Enum):
    """Enumeration of entry kinds a search can be restricted to.

    The values double as the choices accepted by the -t/--type option.

    Attributes:
        ALL: Match files and directories alike
        FILE: Match only non-directory entries
        DIRECTORY: Match only directories
    """

    ALL = "all"
    FILE = "file"
    DIRECTORY = "dir"

    def accepts(self, is_dir: bool) -> bool:
        """Return True if an entry of the given kind passes this filter."""
        if self is EntryType.FILE:
            return not is_dir
        if self is EntryType.DIRECTORY:
            return is_dir
        return True
