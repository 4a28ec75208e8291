"""Frontier items queued by the breadth-first traversal."""

from pathlib import PurePath
from typing import NamedTuple


class FrontierItem(NamedTuple):
    """A path waiting to be visited, with its distance from the start path.

    Attributes:
        path: Path in its display form (start path joined with child names).
        depth: Number of containment steps from the start path, which is depth 0.
    """

    path: str
    depth: int

    def child(self, path: str) -> "FrontierItem":
        """Return the frontier item for a child entry one level deeper."""
        return FrontierItem(path, self.depth + 1)


def entry_name(path: str) -> str:
    """Return the final segment of a path, or an empty string if it has none.

    Paths such as "/", "." and ".." have no name segment of their own.

    Names that are not valid in the filesystem encoding keep their undecodable bytes as
    surrogate escapes (as produced by os.scandir), so the pattern sees for example
    "caf\\udce9" rather than a replacement character. A pattern can only match such
    bytes through wildcards or the surrogate code points themselves.

    Example:
        >>> entry_name("root/sub/b.txt")
        'b.txt'
        >>> entry_name("root/sub/")
        'sub'
        >>> entry_name(".")
        ''
        >>> entry_name("..")
        ''
    """
    name = PurePath(path).name
    return "" if name == ".." else name
