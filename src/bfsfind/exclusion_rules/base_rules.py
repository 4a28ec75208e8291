from abc import ABC, abstractmethod
from typing import Sequence, Union

from bfsfind.types import PathType


class BaseExclusionRules(ABC):
    """
    Abstract base class for rules that prune entries from a search.

    The traversal engine asks an exclusion rules object about every entry below the start
    path. An excluded entry is not reported, and if it is a directory its children are
    never queued. Paths are given relative to the start path, use forward slashes, and end
    with a slash when the entry is a directory.

    Only ``exclude`` is required. Loading rules from files and adding individual rules are
    optional capabilities.

    Example:
        >>> class NoHiddenEntries(BaseExclusionRules):
        ...     def exclude(self, path: str) -> bool:
        ...         return any(part.startswith(".") for part in path.rstrip("/").split("/"))
        >>> rules = NoHiddenEntries()
        >>> rules.exclude(".git/")
        True
        >>> rules.exclude("src/main.py")
        False
        >>> rules.add_rule(".*")
        Traceback (most recent call last):
            ...
        NotImplementedError: NoHiddenEntries doesn't support adding individual rules.
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if an entry should be pruned from the search.

        Args:
            path (str): Path relative to the start path, with a trailing slash for directories.

        Returns:
            bool: True if the entry should be excluded, False otherwise.
        """
        pass

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load exclusion rules from one or more files.

        Args:
            rules_files: Path to a file or sequence of paths containing exclusion rules.

        Raises:
            NotImplementedError: If this rule type doesn't support loading from files.
            FileNotFoundError: If any rules file does not exist (for file-supporting rule types).
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support loading rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule directly.

        Args:
            rule (str): The rule to add, in the format of the concrete implementation.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")
