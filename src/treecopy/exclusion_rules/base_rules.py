from abc import ABC, abstractmethod
from typing import Sequence, Union

from treecopy.types import PathType


class BaseExclusionRules(ABC):
    """
    Abstract base class for rules that leave entries out of a copy.

    Implementations decide, from a path relative to the copy root, whether the entry at
    that path is copied. Unlike the exact-match skip list accepted by copy_with_skip(),
    rules may use patterns. Loading rules from files and adding individual rules are
    optional capabilities.

    Example:
        >>> from treecopy.exclusion_rules.git_rules import GitIgnoreExclusionRules
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule('*.pyc')
        >>> rules.exclude('pkg/module.pyc')
        True
        >>> rules.exclude('pkg/module.py')
        False
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if the entry at a given path should be left out of the copy.

        Args:
            path (str): Path of the entry relative to the copy root, with "/" as separator.
                Directories are checked a second time with a trailing "/".

        Returns:
            bool: True if the entry should be excluded, False if it should be copied.

        Example:
            >>> class TmpExclusionRules(BaseExclusionRules):
            ...     def exclude(self, path: str) -> bool:
            ...         return path.endswith('.tmp')
            >>> rules = TmpExclusionRules()
            >>> rules.exclude("build/temp.tmp")
            True
            >>> rules.exclude("main.py")
            False
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
            rule (str): The exclusion rule to add, in the format of the implementation.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")
