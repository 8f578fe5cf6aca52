"""Read-only set of paths excluded from a copy."""

import os
from typing import FrozenSet, Iterable, Optional

from treecopy.exclusion_rules.base_rules import BaseExclusionRules
from treecopy.tree_copier.entry_info import EntryInfo
from treecopy.types import PathType


def normalize_path(path: PathType) -> str:
    """Normalize a path for exact-match comparison.

    Forward slashes are converted to the platform separator and the result is
    collapsed with os.path.normpath, so "a/./b" and "a/b/" both become "a/b".

    Args:
        path: The path to normalize.

    Returns:
        The normalized path string.
    """
    path = os.fspath(path)
    if os.sep != "/":
        path = path.replace("/", os.sep)
    return os.path.normpath(path)


class SkipSet:
    """Paths to leave out of a single copy invocation.

    Membership is an exact match between normalized path strings; there is no prefix
    or glob matching, so skipping "src/build" does not skip "src/build2" and a
    descendant of a skipped directory is never visited in the first place.

    A SkipSet can additionally carry gitignore-style exclusion rules. Those are matched
    against the visited path relative to the copy root, using forward slashes. The
    copy root itself is never tested against the rules.

    The set is built once per top-level call and never changes afterwards.

    Attributes:
        paths (FrozenSet[str]): The normalized paths to skip.
        exclusion_rules (Optional[BaseExclusionRules]): Pattern-based rules, if any.
        root (Optional[str]): The normalized copy root the rules are relative to.

    Example:
        >>> skip = SkipSet(["src/build"])
        >>> skip.contains("src/build/")
        True
        >>> skip.contains("src/build2")
        False
    """

    def __init__(
        self,
        paths: Iterable[PathType] = (),
        exclusion_rules: Optional[BaseExclusionRules] = None,
        root: Optional[PathType] = None,
    ) -> None:
        """Initialize a SkipSet.

        Args:
            paths: Paths to skip, with "/" or platform-native separators.
            exclusion_rules: Optional rules matched against paths relative to root.
            root: The copy root. Required when exclusion_rules is given.

        Raises:
            ValueError: If exclusion_rules is given without a root.
        """
        if exclusion_rules is not None and root is None:
            raise ValueError("A root path is required when exclusion rules are given")
        self.paths: FrozenSet[str] = frozenset(normalize_path(p) for p in paths)
        self.exclusion_rules = exclusion_rules
        self.root = normalize_path(root) if root is not None else None

    @classmethod
    def empty(cls) -> "SkipSet":
        """Return a SkipSet that excludes nothing."""
        return cls()

    def contains(self, path: PathType) -> bool:
        """Check whether a path is one of the skipped paths (exact match)."""
        return normalize_path(path) in self.paths

    def excludes(self, path: PathType, info: EntryInfo) -> bool:
        """Check whether a visited entry must be left out of the copy.

        Args:
            path: The source path being visited.
            info: The descriptor of that entry.

        Returns:
            True if the path is in the set or matches the exclusion rules.
        """
        if self.contains(path):
            return True
        if self.exclusion_rules is None or self.root is None:
            return False

        relative_path = os.path.relpath(normalize_path(path), self.root)
        if relative_path in (os.curdir, os.pardir) or relative_path.startswith(os.pardir + os.sep):
            return False
        relative_path = relative_path.replace(os.sep, "/")

        if self.exclusion_rules.exclude(relative_path):
            return True
        # Directory-only patterns such as "build/" need the trailing slash to match
        return info.is_dir and self.exclusion_rules.exclude(relative_path + "/")

    def __len__(self) -> int:
        return len(self.paths)

    def __repr__(self) -> str:
        return f"SkipSet(paths={sorted(self.paths)!r}, exclusion_rules={self.exclusion_rules!r})"
