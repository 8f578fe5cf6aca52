"""Configuration for recursive copies."""

from dataclasses import dataclass
from typing import Callable, Optional

from treecopy.exclusion_rules.base_rules import BaseExclusionRules
from treecopy.tree_copier.symlink_action import SymlinkAction

# Decides, per symlink source path, how the link is copied
SymlinkPolicy = Callable[[str], SymlinkAction]


def shallow_symlinks(path: str) -> SymlinkAction:
    """Default symlink policy: recreate every link as a link."""
    return SymlinkAction.SHALLOW


@dataclass(frozen=True)
class Options:
    """Immutable settings for a copy.

    Attributes:
        on_symlink: Called with the source path of every symbolic link encountered;
            its result decides whether the link is recreated, dereferenced or skipped.
            When None, the policy of DEFAULT_OPTIONS is used.
        exclusion_rules: Optional gitignore-style rules. Entries whose path relative to
            the copy root matches are left out of the copy, like explicitly skipped paths.

    Example:
        >>> opts = Options(on_symlink=lambda path: SymlinkAction.DEEP)
        >>> opts.symlink_action("some/link")
        <SymlinkAction.DEEP: 'deep'>
        >>> Options().symlink_action("some/link")
        <SymlinkAction.SHALLOW: 'shallow'>
    """

    on_symlink: Optional[SymlinkPolicy] = None
    exclusion_rules: Optional[BaseExclusionRules] = None

    def symlink_action(self, path: str) -> SymlinkAction:
        """Evaluate the symlink policy for a link, falling back to the default policy."""
        policy = self.on_symlink or shallow_symlinks
        return policy(path)


DEFAULT_OPTIONS = Options(on_symlink=shallow_symlinks)
