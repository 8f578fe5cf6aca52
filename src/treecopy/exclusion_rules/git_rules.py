"""Exclusion rules using .gitignore pattern syntax."""

from os import PathLike
from pathlib import Path
from typing import List, Optional, Sequence, Union

from pathspec import PathSpec
from pathspec.pattern import Pattern

from treecopy.types import PathType

from .base_rules import BaseExclusionRules

# Name of the pathspec pattern factory implementing .gitignore semantics
PATTERN_STYLE = "gitignore"


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Exclusion rules written in .gitignore syntax, matched with pathspec.

    Supports the usual .gitignore features: globs, directory-only patterns ending in
    "/", negation with "!", "**" and comments. Patterns from several files and
    individually added patterns are combined in the order they were added, so a later
    negation can re-include an entry excluded by an earlier pattern.

    Attributes:
        spec (PathSpec): Compiled pattern matcher.

    Example:
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule("build/")
        >>> rules.add_rule("*.log")
        >>> rules.add_rule("!keep.log")
        >>> rules.exclude("build/")
        True
        >>> rules.exclude("logs/debug.log")
        True
        >>> rules.exclude("keep.log")
        False

    Note:
        Paths passed to exclude() must use forward slashes, even on Windows.
    """

    def __init__(self, rules_files: Optional[Union[PathType, Sequence[PathType]]] = None):
        """Initialize GitIgnoreExclusionRules, optionally from rules files.

        Args:
            rules_files: Path(s) to file(s) containing .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self._patterns: List[Pattern] = []
        self.spec = PathSpec(self._patterns)

        if rules_files is not None:
            self.load_rules(rules_files)

    def exclude(self, path: str) -> bool:
        """Check a relative, "/"-separated path against the loaded patterns."""
        return bool(self.spec.match_file(path))

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Append the patterns of one or more .gitignore-style files.

        Args:
            rules_files: Path(s) to file(s) containing .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

            with open(path, "r") as f:
                lines = f.read().splitlines()

            self._patterns.extend(PathSpec.from_lines(PATTERN_STYLE, lines).patterns)
            self._rebuild()

    def add_rule(self, rule: str) -> None:
        """Append a single .gitignore pattern such as "*.pyc", "dist/" or "!keep.txt"."""
        self._patterns.extend(PathSpec.from_lines(PATTERN_STYLE, [rule]).patterns)
        self._rebuild()

    def _rebuild(self) -> None:
        self.spec = PathSpec(self._patterns)

    def __repr__(self) -> str:
        return f"GitIgnoreExclusionRules(patterns={len(self._patterns)})"
