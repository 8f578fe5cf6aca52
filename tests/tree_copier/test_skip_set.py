"""Unit tests for the SkipSet class."""

import os

import pytest

from treecopy.exclusion_rules.git_rules import GitIgnoreExclusionRules
from treecopy.tree_copier.entry_info import EntryInfo
from treecopy.tree_copier.skip_set import SkipSet, normalize_path
from treecopy.types import FileType

FILE = EntryInfo("x", FileType.FILE, 0o644)
DIRECTORY = EntryInfo("x", FileType.DIRECTORY, 0o755)


@pytest.mark.parametrize(
    "path,expected",
    [
        ("a/b", os.path.join("a", "b")),
        ("a/b/", os.path.join("a", "b")),
        ("a/./b", os.path.join("a", "b")),
        ("a//b", os.path.join("a", "b")),
        ("a/c/../b", os.path.join("a", "b")),
        ("/abs/path", os.path.normpath("/abs/path")),
    ],
)
def test_normalize_path(path, expected):
    assert normalize_path(path) == expected


def test_exact_match_only():
    skip = SkipSet(["src/build"])
    assert skip.contains(os.path.join("src", "build"))
    assert not skip.contains(os.path.join("src", "build2"))
    assert not skip.contains(os.path.join("src", "build", "file.txt"))
    assert not skip.contains("src")


def test_accepts_path_objects(tmp_path):
    skip = SkipSet([tmp_path / "a"])
    assert skip.contains(str(tmp_path / "a"))


def test_empty_skip_set_excludes_nothing():
    skip = SkipSet.empty()
    assert len(skip) == 0
    assert not skip.excludes("anything", FILE)


def test_paths_are_frozen():
    skip = SkipSet(["a"])
    assert isinstance(skip.paths, frozenset)


def test_rules_require_root():
    with pytest.raises(ValueError, match="root path is required"):
        SkipSet(exclusion_rules=GitIgnoreExclusionRules())


def test_rules_match_relative_paths():
    rules = GitIgnoreExclusionRules()
    rules.add_rule("*.log")
    rules.add_rule("dist/")
    skip = SkipSet(exclusion_rules=rules, root="project")

    assert skip.excludes(os.path.join("project", "logs", "app.log"), FILE)
    assert skip.excludes(os.path.join("project", "dist"), DIRECTORY)
    assert not skip.excludes(os.path.join("project", "dist"), FILE)
    assert not skip.excludes(os.path.join("project", "main.py"), FILE)


def test_rules_never_match_root_or_outside_paths():
    rules = GitIgnoreExclusionRules()
    rules.add_rule("*")
    skip = SkipSet(exclusion_rules=rules, root="project")

    assert not skip.excludes("project", DIRECTORY)
    assert not skip.excludes(os.path.join("elsewhere", "file"), FILE)
    assert skip.excludes(os.path.join("project", "file"), FILE)


def test_exact_paths_and_rules_combine():
    rules = GitIgnoreExclusionRules()
    rules.add_rule("*.tmp")
    skip = SkipSet(["project/keep/secret.txt"], exclusion_rules=rules, root="project")

    assert skip.excludes(os.path.join("project", "keep", "secret.txt"), FILE)
    assert skip.excludes(os.path.join("project", "scratch.tmp"), FILE)
    assert not skip.excludes(os.path.join("project", "keep", "public.txt"), FILE)
