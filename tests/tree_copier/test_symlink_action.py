"""Unit tests for the symlink_action module."""

from treecopy.tree_copier.symlink_action import SymlinkAction


def test_symlink_action_enum():
    """Test the SymlinkAction enum values."""
    assert SymlinkAction.SHALLOW == "shallow"
    assert SymlinkAction.DEEP == "deep"
    assert SymlinkAction.SKIP == "skip"

    # Test string conversion works both ways
    assert SymlinkAction("shallow") == SymlinkAction.SHALLOW
    assert SymlinkAction("deep") == SymlinkAction.DEEP
    assert SymlinkAction("skip") == SymlinkAction.SKIP


def test_symlink_action_has_exactly_three_variants():
    assert [action.value for action in SymlinkAction] == ["shallow", "deep", "skip"]
