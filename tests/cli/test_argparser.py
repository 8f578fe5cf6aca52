"""Unit tests for the argument parser module in treecopy CLI."""

import argparse
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from treecopy.cli.argparser import create_exclusion_action, create_parser, validate_args
from treecopy.exclusion_rules.git_rules import GitIgnoreExclusionRules


@pytest.fixture
def mock_exclusion_rules():
    """Create a mock ExclusionRules object."""
    mock_rules = MagicMock(spec=GitIgnoreExclusionRules)
    mock_rules.load_rules = MagicMock()
    mock_rules.add_rule = MagicMock()
    return mock_rules


def test_create_exclusion_action():
    """Test creation of ExclusionRulesAction class."""
    ExclusionAction = create_exclusion_action(MagicMock())

    assert issubclass(ExclusionAction, argparse.Action)

    action = ExclusionAction(option_strings=["-e", "--exclude"], dest="exclude", help="test help")
    assert action.option_strings == ["-e", "--exclude"]
    assert action.dest == "exclude"
    assert action.help == "test help"


def test_defaults(mock_exclusion_rules):
    args = create_parser(mock_exclusion_rules).parse_args(["src", "dst"])

    assert args.source == Path("src")
    assert args.destination == Path("dst")
    assert args.skip == []
    assert args.symlinks == "shallow"
    assert args.verbose is False
    assert args.exclude is None
    assert args.ignore is None


def test_repeated_skip_preserves_order(mock_exclusion_rules):
    args = create_parser(mock_exclusion_rules).parse_args(["-s", "src/b", "--skip", "src/a", "src", "dst"])
    assert args.skip == ["src/b", "src/a"]


def test_exclusions_processed_in_order(mock_exclusion_rules):
    calls = []
    mock_exclusion_rules.load_rules.side_effect = lambda value: calls.append(("load", value))
    mock_exclusion_rules.add_rule.side_effect = lambda value: calls.append(("add", value))

    args = create_parser(mock_exclusion_rules).parse_args(
        ["-i", "*.pyc", "-e", ".gitignore", "--ignore", "!keep.pyc", "src", "dst"]
    )

    assert calls == [("add", "*.pyc"), ("load", Path(".gitignore")), ("add", "!keep.pyc")]
    assert args.ignore == ["*.pyc", "!keep.pyc"]
    assert args.exclude == [Path(".gitignore")]


@pytest.mark.parametrize("choice", ["shallow", "deep", "skip"])
def test_symlink_choices(mock_exclusion_rules, choice):
    args = create_parser(mock_exclusion_rules).parse_args(["-L", choice, "src", "dst"])
    assert args.symlinks == choice


def test_invalid_symlink_choice(mock_exclusion_rules):
    with pytest.raises(SystemExit) as exc_info:
        create_parser(mock_exclusion_rules).parse_args(["-L", "follow", "src", "dst"])
    assert exc_info.value.code == 2


def test_missing_destination(mock_exclusion_rules):
    with pytest.raises(SystemExit) as exc_info:
        create_parser(mock_exclusion_rules).parse_args(["src"])
    assert exc_info.value.code == 2


def test_validate_args_same_path(tmp_path):
    args = argparse.Namespace(source=tmp_path, destination=tmp_path / ".")
    with pytest.raises(ValueError, match="same path"):
        validate_args(args)


def test_validate_args_destination_inside_source(tmp_path):
    args = argparse.Namespace(source=tmp_path, destination=tmp_path / "backup")
    with pytest.raises(ValueError, match="into itself"):
        validate_args(args)


def test_validate_args_ok(tmp_path):
    (tmp_path / "src").mkdir()
    validate_args(argparse.Namespace(source=tmp_path / "src", destination=tmp_path / "src-copy"))
