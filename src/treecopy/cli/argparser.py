"""Command-line argument parsing for treecopy.

This module defines the command-line interface for treecopy,
handling argument parsing and validation.
"""

import argparse
import os
from pathlib import Path
from typing import Any, List, Optional, Sequence, Type, Union

from treecopy import __version__
from treecopy.exclusion_rules.base_rules import BaseExclusionRules
from treecopy.tree_copier.symlink_action import SymlinkAction


def create_exclusion_action(exclusion_rules: BaseExclusionRules) -> Type[argparse.Action]:
    """Create a custom action class for handling exclusion rules.

    The returned action updates the provided exclusion rules object as arguments are
    processed, so -e/--exclude files and -i/--ignore patterns are applied in exactly the
    order they appear on the command line.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        A custom action class for use with argparse.
    """

    class ExclusionRulesAction(argparse.Action):
        """Action to update exclusion rules as arguments are processed."""

        def __init__(self, option_strings: List[str], dest: str, **kwargs: Any) -> None:
            super().__init__(option_strings, dest, **kwargs)

        def __call__(
            self,
            parser: argparse.ArgumentParser,
            namespace: argparse.Namespace,
            values: Union[str, Sequence[Any], None],
            option_string: Optional[str] = None,
        ) -> None:
            if values is None:
                return

            if option_string in ("-e", "--exclude"):
                if isinstance(values, (str, os.PathLike)):
                    exclusion_rules.load_rules(values)
                else:
                    exclusion_rules.load_rules(Path(str(values)))
            else:  # -i/--ignore
                exclusion_rules.add_rule(str(values))

            # Keep the raw values on the namespace as well
            if getattr(namespace, self.dest, None) is None:
                setattr(namespace, self.dest, [])
            getattr(namespace, self.dest).append(values)

    return ExclusionRulesAction


def create_parser(exclusion_rules: BaseExclusionRules) -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        An ArgumentParser instance configured with treecopy's options.
    """
    description = """
    treecopy: Recursively copy a file, directory tree or symbolic link.

    Copies SOURCE to DESTINATION like "cp -a": directory structure, file contents and
    permission bits are replicated. Read-only source directories are copied too; their
    mode is applied to the destination once their contents have been written.

    The copy stops at the first error. Anything copied before the error is left in place.
    """

    epilog = """
    Examples:
      # Copy a directory tree
      treecopy project backup/project

      # Leave out specific paths (exact match on the source path)
      treecopy -s project/.git -s project/build project backup/project

      # Leave out entries matching gitignore-style patterns
      treecopy -i "*.pyc" -i "__pycache__/" project backup/project
      treecopy -e project/.gitignore project backup/project

      # Copy what symbolic links point at instead of the links themselves
      treecopy -L deep project backup/project

      # Leave symbolic links out entirely
      treecopy -L skip project backup/project

      # Show every copied entry on stderr
      treecopy -v project backup/project
    """

    parser = argparse.ArgumentParser(
        prog="treecopy",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"treecopy {__version__}", help="Show the version and exit"
    )

    ExclusionAction = create_exclusion_action(exclusion_rules)

    parser.add_argument("source", type=Path, help="The file, directory or symbolic link to copy.")
    parser.add_argument("destination", type=Path, help="Where to create the copy.")
    parser.add_argument(
        "-s",
        "--skip",
        metavar="PATH",
        action="append",
        default=[],
        help=(
            "Source path to leave out of the copy (can be specified multiple times). Compared by exact "
            "match against SOURCE joined with the entry's relative path, e.g. 'project/build'."
        ),
    )
    parser.add_argument(
        "-e",
        "--exclude",
        type=Path,
        metavar="FILE",
        action=ExclusionAction,
        help="Path to a gitignore-style file of patterns to leave out (can be specified multiple times).",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        type=str,
        metavar="PATTERN",
        action=ExclusionAction,
        help=(
            "Individual gitignore-style pattern to leave out (can be specified multiple times). Patterns are "
            "processed in the order they appear, mixed with -e/--exclude options."
        ),
    )
    parser.add_argument(
        "-L",
        "--symlinks",
        choices=[action.value for action in SymlinkAction],
        default=SymlinkAction.SHALLOW.value,
        help=(
            "How to copy symbolic links: 'shallow' recreates the link, 'deep' copies what it points at, "
            "'skip' leaves it out (default: shallow)."
        ),
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every copied and skipped entry to stderr.",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    source = os.path.abspath(args.source)
    destination = os.path.abspath(args.destination)
    if source == destination:
        raise ValueError(f"Source and destination are the same path: {args.source}")
    # Copying a directory into itself would never terminate
    if destination.startswith(source.rstrip(os.sep) + os.sep) and os.path.isdir(source):
        raise ValueError(f"Cannot copy a directory into itself: {args.destination} is inside {args.source}")
