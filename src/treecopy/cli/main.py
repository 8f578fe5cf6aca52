"""Command-line interface for treecopy.

This module provides the `treecopy` command, a thin wrapper around
treecopy.copy_with_skip() that maps command-line options to copy settings,
configures logging and turns errors into exit codes.

Exit Codes:
    0: Successful completion
    1: Runtime error during execution
    2: Command-line syntax error
    126: Permission denied
    130: Interrupted by SIGINT (Ctrl+C)

Example:
    # Copy a tree, leaving out its build directory
    $ treecopy project backup -s project/build

    # Display version information
    $ treecopy --version
"""

import logging
import sys

from treecopy.cli.argparser import create_parser, validate_args
from treecopy.exclusion_rules.git_rules import GitIgnoreExclusionRules
from treecopy.options import Options
from treecopy.tree_copier.symlink_action import SymlinkAction
from treecopy.treecopy import copy_with_skip

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr, at DEBUG level when verbose output is requested."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def main() -> None:
    """Main entry point for the treecopy command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        126: Permission denied
        130: Interrupted by SIGINT (Ctrl+C)
    """
    try:
        # Populated by -e/-i while the arguments are parsed
        exclusion_rules = GitIgnoreExclusionRules()

        parser = create_parser(exclusion_rules)
        args = parser.parse_args()

        validate_args(args)
        configure_logging(args.verbose)

        action = SymlinkAction(args.symlinks)
        options = Options(
            on_symlink=lambda path: action,
            exclusion_rules=exclusion_rules if args.exclude or args.ignore else None,
        )

        copy_with_skip(args.source, args.destination, args.skip, options)

    except PermissionError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(126)
    except KeyboardInterrupt:
        print("Interrupted", file=sys.stderr)
        sys.exit(130)
    except Exception as e:
        logger.debug("Copy failed", exc_info=True)
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
