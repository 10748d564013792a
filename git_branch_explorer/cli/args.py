"""Command-line argument parsing for git-branch-explorer."""

import argparse
from git_branch_explorer.__version__ import __version__


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Browse, switch and fetch local Git branches",
        epilog="Run inside a Git working copy. Keys: s switch, f fetch, r refresh, "
        "up/down select, q quit.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument("--version", action="version", version=f"git-branch-explorer {__version__}")
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )

    return parser.parse_args(argv)
