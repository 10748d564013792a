"""
git-branch-explorer - Browse, switch and fetch local Git branches from the terminal
"""

from .__version__ import __version__
from .core.session import BranchSessionController
from .cli.main import main

__all__ = ["BranchSessionController", "main", "__version__"]
