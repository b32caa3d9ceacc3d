"""
git-stacker - Stacked branch workflow on top of git and GitHub
"""

from .__version__ import __version__
from .cli.main import main

__all__ = ["main", "__version__"]
