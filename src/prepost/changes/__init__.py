"""
Change-set provider: which files changed relative to a git baseline.

Public API for listing changed files.
"""

from .facade import get_changed_files
from .git_diff import get_git_root

__all__ = [
    "get_changed_files",
    "get_git_root",
]
