"""
Public API for change-set detection.
"""

import os
from pathlib import Path
from typing import List, Optional, Union
from loguru import logger

from prepost.tracing import trace
from .config import GIT_CONFIG
from .git_diff import (
    get_git_root,
    get_diff_files,
    get_staged_files,
    get_unstaged_files,
    get_untracked_files,
)


@trace
def get_changed_files(
    diff_target: Optional[str] = None,
    cwd: Optional[Union[str, os.PathLike]] = None,
) -> List[str]:
    """
    List files changed relative to a git baseline.

    Union of the committed diff against `diff_target`, staged changes,
    unstaged changes and untracked-but-not-ignored files, in that order,
    without duplicates.

    Args:
        diff_target: Diff target, e.g. "main...HEAD" or "HEAD~1" (default: HEAD)
        cwd: Any directory inside the repository (default: current directory)

    Returns:
        Paths relative to the repository root. Empty if git is unavailable or
        the directory is not a repository; never raises.
    """
    project_path = Path(cwd) if cwd is not None else Path.cwd()
    target = diff_target or GIT_CONFIG["compare_against"]

    repo_root = get_git_root(project_path)
    if repo_root is None:
        logger.warning(f"{project_path} is not a git repository, no changed files")
        return []

    sources = [get_diff_files(repo_root, target)]
    if GIT_CONFIG.get("include_staged", True):
        sources.append(get_staged_files(repo_root))
    if GIT_CONFIG.get("include_unstaged", True):
        sources.append(get_unstaged_files(repo_root))
    if GIT_CONFIG.get("include_untracked", True):
        sources.append(get_untracked_files(repo_root))

    files: List[str] = []
    seen = set()
    for source in sources:
        for path in source:
            if path not in seen:
                seen.add(path)
                files.append(path)

    logger.info(f"Found {len(files)} changed files against {target}")
    return files
