"""
Git queries for detecting changed files.

Every function degrades to an empty/None result when git is missing, the
directory is not a repository, or the command fails.
"""

import subprocess
from pathlib import Path
from typing import List, Optional, Sequence
from loguru import logger

from .config import GIT_CONFIG


def _run_git(args: Sequence[str], cwd: Path, timeout: Optional[int] = None) -> Optional[str]:
    """
    Run a git command and return its stdout, or None on any failure.

    Args:
        args: Arguments after `git`
        cwd: Working directory
        timeout: Seconds before giving up (default: GIT_CONFIG["timeout_seconds"])

    Returns:
        Command stdout or None if git failed
    """
    # quotepath=off keeps non-ASCII file names unescaped
    cmd = ["git", "-c", "core.quotepath=off", *args]
    try:
        result = subprocess.run(
            cmd,
            cwd=str(cwd),
            capture_output=True,
            text=True,
            timeout=timeout or GIT_CONFIG["timeout_seconds"],
        )
    except subprocess.TimeoutExpired:
        logger.warning(f"'git {' '.join(args)}' timed out")
        return None
    except OSError as e:
        logger.debug(f"Error running git: {e}")
        return None

    if result.returncode != 0:
        logger.debug(f"'git {' '.join(args)}' failed with code {result.returncode}: {result.stderr.strip()}")
        return None
    return result.stdout


def _split_lines(output: Optional[str]) -> List[str]:
    if not output:
        return []
    return [line.strip() for line in output.splitlines() if line.strip()]


def get_git_root(project_path: Path) -> Optional[Path]:
    """
    Get the git repository root for a project path.

    Args:
        project_path: Path to check

    Returns:
        Git root path or None if not a git repo
    """
    output = _run_git(["rev-parse", "--show-toplevel"], project_path, timeout=5)
    if output is None:
        return None
    return Path(output.strip())


def get_diff_files(repo_root: Path, target: str) -> List[str]:
    """
    Files that differ between `target` and the working tree.

    Args:
        repo_root: Git repository root
        target: Any diff target git accepts (HEAD, HEAD~1, main...HEAD)

    Returns:
        Paths relative to the repository root
    """
    return _split_lines(_run_git(["diff", "--name-only", target], repo_root))


def get_staged_files(repo_root: Path) -> List[str]:
    """Files staged in the index."""
    return _split_lines(_run_git(["diff", "--name-only", "--cached"], repo_root))


def get_unstaged_files(repo_root: Path) -> List[str]:
    """Files modified in the working tree but not staged."""
    return _split_lines(_run_git(["diff", "--name-only"], repo_root))


def get_untracked_files(repo_root: Path) -> List[str]:
    """
    Get list of untracked files in git repository.

    Args:
        repo_root: Git repository root (ls-files paths are relative to cwd)

    Returns:
        List of untracked, non-ignored file paths
    """
    return _split_lines(_run_git(["ls-files", "--others", "--exclude-standard"], repo_root))
