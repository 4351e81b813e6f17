"""
Framework auto-detection.

Looks for structural signals (app/page.tsx, app/layout.tsx, pages/index.tsx)
in the project root and in directories up to a bounded depth below it, so
monorepos (apps/web/app/page.tsx) and src/ layouts are recognized too.
"""

import os
from collections import deque
from pathlib import Path
from typing import List, Optional, Protocol, Sequence, Union

import pathspec

from prepost.logging_config import logger
from prepost.schemas import Framework
from prepost.tracing import trace
from .config import DEFAULT_IGNORE_DIRS, SCRIPT_EXTENSIONS, get_routes_config

PathLike = Union[str, os.PathLike]

APP_ROUTER_SIGNALS = (("app", "page"), ("app", "layout"))
PAGES_ROUTER_SIGNALS = (("pages", "index"),)


class FilesystemOracle(Protocol):
    """Read-only view of the filesystem used by the detector."""

    def exists(self, path: Path) -> bool:
        ...

    def list_directories(self, path: Path) -> List[str]:
        ...


class LocalFilesystem:
    """FilesystemOracle backed by the real filesystem."""

    def exists(self, path: Path) -> bool:
        """Whether `path` exists. Paths under unreadable directories count as missing."""
        try:
            return Path(path).exists()
        except OSError as e:
            logger.debug(f"Cannot stat '{path}': {e}")
            return False

    def list_directories(self, path: Path) -> List[str]:
        """
        Names of the subdirectories of `path`.

        Symlinked directories are not followed. Unreadable directories yield
        an empty list.
        """
        try:
            with os.scandir(path) as entries:
                return [entry.name for entry in entries if entry.is_dir(follow_symlinks=False)]
        except OSError as e:
            logger.debug(f"Cannot list '{path}': {e}")
            return []


def build_ignore_spec(patterns: Optional[Sequence[str]] = None) -> pathspec.PathSpec:
    """Compile gitignore-style directory patterns skipped during the scan."""
    return pathspec.PathSpec.from_lines("gitignore", patterns or DEFAULT_IGNORE_DIRS)


def collect_candidate_roots(
    root: Path,
    fs: FilesystemOracle,
    max_depth: int,
    ignore_spec: Optional[pathspec.PathSpec] = None,
) -> List[Path]:
    """
    Breadth-first list of directories that may hold a project, root first.

    Args:
        root: Directory to start from (depth 0).
        fs: Filesystem oracle.
        max_depth: Deepest level visited; children of that level are never listed.
        ignore_spec: Directories to skip (defaults to DEFAULT_IGNORE_DIRS).

    Returns:
        Visited directories in breadth-first order. Siblings are sorted by name
        so the result does not depend on directory listing order.
    """
    spec = ignore_spec or build_ignore_spec()
    candidates: List[Path] = []
    queue = deque([(root, 0)])

    while queue:
        directory, depth = queue.popleft()
        candidates.append(directory)
        if depth >= max_depth:
            continue

        for name in sorted(fs.list_directories(directory)):
            child = directory / name
            relative = child.relative_to(root).as_posix()
            if spec.match_file(relative + "/"):
                logger.debug(f"Skipping directory '{relative}' due to ignore rules")
                continue
            queue.append((child, depth + 1))

    return candidates


def has_signal(fs: FilesystemOracle, base: Path, signals) -> bool:
    """Whether any `<subdir>/<stem>.<ext>` signal file exists under `base`."""
    for subdir, stem in signals:
        for ext in SCRIPT_EXTENSIONS:
            if fs.exists(base / subdir / f"{stem}.{ext}"):
                return True
    return False


@trace
def detect_framework(
    root_dir: Optional[PathLike] = None,
    fs: Optional[FilesystemOracle] = None,
    max_depth: Optional[int] = None,
) -> Framework:
    """
    Auto-detect the framework used in the project.

    Every candidate directory is checked for App Router signals before any is
    checked for Pages Router signals, so a project that contains both is
    treated as an App Router project.

    Args:
        root_dir: Project root (defaults to the current working directory).
        fs: Filesystem oracle (defaults to the local filesystem).
        max_depth: Scan depth (defaults to PREPOST_SCAN_DEPTH, 2).

    Returns:
        The detected Framework; GENERIC when no signal is found.
    """
    root = Path(root_dir) if root_dir is not None else Path.cwd()
    fs = fs or LocalFilesystem()
    depth = get_routes_config().scan_depth if max_depth is None else max_depth

    candidates = collect_candidate_roots(root, fs, depth)
    logger.debug(f"Checking {len(candidates)} candidate roots for framework signals")

    for candidate in candidates:
        if has_signal(fs, candidate, APP_ROUTER_SIGNALS):
            logger.info(f"Detected Next.js App Router in '{candidate}'")
            return Framework.APP_ROUTER

    for candidate in candidates:
        if has_signal(fs, candidate, PAGES_ROUTER_SIGNALS):
            logger.info(f"Detected Next.js Pages Router in '{candidate}'")
            return Framework.PAGES_ROUTER

    logger.info("No framework signals found, using generic route detection")
    return Framework.GENERIC
