"""
Tests for framework auto-detection.
"""

import errno
import os
import warnings
from pathlib import Path

import pytest

from prepost.routes import detect_framework, detect_routes_with_report, reset_routes_config
from prepost.routes.detector import LocalFilesystem, build_ignore_spec, collect_candidate_roots
from prepost.schemas import Framework

pytestmark = pytest.mark.integration


def _deny_access_under(monkeypatch, locked):
    """Make stat() fail with EACCES below `locked`, as after chmod 000 for a non-root user."""
    real_stat = Path.stat

    def stat(self, *args, **kwargs):
        if locked in self.parents:
            raise PermissionError(errno.EACCES, "Permission denied", str(self))
        return real_stat(self, *args, **kwargs)

    monkeypatch.setattr(Path, "stat", stat)


class FakeFilesystem:
    """In-memory FilesystemOracle built from relative file paths."""

    def __init__(self, root, files):
        self.root = Path(root)
        self.files = {self.root / f for f in files}
        self.listed = []

    def exists(self, path):
        return Path(path) in self.files

    def list_directories(self, path):
        self.listed.append(Path(path))
        names = set()
        for f in self.files:
            try:
                relative = f.relative_to(path)
            except ValueError:
                continue
            if len(relative.parts) > 1:
                names.add(relative.parts[0])
        return sorted(names)


class TestDetectFramework:

    def test_app_router(self, make_project):
        root = make_project(["app/page.tsx"])
        assert detect_framework(root) == Framework.APP_ROUTER

    def test_app_router_from_layout(self, make_project):
        root = make_project(["app/layout.js"])
        assert detect_framework(root) == Framework.APP_ROUTER

    def test_pages_router(self, make_project):
        root = make_project(["pages/index.jsx"])
        assert detect_framework(root) == Framework.PAGES_ROUTER

    def test_src_layout(self, make_project):
        root = make_project(["src/app/page.tsx"])
        assert detect_framework(root) == Framework.APP_ROUTER

    def test_monorepo_at_depth_two(self, make_project):
        root = make_project(["apps/web/app/page.tsx"])
        assert detect_framework(root) == Framework.APP_ROUTER

    def test_deeper_than_scan_depth_is_not_found(self, make_project):
        root = make_project(["packages/apps/web/app/page.tsx"])
        assert detect_framework(root) == Framework.GENERIC

    def test_scan_depth_is_configurable(self, make_project, monkeypatch):
        root = make_project(["packages/apps/web/app/page.tsx"])
        assert detect_framework(root, max_depth=3) == Framework.APP_ROUTER

        monkeypatch.setenv("PREPOST_SCAN_DEPTH", "3")
        reset_routes_config()
        assert detect_framework(root) == Framework.APP_ROUTER

    def test_app_router_wins_over_pages_router(self, make_project):
        # pages/ at the root, app/ one level deeper: app router still wins
        root = make_project(["pages/index.tsx", "web/app/page.tsx"])
        assert detect_framework(root) == Framework.APP_ROUTER

    def test_generic_fallback(self, make_project):
        root = make_project(["routes/_index.tsx", "src/components/Header.tsx"])
        assert detect_framework(root) == Framework.GENERIC

    def test_ignored_directories(self, make_project):
        root = make_project([
            "node_modules/next/app/page.tsx",
            "dist/app/page.js",
            ".next/server/app/page.js",
        ])
        assert detect_framework(root) == Framework.GENERIC

    def test_missing_root_is_generic(self, temp_dir):
        assert detect_framework(temp_dir / "missing") == Framework.GENERIC

    def test_defaults_to_cwd(self, make_project, monkeypatch):
        root = make_project(["pages/index.tsx"])
        monkeypatch.chdir(root)
        assert detect_framework() == Framework.PAGES_ROUTER

    def test_unreadable_directory_does_not_abort(self, make_project, monkeypatch):
        root = make_project(["pages/index.tsx", "locked/data.txt"])
        _deny_access_under(monkeypatch, root / "locked")
        result = detect_routes_with_report(["pages/about.tsx"], root_dir=root)
        assert result.framework == Framework.PAGES_ROUTER
        assert result.routes[0].path == "/about"


class TestCandidateRoots:

    def test_breadth_first_and_sorted(self):
        root = Path("/repo")
        fs = FakeFilesystem(root, ["b/x/f.ts", "a/y/f.ts", "a/z/deep/f.ts"])
        candidates = collect_candidate_roots(root, fs, max_depth=2)
        relative = [c.relative_to(root).as_posix() for c in candidates]
        assert relative == [".", "a", "b", "a/y", "a/z", "b/x"]

    def test_never_lists_below_max_depth(self):
        root = Path("/repo")
        fs = FakeFilesystem(root, ["a/b/c/d/f.ts"])
        collect_candidate_roots(root, fs, max_depth=2)
        assert all(len(p.relative_to(root).parts) < 2 for p in fs.listed)

    def test_depth_zero_only_checks_root(self):
        root = Path("/repo")
        fs = FakeFilesystem(root, ["app/page.tsx"])
        assert collect_candidate_roots(root, fs, max_depth=0) == [root]
        assert fs.listed == []

    def test_ignore_spec(self):
        root = Path("/repo")
        fs = FakeFilesystem(root, ["vendor/app/page.tsx", "web/app/page.tsx"])
        spec = build_ignore_spec(["vendor/"])
        candidates = collect_candidate_roots(root, fs, max_depth=1, ignore_spec=spec)
        assert root / "vendor" not in candidates
        assert root / "web" in candidates

    def test_default_ignore_spec(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error", DeprecationWarning)
            spec = build_ignore_spec()
        assert spec.match_file("node_modules/")
        assert spec.match_file(".next/")
        assert not spec.match_file("apps/")

    def test_with_fake_oracle(self):
        root = Path("/repo")
        fs = FakeFilesystem(root, ["apps/site/pages/index.tsx"])
        assert detect_framework(root, fs=fs) == Framework.PAGES_ROUTER


class TestLocalFilesystem:

    def test_lists_only_directories(self, make_project):
        root = make_project(["app/page.tsx", "README.md"])
        assert LocalFilesystem().list_directories(root) == ["app"]

    def test_unreadable_directory_is_empty(self, temp_dir):
        assert LocalFilesystem().list_directories(temp_dir / "missing") == []

    def test_exists_under_unreadable_directory(self, make_project, monkeypatch):
        root = make_project(["locked/app/page.tsx"])
        _deny_access_under(monkeypatch, root / "locked")
        assert LocalFilesystem().exists(root / "locked" / "app" / "page.tsx") is False

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks not supported")
    def test_symlinked_directories_not_followed(self, make_project, temp_dir):
        root = make_project(["real/app/page.tsx"])
        os.symlink(root / "real", root / "link", target_is_directory=True)
        assert "link" not in LocalFilesystem().list_directories(root)
