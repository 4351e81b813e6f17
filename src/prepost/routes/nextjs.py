"""
Next.js route detection from changed files.

Supports the App Router (app/**/page.tsx) and Pages Router (pages/*.tsx)
conventions, with or without a src/ prefix.
"""

import re
from typing import List, Sequence

from prepost.schemas import DetectedRoute

from .classifier import RuleTable, config, global_file, page, skip, to_route_path

_EXT = r"(?:tsx|ts|jsx|js)"
_APP = r"^(?:src/)?app/"
_PAGES = r"^(?:src/)?pages/"

# Files with no visual output
SKIP_RULES = [
    skip(_APP + r"api/"),
    skip(_PAGES + r"api/"),
    skip(r"^(?:src/)?middleware\.(?:ts|js|mjs)$"),
    skip(r"^next\.config\.(?:ts|js|mjs)$"),
    skip(r"\.d\.ts$"),
    skip(r"\.(?:test|spec)\.(?:ts|tsx|js|jsx)$"),
    skip(r"(?:^|/)__tests__/"),
]

# Config files with no visual impact
CONFIG_RULES = [
    config(r"^package\.json$"),
    config(r"^tsconfig.*\.json$"),
    config(r"^\.eslintrc"),
    config(r"^eslint\.config\."),
    config(r"^\.prettierrc"),
    config(r"^prettier\.config\."),
    config(r"^pnpm-lock\.yaml$"),
    config(r"^yarn\.lock$"),
    config(r"^package-lock\.json$"),
    config(r"^bun\.lockb?$"),
]

# Global files that affect all pages
GLOBAL_RULES = [
    global_file(r"^(?:src/)?(?:app/)?globals?\.css$"),
    global_file(r"^(?:src/)?(?:app/)?global\.(?:scss|less)$"),
    global_file(r"^tailwind\.config\.(?:ts|js|mjs|cjs)$"),
    global_file(r"^postcss\.config\.(?:ts|js|mjs|cjs)$"),
    global_file(r"^(?:src/)?(?:app/)?theme\.(?:ts|js)$"),
]


def build_route_path(dir_path: str) -> str:
    """
    Build a route path from an App Router directory path.

    Route groups like (marketing) and parallel slots like @modal never appear
    in the URL; dynamic segments like [slug] are kept verbatim.

    >>> build_route_path("(marketing)/about/")
    '/about'
    >>> build_route_path("blog/[slug]/")
    '/blog/[slug]'
    """
    if not dir_path:
        return "/"

    segments = []
    for segment in dir_path.split("/"):
        if re.fullmatch(r"\(.+\)", segment):
            continue
        if segment.startswith("@"):
            continue
        segments.append(segment)
    return to_route_path(segments)


def _directory_route(match: re.Match) -> str:
    return build_route_path(match.group("dir") or "")


def _pages_route(match: re.Match) -> str:
    name = re.sub(r"/index$", "", match.group("name"))
    return to_route_path(name.split("/"))


APP_ROUTER_RULES = RuleTable("app-router", SKIP_RULES + CONFIG_RULES + GLOBAL_RULES + [
    page(_APP + r"(?P<dir>.+/)?page\." + _EXT + "$",
         "high", "Direct page file change", _directory_route),
    page(_APP + r"(?P<dir>.+/)?layout\." + _EXT + "$",
         "medium", "Layout file change affects route and children", _directory_route),
    page(_APP + r"(?P<dir>.+/)?(?P<kind>loading|error|not-found|template)\." + _EXT + "$",
         "medium", "{kind} file change", _directory_route),
    page(_APP + r"(?P<dir>.+/)?(?:components?|ui|lib|hooks|utils)/.+\." + _EXT + "$",
         "medium", "Component in app directory, parent route may be affected", _directory_route),
    page(_APP + r"(?P<dir>.+/)?[^/]+\.(?:tsx|ts|jsx|js|css|scss)$",
         "low", "File in app directory, may affect route", _directory_route),
])

PAGES_ROUTER_RULES = RuleTable("pages-router", SKIP_RULES + CONFIG_RULES + GLOBAL_RULES + [
    # _app/_document also end in a page extension, so they go first
    page(_PAGES + r"_(?:app|document)\." + _EXT + "$",
         "medium", "App wrapper change affects all pages"),
    page(_PAGES + r"index\." + _EXT + "$",
         "high", "Index page change"),
    page(_PAGES + r"(?P<name>.+)\." + _EXT + "$",
         "high", "Direct page file change", _pages_route),
])


def detect_app_router_routes(files: Sequence[str]) -> List[DetectedRoute]:
    """
    Detect routes from changed files in a Next.js App Router project.
    """
    return APP_ROUTER_RULES.detect(files)


def detect_pages_router_routes(files: Sequence[str]) -> List[DetectedRoute]:
    """
    Detect routes from changed files in a Next.js Pages Router project.
    """
    return PAGES_ROUTER_RULES.detect(files)
