"""
Generic route detection for non-Next.js frameworks.

Handles the common conventions of Remix (routes/*.tsx), SvelteKit
(src/routes/**/+page.svelte) and plain src/pages layouts. Used as the fallback
when the framework is unknown.
"""

import re
from typing import List, Sequence

from prepost.schemas import DetectedRoute

from .classifier import RuleTable, config, global_file, page, skip, to_route_path

_EXT = r"(?:tsx|ts|jsx|js)"

SKIP_RULES = [
    skip(r"\.(?:test|spec)\.(?:ts|tsx|js|jsx)$"),
    skip(r"(?:^|/)__tests__/"),
    skip(r"^\.env"),
    skip(r"^pnpm-lock\.yaml$"),
    skip(r"^yarn\.lock$"),
    skip(r"^package-lock\.json$"),
    skip(r"^bun\.lockb?$"),
]

CONFIG_RULES = [
    config(r"^(?:package|tsconfig|vite\.config|vitest\.config)\."),
]

# Unanchored: global styles live anywhere in these projects
GLOBAL_RULES = [
    global_file(r"globals?\.css$"),
    global_file(r"global\.(?:scss|less)$"),
    global_file(r"tailwind\.config\."),
    global_file(r"postcss\.config\."),
    global_file(r"theme\.(?:ts|js|css)$"),
]


def remix_route_to_path(filename: str) -> str:
    """
    Convert a Remix-style route filename to a URL path.

    Dots delimit nested segments and $ marks a dynamic segment. Escaped dots
    and flat-route nesting conventions are not handled.

    >>> remix_route_to_path("blog.$slug")
    '/blog/:slug'
    >>> remix_route_to_path("_index")
    '/'
    """
    if filename in ("_index", "index"):
        return "/"

    name = re.sub(r"\._index$", "", filename)
    name = name.replace("$", ":")
    return to_route_path(name.replace(".", "/").split("/"))


def _remix_route(match: re.Match) -> str:
    return remix_route_to_path(match.group("name"))


def _sveltekit_route(match: re.Match) -> str:
    return to_route_path((match.group("dir") or "").split("/"))


def _src_pages_route(match: re.Match) -> str:
    name = match.group("name")
    if name == "index":
        return "/"
    return to_route_path(re.sub(r"/index$", "", name).split("/"))


GENERIC_RULES = RuleTable("generic", SKIP_RULES + CONFIG_RULES + GLOBAL_RULES + [
    page(r"^(?:src/)?routes/(?P<name>.+)\." + _EXT + "$",
         "high", "Route file change", _remix_route),
    page(r"^src/routes/(?P<dir>.+/)?\+page\.(?:svelte|ts|js)$",
         "high", "SvelteKit page file change", _sveltekit_route),
    page(r"^src/pages/(?P<name>.+)\." + _EXT + "$",
         "medium", "Page file change", _src_pages_route),
    # Shared components can't be mapped to a route
    page(r"^src/components?/.+\.(?:tsx|ts|jsx|js|svelte|vue)$",
         "low", "Shared component change, may affect any page"),
])


def detect_generic_routes(files: Sequence[str]) -> List[DetectedRoute]:
    """
    Detect routes from changed files using generic heuristics.
    """
    return GENERIC_RULES.detect(files)
