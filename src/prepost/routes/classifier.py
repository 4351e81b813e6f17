"""
Path classification rules.

A framework convention is an ordered table of rules. Each rule pairs a regex
with an outcome; the first rule whose pattern matches a file decides what that
file contributes. Rules are grouped in tiers that are always evaluated in the
same order:

    SKIP    -> file has no visual output (API routes, tests, middleware, ...)
    CONFIG  -> non-visual project configuration (manifests, linters, tsconfig)
    GLOBAL  -> file affects every page, mapped to "/" at low confidence
    PAGE    -> structural convention that maps the file to a specific route

A file that matches nothing is ignored. Unknown paths are never an error.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from prepost.schemas import Confidence, DetectedRoute


class Tier(str, Enum):
    SKIP = "skip"
    CONFIG = "config"
    GLOBAL = "global"
    PAGE = "page"


TIER_ORDER = (Tier.SKIP, Tier.CONFIG, Tier.GLOBAL, Tier.PAGE)

GLOBAL_REASON = "Global style file affects all pages"

RouteBuilder = Callable[[re.Match], str]


def to_route_path(segments: Iterable[str]) -> str:
    """
    Join path segments into a rooted route, dropping empty segments.

    >>> to_route_path(["blog", "[slug]"])
    '/blog/[slug]'
    >>> to_route_path([])
    '/'
    """
    kept = [segment for segment in segments if segment]
    if not kept:
        return "/"
    return "/" + "/".join(kept)


def root_route(match: re.Match) -> str:
    return "/"


def normalize_file_path(file_path: str) -> str:
    """Use forward slashes and drop a leading './' so patterns see repo-relative paths."""
    normalized = file_path.replace("\\", "/")
    while normalized.startswith("./"):
        normalized = normalized[2:]
    return normalized


@dataclass(frozen=True)
class Rule:
    """
    One classification rule.

    `reason` may reference named groups of the pattern, e.g. "{kind} file change".
    """
    tier: Tier
    pattern: re.Pattern
    confidence: Optional[Confidence] = None
    reason: str = ""
    route: Optional[RouteBuilder] = None

    def match(self, file_path: str) -> Optional[re.Match]:
        return self.pattern.search(file_path)

    def emits(self) -> bool:
        """Whether a match produces a route (GLOBAL and PAGE tiers) or discards the file."""
        return self.tier in (Tier.GLOBAL, Tier.PAGE)

    def build(self, file_path: str, match: re.Match) -> DetectedRoute:
        builder = self.route or root_route
        return DetectedRoute(
            path=builder(match),
            source_file=file_path,
            confidence=self.confidence or "low",
            reason=self.reason.format(**match.groupdict()),
        )


def skip(pattern: str) -> Rule:
    return Rule(Tier.SKIP, re.compile(pattern))


def config(pattern: str) -> Rule:
    return Rule(Tier.CONFIG, re.compile(pattern))


def global_file(pattern: str) -> Rule:
    return Rule(Tier.GLOBAL, re.compile(pattern), "low", GLOBAL_REASON, root_route)


def page(pattern: str, confidence: Confidence, reason: str, route: RouteBuilder = root_route) -> Rule:
    return Rule(Tier.PAGE, re.compile(pattern), confidence, reason, route)


class RuleTable:
    """
    Ordered rule table for one framework convention.

    Rules are kept in tier order (SKIP, CONFIG, GLOBAL, PAGE); within a tier the
    declaration order is preserved. First match wins.
    """

    def __init__(self, name: str, rules: Sequence[Rule]):
        self.name = name
        self.rules: Tuple[Rule, ...] = tuple(
            sorted(rules, key=lambda rule: TIER_ORDER.index(rule.tier))
        )

    def __iter__(self):
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    def tier(self, tier: Tier) -> Tuple[Rule, ...]:
        return tuple(rule for rule in self.rules if rule.tier == tier)

    def match(self, file_path: str) -> Optional[Tuple[Rule, re.Match]]:
        """Return the first rule matching the file, with its match object."""
        for rule in self.rules:
            found = rule.match(file_path)
            if found:
                return rule, found
        return None

    def classify(self, file_path: str) -> Optional[DetectedRoute]:
        """Classify a single file path into zero or one route."""
        hit = self.match(normalize_file_path(file_path))
        if hit is None:
            return None
        rule, found = hit
        if not rule.emits():
            return None
        return rule.build(file_path, found)

    def detect(self, files: Iterable[str]) -> List[DetectedRoute]:
        """Classify every file, keeping input order."""
        routes: List[DetectedRoute] = []
        for file_path in files:
            route = self.classify(file_path)
            if route is not None:
                routes.append(route)
        return routes

    def __repr__(self) -> str:
        return f"RuleTable({self.name!r}, rules={len(self.rules)})"
