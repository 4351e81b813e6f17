"""
URL and filename helpers for before/after captures.
"""

import re
from datetime import datetime, timezone
from typing import Optional

from .config import IMAGE_EXTENSION

_HAS_SCHEME = re.compile(r"^(?:https?|file)://", re.IGNORECASE)
_LOCAL_HOST = re.compile(r"^(?:localhost|127\.0\.0\.1)(?::|/|$)", re.IGNORECASE)


def normalize_url(url: str) -> str:
    """
    Add a scheme to a bare URL.

    Local hosts get http://, everything else https://.

    >>> normalize_url("localhost:3000")
    'http://localhost:3000'
    >>> normalize_url("example.com")
    'https://example.com'
    """
    url = url.strip()
    if _HAS_SCHEME.match(url):
        return url
    if _LOCAL_HOST.match(url):
        return f"http://{url}"
    return f"https://{url}"


def join_route_url(base: str, route: str) -> str:
    """Append a route to a base URL (one trailing slash on the base is dropped)."""
    if not route.startswith("/"):
        route = "/" + route
    if base.endswith("/"):
        base = base[:-1]
    return normalize_url(base + route)


def route_slug(route: str) -> str:
    """
    Filename-safe slug for a route: "/" -> "home", "/docs/intro" -> "docs-intro".
    """
    trimmed = route.strip("/")
    if not trimmed:
        return "home"
    return trimmed.replace("/", "-")


def format_timestamp(moment: datetime) -> str:
    """UTC timestamp to the second, safe for filenames: 2026-10-19T12-30-05."""
    return moment.astimezone(timezone.utc).strftime("%Y-%m-%dT%H-%M-%S")


def build_filename(route: str, state: str, timestamp: datetime, preset: Optional[str] = None) -> str:
    """
    Screenshot filename for one side of a comparison.

    >>> build_filename("/", "before", datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc))
    'home-before-2026-01-02T03-04-05.png'
    """
    parts = [route_slug(route)]
    if preset:
        parts.append(preset)
    parts.extend([state, format_timestamp(timestamp)])
    return "-".join(parts) + IMAGE_EXTENSION
