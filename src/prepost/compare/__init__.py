"""
Comparison planning: before/after URLs, screenshot filenames and markdown.
"""

from .facade import build_comparison_plan, select_routes, parse_route_list
from .markdown import generate_markdown, generate_plan_markdown
from .urls import normalize_url, join_route_url, route_slug, format_timestamp, build_filename
from .viewport import resolve_viewport

__all__ = [
    "build_comparison_plan",
    "select_routes",
    "parse_route_list",
    "generate_markdown",
    "generate_plan_markdown",
    "normalize_url",
    "join_route_url",
    "route_slug",
    "format_timestamp",
    "build_filename",
    "resolve_viewport",
]
