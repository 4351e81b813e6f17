"""
prepost - before/after screenshots for pull requests

Detects the UI routes affected by a code change and plans before/after
comparisons for review.
"""

__version__ = "0.2.0"

# Core exports
from prepost.schemas import DetectedRoute, Framework, RouteDetectionOptions, RouteDetectionResult
from prepost.routes import (
    detect_routes,
    detect_routes_with_report,
    detect_framework,
    detect_app_router_routes,
    detect_pages_router_routes,
    detect_generic_routes,
)
from prepost.changes import get_changed_files
from prepost.compare import build_comparison_plan, generate_markdown

__all__ = [
    "__version__",
    "DetectedRoute",
    "Framework",
    "RouteDetectionOptions",
    "RouteDetectionResult",
    "detect_routes",
    "detect_routes_with_report",
    "detect_framework",
    "detect_app_router_routes",
    "detect_pages_router_routes",
    "detect_generic_routes",
    "get_changed_files",
    "build_comparison_plan",
    "generate_markdown",
]
