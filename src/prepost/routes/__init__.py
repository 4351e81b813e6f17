"""
Route detection: map changed files to affected UI routes.

Other parts of the application should import from here, not from the
internal modules.
"""

from .facade import detect_routes, detect_routes_with_report, ADAPTERS
from .detector import detect_framework, FilesystemOracle, LocalFilesystem
from .nextjs import detect_app_router_routes, detect_pages_router_routes, build_route_path
from .generic import detect_generic_routes, remix_route_to_path
from .aggregator import aggregate_routes, deduplicate_routes, sort_routes
from .config import get_routes_config, reset_routes_config, DEFAULT_MAX_ROUTES

__all__ = [
    "detect_routes",
    "detect_routes_with_report",
    "detect_framework",
    "detect_app_router_routes",
    "detect_pages_router_routes",
    "detect_generic_routes",
    "build_route_path",
    "remix_route_to_path",
    "aggregate_routes",
    "deduplicate_routes",
    "sort_routes",
    "FilesystemOracle",
    "LocalFilesystem",
    "ADAPTERS",
    "get_routes_config",
    "reset_routes_config",
    "DEFAULT_MAX_ROUTES",
]
