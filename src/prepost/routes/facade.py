"""
Public API for route detection.

Maps changed files to affected UI routes.
"""

from typing import Callable, Dict, Iterable, List, Optional, Sequence, Union

from prepost.logging_config import logger
from prepost.schemas import DetectedRoute, Framework, RouteDetectionOptions, RouteDetectionResult
from prepost.tracing import trace
from .aggregator import TruncationCallback, aggregate_routes
from .config import get_routes_config
from .detector import FilesystemOracle, PathLike, detect_framework
from .generic import detect_generic_routes
from .nextjs import detect_app_router_routes, detect_pages_router_routes

Adapter = Callable[[Sequence[str]], List[DetectedRoute]]

ADAPTERS: Dict[Framework, Adapter] = {
    Framework.APP_ROUTER: detect_app_router_routes,
    Framework.PAGES_ROUTER: detect_pages_router_routes,
    Framework.GENERIC: detect_generic_routes,
}


def _resolve_framework(
    framework: Optional[Union[Framework, str]],
    options: RouteDetectionOptions,
) -> Optional[Framework]:
    """Forced framework: argument, then options, then PREPOST_FRAMEWORK."""
    if framework is not None:
        return Framework.parse(framework)
    if options.framework is not None:
        return options.framework
    return get_routes_config().framework


def _resolve_max_routes(max_routes: Optional[int], options: RouteDetectionOptions) -> int:
    if max_routes is not None:
        return max_routes
    if options.max_routes is not None:
        return options.max_routes
    return get_routes_config().max_routes


@trace
def detect_routes_with_report(
    changed_files: Iterable[str],
    options: Optional[RouteDetectionOptions] = None,
    *,
    framework: Optional[Union[Framework, str]] = None,
    max_routes: Optional[int] = None,
    root_dir: Optional[PathLike] = None,
    fs: Optional[FilesystemOracle] = None,
    on_truncate: Optional[TruncationCallback] = None,
) -> RouteDetectionResult:
    """
    Detect routes affected by changed files, with the truncation notice.

    Args:
        changed_files: Paths relative to the repository root (any iterable).
        options: Detection options; keyword arguments take precedence.
        framework: Force a framework instead of auto-detecting.
        max_routes: Maximum number of routes to return (default: 5).
        root_dir: Project root scanned when the framework is auto-detected.
        fs: Filesystem oracle for framework detection.
        on_truncate: Called with (total_detected, kept) when routes are capped.

    Returns:
        RouteDetectionResult. Empty input returns an empty result without
        running framework detection.
    """
    changed_files = list(changed_files)
    options = options or RouteDetectionOptions()
    forced = _resolve_framework(framework, options)
    limit = _resolve_max_routes(max_routes, options)

    if not changed_files:
        return RouteDetectionResult(framework=forced)

    selected = forced or detect_framework(root_dir, fs=fs)
    routes = ADAPTERS[selected](changed_files)
    logger.debug(
        f"{selected.value} adapter mapped {len(changed_files)} files to {len(routes)} candidate routes"
    )

    return aggregate_routes(routes, limit, on_truncate=on_truncate, framework=selected)


def detect_routes(
    changed_files: Iterable[str],
    options: Optional[RouteDetectionOptions] = None,
    *,
    framework: Optional[Union[Framework, str]] = None,
    max_routes: Optional[int] = None,
    root_dir: Optional[PathLike] = None,
    fs: Optional[FilesystemOracle] = None,
    on_truncate: Optional[TruncationCallback] = None,
) -> List[DetectedRoute]:
    """
    Detect routes affected by changed files.

    Main entry point for route detection. Routes are deduplicated by path,
    sorted high -> medium -> low confidence and capped at `max_routes`.
    """
    result = detect_routes_with_report(
        changed_files,
        options,
        framework=framework,
        max_routes=max_routes,
        root_dir=root_dir,
        fs=fs,
        on_truncate=on_truncate,
    )
    return result.routes
