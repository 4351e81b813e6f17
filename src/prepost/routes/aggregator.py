"""
Combine adapter output into the final ranked route list.
"""

from typing import Callable, Dict, List, Optional, Sequence

from prepost.logging_config import logger
from prepost.schemas import DetectedRoute, Framework, RouteDetectionResult

TruncationCallback = Callable[[int, int], None]


def deduplicate_routes(routes: Sequence[DetectedRoute]) -> List[DetectedRoute]:
    """
    Deduplicate routes by path, keeping the highest confidence entry.

    On a confidence tie the first route seen wins. Each path keeps the position
    where it was first seen.
    """
    by_path: Dict[str, DetectedRoute] = {}
    for route in routes:
        existing = by_path.get(route.path)
        if existing is None or route.rank < existing.rank:
            by_path[route.path] = route
    return list(by_path.values())


def sort_routes(routes: Sequence[DetectedRoute]) -> List[DetectedRoute]:
    """Stable sort by confidence: high, then medium, then low."""
    return sorted(routes, key=lambda route: route.rank)


def aggregate_routes(
    routes: Sequence[DetectedRoute],
    max_routes: int,
    on_truncate: Optional[TruncationCallback] = None,
    framework: Optional[Framework] = None,
) -> RouteDetectionResult:
    """
    Deduplicate, rank and cap detected routes.

    Args:
        routes: Raw adapter output, in input-file order.
        max_routes: Maximum number of routes to keep (trusted, non-negative).
        on_truncate: Called with (total_detected, kept) when the list is capped.
        framework: Framework the routes were detected with, recorded on the result.

    Returns:
        RouteDetectionResult with the kept routes and the truncation notice.
    """
    ranked = sort_routes(deduplicate_routes(routes))
    total = len(ranked)

    truncated = total > max_routes
    if truncated:
        ranked = ranked[:max_routes]
        logger.warning(
            f"Detected {total} routes, capping at {max_routes}. Use --max-routes to increase."
        )
        if on_truncate is not None:
            on_truncate(total, max_routes)

    return RouteDetectionResult(
        framework=framework,
        routes=ranked,
        total_detected=total,
        truncated=truncated,
    )
