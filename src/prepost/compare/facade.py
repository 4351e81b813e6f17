"""
Public API for comparison planning.

Turns routes and two base URLs into the list of screenshots a capture run
has to take. No browser is involved here.
"""

from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional, Sequence

from loguru import logger

from prepost.schemas import ComparisonPlan, ComparisonTarget, DetectedRoute
from .config import DEFAULT_OUTPUT_DIR, RESPONSIVE_PRESETS
from .urls import build_filename, join_route_url, normalize_url
from .viewport import ViewportConfig, resolve_viewport


def parse_route_list(value: Optional[str]) -> List[str]:
    """Split a comma-separated route list, dropping blanks."""
    if not value:
        return []
    return [route.strip() for route in value.split(",") if route.strip()]


def select_routes(
    explicit: Optional[Sequence[str]] = None,
    detected: Optional[Sequence[DetectedRoute]] = None,
) -> List[str]:
    """
    Routes to compare: explicit routes win, then detected routes, then "/".
    """
    if explicit:
        return list(explicit)
    if detected:
        return [route.path for route in detected]
    logger.info("No routes detected, defaulting to /")
    return ["/"]


def build_comparison_plan(
    before_base: str,
    after_base: str,
    routes: Sequence[str],
    responsive: bool = False,
    viewport: ViewportConfig = None,
    output_dir: Optional[Path] = None,
    timestamp: Optional[datetime] = None,
) -> ComparisonPlan:
    """
    Plan before/after captures for each route.

    Args:
        before_base: Base URL of the "before" state (e.g. production)
        after_base: Base URL of the "after" state (e.g. localhost:3000)
        routes: Routes to compare; empty means ["/"]
        responsive: Capture desktop and mobile for each route
        viewport: Preset name or WxH, ignored in responsive mode
        output_dir: Where screenshots go (default: ~/Downloads)
        timestamp: Shared timestamp for all filenames (default: now)

    Returns:
        ComparisonPlan with one target per route (two in responsive mode)

    Raises:
        ConfigError: If the viewport is invalid
    """
    directory = Path(output_dir) if output_dir is not None else DEFAULT_OUTPUT_DIR
    moment = timestamp or datetime.now(timezone.utc)
    single_viewport = resolve_viewport(viewport)

    targets: List[ComparisonTarget] = []
    for route in routes or ["/"]:
        before_url = join_route_url(before_base, route)
        after_url = join_route_url(after_base, route)

        presets = RESPONSIVE_PRESETS if responsive else (None,)
        for preset in presets:
            targets.append(ComparisonTarget(
                route=route,
                preset=preset,
                viewport=resolve_viewport(preset) if preset else single_viewport,
                before_url=before_url,
                after_url=after_url,
                before_file=str(directory / build_filename(route, "before", moment, preset)),
                after_file=str(directory / build_filename(route, "after", moment, preset)),
            ))

    logger.debug(f"Planned {len(targets)} comparisons for {len(routes or ['/'])} routes")
    return ComparisonPlan(
        before_base=normalize_url(before_base),
        after_base=normalize_url(after_base),
        output_dir=str(directory),
        responsive=responsive,
        targets=targets,
    )
