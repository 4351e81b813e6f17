"""
Route Detection Configuration.

Defaults for the route-detection engine, overridable via PREPOST_* environment
variables.
"""

import os
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, Tuple

from prepost.logging_config import logger
from prepost.exceptions import ConfigError
from prepost.schemas import Framework


DEFAULT_MAX_ROUTES = 5
DEFAULT_SCAN_DEPTH = 2          # Root is depth 0

# Source extensions recognized by the Next.js conventions
SCRIPT_EXTENSIONS: Tuple[str, ...] = ("tsx", "ts", "jsx", "js")

# Directories never worth descending into when looking for framework signals
DEFAULT_IGNORE_DIRS = [
    ".git/",
    ".hg/",
    ".svn/",
    "node_modules/",
    "bower_components/",
    ".next/",
    ".nuxt/",
    ".svelte-kit/",
    ".turbo/",
    ".vercel/",
    ".cache/",
    "dist/",
    "build/",
    "out/",
    "coverage/",
    ".nyc_output/",
    "__pycache__/",
    ".venv/",
    "venv/",
    ".prepost/",
]


def _env_int(key: str, default: int) -> int:
    """Read integer from environment variable."""
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Ignoring {key}={value!r}: not an integer")
        return default


def _env_framework(key: str) -> Optional[Framework]:
    """Read a forced framework from environment variable."""
    value = os.getenv(key, "").strip()
    if not value:
        return None
    try:
        return Framework.parse(value)
    except ConfigError as e:
        logger.warning(f"Ignoring {key}: {e}")
        return None


@dataclass
class RouteDetectionConfig:
    """
    Route detection configuration.

    Environment Variables:
        PREPOST_MAX_ROUTES: Max routes returned by detection (default: 5)
        PREPOST_FRAMEWORK: Force a framework (app-router, pages-router, generic)
        PREPOST_SCAN_DEPTH: Directory depth scanned for framework signals (default: 2)
    """

    max_routes: int = field(default_factory=lambda: _env_int(
        "PREPOST_MAX_ROUTES", DEFAULT_MAX_ROUTES
    ))
    framework: Optional[Framework] = field(default_factory=lambda: _env_framework(
        "PREPOST_FRAMEWORK"
    ))
    scan_depth: int = field(default_factory=lambda: _env_int(
        "PREPOST_SCAN_DEPTH", DEFAULT_SCAN_DEPTH
    ))

    def __post_init__(self):
        if self.max_routes < 0:
            logger.warning(f"max_routes must be non-negative, got {self.max_routes}; using {DEFAULT_MAX_ROUTES}")
            self.max_routes = DEFAULT_MAX_ROUTES
        if self.scan_depth < 0:
            logger.warning(f"scan_depth must be non-negative, got {self.scan_depth}; using {DEFAULT_SCAN_DEPTH}")
            self.scan_depth = DEFAULT_SCAN_DEPTH

    def to_dict(self) -> Dict[str, Any]:
        """Export configuration as dictionary (for JSON output)."""
        return {
            "max_routes": self.max_routes,
            "framework": self.framework.value if self.framework else None,
            "scan_depth": self.scan_depth,
        }


# Global instance for convenience
_default_config: Optional[RouteDetectionConfig] = None


def get_routes_config() -> RouteDetectionConfig:
    """Get the global route detection configuration."""
    global _default_config
    if _default_config is None:
        _default_config = RouteDetectionConfig()
    return _default_config


def reset_routes_config() -> None:
    """Reset global config (useful after env var changes or for testing)."""
    global _default_config
    _default_config = None
