"""
Viewport resolution for preset names and WxH sizes.
"""

import re
from typing import Union

from prepost.exceptions import ConfigError
from prepost.schemas import Viewport
from .config import DEFAULT_VIEWPORT, VIEWPORT_PRESETS

ViewportConfig = Union[str, Viewport, None]

_SIZE = re.compile(r"^(\d+)x(\d+)$")


def resolve_viewport(value: ViewportConfig = None) -> Viewport:
    """
    Resolve a preset name ("desktop", "tablet", "mobile") or a "WxH" size.

    Raises:
        ConfigError: If the value is neither a preset nor a valid size.
    """
    if value is None:
        value = DEFAULT_VIEWPORT
    if isinstance(value, Viewport):
        return value

    name = value.strip().lower()
    if name in VIEWPORT_PRESETS:
        width, height = VIEWPORT_PRESETS[name]
        return Viewport(width=width, height=height)

    match = _SIZE.match(name)
    if not match or int(match.group(1)) == 0 or int(match.group(2)) == 0:
        presets = ", ".join(VIEWPORT_PRESETS)
        raise ConfigError(f"Invalid viewport: {value}. Use {presets} or WxH (e.g., 1920x1080).")
    return Viewport(width=int(match.group(1)), height=int(match.group(2)))
