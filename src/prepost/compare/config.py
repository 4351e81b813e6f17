"""
Configuration for comparison planning.
"""

from pathlib import Path

VIEWPORT_PRESETS = {
    "desktop": (1280, 800),
    "tablet": (768, 1024),
    "mobile": (375, 812),
}

DEFAULT_VIEWPORT = "desktop"

# Presets captured per route in responsive mode
RESPONSIVE_PRESETS = ("desktop", "mobile")

IMAGE_EXTENSION = ".png"

DEFAULT_OUTPUT_DIR = Path.home() / "Downloads"
