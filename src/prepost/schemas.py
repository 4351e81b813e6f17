import re
from enum import Enum
from typing import Dict, List, Optional, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from prepost.exceptions import ConfigError

Confidence = Literal["high", "medium", "low"]

CONFIDENCE_RANK: Dict[str, int] = {"high": 0, "medium": 1, "low": 2}

# "/" or "/seg" or "/seg/seg"... (no empty segments, no trailing slash)
_ROOTED_PATH = re.compile(r"^/(?:[^/]+(?:/[^/]+)*)?$")


class Framework(str, Enum):
    """
    Routing convention used to map changed files to routes.
    """
    APP_ROUTER = "app-router"
    PAGES_ROUTER = "pages-router"
    GENERIC = "generic"

    @classmethod
    def parse(cls, value: Union[str, "Framework"]) -> "Framework":
        """
        Parse a framework name, accepting the legacy nextjs-* aliases.

        Raises:
            ConfigError: If the name is not a known framework.
        """
        if isinstance(value, Framework):
            return value
        normalized = value.strip().lower()
        normalized = _FRAMEWORK_ALIASES.get(normalized, normalized)
        try:
            return cls(normalized)
        except ValueError:
            choices = ", ".join(f.value for f in cls)
            raise ConfigError(f"Unknown framework '{value}'. Expected one of: {choices}")


_FRAMEWORK_ALIASES = {
    "nextjs-app": "app-router",
    "nextjs-pages": "pages-router",
}


class DetectedRoute(BaseModel):
    """
    A UI route affected by a changed file.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    path: str
    source_file: str = Field(alias="sourceFile")
    confidence: Confidence
    reason: str

    @field_validator("path")
    @classmethod
    def _path_is_rooted(cls, value: str) -> str:
        if not _ROOTED_PATH.match(value):
            raise ValueError(f"route path must be '/' or '/segment(/segment)*', got '{value}'")
        return value

    @property
    def rank(self) -> int:
        """Sort priority of the confidence tier (high=0, medium=1, low=2)."""
        return CONFIDENCE_RANK[self.confidence]


class RouteDetectionOptions(BaseModel):
    """
    Caller configuration for a detection run.
    """
    framework: Optional[Framework] = None  # Forced framework; auto-detected when None
    max_routes: Optional[int] = Field(default=None, ge=0)
    diff_target: Optional[str] = None  # Only used by the change-set provider

    @field_validator("framework", mode="before")
    @classmethod
    def _parse_framework(cls, value):
        if value is None:
            return None
        return Framework.parse(value)


class RouteDetectionResult(BaseModel):
    """
    Ranked routes plus the truncation notice for one detection run.
    """
    framework: Optional[Framework] = None
    routes: List[DetectedRoute] = Field(default_factory=list)
    total_detected: int = 0
    truncated: bool = False


class Viewport(BaseModel):
    """
    Browser viewport size in CSS pixels.
    """
    width: int = Field(gt=0)
    height: int = Field(gt=0)

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


class ComparisonTarget(BaseModel):
    """
    One before/after screenshot pair to capture.
    """
    route: str
    preset: Optional[str] = None  # Set for responsive captures
    viewport: Viewport
    before_url: str
    after_url: str
    before_file: str
    after_file: str


class ComparisonPlan(BaseModel):
    """
    Everything a capture run needs, without touching a browser.
    """
    before_base: str
    after_base: str
    output_dir: str
    responsive: bool = False
    targets: List[ComparisonTarget] = Field(default_factory=list)
