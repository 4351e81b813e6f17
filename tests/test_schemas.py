"""
Tests for the pydantic data models.
"""

import pytest
from pydantic import ValidationError

from prepost.exceptions import ConfigError
from prepost.schemas import DetectedRoute, Framework, RouteDetectionOptions, Viewport

pytestmark = pytest.mark.fast


def _route(path, confidence="high"):
    return DetectedRoute(path=path, source_file="app/page.tsx", confidence=confidence, reason="test")


class TestDetectedRoute:

    @pytest.mark.parametrize("path", ["/", "/about", "/blog/[slug]", "/:lang/docs"])
    def test_rooted_paths(self, path):
        assert _route(path).path == path

    @pytest.mark.parametrize("path", ["", "about", "/about/", "//", "/a//b"])
    def test_rejects_unrooted_paths(self, path):
        with pytest.raises(ValidationError):
            _route(path)

    def test_rejects_unknown_confidence(self):
        with pytest.raises(ValidationError):
            _route("/", confidence="certain")

    def test_rank(self):
        assert [_route("/", c).rank for c in ("high", "medium", "low")] == [0, 1, 2]

    def test_alias_dump(self):
        dumped = _route("/about").model_dump(by_alias=True)
        assert dumped == {
            "path": "/about",
            "sourceFile": "app/page.tsx",
            "confidence": "high",
            "reason": "test",
        }

    def test_accepts_alias_on_input(self):
        route = DetectedRoute(path="/", sourceFile="x.tsx", confidence="low", reason="r")
        assert route.source_file == "x.tsx"

    def test_frozen(self):
        route = _route("/")
        with pytest.raises(ValidationError):
            route.path = "/other"


class TestFramework:

    @pytest.mark.parametrize("value,expected", [
        ("app-router", Framework.APP_ROUTER),
        ("pages-router", Framework.PAGES_ROUTER),
        ("generic", Framework.GENERIC),
        ("nextjs-app", Framework.APP_ROUTER),
        ("nextjs-pages", Framework.PAGES_ROUTER),
        (" App-Router ", Framework.APP_ROUTER),
        (Framework.GENERIC, Framework.GENERIC),
    ])
    def test_parse(self, value, expected):
        assert Framework.parse(value) is expected

    def test_parse_unknown(self):
        with pytest.raises(ConfigError, match="Unknown framework 'remix'"):
            Framework.parse("remix")

    def test_options_accept_aliases(self):
        assert RouteDetectionOptions(framework="nextjs-pages").framework is Framework.PAGES_ROUTER

    def test_options_reject_negative_max_routes(self):
        with pytest.raises(ValidationError):
            RouteDetectionOptions(max_routes=-1)


def test_viewport_str():
    assert str(Viewport(width=1280, height=800)) == "1280x800"


def test_viewport_rejects_zero():
    with pytest.raises(ValidationError):
        Viewport(width=0, height=800)
