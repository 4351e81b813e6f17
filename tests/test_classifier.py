"""
Tests for the ordered rule tables shared by all adapters.
"""

import pytest

from prepost.routes.classifier import (
    RuleTable,
    Tier,
    config,
    global_file,
    normalize_file_path,
    page,
    skip,
    to_route_path,
)
from prepost.routes.generic import GENERIC_RULES
from prepost.routes.nextjs import APP_ROUTER_RULES, PAGES_ROUTER_RULES

pytestmark = pytest.mark.fast


def test_to_route_path_drops_empty_segments():
    assert to_route_path([]) == "/"
    assert to_route_path(["", ""]) == "/"
    assert to_route_path(["blog", "", "[slug]"]) == "/blog/[slug]"


@pytest.mark.parametrize("raw,expected", [
    ("app/page.tsx", "app/page.tsx"),
    ("./app/page.tsx", "app/page.tsx"),
    ("app\\about\\page.tsx", "app/about/page.tsx"),
])
def test_normalize_file_path(raw, expected):
    assert normalize_file_path(raw) == expected


class TestRuleTable:

    def test_rules_are_kept_in_tier_order(self):
        table = RuleTable("mixed", [
            page(r"^x/", "high", "page"),
            global_file(r"\.css$"),
            skip(r"^x/api/"),
            config(r"^package\.json$"),
        ])
        assert [rule.tier for rule in table] == [Tier.SKIP, Tier.CONFIG, Tier.GLOBAL, Tier.PAGE]

    def test_first_match_wins(self):
        table = RuleTable("ordered", [
            page(r"^x/", "high", "first"),
            page(r"^x/y", "low", "second"),
        ])
        route = table.classify("x/y.tsx")
        assert route.reason == "first"

    def test_skip_beats_page(self):
        table = RuleTable("skip", [
            page(r"^x/", "high", "page"),
            skip(r"^x/api/"),
        ])
        assert table.classify("x/api/handler.ts") is None
        assert table.classify("x/home.ts") is not None

    def test_unmatched_file_is_ignored(self):
        table = RuleTable("empty", [])
        assert table.classify("anything.tsx") is None
        assert table.detect(["a", "b"]) == []

    def test_reason_uses_named_groups(self):
        table = RuleTable("groups", [page(r"^(?P<kind>\w+)\.tsx$", "medium", "{kind} changed")])
        assert table.classify("loading.tsx").reason == "loading changed"

    def test_tier_lookup(self):
        assert len(APP_ROUTER_RULES.tier(Tier.PAGE)) == 5
        assert len(PAGES_ROUTER_RULES.tier(Tier.PAGE)) == 3
        assert len(GENERIC_RULES.tier(Tier.PAGE)) == 4

    def test_repr(self):
        assert repr(GENERIC_RULES) == f"RuleTable('generic', rules={len(GENERIC_RULES)})"


@pytest.mark.parametrize("table", [APP_ROUTER_RULES, PAGES_ROUTER_RULES, GENERIC_RULES])
def test_only_global_and_page_rules_emit(table):
    for rule in table:
        assert rule.emits() == (rule.tier in (Tier.GLOBAL, Tier.PAGE))
