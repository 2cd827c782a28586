"""Tests for route/menu configuration integrity checks."""

from __future__ import annotations

import logging

import pytest

from accesscore import (
    DEFAULT_MENU_TREE,
    DEFAULT_ROUTES,
    CategoryNode,
    NavigationConfigError,
    PageNode,
    RouteNode,
    check_navigation_config,
    validate_navigation_config,
)
from accesscore.navigation import DUPLICATE_MENU_ID, DUPLICATE_ROUTE_KEY, MISSING_ROUTE_KEY

ROUTES = (
    RouteNode(key="a", path="/a", route_key="page.a"),
    RouteNode(key="a2", path="/a2", route_key="page.a"),
    RouteNode(key="hidden", path="/hidden", route_key="page.hidden"),
)

MENU = (
    CategoryNode(
        id="c",
        children=(
            PageNode(id="p-a", route_key="page.a"),
            PageNode(id="p-ghost", route_key="page.ghost"),
            PageNode(id="p-a", route_key="page.a"),
        ),
    ),
)


class TestValidateNavigationConfig:
    """Tests for validate_navigation_config()."""

    def test_default_config_is_consistent(self) -> None:
        assert validate_navigation_config(DEFAULT_ROUTES, DEFAULT_MENU_TREE) == []

    def test_reports_every_issue_kind(self) -> None:
        issues = validate_navigation_config(ROUTES, MENU)
        found = {(issue.kind, issue.subject) for issue in issues}
        assert found == {
            (MISSING_ROUTE_KEY, "page.ghost"),
            (DUPLICATE_ROUTE_KEY, "page.a"),
            (DUPLICATE_MENU_ID, "p-a"),
        }

    def test_routes_without_menu_entry_are_fine(self) -> None:
        issues = validate_navigation_config(ROUTES[:1] + ROUTES[2:], ())
        assert issues == []


class TestCheckNavigationConfig:
    """Tests for check_navigation_config()."""

    def test_lenient_mode_logs_and_returns(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="accesscore.navigation.integrity"):
            issues = check_navigation_config(ROUTES, MENU)
        assert len(issues) == 3
        assert sum("Navigation config issue" in r.getMessage() for r in caplog.records) == 3

    def test_strict_mode_raises(self) -> None:
        with pytest.raises(NavigationConfigError) as exc_info:
            check_navigation_config(ROUTES, MENU, strict=True)
        error = exc_info.value
        assert error.code == "NAVIGATION_CONFIG_ERROR"
        assert len(error.details["issues"]) == 3

    def test_strict_mode_passes_consistent_config(self) -> None:
        assert check_navigation_config(DEFAULT_ROUTES, DEFAULT_MENU_TREE, strict=True) == []
