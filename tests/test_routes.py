"""Tests for the route tree and route accessibility resolution."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from accesscore import DEFAULT_ROUTES, RouteNode, UserMenuPolicy, compute_accessible_route_keys
from accesscore.navigation import (
    find_route_by_key,
    find_route_by_path,
    find_route_by_route_key,
    flatten_routes,
    get_breadcrumbs,
    get_path_by_route_key,
    get_route_key_by_path,
    parse_routes,
)

NOW = datetime(2025, 6, 1, tzinfo=timezone.utc)

ROUTES = (
    RouteNode(key="home", path="/home", route_key="page.home"),
    RouteNode(
        key="admin",
        path="/admin",
        children=(
            RouteNode(key="a", path="/admin/a", route_key="page.a", required_permissions=("perm:a",)),
            RouteNode(
                key="b",
                path="/admin/b",
                route_key="page.b",
                required_permissions=("perm:a", "perm:b"),
                children=(
                    RouteNode(key="b-child", path="/admin/b/child", route_key="page.b.child"),
                ),
            ),
        ),
    ),
    RouteNode(key="c", path="/c", route_key="page.c", required_permissions=("perm:c",)),
)

ALL_PERMS = ("perm:a", "perm:b", "perm:c")


class TestRouteNode:
    """Tests for RouteNode parsing and traversal."""

    def test_parse_camel_case(self) -> None:
        routes = parse_routes(
            [
                {
                    "key": "users",
                    "path": "/users",
                    "routeKey": "users.list",
                    "requiredPermissions": ["menu:users:view"],
                    "children": [{"key": "detail", "path": "/users/:id", "hideInBreadcrumb": True}],
                }
            ]
        )
        assert routes[0].route_key == "users.list"
        assert routes[0].required_permissions == ("menu:users:view",)
        assert routes[0].children[0].hide_in_breadcrumb is True
        assert routes[0].children[0].route_key is None

    def test_parse_rejects_unknown_fields(self) -> None:
        with pytest.raises(ValidationError):
            parse_routes([{"key": "x", "path": "/x", "component": "X"}])

    def test_flatten_is_pre_order(self) -> None:
        keys = [route.key for route in flatten_routes(ROUTES)]
        assert keys == ["home", "admin", "a", "b", "b-child", "c"]


class TestRouteLookups:
    """Tests for route lookup helpers."""

    def test_find_by_key(self) -> None:
        assert find_route_by_key(ROUTES, "b-child").path == "/admin/b/child"
        assert find_route_by_key(ROUTES, "missing") is None

    def test_find_by_route_key(self) -> None:
        assert find_route_by_route_key(ROUTES, "page.a").key == "a"
        assert find_route_by_route_key(ROUTES, "page.zzz") is None

    def test_get_path_by_route_key(self) -> None:
        assert get_path_by_route_key(ROUTES, "page.c") == "/c"
        assert get_path_by_route_key(ROUTES, "page.zzz") is None

    def test_get_route_key_by_path(self) -> None:
        assert get_route_key_by_path(ROUTES, "/admin/a") == "page.a"
        assert get_route_key_by_path(ROUTES, "/admin") is None
        assert get_route_key_by_path(ROUTES, "/nowhere") is None


class TestBreadcrumbs:
    """Tests for path matching and breadcrumb trails."""

    def test_find_by_path_prefers_exact_match(self) -> None:
        assert find_route_by_path(DEFAULT_ROUTES, "/users/dialog-sample").route_key == "users.dialog"
        assert find_route_by_path(DEFAULT_ROUTES, "/users/bulk-delete").route_key == "users.bulk.delete"

    def test_find_by_path_dynamic_segment(self) -> None:
        assert find_route_by_path(DEFAULT_ROUTES, "/users/42").route_key == "users.detail"
        assert find_route_by_path(DEFAULT_ROUTES, "/users/42/edit") is None

    def test_hidden_route_is_skipped(self) -> None:
        assert [route.key for route in get_breadcrumbs(DEFAULT_ROUTES, "/users/42")] == ["users"]

    def test_trail_is_outermost_first(self) -> None:
        crumbs = get_breadcrumbs(DEFAULT_ROUTES, "/auth/role-designer")
        assert [route.key for route in crumbs] == ["auth-management", "role-designer"]

    def test_nested_trail_and_unknown_paths(self) -> None:
        assert [route.key for route in get_breadcrumbs(ROUTES, "/admin/b/child")] == ["admin", "b", "b-child"]
        assert get_breadcrumbs(ROUTES, "/nowhere") == []
        assert get_breadcrumbs(ROUTES, "/") == []


class TestComputeAccessibleRouteKeys:
    """Tests for compute_accessible_route_keys()."""

    def test_permission_check_only(self) -> None:
        keys = compute_accessible_route_keys(ROUTES, ("perm:a",), None)
        assert keys == ("page.home", "page.a", "page.b.child")

    def test_children_visited_even_if_parent_inaccessible(self) -> None:
        """page.b needs perm:b, its public child is still reachable."""
        keys = compute_accessible_route_keys(ROUTES, (), None)
        assert "page.b" not in keys
        assert "page.b.child" in keys

    def test_traversal_order(self) -> None:
        keys = compute_accessible_route_keys(ROUTES, ALL_PERMS, None)
        assert keys == ("page.home", "page.a", "page.b", "page.b.child", "page.c")

    def test_blacklist(self) -> None:
        policy = UserMenuPolicy(user_id="u", denied_route_keys=["page.a"])
        keys = compute_accessible_route_keys(ROUTES, ALL_PERMS, policy, now=NOW)
        assert "page.a" not in keys
        assert "page.b" in keys

    def test_whitelist_is_exclusive(self) -> None:
        policy = UserMenuPolicy(user_id="u", allowed_route_keys=["page.a"])
        keys = compute_accessible_route_keys(ROUTES, ALL_PERMS, policy, now=NOW)
        assert keys == ("page.a",)

    def test_whitelist_still_requires_permissions(self) -> None:
        policy = UserMenuPolicy(user_id="u", allowed_route_keys=["page.a", "page.c"])
        keys = compute_accessible_route_keys(ROUTES, ("perm:a",), policy, now=NOW)
        assert keys == ("page.a",)

    def test_blacklist_wins_in_whitelist_mode(self) -> None:
        policy = UserMenuPolicy(
            user_id="u",
            allowed_route_keys=["page.a", "page.c"],
            denied_route_keys=["page.a"],
        )
        keys = compute_accessible_route_keys(ROUTES, ALL_PERMS, policy, now=NOW)
        assert keys == ("page.c",)

    def test_empty_allowed_list_is_not_whitelist_mode(self) -> None:
        policy = UserMenuPolicy(user_id="u", allowed_route_keys=[])
        keys = compute_accessible_route_keys(ROUTES, ALL_PERMS, policy, now=NOW)
        assert len(keys) == 5

    def test_inactive_policy_is_ignored(self) -> None:
        policy = UserMenuPolicy(user_id="u", allowed_route_keys=["page.a"], is_active=False)
        keys = compute_accessible_route_keys(ROUTES, ALL_PERMS, policy, now=NOW)
        assert len(keys) == 5

    def test_expired_policy_is_ignored(self) -> None:
        policy = UserMenuPolicy(
            user_id="u",
            denied_route_keys=["page.home"],
            expires_at="2025-01-01T00:00:00Z",
        )
        keys = compute_accessible_route_keys(ROUTES, ALL_PERMS, policy, now=NOW)
        assert "page.home" in keys

    def test_duplicate_route_keys_are_kept(self) -> None:
        routes = (
            RouteNode(key="x1", path="/x1", route_key="page.x"),
            RouteNode(key="x2", path="/x2", route_key="page.x"),
        )
        assert compute_accessible_route_keys(routes, (), None) == ("page.x", "page.x")

    def test_routes_without_route_key_are_skipped(self) -> None:
        routes = (RouteNode(key="login", path="/login"),)
        assert compute_accessible_route_keys(routes, ALL_PERMS, None) == ()
