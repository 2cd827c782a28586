"""Route-definition tree and route accessibility resolution.

Provides:
- ``RouteNode`` — one route definition (key, path, route key, required permissions).
- ``iter_routes()`` / ``flatten_routes()`` — depth-first, pre-order traversal.
- ``compute_accessible_route_keys()`` — which route keys the resolved
  permissions and the user policy grant.
- Lookup helpers by key, route key and path (with ``:param`` segments).
- ``get_breadcrumbs()`` — routes along a URL path, minus hidden ones.
"""

from __future__ import annotations

import logging
from collections.abc import Collection, Iterable, Iterator
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, TypeAdapter
from pydantic.alias_generators import to_camel

from ..permissions.policy import UserMenuPolicy, is_policy_in_force

logger = logging.getLogger(__name__)


class RouteNode(BaseModel):
    """A node of the route-definition tree.

    ``required_permissions`` must all be held for the route to be
    accessible; an empty tuple means "any authenticated user". Only nodes
    carrying a ``route_key`` take part in access resolution; the others are
    structural and are still descended into.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="forbid",
    )

    key: str
    path: str
    route_key: Optional[str] = None
    label: str = ""
    required_permissions: tuple[str, ...] = ()
    hide_in_breadcrumb: bool = False
    children: tuple[RouteNode, ...] = ()


RouteNode.model_rebuild()

_ROUTES_ADAPTER: TypeAdapter[tuple[RouteNode, ...]] = TypeAdapter(tuple[RouteNode, ...])


def parse_routes(data: Iterable[Any]) -> tuple[RouteNode, ...]:
    """Validate a route forest from plain data (e.g. decoded JSON)."""
    return _ROUTES_ADAPTER.validate_python(list(data))


def iter_routes(routes: Iterable[RouteNode]) -> Iterator[RouteNode]:
    """Yield every route depth-first, pre-order."""
    for route in routes:
        yield route
        yield from iter_routes(route.children)


def flatten_routes(routes: Iterable[RouteNode]) -> list[RouteNode]:
    """All routes in traversal order."""
    return list(iter_routes(routes))


def compute_accessible_route_keys(
    routes: Iterable[RouteNode],
    final_permissions: Collection[str],
    policy: Optional[UserMenuPolicy],
    *,
    now: Optional[datetime] = None,
) -> tuple[str, ...]:
    """Resolve which route keys are accessible.

    Every node is visited regardless of what happened to its ancestors. For
    each node carrying a ``route_key``:

    1. Blacklisted by the in-force policy (``denied_route_keys``) → excluded.
    2. Whitelist mode (in-force policy with ≥1 ``allowed_route_keys``) →
       included only if whitelisted *and* all required permissions are held.
    3. Otherwise → included iff all required permissions are held.

    Args:
        routes: Route forest.
        final_permissions: Permissions after the policy overlay.
        policy: User policy, or None. Ignored when not in force.
        now: Reference time for the policy expiry check.

    Returns:
        Route keys in traversal order. Duplicated route keys in the tree
        produce duplicated entries.
    """
    permission_set = set(final_permissions)

    in_force = is_policy_in_force(policy, now=now)
    whitelist: Optional[frozenset[str]] = None
    blacklist: frozenset[str] = frozenset()
    if in_force:
        if policy.whitelist_mode:
            whitelist = frozenset(policy.allowed_route_keys)
        blacklist = frozenset(policy.denied_route_keys)

    accessible: list[str] = []
    for route in iter_routes(routes):
        route_key = route.route_key
        if not route_key:
            continue
        if route_key in blacklist:
            continue
        if whitelist is not None and route_key not in whitelist:
            continue
        if all(perm in permission_set for perm in route.required_permissions):
            accessible.append(route_key)

    logger.debug(
        "Resolved %d accessible route keys (policy_in_force=%s, whitelist=%s, blacklist=%d)",
        len(accessible),
        in_force,
        whitelist is not None,
        len(blacklist),
    )
    return tuple(accessible)


def find_route_by_key(routes: Iterable[RouteNode], key: str) -> Optional[RouteNode]:
    """First route whose ``key`` matches, or None."""
    return next((route for route in iter_routes(routes) if route.key == key), None)


def find_route_by_route_key(routes: Iterable[RouteNode], route_key: str) -> Optional[RouteNode]:
    """First route whose ``route_key`` matches, or None."""
    return next((route for route in iter_routes(routes) if route.route_key == route_key), None)


def get_path_by_route_key(routes: Iterable[RouteNode], route_key: str) -> Optional[str]:
    """Path of the first route carrying ``route_key``, or None."""
    route = find_route_by_route_key(routes, route_key)
    return route.path if route else None


def _path_matches(pattern: str, path: str) -> bool:
    pattern_parts = pattern.strip("/").split("/")
    path_parts = path.strip("/").split("/")
    if len(pattern_parts) != len(path_parts):
        return False
    return all(
        expected == actual or (expected.startswith(":") and actual)
        for expected, actual in zip(pattern_parts, path_parts)
    )


def find_route_by_path(routes: Iterable[RouteNode], path: str) -> Optional[RouteNode]:
    """Route matching a concrete URL path, or None.

    An exact match anywhere in the tree wins over a dynamic one, so
    ``/users/dialog-sample`` resolves to its own route rather than to
    ``/users/:id``. Dynamic segments (``:name``) match any non-empty segment.
    """
    flat = flatten_routes(routes)
    exact = next((route for route in flat if route.path == path), None)
    if exact is not None:
        return exact
    return next((route for route in flat if _path_matches(route.path, path)), None)


def get_breadcrumbs(routes: Iterable[RouteNode], path: str) -> list[RouteNode]:
    """Routes along ``path``, one per matching prefix, outermost first.

    Each prefix (``/users``, ``/users/42``, ...) is resolved with
    :func:`find_route_by_path`; prefixes without a route and routes flagged
    ``hide_in_breadcrumb`` are skipped.

    Example::

        [r.key for r in get_breadcrumbs(DEFAULT_ROUTES, "/users/42")]  # ["users"]
    """
    routes = tuple(routes)
    crumbs: list[RouteNode] = []
    prefix = ""
    for segment in (part for part in path.split("/") if part):
        prefix += f"/{segment}"
        route = find_route_by_path(routes, prefix)
        if route is not None and not route.hide_in_breadcrumb:
            crumbs.append(route)
    return crumbs


def get_route_key_by_path(routes: Iterable[RouteNode], path: str) -> Optional[str]:
    """Route key of the first route whose path matches.

    Returns None when no route matches, or when the matching route carries
    no route key.
    """
    for route in iter_routes(routes):
        if route.path == path:
            return route.route_key or None
    return None


__all__ = [
    "RouteNode",
    "compute_accessible_route_keys",
    "find_route_by_key",
    "find_route_by_path",
    "find_route_by_route_key",
    "flatten_routes",
    "get_breadcrumbs",
    "get_path_by_route_key",
    "get_route_key_by_path",
    "iter_routes",
    "parse_routes",
]
