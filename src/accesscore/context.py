"""Access context: one full resolution pass over permissions, routes and menu.

Pipeline (each stage feeds the next):

    base permissions ──(policy overlay)──▶ final permissions
    routes + final permissions + policy ──▶ accessible route keys
    menu tree + route keys + permissions ──▶ filtered menu tree
                                          ──▶ default landing route key

The result is immutable. Any change of role, grade or policy produces a new
context via :func:`build_access_context`; contexts are never patched.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from .config import LandingStrategy
from .navigation.filtering import filter_menu_tree
from .navigation.menu import MenuNode
from .navigation.routes import RouteNode, compute_accessible_route_keys, get_path_by_route_key
from .navigation.tree import find_first_accessible_route_key
from .permissions.policy import UserMenuPolicy, compute_final_permissions, is_policy_in_force

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AccessContext:
    """Fully resolved access state for one principal.

    Attributes:
        final_permissions: Permissions after the policy overlay.
        accessible_route_keys: Route keys in route-tree traversal order.
        filtered_menu_tree: Menu forest pruned to what is reachable.
        default_landing_route_key: Where to send the user, or None when
            nothing is accessible.
    """

    final_permissions: frozenset[str] = frozenset()
    accessible_route_keys: tuple[str, ...] = ()
    filtered_menu_tree: tuple[MenuNode, ...] = ()
    default_landing_route_key: Optional[str] = None

    def has_permission(self, permission: str) -> bool:
        return permission in self.final_permissions

    def has_any_permission(self, permissions: Iterable[str]) -> bool:
        """True if any is held; an empty requirement is trivially satisfied."""
        required = list(permissions)
        if not required:
            return True
        return any(perm in self.final_permissions for perm in required)

    def has_all_permissions(self, permissions: Iterable[str]) -> bool:
        return all(perm in self.final_permissions for perm in permissions)

    def can_access_route(self, route_key: str) -> bool:
        return route_key in self.accessible_route_keys


EMPTY_ACCESS_CONTEXT = AccessContext()


def _select_landing_route_key(
    accessible_route_keys: Sequence[str],
    filtered_menu_tree: Sequence[MenuNode],
    policy: Optional[UserMenuPolicy],
    policy_in_force: bool,
    landing_strategy: LandingStrategy | str,
) -> Optional[str]:
    if policy_in_force and policy.default_landing_route_key:
        if policy.default_landing_route_key in accessible_route_keys:
            return policy.default_landing_route_key
        logger.debug(
            "Policy landing route '%s' is not accessible; falling back to %s",
            policy.default_landing_route_key,
            LandingStrategy(landing_strategy).value,
        )

    if LandingStrategy(landing_strategy) is LandingStrategy.MENU_ORDER:
        return find_first_accessible_route_key(filtered_menu_tree)

    return accessible_route_keys[0] if accessible_route_keys else None


def build_access_context(
    *,
    routes: Sequence[RouteNode],
    menu_tree: Sequence[MenuNode],
    base_permissions: Iterable[str],
    user_menu_policy: Optional[UserMenuPolicy],
    landing_strategy: LandingStrategy | str = LandingStrategy.ROUTE_ORDER,
    now: Optional[datetime] = None,
) -> AccessContext:
    """Run the full resolution pipeline.

    Landing route selection:

    1. The in-force policy's ``default_landing_route_key``, if accessible.
    2. ``ROUTE_ORDER`` (default): the first accessible route key in
       route-tree traversal order. This is not necessarily the first visible
       menu entry, since the route tree and the menu tree are ordered
       independently.
       ``MENU_ORDER``: the first route key of the filtered menu tree.
    3. None when nothing is accessible. Callers route to a forbidden page.

    Args:
        routes: Route forest.
        menu_tree: Menu forest.
        base_permissions: Output of ``compute_permissions``.
        user_menu_policy: Per-user overlay, or None.
        landing_strategy: Fallback ordering for the landing route.
        now: Reference time for the policy expiry check. A single value is
            used for every stage so one pass sees one policy state.

    Returns:
        A new :class:`AccessContext`. Equal inputs give equal outputs.
    """
    if now is None:
        now = datetime.now(timezone.utc)

    policy_in_force = is_policy_in_force(user_menu_policy, now=now)

    final_permissions = compute_final_permissions(base_permissions, user_menu_policy, now=now)
    accessible_route_keys = compute_accessible_route_keys(
        routes,
        final_permissions,
        user_menu_policy,
        now=now,
    )
    filtered_menu_tree = filter_menu_tree(menu_tree, accessible_route_keys, final_permissions)
    landing = _select_landing_route_key(
        accessible_route_keys,
        filtered_menu_tree,
        user_menu_policy,
        policy_in_force,
        landing_strategy,
    )

    logger.debug(
        "Built access context: %d permissions, %d routes, %d menu roots, landing=%s",
        len(final_permissions),
        len(accessible_route_keys),
        len(filtered_menu_tree),
        landing,
    )

    return AccessContext(
        final_permissions=frozenset(final_permissions),
        accessible_route_keys=accessible_route_keys,
        filtered_menu_tree=tuple(filtered_menu_tree),
        default_landing_route_key=landing,
    )


def determine_landing_path(
    context: AccessContext,
    routes: Sequence[RouteNode],
    fallback_path: str = "/forbidden",
) -> str:
    """Resolve the URL path the user should be redirected to.

    Tries the context's landing route key, then the first entry of the
    filtered menu tree, then ``fallback_path``.
    """
    if context.default_landing_route_key:
        path = get_path_by_route_key(routes, context.default_landing_route_key)
        if path:
            return path

    first_route_key = find_first_accessible_route_key(context.filtered_menu_tree)
    if first_route_key:
        path = get_path_by_route_key(routes, first_route_key)
        if path:
            return path

    return fallback_path


__all__ = [
    "EMPTY_ACCESS_CONTEXT",
    "AccessContext",
    "build_access_context",
    "determine_landing_path",
]
