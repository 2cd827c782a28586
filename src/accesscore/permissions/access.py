"""Access-check predicates over resolved permissions and route keys.

Used by route guards and UI collaborators to answer "is P held",
"is route K accessible" and "are all/any of these permissions held".
"""

from __future__ import annotations

from collections.abc import Collection, Iterable


def has_permission(permissions: Collection[str], permission: str) -> bool:
    """Check if ``permission`` is held."""
    return permission in permissions


def has_any_permission(permissions: Collection[str], required: Iterable[str]) -> bool:
    """Check if at least one of ``required`` is held.

    An empty requirement list is trivially satisfied.

    Example::

        has_any_permission(("menu:users:view",), ["menu:users:view", "pii:export"])  # True
        has_any_permission(("menu:users:view",), [])                                 # True
    """
    required = list(required)
    if not required:
        return True
    perm_set = set(permissions)
    return any(perm in perm_set for perm in required)


def has_all_permissions(permissions: Collection[str], required: Iterable[str]) -> bool:
    """Check if every permission in ``required`` is held (empty = True)."""
    perm_set = set(permissions)
    return all(perm in perm_set for perm in required)


def is_route_key_accessible(route_key: str, accessible_route_keys: Collection[str]) -> bool:
    """Check if ``route_key`` is among the accessible route keys."""
    return route_key in accessible_route_keys


__all__ = [
    "has_all_permissions",
    "has_any_permission",
    "has_permission",
    "is_route_key_accessible",
]
