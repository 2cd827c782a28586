"""Role and grade permission tables, and base permission resolution.

Provides:
- ``ROLE_PERMISSIONS`` — role → static permission set.
- ``GRADE_PERMISSION_BOOST`` — grade → additional permissions.
- ``compute_permissions()`` — union of role set and grade boost.
- ``is_valid_permission_key()`` — catalog membership check.
"""

from __future__ import annotations

from typing import Optional

from .constants import Grade, Permissions, Role

# ── Role → Permission Table ─────────────────────────────

ROLE_PERMISSIONS: dict[str, tuple[str, ...]] = {
    Role.SYSTEM_ADMIN: Permissions.all(),
    Role.ORG_ADMIN: (
        # menu
        Permissions.MENU_DASHBOARD_VIEW,
        Permissions.MENU_DASHBOARD_OPS_VIEW,
        Permissions.MENU_USERS_VIEW,
        Permissions.MENU_AUTH_VIEW,
        Permissions.MENU_SYSTEM_VIEW,
        Permissions.MENU_SYSTEM_SETTINGS_VIEW,
        Permissions.MENU_GRID_SAMPLES_VIEW,
        Permissions.MENU_NOTIFICATIONS_VIEW,
        Permissions.MENU_PRODUCTS_VIEW,
        Permissions.MENU_ARTICLES_VIEW,
        Permissions.MENU_SCHEDULES_VIEW,
        # page
        Permissions.PAGE_DASHBOARD_VIEW,
        Permissions.PAGE_DASHBOARD_OPS_VIEW,
        Permissions.PAGE_USERS_LIST_VIEW,
        Permissions.PAGE_USERS_DETAIL_VIEW,
        Permissions.PAGE_AUTH_ROLE_DESIGNER_VIEW,
        Permissions.PAGE_SYSTEM_SETTINGS_VIEW,
        Permissions.PAGE_GRID_SAMPLES_VIEW,
        Permissions.PAGE_NOTIFICATIONS_TEMPLATES_VIEW,
        Permissions.PAGE_PRODUCTS_VIEW,
        Permissions.PAGE_ARTICLES_VIEW,
        Permissions.PAGE_SCHEDULES_VIEW,
        # actions
        Permissions.ACTION_USERS_CREATE,
        Permissions.ACTION_USERS_UPDATE,
        Permissions.ACTION_USERS_DELETE,
        Permissions.ACTION_USERS_GRANT_ROLE,
        Permissions.ACTION_AUTH_ROLE_CREATE,
        Permissions.ACTION_AUTH_ROLE_UPDATE,
        Permissions.ACTION_SYSTEM_SETTINGS_UPDATE,
        Permissions.ACTION_SYSTEM_MENU_UPDATE,
        Permissions.ACTION_DASHBOARD_OPS_VIEW,
        Permissions.ACTION_NOTIFICATIONS_TEMPLATE_CREATE,
        Permissions.ACTION_NOTIFICATIONS_TEMPLATE_UPDATE,
        Permissions.ACTION_PRODUCTS_CREATE,
        Permissions.ACTION_PRODUCTS_UPDATE,
        Permissions.ACTION_PRODUCTS_DELETE,
        # pii
        Permissions.PII_VIEW_FULL,
        Permissions.PII_EXPORT,
    ),
    Role.MANAGER: (
        Permissions.MENU_DASHBOARD_VIEW,
        Permissions.MENU_USERS_VIEW,
        Permissions.MENU_GRID_SAMPLES_VIEW,
        Permissions.MENU_NOTIFICATIONS_VIEW,
        Permissions.MENU_PRODUCTS_VIEW,
        Permissions.MENU_ARTICLES_VIEW,
        Permissions.MENU_SCHEDULES_VIEW,
        Permissions.PAGE_DASHBOARD_VIEW,
        Permissions.PAGE_USERS_LIST_VIEW,
        Permissions.PAGE_USERS_DETAIL_VIEW,
        Permissions.PAGE_GRID_SAMPLES_VIEW,
        Permissions.PAGE_NOTIFICATIONS_TEMPLATES_VIEW,
        Permissions.PAGE_PRODUCTS_VIEW,
        Permissions.PAGE_ARTICLES_VIEW,
        Permissions.PAGE_SCHEDULES_VIEW,
        Permissions.ACTION_USERS_CREATE,
        Permissions.ACTION_USERS_UPDATE,
        Permissions.ACTION_NOTIFICATIONS_TEMPLATE_CREATE,
        Permissions.ACTION_NOTIFICATIONS_TEMPLATE_UPDATE,
        Permissions.ACTION_PRODUCTS_CREATE,
        Permissions.ACTION_PRODUCTS_UPDATE,
        Permissions.PII_VIEW_PARTIAL,
    ),
    Role.STAFF: (
        Permissions.MENU_DASHBOARD_VIEW,
        Permissions.MENU_GRID_SAMPLES_VIEW,
        Permissions.MENU_ARTICLES_VIEW,
        Permissions.MENU_SCHEDULES_VIEW,
        Permissions.PAGE_DASHBOARD_VIEW,
        Permissions.PAGE_GRID_SAMPLES_VIEW,
        Permissions.PAGE_ARTICLES_VIEW,
        Permissions.PAGE_SCHEDULES_VIEW,
        Permissions.ACTION_ARTICLES_CREATE,
        Permissions.PII_VIEW_PARTIAL,
    ),
    Role.GUEST: (
        Permissions.MENU_DASHBOARD_VIEW,
        Permissions.PAGE_DASHBOARD_VIEW,
    ),
}


# ── Grade → Permission Boost ────────────────────────────

GRADE_PERMISSION_BOOST: dict[str, tuple[str, ...]] = {
    Grade.EXECUTIVE: (
        Permissions.PII_VIEW_FULL,
        Permissions.PII_EXPORT,
        Permissions.ACTION_DASHBOARD_STATS_EXPORT,
        Permissions.ACTION_USERS_EXPORT,
    ),
    Grade.TEAM_LEAD: (
        Permissions.ACTION_USERS_GRANT_ROLE,
        Permissions.PII_VIEW_FULL,
    ),
    Grade.SENIOR: (
        Permissions.ACTION_USERS_CREATE,
        Permissions.ACTION_USERS_UPDATE,
    ),
    Grade.JUNIOR: (),
    Grade.INTERN: (),
}


def compute_permissions(role: Optional[str], grade: Optional[str]) -> tuple[str, ...]:
    """Resolve the base permission set for a role and grade.

    No role means no permissions, whatever the grade. Otherwise the role's
    static set is followed by the grade boost, deduplicated with the first
    occurrence kept.

    Args:
        role: One of :class:`Role`, or None.
        grade: One of :class:`Grade`, or None.

    Returns:
        Deduplicated tuple of permission keys.

    Example::

        >>> compute_permissions(Role.GUEST, Grade.EXECUTIVE)[:2]
        ('menu:dashboard:view', 'page:dashboard:view')
        >>> compute_permissions(None, Grade.EXECUTIVE)
        ()
    """
    if not role:
        return ()

    role_permissions = ROLE_PERMISSIONS.get(role, ())
    grade_boost = GRADE_PERMISSION_BOOST.get(grade, ()) if grade else ()

    return tuple(dict.fromkeys((*role_permissions, *grade_boost)))


_ALL_KEYS = frozenset(Permissions.all())


def is_valid_permission_key(key: str) -> bool:
    """Check whether ``key`` is a permission declared on :class:`Permissions`."""
    return key in _ALL_KEYS


__all__ = [
    "GRADE_PERMISSION_BOOST",
    "ROLE_PERMISSIONS",
    "compute_permissions",
    "is_valid_permission_key",
]
