"""Permission constants, roles and grades.

Provides:
- ``Permissions`` — all permission key constants (``kind:area:...:verb`` format).
- ``Role`` — the closed set of user roles.
- ``Grade`` — the closed set of organisational grades.
- ``GRADE_RANK`` — informational rank per grade (higher = more senior).
"""

from __future__ import annotations


class Permissions:
    """Canonical permission keys.

    Naming convention:

    - ``menu:{area}[:{subarea}]:view`` — menu visibility
    - ``page:{area}[:{subarea}]:view`` — page access
    - ``action:{area}[:{subarea}]:{verb}`` — action execution
    - ``pii:{kind}`` — personal-data handling

    The engine treats keys as opaque strings; only equality matters.
    """

    # ── Menu ────────────────────────────────────────────
    MENU_DASHBOARD_VIEW = "menu:dashboard:view"
    MENU_DASHBOARD_OPS_VIEW = "menu:dashboard:ops:view"
    MENU_USERS_VIEW = "menu:users:view"
    MENU_AUTH_VIEW = "menu:auth:view"
    MENU_SYSTEM_VIEW = "menu:system:view"
    MENU_SYSTEM_SETTINGS_VIEW = "menu:system:settings:view"
    MENU_GRID_SAMPLES_VIEW = "menu:grid-samples:view"
    MENU_NOTIFICATIONS_VIEW = "menu:notifications:view"
    MENU_DOCS_VIEW = "menu:docs:view"
    MENU_DOCS_SWAGGER_VIEW = "menu:docs:swagger:view"
    MENU_SHOWCASE_VIEW = "menu:showcase:view"
    MENU_PRODUCTS_VIEW = "menu:products:view"
    MENU_ARTICLES_VIEW = "menu:articles:view"
    MENU_SCHEDULES_VIEW = "menu:schedules:view"
    MENU_DEV_TOOLS_VIEW = "menu:dev-tools:view"

    # ── Page ────────────────────────────────────────────
    PAGE_DASHBOARD_VIEW = "page:dashboard:view"
    PAGE_DASHBOARD_OPS_VIEW = "page:dashboard:ops:view"
    PAGE_USERS_LIST_VIEW = "page:users:list:view"
    PAGE_USERS_DETAIL_VIEW = "page:users:detail:view"
    PAGE_AUTH_ROLE_DESIGNER_VIEW = "page:auth:role-designer:view"
    PAGE_SYSTEM_SETTINGS_VIEW = "page:system:settings:view"
    PAGE_GRID_SAMPLES_VIEW = "page:grid-samples:view"
    PAGE_NOTIFICATIONS_TEMPLATES_VIEW = "page:notifications:templates:view"
    PAGE_PRODUCTS_VIEW = "page:products:view"
    PAGE_ARTICLES_VIEW = "page:articles:view"
    PAGE_SCHEDULES_VIEW = "page:schedules:view"
    PAGE_SWAGGER_PLAYGROUND_VIEW = "page:swagger-playground:view"
    PAGE_MENU_MANAGEMENT_VIEW = "page:menu-management:view"

    # ── Actions: users ──────────────────────────────────
    ACTION_USERS_CREATE = "action:users:create"
    ACTION_USERS_UPDATE = "action:users:update"
    ACTION_USERS_DELETE = "action:users:delete"
    ACTION_USERS_GRANT_ROLE = "action:users:grant-role"
    ACTION_USERS_EXPORT = "action:users:export"

    # ── Actions: auth ───────────────────────────────────
    ACTION_AUTH_ROLE_CREATE = "action:auth:role:create"
    ACTION_AUTH_ROLE_UPDATE = "action:auth:role:update"
    ACTION_AUTH_ROLE_DELETE = "action:auth:role:delete"
    ACTION_AUTH_PERMISSION_ASSIGN = "action:auth:permission:assign"

    # ── Actions: system ─────────────────────────────────
    ACTION_SYSTEM_SETTINGS_UPDATE = "action:system:settings:update"
    ACTION_SYSTEM_MENU_UPDATE = "action:system:menu:update"

    # ── Actions: dashboard ──────────────────────────────
    ACTION_DASHBOARD_OPS_VIEW = "action:dashboard:ops:view"
    ACTION_DASHBOARD_STATS_EXPORT = "action:dashboard:stats:export"

    # ── Actions: notifications ──────────────────────────
    ACTION_NOTIFICATIONS_TEMPLATE_CREATE = "action:notifications:template:create"
    ACTION_NOTIFICATIONS_TEMPLATE_UPDATE = "action:notifications:template:update"
    ACTION_NOTIFICATIONS_TEMPLATE_DELETE = "action:notifications:template:delete"
    ACTION_NOTIFICATIONS_SEND = "action:notifications:send"

    # ── Actions: products ───────────────────────────────
    ACTION_PRODUCTS_CREATE = "action:products:create"
    ACTION_PRODUCTS_UPDATE = "action:products:update"
    ACTION_PRODUCTS_DELETE = "action:products:delete"

    # ── Actions: articles ───────────────────────────────
    ACTION_ARTICLES_CREATE = "action:articles:create"
    ACTION_ARTICLES_UPDATE = "action:articles:update"
    ACTION_ARTICLES_DELETE = "action:articles:delete"

    # ── Personal data ───────────────────────────────────
    PII_VIEW_FULL = "pii:view-full"
    PII_VIEW_PARTIAL = "pii:view-partial"  # masked
    PII_EXPORT = "pii:export"
    PII_DOWNLOAD = "pii:download"

    @classmethod
    def all(cls) -> tuple[str, ...]:
        """Every declared permission key, in declaration order."""
        return tuple(
            value
            for name, value in vars(cls).items()
            if name.isupper() and isinstance(value, str)
        )


class Role:
    """User role within the organisation.

    Maps 1:1 to a permission set via :data:`ROLE_PERMISSIONS`.
    """

    SYSTEM_ADMIN = "SYSTEM_ADMIN"
    ORG_ADMIN = "ORG_ADMIN"
    MANAGER = "MANAGER"
    STAFF = "STAFF"
    GUEST = "GUEST"

    ALL = frozenset({"SYSTEM_ADMIN", "ORG_ADMIN", "MANAGER", "STAFF", "GUEST"})


class Grade:
    """Organisational grade, layered on top of the role.

    Each grade carries a static boost set (:data:`GRADE_PERMISSION_BOOST`).
    """

    EXECUTIVE = "EXECUTIVE"
    TEAM_LEAD = "TEAM_LEAD"
    SENIOR = "SENIOR"
    JUNIOR = "JUNIOR"
    INTERN = "INTERN"

    ALL = frozenset({"EXECUTIVE", "TEAM_LEAD", "SENIOR", "JUNIOR", "INTERN"})


# Informational only; resolution never compares ranks.
GRADE_RANK: dict[str, int] = {
    Grade.EXECUTIVE: 5,
    Grade.TEAM_LEAD: 4,
    Grade.SENIOR: 3,
    Grade.JUNIOR: 2,
    Grade.INTERN: 1,
}


__all__ = [
    "GRADE_RANK",
    "Grade",
    "Permissions",
    "Role",
]
