"""Compiled-in route tree and menu tree.

``DEFAULT_ROUTES`` declares every screen with the permissions required to
reach it; ``DEFAULT_MENU_TREE`` is the four-level navigation menu linked to
those screens by route key:

    Dashboard (category, depth 1)
      Main dashboard (page, depth 2)
    Grid samples (category, depth 1)
      Advanced patterns (menu, depth 2)
        Multi grid (menu, depth 3)
          Multi grid tabs (page, depth 4)

Callers may supply their own trees to ``build_access_context``; these
defaults are what ``AccessSession`` uses when none are given.
"""

from __future__ import annotations

from ..permissions.constants import Permissions as P
from .menu import CategoryNode, ExternalNode, MenuGroupNode, MenuNode, PageNode
from .routes import RouteNode


def _grid_route(key: str, path: str, route_key: str, label: str) -> RouteNode:
    return RouteNode(
        key=key,
        path=f"/grid-samples/{path}",
        route_key=route_key,
        label=label,
        required_permissions=(P.MENU_GRID_SAMPLES_VIEW,),
    )


# ── Route Tree ──────────────────────────────────────────

DEFAULT_ROUTES: tuple[RouteNode, ...] = (
    # Public, resolved outside the access pipeline
    RouteNode(key="login", path="/auth/login", label="Sign in"),
    RouteNode(
        key="dashboard",
        path="/dashboard",
        route_key="dashboard.main",
        label="Dashboard",
        required_permissions=(P.MENU_DASHBOARD_VIEW,),
        children=(
            RouteNode(
                key="dashboard-ops",
                path="/dashboard/ops",
                route_key="dashboard.ops",
                label="Operations dashboard",
                required_permissions=(P.ACTION_DASHBOARD_OPS_VIEW,),
            ),
        ),
    ),
    RouteNode(
        key="users",
        path="/users",
        route_key="users.list",
        label="Users",
        required_permissions=(P.PAGE_USERS_LIST_VIEW,),
        children=(
            RouteNode(
                key="users-dialog",
                path="/users/dialog-sample",
                route_key="users.dialog",
                label="Users (dialog sample)",
                required_permissions=(P.PAGE_USERS_LIST_VIEW,),
            ),
            RouteNode(
                key="users-detail",
                path="/users/:id",
                route_key="users.detail",
                label="User detail",
                required_permissions=(P.PAGE_USERS_DETAIL_VIEW,),
                hide_in_breadcrumb=True,
            ),
            RouteNode(
                key="users-bulk-delete",
                path="/users/bulk-delete",
                route_key="users.bulk.delete",
                label="Bulk delete users",
                required_permissions=(P.PAGE_USERS_LIST_VIEW, P.ACTION_USERS_DELETE),
            ),
        ),
    ),
    RouteNode(
        key="auth-management",
        path="/auth",
        label="Access management",
        children=(
            RouteNode(
                key="role-designer",
                path="/auth/role-designer",
                route_key="auth.role.designer",
                label="Role designer",
                required_permissions=(P.PAGE_AUTH_ROLE_DESIGNER_VIEW,),
            ),
            RouteNode(
                key="user-menu-policy",
                path="/auth/user-menu-policy",
                route_key="auth.user.menu.policy",
                label="User menu policy designer",
                required_permissions=(P.MENU_AUTH_VIEW, P.ACTION_AUTH_PERMISSION_ASSIGN),
            ),
        ),
    ),
    RouteNode(
        key="products",
        path="/products/crud",
        route_key="products.crud",
        label="Products",
        required_permissions=(P.MENU_PRODUCTS_VIEW,),
    ),
    RouteNode(
        key="articles",
        path="/articles",
        route_key="articles.list",
        label="Articles",
        required_permissions=(P.MENU_ARTICLES_VIEW,),
        children=(
            RouteNode(
                key="articles-create",
                path="/articles/new",
                route_key="articles.create",
                label="New article",
                required_permissions=(P.ACTION_ARTICLES_CREATE,),
            ),
        ),
    ),
    RouteNode(
        key="schedules",
        path="/schedules",
        route_key="schedules.main",
        label="Schedules",
        required_permissions=(P.MENU_SCHEDULES_VIEW,),
    ),
    RouteNode(
        key="grid-samples",
        path="/grid-samples",
        label="Grid samples",
        children=(
            _grid_route("ag-basic", "ag-basic", "grid.samples.ag.basic", "AG Grid basics"),
            _grid_route("tanstack-basic", "tanstack-basic", "grid.samples.tanstack.basic", "TanStack basics"),
            _grid_route(
                "ag-aggregation", "ag-aggregation-grouping", "grid.samples.ag.aggregation", "Aggregation & grouping"
            ),
            _grid_route("tanstack-role", "tanstack-role-based", "grid.samples.tanstack.role", "Role-based grid"),
            _grid_route("ag-editing", "ag-editing-validation", "grid.samples.ag.editing", "Editing & validation"),
            _grid_route("form-like", "form-like-grid", "grid.samples.form.like", "Form-like grid"),
            _grid_route("infinite", "ag-infinite-scroll", "grid.samples.infinite", "Infinite scroll"),
            _grid_route("pivot-chart", "ag-pivot-chart", "grid.samples.pivot.chart", "Pivot & chart"),
            _grid_route("tree", "tree-data-grid", "grid.samples.tree", "Tree data"),
            _grid_route("multi-tabs", "multi-grid-tabs", "grid.samples.multi.tabs", "Multi grid tabs"),
            _grid_route("master-detail", "master-detail", "grid.samples.master.detail", "Master / detail"),
            _grid_route("row-detail", "row-detail-modal", "grid.samples.row.detail", "Row detail modal"),
            _grid_route(
                "filter-playground",
                "tanstack-filter-playground",
                "grid.samples.filter.playground",
                "Filter playground",
            ),
            _grid_route("global-state", "global-state-demo", "grid.samples.global.state", "Global state demo"),
        ),
    ),
    RouteNode(
        key="notification-templates",
        path="/notifications/templates",
        route_key="notifications.templates",
        label="Notification templates",
        required_permissions=(P.PAGE_NOTIFICATIONS_TEMPLATES_VIEW,),
    ),
    RouteNode(
        key="settings",
        path="/settings",
        label="Settings",
        children=(
            RouteNode(
                key="menu-management",
                path="/settings/menus",
                route_key="system.menu.management",
                label="Menu management",
                required_permissions=(P.PAGE_MENU_MANAGEMENT_VIEW,),
            ),
            RouteNode(
                key="system-settings",
                path="/settings/general",
                route_key="system.settings",
                label="System settings",
                required_permissions=(P.PAGE_SYSTEM_SETTINGS_VIEW,),
            ),
        ),
    ),
    RouteNode(
        key="swagger-playground",
        path="/tools/swagger-playground",
        route_key="tools.swagger",
        label="Swagger playground",
        required_permissions=(P.PAGE_SWAGGER_PLAYGROUND_VIEW,),
    ),
    RouteNode(key="help", path="/help", route_key="help.main", label="Help"),
    RouteNode(
        key="dev-menu-playground",
        path="/dev/menu-playground",
        route_key="dev.menu.playground",
        label="Menu playground",
    ),
)


# ── Menu Tree ───────────────────────────────────────────

DEFAULT_MENU_TREE: tuple[MenuNode, ...] = (
    CategoryNode(
        id="category-dashboard",
        label="Dashboard",
        icon="layout-dashboard",
        order=1,
        children=(
            PageNode(
                id="page-dashboard-main",
                label="Main dashboard",
                route_key="dashboard.main",
                required_permissions=(P.MENU_DASHBOARD_VIEW,),
                order=1,
            ),
            PageNode(
                id="page-dashboard-ops",
                label="Operations dashboard",
                route_key="dashboard.ops",
                required_permissions=(P.ACTION_DASHBOARD_OPS_VIEW,),
                badge="Beta",
                badge_color="warning",
                order=2,
            ),
        ),
    ),
    CategoryNode(
        id="category-user-auth",
        label="Users & access",
        icon="users",
        order=10,
        required_permissions=(P.MENU_USERS_VIEW,),
        children=(
            MenuGroupNode(
                id="menu-users",
                label="User management",
                order=1,
                children=(
                    PageNode(
                        id="page-users-list",
                        label="User list",
                        route_key="users.list",
                        required_permissions=(P.PAGE_USERS_LIST_VIEW,),
                        order=1,
                    ),
                    PageNode(
                        id="page-users-dialog",
                        label="User list (dialog)",
                        route_key="users.dialog",
                        required_permissions=(P.PAGE_USERS_LIST_VIEW,),
                        order=2,
                    ),
                ),
            ),
            MenuGroupNode(
                id="menu-auth",
                label="Access control",
                icon="shield",
                order=2,
                required_permissions=(P.MENU_AUTH_VIEW,),
                children=(
                    PageNode(
                        id="page-role-designer",
                        label="Role designer",
                        route_key="auth.role.designer",
                        required_permissions=(P.PAGE_AUTH_ROLE_DESIGNER_VIEW,),
                        badge="New",
                        badge_color="success",
                        order=1,
                    ),
                ),
            ),
        ),
    ),
    CategoryNode(
        id="category-data",
        label="Data",
        icon="package",
        order=20,
        children=(
            PageNode(
                id="page-products",
                label="Products",
                route_key="products.crud",
                required_permissions=(P.MENU_PRODUCTS_VIEW,),
                badge="CRUD",
                badge_color="success",
                order=1,
            ),
            PageNode(
                id="page-articles",
                label="Articles",
                route_key="articles.list",
                required_permissions=(P.MENU_ARTICLES_VIEW,),
                order=2,
            ),
            PageNode(
                id="page-schedules",
                label="Schedules",
                route_key="schedules.main",
                required_permissions=(P.MENU_SCHEDULES_VIEW,),
                order=3,
            ),
        ),
    ),
    CategoryNode(
        id="category-grid",
        label="Grid samples",
        icon="table",
        order=30,
        badge="Lab",
        badge_color="primary",
        required_permissions=(P.MENU_GRID_SAMPLES_VIEW,),
        children=(
            MenuGroupNode(
                id="menu-grid-basic",
                label="Basic patterns",
                order=1,
                children=(
                    PageNode(id="page-grid-ag-basic", label="AG Grid basics", route_key="grid.samples.ag.basic", order=1),
                    PageNode(
                        id="page-grid-tanstack-basic",
                        label="TanStack basics",
                        route_key="grid.samples.tanstack.basic",
                        order=2,
                    ),
                    PageNode(
                        id="page-grid-ag-aggregation",
                        label="Aggregation & grouping",
                        route_key="grid.samples.ag.aggregation",
                        order=3,
                    ),
                    PageNode(
                        id="page-grid-tanstack-role",
                        label="Role-based grid",
                        route_key="grid.samples.tanstack.role",
                        order=4,
                    ),
                ),
            ),
            MenuGroupNode(
                id="menu-grid-editing",
                label="Editing",
                order=2,
                children=(
                    PageNode(
                        id="page-grid-ag-editing",
                        label="Editing & validation",
                        route_key="grid.samples.ag.editing",
                        order=1,
                    ),
                    PageNode(
                        id="page-grid-form-like",
                        label="Form-like grid",
                        route_key="grid.samples.form.like",
                        order=2,
                    ),
                ),
            ),
            MenuGroupNode(
                id="menu-grid-advanced",
                label="Advanced patterns",
                order=3,
                children=(
                    PageNode(
                        id="page-grid-infinite",
                        label="Infinite scroll",
                        route_key="grid.samples.infinite",
                        order=1,
                    ),
                    PageNode(
                        id="page-grid-pivot-chart",
                        label="Pivot & chart",
                        route_key="grid.samples.pivot.chart",
                        order=2,
                    ),
                    PageNode(id="page-grid-tree", label="Tree data", route_key="grid.samples.tree", order=3),
                    MenuGroupNode(
                        id="menu-grid-multi",
                        label="Multi grid",
                        order=4,
                        children=(
                            PageNode(
                                id="page-grid-multi-tabs",
                                label="Multi grid tabs",
                                route_key="grid.samples.multi.tabs",
                                order=1,
                            ),
                            PageNode(
                                id="page-grid-master-detail",
                                label="Master / detail",
                                route_key="grid.samples.master.detail",
                                badge="New",
                                badge_color="success",
                                order=2,
                            ),
                            PageNode(
                                id="page-grid-row-detail",
                                label="Row detail modal",
                                route_key="grid.samples.row.detail",
                                order=3,
                            ),
                        ),
                    ),
                ),
            ),
            MenuGroupNode(
                id="menu-grid-state",
                label="State & filtering",
                order=4,
                children=(
                    PageNode(
                        id="page-grid-filter-playground",
                        label="Filter playground",
                        route_key="grid.samples.filter.playground",
                        order=1,
                    ),
                    PageNode(
                        id="page-grid-global-state",
                        label="Global state demo",
                        route_key="grid.samples.global.state",
                        badge="New",
                        badge_color="success",
                        order=2,
                    ),
                ),
            ),
        ),
    ),
    CategoryNode(
        id="category-notifications",
        label="Notifications",
        icon="bell",
        order=40,
        required_permissions=(P.MENU_NOTIFICATIONS_VIEW,),
        children=(
            PageNode(
                id="page-notification-templates",
                label="Templates",
                route_key="notifications.templates",
                required_permissions=(P.PAGE_NOTIFICATIONS_TEMPLATES_VIEW,),
                order=1,
            ),
        ),
    ),
    CategoryNode(
        id="category-system",
        label="System",
        icon="settings",
        order=100,
        required_permissions=(P.MENU_SYSTEM_VIEW,),
        children=(
            PageNode(
                id="page-menu-management",
                label="Menu management",
                route_key="system.menu.management",
                required_permissions=(P.PAGE_MENU_MANAGEMENT_VIEW,),
                order=1,
            ),
            PageNode(
                id="page-system-settings",
                label="System settings",
                route_key="system.settings",
                required_permissions=(P.PAGE_SYSTEM_SETTINGS_VIEW,),
                order=2,
            ),
        ),
    ),
    CategoryNode(
        id="category-dev-tools",
        label="Developer tools",
        icon="wrench",
        order=110,
        required_permissions=(P.MENU_DEV_TOOLS_VIEW,),
        children=(
            PageNode(
                id="page-swagger-playground",
                label="Swagger playground",
                route_key="tools.swagger",
                required_permissions=(P.PAGE_SWAGGER_PLAYGROUND_VIEW,),
                order=1,
            ),
        ),
    ),
    CategoryNode(
        id="category-docs",
        label="Docs & help",
        icon="help-circle",
        order=120,
        children=(
            PageNode(id="page-help", label="Help", route_key="help.main", order=1),
            ExternalNode(
                id="external-swagger",
                label="API reference",
                href="https://api.example.com/swagger",
                target="_blank",
                required_permissions=(P.MENU_DOCS_SWAGGER_VIEW,),
                order=2,
            ),
        ),
    ),
    CategoryNode(
        id="category-dev",
        label="Playground",
        order=200,
        badge="Dev",
        badge_color="warning",
        children=(
            PageNode(
                id="page-dev-menu-playground",
                label="Menu playground",
                route_key="dev.menu.playground",
                badge="New",
                badge_color="success",
                order=1,
            ),
        ),
    ),
)


__all__ = [
    "DEFAULT_MENU_TREE",
    "DEFAULT_ROUTES",
]
