"""Route tree, menu tree, and the operations that tie them to permissions.

Usage:
    from accesscore.navigation import (
        DEFAULT_MENU_TREE,
        DEFAULT_ROUTES,
        compute_accessible_route_keys,
        filter_menu_tree,
    )

    route_keys = compute_accessible_route_keys(DEFAULT_ROUTES, perms, policy)
    menu = filter_menu_tree(DEFAULT_MENU_TREE, route_keys, perms)
"""

from __future__ import annotations

from .defaults import DEFAULT_MENU_TREE, DEFAULT_ROUTES
from .filtering import filter_menu_tree
from .integrity import (
    DUPLICATE_MENU_ID,
    DUPLICATE_ROUTE_KEY,
    MISSING_ROUTE_KEY,
    IntegrityIssue,
    check_navigation_config,
    validate_navigation_config,
)
from .menu import (
    MENU_NODE_TYPES,
    CategoryNode,
    ExternalNode,
    MenuGroupNode,
    MenuNode,
    PageNode,
    dump_menu_tree,
    parse_menu_tree,
)
from .routes import (
    RouteNode,
    compute_accessible_route_keys,
    find_route_by_key,
    find_route_by_path,
    find_route_by_route_key,
    flatten_routes,
    get_breadcrumbs,
    get_path_by_route_key,
    get_route_key_by_path,
    iter_routes,
    parse_routes,
)
from .tree import (
    find_first_accessible_route_key,
    find_menu_node_by_route_key,
    find_menu_path_by_route_key,
    get_max_menu_depth,
    get_menu_node_depth,
    has_children,
    iter_menu_nodes,
    sort_menu_nodes,
)

__all__ = [
    # Defaults
    "DEFAULT_MENU_TREE",
    "DEFAULT_ROUTES",
    # Menu model
    "MENU_NODE_TYPES",
    "CategoryNode",
    "ExternalNode",
    "MenuGroupNode",
    "MenuNode",
    "PageNode",
    "dump_menu_tree",
    "parse_menu_tree",
    # Routes
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
    # Filtering
    "filter_menu_tree",
    # Tree utilities
    "find_first_accessible_route_key",
    "find_menu_node_by_route_key",
    "find_menu_path_by_route_key",
    "get_max_menu_depth",
    "get_menu_node_depth",
    "has_children",
    "iter_menu_nodes",
    "sort_menu_nodes",
    # Integrity
    "DUPLICATE_MENU_ID",
    "DUPLICATE_ROUTE_KEY",
    "MISSING_ROUTE_KEY",
    "IntegrityIssue",
    "check_navigation_config",
    "validate_navigation_config",
]
