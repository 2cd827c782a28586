"""Consistency checks between the route tree and the menu tree.

The two trees are linked only by route-key strings, so nothing stops a menu
page from naming a route key no route carries. The resolution engine
tolerates that (the page is simply never accessible), but it is almost
always a configuration mistake, so it is reported here.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass

from ..exceptions import NavigationConfigError
from .menu import MenuNode
from .routes import RouteNode, iter_routes
from .tree import iter_menu_nodes

logger = logging.getLogger(__name__)

# Issue kinds
MISSING_ROUTE_KEY = "missing_route_key"
DUPLICATE_ROUTE_KEY = "duplicate_route_key"
DUPLICATE_MENU_ID = "duplicate_menu_id"


@dataclass(frozen=True)
class IntegrityIssue:
    """A single route/menu inconsistency.

    Attributes:
        kind: One of ``MISSING_ROUTE_KEY``, ``DUPLICATE_ROUTE_KEY``,
            ``DUPLICATE_MENU_ID``.
        subject: The offending route key or menu node id.
        message: Human-readable description.
    """

    kind: str
    subject: str
    message: str


def validate_navigation_config(
    routes: Sequence[RouteNode],
    menu_tree: Sequence[MenuNode],
) -> list[IntegrityIssue]:
    """Collect every inconsistency between ``routes`` and ``menu_tree``.

    Reported, in this order:

    - page/menu nodes whose route key no route carries;
    - route keys carried by more than one route;
    - menu node ids used more than once.

    Routes without a menu entry are not reported: hidden screens (detail
    pages, action pages) are legitimate.
    """
    issues: list[IntegrityIssue] = []

    route_key_counts = Counter(route.route_key for route in iter_routes(routes) if route.route_key)

    menu_nodes = list(iter_menu_nodes(menu_tree))
    for node in menu_nodes:
        if node.type not in ("page", "menu") or not node.route_key:
            continue
        if node.route_key not in route_key_counts:
            issues.append(
                IntegrityIssue(
                    kind=MISSING_ROUTE_KEY,
                    subject=node.route_key,
                    message=f"Menu node '{node.id}' references unknown route key '{node.route_key}'",
                )
            )

    for route_key, count in route_key_counts.items():
        if count > 1:
            issues.append(
                IntegrityIssue(
                    kind=DUPLICATE_ROUTE_KEY,
                    subject=route_key,
                    message=f"Route key '{route_key}' is declared by {count} routes",
                )
            )

    id_counts = Counter(node.id for node in menu_nodes)
    for node_id, count in id_counts.items():
        if count > 1:
            issues.append(
                IntegrityIssue(
                    kind=DUPLICATE_MENU_ID,
                    subject=node_id,
                    message=f"Menu node id '{node_id}' is used {count} times",
                )
            )

    return issues


def check_navigation_config(
    routes: Sequence[RouteNode],
    menu_tree: Sequence[MenuNode],
    *,
    strict: bool = False,
) -> list[IntegrityIssue]:
    """Validate the navigation config, logging every issue.

    Args:
        routes: Route forest.
        menu_tree: Menu forest.
        strict: Raise instead of only logging.

    Returns:
        The issues found (empty when consistent).

    Raises:
        NavigationConfigError: In strict mode, when any issue is found.
    """
    issues = validate_navigation_config(routes, menu_tree)
    for issue in issues:
        logger.warning("Navigation config issue [%s]: %s", issue.kind, issue.message)

    if issues and strict:
        raise NavigationConfigError(
            f"Navigation config has {len(issues)} issue(s)",
            issues=[issue.message for issue in issues],
        )
    if not issues:
        logger.debug("Navigation config is consistent")
    return issues


__all__ = [
    "DUPLICATE_MENU_ID",
    "DUPLICATE_ROUTE_KEY",
    "MISSING_ROUTE_KEY",
    "IntegrityIssue",
    "check_navigation_config",
    "validate_navigation_config",
]
