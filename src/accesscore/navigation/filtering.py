"""Menu tree pruning against resolved permissions and accessible route keys."""

from __future__ import annotations

import logging
from collections.abc import Collection, Iterable, Sequence
from typing import Optional

from .menu import MenuNode

logger = logging.getLogger(__name__)


def filter_menu_tree(
    menu_tree: Sequence[MenuNode],
    accessible_route_keys: Iterable[str],
    final_permissions: Iterable[str],
) -> list[MenuNode]:
    """Prune the menu forest to what the user may see.

    Per node, in order:

    - ``hidden`` nodes are dropped outright.
    - Nodes whose ``required_permissions`` are not all held are dropped.
    - ``page``: kept iff its route key is accessible.
    - ``menu``: children are filtered first. Kept with the surviving
      children if any survive; otherwise kept as a childless leaf if its own
      route key is accessible; otherwise dropped.
    - ``category``: kept iff at least one child survives.
    - ``external``: kept (no route check applies).

    Args:
        menu_tree: Menu forest.
        accessible_route_keys: Output of ``compute_accessible_route_keys``.
        final_permissions: Permissions after the policy overlay.

    Returns:
        A new forest. The input is not modified.
    """
    route_keys = frozenset(accessible_route_keys)
    permissions = frozenset(final_permissions)

    result = _filter_nodes(menu_tree, route_keys, permissions)
    logger.debug("Filtered menu tree: %d of %d top-level nodes kept", len(result), len(menu_tree))
    return result


def _filter_nodes(
    nodes: Iterable[MenuNode],
    route_keys: Collection[str],
    permissions: Collection[str],
) -> list[MenuNode]:
    kept = (_filter_node(node, route_keys, permissions) for node in nodes)
    return [node for node in kept if node is not None]


def _filter_node(
    node: MenuNode,
    route_keys: Collection[str],
    permissions: Collection[str],
) -> Optional[MenuNode]:
    if node.hidden:
        return None

    if not all(perm in permissions for perm in node.required_permissions):
        return None

    if node.type == "page":
        return node.model_copy() if node.route_key in route_keys else None

    if node.type == "menu":
        own_route_accessible = bool(node.route_key) and node.route_key in route_keys
        if node.children:
            children = _filter_nodes(node.children, route_keys, permissions)
            if children:
                return node.model_copy(update={"children": tuple(children)})
            if own_route_accessible:
                return node.model_copy(update={"children": None})
            return None
        return node.model_copy() if own_route_accessible else None

    if node.type == "category":
        children = _filter_nodes(node.children, route_keys, permissions)
        return node.model_copy(update={"children": tuple(children)}) if children else None

    # external
    return node.model_copy()


__all__ = ["filter_menu_tree"]
