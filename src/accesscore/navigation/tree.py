"""Generic recursive operations over the menu forest.

Used by the access context builder and by breadcrumb-style consumers
("where am I" trails). All functions dispatch on the node ``type`` tag and
never mutate their input.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Optional

from .menu import MenuNode


def has_children(node: MenuNode) -> bool:
    """True for a category/menu node with at least one child."""
    if node.type in ("category", "menu"):
        return bool(node.children)
    return False


def _own_route_key(node: MenuNode) -> Optional[str]:
    if node.type in ("page", "menu"):
        return node.route_key
    return None


def iter_menu_nodes(nodes: Iterable[MenuNode]) -> Iterator[MenuNode]:
    """Yield every node depth-first, pre-order."""
    for node in nodes:
        yield node
        if has_children(node):
            yield from iter_menu_nodes(node.children)


def find_menu_path_by_route_key(
    nodes: Sequence[MenuNode],
    route_key: str,
    _path: tuple[MenuNode, ...] = (),
) -> Optional[list[MenuNode]]:
    """Root-to-node path of the first page/menu node carrying ``route_key``.

    Returns:
        The path as a list (root first, match last), or None.
    """
    for node in nodes:
        path = (*_path, node)
        if _own_route_key(node) == route_key:
            return list(path)
        if has_children(node):
            found = find_menu_path_by_route_key(node.children, route_key, path)
            if found is not None:
                return found
    return None


def find_menu_node_by_route_key(nodes: Sequence[MenuNode], route_key: str) -> Optional[MenuNode]:
    """First page/menu node carrying ``route_key`` (depth-first), or None."""
    path = find_menu_path_by_route_key(nodes, route_key)
    return path[-1] if path else None


def get_menu_node_depth(nodes: Sequence[MenuNode], target_id: str, _depth: int = 1) -> int:
    """1-based depth of the node with ``target_id``; 0 if absent."""
    for node in nodes:
        if node.id == target_id:
            return _depth
        if has_children(node):
            depth = get_menu_node_depth(node.children, target_id, _depth + 1)
            if depth > 0:
                return depth
    return 0


def get_max_menu_depth(nodes: Sequence[MenuNode], _depth: int = 1) -> int:
    """Depth of the deepest level (the top level counts as 1, even when empty)."""
    max_depth = _depth
    for node in nodes:
        if has_children(node):
            max_depth = max(max_depth, get_max_menu_depth(node.children, _depth + 1))
    return max_depth


def sort_menu_nodes(nodes: Sequence[MenuNode]) -> list[MenuNode]:
    """Stable sort of every level by ``order`` (missing = 0). Returns new nodes."""
    result: list[MenuNode] = []
    for node in sorted(nodes, key=lambda n: n.order or 0):
        if has_children(node):
            node = node.model_copy(update={"children": tuple(sort_menu_nodes(node.children))})
        result.append(node)
    return result


def find_first_accessible_route_key(menu_tree: Sequence[MenuNode]) -> Optional[str]:
    """First navigable route key in menu order.

    A menu group's own route key wins over its children. External links are
    skipped. Intended for an already-filtered tree.
    """
    for node in menu_tree:
        if node.type == "page":
            return node.route_key
        if node.type == "menu" and node.route_key:
            return node.route_key
        if has_children(node):
            child_key = find_first_accessible_route_key(node.children)
            if child_key:
                return child_key
    return None


__all__ = [
    "find_first_accessible_route_key",
    "find_menu_node_by_route_key",
    "find_menu_path_by_route_key",
    "get_max_menu_depth",
    "get_menu_node_depth",
    "has_children",
    "iter_menu_nodes",
    "sort_menu_nodes",
]
