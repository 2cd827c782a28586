"""Tests for the menu model and menu tree filtering."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from accesscore import CategoryNode, ExternalNode, MenuGroupNode, PageNode, filter_menu_tree
from accesscore.navigation import dump_menu_tree, has_children, iter_menu_nodes, parse_menu_tree

MENU = (
    CategoryNode(
        id="cat-main",
        label="Main",
        children=(
            PageNode(id="p-home", route_key="page.home"),
            PageNode(id="p-hidden", route_key="page.home", hidden=True),
        ),
    ),
    CategoryNode(
        id="cat-admin",
        label="Admin",
        children=(
            MenuGroupNode(
                id="m-admin",
                label="Admin pages",
                route_key="page.admin",
                children=(
                    PageNode(id="p-a", route_key="page.a"),
                    PageNode(id="p-b", route_key="page.b", required_permissions=("perm:b",)),
                ),
            ),
            MenuGroupNode(
                id="m-empty",
                children=(PageNode(id="p-c", route_key="page.c"),),
            ),
        ),
    ),
    CategoryNode(
        id="cat-links",
        label="Links",
        children=(
            ExternalNode(id="e-docs", href="https://docs.example.com", target="_blank"),
            ExternalNode(id="e-secret", href="https://secret.example.com", required_permissions=("perm:secret",)),
        ),
    ),
)


def _ids(nodes) -> list[str]:
    return [node.id for node in iter_menu_nodes(nodes)]


class TestMenuModel:
    """Tests for the MenuNode tagged union."""

    def test_parse_dispatches_on_type(self) -> None:
        tree = parse_menu_tree(
            [
                {
                    "type": "category",
                    "id": "c",
                    "children": [
                        {"type": "menu", "id": "m", "routeKey": "r.m"},
                        {"type": "page", "id": "p", "routeKey": "r.p", "badgeColor": "success"},
                        {"type": "external", "id": "e", "href": "https://x"},
                    ],
                }
            ]
        )
        category = tree[0]
        assert isinstance(category, CategoryNode)
        assert [type(child) for child in category.children] == [MenuGroupNode, PageNode, ExternalNode]
        assert category.children[1].badge_color == "success"

    def test_parse_rejects_unknown_type(self) -> None:
        with pytest.raises(ValidationError):
            parse_menu_tree([{"type": "widget", "id": "w"}])

    def test_page_requires_route_key(self) -> None:
        with pytest.raises(ValidationError):
            parse_menu_tree([{"type": "page", "id": "p"}])

    def test_category_requires_children(self) -> None:
        with pytest.raises(ValidationError):
            parse_menu_tree([{"type": "category", "id": "c"}])

    def test_dump_round_trips_through_parse(self) -> None:
        dumped = dump_menu_tree(MENU)
        assert dumped[1]["children"][0]["routeKey"] == "page.admin"
        assert "icon" not in dumped[0]
        assert parse_menu_tree(dumped) == MENU

    def test_has_children(self) -> None:
        assert has_children(MENU[0]) is True
        assert has_children(MenuGroupNode(id="m")) is False
        assert has_children(PageNode(id="p", route_key="r")) is False


class TestFilterMenuTree:
    """Tests for filter_menu_tree()."""

    def test_hidden_nodes_are_dropped(self) -> None:
        result = filter_menu_tree(MENU, ("page.home",), ())
        assert "p-hidden" not in _ids(result)
        assert "p-home" in _ids(result)

    def test_page_requires_accessible_route(self) -> None:
        result = filter_menu_tree(MENU, ("page.a",), ())
        assert "p-a" in _ids(result)
        assert "p-home" not in _ids(result)

    def test_node_permissions_are_checked(self) -> None:
        result = filter_menu_tree(MENU, ("page.a", "page.b"), ())
        assert "p-b" not in _ids(result)
        result = filter_menu_tree(MENU, ("page.a", "page.b"), ("perm:b",))
        assert "p-b" in _ids(result)

    def test_category_without_surviving_children_is_dropped(self) -> None:
        result = filter_menu_tree(MENU, ("page.home",), ())
        assert "cat-admin" not in _ids(result)

    def test_menu_kept_as_leaf_by_own_route(self) -> None:
        """No child survives, but the group's own route is accessible."""
        result = filter_menu_tree(MENU, ("page.admin",), ())
        group = next(node for node in iter_menu_nodes(result) if node.id == "m-admin")
        assert group.children is None

    def test_menu_without_route_and_children_is_dropped(self) -> None:
        result = filter_menu_tree(MENU, ("page.a",), ())
        assert "m-empty" not in _ids(result)

    def test_childless_menu_group(self) -> None:
        tree = (MenuGroupNode(id="m", route_key="r.m"),)
        assert filter_menu_tree(tree, ("r.m",), ()) == [tree[0]]
        assert filter_menu_tree(tree, (), ()) == []

    def test_external_nodes_are_not_route_gated(self) -> None:
        result = filter_menu_tree(MENU, (), ())
        assert _ids(result) == ["cat-links", "e-docs"]

    def test_external_nodes_are_permission_gated(self) -> None:
        result = filter_menu_tree(MENU, (), ("perm:secret",))
        assert "e-secret" in _ids(result)

    def test_input_is_not_modified(self) -> None:
        before = dump_menu_tree(MENU)
        filter_menu_tree(MENU, ("page.a",), ())
        assert dump_menu_tree(MENU) == before

    def test_menu_route_key_absent_from_routes_is_pruned_silently(self) -> None:
        tree = (CategoryNode(id="c", children=(PageNode(id="p", route_key="does.not.exist"),)),)
        assert filter_menu_tree(tree, ("page.a",), ()) == []

    @pytest.mark.parametrize(
        "route_keys",
        [(), ("page.home",), ("page.a",), ("page.admin",), ("page.c",), ("page.a", "page.b", "page.c")],
    )
    def test_no_dangling_groups(self, route_keys: tuple[str, ...]) -> None:
        """Every surviving category/menu has a surviving child or its own accessible route."""
        for node in iter_menu_nodes(filter_menu_tree(MENU, route_keys, ("perm:b",))):
            if node.type == "category":
                assert node.children
            elif node.type == "menu":
                assert node.children or node.route_key in route_keys
