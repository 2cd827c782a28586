"""Navigation menu model.

The menu is a forest of nodes forming a closed tagged union on ``type``:

- ``category`` — non-navigable section header, always has children.
- ``menu`` — collapsible group; may have children and/or its own route key.
- ``page`` — leaf mapped to a screen through ``route_key``.
- ``external`` — leaf pointing at an external ``href``.

The menu tree is independent of the route tree; the two are linked only by
shared route-key strings. Nodes are immutable; every tree operation returns
new nodes.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic.alias_generators import to_camel

MENU_NODE_TYPES = ("category", "menu", "page", "external")


class _BaseMenuNode(BaseModel):
    """Fields shared by every menu node."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="forbid",
    )

    id: str
    label: str = ""
    icon: Optional[str] = None
    order: Optional[int] = None
    badge: Optional[str] = None
    badge_color: Optional[Literal["primary", "success", "warning", "danger", "info"]] = None
    required_permissions: tuple[str, ...] = ()
    hidden: bool = False


class CategoryNode(_BaseMenuNode):
    """Section header (not clickable). Always carries children."""

    type: Literal["category"] = "category"
    children: tuple[MenuNode, ...]


class MenuGroupNode(_BaseMenuNode):
    """Menu group.

    With children it renders as a collapsible group; with ``route_key`` the
    group itself is also clickable.
    """

    type: Literal["menu"] = "menu"
    children: Optional[tuple[MenuNode, ...]] = None
    route_key: Optional[str] = None


class PageNode(_BaseMenuNode):
    """Leaf mapped to a screen."""

    type: Literal["page"] = "page"
    route_key: str


class ExternalNode(_BaseMenuNode):
    """Leaf linking outside the application. Never route-gated."""

    type: Literal["external"] = "external"
    href: str
    target: Optional[Literal["_blank", "_self"]] = None


MenuNode = Annotated[
    Union[CategoryNode, MenuGroupNode, PageNode, ExternalNode],
    Field(discriminator="type"),
]

CategoryNode.model_rebuild()
MenuGroupNode.model_rebuild()

_MENU_TREE_ADAPTER: TypeAdapter[tuple[MenuNode, ...]] = TypeAdapter(tuple[MenuNode, ...])


def parse_menu_tree(data: Iterable[Any]) -> tuple[MenuNode, ...]:
    """Validate a menu forest from plain data (e.g. decoded JSON).

    Each item must carry a ``type`` tag. Raises ``pydantic.ValidationError``
    on malformed input.
    """
    return _MENU_TREE_ADAPTER.validate_python(list(data))


def dump_menu_tree(nodes: Iterable[MenuNode]) -> list[dict[str, Any]]:
    """Serialize a menu forest to plain camelCase dicts."""
    return [node.model_dump(by_alias=True, exclude_none=True) for node in nodes]


__all__ = [
    "MENU_NODE_TYPES",
    "CategoryNode",
    "ExternalNode",
    "MenuGroupNode",
    "MenuNode",
    "PageNode",
    "dump_menu_tree",
    "parse_menu_tree",
]
