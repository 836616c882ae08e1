"""Build tagged document nodes independent of any page toolkit."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
import copy

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PageElement, Tag


def new_document() -> BeautifulSoup:
    """Return an empty document used as the node factory for one surface."""
    return BeautifulSoup("", "html.parser")


def make_node(
    soup: BeautifulSoup,
    name: str,
    *classes: str,
    text: str | None = None,
    children: Iterable[PageElement] = (),
    attrs: Mapping[str, str] | None = None,
) -> Tag:
    attributes: dict[str, object] = {"class": list(classes)} if classes else {}
    attributes.update(attrs or {})
    node = soup.new_tag(name, attrs=attributes)
    if text is not None:
        node.string = text
    for child in children:
        node.append(child)
    return node


def node_classes(node: Tag) -> list[str]:
    classes = node.get("class") or []
    if isinstance(classes, str):
        return classes.split()
    return list(classes)


def has_class(node: Tag, cls: str) -> bool:
    return cls in node_classes(node)


def add_class(node: Tag, cls: str) -> Tag:
    classes = node_classes(node)
    if cls not in classes:
        classes.append(cls)
    node["class"] = classes
    return node


def fragment(value: object) -> list[PageElement]:
    """Turn opaque text content into nodes ready to append.

    Tags are copied so the caller's object stays where it is; anything else is
    parsed as an HTML fragment from its string form.
    """
    if value is None:
        return []
    if isinstance(value, Tag):
        return [copy.copy(value)]
    if isinstance(value, NavigableString):
        return [NavigableString(str(value))]
    parsed = BeautifulSoup(str(value), "html.parser")
    return [element.extract() for element in list(parsed.contents)]


__all__ = [
    "add_class",
    "fragment",
    "has_class",
    "make_node",
    "new_document",
    "node_classes",
]
