"""The shared output target a render pass owns while it runs."""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup
from bs4.element import Tag

from problem_printer.render.nodes import make_node, new_document


log = logging.getLogger(__name__)

SURFACE_ID = "problems-printer"


class RenderSurface:
    """A single root node whose children are replaced on every pass.

    Visibility is mirrored in the root's ``style`` so the serialized surface
    matches what the host page shows. Not thread-safe: one pass at a time.
    """

    def __init__(self, soup: BeautifulSoup | None = None, *, element_id: str = SURFACE_ID) -> None:
        self.soup = soup if soup is not None else new_document()
        self.root = make_node(self.soup, "div", attrs={"id": element_id})
        self.soup.append(self.root)
        self.visible = False
        self._apply_visibility()

    def _apply_visibility(self) -> None:
        self.root["style"] = "display: block" if self.visible else "display: none"

    def show(self) -> None:
        self.visible = True
        self._apply_visibility()
        log.debug("Render surface shown")

    def hide(self) -> None:
        self.visible = False
        self._apply_visibility()
        log.debug("Render surface hidden")

    def clear(self) -> None:
        self.root.clear()

    def append(self, node: Tag) -> None:
        self.root.append(node)

    def children(self) -> list[Tag]:
        return [child for child in self.root.children if isinstance(child, Tag)]

    def to_html(self) -> str:
        return str(self.root)


__all__ = ["SURFACE_ID", "RenderSurface"]
