"""Graph engine interface and the blank coordinate grid configuration."""

from __future__ import annotations

from collections.abc import MutableMapping
import copy
import json
from typing import Any, Protocol

from bs4 import BeautifulSoup
from bs4.element import Tag

from problem_printer.render.nodes import make_node


EMPTY_COORDINATE_CONFIG: dict[str, Any] = {
    "renderEngine": "desmos",
    "mathBounds": {
        "left": -5,
        "right": 5,
        "bottom": -5,
        "top": 5,
    },
    "options": {
        "xAxisArrowMode": "BOTH",
        "yAxisArrowMode": "BOTH",
        "xAxisNumbers": False,
        "yAxisNumbers": False,
    },
    "printMode": True,
}


def empty_coordinate_config() -> dict[str, Any]:
    return copy.deepcopy(EMPTY_COORDINATE_CONFIG)


class GraphEngine(Protocol):
    """Draws a graph from its configuration, asynchronously and out of band.

    ``render`` must return the node to place in the document right away; the
    drawing itself may finish later. An engine that queues work may also
    define ``reset()``; sessions call it at the start of every pass.
    """

    def render(self, soup: BeautifulSoup, config: MutableMapping[str, Any]) -> Tag: ...


class DeferredGraphEngine:
    """Emit mount nodes carrying the configuration for the page script to draw."""

    mount_class = "graph"

    def __init__(self) -> None:
        self.pending: list[MutableMapping[str, Any]] = []

    def render(self, soup: BeautifulSoup, config: MutableMapping[str, Any]) -> Tag:
        self.pending.append(config)
        return make_node(
            soup,
            "div",
            self.mount_class,
            attrs={
                "data-render-engine": str(config.get("renderEngine", "")),
                "data-graph-config": json.dumps(config, sort_keys=True, default=str),
            },
        )

    def reset(self) -> None:
        self.pending = []

    def drain(self) -> list[MutableMapping[str, Any]]:
        pending, self.pending = self.pending, []
        return pending


__all__ = [
    "EMPTY_COORDINATE_CONFIG",
    "DeferredGraphEngine",
    "GraphEngine",
    "empty_coordinate_config",
]
