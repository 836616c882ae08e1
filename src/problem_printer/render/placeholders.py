"""Stand-in nodes for answers withheld from the printout."""

from __future__ import annotations

from bs4.element import Tag

from problem_printer.render.context import RenderContext
from problem_printer.render.graph import empty_coordinate_config
from problem_printer.render.nodes import add_class, make_node


def render_problem_placeholder(context: RenderContext) -> Tag:
    return make_node(context.soup, "div", "problem-placeholder")


def render_empty_coordinate(context: RenderContext) -> Tag:
    """Hand a blank [-5, 5] grid to the graph engine.

    The caller counts the graph; this path does not.
    """
    node = context.engine.render(context.soup, empty_coordinate_config())
    return add_class(node, "empty-coordinate")


__all__ = ["render_empty_coordinate", "render_problem_placeholder"]
