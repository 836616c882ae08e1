"""Render single content units: text, graphs and option sets."""

from __future__ import annotations

from collections.abc import Mapping
import logging
from typing import Any
import warnings

from bs4.element import Tag

from problem_printer.render.context import RenderContext
from problem_printer.render.errors import UnknownContentTypeWarning
from problem_printer.render.nodes import add_class, fragment, make_node
from problem_printer.render.styles import CHECKBOX_MARK, choice_style
from problem_printer.render.utils import choice_label, unit_type


log = logging.getLogger(__name__)


def _skip_unit(kind: object, *, nested: bool) -> None:
    where = "inside an options set" if nested else "in a problem"
    warnings.warn(
        f"Skipping content unit of unsupported type {kind!r} {where}.",
        UnknownContentTypeWarning,
        # Land on the caller of render_part; options add two frames.
        stacklevel=6 if nested else 4,
    )
    log.debug("Skipped content unit of type %r (nested=%s)", kind, nested)


def _render_options(context: RenderContext, options: list[Mapping[str, Any]], style: str) -> Tag:
    choices = make_node(context.soup, "ol", "options", attrs={"data-style": style})
    for index, option in enumerate(options):
        label = CHECKBOX_MARK if style == "checkbox" else choice_label(index)
        item = make_node(context.soup, "li", "option", attrs={"data-label": label})
        item.append(make_node(context.soup, "span", "option-label", text=label))
        rendered = _render_unit(context, option, style=style, nested=True)
        if rendered is not None:
            item.append(rendered)
        choices.append(item)
    return choices


def _render_unit(
    context: RenderContext,
    unit: Mapping[str, Any],
    *,
    style: str,
    nested: bool = False,
) -> Tag | None:
    kind = unit_type(unit)
    if kind == "text":
        return make_node(context.soup, "div", "problem-text", children=fragment(unit.get("value")))
    if kind == "graph":
        return context.engine.render(context.soup, unit["value"])
    # Options sets hold units one level deep only.
    if kind == "options" and not nested:
        return _render_options(context, unit["value"], style)
    _skip_unit(kind, nested=nested)
    return None


def render_part(container: Tag, unit: Mapping[str, Any], context: RenderContext) -> Tag | None:
    """Append the node for ``unit`` to ``container`` and return it.

    Graph values must already carry ``printMode``; counting happens at the
    call site, never here.
    """
    node = _render_unit(context, unit, style=choice_style(context))
    if node is not None:
        container.append(node)
    return node


def render_solution(container: Tag, unit: Mapping[str, Any], context: RenderContext) -> Tag | None:
    """Like ``render_part`` but tags the node as a revealed answer."""
    node = _render_unit(context, unit, style=choice_style(context))
    if node is not None:
        add_class(node, "solution")
        container.append(node)
    return node


__all__ = ["render_part", "render_solution"]
