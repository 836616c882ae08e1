"""Render a task: optional title page followed by its problems."""

from __future__ import annotations

from bs4.element import Tag
from slugify import slugify

from problem_printer.render.context import RenderContext
from problem_printer.render.mode import display_title_page, two_columns, with_answers
from problem_printer.render.nodes import make_node
from problem_printer.render.problems import render_problems
from problem_printer.render.title_page import render_title_page
from problem_printer.render.utils import field_text


def task_anchor(name: object) -> str | None:
    text = field_text(name)
    if text is None:
        return None
    slug = slugify(text, separator="-")
    return f"task-{slug}" if slug else None


def render_task(context: RenderContext) -> Tag:
    """Render ``context.task``, whose options are already merged in."""
    task = context.task
    task_node = make_node(context.soup, "section", "task")
    anchor = task_anchor(task.get("name"))
    if anchor:
        task_node["id"] = anchor

    if display_title_page(context):
        task_node.append(render_title_page(context))

    task_node.append(
        render_problems(
            task.get("problems") or [],
            with_answers(context),
            two_columns(context),
            context,
        )
    )
    return task_node


__all__ = ["render_task", "task_anchor"]
