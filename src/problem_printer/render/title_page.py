"""Render the optional cover section of a task."""

from __future__ import annotations

from bs4.element import Tag

from problem_printer.render.context import RenderContext
from problem_printer.render.mode import option_flag
from problem_printer.render.nodes import make_node
from problem_printer.render.utils import field_text


# (task key, tag, class) in print order.
_TITLE_FIELDS = (
    ("schoolName", "p", "school"),
    ("name", "h1", "title"),
    ("description", "p", "description"),
    ("teacherName", "p", "teacher"),
)


def render_student_info(context: RenderContext) -> Tag | None:
    task = context.task
    student_id = field_text(task.get("studentId"))
    student_name = field_text(task.get("studentName"))
    if not student_id and not student_name:
        return None

    info = make_node(context.soup, "div", "student-info")
    if student_id and option_flag(context, "displayStudentId"):
        info.append(make_node(context.soup, "p", "student-id", text=f"SID: {student_id}"))
    if student_name and option_flag(context, "displayStudentName"):
        info.append(make_node(context.soup, "p", "student-name", text=student_name))
    return info


def render_title_page(context: RenderContext) -> Tag:
    title_page = make_node(context.soup, "div", "title-page")
    for key, name, cls in _TITLE_FIELDS:
        text = field_text(context.task.get(key))
        if text:
            title_page.append(make_node(context.soup, name, cls, text=text))

    info = render_student_info(context)
    if info is not None:
        title_page.append(info)
    return title_page


__all__ = ["render_student_info", "render_title_page"]
