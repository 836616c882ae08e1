"""Render problems and problem lists, hiding or revealing answers."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
import logging
from typing import Any

from bs4.element import Tag

from problem_printer.render.context import RenderContext
from problem_printer.render.errors import MissingProblemBodyError
from problem_printer.render.nodes import add_class, make_node
from problem_printer.render.parts import render_part, render_solution
from problem_printer.render.placeholders import render_empty_coordinate, render_problem_placeholder
from problem_printer.render.utils import is_graph, is_options


log = logging.getLogger(__name__)


def _render_units(
    container: Tag,
    units: Iterable[Mapping[str, Any]],
    context: RenderContext,
    *,
    solution: bool = False,
) -> None:
    render = render_solution if solution else render_part
    for unit in units:
        context.complexity.mark_unit(unit)
        render(container, unit, context)


def _render_hidden_solution(container: Tag, units: Iterable[Mapping[str, Any]], context: RenderContext) -> None:
    for unit in units:
        if is_graph(unit):
            context.complexity.increment()
            container.append(render_empty_coordinate(context))
        elif not is_options(unit):
            container.append(render_problem_placeholder(context))


def render_problem(problem: Mapping[str, Any], index: int, with_answers: bool, context: RenderContext) -> Tag:
    """Render one problem as ``div.problem`` headed by ``Problem {index + 1}``.

    Keys are visited in the problem's own order. Every key contributes a
    container, even when nothing is rendered into it: ``steps`` and
    ``solution`` stay empty while answers are hidden, and unknown keys are
    always empty. With answers hidden, each solution unit is replaced by a
    placeholder next to the problem body.
    """
    if "problem" not in problem:
        raise MissingProblemBodyError(index)

    problem_node = make_node(context.soup, "div", "problem")
    problem_node.append(make_node(context.soup, "h2", text=f"Problem {index + 1}"))

    for key in problem:
        parts = make_node(context.soup, "div")
        if key == "problem":
            _render_units(parts, problem[key], context)
            if not with_answers:
                _render_hidden_solution(parts, problem.get("solution") or (), context)
        elif with_answers and key == "steps":
            add_class(parts, "steps")
            _render_units(parts, problem[key], context)
        elif with_answers and key == "solution":
            add_class(parts, "answer")
            _render_units(parts, problem[key], context, solution=True)
        problem_node.append(parts)

    return problem_node


def render_problems(
    problems: Sequence[Mapping[str, Any]],
    with_answers: bool,
    two_columns: bool,
    context: RenderContext,
) -> Tag:
    section = make_node(context.soup, "div", "problem-section")
    if two_columns:
        add_class(section, "two-columns")

    for index, problem in enumerate(problems):
        section.append(render_problem(problem, index, with_answers, context))

    log.debug("Rendered %d problems (answers=%s, two_columns=%s)", len(problems), with_answers, two_columns)
    return section


__all__ = ["render_problem", "render_problems"]
