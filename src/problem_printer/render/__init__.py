"""Renderers that turn tasks and problems into a printable document tree."""

from __future__ import annotations

from problem_printer.render.complexity import ComplexityEstimator
from problem_printer.render.context import RenderContext
from problem_printer.render.errors import (
    MissingProblemBodyError,
    PrintActionMissingError,
    ProblemPrinterError,
    ProblemSourceMissingError,
    UnknownContentTypeWarning,
)
from problem_printer.render.graph import (
    EMPTY_COORDINATE_CONFIG,
    DeferredGraphEngine,
    GraphEngine,
    empty_coordinate_config,
)
from problem_printer.render.parts import render_part, render_solution
from problem_printer.render.placeholders import render_empty_coordinate, render_problem_placeholder
from problem_printer.render.problems import render_problem, render_problems
from problem_printer.render.session import RenderSession
from problem_printer.render.surface import RenderSurface
from problem_printer.render.tasks import render_task
from problem_printer.render.title_page import render_title_page


__all__ = [
    "EMPTY_COORDINATE_CONFIG",
    "ComplexityEstimator",
    "DeferredGraphEngine",
    "GraphEngine",
    "MissingProblemBodyError",
    "PrintActionMissingError",
    "ProblemPrinterError",
    "ProblemSourceMissingError",
    "RenderContext",
    "RenderSession",
    "RenderSurface",
    "UnknownContentTypeWarning",
    "empty_coordinate_config",
    "render_empty_coordinate",
    "render_part",
    "render_problem",
    "render_problem_placeholder",
    "render_problems",
    "render_solution",
    "render_task",
    "render_title_page",
]
