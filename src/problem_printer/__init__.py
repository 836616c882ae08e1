"""Render academic problem sets into a printable document tree."""

from __future__ import annotations

from .printer import ProblemSource, ProblemsPrinter
from .render import (
    MissingProblemBodyError,
    PrintActionMissingError,
    ProblemPrinterError,
    ProblemSourceMissingError,
    RenderSession,
    RenderSurface,
    UnknownContentTypeWarning,
)


__all__ = [
    "MissingProblemBodyError",
    "PrintActionMissingError",
    "ProblemPrinterError",
    "ProblemSource",
    "ProblemSourceMissingError",
    "ProblemsPrinter",
    "RenderSession",
    "RenderSurface",
    "UnknownContentTypeWarning",
]
