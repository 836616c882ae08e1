"""Shared style helpers for problem rendering."""

from __future__ import annotations

from problem_printer.render.context import RenderContext
from problem_printer.render.mode import resolve_value
from problem_printer.render.utils import normalize_style_choice


CHECKBOX_MARK = "\N{BALLOT BOX}"


def printer_style(context: RenderContext) -> dict[str, object]:
    style = resolve_value(context, ("style",))
    return style if isinstance(style, dict) else {}


def choice_style(context: RenderContext) -> str:
    style = printer_style(context)
    return normalize_style_choice(
        style.get("choices"),
        default="alpha",
        aliases={"checkboxes": "checkbox", "check": "checkbox", "letters": "alpha"},
    )


__all__ = ["CHECKBOX_MARK", "choice_style", "printer_style"]
