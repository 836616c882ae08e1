"""Count graph-bearing content units to size the print delay."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from problem_printer.render.utils import is_graph, is_options


DEFAULT_DELAY_UNIT = 50


class ComplexityEstimator:
    """Per-pass counter of graph units handed to the graph engine.

    The count only grows during a pass; ``reset`` starts the next one at 0.
    """

    def __init__(self) -> None:
        self.count = 0

    def reset(self) -> None:
        self.count = 0

    def increment(self) -> int:
        self.count += 1
        return self.count

    def delay(self, unit: float = DEFAULT_DELAY_UNIT) -> float:
        """Milliseconds to wait for the graph engine: ``unit`` per graph."""
        return unit * self.count

    def mark_graph(self, unit: Mapping[str, Any]) -> None:
        # Mutates the caller's graph configuration in place.
        self.increment()
        unit["value"]["printMode"] = True

    def mark_unit(self, unit: Mapping[str, Any]) -> None:
        if is_graph(unit):
            self.mark_graph(unit)
        elif is_options(unit):
            for option in unit["value"]:
                if is_graph(option):
                    self.mark_graph(option)

    def mark_units(self, units: Iterable[Mapping[str, Any]]) -> None:
        for unit in units:
            self.mark_unit(unit)


__all__ = ["DEFAULT_DELAY_UNIT", "ComplexityEstimator"]
