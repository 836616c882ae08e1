"""Run a full render pass and signal when the printout should be ready."""

from __future__ import annotations

import asyncio
from collections.abc import Iterable, Mapping
import logging
from pathlib import Path
from typing import Any

from problem_printer.render.complexity import ComplexityEstimator
from problem_printer.render.context import RenderContext
from problem_printer.render.graph import DeferredGraphEngine, GraphEngine
from problem_printer.render.mode import graph_delay_unit, merge_task_options
from problem_printer.render.surface import RenderSurface
from problem_printer.render.tasks import render_task


log = logging.getLogger(__name__)


class RenderSession:
    """Owns the surface and complexity counter across render passes.

    Building the document is synchronous. The only wait is the completion
    delay: ``timing.unit`` milliseconds (50 by default) per graph rendered,
    a fixed budget for the graph engine to finish drawing. It is a heuristic,
    not a signal from the engine. Passes on one surface must not overlap.
    """

    def __init__(
        self,
        surface: RenderSurface | None = None,
        *,
        engine: GraphEngine | None = None,
        config: object | None = None,
        source_dir: str | Path | None = None,
    ) -> None:
        self.surface = surface if surface is not None else RenderSurface()
        self.engine = engine if engine is not None else DeferredGraphEngine()
        self.complexity = ComplexityEstimator()
        self.config = config
        self.source_dir = source_dir
        self._context = self._new_context()

    def _new_context(self) -> RenderContext:
        return RenderContext(
            soup=self.surface.soup,
            complexity=self.complexity,
            engine=self.engine,
            config=self.config,
            source_dir=self.source_dir,
        )

    @property
    def completion_delay(self) -> float:
        """Milliseconds the last pass waits before completing."""
        return self.complexity.delay(graph_delay_unit(self._context))

    def render_pass(self, tasks: Iterable[Mapping[str, Any]], options: Mapping[str, Any] | None = None) -> int:
        """Build the document for ``tasks`` on the surface; return the graph count."""
        self.complexity.reset()
        reset_engine = getattr(self.engine, "reset", None)
        if callable(reset_engine):
            reset_engine()
        self._context = self._new_context()
        self.surface.show()
        self.surface.clear()

        rendered = 0
        for task in tasks:
            context = self._context.for_task(merge_task_options(options, task))
            self.surface.append(render_task(context))
            rendered += 1

        log.debug("Rendered %d tasks with %d graphs", rendered, self.complexity.count)
        return self.complexity.count

    async def render(self, tasks: Iterable[Mapping[str, Any]], options: Mapping[str, Any] | None = None) -> None:
        """Render ``tasks`` then wait for the graph engine before hiding the surface."""
        self.render_pass(tasks, options)
        delay = self.completion_delay
        log.debug("Waiting %.0f ms for graph rendering", delay)
        await asyncio.sleep(delay / 1000)
        self.surface.hide()


__all__ = ["RenderSession"]
