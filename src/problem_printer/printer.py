"""Host-facing printer: render tasks from a problem source, then print."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
import logging
from pathlib import Path
from typing import Any, Protocol

from problem_printer.render.errors import PrintActionMissingError, ProblemSourceMissingError
from problem_printer.render.graph import GraphEngine
from problem_printer.render.session import RenderSession
from problem_printer.render.surface import RenderSurface


log = logging.getLogger(__name__)


class ProblemSource(Protocol):
    """Supplies already-loaded tasks; fetching and validation happen elsewhere."""

    def get_tasks(self) -> list[Mapping[str, Any]]: ...


class ProblemsPrinter:
    """Render tasks onto a surface and hand the result to a print action.

    ``render`` resolves once the graph delay has elapsed and the surface is
    hidden again; call ``print`` after that, or use ``print_tasks`` to do
    both. Graph configurations inside the tasks get ``printMode`` set in
    place.
    """

    def __init__(
        self,
        source: ProblemSource | None = None,
        *,
        print_action: Callable[[], object] | None = None,
        session: RenderSession | None = None,
        surface: RenderSurface | None = None,
        engine: GraphEngine | None = None,
        config: object | None = None,
        source_dir: str | Path | None = None,
    ) -> None:
        self.source = source
        self.print_action = print_action
        self.session = (
            session
            if session is not None
            else RenderSession(surface, engine=engine, config=config, source_dir=source_dir)
        )

    @property
    def surface(self) -> RenderSurface:
        return self.session.surface

    @property
    def render_complexity(self) -> int:
        return self.session.complexity.count

    def get_tasks(self) -> list[Mapping[str, Any]]:
        if self.source is None:
            raise ProblemSourceMissingError("No problem source configured for this printer.")
        return self.source.get_tasks()

    async def render(
        self,
        tasks: Iterable[Mapping[str, Any]] | None = None,
        options: Mapping[str, Any] | None = None,
    ) -> None:
        if tasks is None:
            tasks = self.get_tasks()
        await self.session.render(tasks, options)

    def print(self) -> None:
        if self.print_action is None:
            raise PrintActionMissingError("No print action configured for this printer.")
        log.debug("Triggering print action")
        self.print_action()

    async def print_tasks(
        self,
        tasks: Iterable[Mapping[str, Any]] | None = None,
        options: Mapping[str, Any] | None = None,
    ) -> None:
        await self.render(tasks, options)
        self.print()

    def to_html(self) -> str:
        return self.surface.to_html()


__all__ = ["ProblemSource", "ProblemsPrinter"]
