"""Per-pass render context shared by the renderers."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from bs4 import BeautifulSoup

from problem_printer.render.complexity import ComplexityEstimator
from problem_printer.render.graph import DeferredGraphEngine, GraphEngine


@dataclass
class RenderContext:
    """What every renderer needs to look up options and build nodes.

    ``task`` holds the task mapping with the call options already merged
    under it. ``runtime`` is a scratch cache for lookups that are costly to
    repeat (source configuration files).
    """

    soup: BeautifulSoup
    complexity: ComplexityEstimator = field(default_factory=ComplexityEstimator)
    engine: GraphEngine = field(default_factory=DeferredGraphEngine)
    task: Mapping[str, Any] = field(default_factory=dict)
    config: object | None = None
    source_dir: str | Path | None = None
    runtime: dict[str, object] = field(default_factory=dict)

    def for_task(self, task: Mapping[str, Any]) -> RenderContext:
        return RenderContext(
            soup=self.soup,
            complexity=self.complexity,
            engine=self.engine,
            task=task,
            config=self.config,
            source_dir=self.source_dir,
            runtime=self.runtime,
        )


__all__ = ["RenderContext"]
