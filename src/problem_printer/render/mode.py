"""Helpers for render option lookup (answers, columns, title page)."""

from __future__ import annotations

from collections.abc import Mapping
import math
from pathlib import Path
from typing import Any

import yaml

from problem_printer.render.context import RenderContext


OPTION_DEFAULTS: dict[str, object] = {
    "withAnswers": False,
    "twoColumns": False,
    "displayTitlePage": False,
    "displayStudentId": False,
    "displayStudentName": False,
}

_SOURCE_CONFIG_NAMES = ("common.yaml", "common.yml", "config.yaml", "config.yml")


def coerce_bool(value: object, *, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
    return default


def merge_task_options(options: Mapping[str, Any] | None, task: Mapping[str, Any]) -> dict[str, Any]:
    """Spread the call options under the task; task fields win."""
    return {**(options or {}), **task}


def _nested_lookup(payload: object, dotted_key: str) -> object | None:
    if payload is None:
        return None
    cursor: object = payload
    for part in dotted_key.split("."):
        if isinstance(cursor, Mapping):
            cursor = cursor.get(part)
            continue
        if hasattr(cursor, part):
            cursor = getattr(cursor, part)
            continue
        return None
    return cursor


def _merge_mappings(base: object, incoming: object) -> object:
    if not isinstance(base, Mapping) or not isinstance(incoming, Mapping):
        return incoming
    merged: dict[object, object] = dict(base)
    for key, value in incoming.items():
        if key in merged:
            merged[key] = _merge_mappings(merged[key], value)
        else:
            merged[key] = value
    return merged


def _task_value(context: RenderContext, keys: tuple[str, ...]) -> object | None:
    for key in keys:
        value = _nested_lookup(context.task, key)
        if value is not None:
            return value
    return None


def _config_value(context: RenderContext, keys: tuple[str, ...]) -> object | None:
    for key in keys:
        for candidate in (key, f"printer.{key}"):
            value = _nested_lookup(context.config, candidate)
            if value is not None:
                return value
    return None


def _source_config_value(context: RenderContext, keys: tuple[str, ...]) -> object | None:
    payload = source_config_payload(context)
    if payload is None:
        return None
    for key in keys:
        for candidate in (key, f"printer.{key}"):
            value = _nested_lookup(payload, candidate)
            if value is not None:
                return value
    return None


def source_config_payload(context: RenderContext) -> Mapping[str, object] | None:
    """Load and merge the YAML files found in ``context.source_dir`` once per pass."""
    cache_key = "_source_config"
    cached = context.runtime.get(cache_key)
    if cached is not None:
        return cached if isinstance(cached, Mapping) else None

    if not context.source_dir:
        context.runtime[cache_key] = False
        return None
    root = Path(str(context.source_dir))
    existing = [root / name for name in _SOURCE_CONFIG_NAMES if (root / name).is_file()]
    if not existing:
        context.runtime[cache_key] = False
        return None

    merged: object = {}
    for path in existing:
        payload = yaml.safe_load(path.read_text(encoding="utf-8"))
        if isinstance(payload, Mapping):
            merged = _merge_mappings(merged, payload)

    if not isinstance(merged, Mapping):
        context.runtime[cache_key] = False
        return None
    context.runtime[cache_key] = merged
    return merged


def resolve_value(
    context: RenderContext,
    keys: tuple[str, ...],
    *,
    include_task: bool = True,
) -> object | None:
    if include_task:
        task_value = _task_value(context, keys)
        if task_value is not None:
            return task_value

    config_value = _config_value(context, keys)
    if config_value is not None:
        return config_value

    return _source_config_value(context, keys)


def option_flag(context: RenderContext, key: str) -> bool:
    value = resolve_value(context, (key,))
    return coerce_bool(value, default=bool(OPTION_DEFAULTS.get(key, False)))


def with_answers(context: RenderContext) -> bool:
    return option_flag(context, "withAnswers")


def two_columns(context: RenderContext) -> bool:
    return option_flag(context, "twoColumns")


def display_title_page(context: RenderContext) -> bool:
    return option_flag(context, "displayTitlePage")


def graph_delay_unit(context: RenderContext, *, default: float = 50) -> float:
    value = resolve_value(context, ("timing.unit",), include_task=False)
    try:
        unit = float(str(value).strip()) if value is not None else default
    except ValueError:
        return default
    return unit if math.isfinite(unit) and unit >= 0 else default


__all__ = [
    "OPTION_DEFAULTS",
    "coerce_bool",
    "display_title_page",
    "graph_delay_unit",
    "merge_task_options",
    "option_flag",
    "resolve_value",
    "source_config_payload",
    "two_columns",
    "with_answers",
]
