from __future__ import annotations

from problem_printer.render import styles
from problem_printer.render.context import RenderContext
from problem_printer.render.nodes import new_document


def _context(config: object | None = None, source_dir=None) -> RenderContext:
    return RenderContext(soup=new_document(), config=config, source_dir=source_dir)


def test_choice_style_defaults_to_alpha() -> None:
    assert styles.choice_style(_context()) == "alpha"
    assert styles.choice_style(_context({"style": {"choices": "unknown"}})) == "alpha"


def test_choice_style_aliases() -> None:
    assert styles.choice_style(_context({"style": {"choices": "checkboxes"}})) == "checkbox"
    assert styles.choice_style(_context({"printer": {"style": {"choices": "letters"}}})) == "alpha"


def test_style_reads_source_config_file(tmp_path) -> None:
    source_dir = tmp_path / "series"
    source_dir.mkdir()
    (source_dir / "config.yml").write_text("style:\n  choices: check\n", encoding="utf-8")
    assert styles.choice_style(_context(source_dir=source_dir)) == "checkbox"
