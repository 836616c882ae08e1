from __future__ import annotations

import pytest

from problem_printer.render.context import RenderContext
from problem_printer.render.errors import MissingProblemBodyError
from problem_printer.render.nodes import has_class, make_node, new_document
from problem_printer.render.problems import render_problem, render_problems


class _RecordingEngine:
    def __init__(self) -> None:
        self.configs: list[dict] = []

    def render(self, soup, config):
        self.configs.append(config)
        return make_node(soup, "div", "graph")


def _context() -> RenderContext:
    return RenderContext(soup=new_document(), engine=_RecordingEngine())


def _graph(name: str = "g") -> dict:
    return {"type": "graph", "value": {"renderEngine": "desmos", "name": name}}


def _text(value: str) -> dict:
    return {"type": "text", "value": value}


def _sample_problem() -> dict:
    return {
        "problem": [
            _text("Plot y = 2x"),
            _graph("body"),
            {"type": "options", "value": [_text("A line"), _graph("choice")]},
        ],
        "steps": [_text("Slope is 2"), _graph("step")],
        "solution": [
            _graph("answer"),
            _text("y = 2x"),
            {"type": "options", "value": [_text("A line")]},
        ],
    }


def _sections(problem_node) -> list:
    return problem_node.find_all("div", recursive=False)


def test_header_is_one_based_and_first() -> None:
    node = render_problem({"problem": [_text("1 + 1")]}, 4, False, _context())
    assert node["class"] == ["problem"]
    children = node.find_all(recursive=False)
    assert children[0].name == "h2"
    assert children[0].get_text() == "Problem 5"


def test_hidden_answers_emit_placeholders_only() -> None:
    context = _context()
    node = render_problem(_sample_problem(), 0, False, context)

    body, steps, solution = _sections(node)
    assert body.get("class") is None
    assert steps.contents == [] and steps.get("class") is None
    assert solution.contents == [] and solution.get("class") is None

    assert len(body.find_all("div", class_="empty-coordinate")) == 1
    assert len(body.find_all("div", class_="problem-placeholder")) == 1
    assert node.find(class_="steps") is None
    assert node.find(class_="answer") is None
    assert "Slope is 2" not in node.get_text()
    # body graph + option graph + hidden graph answer
    assert context.complexity.count == 3


def test_shown_answers_render_steps_and_solution() -> None:
    context = _context()
    node = render_problem(_sample_problem(), 0, True, context)

    body, steps, solution = _sections(node)
    assert steps["class"] == ["steps"]
    assert solution["class"] == ["answer"]
    assert "Slope is 2" in steps.get_text()
    assert "y = 2x" in solution.get_text()
    assert all(has_class(child, "solution") for child in solution.find_all(recursive=False))
    assert node.find(class_="problem-placeholder") is None
    assert node.find(class_="empty-coordinate") is None
    # body, choice, step, answer
    assert context.complexity.count == 4


def test_print_mode_set_on_every_graph_value_in_place() -> None:
    problem = _sample_problem()
    render_problem(problem, 0, True, _context())
    assert problem["problem"][1]["value"]["printMode"] is True
    assert problem["problem"][2]["value"][1]["value"]["printMode"] is True
    assert problem["steps"][1]["value"]["printMode"] is True
    assert problem["solution"][0]["value"]["printMode"] is True
    assert problem["problem"][0] == _text("Plot y = 2x")


def test_hidden_answers_leave_solution_graphs_unmarked() -> None:
    problem = _sample_problem()
    context = _context()
    render_problem(problem, 0, False, context)
    assert "printMode" not in problem["solution"][0]["value"]
    assert "printMode" not in problem["steps"][1]["value"]
    engine_names = [config.get("name") for config in context.engine.configs]
    assert engine_names == ["body", "choice", None]


def test_keys_follow_problem_order_and_unknown_keys_stay_empty() -> None:
    problem = {
        "solution": [_text("4")],
        "hint": [_text("Count")],
        "problem": [_text("2 + 2")],
    }
    node = render_problem(problem, 0, True, _context())
    answer, hint, body = _sections(node)
    assert answer["class"] == ["answer"]
    assert hint.contents == []
    assert body.find("div", class_="problem-text").get_text() == "2 + 2"


def test_hidden_answers_without_solution_key() -> None:
    context = _context()
    node = render_problem({"problem": [_text("2 + 2")]}, 0, False, context)
    assert len(_sections(node)) == 1
    assert node.find(class_="problem-placeholder") is None


def test_missing_problem_key_raises() -> None:
    with pytest.raises(MissingProblemBodyError, match="Problem 3"):
        render_problem({"solution": [_text("4")]}, 2, False, _context())


def test_problem_list_preserves_order_and_layout_tag() -> None:
    problems = [{"problem": [_text(f"Q{n}")]} for n in range(3)]
    section = render_problems(problems, False, True, _context())
    assert section["class"] == ["problem-section", "two-columns"]
    rendered = section.find_all("div", class_="problem", recursive=False)
    assert [problem.h2.get_text() for problem in rendered] == ["Problem 1", "Problem 2", "Problem 3"]
    assert [problem.find(class_="problem-text").get_text() for problem in rendered] == ["Q0", "Q1", "Q2"]


def test_problem_list_single_column() -> None:
    section = render_problems([], False, False, _context())
    assert section["class"] == ["problem-section"]
    assert section.contents == []
