from __future__ import annotations

from bs4 import BeautifulSoup

from problem_printer.render import nodes, utils


def test_choice_label_extends_after_z() -> None:
    assert utils.choice_label(0) == "A"
    assert utils.choice_label(25) == "Z"
    assert utils.choice_label(26) == "AA"
    assert utils.choice_label(27) == "AB"


def test_field_text_drops_falsy_values() -> None:
    assert utils.field_text("") is None
    assert utils.field_text(None) is None
    assert utils.field_text(False) is None
    assert utils.field_text(1234) == "1234"


def test_make_node_sets_classes_text_and_attrs() -> None:
    soup = nodes.new_document()
    node = nodes.make_node(soup, "p", "student-id", text="SID: 7", attrs={"data-x": "1"})
    assert str(node) == '<p class="student-id" data-x="1">SID: 7</p>'
    assert nodes.make_node(soup, "div").get("class") is None


def test_add_class_is_idempotent() -> None:
    soup = nodes.new_document()
    node = nodes.make_node(soup, "div", "problem-section")
    nodes.add_class(node, "two-columns")
    nodes.add_class(node, "two-columns")
    assert nodes.node_classes(node) == ["problem-section", "two-columns"]
    assert nodes.has_class(node, "two-columns")


def test_fragment_parses_strings_and_copies_tags() -> None:
    parsed = nodes.fragment("Solve <b>x</b> + 1")
    assert "".join(str(part) for part in parsed) == "Solve <b>x</b> + 1"

    source = BeautifulSoup("<div><em>keep</em></div>", "html.parser")
    em = source.find("em")
    copied = nodes.fragment(em)
    assert str(copied[0]) == "<em>keep</em>"
    assert copied[0] is not em
    assert em.parent is source.div
    assert nodes.fragment(None) == []
