"""Tests for listing output (cli/renderers.py)."""

from __future__ import annotations

import json

from conftest import make_cask, make_formula

from brewavail.cli.renderers import emit, render_json, render_line, render_lines
from brewavail.core.normalize import describe_cask, describe_formula

BASE_KEYS = {"type", "name", "version", "info", "outdated", "installed", "path"}


def test_text_line_format() -> None:
    d = describe_formula(
        make_formula(name="wget", version="1.21", desc="Internet file retriever")
    )
    assert render_line(d) == "formula: wget (1.21) - Internet file retriever"


def test_cask_line_format() -> None:
    d = describe_cask(make_cask(token="foo", version="1.2", desc="Foo tool"))
    assert render_line(d) == "cask: foo (1.2) - Foo tool"


def test_lines_one_per_item_in_order() -> None:
    items = [describe_formula(make_formula(name=f"f{n}")) for n in range(250)]
    lines = render_lines(items).split("\n")
    assert len(lines) == 250
    assert lines[0].startswith("formula: f0 ")
    assert lines[-1].startswith("formula: f249 ")


def test_lines_empty() -> None:
    assert render_lines([]) == ""


def test_json_empty_list() -> None:
    assert render_json([]) == "[]"
    assert json.loads(render_json([])) == []


def test_json_one_item_with_expected_keys() -> None:
    data = json.loads(render_json([describe_formula(make_formula())]))
    assert len(data) == 1
    assert set(data[0]) == BASE_KEYS


def test_json_many_items_with_deps() -> None:
    items = [
        describe_formula(make_formula(name="a"), include_deps=True),
        describe_cask(make_cask(token="b"), include_deps=True),
    ]
    data = json.loads(render_json(items))
    assert [d["type"] for d in data] == ["formula", "cask"]
    for d in data:
        assert set(d) == BASE_KEYS | {"deps", "dependents"}
        assert isinstance(d["deps"], list)
        assert isinstance(d["dependents"], list)


def test_json_is_pretty_printed() -> None:
    text = render_json([describe_cask(make_cask())])
    assert text.startswith("[\n  {\n")


def test_emit_text_to_stdout(capsys) -> None:
    emit([describe_cask(make_cask(token="foo", version="1.2", desc="[b]Foo[/b] :smile:"))], False)
    assert capsys.readouterr().out == "cask: foo (1.2) - [b]Foo[/b] :smile:\n"


def test_emit_text_writes_nothing_for_no_items(capsys) -> None:
    emit([], False)
    assert capsys.readouterr().out == ""


def test_emit_json_has_trailing_newline(capsys) -> None:
    emit([], True)
    assert capsys.readouterr().out == "[]\n"


def test_emit_keeps_control_characters_verbatim(capsys) -> None:
    emit([describe_cask(make_cask(desc="a\tb\rc\x0bd"))], False)
    assert capsys.readouterr().out == "cask: foo (1.2) - a\tb\rc\x0bd\n"
