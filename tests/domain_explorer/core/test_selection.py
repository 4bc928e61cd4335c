from __future__ import annotations

from domain_explorer.core.filter_state import EXTENSION_OTHERS, FilterState
from domain_explorer.core.filtering import filter_domains
from domain_explorer.core.selection import SelectionSet


def test_toggle_adds_then_removes():
    sel = SelectionSet().toggle("abc.com.br")
    assert "abc.com.br" in sel
    assert len(sel) == 1

    sel = sel.toggle("abc.com.br")
    assert "abc.com.br" not in sel
    assert len(sel) == 0


def test_double_toggle_is_identity():
    sel = SelectionSet.from_list(["x.net"])
    assert sel.toggle("abc.com.br").toggle("abc.com.br") == sel


def test_toggle_returns_new_set():
    sel = SelectionSet()
    sel.toggle("abc.com.br")
    assert len(sel) == 0


def test_export_lists_each_domain_once():
    sel = SelectionSet().toggle("b.com.br").toggle("a.net").toggle("c.org")
    lines = sel.export().split("\n")

    assert sorted(lines) == ["a.net", "b.com.br", "c.org"]
    assert len(lines) == len(set(lines))


def test_export_empty():
    assert SelectionSet().export() == ""


def test_clear_requires_confirmation():
    sel = SelectionSet.from_list(["a.net", "b.net"])

    assert sel.clear(confirmed=False) == sel
    assert len(sel.clear(confirmed=True)) == 0


def test_selection_survives_filter_changes():
    corpus = ["abc.com.br", "xyz.net"]
    sel = SelectionSet().toggle("abc.com.br")

    visible = filter_domains(corpus, FilterState(extension=EXTENSION_OTHERS))
    assert "abc.com.br" not in visible
    assert "abc.com.br" in sel.export().split("\n")


def test_from_list_is_tolerant():
    assert SelectionSet.from_list(None) == SelectionSet()
    assert SelectionSet.from_list("abc") == SelectionSet()
    assert SelectionSet.from_list(["a", "", "a"]).to_list() == ["a"]
