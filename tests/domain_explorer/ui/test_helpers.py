from __future__ import annotations

from domain_explorer.config.model import GlobalConfig
from domain_explorer.core.filter_state import DIGITS_ALL, EXTENSION_ALL, EXTENSION_COM_BR, FilterState
from domain_explorer.ui.helpers import (
    build_filter_state,
    default_filter_state,
    domain_card,
    domain_grid,
    first_letter_options,
    keyword_badges,
    page_label,
)
from domain_explorer.ui.ids import IDs


def _build(cfg: GlobalConfig, **overrides) -> FilterState:
    values = dict(
        min_length=None,
        max_length=None,
        extension=None,
        has_numbers=None,
        starts_with=None,
        first_letter=None,
        search_term=None,
        semantic_keywords=None,
    )
    values.update(overrides)
    return build_filter_state(cfg, **values)


def test_empty_controls_give_default_state():
    cfg = GlobalConfig(default_min_length=3, default_max_length=20)
    assert _build(cfg) == default_filter_state(cfg)
    assert _build(cfg).min_length == 3


def test_text_controls_are_trimmed_and_lowercased():
    st = _build(
        GlobalConfig(),
        starts_with="  WEB ",
        first_letter="W",
        search_term=" Loja ",
        extension=EXTENSION_COM_BR,
        min_length="4",
        max_length=10,
        semantic_keywords=["loja", "shop"],
    )

    assert st.starts_with == "web"
    assert st.first_letter == "w"
    assert st.search_term == "loja"
    assert st.extension == EXTENSION_COM_BR
    assert st.has_numbers == DIGITS_ALL
    assert (st.min_length, st.max_length) == (4, 10)
    assert st.semantic_keywords == ("loja", "shop")


def test_default_state_uses_neutral_choices():
    st = default_filter_state(GlobalConfig())
    assert st.extension == EXTENSION_ALL
    assert st.text_terms == ()


def test_first_letter_options_cover_letters_and_digits():
    values = [o["value"] for o in first_letter_options()]
    assert values[0] == ""
    assert "a" in values and "z" in values and "0" in values
    assert len(values) == 1 + 26 + 10


def test_domain_card_toggle_and_link():
    card = domain_card("abc.com.br", selected=True, availability_url="https://check/?fqdn=")

    assert "de-card-selected" in card.className
    toggle, link = card.children
    assert toggle.id == {"type": IDs.Pattern.DOMAIN_CARD, "index": "abc.com.br"}
    assert toggle.n_clicks == 0
    assert link.href == "https://check/?fqdn=abc.com.br"


def test_domain_grid_marks_selected_cards():
    grid = domain_grid(["a.net", "b.net"], ["b.net"], "u")
    assert [c.className for c in grid] == ["de-card", "de-card de-card-selected"]


def test_keyword_badges_and_page_label():
    assert keyword_badges([]) == []
    assert len(keyword_badges(["a", "b"])) == 3
    assert page_label(2, 5) == "2 / 5"
