from __future__ import annotations

from domain_explorer.core.filter_state import (
    DEFAULT_MAX_LENGTH,
    DEFAULT_MIN_LENGTH,
    DIGITS_ALL,
    DIGITS_YES,
    EXTENSION_ALL,
    EXTENSION_OTHERS,
    FilterState,
)


def test_filter_state_to_from_dict_roundtrip():
    st = FilterState(
        min_length=4,
        max_length=12,
        extension=EXTENSION_OTHERS,
        has_numbers=DIGITS_YES,
        starts_with="web",
        first_letter="w",
        search_term="loja",
        semantic_keywords=("loja", "shop"),
    )

    raw = st.to_dict()
    assert raw["semantic_keywords"] == ["loja", "shop"]

    rebuilt = FilterState.from_dict(raw)
    assert rebuilt == st


def test_from_dict_none_gives_defaults():
    assert FilterState.from_dict(None) == FilterState()


def test_from_dict_is_tolerant_of_bad_values():
    st = FilterState.from_dict(
        {
            "min_length": "abc",
            "max_length": True,
            "extension": "org",
            "has_numbers": "maybe",
            "starts_with": None,
            "semantic_keywords": "loja",
        }
    )

    assert st.min_length == DEFAULT_MIN_LENGTH
    assert st.max_length == DEFAULT_MAX_LENGTH
    assert st.extension == EXTENSION_ALL
    assert st.has_numbers == DIGITS_ALL
    assert st.starts_with == ""
    assert st.semantic_keywords == ()


def test_from_dict_drops_empty_keywords():
    st = FilterState.from_dict({"semantic_keywords": ["loja", "", None, "shop"]})
    assert st.semantic_keywords == ("loja", "shop")


def test_text_terms_priority():
    assert FilterState().text_terms == ()
    assert FilterState(search_term="abc").text_terms == ("abc",)
    assert FilterState(search_term="abc", semantic_keywords=("x", "y")).text_terms == ("x", "y")


def test_equal_states_are_equal_and_hashable():
    a = FilterState(semantic_keywords=("a",))
    b = FilterState.from_dict(a.to_dict())
    assert a == b
    assert hash(a) == hash(b)
