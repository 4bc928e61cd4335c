from __future__ import annotations

from dataclasses import replace

from domain_explorer.core.filter_state import (
    DIGITS_NO,
    DIGITS_YES,
    EXTENSION_COM_BR,
    EXTENSION_OTHERS,
    FilterState,
)
from domain_explorer.core.filtering import filter_domains


CORPUS = ["abc.com.br", "ab12.com.br", "xyz.net"]


def test_default_state_keeps_everything_in_order():
    assert filter_domains(CORPUS, FilterState()) == CORPUS


def test_length_extension_and_digit_steps_narrow_the_list():
    state = FilterState(min_length=3, max_length=12)
    assert filter_domains(CORPUS, state) == CORPUS

    state = replace(state, extension=EXTENSION_COM_BR)
    assert filter_domains(CORPUS, state) == ["abc.com.br", "ab12.com.br"]

    state = replace(state, has_numbers=DIGITS_YES)
    assert filter_domains(CORPUS, state) == ["ab12.com.br"]


def test_other_extensions_and_no_digits():
    assert filter_domains(CORPUS, FilterState(extension=EXTENSION_OTHERS)) == ["xyz.net"]
    assert filter_domains(CORPUS, FilterState(has_numbers=DIGITS_NO)) == ["abc.com.br", "xyz.net"]


def test_length_bounds_are_inclusive():
    corpus = ["ab", "abc", "abcd"]
    assert filter_domains(corpus, FilterState(min_length=3, max_length=3)) == ["abc"]
    assert filter_domains(corpus, FilterState(min_length=2, max_length=4)) == corpus


def test_inverted_bounds_match_nothing():
    assert filter_domains(CORPUS, FilterState(min_length=10, max_length=3)) == []


def test_empty_corpus():
    assert filter_domains([], FilterState(search_term="abc")) == []


def test_semantic_keywords_are_or_ed_and_override_search_term():
    corpus = ["minhaloja.com.br", "bigshop.net", "outro.com.br"]
    state = FilterState(semantic_keywords=("loja", "shop"), search_term="outro")

    assert filter_domains(corpus, state) == ["minhaloja.com.br", "bigshop.net"]


def test_search_term_used_without_keywords():
    corpus = ["minhaloja.com.br", "bigshop.net", "outro.com.br"]
    assert filter_domains(corpus, FilterState(search_term="outro")) == ["outro.com.br"]


def test_prefix_and_first_letter_are_both_applied():
    corpus = ["webloja.com.br", "aweb.com.br", "wagner.net"]

    assert filter_domains(corpus, FilterState(starts_with="web")) == ["webloja.com.br"]
    assert filter_domains(corpus, FilterState(first_letter="w")) == ["webloja.com.br", "wagner.net"]
    assert filter_domains(corpus, FilterState(starts_with="wa", first_letter="w")) == ["wagner.net"]
    # conflicting constraints give an empty result
    assert filter_domains(corpus, FilterState(starts_with="web", first_letter="a")) == []


def test_result_is_subsequence_of_corpus():
    corpus = ["zz1.com.br", "aa.net", "zz2.com.br", "bb.com.br"]
    result = filter_domains(corpus, FilterState(extension=EXTENSION_COM_BR))

    assert result == ["zz1.com.br", "zz2.com.br", "bb.com.br"]
    assert [d for d in corpus if d in result] == result


def test_filter_does_not_mutate_input():
    corpus = list(CORPUS)
    filter_domains(corpus, FilterState(extension=EXTENSION_COM_BR))
    assert corpus == CORPUS
