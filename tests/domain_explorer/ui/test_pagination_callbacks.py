from __future__ import annotations

from domain_explorer.core.pagination import PaginationState
from domain_explorer.ui.callbacks.callbacks_pagination import next_pagination_state
from domain_explorer.ui.ids import IDs


def test_filter_or_corpus_change_resets_page():
    st = PaginationState(current_page=5, items_per_page=10)

    assert next_pagination_state(IDs.Store.FILTER_STATE, st, 100, 10).current_page == 1
    assert next_pagination_state(IDs.Store.CORPUS_VERSION, st, 100, 10).current_page == 1
    assert next_pagination_state(None, st, 100, 10).current_page == 1


def test_page_size_change_keeps_page():
    st = PaginationState(current_page=3, items_per_page=10)
    new = next_pagination_state(IDs.Control.PAGE_SIZE_SELECT, st, 100, 50)

    assert new == PaginationState(current_page=3, items_per_page=50)


def test_prev_and_next_buttons_from_both_pagers():
    st = PaginationState(current_page=2, items_per_page=10)

    assert next_pagination_state(IDs.Control.PAGE_NEXT_BTN, st, 35, 10).current_page == 3
    assert next_pagination_state(IDs.Control.PAGE_NEXT_BOTTOM_BTN, st, 35, 10).current_page == 3
    assert next_pagination_state(IDs.Control.PAGE_PREV_BTN, st, 35, 10).current_page == 1
    assert next_pagination_state(IDs.Control.PAGE_PREV_BOTTOM_BTN, st, 35, 10).current_page == 1


def test_next_stops_at_last_page():
    st = PaginationState(current_page=4, items_per_page=10)
    assert next_pagination_state(IDs.Control.PAGE_NEXT_BTN, st, 35, 10) == st
