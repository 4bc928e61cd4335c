from __future__ import annotations

import itertools
import threading
from dataclasses import dataclass, field, replace
from typing import List

from .corpus import Corpus
from .filter_state import FilterState
from .pagination import PaginationState, display_total_pages, paginate, total_pages
from .selection import SelectionSet
from .stats import DomainStats, aggregate


@dataclass(frozen=True)
class ExplorerSnapshot:
    """Everything derived from one ExplorerState: recomputed, never cached across states."""
    filtered: List[str]
    stats: DomainStats
    page: List[str]
    total_pages: int
    display_total_pages: int
    has_previous: bool
    has_next: bool


@dataclass(frozen=True)
class ExplorerState:
    """
    Application state owned by a single controller.

    Every transition replaces whole fields and returns a new ExplorerState:

    - replacing the corpus resets the page to 1
    - replacing the filters resets the page to 1 when they actually change
    - page size changes keep the current page
    - the selection is untouched by corpus, filter and page changes
    """
    corpus: Corpus = field(default_factory=Corpus)
    filters: FilterState = field(default_factory=FilterState)
    pagination: PaginationState = field(default_factory=PaginationState)
    selection: SelectionSet = field(default_factory=SelectionSet)

    def with_corpus(self, corpus: Corpus) -> ExplorerState:
        return replace(self, corpus=corpus, pagination=self.pagination.reset())

    def with_filters(self, filters: FilterState) -> ExplorerState:
        if filters == self.filters:
            return self
        return replace(self, filters=filters, pagination=self.pagination.reset())

    def with_items_per_page(self, items_per_page: int) -> ExplorerState:
        return replace(self, pagination=self.pagination.with_items_per_page(items_per_page))

    def with_page(self, page: int) -> ExplorerState:
        return replace(self, pagination=replace(self.pagination, current_page=page))

    def toggle(self, domain: str) -> ExplorerState:
        return replace(self, selection=self.selection.toggle(domain))

    def clear_selection(self, *, confirmed: bool) -> ExplorerState:
        return replace(self, selection=self.selection.clear(confirmed=confirmed))

    def snapshot(self) -> ExplorerSnapshot:
        filtered = self.corpus.filtered(self.filters)
        count, size = len(filtered), self.pagination.items_per_page
        return ExplorerSnapshot(
            filtered=filtered,
            stats=aggregate(filtered),
            page=paginate(filtered, self.pagination),
            total_pages=total_pages(count, size),
            display_total_pages=display_total_pages(count, size),
            has_previous=self.pagination.has_previous(),
            has_next=self.pagination.has_next(count),
        )


class RequestSequencer:
    """
    Monotonic request tokens for asynchronous collaborators.

    A caller takes a token with issue() before starting a slow request and
    checks is_current(token) when the answer comes back; a response whose
    token is older than the latest issued one is stale and must be dropped.
    """

    def __init__(self) -> None:
        self._counter = itertools.count(1)
        self._latest = 0
        self._lock = threading.Lock()

    def issue(self) -> int:
        # draw and publish together so latest never moves backwards
        with self._lock:
            token = next(self._counter)
            self._latest = max(self._latest, token)
        return token

    def is_current(self, token: int) -> bool:
        with self._lock:
            return token == self._latest

    @property
    def latest(self) -> int:
        return self._latest
