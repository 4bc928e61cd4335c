from __future__ import annotations

import math
from dataclasses import dataclass, replace, asdict
from typing import Any, Dict, List, Sequence, TypeVar

DEFAULT_ITEMS_PER_PAGE = 100

T = TypeVar("T")


@dataclass(frozen=True)
class PaginationState:
    """
    Current page (1-based) and page size for the results grid.

    The page is not clamped here: navigation controls are disabled at the
    bounds and paginate() returns an empty slice for anything out of range.
    """
    current_page: int = 1
    items_per_page: int = DEFAULT_ITEMS_PER_PAGE

    def reset(self) -> PaginationState:
        return replace(self, current_page=1)

    def with_items_per_page(self, items_per_page: int) -> PaginationState:
        # page size changes keep the current page
        if items_per_page <= 0:
            return self
        return replace(self, items_per_page=items_per_page)

    def next_page(self, total_count: int) -> PaginationState:
        if not self.has_next(total_count):
            return self
        return replace(self, current_page=self.current_page + 1)

    def previous_page(self) -> PaginationState:
        if not self.has_previous():
            return self
        return replace(self, current_page=self.current_page - 1)

    def has_previous(self) -> bool:
        return self.current_page > 1

    def has_next(self, total_count: int) -> bool:
        return self.current_page < display_total_pages(total_count, self.items_per_page)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any] | None) -> PaginationState:
        data = data or {}
        try:
            page = int(data.get("current_page", 1))
        except (TypeError, ValueError):
            page = 1
        try:
            size = int(data.get("items_per_page", DEFAULT_ITEMS_PER_PAGE))
        except (TypeError, ValueError):
            size = DEFAULT_ITEMS_PER_PAGE
        return cls(
            current_page=max(page, 1),
            items_per_page=size if size > 0 else DEFAULT_ITEMS_PER_PAGE,
        )


def total_pages(count: int, items_per_page: int) -> int:
    if count <= 0 or items_per_page <= 0:
        return 0
    return math.ceil(count / items_per_page)


def display_total_pages(count: int, items_per_page: int) -> int:
    """Like total_pages() but never 0, so an empty result reads "1 / 1"."""
    return max(1, total_pages(count, items_per_page))


def paginate(filtered: Sequence[T], state: PaginationState) -> List[T]:
    page, size = state.current_page, state.items_per_page
    if page < 1 or size <= 0:
        return []
    start = (page - 1) * size
    return list(filtered[start:start + size])
