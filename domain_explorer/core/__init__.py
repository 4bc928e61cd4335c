"""
Core domain layer: corpus, filter state, filter engine, statistics,
pagination, selection and the application state controller
"""

from .corpus import Corpus, normalize_lines
from .filter_state import FilterState
from .filtering import filter_domains
from .pagination import PaginationState, paginate
from .selection import SelectionSet
from .state import ExplorerState, RequestSequencer
from .stats import DomainStats, aggregate

__all__ = [
    "Corpus",
    "normalize_lines",
    "FilterState",
    "filter_domains",
    "PaginationState",
    "paginate",
    "SelectionSet",
    "ExplorerState",
    "RequestSequencer",
    "DomainStats",
    "aggregate",
]
