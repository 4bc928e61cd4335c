from __future__ import annotations

import re
from typing import Callable, List, Sequence

from .filter_state import (
    DIGITS_NO,
    DIGITS_YES,
    EXTENSION_COM_BR,
    EXTENSION_OTHERS,
    FilterState,
)

COM_BR_SUFFIX = ".com.br"

_DIGIT_RE = re.compile(r"\d", re.ASCII)

Predicate = Callable[[str], bool]


def build_predicates(state: FilterState) -> List[Predicate]:
    """
    Build the predicate chain for a FilterState, in evaluation order:

    1. length bounds
    2. extension class (.com.br suffix or its negation)
    3. digit policy
    4. prefix (starts_with)
    5. first letter, independent of the prefix
    6. text match (semantic keywords OR-ed, else the search term)

    Steps whose control is at its neutral value are left out of the chain.
    """
    min_len, max_len = state.min_length, state.max_length
    predicates: List[Predicate] = [lambda d: min_len <= len(d) <= max_len]

    if state.extension == EXTENSION_COM_BR:
        predicates.append(lambda d: d.endswith(COM_BR_SUFFIX))
    elif state.extension == EXTENSION_OTHERS:
        predicates.append(lambda d: not d.endswith(COM_BR_SUFFIX))

    if state.has_numbers == DIGITS_YES:
        predicates.append(lambda d: _DIGIT_RE.search(d) is not None)
    elif state.has_numbers == DIGITS_NO:
        predicates.append(lambda d: _DIGIT_RE.search(d) is None)

    prefix = state.starts_with
    if prefix:
        predicates.append(lambda d: d.startswith(prefix))

    first_letter = state.first_letter
    if first_letter:
        predicates.append(lambda d: d.startswith(first_letter))

    terms = state.text_terms
    if terms:
        predicates.append(lambda d: any(term in d for term in terms))

    return predicates


def filter_domains(corpus: Sequence[str], state: FilterState) -> List[str]:
    """
    Apply the filter chain to the corpus.

    Pure and stable: the result is a subsequence of the corpus in its original
    order. Degenerate inputs (empty corpus, min_length > max_length) give an
    empty list rather than an error.
    """
    predicates = build_predicates(state)
    return [d for d in corpus if all(p(d) for p in predicates)]
