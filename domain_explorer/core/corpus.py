from __future__ import annotations

import itertools
import logging
import threading
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .filter_state import FilterState
from .filtering import filter_domains

logger = logging.getLogger(__name__)

SOURCE_EMPTY = "empty"
SOURCE_REMOTE = "remote"
SOURCE_UPLOAD = "upload"

_versions = itertools.count(1)


def normalize_lines(raw_lines: Iterable[str]) -> List[str]:
    """
    Turn raw lines from a corpus source into domains: trimmed, lower-cased,
    empty lines dropped. Order and duplicates are kept.
    """
    domains: List[str] = []
    for line in raw_lines:
        domain = line.strip().lower()
        if domain:
            domains.append(domain)
    return domains


class Corpus:
    """
    Immutable ordered list of normalized domains.

    A corpus is never edited in place: loading or uploading a list builds a new
    Corpus with a fresh version. Filter results are cached per FilterState for
    the lifetime of the corpus, so a replacement drops the cache with it.
    """

    MAX_FILTER_CACHE = 64

    def __init__(
        self,
        domains: Sequence[str] = (),
        source: str = SOURCE_EMPTY,
        version: Optional[int] = None,
    ) -> None:
        self._domains: Tuple[str, ...] = tuple(domains)
        self.source = source
        self.version = next(_versions) if version is None else version
        self._filter_cache: Dict[FilterState, List[str]] = {}
        # callbacks run on worker threads and share one Corpus
        self._cache_lock = threading.Lock()

    @classmethod
    def from_raw_lines(cls, raw_lines: Iterable[str], source: str) -> Corpus:
        return cls(normalize_lines(raw_lines), source=source)

    @property
    def domains(self) -> Tuple[str, ...]:
        return self._domains

    def __len__(self) -> int:
        return len(self._domains)

    def __iter__(self):
        return iter(self._domains)

    def __getitem__(self, item):
        return self._domains[item]

    def filtered(self, state: FilterState) -> List[str]:
        """
        filter_domains() over this corpus, memoised by FilterState.

        Returns a copy so callers cannot alias the cached list.
        """
        with self._cache_lock:
            cached = self._filter_cache.get(state)
        if cached is None:
            cached = filter_domains(self._domains, state)
            with self._cache_lock:
                if state not in self._filter_cache:
                    while len(self._filter_cache) >= self.MAX_FILTER_CACHE:
                        # Simple FIFO eviction
                        self._filter_cache.pop(next(iter(self._filter_cache)))
                    self._filter_cache[state] = cached
            logger.debug(
                "filter_cache_miss",
                extra={"corpus_version": self.version, "n_filtered": len(cached)},
            )
        return list(cached)

    def __repr__(self) -> str:
        return f"Corpus(n={len(self._domains)}, source={self.source!r}, version={self.version})"
