from __future__ import annotations

import sys
import threading

from domain_explorer.core.corpus import SOURCE_UPLOAD, Corpus, normalize_lines
from domain_explorer.core.filter_state import FilterState


def test_normalize_lines_trims_lowercases_and_drops_empty():
    raw = ["  ABC.com.BR ", "", "   ", "xyz.net\r", "abc.com.br"]
    assert normalize_lines(raw) == ["abc.com.br", "xyz.net", "abc.com.br"]


def test_from_raw_lines():
    corpus = Corpus.from_raw_lines(["A.com.br", "", "b.net"], source=SOURCE_UPLOAD)

    assert list(corpus) == ["a.com.br", "b.net"]
    assert len(corpus) == 2
    assert corpus[1] == "b.net"
    assert corpus.source == SOURCE_UPLOAD


def test_every_corpus_gets_a_new_version():
    a = Corpus(["a.net"])
    b = Corpus(["a.net"])
    assert a.version != b.version
    assert Corpus(version=42).version == 42


def test_filtered_is_memoised_and_returns_copies():
    corpus = Corpus(["abc.com.br", "xyz.net"])
    state = FilterState(search_term="abc")

    first = corpus.filtered(state)
    first.append("junk")
    second = corpus.filtered(state)

    assert second == ["abc.com.br"]
    assert corpus.filtered(FilterState(search_term="abc")) == ["abc.com.br"]


def test_filter_cache_is_bounded():
    corpus = Corpus(["a1.net"])
    for i in range(Corpus.MAX_FILTER_CACHE + 10):
        corpus.filtered(FilterState(max_length=i + 1))

    assert len(corpus._filter_cache) == Corpus.MAX_FILTER_CACHE


def test_filtered_is_safe_under_concurrent_callbacks():
    corpus = Corpus([f"d{i}.com.br" for i in range(50)])
    for i in range(Corpus.MAX_FILTER_CACHE):
        corpus.filtered(FilterState(max_length=i + 1))

    errors = []

    def worker(n):
        try:
            for i in range(2000):
                corpus.filtered(FilterState(search_term=f"{n}-{i}"))
        except Exception as e:
            errors.append(repr(e))

    old_interval = sys.getswitchinterval()
    sys.setswitchinterval(1e-6)
    try:
        threads = [threading.Thread(target=worker, args=(n,)) for n in range(6)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
    finally:
        sys.setswitchinterval(old_interval)

    assert errors == []
    assert len(corpus._filter_cache) <= Corpus.MAX_FILTER_CACHE
