from __future__ import annotations

import json

import pytest

from domain_explorer.core.exceptions import ExpansionError
from domain_explorer.services.semantic_service import (
    SemanticExpander,
    SemanticSearchService,
    fallback_keywords,
    normalize_keywords,
    sanitize_query,
)


class _FakeResponse:
    def __init__(self, text):
        self.text = text


class _FakeModels:
    def __init__(self, text=None, error=None):
        self.text = text
        self.error = error
        self.calls = []

    def generate_content(self, model, contents, config):
        self.calls.append({"model": model, "contents": contents, "config": config})
        if self.error is not None:
            raise self.error
        return _FakeResponse(self.text)


class _FakeClient:
    def __init__(self, text=None, error=None):
        self.models = _FakeModels(text=text, error=error)


def test_sanitize_query():
    assert sanitize_query("Loja de Calçados!") == "lojadecalados"
    assert sanitize_query("  startup-agro 2.0 ") == "startupagro20"
    assert sanitize_query("") == ""


def test_fallback_keywords():
    assert fallback_keywords("Pet Shop") == ["petshop"]
    assert fallback_keywords("!!!") == []


def test_normalize_keywords_cleans_and_prepends_query():
    items = [" Sapato ", "tenis", "sapato", 3, "", "Calcado"]
    assert normalize_keywords(items, "calçado") == ["calado", "sapato", "tenis", "calcado"]


def test_normalize_keywords_keeps_query_in_place_when_present():
    assert normalize_keywords(["shop", "loja"], "loja") == ["shop", "loja"]


def test_normalize_keywords_requires_a_list():
    with pytest.raises(ExpansionError):
        normalize_keywords({"keywords": ["a"]}, "a")


def test_expand_without_key_falls_back_to_literal_query():
    expander = SemanticExpander(api_key=None)

    assert not expander.enabled
    assert expander.expand("Loja de Sapatos") == ["lojadesapatos"]


def test_expand_blank_query_returns_nothing():
    client = _FakeClient(text="[]")
    expander = SemanticExpander(api_key=None, client=client)

    assert expander.expand("   ") == []
    assert client.models.calls == []


def test_expand_uses_model_response():
    client = _FakeClient(text=json.dumps(["sapato", "calcado", "tenis"]))
    expander = SemanticExpander(api_key="k", model="gemini-test", client=client)

    assert expander.expand("sapato") == ["sapato", "calcado", "tenis"]

    call = client.models.calls[0]
    assert call["model"] == "gemini-test"
    assert '"sapato"' in call["contents"]
    assert call["config"].response_mime_type == "application/json"


@pytest.mark.parametrize(
    "client",
    [
        _FakeClient(error=RuntimeError("quota exceeded")),
        _FakeClient(text=""),
        _FakeClient(text="not json"),
        _FakeClient(text=json.dumps({"a": 1})),
    ],
)
def test_expand_failures_fall_back(client):
    expander = SemanticExpander(api_key="k", client=client)
    assert expander.expand("Pet Shop") == ["petshop"]


class _InterleavingExpander:
    """Starts a second search while the first one is still "running"."""

    def __init__(self, service_ref):
        self.service_ref = service_ref
        self.depth = 0

    def expand(self, query):
        self.depth += 1
        if self.depth == 1:
            newer = self.service_ref[0].search("newer")
            assert newer == ["newer"]
        return [query]


def test_search_discards_stale_results():
    ref = []
    service = SemanticSearchService(_InterleavingExpander(ref))
    ref.append(service)

    assert service.search("older") is None


def test_search_returns_keywords():
    service = SemanticSearchService(SemanticExpander(api_key=None))
    assert service.search("Loja") == ["loja"]
