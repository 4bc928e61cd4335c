from __future__ import annotations

import json
import logging
import re
from typing import Any, List, Optional

from domain_explorer.core.exceptions import ExpansionError
from domain_explorer.core.state import RequestSequencer

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.5-flash"

PROMPT_TEMPLATE = (
    "Generate a list of 5 to 10 short, relevant keywords (substrings) that might appear "
    'in a domain name based on this user concept: "{query}".\n'
    "Include synonyms, related terms, and variations in Portuguese (and English if relevant).\n"
    "Keep them short (e.g., 'auto' instead of 'automobilismo').\n"
    "Return ONLY a JSON array of strings."
)

_NON_ALNUM = re.compile(r"[^a-z0-9]")


def sanitize_query(query: str) -> str:
    """Lower-case the query and keep only ASCII letters and digits."""
    return _NON_ALNUM.sub("", (query or "").lower())


def fallback_keywords(query: str) -> List[str]:
    sanitized = sanitize_query(query)
    return [sanitized] if sanitized else []


def normalize_keywords(items: Any, query: str) -> List[str]:
    """
    Clean a model response: strings only, trimmed, lower-cased, de-duplicated in
    order, with the sanitized query first when it is not already there.
    """
    if not isinstance(items, list):
        raise ExpansionError(f"Expected a JSON array, got {type(items).__name__}")

    keywords: List[str] = []
    for item in items:
        if not isinstance(item, str):
            continue
        keyword = item.strip().lower()
        if keyword and keyword not in keywords:
            keywords.append(keyword)

    sanitized = sanitize_query(query)
    if sanitized and sanitized not in keywords:
        keywords.insert(0, sanitized)
    return keywords


class SemanticExpander:
    """
    Turns a free-text concept ("loja de sapatos") into literal substrings that
    may appear in domain names ("sapato", "calcado", "tenis", ...), using Gemini.

    Never fails the search: without an API key, or when the model call or its
    response is unusable, it falls back to the sanitized query itself.
    """

    def __init__(self, api_key: Optional[str], model: str = DEFAULT_MODEL, client: Any = None):
        self._api_key = api_key
        self._model = model
        self._client = client

    @property
    def enabled(self) -> bool:
        return bool(self._api_key) or self._client is not None

    def expand(self, query: str) -> List[str]:
        if not query or not query.strip():
            return []

        if not self.enabled:
            logger.warning("API key is missing. Semantic search will fall back to direct matching.")
            return fallback_keywords(query)

        try:
            keywords = self._generate(query)
        except ExpansionError as e:
            logger.warning("Semantic expansion failed, using literal query", extra={"error": str(e)})
            return fallback_keywords(query)

        logger.info("Semantic expansion done", extra={"query": query, "n_keywords": len(keywords)})
        return keywords

    def _get_client(self) -> Any:
        if self._client is None:
            from google import genai

            self._client = genai.Client(api_key=self._api_key)
        return self._client

    def _generate(self, query: str) -> List[str]:
        from google.genai import types

        try:
            response = self._get_client().models.generate_content(
                model=self._model,
                contents=PROMPT_TEMPLATE.format(query=query),
                config=types.GenerateContentConfig(
                    response_mime_type="application/json",
                    response_schema=types.Schema(
                        type=types.Type.ARRAY,
                        items=types.Schema(type=types.Type.STRING),
                    ),
                ),
            )
        except Exception as e:
            # Any client/transport failure is recoverable here
            raise ExpansionError(f"Gemini request failed: {e}") from e

        text = getattr(response, "text", None)
        if not text:
            raise ExpansionError("Empty response from Gemini")

        try:
            items = json.loads(text)
        except json.JSONDecodeError as e:
            raise ExpansionError(f"Gemini returned invalid JSON: {e}") from e

        return normalize_keywords(items, query)


class SemanticSearchService:
    """
    Runs expansions for the UI and drops answers that arrive after a newer
    search was started.
    """

    def __init__(self, expander: SemanticExpander):
        self._expander = expander
        self._sequencer = RequestSequencer()

    def search(self, query: str) -> Optional[List[str]]:
        """
        Expand query into keywords.

        Returns None when a newer search was issued while this one was running;
        the caller must then leave the current keywords alone.
        """
        token = self._sequencer.issue()
        keywords = self._expander.expand(query)
        if not self._sequencer.is_current(token):
            logger.info("Discarding stale semantic expansion", extra={"query": query, "token": token})
            return None
        return keywords
