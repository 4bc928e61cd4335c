from __future__ import annotations

import string
from typing import Any, Iterable, List, Sequence

import dash_bootstrap_components as dbc
from dash import html

from domain_explorer.config.model import GlobalConfig
from domain_explorer.core.filter_state import (
    DIGITS_ALL,
    DIGITS_NO,
    DIGITS_YES,
    EXTENSION_ALL,
    EXTENSION_COM_BR,
    EXTENSION_OTHERS,
    FilterState,
)
from domain_explorer.ui.ids import domain_card_id

FIRST_LETTER_ALPHABET = string.ascii_lowercase + string.digits

EXTENSION_OPTIONS = [
    {"label": "Todas", "value": EXTENSION_ALL},
    {"label": ".com.br", "value": EXTENSION_COM_BR},
    {"label": "Outras", "value": EXTENSION_OTHERS},
]

DIGIT_OPTIONS = [
    {"label": "Todos", "value": DIGITS_ALL},
    {"label": "Com", "value": DIGITS_YES},
    {"label": "Sem", "value": DIGITS_NO},
]


def first_letter_options() -> List[dict]:
    options = [{"label": "Qualquer", "value": ""}]
    options.extend({"label": c, "value": c} for c in FIRST_LETTER_ALPHABET)
    return options


def default_filter_state(cfg: GlobalConfig) -> FilterState:
    return FilterState(
        min_length=cfg.default_min_length,
        max_length=cfg.default_max_length,
    )


def build_filter_state(
        cfg: GlobalConfig,
        min_length: Any,
        max_length: Any,
        extension: str | None,
        has_numbers: str | None,
        starts_with: str | None,
        first_letter: str | None,
        search_term: str | None,
        semantic_keywords: Sequence[str] | None,
) -> FilterState:
    """
    Build a FilterState from raw control values.

    Empty/invalid number inputs fall back to the configured defaults; text
    inputs are trimmed and lower-cased to match the normalised corpus.
    """
    return FilterState.from_dict(
        {
            "min_length": min_length if min_length not in (None, "") else cfg.default_min_length,
            "max_length": max_length if max_length not in (None, "") else cfg.default_max_length,
            "extension": extension or EXTENSION_ALL,
            "has_numbers": has_numbers or DIGITS_ALL,
            "starts_with": (starts_with or "").strip().lower(),
            "first_letter": (first_letter or "").strip().lower(),
            "search_term": (search_term or "").strip().lower(),
            "semantic_keywords": list(semantic_keywords or []),
        }
    )


def domain_card(domain: str, selected: bool, availability_url: str) -> html.Div:
    """A result card: the left part toggles selection, the icon opens the availability check."""
    return html.Div(
        [
            html.Div(
                [
                    html.Span("✓" if selected else "", className="de-check"),
                    html.Span(domain, className="de-domain-name"),
                ],
                id=domain_card_id(domain),
                n_clicks=0,
                className="de-card-toggle",
                title="Clique para selecionar",
            ),
            html.A(
                "↗",
                href=f"{availability_url}{domain}",
                target="_blank",
                rel="noreferrer",
                className="de-card-link",
                title="Verificar disponibilidade real no Registro.br",
            ),
        ],
        className="de-card de-card-selected" if selected else "de-card",
    )


def domain_grid(page: Iterable[str], selected: Iterable[str], availability_url: str) -> List[html.Div]:
    selected = set(selected)
    return [domain_card(d, d in selected, availability_url) for d in page]


def keyword_badges(keywords: Sequence[str]) -> List[Any]:
    if not keywords:
        return []
    children: List[Any] = [html.Span("Conceitos extraídos:", className="de-keywords-label me-2")]
    children.extend(
        dbc.Badge(k, pill=True, color="light", text_color="success", className="me-1 border")
        for k in keywords
    )
    return children


def page_label(current_page: int, display_total: int) -> str:
    return f"{current_page} / {display_total}"
