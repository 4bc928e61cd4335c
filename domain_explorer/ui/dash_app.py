from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import dash_bootstrap_components as dbc
from dash import Dash

from .config import AppConfig
from domain_explorer.config.loader import load_global_config
from domain_explorer.services.corpus_service import CorpusSource, CorpusStore
from domain_explorer.services.export_service import SelectionExportService
from domain_explorer.services.semantic_service import SemanticExpander, SemanticSearchService
from domain_explorer.views.stats_view import StatsView
from domain_explorer.ui.layout.build_layout import build_layout
from domain_explorer.ui.callbacks.callbacks_corpus import register_corpus_callbacks
from domain_explorer.ui.callbacks.callbacks_filters import register_filter_callbacks
from domain_explorer.ui.callbacks.callbacks_pagination import register_pagination_callbacks
from domain_explorer.ui.callbacks.callbacks_render import register_render_callbacks
from domain_explorer.ui.callbacks.callbacks_selection import register_selection_callbacks
from domain_explorer.ui.callbacks.callbacks_semantic import register_semantic_callbacks

logger = logging.getLogger(__name__)


def create_dash_app(
        config_root: Path | str = Path("config"),
        corpus_source: Optional[CorpusSource] = None,
        expander: Optional[SemanticExpander] = None,
) -> Dash:
    config_root = Path(config_root)

    # 1) Load Config
    global_config = load_global_config(config_root)

    # 2) Initialize Service Layer
    corpus_store = CorpusStore(corpus_source or CorpusSource(global_config))
    if expander is None:
        expander = SemanticExpander(global_config.api_key, model=global_config.semantic_model)
    semantic_service = SemanticSearchService(expander)
    export_service = SelectionExportService(global_config.export_filename)

    # 3) App Context
    ctx = AppConfig(
        config_root=config_root,
        global_config=global_config,
        corpus_store=corpus_store,
        semantic_service=semantic_service,
        export_service=export_service,
        stats_view=StatsView(),
    )
    ctx.validate()

    # Resolve assets relative to the package so styles.css is found from any cwd
    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        assets_folder=str(assets_path),
    )
    app.title = global_config.ui_title

    app.layout = build_layout(ctx)

    # Register callbacks
    register_corpus_callbacks(app, ctx)
    register_filter_callbacks(app, ctx)
    register_semantic_callbacks(app, ctx)
    register_pagination_callbacks(app, ctx)
    register_render_callbacks(app, ctx)
    register_selection_callbacks(app, ctx)

    logger.info(
        "Dash app created",
        extra={"config_root": str(config_root), "semantic_search_enabled": expander.enabled},
    )
    return app
