from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import Input, Output, State

from domain_explorer.core.exceptions import FetchError, UploadError
from domain_explorer.services.corpus_service import decode_upload
from domain_explorer.ui.ids import IDs

if TYPE_CHECKING:
    from domain_explorer.ui.config import AppConfig

logger = logging.getLogger(__name__)

HIDDEN = {"display": "none"}
SHOWN: dict = {}

FETCH_ERROR_MESSAGE = (
    "Não foi possível carregar a lista automaticamente. O Registro.br pode estar "
    "bloqueando o acesso ou o proxy está indisponível."
)


def register_corpus_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Remote download: on page load and on "retry"
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.CORPUS_VERSION, "data"),
        Output(IDs.Control.CORPUS_ERROR, "style"),
        Output(IDs.Control.CORPUS_ERROR_MESSAGE, "children"),
        Input(IDs.Control.CORPUS_RETRY_BTN, "n_clicks"),
    )
    def load_corpus(n_clicks):
        store = ctx.corpus_store

        # Page reload: reuse the corpus the server already holds
        if not n_clicks and len(store.corpus):
            return store.version, HIDDEN, ""

        try:
            installed = store.load_remote()
        except FetchError as e:
            logger.warning("Corpus download failed", extra={"error": str(e)})
            return store.version, SHOWN, FETCH_ERROR_MESSAGE

        if not installed:
            # An upload finished first; keep it
            raise dash.exceptions.PreventUpdate

        return store.version, HIDDEN, ""

    # ---------------------------------------------------------
    # Manual .txt upload (fallback when the download fails)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.CORPUS_VERSION, "data", allow_duplicate=True),
        Output(IDs.Control.CORPUS_ERROR, "style", allow_duplicate=True),
        Output(IDs.Control.CORPUS_UPLOAD_STATUS, "children"),
        Input(IDs.Control.CORPUS_UPLOAD, "contents"),
        State(IDs.Control.CORPUS_UPLOAD, "filename"),
        prevent_initial_call=True,
    )
    def upload_corpus(contents, filename):
        if not contents or not filename:
            raise dash.exceptions.PreventUpdate

        try:
            data = decode_upload(contents, filename, ctx.global_config.max_upload_bytes)
        except UploadError as e:
            return dash.no_update, dash.no_update, str(e)

        store = ctx.corpus_store
        if not store.load_upload(data):
            raise dash.exceptions.PreventUpdate

        if not len(store.corpus):
            return store.version, dash.no_update, f"O arquivo '{filename}' não contém domínios."

        logger.info("Corpus uploaded", extra={"filename": filename, "n_domains": len(store.corpus)})
        return store.version, HIDDEN, f"{len(store.corpus):,} domínios carregados de '{filename}'."

    # ---------------------------------------------------------
    # Navbar corpus size
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.NAVBAR_CORPUS_BADGE, "children"),
        Input(IDs.Store.CORPUS_VERSION, "data"),
    )
    def update_corpus_badge(_version):
        return f"{len(ctx.corpus_store.corpus):,} domínios"
