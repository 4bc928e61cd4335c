from __future__ import annotations

import base64
import binascii
import logging
from pathlib import PurePath
from typing import List, Optional

import requests

from domain_explorer.config.model import GlobalConfig
from domain_explorer.core.corpus import SOURCE_REMOTE, SOURCE_UPLOAD, Corpus
from domain_explorer.core.exceptions import FetchError, UploadError
from domain_explorer.core.state import RequestSequencer

logger = logging.getLogger(__name__)

ALLOWED_UPLOAD_SUFFIXES = (".txt",)


class CorpusSource:
    """
    Where raw domain lines come from.

    - load(): download the published list (through the proxy, if configured)
    - load_from_local_file(): the manual fallback, for a file the user uploads

    Both return raw lines; normalisation happens when the Corpus is built.
    """

    def __init__(self, config: GlobalConfig, session: Optional[requests.Session] = None):
        self._config = config
        self._session = session or requests.Session()

    def load(self) -> List[str]:
        url = self._config.download_url
        logger.info("Downloading domain list", extra={"url": url})
        try:
            response = self._session.get(url, timeout=self._config.request_timeout_s)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.warning("Domain list download failed", extra={"url": url, "error": str(e)})
            raise FetchError(f"Falha ao baixar lista de domínios: {e}") from e

        text = response.text
        if not text or not text.strip():
            raise FetchError("Falha ao baixar lista de domínios: resposta vazia")

        lines = text.splitlines()
        logger.info("Domain list downloaded", extra={"n_lines": len(lines)})
        return lines

    @staticmethod
    def load_from_local_file(data: bytes) -> List[str]:
        text = data.decode("utf-8-sig", errors="replace")
        return text.splitlines()


def decode_upload(contents: str, filename: str, max_bytes: int) -> bytes:
    """
    Decode a dcc.Upload payload ("data:<mime>;base64,<data>") into bytes.

    Raises UploadError for unsupported file names, corrupted payloads or
    files above max_bytes.
    """
    name = PurePath(filename or "").name
    if not name.lower().endswith(ALLOWED_UPLOAD_SUFFIXES):
        raise UploadError(f"Formato não suportado: '{name}'. Envie um arquivo .txt.")

    try:
        _content_type, content_string = contents.split(",", 1)
        decoded = base64.b64decode(content_string, validate=True)
    except (AttributeError, ValueError, binascii.Error) as e:
        logger.error("Corrupted upload data for %s: %s", name, e)
        raise UploadError(f"O arquivo '{name}' parece estar corrompido.") from e

    if len(decoded) > max_bytes:
        raise UploadError(f"O arquivo '{name}' excede o limite de {max_bytes // 1_000_000}MB.")

    return decoded


class CorpusStore:
    """
    Server-side holder of the current Corpus.

    The corpus is replaced wholesale. Loads take a token from the sequencer
    when they start; a load that finishes after a newer one was started is
    discarded instead of overwriting the newer corpus.
    """

    def __init__(self, source: CorpusSource, corpus: Optional[Corpus] = None):
        self._source = source
        self._corpus = corpus or Corpus()
        self._sequencer = RequestSequencer()

    @property
    def corpus(self) -> Corpus:
        return self._corpus

    @property
    def version(self) -> int:
        return self._corpus.version

    def begin_load(self) -> int:
        return self._sequencer.issue()

    def replace(self, corpus: Corpus, token: Optional[int] = None) -> bool:
        """Install corpus unless token belongs to a superseded load. Returns True if installed."""
        if token is not None and not self._sequencer.is_current(token):
            logger.info(
                "Discarding stale corpus load",
                extra={"token": token, "latest": self._sequencer.latest, "n_domains": len(corpus)},
            )
            return False
        self._corpus = corpus
        logger.info(
            "Corpus replaced",
            extra={"source": corpus.source, "version": corpus.version, "n_domains": len(corpus)},
        )
        return True

    def load_remote(self) -> bool:
        """
        Download and install the remote list.

        FetchError propagates only while this is still the latest load; a
        failure after a newer load started returns False like any stale load.
        """
        token = self.begin_load()
        try:
            raw_lines = self._source.load()
        except FetchError as e:
            if not self._sequencer.is_current(token):
                logger.info(
                    "Ignoring failed download superseded by a newer load",
                    extra={"token": token, "latest": self._sequencer.latest, "error": str(e)},
                )
                return False
            raise
        return self.replace(Corpus.from_raw_lines(raw_lines, source=SOURCE_REMOTE), token)

    def load_upload(self, data: bytes) -> bool:
        token = self.begin_load()
        raw_lines = self._source.load_from_local_file(data)
        return self.replace(Corpus.from_raw_lines(raw_lines, source=SOURCE_UPLOAD), token)
