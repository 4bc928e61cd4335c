from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional
from urllib.parse import quote

DEFAULT_SOURCE_URL = "https://registro.br/dominio/lista-processo-liberacao.txt"
DEFAULT_PROXY_URL = "https://api.allorigins.win/raw?url="
DEFAULT_AVAILABILITY_URL = "https://registro.br/busca-dominio/?fqdn="


@dataclass
class GlobalConfig:
    """
    Settings read from <config_root>/global.json, with environment overrides.
    """
    ui_title: str = "Domain Explorer"
    subtitle: str = "Domínios em processo de liberação"

    # Corpus source
    source_url: str = DEFAULT_SOURCE_URL
    proxy_url: str = DEFAULT_PROXY_URL
    request_timeout_s: float = 30.0
    max_upload_bytes: int = 50_000_000

    # Filters + pagination defaults
    default_min_length: int = 2
    default_max_length: int = 26
    items_per_page: int = 100
    page_size_options: List[int] = field(default_factory=lambda: [50, 100, 200, 500])

    # Semantic search
    semantic_model: str = "gemini-2.5-flash"
    api_key: Optional[str] = None

    # Selection export + result links
    export_filename: str = "meus-dominios-selecionados.txt"
    availability_url: str = DEFAULT_AVAILABILITY_URL

    @property
    def download_url(self) -> str:
        """The URL actually fetched: the source list wrapped by the proxy (if any)."""
        if not self.proxy_url:
            return self.source_url
        return f"{self.proxy_url}{quote(self.source_url, safe='')}"
