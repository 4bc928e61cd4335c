from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from domain_explorer.config.model import GlobalConfig
from domain_explorer.services.corpus_service import CorpusStore
from domain_explorer.services.export_service import SelectionExportService
from domain_explorer.services.semantic_service import SemanticSearchService
from domain_explorer.views.stats_view import StatsView


@dataclass
class AppConfig:
    """
    Shared state for the Dash app: config, the server-side corpus and the
    services. Passed into layout + callback registration functions instead of
    using module-level globals.
    """
    config_root: Path
    global_config: GlobalConfig

    corpus_store: Optional[CorpusStore] = None
    semantic_service: Optional[SemanticSearchService] = None
    export_service: Optional[SelectionExportService] = None
    stats_view: Optional[StatsView] = None

    def validate(self) -> None:
        """Ensure all required services are attached before the app starts."""
        if self.corpus_store is None:
            raise RuntimeError("AppConfig.corpus_store must be initialized.")
        if self.semantic_service is None:
            raise RuntimeError("AppConfig.semantic_service must be initialized.")
        if self.export_service is None:
            raise RuntimeError("AppConfig.export_service must be initialized.")
        if self.stats_view is None:
            raise RuntimeError("AppConfig.stats_view must be initialized.")
