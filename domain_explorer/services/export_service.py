from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from domain_explorer.core.selection import SelectionSet

logger = logging.getLogger(__name__)

DEFAULT_EXPORT_FILENAME = "meus-dominios-selecionados.txt"


@dataclass(frozen=True)
class SelectionExport:
    content: str
    filename: str


class SelectionExportService:
    """
    Packages the selection as a plain-text file for download.
    Stateless: the UI hands the result to dcc.send_string().
    """

    def __init__(self, filename: str = DEFAULT_EXPORT_FILENAME) -> None:
        self._filename = filename

    def build(self, selection: SelectionSet) -> Optional[SelectionExport]:
        if not len(selection):
            return None
        logger.info("Exporting selection", extra={"n_domains": len(selection)})
        return SelectionExport(content=selection.export(), filename=self._filename)
