from __future__ import annotations

from abc import ABC, abstractmethod

from packages.domain.models import ExtractedTable


class TableExtractorPort(ABC):
    @abstractmethod
    def extract(self, text: str) -> ExtractedTable:
        """Infer one table from raw document text.

        Raises NoTabularDataError when the text holds too little table-shaped content.
        """
        raise NotImplementedError
