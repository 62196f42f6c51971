from __future__ import annotations

from abc import ABC, abstractmethod

from packages.domain.models import ExtractedTable, RenderedReport


class ReportRendererPort(ABC):
    @abstractmethod
    def render(self, table: ExtractedTable, title: str = 'Dashboard') -> RenderedReport:
        raise NotImplementedError
