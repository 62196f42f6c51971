from __future__ import annotations

from abc import ABC, abstractmethod

from packages.domain.models import RenderedReport, StoredReport


class ReportStorePort(ABC):
    @abstractmethod
    def store(self, report: RenderedReport, base_name: str) -> StoredReport:
        """Persist a report and return where it was written.

        Raises StorageError when the destination cannot be created or written.
        """
        raise NotImplementedError

    @abstractmethod
    def list_reports(self) -> list[StoredReport]:
        raise NotImplementedError
