from __future__ import annotations

from pathlib import Path

from packages.domain.errors import StorageError
from packages.domain.models import RenderedReport, StoredReport
from packages.domain.policies import REPORT_EXTENSION, is_safe_report_name
from packages.ports.report_store_port import ReportStorePort


class FilesystemReportStoreAdapter(ReportStorePort):
    def __init__(self, base_dir: Path) -> None:
        self._base_dir = base_dir

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    def path_for(self, base_name: str) -> Path:
        if not is_safe_report_name(base_name):
            raise StorageError(f'Invalid report name: {base_name!r}')
        return self._base_dir / f'{base_name}{REPORT_EXTENSION}'

    def store(self, report: RenderedReport, base_name: str) -> StoredReport:
        out_path = self.path_for(base_name)
        try:
            self._base_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageError(f'Cannot create report directory {self._base_dir}: {exc}') from exc

        # Plain overwrite: the last writer for a given name wins.
        try:
            out_path.write_text(report.html, encoding='utf-8')
        except OSError as exc:
            raise StorageError(f'Cannot write report {out_path}: {exc}') from exc

        return StoredReport(name=base_name, path=str(out_path))

    def list_reports(self) -> list[StoredReport]:
        if not self._base_dir.is_dir():
            return []
        return [
            StoredReport(name=path.stem, path=str(path))
            for path in sorted(self._base_dir.glob(f'*{REPORT_EXTENSION}'), key=lambda p: p.name)
            if path.is_file()
        ]
