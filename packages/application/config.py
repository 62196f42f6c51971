from __future__ import annotations

import os
from dataclasses import dataclass


def _env(key: str, default: str) -> str:
    return os.getenv(key, default)


def _env_alias(keys: list[str], default: str) -> str:
    for key in keys:
        value = os.getenv(key)
        if value is not None and value != '':
            return value
    return default


@dataclass(frozen=True)
class AppConfig:
    app_env: str
    reports_dir: str
    uploads_dir: str
    dashboard_trace_file: str
    pdf_extraction_mode: str
    max_upload_mb: int

    @property
    def max_upload_bytes(self) -> int:
        return self.max_upload_mb * 1024 * 1024


def load_config() -> AppConfig:
    return AppConfig(
        app_env=_env('APP_ENV', 'local'),
        reports_dir=_env_alias(['REPORTS_DIR', 'DASHBOARDS_DIR'], 'data/dashboards'),
        uploads_dir=_env('UPLOADS_DIR', 'data/uploads'),
        dashboard_trace_file=_env(
            'DASHBOARD_TRACE_FILE', '.context/reports/dashboard_traces.jsonl'
        ),
        pdf_extraction_mode=_env('PDF_EXTRACTION_MODE', 'layout').strip().lower(),
        max_upload_mb=int(_env('MAX_UPLOAD_MB', '25')),
    )
