from __future__ import annotations

from packages.application.config import load_config



def test_load_config_defaults(monkeypatch) -> None:
    for key in (
        'APP_ENV',
        'REPORTS_DIR',
        'DASHBOARDS_DIR',
        'UPLOADS_DIR',
        'DASHBOARD_TRACE_FILE',
        'PDF_EXTRACTION_MODE',
        'MAX_UPLOAD_MB',
    ):
        monkeypatch.delenv(key, raising=False)

    cfg = load_config()
    assert cfg.app_env == 'local'
    assert cfg.reports_dir == 'data/dashboards'
    assert cfg.uploads_dir == 'data/uploads'
    assert cfg.dashboard_trace_file == '.context/reports/dashboard_traces.jsonl'
    assert cfg.pdf_extraction_mode == 'layout'
    assert cfg.max_upload_bytes == 25 * 1024 * 1024



def test_load_config_env_overrides(monkeypatch) -> None:
    monkeypatch.delenv('REPORTS_DIR', raising=False)
    monkeypatch.setenv('DASHBOARDS_DIR', '/srv/dashboards')
    monkeypatch.setenv('PDF_EXTRACTION_MODE', ' Plain ')
    monkeypatch.setenv('MAX_UPLOAD_MB', '5')

    cfg = load_config()
    assert cfg.reports_dir == '/srv/dashboards'
    assert cfg.pdf_extraction_mode == 'plain'
    assert cfg.max_upload_mb == 5

    monkeypatch.setenv('REPORTS_DIR', '/srv/reports')
    assert load_config().reports_dir == '/srv/reports'
