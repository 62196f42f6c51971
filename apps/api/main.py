from __future__ import annotations

import re
from datetime import UTC, datetime
from pathlib import Path

from fastapi import FastAPI, File, Form, HTTPException, UploadFile
from fastapi.responses import FileResponse
from pydantic import BaseModel
from pypdf.errors import PyPdfError

from packages.adapters.pdf.pypdf_parser_adapter import PypdfParserAdapter
from packages.adapters.reports.dashboard_trace_logger import DashboardTraceLogger
from packages.adapters.reports.html_report_renderer_adapter import HtmlReportRendererAdapter
from packages.adapters.storage.filesystem_report_store_adapter import FilesystemReportStoreAdapter
from packages.adapters.tables.whitespace_table_extractor_adapter import (
    WhitespaceTableExtractorAdapter,
)
from packages.application.config import load_config
from packages.application.use_cases.generate_dashboard import (
    GenerateDashboardInput,
    GenerateDashboardOutput,
    generate_dashboard_use_case,
)
from packages.domain.errors import NoTabularDataError, StorageError
from packages.domain.policies import is_safe_report_name, report_base_name


_BOOT_CONFIG = load_config()
REPORTS_DIR = Path(_BOOT_CONFIG.reports_dir)
UPLOADS_DIR = Path(_BOOT_CONFIG.uploads_dir)

app = FastAPI(title='PDF Table Dashboard API', version='1.0.0')


class TextDashboardRequest(BaseModel):
    name: str
    text: str


def _slugify(value: str) -> str:
    slug = re.sub(r'[^a-zA-Z0-9_-]+', '_', value.strip().lower())
    slug = slug.strip('_')
    return slug or 'uploaded_document'


def _build_pdf_parser(cfg) -> PypdfParserAdapter:
    return PypdfParserAdapter(extraction_mode=cfg.pdf_extraction_mode)


def _serialize_output(output: GenerateDashboardOutput) -> dict[str, object]:
    return {
        'dashboard_url': f'/dashboards/{output.report_name}',
        'report_name': output.report_name,
        'report_path': output.report_path,
        'column_count': output.column_count,
        'row_count': output.row_count,
        'dropped_row_count': output.dropped_row_count,
    }


def _run_pipeline(input_data: GenerateDashboardInput) -> dict[str, object]:
    cfg = load_config()
    try:
        output = generate_dashboard_use_case(
            input_data,
            pdf_parser=_build_pdf_parser(cfg),
            table_extractor=WhitespaceTableExtractorAdapter(),
            report_renderer=HtmlReportRendererAdapter(),
            report_store=FilesystemReportStoreAdapter(REPORTS_DIR),
            trace_logger=DashboardTraceLogger(Path(cfg.dashboard_trace_file)),
        )
    except NoTabularDataError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except StorageError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    except PyPdfError as exc:
        raise HTTPException(status_code=400, detail=f'Unreadable PDF: {exc}') from exc

    return _serialize_output(output)


@app.get('/health')
def health() -> dict[str, object]:
    cfg = load_config()
    return {
        'status': 'ok',
        'app_env': cfg.app_env,
        'reports_dir': str(REPORTS_DIR),
        'uploads_dir': str(UPLOADS_DIR),
        'pdf_extraction_mode': cfg.pdf_extraction_mode,
        'max_upload_mb': cfg.max_upload_mb,
    }


@app.post('/upload')
async def upload_document(file: UploadFile = File(...)) -> dict[str, object]:
    if not file.filename:
        raise HTTPException(status_code=400, detail='Uploaded file name is required')
    if not file.filename.lower().endswith('.pdf'):
        raise HTTPException(status_code=400, detail='Only PDF files are supported')

    cfg = load_config()
    payload = await file.read()
    if len(payload) > cfg.max_upload_bytes:
        raise HTTPException(
            status_code=413,
            detail=f'Upload exceeds {cfg.max_upload_mb} MB limit',
        )

    ts = datetime.now(UTC).strftime('%Y%m%d%H%M%S')
    saved_name = f'{_slugify(Path(file.filename).stem)}_{ts}.pdf'

    UPLOADS_DIR.mkdir(parents=True, exist_ok=True)
    target_path = UPLOADS_DIR / saved_name
    target_path.write_bytes(payload)

    return {
        'saved_name': saved_name,
        'filename': file.filename,
        'stored_path': str(target_path),
        'size_bytes': len(payload),
    }


@app.post('/dashboard')
def generate_dashboard(saved_name: str = Form(...)) -> dict[str, object]:
    if not is_safe_report_name(saved_name):
        raise HTTPException(status_code=400, detail=f'Invalid file name: {saved_name}')

    pdf_path = UPLOADS_DIR / saved_name
    if not pdf_path.is_file():
        raise HTTPException(status_code=404, detail=f'Uploaded file not found: {saved_name}')

    return _run_pipeline(GenerateDashboardInput(display_name=saved_name, source_path=pdf_path))


@app.post('/dashboard/text')
def generate_dashboard_from_text(request: TextDashboardRequest) -> dict[str, object]:
    if not request.name.strip():
        raise HTTPException(status_code=400, detail='Dashboard name is required')
    try:
        base_name = report_base_name(request.name)
    except StorageError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    if not is_safe_report_name(base_name):
        raise HTTPException(status_code=400, detail=f'Invalid dashboard name: {request.name}')
    return _run_pipeline(GenerateDashboardInput(display_name=request.name, text=request.text))


@app.get('/dashboards')
def list_dashboards() -> dict[str, object]:
    reports = FilesystemReportStoreAdapter(REPORTS_DIR).list_reports()
    rows = [
        {
            'name': report.name,
            'dashboard_url': f'/dashboards/{report.name}',
            'size_bytes': Path(report.path).stat().st_size,
        }
        for report in reports
    ]
    return {'dashboards': rows, 'total': len(rows)}


@app.get('/dashboards/{name}')
def get_dashboard(name: str):
    store = FilesystemReportStoreAdapter(REPORTS_DIR)
    try:
        report_path = store.path_for(name)
    except StorageError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    if not report_path.is_file():
        raise HTTPException(status_code=404, detail=f'Dashboard not found: {name}')
    return FileResponse(
        path=str(report_path),
        media_type='text/html',
        headers={
            'X-Content-Type-Options': 'nosniff',
            'Cache-Control': 'no-store',
        },
    )
