from __future__ import annotations

import time
from contextlib import suppress
from dataclasses import asdict, dataclass
from datetime import UTC, datetime
from pathlib import Path

from packages.domain.errors import NoTabularDataError, StorageError
from packages.domain.models import DashboardRun
from packages.domain.policies import report_base_name
from packages.ports.dashboard_trace_port import DashboardTracePort
from packages.ports.pdf_parser_port import PdfParserPort
from packages.ports.report_renderer_port import ReportRendererPort
from packages.ports.report_store_port import ReportStorePort
from packages.ports.table_extractor_port import TableExtractorPort


@dataclass(frozen=True)
class GenerateDashboardInput:
    display_name: str
    source_path: Path | None = None
    text: str | None = None


@dataclass(frozen=True)
class GenerateDashboardOutput:
    report_name: str
    report_path: str
    column_count: int
    row_count: int
    dropped_row_count: int



def _document_text(
    input_data: GenerateDashboardInput,
    pdf_parser: PdfParserPort | None,
) -> str:
    if (input_data.source_path is None) == (input_data.text is None):
        raise ValueError('Exactly one of source_path or text is required')

    if input_data.text is not None:
        return input_data.text

    if pdf_parser is None:
        raise ValueError('pdf_parser is required when source_path is given')
    pages = pdf_parser.parse(str(input_data.source_path))
    return '\n'.join(page.text for page in pages)



def _status_for(exc: Exception) -> str:
    if isinstance(exc, NoTabularDataError):
        return 'no_table'
    if isinstance(exc, StorageError):
        return 'storage_error'
    return 'error'



def generate_dashboard_use_case(
    input_data: GenerateDashboardInput,
    *,
    pdf_parser: PdfParserPort | None,
    table_extractor: TableExtractorPort,
    report_renderer: ReportRendererPort,
    report_store: ReportStorePort,
    trace_logger: DashboardTracePort | None = None,
) -> GenerateDashboardOutput:
    """Extract one table from a document and persist it as an HTML dashboard.

    Nothing is written unless extraction and rendering both succeed. Errors
    from the PDF parser, the extractor and the store reach the caller
    unchanged; the trace logger only records them.
    """
    started = time.perf_counter()

    try:
        base_name = report_base_name(input_data.display_name)
        text = _document_text(input_data, pdf_parser)
        table = table_extractor.extract(text)
        report = report_renderer.render(table, title=f'{base_name} Dashboard')
        stored = report_store.store(report, base_name)
    except Exception as exc:
        run = DashboardRun(
            display_name=input_data.display_name,
            status=_status_for(exc),
            error=f'{type(exc).__name__}: {exc}',
            duration_ms=round((time.perf_counter() - started) * 1000.0, 3),
        )
        _log_run(trace_logger, run)
        raise

    run = DashboardRun(
        display_name=input_data.display_name,
        status='ok',
        report_name=stored.name,
        report_path=stored.path,
        column_count=table.column_count,
        row_count=table.row_count,
        dropped_row_count=table.dropped_row_count,
        duration_ms=round((time.perf_counter() - started) * 1000.0, 3),
    )
    _log_run(trace_logger, run)

    return GenerateDashboardOutput(
        report_name=stored.name,
        report_path=stored.path,
        column_count=table.column_count,
        row_count=table.row_count,
        dropped_row_count=table.dropped_row_count,
    )



def _log_run(trace_logger: DashboardTracePort | None, run: DashboardRun) -> None:
    if trace_logger is None:
        return
    payload = asdict(run)
    payload['timestamp'] = datetime.now(UTC).isoformat()
    # An unwritable trace file must not replace the run's own result or error.
    with suppress(OSError):
        trace_logger.log(payload)
