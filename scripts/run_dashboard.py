from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

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
    generate_dashboard_use_case,
)
from packages.domain.errors import DashboardError



def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    cfg = load_config()
    parser = argparse.ArgumentParser(description='Build an HTML table dashboard from a PDF or text file')
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument('--pdf', type=Path, help='PDF file to extract the table from')
    source.add_argument('--text-file', type=Path, help='Already-extracted plain text file')
    parser.add_argument(
        '--name',
        default=None,
        help='Report name (defaults to the source file name without extension)',
    )
    parser.add_argument(
        '--reports-dir',
        type=Path,
        default=Path(cfg.reports_dir),
        help='Output directory for generated dashboards',
    )
    parser.add_argument(
        '--extraction-mode',
        default=cfg.pdf_extraction_mode,
        help='pypdf extraction mode: layout|plain',
    )
    parser.add_argument(
        '--trace-file',
        type=Path,
        default=Path(cfg.dashboard_trace_file),
        help='JSONL file that receives one record per run',
    )
    return parser.parse_args(argv)



def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    source: Path = args.pdf or args.text_file
    if not source.exists():
        print(f'ERROR: file not found: {source}')
        return 1

    input_data = GenerateDashboardInput(
        display_name=args.name or source.name,
        source_path=args.pdf,
        text=args.text_file.read_text(encoding='utf-8') if args.text_file else None,
    )

    try:
        result = generate_dashboard_use_case(
            input_data,
            pdf_parser=PypdfParserAdapter(extraction_mode=args.extraction_mode),
            table_extractor=WhitespaceTableExtractorAdapter(),
            report_renderer=HtmlReportRendererAdapter(),
            report_store=FilesystemReportStoreAdapter(args.reports_dir),
            trace_logger=DashboardTraceLogger(args.trace_file),
        )
    except (DashboardError, PyPdfError) as exc:
        print(f'ERROR: {exc}')
        return 1

    print(json.dumps({
        'report_name': result.report_name,
        'report_path': result.report_path,
        'column_count': result.column_count,
        'row_count': result.row_count,
        'dropped_row_count': result.dropped_row_count,
    }, indent=2))
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
