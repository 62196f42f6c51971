from __future__ import annotations

import json
from pathlib import Path

from packages.adapters.reports.dashboard_trace_logger import DashboardTraceLogger



def test_trace_logger_appends_jsonl(tmp_path: Path) -> None:
    trace_file = tmp_path / 'nested' / 'dashboard_traces.jsonl'
    logger = DashboardTraceLogger(trace_file)

    logger.log({'status': 'ok', 'display_name': 'a.pdf'})
    logger.log({'status': 'no_table', 'display_name': 'b.pdf'})

    lines = trace_file.read_text(encoding='utf-8').splitlines()
    assert [json.loads(line)['status'] for line in lines] == ['ok', 'no_table']
