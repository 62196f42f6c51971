from __future__ import annotations

import importlib.util
import json
from pathlib import Path

import pytest


SCRIPT_PATH = Path(__file__).resolve().parents[2] / 'scripts' / 'run_dashboard.py'


@pytest.fixture()
def script(monkeypatch, tmp_path: Path):
    monkeypatch.setenv('DASHBOARD_TRACE_FILE', str(tmp_path / 'traces.jsonl'))
    spec = importlib.util.spec_from_file_location('run_dashboard', SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module



def test_text_file_to_dashboard(script, tmp_path: Path, capsys) -> None:
    source = tmp_path / 'scores.txt'
    source.write_text('Name   Score\nAlice   90\nBob     85\n', encoding='utf-8')

    code = script.main(['--text-file', str(source), '--reports-dir', str(tmp_path / 'out')])
    assert code == 0

    summary = json.loads(capsys.readouterr().out)
    assert summary['report_name'] == 'scores'
    assert summary['row_count'] == 2
    assert Path(summary['report_path']) == tmp_path / 'out' / 'scores.html'
    assert (tmp_path / 'traces.jsonl').exists()



def test_no_table_reports_error(script, tmp_path: Path, capsys) -> None:
    source = tmp_path / 'prose.txt'
    source.write_text('Nothing tabular here.\n', encoding='utf-8')

    code = script.main(['--text-file', str(source), '--reports-dir', str(tmp_path / 'out'), '--name', 'x'])
    assert code == 1
    assert 'ERROR: No table-like data found' in capsys.readouterr().out
    assert not (tmp_path / 'out').exists()



def test_missing_source_file(script, tmp_path: Path, capsys) -> None:
    code = script.main(['--pdf', str(tmp_path / 'missing.pdf')])
    assert code == 1
    assert 'file not found' in capsys.readouterr().out
