from __future__ import annotations

import html

from packages.domain.models import CellValue, ExtractedTable, RenderedReport
from packages.ports.report_renderer_port import ReportRendererPort

_STYLE = (
    'body { font-family: Arial, sans-serif; margin: 24px; color: #222; }\n'
    'table { border-collapse: collapse; width: 100%; }\n'
    'th, td { border: 1px solid #ccc; padding: 8px; text-align: center; }\n'
    'th { background-color: #eee; }\n'
    'footer { margin-top: 12px; font-size: 0.85em; color: #666; }'
)


def _cell_text(value: CellValue) -> str:
    # str() of int/float is locale independent ("4.5", never "4,5").
    return html.escape(str(value), quote=True)


class HtmlReportRendererAdapter(ReportRendererPort):
    """Render an ExtractedTable as one self-contained HTML document.

    Styling is inline; the page references no external stylesheet or script.
    No timestamps are embedded, so equal tables render byte-identical output.
    """

    def render(self, table: ExtractedTable, title: str = 'Dashboard') -> RenderedReport:
        safe_title = html.escape(title, quote=True)
        header_row = '<tr>' + ''.join(f'<th>{_cell_text(h)}</th>' for h in table.headers) + '</tr>'
        body_rows = '\n'.join(
            '<tr>' + ''.join(f'<td>{_cell_text(cell)}</td>' for cell in row) + '</tr>'
            for row in table.rows
        )
        summary = f'{table.row_count} rows, {table.dropped_row_count} dropped'

        lines = [
            '<!DOCTYPE html>',
            '<html lang="en">',
            '<head>',
            '<meta charset="utf-8">',
            f'<title>{safe_title}</title>',
            f'<style>\n{_STYLE}\n</style>',
            '</head>',
            '<body>',
            f'<h1>{safe_title}</h1>',
            '<table>',
            f'<thead>\n{header_row}\n</thead>',
            f'<tbody>\n{body_rows}\n</tbody>' if body_rows else '<tbody></tbody>',
            '</table>',
            f'<footer>{summary}</footer>',
            '</body>',
            '</html>',
        ]
        return RenderedReport(title=title, html='\n'.join(lines) + '\n')
