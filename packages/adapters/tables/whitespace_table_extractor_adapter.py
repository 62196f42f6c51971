from __future__ import annotations

import re

from packages.domain.errors import NoTabularDataError
from packages.domain.models import CellValue, ExtractedTable
from packages.domain.policies import coerce_cell
from packages.ports.table_extractor_port import TableExtractorPort

# A tab, or a run of 2+ whitespace characters, marks a column gap.
_COLUMN_GAP_PATTERN = re.compile(r'\t|\s{2,}')
# Splitting tries the long run first so that a mixed gap like "\t  " is one separator.
_COLUMN_SPLIT_PATTERN = re.compile(r'\s{2,}|\t')


class WhitespaceTableExtractorAdapter(TableExtractorPort):
    """Heuristic table extractor for plain PDF text layers.

    PDF text extraction usually keeps multi-space gaps where the source
    rendered columns, so:

    - candidate lines are non-blank lines holding a tab or a 2+ space gap
    - the first candidate is the header row and fixes the column count
    - later candidates with a different column count are dropped (counted)
    - numeric cells are coerced to int/float, everything else stays text

    Single-spaced tables are missed on purpose; a false negative is cheaper
    than corrupting the numeric columns of a false positive.
    """

    def extract(self, text: str) -> ExtractedTable:
        candidates = [line for line in text.splitlines() if self._looks_tabular(line)]
        if len(candidates) < 2:
            raise NoTabularDataError('No table-like data found')

        split_lines = [self._split_row(line) for line in candidates]
        headers = split_lines[0]

        rows: list[list[CellValue]] = []
        dropped = 0
        for cells in split_lines[1:]:
            if len(cells) != len(headers):
                dropped += 1
                continue
            rows.append([coerce_cell(cell) for cell in cells])

        return ExtractedTable(headers=headers, rows=rows, dropped_row_count=dropped)

    # ------------------------------------------------------------------ helpers

    @staticmethod
    def _looks_tabular(line: str) -> bool:
        if not line.strip():
            return False
        return _COLUMN_GAP_PATTERN.search(line) is not None

    @staticmethod
    def _split_row(line: str) -> list[str]:
        return [cell.strip() for cell in _COLUMN_SPLIT_PATTERN.split(line.strip())]
