from __future__ import annotations

from dataclasses import dataclass, field


CellValue = int | float | str


@dataclass(frozen=True)
class ExtractedTable:
    """A single table inferred from a document's text layer.

    Every row holds exactly ``len(headers)`` cells; lines that did not fit are
    counted in ``dropped_row_count`` instead of being stored.
    """

    headers: list[str]
    rows: list[list[CellValue]] = field(default_factory=list)
    dropped_row_count: int = 0

    def __post_init__(self) -> None:
        if not self.headers:
            raise ValueError('headers must not be empty')
        width = len(self.headers)
        for idx, row in enumerate(self.rows):
            if len(row) != width:
                raise ValueError(f'row {idx} has {len(row)} cells, expected {width}')
        if self.dropped_row_count < 0:
            raise ValueError('dropped_row_count must be >= 0')

    @property
    def column_count(self) -> int:
        return len(self.headers)

    @property
    def row_count(self) -> int:
        return len(self.rows)


@dataclass(frozen=True)
class RenderedReport:
    title: str
    html: str


@dataclass(frozen=True)
class StoredReport:
    name: str
    path: str


@dataclass(frozen=True)
class DashboardRun:
    display_name: str
    status: str
    report_name: str | None = None
    report_path: str | None = None
    column_count: int = 0
    row_count: int = 0
    dropped_row_count: int = 0
    error: str | None = None
    duration_ms: float = 0.0
