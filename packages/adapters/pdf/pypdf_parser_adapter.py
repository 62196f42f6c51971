from __future__ import annotations

import warnings

from pypdf import PdfReader
from pypdf.errors import PdfReadWarning, PyPdfError

from packages.ports.pdf_parser_port import ParsedPdfPage, PdfParserPort


class PypdfParserAdapter(PdfParserPort):
    def __init__(self, extraction_mode: str = 'layout') -> None:
        normalized = extraction_mode.strip().lower()
        if normalized not in {'layout', 'plain'}:
            raise ValueError(f'Unsupported extraction mode: {extraction_mode}')
        self._extraction_mode = normalized

    def parse(self, pdf_path: str) -> list[ParsedPdfPage]:
        # Unreadable, encrypted or corrupted files raise from here unchanged.
        reader = PdfReader(pdf_path)
        pages: list[ParsedPdfPage] = []

        for idx, page in enumerate(reader.pages, start=1):
            pages.append(ParsedPdfPage(page_number=idx, text=self._page_text(page)))

        return pages

    def _page_text(self, page) -> str:
        if self._extraction_mode == 'plain':
            return page.extract_text() or ''

        # extraction_mode='layout' keeps the 2+ space gaps between columns that
        # the table heuristic splits on. A page the layout pass cannot handle
        # falls back to plain extraction.
        try:
            with warnings.catch_warnings():
                warnings.simplefilter('ignore', PdfReadWarning)
                return page.extract_text(extraction_mode='layout') or ''
        except PyPdfError:
            return page.extract_text() or ''
