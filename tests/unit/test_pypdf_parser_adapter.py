from __future__ import annotations

from pathlib import Path

import pytest
from pypdf.errors import PdfReadError, PyPdfError

import packages.adapters.pdf.pypdf_parser_adapter as parser_module
from packages.adapters.pdf.pypdf_parser_adapter import PypdfParserAdapter


class FakePage:
    def __init__(self, layout_text: str, plain_text: str, layout_error: bool = False) -> None:
        self._layout_text = layout_text
        self._plain_text = plain_text
        self._layout_error = layout_error
        self.modes: list[str] = []

    def extract_text(self, extraction_mode: str = 'plain') -> str:
        self.modes.append(extraction_mode)
        if extraction_mode == 'layout':
            if self._layout_error:
                raise PdfReadError('layout failed')
            return self._layout_text
        return self._plain_text


class FakeReader:
    pages: list[FakePage] = []

    def __init__(self, path: str) -> None:
        self.path = path


@pytest.fixture()
def fake_reader(monkeypatch) -> type[FakeReader]:
    monkeypatch.setattr(parser_module, 'PdfReader', FakeReader)
    return FakeReader



def test_layout_mode_is_default(fake_reader: type[FakeReader]) -> None:
    page = FakePage('Name    Score', 'Name Score')
    fake_reader.pages = [page]

    pages = PypdfParserAdapter().parse('doc.pdf')
    assert pages[0].page_number == 1
    assert pages[0].text == 'Name    Score'
    assert page.modes == ['layout']



def test_layout_error_falls_back_to_plain(fake_reader: type[FakeReader]) -> None:
    fake_reader.pages = [FakePage('', 'plain text', layout_error=True), FakePage('p2', 'x')]

    pages = PypdfParserAdapter().parse('doc.pdf')
    assert [p.text for p in pages] == ['plain text', 'p2']
    assert [p.page_number for p in pages] == [1, 2]



def test_plain_mode(fake_reader: type[FakeReader]) -> None:
    page = FakePage('layout', 'plain')
    fake_reader.pages = [page]

    pages = PypdfParserAdapter(extraction_mode='plain').parse('doc.pdf')
    assert pages[0].text == 'plain'
    assert page.modes == ['plain']



def test_unknown_mode_rejected() -> None:
    with pytest.raises(ValueError):
        PypdfParserAdapter(extraction_mode='ocr')



def test_corrupted_file_error_propagates(tmp_path: Path) -> None:
    broken = tmp_path / 'broken.pdf'
    broken.write_bytes(b'this is not a pdf')

    with pytest.raises(PyPdfError):
        PypdfParserAdapter().parse(str(broken))



def test_missing_file_error_propagates(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        PypdfParserAdapter().parse(str(tmp_path / 'missing.pdf'))
