from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class ParsedPdfPage:
    page_number: int
    text: str


class PdfParserPort(ABC):
    @abstractmethod
    def parse(self, pdf_path: str) -> list[ParsedPdfPage]:
        """Return the text layer of every page, in page order.

        Extraction failures (missing, corrupted or encrypted files) are raised
        as-is; callers must not receive a partial document.
        """
        raise NotImplementedError
