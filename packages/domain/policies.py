from __future__ import annotations

import re
from pathlib import PurePath

from packages.domain.errors import StorageError
from packages.domain.models import CellValue

# Plain signed ASCII integers and decimals only: no exponents, thousands separators,
# trailing dots or non-ASCII digits.
_NUMERIC_PATTERN = re.compile(r'[+-]?(?:[0-9]+(?:\.[0-9]+)?|\.[0-9]+)')

REPORT_EXTENSION = '.html'


def coerce_cell(token: str) -> CellValue:
    """Return ``token`` as int/float when it is a full numeric literal, else the trimmed text."""
    value = token.strip()
    if not value or not _NUMERIC_PATTERN.fullmatch(value):
        return value
    if '.' in value:
        return float(value)
    return int(value)



def report_base_name(display_name: str) -> str:
    """Source file name without directories or its final extension."""
    # PurePath only splits on the host separator; uploads may carry either kind.
    name = PurePath(display_name.replace('\\', '/')).name
    stem = PurePath(name).stem.strip()
    if not stem:
        raise StorageError(f'Cannot derive a report name from {display_name!r}')
    return stem



def is_safe_report_name(base_name: str) -> bool:
    """A report name must stay inside its output directory."""
    if not base_name or base_name in {'.', '..'}:
        return False
    return '/' not in base_name and '\\' not in base_name and '\x00' not in base_name
