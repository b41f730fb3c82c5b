"""CSV and XLSX export of the result table."""
from __future__ import annotations

import io
from datetime import datetime
from typing import Iterable

import pandas as pd

from .config import XLSX_SHEET_NAME
from .models import CONTACT_FIELDS, ExtractionResult

EXPORT_HEADERS = ["File Name", "Full Name", "Email", "Phone", "LinkedIn", "Location", "Website", "Timestamp"]


def format_timestamp(ts: datetime) -> str:
    """Local time as "M/D/YYYY, h:MM:SS AM"."""
    local = ts.astimezone()
    hour = local.hour % 12 or 12
    meridiem = "AM" if local.hour < 12 else "PM"
    return f"{local.month}/{local.day}/{local.year}, {hour}:{local:%M:%S} {meridiem}"


def export_rows(results: Iterable[ExtractionResult]) -> list[list[str]]:
    """One row per result; missing contact fields become empty strings."""
    rows = []
    for r in results:
        fields = [getattr(r.data, name, None) or "" for name in CONTACT_FIELDS]
        rows.append([r.file_name, *fields, format_timestamp(r.timestamp)])
    return rows


def to_csv(results: Iterable[ExtractionResult]) -> str:
    """Comma-joined rows. Values are not quoted, so embedded commas shift columns."""
    lines = [",".join(EXPORT_HEADERS)]
    lines.extend(",".join(row) for row in export_rows(results))
    return "\n".join(lines)


def to_xlsx(results: Iterable[ExtractionResult]) -> bytes:
    """Single-sheet workbook with the same header and rows as the CSV."""
    df = pd.DataFrame(export_rows(results), columns=EXPORT_HEADERS)
    buffer = io.BytesIO()
    with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=XLSX_SHEET_NAME)
    return buffer.getvalue()
