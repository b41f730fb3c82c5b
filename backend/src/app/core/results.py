"""In-memory result table: append, remove, clear, sort."""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Literal

from .export import EXPORT_HEADERS
from .models import CONTACT_FIELDS, ExtractionResult

SORT_FIELDS = ("fileName", *CONTACT_FIELDS, "timestamp")
# Column labels in SORT_FIELDS order
COLUMN_LABELS = dict(zip(SORT_FIELDS, EXPORT_HEADERS))
SortDirection = Literal["asc", "desc"]


@dataclass
class SortState:
    """Current sort column and direction. Clicking the same column flips direction; a new column starts ascending."""
    field: str = "timestamp"
    direction: SortDirection = "desc"

    def toggle(self, field: str) -> None:
        if field not in SORT_FIELDS:
            raise ValueError(f"Unknown sort field: {field}")
        if field == self.field:
            self.direction = "desc" if self.direction == "asc" else "asc"
        else:
            self.field = field
            self.direction = "asc"


def sort_key(result: ExtractionResult, field: str):
    if field == "fileName":
        return result.file_name
    if field == "timestamp":
        return result.timestamp.timestamp()
    value = getattr(result.data, field, None)
    return "" if value is None else str(value)


class ResultTable:
    """Successful extractions in insertion order."""

    def __init__(self) -> None:
        self._rows: list[ExtractionResult] = []

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self):
        return iter(list(self._rows))

    @property
    def rows(self) -> list[ExtractionResult]:
        return list(self._rows)

    def add(self, result: ExtractionResult) -> None:
        self._rows.append(result)

    def get(self, result_id: str) -> ExtractionResult | None:
        for row in self._rows:
            if row.id == result_id:
                return row
        return None

    def remove(self, result_id: str) -> bool:
        before = len(self._rows)
        self._rows = [r for r in self._rows if r.id != result_id]
        return len(self._rows) != before

    def clear(self) -> None:
        self._rows = []

    def sorted_rows(self, state: SortState | None = None) -> list[ExtractionResult]:
        """Sorted copy; the table itself keeps insertion order."""
        state = state or SortState()
        return sorted(
            self._rows,
            key=lambda r: sort_key(r, state.field),
            reverse=state.direction == "desc",
        )


def contact_info_json(result: ExtractionResult) -> str:
    """Row contact data as indented JSON, missing fields omitted."""
    return json.dumps(result.data.model_dump(exclude_none=True), indent=2)


def copyable_fields(result: ExtractionResult) -> list[tuple[str, str]]:
    """(label, value) for each non-empty contact field, in column order."""
    fields = []
    for field in CONTACT_FIELDS:
        value = getattr(result.data, field, None)
        if value:
            fields.append((COLUMN_LABELS[field], value))
    return fields
