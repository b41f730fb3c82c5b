"""
Upload queue and sequential batch processor.

Items move queued -> processing -> completed | failed. The processor handles
one item at a time, so at most one extraction call is ever in flight. Status
changes are applied by item id, never by list position, so removing an item
while a batch runs cannot touch a different item.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Awaitable, Callable, Iterable

from .config import AVG_PROCESSING_TIME_PER_FILE, BATCH_WARNING_THRESHOLD
from .models import ContactInfo, ExtractionResult
from .results import ResultTable
from .utils import file_to_base64, generate_id, validate_pdf_file

logger = logging.getLogger(__name__)

TOO_LARGE_MARKER = "The PDF is too large to process"
TOO_LARGE_USER_MESSAGE = (
    "This PDF is too large for Claude to process. "
    "Please try a smaller PDF file (fewer pages or smaller file size)."
)

Extractor = Callable[[str], Awaitable[ContactInfo]]


class UploadStatus(str, Enum):
    QUEUED = "queued"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass
class UploadItem:
    """A user-selected file and its processing status."""
    name: str
    content: bytes = field(repr=False)
    content_type: str | None = "application/pdf"
    status: UploadStatus = UploadStatus.QUEUED
    error: str | None = None
    id: str = field(default_factory=generate_id)

    @property
    def size(self) -> int:
        return len(self.content)

    async def read(self) -> bytes:
        return self.content


@dataclass
class AddFilesOutcome:
    accepted: list[UploadItem]
    rejected: list[UploadItem]
    warning: str | None = None


@dataclass
class BatchSummary:
    completed: int = 0
    failed: int = 0


def estimated_minutes(file_count: int) -> int:
    """Minutes to process file_count files, rounded half up."""
    return math.floor(file_count * AVG_PROCESSING_TIME_PER_FILE / 60 + 0.5)


def batch_warning(file_count: int) -> str | None:
    """Warning text for large selections, or None at or below the threshold."""
    if file_count <= BATCH_WARNING_THRESHOLD:
        return None
    return (
        f"You've selected {file_count} files. "
        f"Processing may take approximately {estimated_minutes(file_count)} minutes."
    )


def friendly_error(message: str) -> str:
    """Rewrite provider errors the user can act on."""
    if TOO_LARGE_MARKER in message:
        return TOO_LARGE_USER_MESSAGE
    return message


class UploadQueue:
    """Ordered upload list keyed by item id. Version increases on every change."""

    def __init__(self) -> None:
        self._items: dict[str, UploadItem] = {}
        self.version = 0

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self):
        return iter(list(self._items.values()))

    def get(self, item_id: str) -> UploadItem | None:
        return self._items.get(item_id)

    def add_files(self, files: Iterable[UploadItem]) -> AddFilesOutcome:
        """Validate and enqueue files. Invalid ones are returned as failed and not queued."""
        accepted: list[UploadItem] = []
        rejected: list[UploadItem] = []
        for item in files:
            validation = validate_pdf_file(item.content_type, item.size)
            if not validation.valid:
                item.status = UploadStatus.FAILED
                item.error = validation.error
                rejected.append(item)
                logger.info("Rejected %s: %s", item.name, validation.error)
                continue
            item.status = UploadStatus.QUEUED
            item.error = None
            accepted.append(item)
        for item in accepted:
            self._items[item.id] = item
        if accepted:
            self.version += 1
        return AddFilesOutcome(accepted=accepted, rejected=rejected, warning=batch_warning(len(accepted)))

    def remove(self, item_id: str) -> bool:
        if self._items.pop(item_id, None) is None:
            return False
        self.version += 1
        return True

    def clear(self) -> None:
        self._items.clear()
        self.version += 1

    def set_status(self, item_id: str, status: UploadStatus, error: str | None = None) -> UploadItem | None:
        """Update one item by id. Returns None if the item is gone."""
        item = self._items.get(item_id)
        if item is None:
            return None
        item.status = status
        item.error = error
        self.version += 1
        return item

    def queued_ids(self) -> list[str]:
        return [i.id for i in self._items.values() if i.status == UploadStatus.QUEUED]

    def counts(self) -> dict[str, int]:
        counts = {s.value: 0 for s in UploadStatus}
        for item in self._items.values():
            counts[item.status.value] += 1
        return counts


class BatchProcessor:
    """Run the extractor over every queued item, one at a time, appending successes to the result table."""

    def __init__(
        self,
        queue: UploadQueue,
        results: ResultTable,
        extract: Extractor,
        on_change: Callable[[UploadItem], None] | None = None,
    ) -> None:
        self._queue = queue
        self._results = results
        self._extract = extract
        self._on_change = on_change
        self.last_error: str | None = None

    def _notify(self, item: UploadItem | None) -> None:
        if item is not None and self._on_change:
            self._on_change(item)

    async def process_item(self, item: UploadItem) -> ExtractionResult:
        """Encode one item and extract its contact info. Raises on any failure."""
        pdf_base64 = await file_to_base64(item)
        data = await self._extract(pdf_base64)
        return ExtractionResult(
            id=generate_id(),
            file_name=item.name,
            data=data,
            timestamp=datetime.now(timezone.utc),
            pdf_data=pdf_base64,
        )

    async def run(self) -> BatchSummary:
        """Process the items queued when the run starts. Items added later wait for the next run."""
        summary = BatchSummary()
        self.last_error = None
        for item_id in self._queue.queued_ids():
            item = self._queue.get(item_id)
            if item is None or item.status != UploadStatus.QUEUED:
                continue
            self._notify(self._queue.set_status(item_id, UploadStatus.PROCESSING))
            try:
                result = await self.process_item(item)
            except Exception as e:
                message = friendly_error(str(e) or "Unknown error")
                logger.warning("Failed to process %s: %s", item.name, message)
                self.last_error = str(e) or "An unknown error occurred"
                self._notify(self._queue.set_status(item_id, UploadStatus.FAILED, message))
                summary.failed += 1
                continue
            self._results.add(result)
            logger.info("Extracted contact info from %s", item.name)
            self._notify(self._queue.set_status(item_id, UploadStatus.COMPLETED))
            summary.completed += 1
        return summary
