"""Shared fixtures: sample PDF bytes and result factories."""
from datetime import datetime, timezone

import pytest

from app.core.models import ContactInfo, ExtractionResult

MINIMAL_PDF = b"%PDF-1.4\n1 0 obj<<>>endobj\ntrailer<<>>\n%%EOF\n"


@pytest.fixture
def pdf_bytes():
    return MINIMAL_PDF


@pytest.fixture
def make_result():
    counter = iter(range(1000))

    def _make(file_name="cv.pdf", timestamp=None, **fields):
        n = next(counter)
        return ExtractionResult(
            id=f"r{n}",
            file_name=file_name,
            data=ContactInfo(**fields),
            timestamp=timestamp or datetime(2024, 1, 1, 12, 0, n % 60, tzinfo=timezone.utc),
            pdf_data="JVBERi0xLjQ=",
        )

    return _make
