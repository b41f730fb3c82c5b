"""Utility helpers for PDF intake."""
from __future__ import annotations

import base64
import uuid
from dataclasses import dataclass
from typing import Awaitable, Protocol

from .config import MAX_FILE_SIZE, MAX_FILE_SIZE_MB, PDF_MEDIA_TYPE


class AsyncReadable(Protocol):
    def read(self) -> Awaitable[bytes]: ...


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    error: str | None = None


def validate_pdf_file(content_type: str | None, size: int) -> ValidationResult:
    """Check a candidate file is a PDF within the size limit. Type is checked before size."""
    if content_type != PDF_MEDIA_TYPE:
        return ValidationResult(valid=False, error="File must be a PDF")
    if size > MAX_FILE_SIZE:
        return ValidationResult(
            valid=False,
            error=f"File size exceeds {MAX_FILE_SIZE_MB}MB limit ({size / (1024 * 1024):.2f}MB)",
        )
    return ValidationResult(valid=True)


def strip_data_url_prefix(encoded: str) -> str:
    """
    Remove a data-URL prefix if present.
    Example: "data:application/pdf;base64,JVBERi0=" => "JVBERi0="
    """
    if encoded.startswith("data:") and "," in encoded:
        return encoded.split(",", 1)[1]
    return encoded


async def file_to_base64(source: AsyncReadable) -> str:
    """Read the whole file once and return its base64 text. Read errors propagate."""
    content = await source.read()
    return base64.b64encode(content).decode("ascii")


def format_file_size(size: int) -> str:
    """Human-readable size for the file list."""
    if size < 1024:
        return f"{size} bytes"
    if size < 1024 * 1024:
        return f"{size / 1024:.2f} KB"
    return f"{size / (1024 * 1024):.2f} MB"


def generate_id() -> str:
    """Generate a new opaque row/item id."""
    return str(uuid.uuid4())
