"""Pydantic models for API and domain."""
from __future__ import annotations

import json
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

CONTACT_FIELDS = ("fullName", "email", "phone", "linkedin", "location", "website")


class ContactInfo(BaseModel):
    """Contact fields extracted from a resume. Loosely typed: the model may omit any field or add extras."""
    model_config = ConfigDict(extra="allow")

    fullName: str | None = None
    email: str | None = None
    phone: str | None = None
    linkedin: str | None = None
    location: str | None = None
    website: str | None = None

    @field_validator(*CONTACT_FIELDS, mode="before")
    @classmethod
    def _as_text(cls, value: Any) -> str | None:
        """Flatten whatever JSON the model returned into display text."""
        if value is None or isinstance(value, str):
            return value
        if isinstance(value, list):
            return ", ".join(v if isinstance(v, str) else json.dumps(v) for v in value)
        if isinstance(value, dict):
            return json.dumps(value)
        if isinstance(value, bool):
            return str(value).lower()
        return str(value)


class ExtractResumeRequest(BaseModel):
    """Body for POST /api/extract-resume. pdfBase64 is optional here so a missing payload maps to 400, not 422."""
    pdfBase64: str | None = Field(default=None, description="Base64-encoded PDF; a data-URL prefix is stripped")


class ExtractResumeResponse(BaseModel):
    """Response envelope for POST /api/extract-resume."""
    success: bool
    data: ContactInfo | None = None
    error: str | None = None


class ExtractionResult(BaseModel):
    """One row of the result table. Immutable once created."""
    model_config = ConfigDict(frozen=True)

    id: str
    file_name: str
    data: ContactInfo
    timestamp: datetime
    pdf_data: str = Field(..., repr=False, description="Base64-encoded source PDF")
