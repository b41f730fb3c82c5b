"""HTTP client for the extract-resume relay, used by the UI's batch processor."""
from __future__ import annotations

import asyncio
import logging

import requests

from .exceptions import ExtractionError, PayloadTooLargeError
from .models import ContactInfo

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "Failed to extract information from the resume"


class BackendExtractionClient:
    """POST base64 PDFs to /api/extract-resume. The blocking request runs in a worker thread."""

    def __init__(self, backend_url: str, timeout: float | None = None) -> None:
        self._base_url = backend_url.rstrip("/")
        self._url = f"{self._base_url}/api/extract-resume"
        self._timeout = timeout

    def _post(self, pdf_base64: str) -> ContactInfo:
        try:
            r = requests.post(self._url, json={"pdfBase64": pdf_base64}, timeout=self._timeout)
        except requests.RequestException as e:
            raise ExtractionError(str(e)) from e
        try:
            result = r.json()
        except ValueError:
            result = {}
        if not isinstance(result, dict):
            result = {}
        if r.status_code >= 400 or not result.get("success"):
            error = result.get("error") or DEFAULT_ERROR_MESSAGE
            logger.warning("Extract request failed (%s): %s", r.status_code, error)
            if r.status_code == 413:
                raise PayloadTooLargeError(error)
            raise ExtractionError(error)
        return ContactInfo.model_validate(result.get("data") or {})

    async def extract_contact_info(self, pdf_base64: str) -> ContactInfo:
        return await asyncio.to_thread(self._post, pdf_base64)

    def is_reachable(self, timeout: float = 3) -> bool:
        try:
            return requests.get(f"{self._base_url}/health", timeout=timeout).status_code == 200
        except requests.RequestException:
            return False
