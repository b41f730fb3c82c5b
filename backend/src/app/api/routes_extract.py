"""Extract endpoint: relay one base64 PDF to Claude and return the decoded contact fields."""
import logging
from functools import lru_cache
from typing import Any

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from app.core.claude_client import ClaudeExtractionClient, build_claude_client
from app.core.exceptions import ExtractionError, PayloadTooLargeError
from app.core.models import ExtractResumeRequest, ExtractResumeResponse
from app.core.utils import strip_data_url_prefix

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["extract"])

NO_PDF_MESSAGE = "No PDF data provided"


@lru_cache
def get_extraction_client() -> ClaudeExtractionClient:
    return build_claude_client()


def _reply(status_code: int, body: ExtractResumeResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


@router.post("/extract-resume", response_model=ExtractResumeResponse)
async def extract_resume(
    body: Any = Body(None),
    client: ClaudeExtractionClient = Depends(get_extraction_client),
) -> JSONResponse:
    """Send the PDF to Claude. 400 when no payload, 413 when Claude reports it too large, 500 otherwise."""
    # Non-object bodies and non-string payloads count as missing data
    try:
        request = ExtractResumeRequest.model_validate(body) if isinstance(body, dict) else None
    except ValidationError:
        request = None
    pdf_base64 = strip_data_url_prefix(request.pdfBase64) if request and request.pdfBase64 else ""
    if not pdf_base64:
        return _reply(400, ExtractResumeResponse(success=False, error=NO_PDF_MESSAGE))

    try:
        contact_info = await client.extract_contact_info(pdf_base64)
    except PayloadTooLargeError as e:
        return _reply(413, ExtractResumeResponse(success=False, error=str(e)))
    except ExtractionError as e:
        logger.error("Extraction failed: %s", e)
        return _reply(500, ExtractResumeResponse(success=False, error=str(e)))
    except Exception as e:
        logger.exception("Error processing resume: %s", e)
        return _reply(500, ExtractResumeResponse(success=False, error=str(e) or "Unknown error occurred"))

    return _reply(200, ExtractResumeResponse(success=True, data=contact_info))
