"""Claude client: send one base64 PDF with the extraction prompt, return decoded contact info."""
from __future__ import annotations

import logging

import anthropic

from .config import ANTHROPIC_API_KEY, ANTHROPIC_MAX_TOKENS, ANTHROPIC_MODEL, PDF_MEDIA_TYPE
from .exceptions import ExtractionError, ExtractionParseError, PayloadTooLargeError
from .models import ContactInfo
from .parsing import parse_contact_info

logger = logging.getLogger(__name__)

RESUME_EXTRACTION_PROMPT = """
Please analyze this resume PDF and extract the following contact information:
1. Full Name
2. Email Address
3. Phone Number
4. LinkedIn URL (if present)
5. Location/Address (if present)
6. Personal Website (if present)

Format your response as a JSON object with these fields:
{
  "fullName": "...",
  "email": "...",
  "phone": "...",
  "linkedin": "...",
  "location": "...",
  "website": "..."
}

Only include fields that you can find in the resume. If you can't find a particular field, omit it from the JSON.
"""

PAYLOAD_TOO_LARGE_MESSAGE = (
    "The PDF is too large to process. Please try a smaller PDF file (fewer pages or smaller file size)."
)
PARSE_FAILED_MESSAGE = "Failed to parse contact information from the resume"
NO_TEXT_MESSAGE = "No text response received from AI"


def _is_too_large(exc: anthropic.APIError) -> bool:
    if "prompt is too long" in str(exc):
        return True
    return isinstance(exc, anthropic.APIStatusError) and exc.status_code == 413


class ClaudeExtractionClient:
    """Thin wrapper over the Anthropic Messages API. One request per document, no retries."""

    def __init__(
        self,
        *,
        api_key: str,
        model: str = ANTHROPIC_MODEL,
        max_tokens: int = ANTHROPIC_MAX_TOKENS,
    ) -> None:
        # max_retries=0: a failed call is terminal for that file
        self._client = anthropic.AsyncAnthropic(api_key=api_key, max_retries=0)
        self._model = model
        self._max_tokens = max_tokens

    async def extract_contact_info(self, pdf_base64: str) -> ContactInfo:
        try:
            message = await self._client.messages.create(
                model=self._model,
                max_tokens=self._max_tokens,
                messages=[
                    {
                        "role": "user",
                        "content": [
                            {
                                "type": "document",
                                "source": {
                                    "type": "base64",
                                    "media_type": PDF_MEDIA_TYPE,
                                    "data": pdf_base64,
                                },
                            },
                            {"type": "text", "text": RESUME_EXTRACTION_PROMPT},
                        ],
                    }
                ],
            )
        except anthropic.APIError as exc:
            logger.exception("Claude API error: %s", exc)
            if _is_too_large(exc):
                raise PayloadTooLargeError(PAYLOAD_TOO_LARGE_MESSAGE) from exc
            raise ExtractionError(str(exc) or "Error communicating with Claude API") from exc

        response_text = ""
        if message.content:
            block = message.content[0]
            if block.type == "text":
                response_text = block.text
        if not response_text:
            raise ExtractionError(NO_TEXT_MESSAGE)

        outcome = parse_contact_info(response_text)
        if not outcome.ok:
            logger.error("Error parsing Claude response: %s", outcome.reason)
            raise ExtractionParseError(PARSE_FAILED_MESSAGE)
        return outcome.data


def build_claude_client() -> ClaudeExtractionClient:
    """Build a client from environment configuration."""
    return ClaudeExtractionClient(api_key=ANTHROPIC_API_KEY)
