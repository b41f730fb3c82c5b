"""Decode contact information from free-form model replies."""
from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass

from .models import ContactInfo

logger = logging.getLogger(__name__)

# Greedy: first "{" to last "}" so nested objects stay intact
_JSON_OBJECT_RE = re.compile(r"\{[\s\S]*\}")


@dataclass(frozen=True)
class ParseOutcome:
    """Result of decoding a reply: data on success, reason on failure."""
    ok: bool
    data: ContactInfo | None = None
    reason: str | None = None


def parse_contact_info(text: str) -> ParseOutcome:
    """Locate the brace-delimited region in text and decode it as ContactInfo. Any JSON object is accepted; never raises."""
    match = _JSON_OBJECT_RE.search(text or "")
    if match is None:
        return ParseOutcome(ok=False, reason="No JSON found in response")
    try:
        payload = json.loads(match.group(0))
    except json.JSONDecodeError as e:
        logger.warning("Invalid JSON in model reply: %s", e)
        return ParseOutcome(ok=False, reason=f"Invalid JSON: {e.msg}")
    return ParseOutcome(ok=True, data=ContactInfo.model_validate(payload))
